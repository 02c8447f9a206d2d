[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tfdocs"
version = "0.15.0a0"
description = "Data model of a Terraform module's inputs, outputs, module calls, providers, requirements and resources, with sorting and JSON, XML and YAML rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["terraform", "documentation", "infrastructure", "modules"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tfdocs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
