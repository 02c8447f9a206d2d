"""A Terraform module and the helpers used to assemble and order its items."""

from __future__ import annotations

import json
import subprocess
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from tfdocs.inputs import (
    Input,
    inputs_sorted_by_name,
    inputs_sorted_by_position,
    inputs_sorted_by_required,
    inputs_sorted_by_type,
)
from tfdocs.modulecall import (
    ModuleCall,
    modulecalls_sorted_by_name,
    modulecalls_sorted_by_position,
    modulecalls_sorted_by_source,
)
from tfdocs.options import Options, SortBy
from tfdocs.outputs import (
    Output,
    OutputValue,
    outputs_sorted_by_name,
    outputs_sorted_by_position,
)
from tfdocs.provider import (
    Provider,
    providers_sorted_by_name,
    providers_sorted_by_position,
)
from tfdocs.requirement import Requirement
from tfdocs.resource import Resource, resources_sorted_by_type

__all__ = [
    "Module",
    "get_file_format",
    "is_file_format_supported",
    "format_source",
    "resource_version",
    "load_output_values",
    "sort_items",
]

_SUPPORTED_FORMATS = (".adoc", ".md", ".tf", ".txt")
_REF_MARKER = "?ref="
_DIGITS = "0123456789"


@dataclass
class Module:
    """A Terraform module: header, footer and the items declared in it."""

    header: str = ""
    footer: str = ""
    inputs: list[Input] = field(default_factory=list)
    module_calls: list[ModuleCall] = field(default_factory=list)
    outputs: list[Output] = field(default_factory=list)
    providers: list[Provider] = field(default_factory=list)
    requirements: list[Requirement] = field(default_factory=list)
    resources: list[Resource] = field(default_factory=list)
    required_inputs: list[Input] = field(default_factory=list)
    optional_inputs: list[Input] = field(default_factory=list)

    def has_header(self) -> bool:
        """Whether the module has a header."""
        return bool(self.header)

    def has_footer(self) -> bool:
        """Whether the module has a footer."""
        return bool(self.footer)

    def has_inputs(self) -> bool:
        """Whether the module has inputs."""
        return bool(self.inputs)

    def has_module_calls(self) -> bool:
        """Whether the module calls other modules."""
        return bool(self.module_calls)

    def has_outputs(self) -> bool:
        """Whether the module has outputs."""
        return bool(self.outputs)

    def has_providers(self) -> bool:
        """Whether the module uses providers."""
        return bool(self.providers)

    def has_requirements(self) -> bool:
        """Whether the module declares requirements."""
        return bool(self.requirements)

    def has_resources(self) -> bool:
        """Whether the module has resources or data sources."""
        return bool(self.resources)


def get_file_format(filename: str) -> str:
    """The extension of ``filename`` including the dot, or empty."""
    last = filename.rfind(".")
    if last == -1:
        return ""
    return filename[last:]


def is_file_format_supported(filename: str, section: str) -> bool:
    """Check that ``filename`` can be read for ``section``; raise ValueError if not."""
    if not section:
        raise ValueError("section is missing")
    if not filename:
        raise ValueError(f"--{section}-from value is missing")
    if get_file_format(filename) in _SUPPORTED_FORMATS:
        return True
    raise ValueError(
        f"only .adoc, .md, .tf, and .txt formats are supported to read {section} from"
    )


def format_source(source: str, version: str) -> tuple[str, str]:
    """Split a ``?ref=`` suffix off a module source unless a version is given."""
    if version:
        return source, version
    pos = source.rfind(_REF_MARKER)
    if pos == -1:
        return source, ""
    start = pos + len(_REF_MARKER)
    if start >= len(source):
        return source, ""
    return source[:pos], source[start:]


def resource_version(constraints: Sequence[str]) -> str:
    """The exact version pinned by the last constraint, or ``latest``."""
    if not constraints:
        return "latest"
    parts = constraints[-1].split(" ")
    if len(parts) == 1:
        first = parts[0][:1]
        if first and first in _DIGITS:
            return parts[0]
        if first == "=":
            return parts[0][1:]
        return "latest"
    if len(parts) == 2 and parts[0] == "=":
        return parts[1]
    return "latest"


def _parse_output_entry(name: str, entry: Any) -> OutputValue:
    if entry is None:
        return OutputValue()
    if not isinstance(entry, dict):
        raise ValueError(f"invalid terraform output entry for {name!r}")
    sensitive = entry.get("sensitive", False)
    if sensitive is None:
        sensitive = False
    if not isinstance(sensitive, bool):
        raise ValueError(f"invalid 'sensitive' value for output {name!r}")
    return OutputValue(
        sensitive=sensitive,
        type=entry.get("type"),
        value=entry.get("value"),
    )


def load_output_values(options: Options) -> dict[str, OutputValue]:
    """Read output values from ``terraform output -json`` or from a saved file."""
    if not options.output_values_path:
        try:
            completed = subprocess.run(
                ["terraform", "output", "-json"],
                cwd=options.path or None,
                capture_output=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as err:
            raise RuntimeError(
                f"caught error while reading the terraform outputs: {err}"
            ) from err
        data = completed.stdout
    else:
        try:
            with open(options.output_values_path, "rb") as handle:
                data = handle.read()
        except OSError as err:
            raise RuntimeError(
                "caught error while reading the terraform outputs file at "
                f"{options.output_values_path}: {err}"
            ) from err

    parsed = json.loads(data)
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError("terraform outputs must be a JSON object")
    return {name: _parse_output_entry(name, entry) for name, entry in parsed.items()}


def sort_items(module: Module, sort_by: Optional[SortBy]) -> None:
    """Order the items of ``module`` in place according to ``sort_by``."""
    criteria = sort_by if sort_by is not None else SortBy()

    if criteria.type:
        order_inputs = inputs_sorted_by_type
    elif criteria.required:
        order_inputs = inputs_sorted_by_required
    elif criteria.name:
        order_inputs = inputs_sorted_by_name
    else:
        order_inputs = inputs_sorted_by_position
    module.inputs = order_inputs(module.inputs)
    module.required_inputs = order_inputs(module.required_inputs)
    module.optional_inputs = order_inputs(module.optional_inputs)

    any_criterion = criteria.name or criteria.required or criteria.type
    if any_criterion:
        module.outputs = outputs_sorted_by_name(module.outputs)
        module.providers = providers_sorted_by_name(module.providers)
    else:
        module.outputs = outputs_sorted_by_position(module.outputs)
        module.providers = providers_sorted_by_position(module.providers)

    module.resources = resources_sorted_by_type(module.resources)

    if criteria.name or criteria.required:
        module.module_calls = modulecalls_sorted_by_name(module.module_calls)
    elif criteria.type:
        module.module_calls = modulecalls_sorted_by_source(module.module_calls)
    else:
        module.module_calls = modulecalls_sorted_by_position(module.module_calls)