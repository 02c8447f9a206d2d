"""Data model of a Terraform module's items, with sorting and JSON, XML and YAML rendering."""

__version__ = "0.15.0a0"