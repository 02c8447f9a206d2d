"""Options that control how a Terraform module is loaded."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Optional

__all__ = ["SortBy", "Options", "new_options"]


@dataclass
class SortBy:
    """Sort criteria for the items of a module."""

    name: bool = False
    required: bool = False
    type: bool = False


def _is_empty(value: Any) -> bool:
    return value is None or value is False or value == ""


@dataclass
class Options:
    """Options to load a module from a path.

    Fields left at their empty value (``""``, ``False`` or ``None``) count
    as unset when this instance is used as an override.
    """

    path: str = ""
    show_header: bool = False
    header_from_file: str = ""
    show_footer: bool = False
    footer_from_file: str = ""
    use_lock_file: bool = False
    sort_by: Optional[SortBy] = None
    output_values: bool = False
    output_values_path: str = ""

    def merge(self, override: Optional[Options]) -> Options:
        """Fill fields that are empty here with the values of ``override``."""
        if override is None:
            raise ValueError("cannot use nil as override value")
        for f in fields(self):
            if f.name == "sort_by":
                self._merge_sort_by(override.sort_by)
                continue
            if _is_empty(getattr(self, f.name)):
                setattr(self, f.name, getattr(override, f.name))
        return self

    def merge_overwrite(self, override: Optional[Options]) -> Options:
        """Overwrite fields here with every non-empty value of ``override``."""
        if override is None:
            raise ValueError("cannot use nil as override value")
        for f in fields(self):
            value = getattr(override, f.name)
            if not _is_empty(value):
                setattr(self, f.name, value)
        return self

    def _merge_sort_by(self, other: Optional[SortBy]) -> None:
        if other is None:
            return
        if self.sort_by is None:
            self.sort_by = other
            return
        for f in fields(self.sort_by):
            if _is_empty(getattr(self.sort_by, f.name)):
                setattr(self.sort_by, f.name, getattr(other, f.name))


def new_options() -> Options:
    """Options with the default settings."""
    return Options(
        path="",
        show_header=True,
        header_from_file="main.tf",
        show_footer=False,
        footer_from_file="",
        use_lock_file=True,
        sort_by=SortBy(name=False, required=False, type=False),
        output_values=False,
        output_values_path="",
    )