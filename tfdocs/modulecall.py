"""Submodules called by a Terraform module."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from tfdocs.position import Position

__all__ = [
    "ModuleCall",
    "modulecalls_sorted_by_name",
    "modulecalls_sorted_by_source",
    "modulecalls_sorted_by_position",
]


@dataclass
class ModuleCall:
    """A submodule called by a Terraform module."""

    name: str
    source: str = ""
    version: str = ""
    position: Position = field(default_factory=Position)

    def full_name(self) -> str:
        """The source, followed by the version when there is one."""
        if self.version:
            return f"{self.source},{self.version}"
        return self.source


def modulecalls_sorted_by_name(calls: Iterable[ModuleCall]) -> list[ModuleCall]:
    """Module calls ordered by name."""
    return sorted(calls, key=lambda c: c.name)


def modulecalls_sorted_by_source(calls: Iterable[ModuleCall]) -> list[ModuleCall]:
    """Module calls ordered by source, then by name."""
    return sorted(calls, key=lambda c: (c.source, c.name))


def modulecalls_sorted_by_position(calls: Iterable[ModuleCall]) -> list[ModuleCall]:
    """Module calls in the order they are declared."""
    return sorted(calls, key=lambda c: c.position)