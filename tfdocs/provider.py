"""Providers used by a Terraform module."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from tfdocs.position import Position
from tfdocs.types import String

__all__ = [
    "Provider",
    "providers_sorted_by_name",
    "providers_sorted_by_position",
]


@dataclass
class Provider:
    """A Terraform provider, with its alias and version constraint."""

    name: str
    alias: String = field(default_factory=lambda: String(""))
    version: String = field(default_factory=lambda: String(""))
    position: Position = field(default_factory=Position)

    def __post_init__(self) -> None:
        if not isinstance(self.alias, String):
            self.alias = String(self.alias)
        if not isinstance(self.version, String):
            self.version = String(self.version)

    def full_name(self) -> str:
        """The provider name, followed by its alias when there is one."""
        if self.alias:
            return f"{self.name}.{self.alias}"
        return self.name


def providers_sorted_by_name(providers: Iterable[Provider]) -> list[Provider]:
    """Providers ordered by name, then by alias."""
    return sorted(providers, key=lambda p: (p.name, str(p.alias)))


def providers_sorted_by_position(providers: Iterable[Provider]) -> list[Provider]:
    """Providers in the order they are declared."""
    return sorted(providers, key=lambda p: p.position)