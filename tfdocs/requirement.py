"""Requirements of a Terraform module."""

from __future__ import annotations

from dataclasses import dataclass, field

from tfdocs.types import String

__all__ = ["Requirement"]


@dataclass
class Requirement:
    """A required Terraform core or provider version."""

    name: str
    version: String = field(default_factory=lambda: String(""))

    def __post_init__(self) -> None:
        if not isinstance(self.version, String):
            self.version = String(self.version)