"""Managed resources and data sources used by a Terraform module."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Iterable

from tfdocs.position import Position
from tfdocs.types import String

__all__ = ["Resource", "resources_sorted_by_type"]

_REGISTRY = "https://registry.terraform.io/providers"


@dataclass
class Resource:
    """A managed resource or data source created by the module."""

    type: str = ""
    name: str = ""
    provider_name: str = ""
    provider_source: str = ""
    mode: str = ""
    version: String = field(default_factory=lambda: String(""))
    position: Position = field(default_factory=Position)

    def __post_init__(self) -> None:
        if not isinstance(self.version, String):
            self.version = String(self.version)

    def spec(self) -> str:
        """Address of the resource: ``<provider>_<type>.<name>``."""
        return f"{self.provider_name}_{self.type}.{self.name}"

    def get_mode(self) -> str:
        """Normalised mode: ``resource``, ``data source`` or ``invalid``."""
        if self.mode == "managed":
            return "resource"
        if self.mode == "data":
            return "data source"
        return "invalid"

    def url(self) -> str:
        """Best guess at the registry documentation URL, or empty."""
        if self.mode == "managed":
            kind = "resources"
        elif self.mode == "data":
            kind = "data-sources"
        else:
            return ""
        if self.provider_source.count("/") > 1:
            return ""
        return f"{_REGISTRY}/{self.provider_source}/{self.version}/docs/{kind}/{self.type}"


def _compare(a: Resource, b: Resource) -> int:
    if a.mode != b.mode:
        # Modes sort in descending order: managed, data, then anything else.
        return -1 if a.mode > b.mode else 1
    spec_a, spec_b = a.spec(), b.spec()
    if spec_a != spec_b:
        return -1 if spec_a < spec_b else 1
    if a.name == b.name:
        return 0
    return -1 if a.name < b.name else 1


def resources_sorted_by_type(resources: Iterable[Resource]) -> list[Resource]:
    """Resources grouped by mode (managed first), then ordered by address."""
    return sorted(resources, key=cmp_to_key(_compare))