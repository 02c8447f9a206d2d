"""Terraform input variables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from tfdocs.position import Position
from tfdocs.types import Nil, String, Value, _dump_json, value_of

__all__ = [
    "Input",
    "inputs_sorted_by_name",
    "inputs_sorted_by_required",
    "inputs_sorted_by_position",
    "inputs_sorted_by_type",
]


@dataclass
class Input:
    """A Terraform input variable."""

    name: str
    type: String = field(default_factory=lambda: String(""))
    description: String = field(default_factory=lambda: String(""))
    default: Value = field(default_factory=Nil)
    required: bool = False
    position: Position = field(default_factory=Position)

    def __post_init__(self) -> None:
        if not isinstance(self.type, String):
            self.type = String(self.type)
        if not isinstance(self.description, String):
            self.description = String(self.description)
        if not isinstance(self.default, Value):
            self.default = value_of(self.default)

    def get_value(self) -> str:
        """The default as indented JSON; empty for a required input without one."""
        value = _dump_json(self.default, indent="  ", escape_html=False)
        if value == "null":
            return "" if self.required else "null"
        return value

    def has_default(self) -> bool:
        """Whether the variable has a default value set."""
        return self.default.has_default() or not self.required


def inputs_sorted_by_name(inputs: Iterable[Input]) -> list[Input]:
    """Inputs ordered by name."""
    return sorted(inputs, key=lambda i: i.name)


def inputs_sorted_by_required(inputs: Iterable[Input]) -> list[Input]:
    """Inputs without a default first, each part ordered by name."""
    return sorted(inputs, key=lambda i: (i.has_default(), i.name))


def inputs_sorted_by_position(inputs: Iterable[Input]) -> list[Input]:
    """Inputs in the order they are declared."""
    return sorted(inputs, key=lambda i: i.position)


def inputs_sorted_by_type(inputs: Iterable[Input]) -> list[Input]:
    """Inputs ordered by type, then by name."""
    return sorted(inputs, key=lambda i: (str(i.type), i.name))