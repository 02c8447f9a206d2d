"""Terraform outputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from tfdocs.position import Position
from tfdocs.types import String, Value, _dump_json, _xml_element, _xml_escape, value_of

__all__ = [
    "Output",
    "OutputValue",
    "outputs_sorted_by_name",
    "outputs_sorted_by_position",
]


@dataclass
class Output:
    """A Terraform output, optionally with its current value."""

    name: str
    description: String = field(default_factory=lambda: String(""))
    value: Optional[Value] = None
    sensitive: bool = False
    position: Position = field(default_factory=Position)
    show_value: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.description, String):
            self.description = String(self.description)
        if self.value is not None and not isinstance(self.value, Value):
            self.value = value_of(self.value)

    def get_value(self) -> str:
        """The value as indented JSON, or empty when not shown or null."""
        if not self.show_value or self.value is None:
            return ""
        value = _dump_json(self.value, indent="  ", escape_html=True)
        return "" if value == "null" else value

    def has_default(self) -> bool:
        """Whether the output has a value set and values are shown."""
        if not self.show_value or self.value is None:
            return False
        return self.value.has_default()

    def to_json(self) -> str:
        """JSON object, with value and sensitivity only when values are shown."""
        fields = [
            ("name", _dump_json(self.name)),
            ("description", _dump_json(self.description)),
        ]
        if self.show_value:
            encoded = "null" if self.value is None else _dump_json(self.value)
            fields.append(("value", encoded))
            fields.append(("sensitive", "true" if self.sensitive else "false"))
        body = ",".join(f"{_dump_json(key)}:{encoded}" for key, encoded in fields)
        return "{" + body + "}\n"

    def to_xml(self, tag: str) -> str:
        """XML element, with value and sensitivity only when values are shown."""
        parts = [
            _xml_element("name", _xml_escape(self.name)),
            self.description.to_xml("description"),
        ]
        if self.show_value:
            if self.value is not None:
                parts.append(self.value.to_xml("value"))
            parts.append(_xml_element("sensitive", "true" if self.sensitive else "false"))
        return _xml_element(tag, "".join(parts))

    def to_yaml(self) -> dict[str, Any]:
        """Mapping for a YAML serializer, with value fields only when shown."""
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description.to_yaml(),
        }
        if self.show_value:
            data["value"] = None if self.value is None else self.value.to_yaml()
            data["sensitive"] = self.sensitive
        return data


@dataclass
class OutputValue:
    """One entry of ``terraform output -json``."""

    sensitive: bool = False
    type: Any = None
    value: Any = None


def outputs_sorted_by_name(outputs: Iterable[Output]) -> list[Output]:
    """Outputs ordered by name."""
    return sorted(outputs, key=lambda o: o.name)


def outputs_sorted_by_position(outputs: Iterable[Output]) -> list[Output]:
    """Outputs in the order they are declared."""
    return sorted(outputs, key=lambda o: o.position)