"""Typed values for Terraform variable defaults and output values.

Each value knows whether it counts as a default, its length, its plain
Python form, and how it is written as JSON, XML and YAML.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

__all__ = [
    "Value",
    "Nil",
    "String",
    "Empty",
    "Number",
    "Bool",
    "List",
    "Map",
    "value_of",
    "type_of",
]


class Value(ABC):
    """A default value of an input or the value of an output."""

    __slots__ = ()

    @abstractmethod
    def has_default(self) -> bool:
        """Whether a value counts as set."""

    @abstractmethod
    def length(self) -> int:
        """Length of the underlying item (0 for scalars without one)."""

    @abstractmethod
    def raw(self) -> Any:
        """The plain Python value underneath."""

    @abstractmethod
    def to_xml(self, tag: str) -> str:
        """Render the value as an XML element named ``tag``."""

    def to_json(self) -> str:
        """Render the value as compact JSON without HTML escaping."""
        return _dump_json(self)

    def to_yaml(self) -> Any:
        """The value handed to a YAML serializer."""
        return self.raw()


@dataclass(frozen=True)
class Nil(Value):
    """No value; written as ``null`` and as an ``xsi:nil`` XML element."""

    def has_default(self) -> bool:
        return False

    def length(self) -> int:
        return 0

    def raw(self) -> Any:
        return None

    def to_json(self) -> str:
        return "null"

    def to_xml(self, tag: str) -> str:
        return _xml_nil(tag)

    def to_yaml(self) -> Any:
        return None


class String(str, Value):
    """A string; empty strings are written as ``null``."""

    def __repr__(self) -> str:
        return f"String({str.__repr__(self)})"

    def has_default(self) -> bool:
        return True

    def length(self) -> int:
        return len(self)

    def raw(self) -> Any:
        return str(self)

    def to_xml(self, tag: str) -> str:
        if not self:
            return _xml_nil(tag)
        return _xml_element(tag, _xml_escape(str(self)))

    def to_yaml(self) -> Any:
        if not self or str(self) == '""':
            return None
        return str(self)


class Empty(str, Value):
    """An explicitly empty string, always written as ``""``."""

    def __repr__(self) -> str:
        return f"Empty({str.__repr__(self)})"

    def has_default(self) -> bool:
        return True

    def length(self) -> int:
        return len(self)

    def raw(self) -> Any:
        return str(self)

    def to_json(self) -> str:
        return '""'

    def to_xml(self, tag: str) -> str:
        return _xml_element(tag, _xml_escape(str(self)))


class Number(float, Value):
    """A number, held as a float."""

    def __repr__(self) -> str:
        return f"Number({float.__repr__(self)})"

    def has_default(self) -> bool:
        return True

    def length(self) -> int:
        return 0

    def raw(self) -> Any:
        return float(self)

    def to_xml(self, tag: str) -> str:
        return _xml_element(tag, _format_g(float(self)))


@dataclass(frozen=True)
class Bool(Value):
    """A boolean."""

    value: bool

    def __bool__(self) -> bool:
        return self.value

    def has_default(self) -> bool:
        return True

    def length(self) -> int:
        return 0

    def raw(self) -> Any:
        return self.value

    def to_xml(self, tag: str) -> str:
        return _xml_element(tag, "true" if self.value else "false")


class List(list, Value):
    """A list of values; in XML each element becomes an ``<item>``."""

    def __repr__(self) -> str:
        return f"List({list.__repr__(self)})"

    def underlying(self) -> list:
        """A shallow copy of the elements as a plain list."""
        return list(self)

    def has_default(self) -> bool:
        return True

    def length(self) -> int:
        return len(self)

    def raw(self) -> Any:
        return self.underlying()

    def to_xml(self, tag: str) -> str:
        if not self:
            return _xml_element(tag, "")
        body = "".join(_xml_child("item", item) for item in self)
        return _xml_element(tag, body)


class Map(dict, Value):
    """A mapping of string keys to values; in XML keys become element names."""

    def __repr__(self) -> str:
        return f"Map({dict.__repr__(self)})"

    def underlying(self) -> dict:
        """A shallow copy of the entries as a plain dict."""
        return dict(self)

    def has_default(self) -> bool:
        return True

    def length(self) -> int:
        return len(self)

    def raw(self) -> Any:
        return self.underlying()

    def to_xml(self, tag: str) -> str:
        if not self:
            return _xml_element(tag, "")
        body = "".join(_xml_child(key, self[key]) for key in sorted(self))
        return _xml_element(tag, body)


def value_of(v: Any) -> Value:
    """Wrap a plain Python value in the matching :class:`Value` type."""
    if v is None:
        return Nil()
    if isinstance(v, Value) and not isinstance(v, (str, float, list, dict)):
        return v
    if isinstance(v, str):
        return Empty("") if v == "" else String(v)
    if isinstance(v, bool):
        return Bool(v)
    if isinstance(v, (int, float)):
        return Number(float(v))
    if isinstance(v, (list, tuple)):
        return List(v)
    if isinstance(v, dict):
        return Map(v)
    return Nil()


def type_of(t: str, v: Any) -> String:
    """Terraform type name: ``t`` when given, otherwise guessed from ``v``."""
    if t:
        return String(t)
    if isinstance(v, str):
        return String("string")
    if isinstance(v, (bool, Bool)):
        return String("bool")
    if isinstance(v, (int, float)):
        return String("number")
    if isinstance(v, (list, tuple)):
        return String("list")
    if isinstance(v, dict):
        return String("map")
    return String("any")


# ---------------------------------------------------------------- numbers


def _decompose(f: float) -> tuple[bool, str, int]:
    """Shortest round-trip digits of ``f`` with its decimal exponent."""
    sign, digits, exponent = Decimal(repr(f)).normalize().as_tuple()
    ds = "".join(map(str, digits))
    return bool(sign), ds, len(ds) + exponent - 1


def _positional(ds: str, exp10: int) -> str:
    n = len(ds)
    if exp10 >= n - 1:
        return ds + "0" * (exp10 - n + 1)
    if exp10 >= 0:
        return ds[: exp10 + 1] + "." + ds[exp10 + 1 :]
    return "0." + "0" * (-exp10 - 1) + ds


def _scientific(ds: str, exp10: int, pad: bool) -> str:
    mantissa = ds[0] + ("." + ds[1:] if len(ds) > 1 else "")
    digits = f"{abs(exp10):02d}" if pad else str(abs(exp10))
    return f"{mantissa}e{'-' if exp10 < 0 else '+'}{digits}"


def _format_g(f: float) -> str:
    """Shortest general format, switching to exponent form like ``%g``."""
    if math.isnan(f):
        return "NaN"
    if math.isinf(f):
        return "+Inf" if f > 0 else "-Inf"
    negative, ds, exp10 = _decompose(f)
    if exp10 < -4 or exp10 >= 6:
        body = _scientific(ds, exp10, pad=True)
    else:
        body = _positional(ds, exp10)
    return ("-" if negative else "") + body


def _json_float(f: float) -> str:
    if not math.isfinite(f):
        raise ValueError(f"unsupported value: {f!r}")
    negative, ds, exp10 = _decompose(f)
    magnitude = abs(f)
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        body = _scientific(ds, exp10, pad=False)
    else:
        body = _positional(ds, exp10)
    return ("-" if negative else "") + body


# ------------------------------------------------------------------- JSON

_JSON_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_HTML_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}


def _json_string(s: str, escape_html: bool) -> str:
    parts = ['"']
    for ch in s:
        if ch in _JSON_ESCAPES:
            parts.append(_JSON_ESCAPES[ch])
        elif escape_html and ch in _HTML_ESCAPES:
            parts.append(_HTML_ESCAPES[ch])
        elif ch < " ":
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(ch)
    parts.append('"')
    return "".join(parts)


def _to_plain(obj: Any) -> Any:
    """Turn values (possibly nested) into plain JSON-ready Python data."""
    if isinstance(obj, Nil):
        return None
    if isinstance(obj, Empty):
        return ""
    if isinstance(obj, String):
        return str(obj) or None
    if isinstance(obj, Bool):
        return obj.value
    if isinstance(obj, Number):
        return float(obj)
    if isinstance(obj, (list, tuple)):
        return [_to_plain(item) for item in obj]
    if isinstance(obj, dict):
        return {str(key): _to_plain(item) for key, item in obj.items()}
    return obj


def _encode_json(obj: Any, indent: str | None, depth: int, escape_html: bool) -> str:
    if obj is None:
        return "null"
    if isinstance(obj, bool):
        return "true" if obj else "false"
    if isinstance(obj, int):
        return str(obj)
    if isinstance(obj, float):
        return _json_float(obj)
    if isinstance(obj, str):
        return _json_string(obj, escape_html)
    if isinstance(obj, list):
        if not obj:
            return "[]"
        items = [_encode_json(item, indent, depth + 1, escape_html) for item in obj]
        return _wrap("[", "]", items, indent, depth)
    if isinstance(obj, dict):
        if not obj:
            return "{}"
        colon = ":" if indent is None else ": "
        items = [
            _json_string(key, escape_html)
            + colon
            + _encode_json(obj[key], indent, depth + 1, escape_html)
            for key in sorted(obj)
        ]
        return _wrap("{", "}", items, indent, depth)
    raise TypeError(f"unsupported type: {type(obj).__name__}")


def _wrap(opening: str, closing: str, items: list[str], indent: str | None, depth: int) -> str:
    if indent is None:
        return opening + ",".join(items) + closing
    inner = "\n" + indent * (depth + 1)
    return opening + inner + ("," + inner).join(items) + "\n" + indent * depth + closing


def _dump_json(obj: Any, *, indent: str | None = None, escape_html: bool = False) -> str:
    """Encode values or plain data as JSON with sorted keys."""
    return _encode_json(_to_plain(obj), indent, 0, escape_html)


# -------------------------------------------------------------------- XML

_XML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&#34;",
    "'": "&#39;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


def _xml_escape(text: str) -> str:
    return "".join(_XML_ESCAPES.get(ch, ch) for ch in text)


def _xml_element(tag: str, body: str) -> str:
    return f"<{tag}>{body}</{tag}>"


def _xml_nil(tag: str) -> str:
    return f'<{tag} xsi:nil="true"></{tag}>'


def _xml_text(value: Any) -> str:
    if value is None or isinstance(value, Nil):
        return ""
    if isinstance(value, Bool):
        return "true" if value.value else "false"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_g(float(value))
    return _xml_escape(str(value))


def _xml_child(tag: str, value: Any) -> str:
    if isinstance(value, dict):
        return Map(value).to_xml(tag)
    if isinstance(value, (list, tuple)):
        return List(value).to_xml(tag)
    return _xml_element(tag, _xml_text(value))