"""Representation of a Terraform module and the items it is made of.

This module holds the location of an item inside the module's files.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Position"]


@dataclass(frozen=True)
class Position:
    """Where a Terraform item (input, output, provider, ...) is declared."""

    filename: str = ""
    line: int = 0

    def __lt__(self, other: object) -> bool:
        # Ordering used when items are sorted by position: an item comes
        # first if its file name sorts first or its line number is lower.
        if not isinstance(other, Position):
            return NotImplemented
        return self.filename < other.filename or self.line < other.line