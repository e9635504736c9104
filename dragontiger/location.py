"""Source locations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A position in a source file."""

    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}.{self.column}"


NO_LOCATION = Location("<none>", 0, 0)
"""The absence of a location, e.g. for primitive function declarations."""