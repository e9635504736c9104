"""Error reporting for the compiler."""

from __future__ import annotations

import sys
from typing import NoReturn

from dragontiger.location import Location


class TigerError(Exception):
    """A fatal compilation error, optionally tied to a source location."""

    def __init__(self, message: str, location: Location | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self) -> str:
        if self.location is None:
            return self.message
        return f"{self.location}: {self.message}"


def error(message: str, location: Location | None = None) -> NoReturn:
    """Raise a fatal TigerError."""
    raise TigerError(message, location)


def non_fatal_error(message: str, location: Location | None = None) -> None:
    """Report an error on standard error and carry on."""
    print(TigerError(message, location), file=sys.stderr)