"""Interned identifier strings that compare by identity."""

from __future__ import annotations

_TABLE: dict[str, str] = {}


class Symbol:
    """An interned string.

    Symbols built from equal strings share a single stored string, so
    equality is an identity check. ``Symbol()`` is the null symbol.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str | None = None) -> None:
        if text is None:
            self._text = None
        else:
            self._text = _TABLE.setdefault(text, text)

    @property
    def text(self) -> str:
        """The interned string; raises ValueError for the null symbol."""
        if self._text is None:
            raise ValueError("the null symbol has no text")
        return self._text

    @property
    def is_null(self) -> bool:
        return self._text is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self._text is other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __str__(self) -> str:
        return "<null>" if self._text is None else self._text

    def __repr__(self) -> str:
        return "Symbol()" if self._text is None else f"Symbol({self._text!r})"