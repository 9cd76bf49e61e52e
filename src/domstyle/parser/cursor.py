"""Position cursor over a source string, shared by both parsers.

Every character access in the markup and stylesheet parsers goes through a
``Cursor``.  Python strings index by code point, so stepping ``position`` by
one always lands on a character boundary, including for non-ASCII input.
"""

from __future__ import annotations

import string
from typing import Callable

from domstyle.parser.errors import (
    ParseError,
    StructuralViolationError,
    UnexpectedEndOfInputError,
)

__all__ = [
    "Cursor",
    "is_hex_digit",
    "is_identifier_char",
    "is_keyword_char",
    "is_name_char",
    "is_number_char",
]

_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)


def is_identifier_char(c: str) -> bool:
    """Tag names, attribute names and selector parts: ASCII letters and digits."""
    return c in _ASCII_ALNUM


def is_name_char(c: str) -> bool:
    """Declaration names and unit tokens: ASCII letters, digits and ``-``."""
    return c in _ASCII_ALNUM or c == "-"


def is_keyword_char(c: str) -> bool:
    return c in string.ascii_letters or c == "-"


def is_number_char(c: str) -> bool:
    return c in string.digits or c == "."


def is_hex_digit(c: str) -> bool:
    return c in _HEX_DIGITS


class Cursor:
    """A forward-only reader over ``source``."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0

    def at_end(self) -> bool:
        return self.position >= len(self.source)

    def peek(self) -> str:
        """Return the current character without consuming it."""
        if self.at_end():
            raise self.error(UnexpectedEndOfInputError, "Unexpected end of input")
        return self.source[self.position]

    def advance(self) -> str:
        """Consume and return the current character."""
        c = self.peek()
        self.position += 1
        return c

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume the longest run of characters satisfying *predicate*."""
        start = self.position
        while not self.at_end() and predicate(self.source[self.position]):
            self.position += 1
        return self.source[start : self.position]

    def skip_whitespace(self) -> None:
        self.take_while(str.isspace)

    def starts_with(self, literal: str) -> bool:
        return self.source.startswith(literal, self.position)

    def expect(self, expected: str) -> None:
        """Consume one character, which must equal *expected*."""
        if self.at_end():
            raise self.error(
                UnexpectedEndOfInputError,
                f"Expected {expected!r} but reached end of input",
            )
        found = self.source[self.position]
        if found != expected:
            raise self.error(
                StructuralViolationError, f"Expected {expected!r} but found {found!r}"
            )
        self.position += 1

    # ---- diagnostics ----

    def location(self) -> tuple[int, int]:
        """Return the 1-based (line, column) of the current position."""
        return self.location_of(self.position)

    def location_of(self, position: int) -> tuple[int, int]:
        consumed = self.source[:position]
        line = consumed.count("\n") + 1
        column = position - (consumed.rfind("\n") + 1) + 1
        return line, column

    def error(
        self, error_cls: type[ParseError], *args: object, at: int | None = None
    ) -> ParseError:
        """Build *error_cls* stamped with the current position (or *at*)."""
        position = self.position if at is None else at
        line, column = self.location_of(position)
        return error_cls(*args, position=position, line=line, column=column)  # type: ignore[arg-type]
