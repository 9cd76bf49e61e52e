"""Hand-written parser for CSS-like stylesheets.

Syntax example:
    h1, div.note, #title { padding: 10px; color: #aabbcc; display: block; }

Grammar:
    rules           := (whitespace? rule)*
    rule            := selector_list '{' declaration* '}'
    selector_list   := simple_selector (',' whitespace? simple_selector)*
    simple_selector := (tag_name | '#' id | '.' class)*
    declaration     := name ':' whitespace? value ';'
    value           := length | color | keyword
"""

from __future__ import annotations

import logging
import string
import struct

from domstyle.parser.cursor import (
    Cursor,
    is_hex_digit,
    is_identifier_char,
    is_keyword_char,
    is_name_char,
    is_number_char,
)
from domstyle.parser.errors import (
    NumericConversionError,
    ParseError,
    UnexpectedTokenError,
    UnknownUnitError,
)
from domstyle.stylesheet.model import (
    Color,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
    Unit,
    Value,
)

__all__ = ["parse_stylesheet"]

logger = logging.getLogger(__name__)


def _parse_rule(cursor: Cursor) -> Rule:
    selectors = _parse_selectors(cursor)
    declarations = _parse_declarations(cursor)
    return Rule(selectors=selectors, declarations=declarations)


def _parse_selectors(cursor: Cursor) -> tuple[Selector, ...]:
    """Parse a comma-separated selector list, stopping before ``{``."""
    selectors: list[Selector] = []
    while True:
        selectors.append(_parse_simple_selector(cursor))
        cursor.skip_whitespace()
        c = cursor.peek()
        if c == ",":
            cursor.advance()
            cursor.skip_whitespace()
        elif c == "{":
            break
        else:
            raise cursor.error(
                UnexpectedTokenError, f"Unexpected {c!r} in selector list"
            )
    return tuple(selectors)


def _parse_simple_selector(cursor: Cursor) -> SimpleSelector:
    """Accumulate tag, id and class parts until something else shows up.

    A later tag name or id replaces an earlier one; classes accumulate in
    order without deduplication.
    """
    tag_name: str | None = None
    selector_id: str | None = None
    classes: list[str] = []
    while True:
        cursor.skip_whitespace()
        if cursor.at_end():
            break
        c = cursor.peek()
        if c == "#":
            cursor.advance()
            selector_id = cursor.take_while(is_identifier_char)
        elif c == ".":
            cursor.advance()
            classes.append(cursor.take_while(is_identifier_char))
        elif is_identifier_char(c):
            tag_name = cursor.take_while(is_identifier_char)
        else:
            break
    return SimpleSelector(tag_name=tag_name, id=selector_id, classes=tuple(classes))


def _parse_declarations(cursor: Cursor) -> tuple[Declaration, ...]:
    cursor.expect("{")
    declarations: list[Declaration] = []
    while True:
        cursor.skip_whitespace()
        if cursor.peek() == "}":
            cursor.advance()
            break
        declarations.append(_parse_declaration(cursor))
    return tuple(declarations)


def _parse_declaration(cursor: Cursor) -> Declaration:
    name = cursor.take_while(is_name_char)
    cursor.skip_whitespace()
    cursor.expect(":")
    cursor.skip_whitespace()
    value = _parse_value(cursor)
    cursor.expect(";")
    return Declaration(name=name, value=value)


def _parse_value(cursor: Cursor) -> Value:
    c = cursor.peek()
    if c in string.digits:
        return _parse_length(cursor)
    if c == "#":
        return _parse_color(cursor)
    return _parse_keyword(cursor)


def _parse_length(cursor: Cursor) -> Length:
    return Length(_parse_float(cursor), _parse_unit(cursor))


def _parse_float(cursor: Cursor) -> float:
    """Read a number, rounded to single precision."""
    start = cursor.position
    lexeme = cursor.take_while(is_number_char)
    try:
        return struct.unpack("f", struct.pack("f", float(lexeme)))[0]
    except (ValueError, OverflowError) as exc:
        raise cursor.error(
            NumericConversionError, f"Invalid number {lexeme!r}", at=start
        ) from exc


def _parse_unit(cursor: Cursor) -> Unit:
    start = cursor.position
    token = cursor.take_while(is_name_char).lower()
    try:
        return Unit(token)
    except ValueError as exc:
        raise cursor.error(UnknownUnitError, token, at=start) from exc


def _parse_color(cursor: Cursor) -> Color:
    cursor.expect("#")
    r = _parse_hex_pair(cursor)
    g = _parse_hex_pair(cursor)
    b = _parse_hex_pair(cursor)
    return Color(r, g, b, 255)


def _parse_hex_pair(cursor: Cursor) -> int:
    start = cursor.position
    pair = cursor.advance() + cursor.advance()
    if not all(is_hex_digit(c) for c in pair):
        raise cursor.error(
            NumericConversionError, f"Invalid hex pair {pair!r}", at=start
        )
    return int(pair, 16)


def _parse_keyword(cursor: Cursor) -> Keyword:
    return Keyword(cursor.take_while(is_keyword_char))


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse a stylesheet string into a Stylesheet object.

    Returns a Stylesheet containing all parsed rules in source order.  Any
    grammar violation raises a :class:`ParseError` subclass; nothing is
    returned for partially valid input.
    """
    cursor = Cursor(source)
    rules: list[Rule] = []
    try:
        while True:
            cursor.skip_whitespace()
            if cursor.at_end():
                break
            rules.append(_parse_rule(cursor))
    except ParseError as exc:
        logger.debug("Stylesheet parse failed: %s", exc)
        raise
    logger.debug("Parsed %d rule(s) from %d characters", len(rules), len(source))
    return Stylesheet(rules=tuple(rules))
