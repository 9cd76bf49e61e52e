"""Hand-written recursive-descent parser for a small HTML-like markup.

Grammar:
    nodes      := (whitespace? node)*      -- stops at end of input or "</"
    node       := element | text
    text       := characters up to (not including) '<'
    element    := '<' tag_name attributes '>' nodes '</' tag_name '>'
    attributes := (whitespace? attr)*       -- stops at '>'
    attr       := attr_name '=' ('"' ... '"' | "'" ... "'")

Example:
    <div class="note">Hello <b>world</b></div>
"""

from __future__ import annotations

import logging
from typing import Sequence

from domstyle.config import ParserConfig
from domstyle.dom.model import Element, Node, Text
from domstyle.parser.cursor import Cursor, is_identifier_char
from domstyle.parser.errors import (
    NestingTooDeepError,
    ParseError,
    TagMismatchError,
    UnexpectedTokenError,
)

__all__ = ["parse_markup", "parse_fragment", "wrap_root"]

logger = logging.getLogger(__name__)

_QUOTES = ('"', "'")


class _MarkupParser:
    def __init__(self, source: str, config: ParserConfig) -> None:
        self.cursor = Cursor(source)
        self.config = config

    def parse_nodes(self, depth: int) -> list[Node]:
        cursor = self.cursor
        nodes: list[Node] = []
        while True:
            cursor.skip_whitespace()
            if cursor.at_end() or cursor.starts_with("</"):
                break
            nodes.append(self.parse_node(depth))
        return nodes

    def parse_node(self, depth: int) -> Node:
        if self.cursor.peek() == "<":
            return self.parse_element(depth)
        return self.parse_text()

    def parse_text(self) -> Text:
        return Text(self.cursor.take_while(lambda c: c != "<"))

    def parse_element(self, depth: int) -> Element:
        cursor = self.cursor
        if depth >= self.config.max_depth:
            raise cursor.error(NestingTooDeepError, self.config.max_depth)

        cursor.expect("<")
        tag_name = cursor.take_while(is_identifier_char)
        attributes = self.parse_attributes()
        cursor.expect(">")

        children = self.parse_nodes(depth + 1)

        cursor.expect("<")
        cursor.expect("/")
        closing = cursor.take_while(is_identifier_char)
        if closing != tag_name:
            raise cursor.error(TagMismatchError, tag_name, closing)
        cursor.expect(">")

        return Element(tag_name, attributes, tuple(children))

    def parse_attributes(self) -> dict[str, str]:
        cursor = self.cursor
        attributes: dict[str, str] = {}
        while True:
            cursor.skip_whitespace()
            if cursor.peek() == ">":
                break
            name, value = self.parse_attr()
            # Repeated names: the last value wins.
            attributes[name] = value
        return attributes

    def parse_attr(self) -> tuple[str, str]:
        name = self.cursor.take_while(is_identifier_char)
        self.cursor.expect("=")
        return name, self.parse_attr_value()

    def parse_attr_value(self) -> str:
        cursor = self.cursor
        quote = cursor.peek()
        if quote not in _QUOTES:
            raise cursor.error(
                UnexpectedTokenError, f"Expected quoted attribute value, found {quote!r}"
            )
        cursor.advance()
        value = cursor.take_while(lambda c: c != quote)
        cursor.expect(quote)
        return value


def wrap_root(nodes: Sequence[Node], root_tag: str = "html") -> Node:
    """Collapse a sibling sequence into a single root node.

    A lone node is returned unchanged; anything else (including no nodes at
    all) is wrapped in a synthetic ``<root_tag>`` element with no attributes.
    """
    if len(nodes) == 1:
        return nodes[0]
    return Element(root_tag, {}, tuple(nodes))


def parse_fragment(source: str, config: ParserConfig | None = None) -> tuple[Node, ...]:
    """Parse *source* into its top-level sibling nodes, without wrapping."""
    config = config or ParserConfig()
    parser = _MarkupParser(source, config)
    try:
        nodes = parser.parse_nodes(depth=0)
        if not parser.cursor.at_end():
            # Only a stray closing tag stops the top-level loop early.
            raise parser.cursor.error(
                UnexpectedTokenError, "Closing tag without a matching opening tag"
            )
    except ParseError as exc:
        logger.debug("Markup parse failed: %s", exc)
        raise
    logger.debug("Parsed %d top-level node(s) from %d characters", len(nodes), len(source))
    return tuple(nodes)


def parse_markup(source: str, config: ParserConfig | None = None) -> Node:
    """Parse a markup string into a document tree with a single root."""
    config = config or ParserConfig()
    return wrap_root(parse_fragment(source, config), root_tag=config.root_tag)
