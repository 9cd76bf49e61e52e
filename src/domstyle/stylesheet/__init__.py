from domstyle.stylesheet.parser import parse_stylesheet
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

__all__ = [
    "parse_stylesheet",
    "Stylesheet",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Declaration",
    "Value",
    "Keyword",
    "Length",
    "Color",
    "Unit",
]
