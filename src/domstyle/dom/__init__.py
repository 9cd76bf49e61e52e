from domstyle.dom.parser import parse_fragment, parse_markup, wrap_root
from domstyle.dom.model import AttrMap, Element, Node, Text, element, render, text

__all__ = [
    "parse_markup",
    "parse_fragment",
    "wrap_root",
    "AttrMap",
    "Element",
    "Node",
    "Text",
    "element",
    "text",
    "render",
]
