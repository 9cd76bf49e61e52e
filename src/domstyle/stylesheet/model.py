"""Stylesheet model: rules, simple selectors, declarations and typed values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Unit(Enum):
    """Length units the parser recognises."""

    PX = "px"


@dataclass(frozen=True)
class Keyword:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Length:
    value: float
    unit: Unit

    def __str__(self) -> str:
        return f"{self.value:g}{self.unit.value}"


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


Value = Union[Keyword, Length, Color]


@dataclass(frozen=True)
class SimpleSelector:
    """A selector matching by optional tag name, optional id, and classes.

    No combinators.  Every part may be absent, so an empty selector is
    representable even though it matches nothing useful.
    """

    tag_name: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()

    def __str__(self) -> str:
        parts = [self.tag_name or ""]
        if self.id is not None:
            parts.append(f"#{self.id}")
        parts.extend(f".{cls}" for cls in self.classes)
        return "".join(parts)


Selector = SimpleSelector


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value;`` pair inside a rule body."""

    name: str
    value: Value

    def __str__(self) -> str:
        return f"{self.name}: {self.value};"


@dataclass(frozen=True)
class Rule:
    """A selector list paired with its declarations."""

    selectors: tuple[Selector, ...]
    declarations: tuple[Declaration, ...] = ()

    def __str__(self) -> str:
        selectors = ", ".join(str(s) for s in self.selectors)
        body = " ".join(str(d) for d in self.declarations)
        return f"{selectors} {{ {body} }}" if body else f"{selectors} {{}}"


@dataclass(frozen=True)
class Stylesheet:
    """Rules in source order."""

    rules: tuple[Rule, ...] = ()
