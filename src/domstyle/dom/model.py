"""Document tree model: Text and Element node dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Sequence, Union

AttrMap = Mapping[str, str]


@dataclass(frozen=True)
class Text:
    """A text leaf.  Text nodes never have children."""

    content: str

    @property
    def children(self) -> tuple[()]:
        return ()

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class Element:
    """An element with a tag name, attributes, and ordered children.

    ``attributes`` is stored as a read-only view over a private copy, so a
    parsed tree cannot be changed through it.
    """

    tag_name: str
    attributes: AttrMap = field(default_factory=dict)
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "children", tuple(self.children))

    def __hash__(self) -> int:
        return hash((self.tag_name, frozenset(self.attributes.items()), self.children))

    def iter_elements(self) -> Iterator[Element]:
        """Yield this element and every descendant element, pre-order."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter_elements()

    def element_count(self) -> int:
        return sum(1 for _ in self.iter_elements())

    def __str__(self) -> str:
        return render(self)


Node = Union[Text, Element]


def text(content: str) -> Text:
    return Text(content)


def element(
    tag_name: str,
    attributes: Mapping[str, str] | None = None,
    children: Sequence[Node] = (),
) -> Element:
    return Element(tag_name, dict(attributes or {}), tuple(children))


def render(node: Node, indent: int = 0) -> str:
    """Render *node* as indented, human-readable text.

    Elements print their opening tag (with ``key="value"`` attributes) on one
    line, each child indented two further spaces, then the closing tag.  Text
    leaves print trimmed.  This is a diagnostic view, not a serializer.
    """
    pad = " " * indent
    if isinstance(node, Text):
        return pad + node.content.strip()

    attrs = " ".join(f'{key}="{value}"' for key, value in node.attributes.items())
    opening = f"<{node.tag_name} {attrs}>" if attrs else f"<{node.tag_name}>"
    lines = [pad + opening]
    lines.extend(render(child, indent + 2) for child in node.children)
    lines.append(f"{pad}</{node.tag_name}>")
    return "\n".join(lines)
