from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    max_depth: int = 200  # element nesting ceiling, stays under the interpreter recursion limit
    root_tag: str = "html"  # tag of the synthetic wrapper around multiple top-level nodes

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        if not self.root_tag:
            raise ValueError("root_tag must be a non-empty string")
