"""Document and Node — the output of UP parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .values import Value


@dataclass
class Node:
    """A key, its optional ``!type`` annotation and its value."""

    key: str
    type_annotation: str | None
    value: Value

    def to_python(self) -> dict:
        return {
            "key": self.key,
            "type": self.type_annotation,
            "value": self.value.to_python(),
        }


@dataclass
class Document:
    """Top-level nodes of a UP source, in source order.

    Directive pseudo-nodes (``_use``, ``_lint``) are interleaved with the
    ordinary nodes where they appeared.
    """

    nodes: list[Node] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def to_python(self) -> list[dict]:
        return [node.to_python() for node in self.nodes]
