"""Value types for UP documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class VScalar:
    value: str  # raw text, never coerced

    def __str__(self) -> str:
        return self.value

    def to_python(self) -> str:
        return self.value


@dataclass
class VBlock:
    """Ordered key → value mapping.

    Re-assigning a key keeps its original position (plain ``dict`` semantics).
    """

    entries: dict[str, "Value"] = field(default_factory=dict)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k} {v}" for k, v in self.entries.items()) + "}"

    def to_python(self) -> dict:
        return {k: v.to_python() for k, v in self.entries.items()}


@dataclass
class VList:
    items: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"

    def to_python(self) -> list:
        return [v.to_python() for v in self.items]


@dataclass
class VTable:
    columns: list["Value"] = field(default_factory=list)
    rows: list[list["Value"]] = field(default_factory=list)

    def __str__(self) -> str:
        return f"VTable({len(self.columns)} columns, {len(self.rows)} rows)"

    def to_python(self) -> dict:
        return {
            "columns": [c.to_python() for c in self.columns],
            "rows": [[v.to_python() for v in row] for row in self.rows],
        }


@dataclass
class VUseDirective:
    namespaces: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return "!use [" + ", ".join(self.namespaces) + "]"

    def to_python(self) -> dict:
        return {"namespaces": list(self.namespaces)}


Value = Union[VScalar, VBlock, VList, VTable, VUseDirective]
