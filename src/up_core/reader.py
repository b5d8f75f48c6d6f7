"""Reader layer: value dispatch and the structural sub-parsers.

Every parser takes a :class:`Source` and the index of the first line it owns,
and returns ``(value, next_index)`` where ``next_index`` is the first line it
did not consume.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .document import Node
from .errors import UnterminatedError
from .line_utils import is_skippable, split_key_type, split_key_value
from .values import Value, VBlock, VList, VScalar, VTable

logger = logging.getLogger(__name__)

_DEDENT_RE = re.compile(r"^[0-9]+$")

FENCE = "```"


@dataclass
class Source:
    """Split input lines plus the options that govern a single parse."""

    lines: list[str]
    strict: bool = False

    def __len__(self) -> int:
        return len(self.lines)


def _unterminated(src: Source, construct: str, delimiter: str, header_line: int) -> None:
    """Raise in strict mode, otherwise log and let the caller stop."""
    if src.strict:
        raise UnterminatedError(construct, delimiter)
    logger.warning(
        "unterminated %s opened at line %d: missing '%s', stopped at end of input",
        construct, header_line, delimiter,
    )


# ---------------------------------------------------------------------------
# Generic line
# ---------------------------------------------------------------------------

def parse_line(src: Source, start: int) -> tuple[Node, int]:
    """Parse the header at ``src.lines[start]`` and whatever value it opens."""
    key_part, val_part = split_key_value(src.lines[start])
    key, type_annotation = split_key_type(key_part)

    if type_annotation == "quoted":
        if not (len(val_part) >= 2 and val_part.startswith('"') and val_part.endswith('"')):
            val_part = f'"{val_part}"'
        return Node(key, "string", VScalar(val_part)), start + 1

    value, next_index = parse_value(src, start, val_part, type_annotation)
    return Node(key, type_annotation, value), next_index


def parse_value(
    src: Source, start: int, val_part: str, type_annotation: str | None
) -> tuple[Value, int]:
    """Pick the value form for *val_part* found on header line *start*."""
    if type_annotation == "table" and val_part == "{":
        return parse_table(src, start + 1)

    if val_part.startswith(FENCE):
        return parse_multiline(src, start + 1, type_annotation)

    if val_part == "{":
        return parse_block(src, start + 1)

    if val_part == "[":
        return parse_list(src, start + 1)

    if val_part.startswith("[") and val_part.endswith("]"):
        return parse_inline_list(val_part), start + 1

    if val_part.startswith("{") and "}" in val_part:
        return parse_inline_block(val_part), start + 1

    return VScalar(val_part), start + 1


# ---------------------------------------------------------------------------
# Multi-line structures
# ---------------------------------------------------------------------------

def parse_block(src: Source, start: int) -> tuple[VBlock, int]:
    """Parse ``key value`` lines up to a closing ``}``."""
    block = VBlock()
    i = start

    while i < len(src):
        line = src.lines[i]
        if line.strip() == "}":
            return block, i + 1
        if is_skippable(line):
            i += 1
            continue
        node, i = parse_line(src, i)
        block.entries[node.key] = node.value

    _unterminated(src, "block", "}", start)
    return block, i


def parse_list(src: Source, start: int) -> tuple[VList, int]:
    """Parse one element per line up to a closing ``]``.

    Bare lines become scalars as written (trimmed, no quote or ``!type``
    handling).
    """
    items: list[Value] = []
    i = start

    while i < len(src):
        trimmed = src.lines[i].strip()
        if trimmed == "]":
            return VList(items), i + 1
        if is_skippable(trimmed):
            i += 1
            continue

        if trimmed.startswith("[") and trimmed.endswith("]"):
            items.append(parse_inline_list(trimmed))
            i += 1
        elif trimmed == "{":
            block, i = parse_block(src, i + 1)
            items.append(block)
        else:
            items.append(VScalar(trimmed))
            i += 1

    _unterminated(src, "list", "]", start)
    return VList(items), i


def parse_multiline(
    src: Source, start: int, type_annotation: str | None = None
) -> tuple[VScalar, int]:
    """Collect raw lines up to a closing fence.

    A purely numeric *type_annotation* is the number of leading characters
    to remove from each line.
    """
    content: list[str] = []
    i = start
    terminated = False

    while i < len(src):
        line = src.lines[i]
        i += 1
        if line.strip() == FENCE:
            terminated = True
            break
        content.append(line)

    if not terminated:
        _unterminated(src, "multiline string", FENCE, start)

    text = "\n".join(content)
    if type_annotation is not None and _DEDENT_RE.match(type_annotation):
        text = dedent(text, int(type_annotation))
    return VScalar(text), i


def dedent(text: str, amount: int) -> str:
    """Remove *amount* leading characters from every line long enough."""
    return "\n".join(
        line[amount:] if len(line) >= amount else line
        for line in text.split("\n")
    )


def parse_table(src: Source, start: int) -> tuple[VTable, int]:
    """Parse a ``!table`` body: a ``columns [..]`` line and a ``rows {..}`` block."""
    table = VTable()
    i = start

    while i < len(src):
        line = src.lines[i]
        trimmed = line.strip()
        if trimmed == "}":
            return table, i + 1
        if is_skippable(trimmed):
            i += 1
            continue

        key_part, rest = split_key_value(line)
        key, _ = split_key_type(key_part)
        if key == "columns" and rest.startswith("[") and rest.endswith("]"):
            table.columns = parse_inline_list(rest).items
            i += 1
        elif key == "rows":
            table.rows, i = _parse_rows(src, i + 1)
        else:
            logger.warning("ignoring line %d inside table: %r", i + 1, trimmed)
            i += 1

    _unterminated(src, "table", "}", start)
    return table, i


def _parse_rows(src: Source, start: int) -> tuple[list[list[Value]], int]:
    rows: list[list[Value]] = []
    i = start

    while i < len(src):
        trimmed = src.lines[i].strip()
        if trimmed == "}":
            return rows, i + 1
        if trimmed.startswith("[") and trimmed.endswith("]"):
            rows.append(parse_inline_list(trimmed).items)
        elif not is_skippable(trimmed):
            logger.warning("ignoring line %d inside table rows: %r", i + 1, trimmed)
        i += 1

    _unterminated(src, "table rows", "}", start)
    return rows, i


# ---------------------------------------------------------------------------
# Inline (single-line) structures
# ---------------------------------------------------------------------------

def parse_inline_list(s: str) -> VList:
    """``[a, b, c]`` → three scalars. Commas are never escaped."""
    content = s.strip().removeprefix("[").removesuffix("]")
    if not content.strip():
        return VList()
    return VList([VScalar(part.strip()) for part in content.split(",")])


def parse_inline_block(s: str) -> VBlock:
    """``{k v, k2 v2}`` → block of raw scalars; ``!type`` suffixes are dropped."""
    content = s.strip().removeprefix("{").removesuffix("}").strip()
    block = VBlock()
    if not content:
        return block

    for part in content.split(","):
        part = part.strip()
        if not part:
            continue
        key_part, val_part = split_key_value(part)
        key, _ = split_key_type(key_part)
        block.entries[key] = VScalar(val_part)
    return block
