"""Line-level utilities: line splitting, key/value and key/type splitting."""

from __future__ import annotations

import re

_LINE_BREAK_RE = re.compile(r"\r?\n")
_HEADER_RE = re.compile(r"\s*(\S+)\s*(.*)$")


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------

def split_lines(text: str) -> list[str]:
    """Split *text* on LF, dropping a CR that precedes it."""
    return _LINE_BREAK_RE.split(text)


def is_skippable(line: str) -> bool:
    """True for blank lines and ``#`` comment lines."""
    trimmed = line.strip()
    return not trimmed or trimmed.startswith("#")


# ---------------------------------------------------------------------------
# Quotes / comments
# ---------------------------------------------------------------------------

def strip_surrounding_quotes(s: str) -> str:
    """Remove exactly one pair of enclosing double quotes."""
    if len(s) >= 2 and s.startswith('"') and s.endswith('"'):
        return s[1:-1]
    return s


def strip_trailing_comment(s: str) -> str:
    """Drop everything from the first ``#`` that is not inside double quotes."""
    in_quotes = False
    for i, ch in enumerate(s):
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == "#" and not in_quotes:
            return s[:i].rstrip()
    return s


# ---------------------------------------------------------------------------
# Header splitting
# ---------------------------------------------------------------------------

def split_key_value(line: str) -> tuple[str, str]:
    """Split a raw header line into ``(key_token, value_remainder)``.

    Two header forms are accepted:

    - ``key: value`` (line-oriented): the key token ends with ``:`` and is
      not a URL scheme (no ``://``). The colon is dropped, the value is
      trimmed, a trailing ``# comment`` is removed and one layer of quotes
      is stripped.
    - ``key value`` (traditional): only one layer of quotes is stripped;
      ``#`` in the value is literal.
    """
    match = _HEADER_RE.match(line)
    if match is None:
        return line.strip(), ""

    key_part, val_part = match.group(1), match.group(2)

    if key_part.endswith(":") and "://" not in key_part:
        key_part = key_part[:-1]
        val_part = strip_trailing_comment(val_part.strip()).strip()
        return key_part, strip_surrounding_quotes(val_part)

    return key_part, strip_surrounding_quotes(val_part)


def split_key_type(key_part: str) -> tuple[str, str | None]:
    """Split ``name!type`` on the first ``!``.

    No ``!`` gives ``None``; a trailing ``!`` gives an empty annotation.
    """
    name, bang, type_annotation = key_part.partition("!")
    if not bang:
        return key_part, None
    return name, type_annotation
