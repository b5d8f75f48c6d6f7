"""``up-parse`` — parse a UP file and print the result.

Usage::

    up-parse config.up                  # readable listing
    up-parse config.up --format json    # JSON of Document.to_python()
    cat config.up | up-parse - --strict
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO, Sequence

from .document import Document
from .errors import UPError
from .parser import Parser, ParserOptions
from .values import Value, VBlock, VList, VScalar, VTable, VUseDirective


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, VScalar):
        return json.dumps(value.value, ensure_ascii=False)
    if isinstance(value, VList):
        return "[" + ", ".join(_fmt_inline(v) for v in value.items) + "]"
    if isinstance(value, VBlock):
        return "{" + ", ".join(f"{k}: {_fmt_inline(v)}" for k, v in value.entries.items()) + "}"
    if isinstance(value, (VTable, VUseDirective)):
        return str(value)
    return repr(value)


def _fmt_inspect(value: Value, indent: int = 0) -> str:
    """Pretty-print a value, one nested entry per line."""
    pad = "  " * (indent + 1)

    if isinstance(value, VBlock):
        if not value.entries:
            return "{}"
        lines = ["{"]
        for k, v in value.entries.items():
            lines.append(f"{pad}{k}: {_fmt_inspect(v, indent + 1)}")
        lines.append("  " * indent + "}")
        return "\n".join(lines)

    if isinstance(value, VList):
        if not value.items:
            return "[]"
        lines = ["["]
        for i, v in enumerate(value.items, 1):
            lines.append(f"{pad}{i}: {_fmt_inspect(v, indent + 1)}")
        lines.append("  " * indent + "]")
        return "\n".join(lines)

    if isinstance(value, VTable):
        lines = [f"table ({', '.join(_fmt_inline(c) for c in value.columns)})"]
        for row in value.rows:
            lines.append(f"{pad}" + " | ".join(_fmt_inline(v) for v in row))
        return "\n".join(lines)

    return _fmt_inline(value)


def _show_document(doc: Document, dest: IO[str]) -> None:
    if doc.is_empty():
        print("(empty document)", file=dest)
        return
    for node in doc:
        label = node.key if node.type_annotation is None else f"{node.key}!{node.type_annotation}"
        print(f"{label} = {_fmt_inspect(node.value)}", file=dest)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="up-parse", description="Parse a UP (Unified Properties) document.")
    ap.add_argument("file", nargs="?", default="-", help="UP file to read ('-' or omitted: stdin)")
    ap.add_argument("--format", choices=("inspect", "json"), default="inspect", help="output format")
    ap.add_argument("--strict", action="store_true", help="fail on unterminated blocks, lists and strings")
    ap.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return ap


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def main(argv: Sequence[str] | None = None, dest: IO[str] | None = None) -> int:
    """Run ``up-parse``; returns the process exit status."""
    args = build_parser().parse_args(argv)
    dest = dest or sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        text = _read_input(args.file)
        doc = Parser(ParserOptions(strict=args.strict)).parse_document(text)
    except UnicodeDecodeError as exc:
        print(f"Error decoding '{args.file}' as UTF-8: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error reading '{args.file}': {exc}", file=sys.stderr)
        return 1
    except UPError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps(doc.to_python(), indent=2, ensure_ascii=False), file=dest)
    else:
        _show_document(doc, dest)
    return 0


if __name__ == "__main__":
    sys.exit(main())
