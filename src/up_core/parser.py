"""Parser: the document driver and the public ``parse`` entry points."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .directives import is_directive, parse_directive
from .document import Document, Node
from .errors import ParseError
from .line_utils import is_skippable, split_lines
from .reader import Source, parse_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserOptions:
    """Knobs for a :class:`Parser`.

    ``strict`` turns an unterminated block, list, multiline string or table
    into an :class:`~up_core.errors.UnterminatedError` instead of stopping
    quietly at end of input.
    """

    strict: bool = False


class Parser:
    """UP document parser.

    Usage::

        doc = Parser().parse_document("name Alice\\nage!int 30")
        doc.nodes[1].type_annotation   # → "int"
        doc.nodes[1].value             # → VScalar("30")
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self.options = options or ParserOptions()

    def parse_document(self, text: str) -> Document:
        """Parse *text* into a :class:`Document`.

        Errors from ordinary lines are re-raised as ``ParseError`` prefixed
        with the 1-based number of the top-level line being parsed.
        """
        src = Source(split_lines(text), strict=self.options.strict)
        nodes: list[Node] = []
        i = 0

        while i < len(src):
            line = src.lines[i]
            if is_skippable(line):
                i += 1
                continue

            if is_directive(line.strip()):
                try:
                    node, i = parse_directive(src, i)
                except ParseError as exc:
                    exc.line = i + 1
                    raise
                except RecursionError as exc:
                    raise ParseError(f"line {i + 1}: nesting too deep", line=i + 1) from exc
                nodes.append(node)
                continue

            try:
                node, next_index = parse_line(src, i)
            except ParseError as exc:
                raise ParseError(f"line {i + 1}: {exc.message}", line=i + 1) from exc
            except RecursionError as exc:
                raise ParseError(f"line {i + 1}: nesting too deep", line=i + 1) from exc
            nodes.append(node)
            i = next_index

        logger.debug("parsed %d line(s) into %d node(s)", len(src), len(nodes))
        return Document(nodes)


def parse(text: str, *, strict: bool = False) -> Document:
    """Parse a UP document from a string."""
    return Parser(ParserOptions(strict=strict)).parse_document(text)


def parse_file(path: str | Path, *, strict: bool = False, encoding: str = "utf-8") -> Document:
    """Read and parse the UP document at *path*."""
    text = Path(path).read_text(encoding=encoding)
    return parse(text, strict=strict)
