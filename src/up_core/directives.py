"""Document-level directives: ``!use [..]`` and ``!lint { .. }``."""

from __future__ import annotations

import logging

from .document import Node
from .errors import DirectiveError
from .reader import Source, parse_block, parse_inline_list
from .values import VUseDirective

logger = logging.getLogger(__name__)

USE = "!use"
LINT = "!lint"


def is_directive(trimmed: str) -> bool:
    return trimmed.startswith(USE) or trimmed.startswith(LINT)


def parse_directive(src: Source, start: int) -> tuple[Node, int]:
    """Dispatch the directive on ``src.lines[start]``."""
    trimmed = src.lines[start].strip()
    if trimmed.startswith(USE):
        return parse_use_directive(trimmed), start + 1
    return parse_lint_directive(src, start)


def parse_use_directive(line: str) -> Node:
    """``!use [ns1, ns2]`` → ``_use`` pseudo-node.

    Namespaces are only recorded, never resolved.
    """
    content = line.strip()[len(USE):].strip()
    if not content.startswith("["):
        raise DirectiveError("!use directive requires a list: !use [namespace1, namespace2]")

    namespaces = [str(item) for item in parse_inline_list(content).items]
    logger.debug("!use directive with namespaces %s", namespaces)
    return Node("_use", "directive", VUseDirective(namespaces))


def parse_lint_directive(src: Source, start: int) -> tuple[Node, int]:
    """``!lint {`` followed by a block body → ``_lint`` pseudo-node."""
    content = src.lines[start].strip()[len(LINT):].strip()
    if content != "{":
        raise DirectiveError("!lint directive requires a block: !lint { ... }")

    block, next_index = parse_block(src, start + 1)
    logger.debug("!lint directive with %d rule(s)", len(block.entries))
    return Node("_lint", "directive", block), next_index
