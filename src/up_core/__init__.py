"""UP Core — parser for UP (Unified Properties) documents."""

from .document import Document, Node
from .errors import DirectiveError, ParseError, UnterminatedError, UPError
from .parser import Parser, ParserOptions, parse, parse_file
from .values import (
    Value,
    VBlock,
    VList,
    VScalar,
    VTable,
    VUseDirective,
)

__all__ = [
    "parse",
    "parse_file",
    "Parser",
    "ParserOptions",
    "Document",
    "Node",
    "Value",
    "VBlock",
    "VList",
    "VScalar",
    "VTable",
    "VUseDirective",
    "UPError",
    "ParseError",
    "DirectiveError",
    "UnterminatedError",
]
