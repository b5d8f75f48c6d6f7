"""Exceptions raised by UP Core."""

from __future__ import annotations


class UPError(Exception):
    """Base class for all UP Core errors."""


class ParseError(UPError):
    """Malformed UP input.

    ``line`` is the 1-based source line the document driver was parsing when
    the failure occurred, or ``None`` if it was raised outside the driver.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line


class DirectiveError(ParseError):
    """``!use`` / ``!lint`` written without its required argument."""


class UnterminatedError(ParseError):
    """A block, list, multiline or table reached end of input (strict mode)."""

    def __init__(self, construct: str, delimiter: str) -> None:
        super().__init__(f"unterminated {construct}: expected '{delimiter}' before end of input")
        self.construct = construct
        self.delimiter = delimiter
