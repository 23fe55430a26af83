"""
Parse results and the parser exception.

parse() never raises for bad input: grammar problems are raised
internally as ParserError and handed back to the caller as Failed.
"""

from dataclasses import dataclass
from typing import Union

from shline.lexer import Token
from shline.syntax_tree.nodes import CommandLine


class ParserError(Exception):
    """Exception raised for parser errors."""

    def __init__(self, message: str, token: Token | None = None):
        self.message = message
        self.token = token
        super().__init__(message)


@dataclass(frozen=True)
class Parsed:
    """The tokens formed a complete command line."""

    command_line: CommandLine


@dataclass(frozen=True)
class ContinuationRequired:
    """
    The line ended with a continuation.

    The caller must read another line, append its tokens to the ones
    already collected and parse the whole sequence again.
    """


@dataclass(frozen=True)
class Failed:
    """The tokens could not be parsed; message says why."""

    message: str


ParseResult = Union[Parsed, ContinuationRequired, Failed]
