"""
Session - Entry points for parsing command lines.

This module provides the functions and the ParseSession class that
callers use to turn raw lines into parse results, including the
continuation protocol for lines ending in a backslash.
"""

import logging

from shline.lexer import Token, tokenize
from shline.parser.command_parser import parse
from shline.parser.results import ContinuationRequired, ParseResult


def parse_command_line(text: str) -> ParseResult:
    """
    Tokenize and parse a single line.

    Example:
        >>> parse_command_line("ls -l | wc -l")
        Parsed(command_line=Pipeline([Singleton(Command(['ls', '-l'])), Singleton(Command(['wc', '-l']))]))
    """
    return parse(tokenize(text))


class ParseSession:
    """
    Accumulates lines until they form a complete command line.

    Each fed line is tokenized and appended to the tokens of the lines
    before it, then the whole sequence is parsed again. The tokens are
    kept only while the parser asks for more input.

    Usage:
        session = ParseSession()
        result = session.feed("make && \\\\")   # ContinuationRequired
        result = session.feed("make install")  # Parsed(And(...))
    """

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the session.

        Args:
            logger: Logger for debug tracing (default: 'ParseSession')
        """
        self.logger = logger or logging.getLogger("ParseSession")
        self._tokens: list[Token] = []

    @property
    def pending(self) -> bool:
        """True while an incomplete line is waiting for more input."""
        return bool(self._tokens)

    @property
    def tokens(self) -> list[Token]:
        """The tokens collected so far (a copy)."""
        return list(self._tokens)

    def feed(self, line: str) -> ParseResult:
        """
        Add a line and parse everything collected so far.

        Args:
            line: One line of raw text, without its newline

        Returns:
            The parse result for the accumulated lines
        """
        self._tokens.extend(tokenize(line))
        result = parse(self._tokens, logger=self.logger)

        if isinstance(result, ContinuationRequired):
            self.logger.debug("Holding %d tokens for the next line", len(self._tokens))
        else:
            self._tokens = []
        return result

    def reset(self) -> None:
        """Discard any incomplete input."""
        self._tokens = []
