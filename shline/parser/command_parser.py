"""
Command Parser - Recursive descent parser for command lines.

This module parses token sequences into CommandLine trees, handling:
- Commands built from words and redirections
- Separators (|, ||, &&, &, ;) folded left to right
- Subshells in parentheses, one recursion level per nesting depth
- Continuation requests from a trailing backslash
"""

import logging
from typing import Iterable, Union

from shline import constants
from shline.lexer import Token, TokenType
from shline.parser.command_builder import make_command
from shline.parser.results import (
    ContinuationRequired,
    Failed,
    ParseResult,
    Parsed,
    ParserError,
)
from shline.syntax_tree.nodes import (
    COMPOUND_TYPES,
    And,
    Background,
    Command,
    CommandLine,
    Or,
    Pipeline,
    Sequence,
    Singleton,
)

# A finished command, a parsed subshell, or a bare separator token
Part = Union[Command, CommandLine, Token]

_COMPOUND_FOR_SEPARATOR = {
    TokenType.PIPE: Pipeline,
    TokenType.AND: And,
    TokenType.OR: Or,
    TokenType.SEQUENCE: Sequence,
}


class CommandParser:
    """
    Recursive descent parser for command lines.

    Grammar (simplified):
        line      := part*
        part      := command | subshell | separator
        command   := (WORD | redirect)+
        subshell  := OPEN_SUBSHELL line CLOSE_SUBSHELL
        separator := PIPE | OR | AND | BACKGROUND | SEQUENCE

    Each nesting level first collects its parts, then folds them into a
    tree. A separator captures everything to its left, so
    "a && b | c" is Pipeline([And([a, b]), c]).
    """

    def __init__(
        self,
        tokens: Iterable[Token],
        max_depth: int = constants.MAX_SUBSHELL_DEPTH,
        logger: logging.Logger | None = None,
    ):
        self.tokens: list[Token] = list(tokens)
        self.pos = 0
        self.max_depth = max_depth
        self.logger = logger or logging.getLogger("CommandParser")

    def parse(self) -> ParseResult:
        """Parse the tokens into a ParseResult."""
        if not self.tokens:
            return Parsed(Sequence())

        if self.tokens[-1].type == TokenType.CONTINUATION:
            self.logger.debug("Line ends with a continuation, more input required")
            return ContinuationRequired()

        self.pos = 0
        try:
            command_line = self._parse_level(0)
        except ParserError as e:
            self.logger.debug("Parse failed at token %d: %s", self.pos, e.message)
            return Failed(e.message)

        self.logger.debug("Parsed %r", command_line)
        return Parsed(command_line)

    def _parse_level(self, level: int) -> CommandLine:
        """
        Parse one subshell level starting at the current position.

        Returns at a CLOSE_SUBSHELL (left for the caller to consume) or
        at end of input.
        """
        parts: list[Part] = []
        pending: list[Token] = []

        while self.pos < len(self.tokens):
            token = self.tokens[self.pos]

            if token.type == TokenType.LEX_ERROR:
                raise ParserError(token.value, token)

            if token.is_separator:
                self._flush(pending, parts)
                parts.append(token)

            elif token.type == TokenType.OPEN_SUBSHELL:
                self._flush(pending, parts)
                if level >= self.max_depth:
                    raise ParserError(constants.NESTED_TOO_DEEPLY, token)
                self.logger.debug("Entering subshell level %d", level + 1)
                self.pos += 1
                parts.append(self._parse_level(level + 1))
                # self.pos is now at the matching ')', skipped below

            elif token.type == TokenType.CLOSE_SUBSHELL:
                if level == 0:
                    raise ParserError(constants.UNEXPECTED_CLOSE, token)
                self._flush(pending, parts)
                return self._finish(parts, level)

            elif token.type == TokenType.CONTINUATION:
                pass  # only meaningful as the very last token

            else:
                pending.append(token)

            self.pos += 1

        if level > 0:
            raise ParserError(constants.EXPECTED_CLOSE)

        self._flush(pending, parts)
        return self._finish(parts, level)

    def _flush(self, pending: list[Token], parts: list[Part]) -> None:
        """Turn buffered words and redirections into a command part."""
        if pending:
            parts.append(make_command(pending))
            pending.clear()

    def _finish(self, parts: list[Part], level: int) -> CommandLine:
        """Fold the parts of one level into a single CommandLine."""
        if not parts:
            if level == 0:
                return Sequence()
            raise ParserError(constants.EMPTY_SUBSHELL)

        first, *rest = parts
        if isinstance(first, Token):
            raise ParserError(constants.NO_INITIAL_COMMAND, first)

        node = self._to_node(first)
        command_allowed = False
        command_required = False

        for part in rest:
            if isinstance(part, Token):
                if command_required:
                    raise ParserError(constants.SEPARATOR_WHERE_COMMAND_EXPECTED, part)
                node = self._fold_separator(node, part)
                command_allowed = True
                command_required = part.type != TokenType.BACKGROUND
            else:
                if not command_allowed:
                    raise ParserError(constants.COMMAND_WHERE_SEPARATOR_EXPECTED)
                node = self._fold_command(node, self._to_node(part))
                command_allowed = False
                command_required = False

        if command_required:
            raise ParserError(constants.MISSING_FINAL_COMMAND)

        return node

    @staticmethod
    def _to_node(part: Command | CommandLine) -> CommandLine:
        if isinstance(part, Command):
            return Singleton(part)
        return part

    @staticmethod
    def _fold_separator(node: CommandLine, separator: Token) -> CommandLine:
        """Apply a separator to everything accumulated so far."""
        if separator.type == TokenType.BACKGROUND:
            return Background(node)

        compound = _COMPOUND_FOR_SEPARATOR[separator.type]
        if type(node) is compound:
            return node
        return compound((node,))

    @staticmethod
    def _fold_command(node: CommandLine, child: CommandLine) -> CommandLine:
        """Add the command that follows a separator."""
        if isinstance(node, Background):
            # The backgrounded chain is launched, the rest runs in the foreground
            return Sequence((node, child))
        if not isinstance(node, COMPOUND_TYPES):
            raise AssertionError(f"Cannot append a command to {node!r}")
        return node.append(child)


def parse(tokens: Iterable[Token], **kwargs) -> ParseResult:
    """
    Parse a sequence of tokens into a command line.

    Args:
        tokens: Tokens from tokenize(), possibly several lines' worth
            concatenated after a continuation request
        **kwargs: Passed to CommandParser (max_depth, logger)

    Returns:
        Parsed, ContinuationRequired or Failed. On ContinuationRequired
        the caller must read another line and call parse() again with
        the new tokens appended to these.
    """
    return CommandParser(tokens, **kwargs).parse()
