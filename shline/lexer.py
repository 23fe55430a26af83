"""
Lexer module for tokenizing command lines.

This module provides tokenization for shell-style command lines,
handling pipes and boolean operators, redirections, subshell
parentheses, quoted strings and trailing-backslash continuation.

Lexical problems never raise out of tokenize(): they are reported as a
final LEX_ERROR token and scanning stops there.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from shline import constants


class TokenType(Enum):
    """Token types for the command-line lexer."""

    # Literals
    WORD = auto()  # command names, arguments

    # Operators
    PIPE = auto()  # |
    OR = auto()  # ||
    AND = auto()  # &&
    BACKGROUND = auto()  # &
    SEQUENCE = auto()  # ;

    # Redirections (value is the target path)
    REDIRECT_OUTPUT = auto()  # > file
    REDIRECT_INPUT = auto()  # < file
    REDIRECT_ERROR = auto()  # 2> file
    REDIRECT_ERROR_TO_OUTPUT = auto()  # 2>&1

    # Grouping
    OPEN_SUBSHELL = auto()  # (
    CLOSE_SUBSHELL = auto()  # )

    # Special
    CONTINUATION = auto()  # \ at end of input
    LEX_ERROR = auto()


SEPARATOR_TYPES = frozenset({
    TokenType.PIPE,
    TokenType.OR,
    TokenType.AND,
    TokenType.BACKGROUND,
    TokenType.SEQUENCE,
})

REDIRECT_TYPES = frozenset({
    TokenType.REDIRECT_OUTPUT,
    TokenType.REDIRECT_INPUT,
    TokenType.REDIRECT_ERROR,
    TokenType.REDIRECT_ERROR_TO_OUTPUT,
})

# Token types that carry a value
_PAYLOAD_TYPES = frozenset({
    TokenType.WORD,
    TokenType.REDIRECT_OUTPUT,
    TokenType.REDIRECT_INPUT,
    TokenType.REDIRECT_ERROR,
    TokenType.LEX_ERROR,
})

_REDIRECT_PREFIXES = {
    TokenType.REDIRECT_OUTPUT: ">",
    TokenType.REDIRECT_INPUT: "<",
    TokenType.REDIRECT_ERROR: "2>",
}

_FIXED_TEXT = {
    TokenType.PIPE: "|",
    TokenType.OR: "||",
    TokenType.AND: "&&",
    TokenType.BACKGROUND: "&",
    TokenType.SEQUENCE: ";",
    TokenType.REDIRECT_ERROR_TO_OUTPUT: constants.ERROR_TO_OUTPUT,
    TokenType.OPEN_SUBSHELL: "(",
    TokenType.CLOSE_SUBSHELL: ")",
    TokenType.CONTINUATION: constants.CONTINUATION_CHAR,
}


@dataclass(frozen=True)
class Token:
    """Represents a single token from the lexer."""

    type: TokenType
    value: str = ""

    @property
    def is_separator(self) -> bool:
        """True for the operators that join commands (| || && & ;)."""
        return self.type in SEPARATOR_TYPES

    @property
    def is_redirect(self) -> bool:
        return self.type in REDIRECT_TYPES

    def __str__(self) -> str:
        """Render the token the way it would be typed on a command line."""
        if self.type in _REDIRECT_PREFIXES:
            return f"{_REDIRECT_PREFIXES[self.type]}{self.value}"
        if self.type in _FIXED_TEXT:
            return _FIXED_TEXT[self.type]
        return self.value

    def __repr__(self) -> str:
        if self.type in _PAYLOAD_TYPES:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name})"


class LexerError(Exception):
    """Exception raised for lexer errors."""

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(f"{message} at position {position}")


class CommandLexer:
    """
    Tokenizer for shell-style command lines.

    Handles:
    - Operators with shared prefixes (| and ||, & and &&)
    - Redirections (>, <, 2>, 2>&1) with their target paths
    - Subshell parentheses
    - Single quotes (verbatim) and double quotes (\\" and \\\\ escapes)
    - A trailing backslash, reported as a continuation request
    """

    def __init__(self, source: str, logger: logging.Logger | None = None):
        self.source = source
        self.pos = 0
        self.length = len(source)
        self.logger = logger or logging.getLogger("CommandLexer")

    def _current_char(self) -> str | None:
        """Return current character or None if at end."""
        if self.pos >= self.length:
            return None
        return self.source[self.pos]

    def _peek_char(self, offset: int = 1) -> str | None:
        """Peek at character at given offset from current position."""
        peek_pos = self.pos + offset
        if peek_pos >= self.length:
            return None
        return self.source[peek_pos]

    def _advance(self) -> str | None:
        """Advance position and return the character."""
        char = self._current_char()
        if char is not None:
            self.pos += 1
        return char

    def _skip_whitespace(self) -> None:
        while self._current_char() is not None and self._current_char().isspace():
            self._advance()

    def _is_separator_at(self, pos: int) -> bool:
        """Check whether a word would end at the given position."""
        if pos >= self.length:
            return True
        char = self.source[pos]
        if char.isspace() or char in constants.WORD_BREAK_CHARS:
            return True
        return char == constants.CONTINUATION_CHAR and pos == self.length - 1

    def _read_single_quoted(self) -> str:
        """Read a single-quoted run; its contents are taken verbatim."""
        start_pos = self.pos
        self._advance()  # skip opening quote

        end = self.source.find("'", self.pos)
        if end == -1:
            raise LexerError(constants.MISSING_SINGLE_QUOTE, start_pos)

        value = self.source[self.pos:end]
        self.pos = end + 1
        return value

    def _read_double_quoted(self) -> str:
        """Read a double-quoted run, resolving \\" and \\\\ only."""
        start_pos = self.pos
        self._advance()  # skip opening quote

        value_chars: list[str] = []
        while True:
            char = self._current_char()
            if char is None:
                raise LexerError(constants.MISSING_DOUBLE_QUOTE, start_pos)
            if char == '"':
                self._advance()  # skip closing quote
                break
            escaped = self._peek_char()
            if char == "\\" and escaped is not None:
                # Any other pair keeps its backslash
                if escaped not in ('"', "\\"):
                    value_chars.append("\\")
                value_chars.append(escaped)
                self.pos += 2
            else:
                value_chars.append(char)
                self._advance()

        return "".join(value_chars)

    def _read_word(self) -> str:
        """Read characters up to the next separator, joining quoted runs."""
        chars: list[str] = []
        while not self._is_separator_at(self.pos):
            char = self._current_char()
            if char == "'":
                chars.append(self._read_single_quoted())
            elif char == '"':
                chars.append(self._read_double_quoted())
            else:
                chars.append(char)
                self._advance()
        return "".join(chars)

    def _read_redirect(self, token_type: TokenType, channel: str, missing: str) -> Token:
        """Read the target path of a redirection whose operator was consumed."""
        self._skip_whitespace()
        start_pos = self.pos
        try:
            path = self._read_word()
        except LexerError as e:
            raise LexerError(
                constants.BAD_REDIRECT_TARGET.format(channel=channel), e.position
            ) from e

        if not path:
            raise LexerError(missing, start_pos)
        return Token(token_type, path)

    def _read_token(self) -> Token:
        """Read one token starting at the current (non-whitespace) character."""
        char = self._current_char()

        # Operators sharing a first character
        if char == "|":
            if self._peek_char() == "|":
                self.pos += 2
                return Token(TokenType.OR)
            self._advance()
            return Token(TokenType.PIPE)

        if char == "&":
            if self._peek_char() == "&":
                self.pos += 2
                return Token(TokenType.AND)
            self._advance()
            return Token(TokenType.BACKGROUND)

        single_char_tokens = {
            ";": TokenType.SEQUENCE,
            "(": TokenType.OPEN_SUBSHELL,
            ")": TokenType.CLOSE_SUBSHELL,
        }

        if char in single_char_tokens:
            self._advance()
            return Token(single_char_tokens[char])

        # Redirections
        if char == ">":
            self._advance()
            return self._read_redirect(
                TokenType.REDIRECT_OUTPUT, "output", constants.NO_OUTPUT_FILE
            )

        if char == "<":
            self._advance()
            return self._read_redirect(
                TokenType.REDIRECT_INPUT, "input", constants.NO_INPUT_FILE
            )

        if char == "2" and self._peek_char() == ">":
            width = len(constants.ERROR_TO_OUTPUT)
            if self.source.startswith(constants.ERROR_TO_OUTPUT, self.pos) and (
                self._is_separator_at(self.pos + width)
            ):
                self.pos += width
                return Token(TokenType.REDIRECT_ERROR_TO_OUTPUT)
            self.pos += 2
            return self._read_redirect(
                TokenType.REDIRECT_ERROR, "error", constants.NO_ERROR_FILE
            )

        if char == constants.CONTINUATION_CHAR and self.pos == self.length - 1:
            self._advance()
            return Token(TokenType.CONTINUATION)

        return Token(TokenType.WORD, self._read_word())

    def tokenize_iter(self) -> Iterator[Token]:
        """
        Tokenize as an iterator.

        A lexical error is yielded as a LEX_ERROR token and ends the
        iteration; tokens yielded before it remain valid.
        """
        self._skip_whitespace()
        while self.pos < self.length:
            try:
                token = self._read_token()
            except LexerError as e:
                self.logger.debug("Lexical error: %s", e)
                yield Token(TokenType.LEX_ERROR, e.message)
                return
            self.logger.debug("Read %r, now at position %d", token, self.pos)
            yield token
            self._skip_whitespace()

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source string."""
        return list(self.tokenize_iter())


def tokenize(text: str) -> list[Token]:
    """
    Tokenize a command line.

    Args:
        text: The command line as typed, without a trailing newline

    Returns:
        List of tokens, possibly ending in a single LEX_ERROR token

    Example:
        >>> tokenize("wc -l < file.txt")
        [Token(WORD, 'wc'), Token(WORD, '-l'), Token(REDIRECT_INPUT, 'file.txt')]
    """
    return CommandLexer(text).tokenize()
