"""
Pytest configuration and shared fixtures for shline tests.

This module provides:
- Factories for the command-line nodes tests compare against
- Shortcuts from raw text to tokens, parse results and trees
"""

import pytest

from shline.lexer import Token, TokenType, tokenize
from shline.parser import Parsed, parse
from shline.syntax_tree import ASTTransformer, Command, Singleton


@pytest.fixture
def single():
    """Build a Singleton command line from its words and channels."""
    def _single(*args: str, **channels) -> Singleton:
        return Singleton(Command(args=tuple(args), **channels))
    return _single


@pytest.fixture
def word():
    """Build a WORD token."""
    def _word(text: str) -> Token:
        return Token(TokenType.WORD, text)
    return _word


@pytest.fixture
def parse_text():
    """Tokenize and parse a line, returning the ParseResult."""
    def _parse_text(text: str):
        return parse(tokenize(text))
    return _parse_text


@pytest.fixture
def parsed(parse_text):
    """Parse a line that must succeed and return its CommandLine."""
    def _parsed(text: str):
        result = parse_text(text)
        assert isinstance(result, Parsed), f"{text!r} gave {result!r}"
        return result.command_line
    return _parsed


@pytest.fixture
def transformer() -> ASTTransformer:
    return ASTTransformer()
