"""
Parser module for command-line syntax analysis.

This module provides the recursive descent parser that converts
tokens into CommandLine trees, and the command assembly step it uses.
"""

from .command_builder import make_command
from .command_parser import CommandParser, parse
from .results import ContinuationRequired, Failed, ParseResult, Parsed, ParserError

__all__ = [
    "CommandParser",
    "ParserError",
    "ParseResult",
    "Parsed",
    "ContinuationRequired",
    "Failed",
    "make_command",
    "parse",
]
