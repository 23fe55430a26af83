"""
Syntax Tree module for command-line parsing.

This module defines the node types that represent parsed command
lines and provides transformation utilities.

Note: Named 'syntax_tree' instead of 'ast' to avoid conflict with Python's built-in ast module.
"""

from shline.syntax_tree.nodes import (
    And,
    Background,
    Command,
    CommandLine,
    File,
    InputSource,
    Or,
    OutputSink,
    Pipeline,
    Sequence,
    Singleton,
    Stream,
)
from shline.syntax_tree.transformer import ASTTransformer

__all__ = [
    "Stream",
    "File",
    "InputSource",
    "OutputSink",
    "Command",
    "CommandLine",
    "Singleton",
    "Pipeline",
    "Sequence",
    "And",
    "Or",
    "Background",
    "ASTTransformer",
]
