"""
AST Transformer for converting command lines to other representations.

This module provides utilities for handing a parsed CommandLine to an
executor as plain data, rendering it back to shell text, and dumping
it as an indented tree for debugging.
"""

from typing import Any

from shline.syntax_tree.nodes import (
    And,
    Background,
    Command,
    CommandLine,
    File,
    Or,
    Pipeline,
    Sequence,
    Singleton,
    Stream,
)

_COMPOUND_NAMES = {
    Pipeline: "pipeline",
    Sequence: "sequence",
    And: "and",
    Or: "or",
}

_SEPARATOR_TEXT = {
    Pipeline: " | ",
    Sequence: " ; ",
    And: " && ",
    Or: " || ",
}

# Characters that force a word to be quoted when rendered
_SPECIAL_CHARS = frozenset("<>;&|()'\"\\")


class ASTTransformer:
    """
    Transforms CommandLine trees into other formats.

    Provides methods to convert a tree to:
    - plain dicts and lists (for executors and JSON output)
    - shell source text that parses back to the same tree
    - an indented text dump
    """

    def transform_command_line(self, node: CommandLine) -> dict[str, Any]:
        """
        Transform a CommandLine to nested dicts.

        Args:
            node: The CommandLine to transform

        Returns:
            Dictionary with a "type" key; commands carry their args and
            channels, compound nodes a "children" list and background
            nodes a single "child"
        """
        if isinstance(node, Singleton):
            return self.transform_command(node.command)

        if isinstance(node, Background):
            return {
                "type": "background",
                "child": self.transform_command_line(node.child),
            }

        return {
            "type": _COMPOUND_NAMES[type(node)],
            "children": [self.transform_command_line(child) for child in node.children],
        }

    def transform_command(self, command: Command) -> dict[str, Any]:
        """Transform a Command to a dict with its args and channels."""
        return {
            "type": "command",
            "args": list(command.args),
            "input": self._channel_to_python(command.input),
            "output": self._channel_to_python(command.output),
            "error": self._channel_to_python(command.error),
        }

    def to_source(self, node: CommandLine) -> str:
        """
        Render a CommandLine as shell text.

        Tokenizing and parsing the result gives back an equal tree for
        any tree the parser produces. Nested compound nodes are wrapped
        in parentheses unless they lead their parent and are of a
        different kind, since the left-to-right fold regroups those the
        same way without help.

        Raises:
            ValueError: If a command has a channel no redirection can express
        """
        if isinstance(node, Singleton):
            return self._command_to_source(node.command)

        if isinstance(node, Background):
            return f"{self.to_source(node.child)} &"

        pieces: list[str] = []
        for index, child in enumerate(node.children):
            text = self.to_source(child)
            if self._needs_parentheses(node, child, index):
                text = f"({text})"
            pieces.append(text)

        separator = _SEPARATOR_TEXT[type(node)]
        if isinstance(node, Sequence) and node.children and isinstance(node.children[0], Background):
            # "a & b" already means Sequence([Background(a), b])
            return " ".join(pieces[:2]) + "".join(separator + piece for piece in pieces[2:])
        return separator.join(pieces)

    def format_tree(self, node: CommandLine, indent: int = 0) -> str:
        """Return an indented, one-node-per-line dump of the tree."""
        lines: list[str] = []
        self._format_node(node, indent, lines)
        return "\n".join(lines)

    def _format_node(self, node: CommandLine, indent: int, lines: list[str]) -> None:
        prefix = "  " * indent

        if isinstance(node, Singleton):
            lines.append(f"{prefix}Command: {' '.join(node.command.args)}".rstrip())
            command = node.command
            if command.input != Stream.STDIN:
                lines.append(f"{prefix}  input: {self._channel_to_string(command.input)}")
            if command.output != Stream.STDOUT:
                lines.append(f"{prefix}  output: {self._channel_to_string(command.output)}")
            if command.error != Stream.STDERR:
                lines.append(f"{prefix}  error: {self._channel_to_string(command.error)}")

        elif isinstance(node, Background):
            lines.append(f"{prefix}Background:")
            self._format_node(node.child, indent + 1, lines)

        else:
            lines.append(f"{prefix}{type(node).__name__}:")
            for child in node.children:
                self._format_node(child, indent + 1, lines)

    @staticmethod
    def _needs_parentheses(parent: CommandLine, child: CommandLine, index: int) -> bool:
        if isinstance(child, Singleton):
            return False
        if index > 0:
            return True
        return type(child) is type(parent)

    def _command_to_source(self, command: Command) -> str:
        """Render a Command as words followed by its redirections."""
        pieces = [self._quote(arg) for arg in command.args]

        if isinstance(command.input, File):
            pieces.append("<" + self._quote(command.input.path))
        elif command.input != Stream.STDIN:
            raise ValueError(f"Cannot render input {command.input!r}")

        # 2>&1 copies stdout as it is when read, so it must come first
        if command.error == Stream.STDOUT:
            pieces.append("2>&1")

        if isinstance(command.output, File):
            pieces.append(">" + self._quote(command.output.path))
        elif command.output != Stream.STDOUT:
            raise ValueError(f"Cannot render output {command.output!r}")

        if isinstance(command.error, File):
            pieces.append("2>" + self._quote(command.error.path))
        elif command.error not in (Stream.STDERR, Stream.STDOUT):
            raise ValueError(f"Cannot render error {command.error!r}")

        return " ".join(pieces)

    @staticmethod
    def _quote(word: str) -> str:
        """Quote a word so the lexer reads it back unchanged."""
        if word and not any(char.isspace() or char in _SPECIAL_CHARS for char in word):
            return word
        if "'" not in word:
            return f"'{word}'"
        escaped = word.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'

    @staticmethod
    def _channel_to_python(channel: Stream | File) -> Any:
        if isinstance(channel, File):
            return {"file": channel.path}
        return channel.value

    @staticmethod
    def _channel_to_string(channel: Stream | File) -> str:
        if isinstance(channel, File):
            return channel.path
        return channel.value
