"""
AST Node definitions for the command-line parser.

This module defines the command and command-line node types produced
by the parser. All nodes are immutable; compound nodes hold their
children in tuples and are grown by building a new node.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Stream(Enum):
    """The standard streams a channel defaults to."""

    STDIN = "stdin"
    STDOUT = "stdout"
    STDERR = "stderr"


@dataclass(frozen=True)
class File:
    """A redirection target naming a file."""

    path: str

    def __repr__(self) -> str:
        return f"File({self.path!r})"


InputSource = Union[Stream, File]  # Stream.STDIN or File
OutputSink = Union[Stream, File]  # Stream.STDOUT, Stream.STDERR or File


@dataclass(frozen=True)
class Command:
    """
    A single executable unit: arguments plus its three channels.

    Each channel is set by at most one redirection; see make_command().
    """

    args: tuple[str, ...] = ()
    input: InputSource = Stream.STDIN
    output: OutputSink = Stream.STDOUT
    error: OutputSink = Stream.STDERR

    def __repr__(self) -> str:
        redirects = []
        if self.input != Stream.STDIN:
            redirects.append(f"input={self.input}")
        if self.output != Stream.STDOUT:
            redirects.append(f"output={self.output}")
        if self.error != Stream.STDERR:
            redirects.append(f"error={self.error}")
        if redirects:
            return f"Command({list(self.args)}, {', '.join(redirects)})"
        return f"Command({list(self.args)})"


@dataclass(frozen=True)
class Singleton:
    """A command line consisting of one command."""

    command: Command

    def __repr__(self) -> str:
        return f"Singleton({self.command})"


@dataclass(frozen=True)
class _Compound:
    """Base for the variadic nodes (pipelines, sequences, and/or chains)."""

    children: tuple["CommandLine", ...] = field(default_factory=tuple)

    def append(self, child: "CommandLine") -> "_Compound":
        """Return a copy of this node with child added at the end."""
        return type(self)(self.children + (child,))

    def __repr__(self) -> str:
        children_str = ", ".join(repr(child) for child in self.children)
        return f"{type(self).__name__}([{children_str}])"


@dataclass(frozen=True, repr=False)
class Pipeline(_Compound):
    """Commands connected by |; stdout feeds the next stdin."""


@dataclass(frozen=True, repr=False)
class Sequence(_Compound):
    """Commands connected by ; and run unconditionally in order."""


@dataclass(frozen=True, repr=False)
class And(_Compound):
    """Commands connected by &&; each runs if the previous succeeded."""


@dataclass(frozen=True, repr=False)
class Or(_Compound):
    """Commands connected by ||; each runs if the previous failed."""


@dataclass(frozen=True)
class Background:
    """A command line launched without waiting for it (trailing &)."""

    child: "CommandLine"

    def __repr__(self) -> str:
        return f"Background({self.child})"


CommandLine = Union[Singleton, Pipeline, Sequence, And, Or, Background]

COMPOUND_TYPES = (Pipeline, Sequence, And, Or)
