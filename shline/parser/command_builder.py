"""
Command assembly - turns a run of word and redirection tokens into a Command.
"""

from typing import Iterable

from shline import constants
from shline.lexer import Token, TokenType
from shline.parser.results import ParserError
from shline.syntax_tree.nodes import Command, File, Stream

# Channel each redirection token sets
_CHANNELS = {
    TokenType.REDIRECT_OUTPUT: "output",
    TokenType.REDIRECT_INPUT: "input",
    TokenType.REDIRECT_ERROR: "error",
    TokenType.REDIRECT_ERROR_TO_OUTPUT: "error",
}


def make_command(tokens: Iterable[Token]) -> Command:
    """
    Build a Command from word and redirection tokens.

    Words become the argument list in order. Each redirection sets one
    channel; 2>&1 copies whatever output is at that point, so a later
    > does not move stderr with it.

    Args:
        tokens: Non-empty run of WORD and redirection tokens

    Returns:
        The assembled Command

    Raises:
        ParserError: If a channel is redirected twice or a token of
            another type is present
        ValueError: If tokens is empty
    """
    tokens = list(tokens)
    if not tokens:
        raise ValueError("make_command() requires at least one token")

    args: list[str] = []
    channels: dict[str, Stream | File] = {}

    for token in tokens:
        if token.type == TokenType.WORD:
            args.append(token.value)
            continue

        channel = _CHANNELS.get(token.type)
        if channel is None:
            raise ParserError(constants.UNEXPECTED_TOKEN.format(token=token), token)
        if channel in channels:
            raise ParserError(constants.MULTIPLE_REDIRECTS.format(channel=channel), token)

        if token.type == TokenType.REDIRECT_ERROR_TO_OUTPUT:
            channels["error"] = channels.get("output", Stream.STDOUT)
        else:
            channels[channel] = File(token.value)

    return Command(args=tuple(args), **channels)
