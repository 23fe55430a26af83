"""
Tests for make_command - assembling words and redirections into a Command.
"""

import pytest

from shline.lexer import Token, TokenType, tokenize
from shline.parser import ParserError, make_command
from shline.syntax_tree import Command, File, Stream


class TestArguments:
    """Tests for argument lists."""

    def test_words_become_args(self):
        assert make_command(tokenize("grep -i foo")) == Command(args=("grep", "-i", "foo"))

    def test_default_channels(self):
        command = make_command(tokenize("ls"))
        assert command.input == Stream.STDIN
        assert command.output == Stream.STDOUT
        assert command.error == Stream.STDERR

    def test_redirects_only(self):
        """A command may consist of redirections alone."""
        assert make_command(tokenize(">out")) == Command(output=File("out"))

    def test_empty_token_list_is_rejected(self):
        with pytest.raises(ValueError):
            make_command([])


class TestRedirections:
    """Tests for setting the input, output and error channels."""

    def test_all_three_channels(self):
        command = make_command(tokenize("wc <in >out 2>err"))
        assert command == Command(
            args=("wc",), input=File("in"), output=File("out"), error=File("err")
        )

    def test_redirects_may_precede_words(self):
        assert make_command(tokenize("<in sort -r")) == Command(
            args=("sort", "-r"), input=File("in")
        )

    def test_error_to_output_copies_file(self):
        command = make_command(tokenize("make >build.log 2>&1"))
        assert command.error == File("build.log")

    def test_error_to_output_copies_value_not_link(self):
        """A later > does not drag stderr along."""
        command = make_command(tokenize("make 2>&1 >build.log"))
        assert command.output == File("build.log")
        assert command.error == Stream.STDOUT


class TestConflicts:
    """Tests for redirecting one channel twice."""

    def test_multiple_error_redirects(self):
        with pytest.raises(ParserError, match="Multiple error redirects."):
            make_command(tokenize("foo bar 2>&1 2>/dev/null >baz"))

    def test_error_file_then_error_to_output(self):
        with pytest.raises(ParserError, match="Multiple error redirects."):
            make_command(tokenize("foo 2>err 2>&1"))

    def test_multiple_output_redirects(self):
        with pytest.raises(ParserError, match="Multiple output redirects."):
            make_command(tokenize("foo >a >b"))

    def test_multiple_input_redirects(self):
        with pytest.raises(ParserError, match="Multiple input redirects."):
            make_command(tokenize("foo <a <a"))

    def test_error_carries_offending_token(self):
        with pytest.raises(ParserError) as exc_info:
            make_command(tokenize("foo >a >b"))
        assert exc_info.value.token == Token(TokenType.REDIRECT_OUTPUT, "b")


class TestUnexpectedTokens:
    """Tests for tokens that cannot be part of a command."""

    @pytest.mark.parametrize("token,rendering", [
        (Token(TokenType.PIPE), "|"),
        (Token(TokenType.OPEN_SUBSHELL), "("),
        (Token(TokenType.CONTINUATION), "\\"),
        (Token(TokenType.LEX_ERROR, "Missing '."), "Missing '."),
    ])
    def test_unexpected_token(self, token, rendering):
        with pytest.raises(ParserError) as exc_info:
            make_command([Token(TokenType.WORD, "foo"), token])
        assert exc_info.value.message == f"Unexpected token: {rendering}."
