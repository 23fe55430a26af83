"""
Tests for ASTTransformer - plain data, source rendering and tree dumps.
"""

import json

import pytest

from shline.lexer import tokenize
from shline.parser import Parsed, parse
from shline.syntax_tree import Command, File, Singleton, Stream


class TestTransformToPython:
    """Tests for converting trees to dicts."""

    def test_command(self, transformer):
        command = Command(args=("grep", "x"), output=File("out"), error=Stream.STDOUT)
        assert transformer.transform_command(command) == {
            "type": "command",
            "args": ["grep", "x"],
            "input": "stdin",
            "output": {"file": "out"},
            "error": "stdout",
        }

    def test_nested_tree(self, transformer, parsed):
        tree = parsed("cat < in | grep x > out 2>&1 &")
        assert transformer.transform_command_line(tree) == {
            "type": "background",
            "child": {
                "type": "pipeline",
                "children": [
                    {
                        "type": "command",
                        "args": ["cat"],
                        "input": {"file": "in"},
                        "output": "stdout",
                        "error": "stderr",
                    },
                    {
                        "type": "command",
                        "args": ["grep", "x"],
                        "input": "stdin",
                        "output": {"file": "out"},
                        "error": {"file": "out"},
                    },
                ],
            },
        }

    def test_result_is_json_serializable(self, transformer, parsed):
        tree = parsed("a && b || (c ; d) &")
        data = json.loads(json.dumps(transformer.transform_command_line(tree)))
        assert data["type"] == "background"
        assert data["child"]["type"] == "or"
        assert data["child"]["children"][1]["type"] == "sequence"

    def test_empty_line(self, transformer, parsed):
        assert transformer.transform_command_line(parsed("")) == {
            "type": "sequence",
            "children": [],
        }


class TestToSource:
    """Tests for rendering trees back to shell text."""

    @pytest.mark.parametrize("text", [
        "a && b | c",
        "a | (b && c)",
        "cmd1 & cmd2",
        "a & b ; c",
        "x & && y",
        "a ; (b | c) ; d",
        "sort 2>&1 >out",
        "sort <in >out 2>err",
    ])
    def test_canonical_text_is_unchanged(self, transformer, parsed, text):
        assert transformer.to_source(parsed(text)) == text

    def test_quoting(self, transformer):
        tree = Singleton(Command(args=("echo", "hello world", "it's", "", "a|b")))
        assert transformer.to_source(tree) == "echo 'hello world' \"it's\" '' 'a|b'"

    def test_quoted_redirect_target(self, transformer):
        tree = Singleton(Command(args=("cat",), input=File("my file")))
        assert transformer.to_source(tree) == "cat <'my file'"

    @pytest.mark.parametrize("text", [
        "a && b | c",
        "a | (b && c) || d",
        "a & b & c &",
        "(a || b) ; c &",
        'echo "x y" > out 2>&1',
        r'printf "%s\n" a\b',
        "cat <'in file' | tee out",
        "(a & b) | c",
        "echo \"it's\" 'say \"hi\"'",
        "a | (b ; (c && d)) ; (e &)",
        "",
    ])
    def test_rendered_text_parses_to_same_tree(self, transformer, parsed, text):
        tree = parsed(text)
        assert parse(tokenize(transformer.to_source(tree))) == Parsed(tree)

    def test_unrenderable_channel(self, transformer):
        tree = Singleton(Command(args=("x",), output=Stream.STDERR))
        with pytest.raises(ValueError):
            transformer.to_source(tree)


class TestFormatTree:
    """Tests for the indented tree dump."""

    def test_format_tree(self, transformer, parsed):
        tree = parsed("a && b > out &")
        assert transformer.format_tree(tree) == "\n".join([
            "Background:",
            "  And:",
            "    Command: a",
            "    Command: b",
            "      output: out",
        ])

    def test_format_tree_shows_all_channels(self, transformer, parsed):
        assert transformer.format_tree(parsed("sort <in 2>&1")) == "\n".join([
            "Command: sort",
            "  input: in",
            "  error: stdout",
        ])
