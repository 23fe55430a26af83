"""
shline - A shell command-line tokenizer and parser.

This package turns shell-style command lines into tokens and then
into an immutable tree of pipelines, sequences, && / || chains and
background jobs, with each command's arguments and redirections.
Nothing is executed.

Usage:
    from shline import tokenize, parse, Parsed

    result = parse(tokenize("make 2>&1 | tee build.log && make install"))
    if isinstance(result, Parsed):
        print(result.command_line)
"""

# Lazy imports to avoid circular import issues
_EXPORTS = {
    "tokenize": "shline.lexer",
    "Token": "shline.lexer",
    "TokenType": "shline.lexer",
    "CommandLexer": "shline.lexer",
    "parse": "shline.parser",
    "make_command": "shline.parser",
    "CommandParser": "shline.parser",
    "ParserError": "shline.parser",
    "ParseResult": "shline.parser",
    "Parsed": "shline.parser",
    "ContinuationRequired": "shline.parser",
    "Failed": "shline.parser",
    "ASTTransformer": "shline.syntax_tree",
    "Command": "shline.syntax_tree",
    "CommandLine": "shline.syntax_tree",
    "File": "shline.syntax_tree",
    "Stream": "shline.syntax_tree",
    "Singleton": "shline.syntax_tree",
    "Pipeline": "shline.syntax_tree",
    "Sequence": "shline.syntax_tree",
    "And": "shline.syntax_tree",
    "Or": "shline.syntax_tree",
    "Background": "shline.syntax_tree",
    "ParseSession": "shline.session",
    "parse_command_line": "shline.session",
}


def __getattr__(name: str):
    if name in _EXPORTS:
        from importlib import import_module
        return getattr(import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS)

__version__ = "0.1.0"
