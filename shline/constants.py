"""
Constants shared by the lexer and the parser.

Separator characters, the error message taxonomy and parsing limits.
"""

# ============================================================================
# LEXICAL
# ============================================================================

# Characters that end a word (whitespace is checked separately)
WORD_BREAK_CHARS = "<>;&|()"

CONTINUATION_CHAR = "\\"

# Stderr-to-stdout duplication, recognized only as a whole token
ERROR_TO_OUTPUT = "2>&1"


# ============================================================================
# LIMITS
# ============================================================================

# Deepest (...) nesting accepted before the parser gives up
MAX_SUBSHELL_DEPTH = 200


# ============================================================================
# ERROR MESSAGES
# ============================================================================

# Lexical
NO_OUTPUT_FILE = "No output file specified."
NO_INPUT_FILE = "No input file specified."
NO_ERROR_FILE = "No error file specified."
MISSING_SINGLE_QUOTE = "Missing '."
MISSING_DOUBLE_QUOTE = 'Missing ".'
BAD_REDIRECT_TARGET = "Could not parse file name for {channel} redirection."

# Command assembly
MULTIPLE_REDIRECTS = "Multiple {channel} redirects."
UNEXPECTED_TOKEN = "Unexpected token: {token}."

# Grammar
UNEXPECTED_CLOSE = "Unexpected ')'."
EXPECTED_CLOSE = "Expected ')'"
NO_INITIAL_COMMAND = "No initial command."
COMMAND_WHERE_SEPARATOR_EXPECTED = "Found a command where a separator was expected."
SEPARATOR_WHERE_COMMAND_EXPECTED = "Found a separator where a command was expected."
MISSING_FINAL_COMMAND = "Missing command at end of line."
EMPTY_SUBSHELL = "Empty subshell."
NESTED_TOO_DEEPLY = "Subshells nested too deeply."
