"""
MiniLang — scanner and recognizer for a small imperative language

A pull-based scanner turns source text into tokens; a recursive-descent
recognizer checks them against the MiniLang grammar and reports syntax
errors with local recovery. No tree is built and nothing is evaluated.

Quick Start:
    >>> from minilang import recognize, tokenize
    >>> [t.text for t in tokenize("print 1 + 2;")]
    ['print', '1', '+', '2', ';']
    >>> recognize("print 1 + 2;")
    ()
    >>> [d.message for d in recognize("x = 1")]
    ["Syntax error: Expected ';', found "]

Grammar:
    program     ::= statement
    statement   ::= assignment | conditional | printStatement
    assignment  ::= IDENTIFIER "=" expression ";"
    conditional ::= "if" "(" expression ")" "{" program "}"
                    [ "else" "{" program "}" ]
    printStatement ::= "print" expression ";"
    expression  ::= term { ("+" | "-") term }
    term        ::= factor { ("*" | "/") factor }
    factor      ::= INTEGER | IDENTIFIER | "(" expression ")"

Command line:
    minilang 'if (x) { print x; }'
"""

from collections.abc import Callable

from minilang.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from minilang.diagnostics import Diagnostic
from minilang.errors import (
    ConfigError,
    MiniLangError,
    ParseError,
    RecognitionError,
)
from minilang.lexer import Scanner
from minilang.location import SourceLocation
from minilang.parser import Recognizer
from minilang.tokens import Token, TokenKind

__version__ = "0.1.0"


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Scan source into the token list the recognizer consumes.

    Args:
        source: MiniLang source text
        source_file: Optional source file path for diagnostics

    Returns:
        Tokens in scan order, END_OF_FILE excluded.
    """
    return list(Scanner(source, source_file))


def recognize(
    source: str,
    *,
    source_file: str | None = None,
    on_diagnostic: Callable[[Diagnostic], None] | None = None,
) -> tuple[Diagnostic, ...]:
    """Scan and recognize source in one step.

    Args:
        source: MiniLang source text
        source_file: Optional source file path for diagnostics
        on_diagnostic: Optional callback invoked with each diagnostic

    Returns:
        Diagnostics in report order; empty for grammatical input.

    Raises:
        RecognitionError: In strict mode, if any diagnostic was reported.
    """
    scanner = Scanner(source, source_file)
    return Recognizer(scanner.tokenize(), on_diagnostic).recognize()


__all__ = [
    # Main API
    "tokenize",
    "recognize",
    "Scanner",
    "Recognizer",
    # Values
    "Token",
    "TokenKind",
    "Diagnostic",
    "SourceLocation",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "MiniLangError",
    "ParseError",
    "RecognitionError",
    "ConfigError",
    "__version__",
]
