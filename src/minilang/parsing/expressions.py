"""Arithmetic expression rules for the MiniLang recognizer.

Grammar (left recursion already eliminated):
    expression ::= term { ("+" | "-") term }
    term       ::= factor { ("*" | "/") factor }
    factor     ::= INTEGER | IDENTIFIER | "(" expression ")"
"""

from __future__ import annotations

from minilang.diagnostics import UNEXPECTED
from minilang.parsing.protocols import RecognizerHost
from minilang.tokens import TokenKind

ADDITIVE_OPERATORS = frozenset({"+", "-"})
MULTIPLICATIVE_OPERATORS = frozenset({"*", "/"})


class ExpressionParsingMixin:
    """Mixin providing expression, term, and factor rules."""

    def _expression(self: RecognizerHost) -> None:
        # Parenthesized factors re-enter here, so this is where depth is counted
        if not self._enter():
            return
        try:
            self._term()
            while self._current().text in ADDITIVE_OPERATORS:
                self._consume()
                self._term()
        finally:
            self._leave()

    def _term(self: RecognizerHost) -> None:
        self._factor()
        while self._current().text in MULTIPLICATIVE_OPERATORS:
            self._consume()
            self._factor()

    def _factor(self: RecognizerHost) -> None:
        token = self._current()
        if token.kind is TokenKind.INTEGER or token.kind is TokenKind.IDENTIFIER:
            self._consume()
        elif token.text == "(":
            self._consume()
            self._expression()
            self._expect(")")
        else:
            self._fail(UNEXPECTED)
