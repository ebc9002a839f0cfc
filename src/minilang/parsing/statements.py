"""Statement rules for the MiniLang recognizer.

Grammar:
    program        ::= statement            (unless at END_OF_FILE)
    statement      ::= assignment | conditional | printStatement
    assignment     ::= IDENTIFIER "=" expression ";"
    conditional    ::= "if" "(" expression ")" "{" program "}"
                       [ "else" "{" program "}" ]
    printStatement ::= "print" expression ";"

``program`` visits a single statement; it does not loop. Each rule returns
as soon as one of its expectations fails.
"""

from __future__ import annotations

from minilang.diagnostics import UNEXPECTED
from minilang.parsing.protocols import RecognizerHost
from minilang.tokens import TokenKind


class StatementParsingMixin:
    """Mixin providing program and statement rules."""

    def _program(self: RecognizerHost) -> None:
        if self._current().is_eof():
            return
        if not self._enter():
            return
        try:
            self._statement()
        finally:
            self._leave()

    def _statement(self: RecognizerHost) -> None:
        """Dispatch on the current token alone; no retry after an error."""
        token = self._current()
        if token.kind is TokenKind.IDENTIFIER:
            self._assignment()
        elif self._check_keyword("if"):
            self._conditional()
        elif self._check_keyword("print"):
            self._print_statement()
        else:
            self._fail(UNEXPECTED)

    def _assignment(self: RecognizerHost) -> None:
        self._consume()  # identifier
        if not self._expect("="):
            return
        self._expression()
        self._expect(";")

    def _conditional(self: RecognizerHost) -> None:
        self._consume()  # if
        if not self._expect("(", "Expected '(' after if"):
            return
        self._expression()
        if not self._expect(")"):
            return
        if not self._expect("{", "Expected '{' after if condition"):
            return
        self._program()
        if not self._expect("}"):
            return

        # else is only looked for right after the closing brace
        if not self._check("else"):
            return
        self._consume()
        if not self._expect("{", "Expected '{' after else"):
            return
        self._program()
        self._expect("}")

    def _print_statement(self: RecognizerHost) -> None:
        self._consume()  # print
        self._expression()
        self._expect(";")
