"""Protocols defining the recognizer mixin contracts.

Mixin methods that call across mixin boundaries annotate ``self`` as the
protocol they require::

    def _factor(self: RecognizerHost) -> None:
        self._expression()  # provided by ExpressionParsingMixin

Type checkers verify that the concrete Recognizer satisfies the protocol.
"""

from collections.abc import Sequence
from typing import Protocol

from minilang.tokens import Token


class RecognizerHost(Protocol):
    """Contract for grammar rule mixins.

    Provided by: TokenNavigationMixin, StatementParsingMixin,
    ExpressionParsingMixin, Recognizer
    """

    _tokens: Sequence[Token]
    _pos: int
    _depth: int
    _max_depth: int

    # Token navigation
    def _current(self) -> Token: ...
    def _at_end(self) -> bool: ...
    def _consume(self) -> None: ...
    def _check(self, text: str) -> bool: ...
    def _check_keyword(self, word: str) -> bool: ...
    def _expect(self, text: str, reason: str | None = None) -> bool: ...
    def _fail(self, reason: str) -> None: ...

    # Grammar rules
    def _enter(self) -> bool: ...
    def _leave(self) -> None: ...
    def _program(self) -> None: ...
    def _statement(self) -> None: ...
    def _assignment(self) -> None: ...
    def _conditional(self) -> None: ...
    def _print_statement(self) -> None: ...
    def _expression(self) -> None: ...
    def _term(self) -> None: ...
    def _factor(self) -> None: ...
