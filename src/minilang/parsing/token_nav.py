"""Token navigation utilities for the MiniLang recognizer.

Provides the mixin that owns the parse cursor: reading the current token,
consuming, matching expected text, and the report-and-skip recovery step.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from minilang.diagnostics import Diagnostic
from minilang.tokens import Token, TokenKind


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[Token] (END_OF_FILE excluded)
        - _tokens_len: int (cached len(_tokens))
        - _pos: int
        - _eof: Token (returned once the cursor is past the last token)
        - _diagnostics: list[Diagnostic]
        - _on_diagnostic: Callable[[Diagnostic], None] | None

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int
    _eof: Token
    _diagnostics: list[Diagnostic]
    _on_diagnostic: Callable[[Diagnostic], None] | None

    def _current(self) -> Token:
        """Token under the cursor, or the END_OF_FILE token past the end."""
        if self._pos < self._tokens_len:
            return self._tokens[self._pos]
        return self._eof

    def _at_end(self) -> bool:
        return self._pos >= self._tokens_len

    def _consume(self) -> None:
        """Move past the current token. No-op at one-past-end."""
        if self._pos < self._tokens_len:
            self._pos += 1

    def _check(self, text: str) -> bool:
        """Whether the current token's text is exactly text."""
        return self._current().text == text

    def _check_keyword(self, word: str) -> bool:
        token = self._current()
        return token.kind is TokenKind.KEYWORD and token.text == word

    def _expect(self, text: str, reason: str | None = None) -> bool:
        """Consume the current token if its text is text, else fail.

        Args:
            text: Exact token text required here
            reason: Diagnostic reason; defaults to ``Expected '<text>'``

        Returns:
            True if matched. On mismatch, a diagnostic is reported, the
            offending token is skipped, and False is returned so the caller
            rule can return.
        """
        if self._check(text):
            self._consume()
            return True
        self._fail(reason or f"Expected '{text}'")
        return False

    def _fail(self, reason: str) -> None:
        """Report the current token as a violation and skip it."""
        diagnostic = Diagnostic(reason=reason, found=self._current())
        self._diagnostics.append(diagnostic)
        if self._on_diagnostic is not None:
            self._on_diagnostic(diagnostic)
        self._consume()
