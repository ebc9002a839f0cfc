"""Lexeme scanners for the MiniLang scanner.

Each mixin consumes one lexical category starting at the current position.
Scanners assume the caller has already checked the first character.
"""

from __future__ import annotations

from minilang.lexer.charsets import DIGITS, KEYWORDS, WORD_CHARS
from minilang.tokens import Token, TokenKind


class WordScannerMixin:
    """Mixin providing identifier, keyword, and integer scanning.

    Required Host Attributes:
        - _source: str
        - _source_len: int
        - _pos: int

    """

    _source: str
    _source_len: int
    _pos: int

    def _commit(self, kind: TokenKind, start: int) -> Token:
        """Create token for source[start:_pos]. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_run(self, chars: frozenset[str]) -> None:
        """Advance over a maximal run of characters from chars."""
        source = self._source
        pos = self._pos
        source_len = self._source_len
        while pos < source_len and source[pos] in chars:
            pos += 1
        self._pos = pos

    def _scan_word(self) -> Token:
        """Scan an identifier or keyword (maximal munch).

        ``abc123`` is one IDENTIFIER. Keywords are matched case-sensitively,
        so ``If`` is an IDENTIFIER.
        """
        start = self._pos
        self._scan_run(WORD_CHARS)
        if self._source[start : self._pos] in KEYWORDS:
            return self._commit(TokenKind.KEYWORD, start)
        return self._commit(TokenKind.IDENTIFIER, start)

    def _scan_integer(self) -> Token:
        """Scan a run of digits. The text is kept; no numeric value."""
        start = self._pos
        self._scan_run(DIGITS)
        return self._commit(TokenKind.INTEGER, start)


class SymbolScannerMixin:
    """Mixin providing single-character operator and comment scanning.

    Required Host Attributes:
        - _source: str
        - _source_len: int
        - _pos: int

    """

    _source: str
    _source_len: int
    _pos: int

    def _commit(self, kind: TokenKind, start: int) -> Token:
        """Create token for source[start:_pos]. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_single(self) -> Token:
        """Consume exactly one character as an OPERATOR token.

        Covers the arithmetic operators, parentheses, ``=`` and ``;`` as well
        as every character no other rule claims (braces included).
        """
        start = self._pos
        self._pos += 1
        return self._commit(TokenKind.OPERATOR, start)

    def _scan_comment(self) -> Token:
        """Scan from ``#`` up to, not including, the next newline."""
        start = self._pos
        idx = self._source.find("\n", start)
        self._pos = idx if idx != -1 else self._source_len
        return self._commit(TokenKind.COMMENT, start)
