"""Pull-based scanner with O(n) guaranteed performance.

Each call to next_token() skips whitespace, classifies the character under
the cursor, and consumes exactly one lexeme. The cursor only moves forward.

No regex in the hot path. Unknown characters are never errors: they become
one-character OPERATOR tokens.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from minilang.lexer.charsets import (
    ARITHMETIC_OPERATORS,
    COMMENT_START,
    DIGITS,
    PARENS,
    WHITESPACE,
    WORD_START,
)
from minilang.lexer.scanners import SymbolScannerMixin, WordScannerMixin
from minilang.tokens import Token, TokenKind


class Scanner(
    WordScannerMixin,
    SymbolScannerMixin,
):
    """Pull-based scanner for MiniLang source text.

    Usage:
            >>> scanner = Scanner("x = 1;")
            >>> scanner.next_token()
        Token(IDENTIFIER, 'x', 1:1)
            >>> [t.text for t in scanner]
        ['=', '1', ';']
            >>> scanner.next_token()
        Token(END_OF_FILE, '', 1:7)

    Once the source is exhausted every further call returns END_OF_FILE.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize scanner with source text.

        Args:
            source: MiniLang source text
            source_file: Optional source file path for diagnostics
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file

    @property
    def position(self) -> int:
        """Offset of the next unread character."""
        return self._pos

    def next_token(self) -> Token:
        """Consume and return the next token.

        Returns:
            The next Token; END_OF_FILE (empty text) once the source is
            exhausted, on this and every later call.
        """
        self._skip_whitespace()

        if self._pos >= self._source_len:
            return self._make_eof()

        char = self._source[self._pos]

        if char in WORD_START:
            return self._scan_word()
        if char in DIGITS:
            return self._scan_integer()
        if char in ARITHMETIC_OPERATORS or char in PARENS:
            return self._scan_single()
        if char == "=" or char == ";":
            return self._scan_single()
        if char == COMMENT_START:
            return self._scan_comment()
        # Unrecognized character, braces included
        return self._scan_single()

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the remaining source.

        Yields:
            Token objects one at a time, ending with exactly one END_OF_FILE.
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END_OF_FILE:
                return

    def __iter__(self) -> Iterator[Token]:
        """Iterate over the remaining tokens, END_OF_FILE excluded."""
        for token in self.tokenize():
            if token.kind is TokenKind.END_OF_FILE:
                return
            yield token

    # =========================================================================
    # Cursor helpers
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """Advance over whitespace, tracking line and column."""
        source = self._source
        source_len = self._source_len
        pos = self._pos
        while pos < source_len and source[pos] in WHITESPACE:
            if source[pos] == "\n":
                self._lineno += 1
                self._col = 1
            else:
                self._col += 1
            pos += 1
        self._pos = pos

    def _commit(self, kind: TokenKind, start: int) -> Token:
        """Create a token for source[start:_pos] and move the column past it.

        Lexemes never contain a newline, so only the column advances.
        """
        token = Token(
            kind=kind,
            text=self._source[start : self._pos],
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=start,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )
        self._col += self._pos - start
        return token

    def _make_eof(self) -> Token:
        return Token(
            kind=TokenKind.END_OF_FILE,
            text="",
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=self._pos,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )
