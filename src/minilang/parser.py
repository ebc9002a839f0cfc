"""Recursive descent recognizer for MiniLang.

Validates a token stream against the MiniLang grammar. It builds no tree:
its only output is the list of diagnostics for grammar violations.

Architecture:
The recognizer uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Parse cursor and report-and-skip recovery
- `StatementParsingMixin`: program and statement rules
- `ExpressionParsingMixin`: arithmetic expression rules

Error Recovery:
On a violation the current rule reports what it expected and what it found,
skips that one token, and returns. There is no resynchronisation, so one
mistake can produce further diagnostics in enclosing rules.

Thread Safety:
- Recognizer instances are single-use and not thread-safe
- Configuration is read from ContextVar (thread-local)

"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from minilang.config import get_parse_config
from minilang.diagnostics import Diagnostic
from minilang.errors import MiniLangError, RecognitionError
from minilang.parsing import (
    ExpressionParsingMixin,
    StatementParsingMixin,
    TokenNavigationMixin,
)
from minilang.tokens import Token, TokenKind
from minilang.utils.logger import get_logger

logger = get_logger(__name__)


class Recognizer(
    TokenNavigationMixin,
    StatementParsingMixin,
    ExpressionParsingMixin,
):
    """Grammar-driven recognizer with local error repair.

    Usage:
            >>> from minilang import tokenize
            >>> recognizer = Recognizer(tokenize("x = 1"))
            >>> [d.message for d in recognizer.recognize()]
        ["Syntax error: Expected ';', found "]

    Configuration:
        ``max_depth`` and ``strict`` are read from the active ParseConfig
        when recognize() starts. Use parse_config_context() to change them.

    """

    __slots__ = (
        "_tokens",
        "_tokens_len",
        "_pos",
        "_eof",
        "_diagnostics",
        "_on_diagnostic",
        "_depth",
        "_max_depth",
        "_done",
    )

    def __init__(
        self,
        tokens: Iterable[Token],
        on_diagnostic: Callable[[Diagnostic], None] | None = None,
    ) -> None:
        """Initialize recognizer with a token stream.

        Args:
            tokens: Scanned tokens. A trailing END_OF_FILE token is optional;
                if present it is used as the end marker, otherwise one is
                synthesized just past the last token.
            on_diagnostic: Optional callback invoked with each diagnostic as
                soon as it is reported
        """
        stream = tuple(tokens)
        if stream and stream[-1].kind is TokenKind.END_OF_FILE:
            self._eof = stream[-1]
            stream = stream[:-1]
        else:
            self._eof = _eof_after(stream[-1] if stream else None)

        self._tokens: tuple[Token, ...] = stream
        self._tokens_len = len(stream)
        self._pos = 0
        self._diagnostics: list[Diagnostic] = []
        self._on_diagnostic = on_diagnostic
        self._depth = 0
        self._max_depth = 0  # Read from config in recognize()
        self._done = False

    @property
    def position(self) -> int:
        """Index of the next unvisited token."""
        return self._pos

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    @property
    def remaining(self) -> tuple[Token, ...]:
        """Tokens the recognizer has not consumed."""
        return self._tokens[self._pos :]

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    def recognize(self) -> tuple[Diagnostic, ...]:
        """Match the token stream against the grammar.

        Returns:
            Diagnostics in the order they were reported; empty when the
            visited input is grammatical.

        Raises:
            MiniLangError: If this recognizer has already run.
            RecognitionError: In strict mode, after a run with diagnostics.
        """
        if self._done:
            raise MiniLangError("Recognizer instances are single-use")
        self._done = True

        config = get_parse_config()
        self._max_depth = config.max_depth

        self._program()

        diagnostics = tuple(self._diagnostics)
        logger.debug(
            "Recognized %d of %d tokens with %d diagnostic(s)",
            self._pos,
            self._tokens_len,
            len(diagnostics),
        )
        if diagnostics and config.strict:
            raise RecognitionError(diagnostics)
        return diagnostics

    # =========================================================================
    # Depth guard
    # =========================================================================

    def _enter(self) -> bool:
        """Enter a nested rule; fail the current token if too deep."""
        if self._depth >= self._max_depth:
            self._fail("Nesting too deep")
            return False
        self._depth += 1
        return True

    def _leave(self) -> None:
        self._depth -= 1

    def _fail(self, reason: str) -> None:
        logger.debug("%s, found %r", reason, self._current())
        super()._fail(reason)


def _eof_after(last: Token | None) -> Token:
    """Synthesize the END_OF_FILE token that follows last."""
    if last is None:
        return Token(kind=TokenKind.END_OF_FILE, text="")
    end_col = last.col + len(last.text)
    return Token(
        kind=TokenKind.END_OF_FILE,
        text="",
        _lineno=last.lineno,
        _col=end_col,
        _start_offset=last.span[1],
        _end_offset=last.span[1],
        _source_file=last.source_file,
    )
