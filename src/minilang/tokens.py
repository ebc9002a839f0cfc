"""Token and TokenKind definitions for the MiniLang scanner.

The scanner produces Token objects one at a time; the recognizer consumes
them as a pre-materialized sequence. Each Token has a kind, the exact
lexeme it was built from, and its source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand,
so tokens whose location is never read cost no extra allocation.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minilang.location import SourceLocation


class TokenKind(Enum):
    """Lexical categories of MiniLang.

    BOOLEAN is part of the vocabulary but the scanner never produces it:
    ``true`` and ``false`` scan as KEYWORD.

    """

    INTEGER = auto()
    BOOLEAN = auto()
    IDENTIFIER = auto()
    OPERATOR = auto()  # Also the fallback for any unrecognized character
    KEYWORD = auto()
    COMMENT = auto()  # From # to end of line
    END_OF_FILE = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        kind: The token category (from TokenKind enum)
        text: The exact lexeme from source; empty for END_OF_FILE
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _source_file: Optional source file path

    """

    kind: TokenKind
    text: str
    _lineno: int = 1
    _col: int = 1
    _start_offset: int = 0
    _end_offset: int = 0
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from minilang.location import SourceLocation

        # Lexemes never span a newline
        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._lineno,
            end_col_offset=self._col + (self._end_offset - self._start_offset),
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def span(self) -> tuple[int, int]:
        """Half-open ``(start, end)`` offsets of the lexeme in source."""
        return self._start_offset, self._end_offset

    def is_eof(self) -> bool:
        return self.kind is TokenKind.END_OF_FILE
