"""Source location tracking for diagnostics and debugging.

Provides SourceLocation dataclass for tracking positions in source text.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for diagnostics and debugging.

    All positions are 1-indexed (lineno and col_offset start at 1).
    Offsets are 0-indexed positions into the source string.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source (exclusive)
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column offset (optional)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(1, 5, source_file="demo.ml")
            >>> str(loc)
            'demo.ml:1:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for messages as ``file:line:col`` or ``line:col``."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
