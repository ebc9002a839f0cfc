"""Exception classes for MiniLang.

Grammar violations are reported as Diagnostic values, not exceptions.
These classes cover API misuse, invalid configuration, and strict mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minilang.diagnostics import Diagnostic


class MiniLangError(Exception):
    """Base exception for all MiniLang errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(MiniLangError):
    """Error locating a grammar violation in MiniLang source.

    The message is prefixed with ``file:line:col`` as far as those are known,
    matching how SourceLocation renders, so strict-mode failures read like
    compiler output.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        where = [source_file] if source_file else []
        if lineno is not None:
            where.append(str(lineno))
            if col_offset is not None:
                where.append(str(col_offset))
        super().__init__(f"{':'.join(where)} {message}" if where else message)


class RecognitionError(ParseError):
    """Strict-mode failure carrying every diagnostic of the run.

    The location and message are taken from the first diagnostic.
    """

    def __init__(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        self.diagnostics = diagnostics
        first = diagnostics[0]
        loc = first.location
        extra = len(diagnostics) - 1
        message = first.message
        if extra:
            message += f" (+{extra} more)"
        super().__init__(
            message,
            lineno=loc.lineno,
            col_offset=loc.col_offset,
            source_file=loc.source_file,
        )


class ConfigError(MiniLangError):
    """Invalid configuration value."""

    def __init__(self, option: str, message: str) -> None:
        self.option = option
        super().__init__(f"Config '{option}': {message}")
