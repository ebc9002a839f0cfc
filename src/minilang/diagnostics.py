"""Syntax diagnostics emitted by the recognizer.

A Diagnostic is a value, not an exception: the recognizer records one per
grammar violation and keeps going.

Example:
    >>> from minilang import recognize
    >>> [d.message for d in recognize("x=1")]
    ["Syntax error: Expected ';', found "]

"""

from __future__ import annotations

from dataclasses import dataclass

from minilang.location import SourceLocation
from minilang.tokens import Token

UNEXPECTED = "Unexpected token"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One grammar violation.

    Attributes:
        reason: What the rule wanted, e.g. ``"Expected ';'"`` or
            ``"Unexpected token"``
        found: The offending token (END_OF_FILE with empty text at end)

    """

    reason: str
    found: Token

    @property
    def message(self) -> str:
        """The printed diagnostic line."""
        if self.reason == UNEXPECTED:
            return f"Syntax error: {UNEXPECTED} {self.found.text}"
        return f"Syntax error: {self.reason}, found {self.found.text}"

    @property
    def location(self) -> SourceLocation:
        return self.found.location

    def __str__(self) -> str:
        return self.message
