"""Parsing subsystem for the MiniLang recognizer.

Provides mixin classes for the grammar:
- `TokenNavigationMixin`: Parse cursor, matching, report-and-skip recovery
- `StatementParsingMixin`: program, statement, assignment, conditional, print
- `ExpressionParsingMixin`: expression, term, factor

Example:
    >>> from minilang.parsing import (
    ...     TokenNavigationMixin,
    ...     StatementParsingMixin,
    ...     ExpressionParsingMixin,
    ... )
    >>> class Recognizer(
    ...     TokenNavigationMixin, StatementParsingMixin, ExpressionParsingMixin
    ... ):
    ...     pass

"""

from minilang.parsing.expressions import ExpressionParsingMixin
from minilang.parsing.protocols import RecognizerHost
from minilang.parsing.statements import StatementParsingMixin
from minilang.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "StatementParsingMixin",
    "ExpressionParsingMixin",
    "RecognizerHost",
]
