"""Character sets for O(1) classification.

All sets are frozensets: immutable, module-level, no per-call allocation.
Letters and digits are ASCII only, matching the C locale classification.
"""

import string

WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

DIGITS: frozenset[str] = frozenset(string.digits)

# May start an identifier or keyword
WORD_START: frozenset[str] = frozenset(string.ascii_letters + "_")

# May continue an identifier or keyword
WORD_CHARS: frozenset[str] = WORD_START | DIGITS

ARITHMETIC_OPERATORS: frozenset[str] = frozenset("+-*/")

PARENS: frozenset[str] = frozenset("()")

COMMENT_START = "#"

KEYWORDS: frozenset[str] = frozenset({"if", "else", "print", "true", "false"})
