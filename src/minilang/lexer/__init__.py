"""Pull-based scanner for MiniLang source text.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (dispatch + cursor tracking)
├── charsets.py          # Character classes and the keyword set
└── scanners.py          # Lexeme scanning mixins (words, symbols, comments)

Usage:
    >>> from minilang.lexer import Scanner
    >>> for token in Scanner("print 1;").tokenize():
    ...     print(token)
Token(KEYWORD, 'print', 1:1)
Token(INTEGER, '1', 1:7)
Token(OPERATOR, ';', 1:8)
Token(END_OF_FILE, '', 1:9)

"""

from minilang.lexer.core import Scanner

__all__ = ["Scanner"]
