"""Character-at-a-time scanner for minilex.

Architecture:
lexer/
├── __init__.py          # Re-exports Cursor, Scanner
├── cursor.py            # Cursor (stream ownership, lookahead, line/column)
├── core.py              # Scanner class (mixin composition + dispatch)
└── scanners/            # Token-class scanners
    ├── word.py          # Identifiers and keywords
    ├── number.py        # Digit runs
    └── symbol.py        # Operators, separators, invalid characters

Usage:
    >>> from minilex.lexer import Cursor, Scanner
    >>> scanner = Scanner(Cursor.from_string("x @ y"))
    >>> for token in scanner.tokenize():
    ...     print(token)
Token(IDENTIFIER, 'x', 1:0)
Token(INVALID, '@', 1:2)
Token(IDENTIFIER, 'y', 1:4)
Token(EOF, '', 1:5)

"""

from minilex.lexer.core import Scanner
from minilex.lexer.cursor import Cursor

__all__ = ["Cursor", "Scanner"]
