"""Token-class scanners for the minilex scanner.

Each scanner is a mixin that consumes one lexeme of a specific token class
from the cursor and builds its Token.
"""

from __future__ import annotations

from minilex.lexer.scanners.number import NumberScannerMixin
from minilex.lexer.scanners.symbol import SymbolScannerMixin
from minilex.lexer.scanners.word import WordScannerMixin

__all__ = [
    "NumberScannerMixin",
    "SymbolScannerMixin",
    "WordScannerMixin",
]
