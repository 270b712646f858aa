"""Reserved words of the source language.

The table is built once at import time and never mutated. Adding a reserved
word means adding an entry to KEYWORDS; the scanner needs no change.
"""

from __future__ import annotations

# Declaration order is part of the public surface (used by listings)
KEYWORDS: tuple[str, ...] = (
    "if",
    "else",
    "while",
    "return",
    "int",
    "float",
)

KEYWORD_SET: frozenset[str] = frozenset(KEYWORDS)


def is_keyword(text: str) -> bool:
    """Check whether text is a reserved word (exact, case-sensitive match)."""
    return text in KEYWORD_SET


__all__ = ["KEYWORDS", "KEYWORD_SET", "is_keyword"]
