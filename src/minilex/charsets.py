"""Character sets and predicates for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Every predicate is pure and accepts ``None`` (an exhausted cursor's
lookahead), for which it returns False.

Usage:
    from minilex.charsets import is_identifier_char

    if is_identifier_char(char):
        ...
"""

from __future__ import annotations

import string

from minilex.keywords import is_keyword

# C-locale isspace(): space, tab, newline, carriage return, vertical tab, form feed
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\v\f")

DIGITS: frozenset[str] = frozenset(string.digits)

LETTERS: frozenset[str] = frozenset(string.ascii_letters)

IDENTIFIER_START: frozenset[str] = LETTERS | frozenset("_")

IDENTIFIER_CHARS: frozenset[str] = IDENTIFIER_START | DIGITS

# Single-character operators; multi-character operators are not recognized
OPERATOR_CHARS: frozenset[str] = frozenset("+-*/=<>!&|")

# Reserved for the opt-in SEPARATOR token class
SEPARATOR_CHARS: frozenset[str] = frozenset("(){}[];,")


def is_whitespace(char: str | None) -> bool:
    return char in WHITESPACE


def is_digit(char: str | None) -> bool:
    """ASCII decimal digit. Unicode digits such as '²' are not accepted."""
    return char in DIGITS


def is_letter(char: str | None) -> bool:
    """ASCII letter."""
    return char in LETTERS


def is_identifier_start(char: str | None) -> bool:
    return char in IDENTIFIER_START


def is_identifier_char(char: str | None) -> bool:
    """Letter, digit or underscore."""
    return char in IDENTIFIER_CHARS


def is_operator_char(char: str | None) -> bool:
    return char in OPERATOR_CHARS


def is_separator_char(char: str | None) -> bool:
    return char in SEPARATOR_CHARS


__all__ = [
    "DIGITS",
    "IDENTIFIER_CHARS",
    "IDENTIFIER_START",
    "LETTERS",
    "OPERATOR_CHARS",
    "SEPARATOR_CHARS",
    "WHITESPACE",
    "is_digit",
    "is_identifier_char",
    "is_identifier_start",
    "is_keyword",
    "is_letter",
    "is_operator_char",
    "is_separator_char",
    "is_whitespace",
]
