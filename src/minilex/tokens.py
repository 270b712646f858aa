"""Token and TokenType definitions for the minilex scanner.

The scanner produces a stream of Token objects that a parser consumes.
Each Token has a type, the lexeme text, and the position where the lexeme
started.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from minilex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the scanner.

    STRING and SEPARATOR are reserved: the default scanner never emits
    STRING, and emits SEPARATOR only when separators are enabled in the
    active LexConfig.

    """

    IDENTIFIER = auto()  # x, _tmp, counter2
    NUMBER = auto()  # 42
    STRING = auto()  # reserved
    KEYWORD = auto()  # if, else, while, ...
    OPERATOR = auto()  # + - * / = < > ! & |
    SEPARATOR = auto()  # ( ) { } [ ] ; ,
    EOF = auto()  # End of input
    INVALID = auto()  # Unrecognized character


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type (from TokenType enum)
        text: The lexeme, truncated to the configured maximum length
        line: Start line number (1-indexed)
        column: Start column (0-indexed)
        source_file: Optional source file path, not part of equality

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    text: str
    line: int
    column: int
    source_file: str | None = field(default=None, compare=False)

    @property
    def location(self) -> SourceLocation:
        """Source location of the first character of the lexeme."""
        return SourceLocation(self.line, self.column, self.source_file)

    @property
    def is_eof(self) -> bool:
        return self.type is TokenType.EOF

    @property
    def is_invalid(self) -> bool:
        return self.type is TokenType.INVALID

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Token({self.type.name}, {text!r}, {self.line}:{self.column})"
