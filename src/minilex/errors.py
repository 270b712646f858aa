"""Exception classes and diagnostics for minilex.

Only opening a source can fail with an exception. Lexical problems found
while scanning are reported as data: INVALID tokens plus Diagnostic records.
"""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

from minilex.location import SourceLocation


class MinilexError(Exception):
    """Base exception for all minilex errors.

    Subclass this for specific error categories.
    """

    pass


class SourceOpenError(MinilexError):
    """Source could not be opened for scanning.

    Raised by Session.open (and Cursor.open) before any token is produced.
    The underlying OSError is chained as ``__cause__``.
    """

    def __init__(self, path: str | PathLike[str], reason: str | None = None) -> None:
        """Initialize open error.

        Args:
            path: Path that could not be opened
            reason: Short description of the failure (optional)
        """
        self.path = str(path)
        self.reason = reason
        message = f"cannot open source '{self.path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ConfigError(MinilexError, ValueError):
    """Invalid scanner configuration value."""

    pass


# Diagnostic codes
INVALID_CHARACTER = "L001"
LEXEME_TRUNCATED = "L002"

DIAGNOSTIC_CODES = {
    INVALID_CHARACTER: "Invalid character",
    LEXEME_TRUNCATED: "Lexeme truncated",
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A recoverable lexical problem recorded during scanning.

    Attributes:
        code: Diagnostic code (L001, L002)
        message: Human-readable description
        location: Where the offending lexeme starts
        severity: "error" or "warning"

    """

    code: str
    message: str
    location: SourceLocation
    severity: str = "error"

    def __str__(self) -> str:
        return f"{self.location}: {self.severity} {self.code}: {self.message}"


def invalid_character(char: str, location: SourceLocation) -> Diagnostic:
    """Create the diagnostic for a character no token class accepts."""
    if char.isprintable():
        message = f"invalid character {char!r}"
    else:
        message = f"invalid character U+{ord(char):04X}"
    return Diagnostic(INVALID_CHARACTER, message, location, "error")


def lexeme_truncated(consumed: int, limit: int, location: SourceLocation) -> Diagnostic:
    """Create the diagnostic for a lexeme longer than the configured maximum."""
    return Diagnostic(
        LEXEME_TRUNCATED,
        f"lexeme of {consumed} characters truncated to {limit}",
        location,
        "warning",
    )
