"""Source location tracking for diagnostics.

Provides SourceLocation dataclass for tracking positions in source text.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for diagnostics and debugging.

    Lines are 1-indexed, columns are 0-indexed.

    Attributes:
        line: Line number (1-indexed)
        column: Column (0-indexed, reset on every newline)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(3, 7, "prog.src")
            >>> str(loc)
            'prog.src:3:7'

    """

    line: int
    column: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for messages.

        Returns:
            Formatted string like "file.src:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"
