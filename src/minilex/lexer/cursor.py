"""Single-character lookahead over a text stream.

The cursor owns its stream and keeps exactly one unconsumed character
(the lookahead) plus line/column bookkeeping. End of input is an explicit
``exhausted`` flag; no character value doubles as an end marker.

Thread Safety:
Cursor instances are not thread-safe. Create one per source.

"""

from __future__ import annotations

import io
from os import PathLike
from typing import TextIO

from minilex.errors import SourceOpenError


class Cursor:
    """Forward-only reader with one character of lookahead.

    Position semantics:
        ``line`` and ``column`` always describe the lookahead character.
        Consuming a newline moves to the next line and resets the column
        to 0; consuming anything else increments the column.

    Usage:
            >>> cursor = Cursor.from_string("ab")
            >>> cursor.lookahead, cursor.column
            ('a', 0)
            >>> cursor.advance()
            'a'
            >>> cursor.lookahead, cursor.column
            ('b', 1)

    """

    __slots__ = (
        "_stream",
        "_lookahead",
        "_exhausted",
        "_closed",
        "_line",
        "_column",
        "_offset",
        "_source_file",
    )

    def __init__(self, stream: TextIO, *, source_file: str | None = None) -> None:
        """Initialize cursor and load the first lookahead character.

        Args:
            stream: Text stream to read from; the cursor takes ownership
            source_file: Optional source file path for token locations
        """
        self._stream = stream
        self._source_file = source_file
        self._line = 1
        self._column = 0
        self._offset = 0
        self._closed = False
        self._lookahead: str | None = None
        self._exhausted = False
        self._load()

    @classmethod
    def open(cls, path: str | PathLike[str], *, encoding: str = "utf-8") -> Cursor:
        """Open a source file.

        Undecodable bytes are replaced with U+FFFD so they surface as
        INVALID tokens instead of read errors mid-scan. Line endings are
        read untranslated, so positions match the same text given to
        ``from_string``.

        Raises:
            SourceOpenError: If the file cannot be opened.
        """
        try:
            stream = open(path, encoding=encoding, errors="replace", newline="")
        except (OSError, LookupError) as e:
            raise SourceOpenError(path, getattr(e, "strerror", None) or str(e)) from e

        # The first read happens in __init__; an unreadable source must not leak
        try:
            return cls(stream, source_file=str(path))
        except OSError as e:
            stream.close()
            raise SourceOpenError(path, e.strerror or str(e)) from e

    @classmethod
    def from_string(cls, text: str, *, source_file: str | None = None) -> Cursor:
        """Scan an in-memory string."""
        return cls(io.StringIO(text), source_file=source_file)

    # =========================================================================
    # State
    # =========================================================================

    @property
    def lookahead(self) -> str | None:
        """Next unconsumed character, or None once exhausted."""
        return self._lookahead

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def offset(self) -> int:
        """Number of characters consumed so far."""
        return self._offset

    @property
    def source_file(self) -> str | None:
        return self._source_file

    # =========================================================================
    # Navigation
    # =========================================================================

    def advance(self) -> str | None:
        """Consume the lookahead character and load the next one.

        Returns:
            The consumed character, or None if the cursor was exhausted.
        """
        if self._exhausted:
            return None

        char = self._lookahead
        self._offset += 1
        if char == "\n":
            self._line += 1
            self._column = 0
        else:
            self._column += 1

        self._load()
        return char

    def close(self) -> None:
        """Release the stream and mark the cursor exhausted.

        Safe to call more than once; only the first call closes the stream.
        """
        if self._closed:
            return
        self._closed = True
        self._lookahead = None
        self._exhausted = True
        self._stream.close()

    def _load(self) -> None:
        char = self._stream.read(1)
        if char:
            self._lookahead = char
        else:
            self._lookahead = None
            self._exhausted = True

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else repr(self._lookahead)
        return f"Cursor({state}, {self._line}:{self._column})"
