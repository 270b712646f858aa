"""Session lifecycle: open a source, pull tokens, close the source.

A Session owns exactly one Cursor and therefore one source stream. Tokens
returned by a Session are plain immutable values; they stay valid after
the Session is closed or garbage collected.

Usage:
    >>> from minilex import open_session
    >>> with open_session("prog.src") as session:
    ...     for token in session:
    ...         print(token)

Thread Safety:
Sessions are not safe for concurrent use. Open one Session per source and
per thread; Sessions share no mutable state with each other.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import ExitStack, contextmanager
from os import PathLike
from types import TracebackType

from minilex.config import LexConfig, get_lex_config
from minilex.errors import Diagnostic
from minilex.lexer import Cursor, Scanner
from minilex.tokens import Token
from minilex.utils.logger import get_logger

logger = get_logger(__name__)


class Session:
    """Token stream over one source.

    ``next_token()`` never raises for lexical problems; bad characters come
    back as INVALID tokens. After end of input, and after ``close()``,
    ``next_token()`` keeps returning an EOF token at the last position.

    ``close()`` releases the source. Calling it again is a no-op.

    """

    __slots__ = ("_cursor", "_scanner", "_config")

    def __init__(self, cursor: Cursor, *, config: LexConfig | None = None) -> None:
        """Wrap an already-open cursor. Prefer Session.open / from_string.

        Args:
            cursor: Cursor to own; closed together with the session
            config: Scanner configuration (defaults to the active LexConfig)
        """
        self._config = config if config is not None else get_lex_config()
        self._cursor = cursor
        self._scanner = Scanner(cursor, config=self._config)

    @classmethod
    def open(cls, path: str | PathLike[str], *, config: LexConfig | None = None) -> Session:
        """Open a source file for scanning.

        Args:
            path: Source file path
            config: Scanner configuration (defaults to the active LexConfig)

        Raises:
            SourceOpenError: If the file cannot be opened or read.
        """
        config = config if config is not None else get_lex_config()
        cursor = Cursor.open(path, encoding=config.encoding)
        logger.debug("Opened source %s", cursor.source_file)
        return cls(cursor, config=config)

    @classmethod
    def from_string(
        cls,
        source: str,
        *,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> Session:
        """Create a session over in-memory source text."""
        return cls(Cursor.from_string(source, source_file=source_file), config=config)

    # =========================================================================
    # Token stream
    # =========================================================================

    def next_token(self) -> Token:
        """Scan and return the next token."""
        return self._scanner.scan()

    def close(self) -> None:
        """Release the source. Subsequent calls do nothing."""
        if self._cursor.closed:
            return
        self._cursor.close()
        logger.debug("Closed source %s", self._cursor.source_file or "<string>")

    def __iter__(self) -> Iterator[Token]:
        """Drain the session, yielding tokens through the first EOF."""
        return self._scanner.tokenize()

    def __enter__(self) -> Session:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # =========================================================================
    # Scan state
    # =========================================================================

    @property
    def line(self) -> int:
        return self._cursor.line

    @property
    def column(self) -> int:
        return self._cursor.column

    @property
    def lookahead(self) -> str | None:
        """Next unconsumed character, or None once exhausted."""
        return self._cursor.lookahead

    @property
    def exhausted(self) -> bool:
        return self._cursor.exhausted

    @property
    def closed(self) -> bool:
        return self._cursor.closed

    @property
    def source_file(self) -> str | None:
        return self._cursor.source_file

    @property
    def config(self) -> LexConfig:
        return self._config

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Invalid-character and truncation diagnostics, in source order."""
        return tuple(self._scanner.diagnostics)

    def __repr__(self) -> str:
        name = self._cursor.source_file or "<string>"
        state = "closed" if self.closed else f"{self.line}:{self.column}"
        return f"Session({name!r}, {state})"


# =============================================================================
# Functional interface
# =============================================================================


def open_session(path: str | PathLike[str], *, config: LexConfig | None = None) -> Session:
    """Open a source file. Raises SourceOpenError on failure."""
    return Session.open(path, config=config)


def next_token(session: Session) -> Token:
    return session.next_token()


def close_session(session: Session) -> None:
    session.close()


@contextmanager
def open_sessions(
    paths: Iterable[str | PathLike[str]],
    *,
    config: LexConfig | None = None,
) -> Iterator[list[Session]]:
    """Open several sources at once.

    If any open fails, every session opened before it is closed and the
    SourceOpenError propagates. All sessions are closed on exit.

    Example:
        >>> with open_sessions(["a.src", "b.src"]) as (a, b):
        ...     first = a.next_token(), b.next_token()

    """
    with ExitStack() as stack:
        sessions = []
        for path in paths:
            sessions.append(stack.enter_context(Session.open(path, config=config)))
        yield sessions


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> list[Token]:
    """Tokenize source text.

    Returns:
        List of tokens ending with exactly one EOF token
    """
    with Session.from_string(source, source_file=source_file, config=config) as session:
        return list(session)


def tokenize_file(path: str | PathLike[str], *, config: LexConfig | None = None) -> list[Token]:
    """Tokenize a source file.

    Raises:
        SourceOpenError: If the file cannot be opened.
    """
    with Session.open(path, config=config) as session:
        return list(session)


__all__ = [
    "Session",
    "close_session",
    "next_token",
    "open_session",
    "open_sessions",
    "tokenize",
    "tokenize_file",
]
