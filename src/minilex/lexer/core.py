"""Maximal-munch token scanner.

Each call to ``scan()`` skips whitespace, then dispatches on the cursor's
lookahead and consumes exactly one lexeme. Every call advances the cursor
unless the input is exhausted, so a full drain is O(n).

No exceptions on bad input: unrecognized characters become INVALID tokens.

Thread Safety:
Scanner instances are not thread-safe. Create one per cursor.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from minilex.charsets import (
    is_digit,
    is_identifier_start,
    is_operator_char,
    is_separator_char,
    is_whitespace,
)
from minilex.config import LexConfig, get_lex_config
from minilex.errors import Diagnostic, lexeme_truncated
from minilex.lexer.cursor import Cursor
from minilex.lexer.scanners import (
    NumberScannerMixin,
    SymbolScannerMixin,
    WordScannerMixin,
)
from minilex.location import SourceLocation
from minilex.tokens import Token, TokenType
from minilex.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    WordScannerMixin,
    NumberScannerMixin,
    SymbolScannerMixin,
):
    """Produces one Token per ``scan()`` call from a Cursor.

    Dispatch order on the lookahead:
    1. letter or ``_``  -> identifier / keyword run
    2. digit            -> number run
    3. operator char    -> one-character OPERATOR
    4. separator char   -> one-character SEPARATOR (only if enabled)
    5. anything else    -> one-character INVALID

    String literals, comments and multi-character operators are not
    scanned; new token classes plug in as another scanner mixin plus a
    branch in ``scan()``.

    Usage:
            >>> scanner = Scanner(Cursor.from_string("if x = 5"))
            >>> list(scanner.tokenize())
        [Token(KEYWORD, 'if', 1:0), Token(IDENTIFIER, 'x', 1:3), Token(OPERATOR, '=', 1:5), Token(NUMBER, '5', 1:7), Token(EOF, '', 1:8)]

    """

    __slots__ = (
        "_cursor",
        "_config",
        "_diagnostics",
        "_saved_line",
        "_saved_column",
        "_origin",
        "_emitted",
    )

    def __init__(self, cursor: Cursor, *, config: LexConfig | None = None) -> None:
        """Initialize scanner over a cursor.

        Args:
            cursor: Cursor to consume; the scanner does not close it
            config: Scanner configuration (defaults to the active LexConfig)
        """
        self._cursor = cursor
        self._config = config if config is not None else get_lex_config()
        self._diagnostics: list[Diagnostic] = []
        self._saved_line = cursor.line
        self._saved_column = cursor.column
        self._origin = (cursor.line, cursor.column)
        self._emitted = False

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def config(self) -> LexConfig:
        return self._config

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostics recorded so far, in source order."""
        return self._diagnostics

    def scan(self) -> Token:
        """Scan and return the next token.

        Once the cursor is exhausted every call returns an EOF token at
        the final position; repeated EOF tokens compare equal. Input that
        holds only whitespace reports its EOF where scanning started.
        """
        self._skip_whitespace()

        cursor = self._cursor
        if cursor.exhausted:
            if self._emitted:
                self._save_location()
            else:
                self._saved_line, self._saved_column = self._origin
            return self._make_token(TokenType.EOF, "")

        self._emitted = True
        char = cursor.lookahead
        if is_identifier_start(char):
            return self._scan_word()
        if is_digit(char):
            return self._scan_number()
        if is_operator_char(char):
            return self._scan_single(TokenType.OPERATOR)
        if self._config.separators_enabled and is_separator_char(char):
            return self._scan_single(TokenType.SEPARATOR)
        return self._scan_invalid()

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF token.

        Complexity: O(n) where n = remaining input length
        """
        while True:
            token = self.scan()
            yield token
            if token.type is TokenType.EOF:
                return

    # =========================================================================
    # Cursor helpers
    # =========================================================================

    def _skip_whitespace(self) -> None:
        cursor = self._cursor
        while not cursor.exhausted and is_whitespace(cursor.lookahead):
            cursor.advance()

    def _accumulate(self, accept: Callable[[str | None], bool]) -> tuple[str, bool]:
        """Consume the maximal run of characters accepted by ``accept``.

        Characters past ``max_lexeme_length`` are consumed but not stored,
        which keeps the cursor in step with the source.

        Returns:
            (stored_text, truncated)
        """
        cursor = self._cursor
        limit = self._config.max_lexeme_length
        chars: list[str] = []
        consumed = 0
        while not cursor.exhausted and accept(cursor.lookahead):
            char = cursor.advance()
            if consumed < limit:
                chars.append(char)
            consumed += 1

        truncated = consumed > limit
        if truncated:
            diagnostic = lexeme_truncated(consumed, limit, self._saved_location())
            self._diagnostics.append(diagnostic)
            logger.debug("%s", diagnostic)
        return "".join(chars), truncated

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save the cursor position as the start of the next lexeme.

        Call this before consuming the first character of a lexeme.
        """
        self._saved_line = self._cursor.line
        self._saved_column = self._cursor.column

    def _saved_location(self) -> SourceLocation:
        return SourceLocation(self._saved_line, self._saved_column, self._cursor.source_file)

    def _make_token(self, token_type: TokenType, text: str) -> Token:
        """Create a Token positioned at the saved lexeme start."""
        return Token(
            type=token_type,
            text=text,
            line=self._saved_line,
            column=self._saved_column,
            source_file=self._cursor.source_file,
        )
