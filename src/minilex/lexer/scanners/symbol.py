"""Single-character scanner mixin (operators, separators, invalid input)."""

from __future__ import annotations

from minilex.errors import Diagnostic, invalid_character
from minilex.lexer.cursor import Cursor
from minilex.location import SourceLocation
from minilex.tokens import Token, TokenType
from minilex.utils.logger import get_logger

logger = get_logger(__name__)


class SymbolScannerMixin:
    """Mixin providing one-character token scanning.

    Operators are single characters; ``==`` scans as two OPERATOR tokens.
    Any character no other scanner accepts becomes an INVALID token carrying
    that character, and scanning resumes right after it.

    """

    _cursor: Cursor
    _diagnostics: list[Diagnostic]

    def _save_location(self) -> None:
        """Save lexeme start position. Implemented by Scanner."""
        raise NotImplementedError

    def _saved_location(self) -> SourceLocation:
        """Location saved by _save_location. Implemented by Scanner."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, text: str) -> Token:
        """Create token at saved location. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_single(self, token_type: TokenType) -> Token:
        """Consume the lookahead as a one-character token of token_type."""
        self._save_location()
        char = self._cursor.advance()
        return self._make_token(token_type, char)

    def _scan_invalid(self) -> Token:
        """Consume the lookahead as an INVALID token and record a diagnostic."""
        token = self._scan_single(TokenType.INVALID)
        diagnostic = invalid_character(token.text, self._saved_location())
        self._diagnostics.append(diagnostic)
        logger.debug("%s", diagnostic)
        return token
