"""Identifier and keyword scanner mixin."""

from __future__ import annotations

from collections.abc import Callable

from minilex.charsets import is_identifier_char
from minilex.keywords import is_keyword
from minilex.tokens import Token, TokenType


class WordScannerMixin:
    """Mixin providing identifier/keyword scanning.

    Consumes the maximal run of identifier characters. The run is a KEYWORD
    only if its full text is a reserved word; a truncated run is always an
    IDENTIFIER.

    """

    def _save_location(self) -> None:
        """Save lexeme start position. Implemented by Scanner."""
        raise NotImplementedError

    def _accumulate(self, accept: Callable[[str | None], bool]) -> tuple[str, bool]:
        """Consume a maximal run. Implemented by Scanner."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, text: str) -> Token:
        """Create token at saved location. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_word(self) -> Token:
        """Scan an identifier or keyword starting at the lookahead.

        Caller guarantees the lookahead is a letter or underscore.
        """
        self._save_location()
        text, truncated = self._accumulate(is_identifier_char)

        if not truncated and is_keyword(text):
            return self._make_token(TokenType.KEYWORD, text)
        return self._make_token(TokenType.IDENTIFIER, text)
