"""Number scanner mixin."""

from __future__ import annotations

from collections.abc import Callable

from minilex.charsets import is_digit
from minilex.tokens import Token, TokenType


class NumberScannerMixin:
    """Mixin providing digit-run scanning.

    Digit runs are always NUMBER tokens. They are never looked up in the
    keyword table. A digit run ends at the first non-digit, so ``12ab``
    scans as NUMBER("12") followed by IDENTIFIER("ab").

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

    def _scan_number(self) -> Token:
        """Scan a decimal digit run starting at the lookahead."""
        self._save_location()
        text, _ = self._accumulate(is_digit)
        return self._make_token(TokenType.NUMBER, text)
