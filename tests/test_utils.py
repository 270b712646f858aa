"""Tests for minilex utility modules."""

import logging


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_name(self) -> None:
        from minilex.utils.logger import get_logger

        assert get_logger("mymodule").name == "minilex.mymodule"

    def test_keeps_package_names(self) -> None:
        from minilex.utils.logger import get_logger

        assert get_logger("minilex").name == "minilex"
        assert get_logger("minilex.lexer.core").name == "minilex.lexer.core"

    def test_returns_stdlib_logger(self) -> None:
        from minilex.utils import get_logger

        assert isinstance(get_logger(__name__), logging.Logger)


class TestScannerLogging:
    """Diagnostics are logged at DEBUG under the minilex namespace."""

    def test_invalid_character_logged(self, caplog) -> None:
        from minilex import tokenize

        with caplog.at_level(logging.DEBUG, logger="minilex"):
            tokenize("a @")

        records = [r for r in caplog.records if r.name.startswith("minilex.")]
        assert any("L001" in r.getMessage() for r in records)

    def test_truncation_logged(self, caplog) -> None:
        from minilex import LexConfig, tokenize

        with caplog.at_level(logging.DEBUG, logger="minilex"):
            tokenize("abcdef", config=LexConfig(max_lexeme_length=2))

        assert any("L002" in r.getMessage() for r in caplog.records)
