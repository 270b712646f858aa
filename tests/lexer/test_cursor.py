"""Tests for Cursor lookahead and line/column bookkeeping."""

from __future__ import annotations

import pytest

from minilex.errors import SourceOpenError
from minilex.lexer import Cursor


class TestLookahead:
    """Test the single character of lookahead."""

    def test_first_character_loaded(self) -> None:
        cursor = Cursor.from_string("abc")
        assert cursor.lookahead == "a"
        assert not cursor.exhausted

    def test_advance_returns_consumed_character(self) -> None:
        cursor = Cursor.from_string("ab")
        assert cursor.advance() == "a"
        assert cursor.lookahead == "b"
        assert cursor.advance() == "b"
        assert cursor.exhausted

    def test_empty_source_is_exhausted_immediately(self) -> None:
        cursor = Cursor.from_string("")
        assert cursor.exhausted
        assert cursor.lookahead is None

    def test_advance_when_exhausted_is_noop(self) -> None:
        cursor = Cursor.from_string("a")
        cursor.advance()
        assert cursor.advance() is None
        assert cursor.exhausted
        assert cursor.column == 1
        assert cursor.offset == 1

    def test_nul_character_is_not_end_of_input(self) -> None:
        """A NUL or 0xFF-like character is ordinary input, not an end marker."""
        cursor = Cursor.from_string("\x00\xff")
        assert cursor.lookahead == "\x00"
        assert not cursor.exhausted
        cursor.advance()
        assert cursor.lookahead == "\xff"
        assert not cursor.exhausted
        cursor.advance()
        assert cursor.exhausted


class TestPosition:
    """Test line/column tracking."""

    def test_initial_position(self) -> None:
        cursor = Cursor.from_string("x")
        assert (cursor.line, cursor.column, cursor.offset) == (1, 0, 0)

    def test_column_increments(self) -> None:
        cursor = Cursor.from_string("abc")
        cursor.advance()
        cursor.advance()
        assert (cursor.line, cursor.column) == (1, 2)

    def test_newline_resets_column(self) -> None:
        cursor = Cursor.from_string("ab\ncd")
        for _ in range(3):
            cursor.advance()
        assert (cursor.line, cursor.column) == (2, 0)
        assert cursor.lookahead == "c"

    def test_consecutive_newlines(self) -> None:
        cursor = Cursor.from_string("\n\n\nx")
        for _ in range(3):
            cursor.advance()
        assert (cursor.line, cursor.column) == (4, 0)

    def test_line_never_decreases(self) -> None:
        cursor = Cursor.from_string("a\nbb\n\nccc\n")
        last_line = cursor.line
        while not cursor.exhausted:
            cursor.advance()
            assert cursor.line >= last_line
            last_line = cursor.line


class TestFileSources:
    """Test opening and closing file-backed cursors."""

    def test_open_reads_file(self, tmp_path) -> None:
        path = tmp_path / "prog.src"
        path.write_text("x\ny", encoding="utf-8")

        cursor = Cursor.open(path)
        try:
            assert cursor.lookahead == "x"
            assert cursor.source_file == str(path)
        finally:
            cursor.close()

    def test_open_keeps_carriage_returns(self, tmp_path) -> None:
        path = tmp_path / "cr.src"
        path.write_bytes(b"a\rb\r\n")

        cursor = Cursor.open(path)
        try:
            chars = []
            while not cursor.exhausted:
                chars.append(cursor.advance())
            assert "".join(chars) == "a\rb\r\n"
            assert (cursor.line, cursor.column) == (2, 0)
        finally:
            cursor.close()

    def test_open_missing_file(self, tmp_path) -> None:
        missing = tmp_path / "nope.src"
        with pytest.raises(SourceOpenError) as exc_info:
            Cursor.open(missing)

        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_open_directory_fails(self, tmp_path) -> None:
        with pytest.raises(SourceOpenError):
            Cursor.open(tmp_path)

    def test_unknown_encoding_fails_at_open(self, tmp_path) -> None:
        path = tmp_path / "prog.src"
        path.write_text("x", encoding="utf-8")
        with pytest.raises(SourceOpenError):
            Cursor.open(path, encoding="no-such-codec")

    def test_undecodable_bytes_are_replaced(self, tmp_path) -> None:
        path = tmp_path / "bad.src"
        path.write_bytes(b"a\xffb")

        cursor = Cursor.open(path)
        try:
            chars = []
            while not cursor.exhausted:
                chars.append(cursor.advance())
        finally:
            cursor.close()

        assert chars == ["a", "\ufffd", "b"]

    def test_close_is_idempotent(self) -> None:
        cursor = Cursor.from_string("abc")
        cursor.close()
        cursor.close()
        assert cursor.closed
        assert cursor.exhausted
        assert cursor.lookahead is None
