from __future__ import annotations

import dataclasses

import pytest

from vortex.cursor import Cursor


class TestCursorBasic:
    def test_start(self) -> None:
        c = Cursor.start("hello")
        assert (c.offset, c.line, c.column) == (0, 1, 0)
        assert not c.at_end()

    def test_immutable(self) -> None:
        c = Cursor.start("hello")
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.offset = 3  # type: ignore[misc]

    def test_advance_returns_new_cursor(self) -> None:
        c = Cursor.start("hello")
        d = c.advance(2)
        assert c.offset == 0
        assert d.offset == 2
        assert d.column == 2

    def test_advance_zero(self) -> None:
        c = Cursor.start("hello")
        assert c.advance(0) == c

    def test_advance_past_end_is_an_error(self) -> None:
        with pytest.raises(ValueError):
            Cursor.start("ab").advance(3)
        with pytest.raises(ValueError):
            Cursor.start("ab").advance(-1)

    def test_remaining(self) -> None:
        assert Cursor.start("hello").advance(3).remaining == "lo"


class TestPeek:
    def test_clamped_to_remaining_text(self) -> None:
        c = Cursor.start("abc").advance(1)
        assert c.peek(10) == "bc"
        assert c.peek(1) == "b"

    def test_non_positive(self) -> None:
        c = Cursor.start("abc")
        assert c.peek(0) == ""
        assert c.peek(-2) == ""

    def test_at_end_yields_empty(self) -> None:
        assert Cursor.start("ab").advance(2).peek(1) == ""

    def test_codepoints_not_bytes(self) -> None:
        c = Cursor.start("héllo😀!")
        assert c.peek(2) == "hé"
        assert c.advance(5).peek(1) == "😀"
        assert c.advance(6).peek(1) == "!"


class TestAtEnd:
    def test_exact_length(self) -> None:
        c = Cursor.start("ab")
        assert not c.advance(1).at_end()
        assert c.advance(2).at_end()

    def test_empty_text(self) -> None:
        assert Cursor.start("").at_end()


class TestLineColumn:
    def test_each_break_style_counts_once(self) -> None:
        text = "a\nb\r\nc\rd"
        c = Cursor.start(text).advance(len(text))
        assert c.line == 4
        assert c.column == 1

    def test_column_after_break(self) -> None:
        c = Cursor.start("ab\ncde").advance(5)
        assert c.line == 2
        assert c.column == 2

    def test_column_accumulates_without_breaks(self) -> None:
        c = Cursor.start("abcdef").advance(2).advance(3)
        assert (c.line, c.column) == (1, 5)

    def test_crlf_split_across_advances(self) -> None:
        c = Cursor.start("a\r\nb").advance(2)
        assert (c.line, c.column) == (2, 0)
        c = c.advance(1)
        assert (c.line, c.column) == (2, 0)
        c = c.advance(1)
        assert (c.line, c.column) == (2, 1)

    def test_leading_newline(self) -> None:
        c = Cursor.start("\nx").advance(1)
        assert (c.line, c.column) == (2, 0)
