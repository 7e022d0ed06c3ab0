"""Tests for the in-memory ScreenBuffer surface."""

from __future__ import annotations

import pytest

from termsession.terminal.buffer import ScreenBuffer


@pytest.fixture
def screen() -> ScreenBuffer:
    return ScreenBuffer(rows=3, cols=10, scrollback_lines=50)


class TestScreenBufferWrite:
    def test_plain_text(self, screen: ScreenBuffer) -> None:
        screen.write("abc")
        assert screen.lines == ["abc"]

    def test_crlf_starts_new_line(self, screen: ScreenBuffer) -> None:
        screen.write("one\r\ntwo")
        assert screen.lines == ["one", "two"]

    def test_carriage_return_overwrites(self, screen: ScreenBuffer) -> None:
        screen.write("hello\rJ")
        assert screen.lines == ["Jello"]

    def test_erase_sequence(self, screen: ScreenBuffer) -> None:
        screen.write("abc\b \b")
        assert screen.lines[-1].rstrip() == "ab"
        screen.write("d")
        assert screen.lines == ["abd"]

    def test_backspace_stops_at_column_zero(self, screen: ScreenBuffer) -> None:
        screen.write("\b\b\bx")
        assert screen.lines == ["x"]

    def test_control_characters_dropped(self, screen: ScreenBuffer) -> None:
        screen.write("a\x1b\x07\x7fb")
        assert screen.lines == ["ab"]

    def test_write_line(self, screen: ScreenBuffer) -> None:
        screen.write_line("done")
        assert screen.lines == ["done", ""]

    def test_scrollback_trimmed(self) -> None:
        screen = ScreenBuffer(rows=2, cols=10, scrollback_lines=2)
        screen.write("a\nb\nc")
        assert screen.lines == ["b", "c"]


class TestScreenBufferContent:
    def test_padded_to_rows(self, screen: ScreenBuffer) -> None:
        screen.write("abc")
        assert screen.get_screen_content() == "\n\nabc"

    def test_last_rows_visible(self, screen: ScreenBuffer) -> None:
        screen.write("1\n2\n3\n4")
        assert screen.get_screen_content() == "2\n3\n4"

    def test_lines_truncated_to_cols(self, screen: ScreenBuffer) -> None:
        screen.write("x" * 15)
        assert screen.get_screen_content().splitlines()[-1] == "x" * 10


class TestScreenBufferReset:
    def test_reset_clears_everything(self, screen: ScreenBuffer) -> None:
        screen.write("a\nb\nc")
        screen.reset()
        assert screen.lines == [""]
        assert screen.reset_count == 1
        screen.write("z")
        assert screen.lines == ["z"]


class TestReceive:
    def test_receive_without_handlers(self, screen: ScreenBuffer) -> None:
        screen.receive("abc")
        assert screen.lines == [""]

    def test_receive_calls_handlers(self, screen: ScreenBuffer) -> None:
        seen: list[str] = []
        screen.on_data(seen.append)
        screen.receive("ab")
        screen.receive("\r")
        assert seen == ["ab", "\r"]
