"""Tests for clipkit.ui.sink module."""

import io

import pytest

from clipkit.ui import BufferedSink, Console, ConsoleSink, NullSink, StreamSink, get_console


@pytest.mark.unit
class TestStreamSink:
    """Tests for StreamSink class."""

    def test_writes_to_stdout_by_default(self, capsys):
        sink = StreamSink()
        sink.write_styled("Hello", "help.header")
        sink.write_reset()
        sink.write_styled("\n")

        captured = capsys.readouterr()
        assert captured.out == "Hello\n"

    def test_ignores_styles(self):
        buffer = io.StringIO()
        sink = StreamSink(buffer)
        sink.write_styled("-v", "help.short")
        sink.write_styled(" | ")

        assert buffer.getvalue() == "-v | "

    def test_flush(self):
        buffer = io.StringIO()
        sink = StreamSink(buffer)
        sink.write_styled("x")
        sink.flush()

        assert buffer.getvalue() == "x"


@pytest.mark.unit
class TestConsoleSink:
    """Tests for ConsoleSink class."""

    def test_writes_through_console(self):
        buffer = io.StringIO()
        sink = ConsoleSink(Console(no_color=True, file=buffer))
        sink.write_styled("-v", "help.short")
        sink.write_reset()

        assert buffer.getvalue() == "-v"

    def test_defaults_to_shared_console(self):
        assert ConsoleSink().console is get_console()


@pytest.mark.unit
class TestNullSink:
    """Tests for NullSink class."""

    def test_discards_output(self, capsys):
        sink = NullSink()
        sink.write_styled("Hello", "help.header")
        sink.write_reset()

        assert capsys.readouterr().out == ""


@pytest.mark.unit
class TestBufferedSink:
    """Tests for BufferedSink class."""

    def test_captures_segments(self):
        sink = BufferedSink()
        sink.write_styled("-v", "help.short")
        sink.write_styled(" | ")

        assert sink.segments == [("-v", "help.short"), (" | ", None)]
        assert sink.text == "-v | "

    def test_lines(self):
        sink = BufferedSink()
        sink.write_styled("a")
        sink.write_styled("\n")
        sink.write_styled("b  ")
        sink.write_styled("\n")

        assert sink.lines == ["a", "b  "]

    def test_styled_filter(self):
        sink = BufferedSink()
        sink.write_styled("-v", "help.short")
        sink.write_styled("--verbose", "help.long")
        sink.write_styled("-h", "help.short")

        assert sink.styled("help.short") == ["-v", "-h"]

    def test_reset_count_and_clear(self):
        sink = BufferedSink()
        sink.write_styled("x")
        sink.write_reset()
        sink.write_reset()
        assert sink.reset_count == 2

        sink.clear()
        assert sink.segments == []
        assert sink.reset_count == 0

    def test_segments_returns_copy(self):
        sink = BufferedSink()
        sink.write_styled("x")
        sink.segments.append(("y", None))

        assert sink.text == "x"
