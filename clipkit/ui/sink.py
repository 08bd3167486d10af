"""
Styled output sinks for the help renderer.

A sink receives ordered text segments, each with an optional style tag, and
decides how (or whether) to decorate them. Plain and in-memory sinks make
rendering testable without a terminal.
"""

import sys
from typing import Protocol, TextIO

from .console import Console, get_console


class StyledSink(Protocol):
    """Protocol for styled output."""

    def write_styled(self, text: str, style: str | None = None) -> None:
        """Write a text segment, decorated with style when supported."""
        ...

    def write_reset(self) -> None:
        """Return to undecorated output."""
        ...


class ConsoleSink:
    """
    Sink that writes through a rich-backed Console.

    Style tags are resolved against the console theme (see HELP_THEME).

    Example:
        sink = ConsoleSink()
        sink.write_styled("myapp - Help:", "help.header")
        sink.write_reset()
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else get_console()

    @property
    def console(self) -> Console:
        return self._console

    def write_styled(self, text: str, style: str | None = None) -> None:
        self._console.write(text, style=style)

    def write_reset(self) -> None:
        # Each segment carries its own style; nothing stays active
        pass


class StreamSink:
    """
    Sink that writes undecorated text to a stream (stdout by default).

    Example:
        import io
        buffer = io.StringIO()
        sink = StreamSink(buffer)
        sink.write_styled("-v", "help.short")
        assert buffer.getvalue() == "-v"
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Initialize with optional output stream.

        Args:
            stream: Output stream (defaults to sys.stdout)
        """
        self._stream = stream if stream is not None else sys.stdout

    def write_styled(self, text: str, style: str | None = None) -> None:
        self._stream.write(text)

    def write_reset(self) -> None:
        pass

    def flush(self) -> None:
        """Flush the output stream."""
        self._stream.flush()


class NullSink:
    """Sink that discards all output."""

    def write_styled(self, text: str, style: str | None = None) -> None:
        pass

    def write_reset(self) -> None:
        pass


class BufferedSink:
    """
    Sink that captures segments in memory.

    Useful for testing where you need to verify both text and styling.

    Example:
        sink = BufferedSink()
        sink.write_styled("-v", "help.short")
        sink.write_styled(" | ")
        assert sink.text == "-v | "
        assert sink.segments == [("-v", "help.short"), (" | ", None)]
    """

    def __init__(self) -> None:
        """Initialize empty buffer."""
        self._segments: list[tuple[str, str | None]] = []
        self._resets = 0

    def write_styled(self, text: str, style: str | None = None) -> None:
        self._segments.append((text, style))

    def write_reset(self) -> None:
        self._resets += 1

    @property
    def segments(self) -> list[tuple[str, str | None]]:
        """Get all written (text, style) segments."""
        return self._segments.copy()

    @property
    def text(self) -> str:
        """Get all output as a single undecorated string."""
        return "".join(text for text, _ in self._segments)

    @property
    def lines(self) -> list[str]:
        """Get complete output lines without their newlines."""
        return self.text.splitlines()

    @property
    def reset_count(self) -> int:
        return self._resets

    def styled(self, style: str) -> list[str]:
        """Get the texts written with the given style."""
        return [text for text, seg_style in self._segments if seg_style == style]

    def clear(self) -> None:
        """Clear the buffer."""
        self._segments.clear()
        self._resets = 0
