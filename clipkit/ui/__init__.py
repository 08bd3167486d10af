"""
Terminal output for clipkit.

Provides the rich-backed console and the styled sinks the help renderer
writes to.

Example:
    from clipkit.ui import BufferedSink, ConsoleSink

    registry.print_help(ConsoleSink())

    sink = BufferedSink()
    registry.print_help(sink)
    print(sink.text)
"""

from .console import HELP_THEME, Console, get_console, reset_console
from .sink import BufferedSink, ConsoleSink, NullSink, StreamSink, StyledSink

__all__ = [
    # Console
    "Console",
    "HELP_THEME",
    "get_console",
    "reset_console",
    # Sinks
    "StyledSink",
    "ConsoleSink",
    "StreamSink",
    "BufferedSink",
    "NullSink",
]
