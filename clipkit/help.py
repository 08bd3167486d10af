"""
Help screen rendering.

Both help forms come from one formatting routine that writes styled segments
to a sink. The aligned form pads every column to the widest entry in the
registry; the plain form uses single spaces and is suited to embedding in
other text.

Aligned layout, one line per option::

    myapp - Help:
    -o | --output [<arg>]  | output file              (*)
    -v | --verbose         | verbose mode
    -h | --help            | displays the help screen
    * - required arguments
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import (
    ARG_MARKER,
    COLUMN_SEPARATOR,
    HELP_FOOTER,
    HELP_HEADER_SUFFIX,
    REQUIRED_MARKER,
)
from .ui.sink import BufferedSink, ConsoleSink

if TYPE_CHECKING:
    from .option import Option
    from .registry import OptionsRegistry
    from .ui.sink import StyledSink

lg = logging.getLogger(__name__)

# Argument marker as it follows the long name in the aligned layout
_ALIGNED_ARG = f" {ARG_MARKER}"


def _pad(sink: StyledSink, width: int) -> None:
    if width > 0:
        sink.write_styled(" " * width)


@dataclass(frozen=True)
class ColumnLayout:
    """Column widths for the aligned help screen."""

    short_width: int
    long_width: int
    arg_width: int
    desc_width: int


def compute_columns(registry: OptionsRegistry) -> ColumnLayout:
    """
    Compute column widths from the registry's options.

    The argument column is only reserved when at least one option takes an
    argument; options without one get blank padding of the same width.
    """
    options = registry.options
    return ColumnLayout(
        short_width=max((len(opt.short_name) for opt in options), default=0),
        long_width=max((len(opt.long_name) for opt in options), default=0),
        arg_width=len(_ALIGNED_ARG) if any(opt.has_argument for opt in options) else 0,
        desc_width=max((len(opt.description) for opt in options), default=0),
    )


class HelpRenderer:
    """
    Renders a registry's help screen.

    Example:
        renderer = HelpRenderer()
        renderer.render_styled(registry)      # colored, aligned, to the console
        text = renderer.render_plain(registry)
    """

    def compute_columns(self, registry: OptionsRegistry) -> ColumnLayout:
        return compute_columns(registry)

    def render_styled(
        self, registry: OptionsRegistry, sink: StyledSink | None = None
    ) -> None:
        """
        Write the aligned help screen to sink.

        Args:
            registry: Options to describe
            sink: Output sink (defaults to a ConsoleSink on the shared console)
        """
        if sink is None:
            sink = ConsoleSink()
        layout = self.compute_columns(registry)
        lg.debug(
            "rendering help",
            extra={"context": registry.context, "layout": layout},
        )
        self._emit(registry, sink, layout)

    def render_plain(self, registry: OptionsRegistry) -> str:
        """Return the help screen as single-space padded plain text."""
        sink = BufferedSink()
        self._emit(registry, sink, None)
        return sink.text

    def _emit(
        self,
        registry: OptionsRegistry,
        sink: StyledSink,
        layout: ColumnLayout | None,
    ) -> None:
        sink.write_styled(f"{registry.context}{HELP_HEADER_SUFFIX}", "help.header")
        self._end_line(sink)

        for option in registry.options:
            if layout is None:
                self._emit_plain_option(sink, option)
            else:
                self._emit_aligned_option(sink, option, layout)
            if option.required:
                sink.write_styled(REQUIRED_MARKER, "help.required")
            self._end_line(sink)

        sink.write_styled(HELP_FOOTER, "help.footer")
        self._end_line(sink)

    @staticmethod
    def _emit_aligned_option(
        sink: StyledSink, option: Option, layout: ColumnLayout
    ) -> None:
        sink.write_styled(option.short_flag, "help.short")
        _pad(sink, layout.short_width - len(option.short_name))
        sink.write_styled(COLUMN_SEPARATOR)

        sink.write_styled(option.long_flag, "help.long")
        padding = layout.long_width - len(option.long_name)
        if option.has_argument:
            sink.write_styled(_ALIGNED_ARG, "help.arg")
            padding += layout.arg_width - len(_ALIGNED_ARG)
        else:
            padding += layout.arg_width
        _pad(sink, padding)
        sink.write_styled(COLUMN_SEPARATOR)

        sink.write_styled(option.description, "help.desc")
        _pad(sink, layout.desc_width - len(option.description))

    @staticmethod
    def _emit_plain_option(sink: StyledSink, option: Option) -> None:
        sink.write_styled(option.short_flag, "help.short")
        sink.write_styled(COLUMN_SEPARATOR)
        sink.write_styled(option.long_flag, "help.long")
        sink.write_styled(COLUMN_SEPARATOR)
        if option.has_argument:
            sink.write_styled(ARG_MARKER, "help.arg")
            sink.write_styled(COLUMN_SEPARATOR)
        sink.write_styled(option.description, "help.desc")

    @staticmethod
    def _end_line(sink: StyledSink) -> None:
        sink.write_reset()
        sink.write_styled("\n")


def render_plain(registry: OptionsRegistry) -> str:
    """Plain help text for registry."""
    return HelpRenderer().render_plain(registry)


def render_styled(registry: OptionsRegistry, sink: StyledSink | None = None) -> None:
    """Aligned, styled help for registry written to sink."""
    HelpRenderer().render_styled(registry, sink)
