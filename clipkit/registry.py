"""
Option registration.

This module provides the ordered, per-application collection of options that
the parser matches against and the help renderer lays out.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from .exceptions import DuplicateOptionError
from .option import Option, help_option

if TYPE_CHECKING:
    from .parser import ParseResult
    from .ui.sink import StyledSink

lg = logging.getLogger(__name__)


class OptionsRegistry:
    """
    Ordered collection of options for one application context.

    Every registry holds exactly one built-in -h/--help option, appended
    after the initial options passed to the constructor. Options are only
    ever appended; insertion order drives the help screen layout.

    Example:
        registry = OptionsRegistry("myapp", Option("v", "verbose"))
        registry.add(Option("o", "output", has_argument=True))
        result = registry.parse(["-v", "-o", "out.txt"])
    """

    def __init__(self, context: str, *options: Option, strict: bool = False) -> None:
        """
        Initialize the registry.

        Args:
            context: Application name or context shown in the help header
            *options: Initial options, kept in the given order
            strict: Reject options whose short or long name is already used
        """
        self.context = context
        self.strict = strict
        self._options: list[Option] = []
        for option in options:
            self.add(option)
        self._help = self.add(help_option())

    def add(self, option: Option) -> Option:
        """
        Append an option and return it.

        Raises:
            DuplicateOptionError: If the registry is strict and a name collides
        """
        if self.strict:
            self._check_unique(option)

        self._options.append(option)
        lg.debug(
            "registered option",
            extra={"context": self.context, "option": option.display_name},
        )
        return option

    def add_option(
        self,
        short_name: str,
        long_name: str,
        *,
        has_argument: bool = False,
        required: bool = False,
        description: str = "",
    ) -> Option:
        """Build an option from its fields, append it and return it."""
        return self.add(
            Option(
                short_name,
                long_name,
                has_argument=has_argument,
                required=required,
                description=description,
            )
        )

    def _check_unique(self, option: Option) -> None:
        existing = self.find_short(option.short_name)
        if existing is not None:
            raise DuplicateOptionError(option.short_flag, existing)

        existing = self.find_long(option.long_name)
        if existing is not None:
            raise DuplicateOptionError(option.long_flag, existing)

    @property
    def options(self) -> tuple[Option, ...]:
        """Snapshot of the options in insertion order."""
        return tuple(self._options)

    @property
    def help_option(self) -> Option:
        return self._help

    def find_short(self, name: str) -> Option | None:
        """First option whose short name equals name."""
        for option in self._options:
            if option.short_name == name:
                return option
        return None

    def find_long(self, name: str) -> Option | None:
        """First option whose long name equals name."""
        for option in self._options:
            if option.long_name == name:
                return option
        return None

    def find(self, name: str) -> Option | None:
        """Look up by long name first, then by short name."""
        return self.find_long(name) or self.find_short(name)

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(self.options)

    def __repr__(self) -> str:
        return f"OptionsRegistry(context={self.context!r}, options={len(self)})"

    def parse(self, argv: Sequence[str] | None = None) -> ParseResult:
        """
        Parse an argument vector against this registry.

        Args:
            argv: Tokens to parse (defaults to sys.argv[1:])

        Returns:
            ParseResult with the matched options

        Raises:
            ParsingError: If the arguments are malformed
        """
        from .parser import parse

        if argv is None:
            argv = sys.argv[1:]
        return parse(self, argv)

    def print_help(self, sink: StyledSink | None = None) -> None:
        """Render the aligned, styled help screen to sink (default: console)."""
        from .help import HelpRenderer

        HelpRenderer().render_styled(self, sink)

    def help_text(self) -> str:
        """Return the help screen as plain, undecorated text."""
        from .help import HelpRenderer

        return HelpRenderer().render_plain(self)
