"""
Option declaration.

An Option describes one recognized flag: its short and long names, whether
it consumes a value, whether it must be supplied, and the text shown for it
on the help screen.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import HELP_DESCRIPTION, HELP_LONG_NAME, HELP_SHORT_NAME
from .exceptions import OptionSpecError


def _validate_name(kind: str, name: str) -> None:
    """Validate a short or long option name."""
    if not isinstance(name, str) or not name:
        raise OptionSpecError(f"Option {kind} name must be a non-empty string")

    if name.startswith("-"):
        raise OptionSpecError(
            f"Option {kind} name must not start with '-'", name=name
        )

    if any(ch.isspace() for ch in name):
        raise OptionSpecError(
            f"Option {kind} name must not contain whitespace", name=name
        )


@dataclass(frozen=True, eq=False)
class Option:
    """
    A declared command-line flag.

    Options compare by identity, so two declarations with the same names are
    still distinct entries in a registry.

    Example:
        output = Option("o", "output", has_argument=True, required=True,
                        description="output file")
    """

    short_name: str
    long_name: str
    has_argument: bool = False
    required: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        _validate_name("short", self.short_name)
        _validate_name("long", self.long_name)

    @property
    def short_flag(self) -> str:
        return f"-{self.short_name}"

    @property
    def long_flag(self) -> str:
        return f"--{self.long_name}"

    @property
    def display_name(self) -> str:
        """Both flags joined for messages, e.g. '-o/--output'."""
        return f"{self.short_flag}/{self.long_flag}"

    def matches(self, name: str) -> bool:
        """Check whether name is this option's short or long name."""
        return name in (self.short_name, self.long_name)


def help_option() -> Option:
    """Create the built-in -h/--help option."""
    return Option(
        HELP_SHORT_NAME,
        HELP_LONG_NAME,
        has_argument=False,
        required=False,
        description=HELP_DESCRIPTION,
    )
