"""
Argument vector parsing.

Tokens are scanned left to right against a registry snapshot:

- ``--name`` matches an option by exact long name
- ``-x`` matches an option by exact short name
- an option that takes an argument consumes the following token
- bare tokens (including a lone ``-``) are kept as leftovers
- a lone ``--`` ends option scanning; the remaining tokens are leftovers

Matching is case-sensitive with no abbreviations and no ``--name=value``
form. When ``-h``/``--help`` is present the required-option check is skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .constants import END_OF_OPTIONS
from .exceptions import (
    MissingArgumentError,
    MissingRequiredOptionError,
    UnknownOptionError,
)

if TYPE_CHECKING:
    from .option import Option
    from .registry import OptionsRegistry

lg = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """
    Outcome of a successful parse.

    Attributes:
        values: Matched option long names mapped to their value (None for
            flags). Options sharing a long name share one key, holding the
            last value recorded; get_value() keeps them apart.
        matched: Matched options in first-occurrence order
        leftovers: Bare tokens that were not consumed as option values
        help_requested: True when -h/--help was supplied
    """

    values: dict[str, str | None] = field(default_factory=dict)
    matched: list[Option] = field(default_factory=list)
    leftovers: list[str] = field(default_factory=list)
    help_requested: bool = False
    _option_values: dict[Option, str | None] = field(
        default_factory=dict, repr=False, compare=False
    )

    def _record(self, option: Option, value: str | None) -> None:
        if option not in self.matched:
            self.matched.append(option)
        self.values[option.long_name] = value
        # values shares a key between options with the same long name
        self._option_values[option] = value

    def _lookup(self, name: str) -> Option | None:
        for option in self.matched:
            if option.long_name == name:
                return option
        for option in self.matched:
            if option.short_name == name:
                return option
        return None

    def is_present(self, name: str) -> bool:
        """Check whether the option with this short or long name was supplied."""
        return self._lookup(name) is not None

    def get_value(self, name: str, default: str | None = None) -> str | None:
        """Value of the option with this short or long name, or default."""
        option = self._lookup(name)
        if option is None:
            return default
        value = self._option_values.get(option)
        return default if value is None else value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_present(name)

    def to_dict(self) -> dict:
        return {
            "values": dict(self.values),
            "leftovers": list(self.leftovers),
            "help_requested": self.help_requested,
        }


def _looks_like_option(token: str) -> bool:
    return token.startswith("-")


class Parser:
    """
    Parses argument vectors against a registry.

    The registry is only read; a parser can be reused for any number of
    argument vectors.

    -h/--help requests help against any registry, except a permissive one
    where the host declared its own -h or --help ahead of the built-in
    option. The host option then matches first and is parsed like any
    other option.

    Example:
        parser = Parser(registry)
        result = parser.parse(["-o", "out.txt", "input.txt"])
        result.get_value("output")  # "out.txt"
        result.leftovers            # ["input.txt"]
    """

    def __init__(self, registry: OptionsRegistry) -> None:
        self.registry = registry

    def parse(self, argv: Sequence[str]) -> ParseResult:
        """
        Parse argv.

        Raises:
            UnknownOptionError: A dash-prefixed token matches no option
            MissingArgumentError: An option's value token is absent
            MissingRequiredOptionError: Required options were not supplied
        """
        result = self._scan(list(argv))

        if self.registry.help_option in result.matched:
            result.help_requested = True
            lg.debug("help requested", extra={"context": self.registry.context})
            return result

        missing = [
            option
            for option in self.registry.options
            if option.required and option not in result.matched
        ]
        if missing:
            raise MissingRequiredOptionError(missing)

        lg.debug(
            "parsed arguments",
            extra={
                "context": self.registry.context,
                "matched": len(result.matched),
                "leftovers": len(result.leftovers),
            },
        )
        return result

    def _scan(self, tokens: list[str]) -> ParseResult:
        result = ParseResult()
        pos = 0
        while pos < len(tokens):
            token = tokens[pos]
            if token == END_OF_OPTIONS:
                result.leftovers.extend(tokens[pos + 1 :])
                break

            option = self._match(token)
            if option is None:
                result.leftovers.append(token)
                pos += 1
                continue

            value = None
            if option.has_argument:
                value = self._take_value(option, token, tokens, pos + 1)
                pos += 1

            lg.debug(
                "matched option",
                extra={"option": option.display_name, "has_value": value is not None},
            )
            result._record(option, value)
            pos += 1
        return result

    def _match(self, token: str) -> Option | None:
        """Resolve a token to an option, None for bare tokens."""
        if token.startswith("--"):
            option = self.registry.find_long(token[2:])
        elif token.startswith("-") and len(token) > 1:
            option = self.registry.find_short(token[1:])
        else:
            return None

        if option is None:
            raise UnknownOptionError(token)
        return option

    @staticmethod
    def _take_value(option: Option, token: str, tokens: list[str], pos: int) -> str:
        if pos >= len(tokens) or _looks_like_option(tokens[pos]):
            raise MissingArgumentError(option, token)
        return tokens[pos]


def parse(registry: OptionsRegistry, argv: Sequence[str]) -> ParseResult:
    """Parse argv against registry. See Parser.parse."""
    return Parser(registry).parse(argv)
