"""
Unified exception hierarchy for clipkit.

Declaration problems and parse failures are raised as typed exceptions so
the host application decides how to report them and which exit code to use.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .option import Option


class ClipError(Exception):
    """
    Base exception for all clipkit errors.

    Example:
        try:
            result = registry.parse(argv)
        except ClipError as e:
            console.print_error(str(e))
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class OptionSpecError(ClipError):
    """
    Invalid option declaration.

    Examples:
        - Empty short or long name
        - Name starting with a dash
        - Name containing whitespace
    """

    pass


class DuplicateOptionError(OptionSpecError):
    """Raised by strict registries when a short or long name is already taken."""

    def __init__(self, name: str, existing: Option) -> None:
        self.name = name
        self.existing = existing
        super().__init__(
            f"Option name '{name}' is already used by {existing.display_name}"
        )


class ConfigError(ClipError):
    """
    Option declaration file errors.

    Examples:
        - File not found or too large
        - Invalid YAML syntax
        - Missing or mistyped option keys
    """

    pass


class ParsingError(ClipError):
    """Base class for failures while parsing an argument vector."""

    pass


class MissingArgumentError(ParsingError):
    """Raised when an option that takes a value has no value token after it."""

    def __init__(self, option: Option, token: str) -> None:
        self.option = option
        self.token = token
        super().__init__(f"Option '{token}' requires an argument")


class UnknownOptionError(ParsingError):
    """Raised when a dash-prefixed token matches no declared option."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown option '{token}'")


class MissingRequiredOptionError(ParsingError):
    """Raised when required options are absent and help was not requested."""

    def __init__(self, missing: Iterable[Option]) -> None:
        self.missing = list(missing)
        names = ", ".join(f"--{opt.long_name}" for opt in self.missing)
        super().__init__(f"Missing required options: {names}")

    @property
    def missing_names(self) -> list[str]:
        """Long names of the missing options, in declaration order."""
        return [opt.long_name for opt in self.missing]
