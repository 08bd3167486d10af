"""
Console wrapper with auto-detection of color support.

Wraps a rich console configured with the help screen theme. Color is
disabled when NO_COLOR is set or output is not a terminal, in which case
text is written plainly with markup stripped. FORCE_COLOR enables styling
even when output is redirected.
"""

from __future__ import annotations

import os
import re
import sys
from typing import Any

from rich.console import Console as RichConsole
from rich.text import Text
from rich.theme import Theme


def _is_interactive() -> bool:
    """Check if we're in an interactive terminal."""
    return sys.stdout.isatty() and sys.stderr.isatty()


def _should_use_color() -> bool:
    """Determine if color output should be used."""
    # Respect NO_COLOR environment variable (https://no-color.org/)
    if os.environ.get("NO_COLOR"):
        return False

    if os.environ.get("FORCE_COLOR"):
        return True

    return _is_interactive()


# Style tags used by the help renderer
HELP_THEME = {
    "help.header": "yellow",
    "help.short": "blue",
    "help.long": "cyan",
    "help.arg": "magenta",
    "help.desc": "yellow",
    "help.required": "green",
    "help.footer": "green",
    "error": "red bold",
    "warning": "yellow",
}


class Console:
    """
    Console wrapper with auto-detection and graceful degradation.

    Example:
        console = Console()
        console.write("myapp", style="help.header")
        console.write("\\n")
        console.print_error("Something went wrong")
    """

    def __init__(
        self,
        *,
        force_terminal: bool | None = None,
        no_color: bool | None = None,
        file: Any = None,
    ):
        """
        Initialize the console.

        Args:
            force_terminal: Force terminal mode (True/False) or auto-detect (None)
            no_color: Disable color output (True/False) or auto-detect (None)
            file: Output file (default: sys.stdout)
        """
        self._file = file or sys.stdout
        self._rich_console: RichConsole | None = None

        if no_color is None:
            no_color = not _should_use_color()
        if force_terminal is None:
            # rich treats an explicit False as overriding FORCE_COLOR
            force_terminal = bool(os.environ.get("FORCE_COLOR")) or _is_interactive()

        self._no_color = no_color
        self._force_terminal = force_terminal

        if not no_color:
            self._rich_console = RichConsole(
                force_terminal=force_terminal,
                no_color=no_color,
                theme=Theme(HELP_THEME),
                file=self._file,
                highlight=False,
            )

    @property
    def is_rich(self) -> bool:
        """Check if styled output is enabled."""
        return self._rich_console is not None

    @property
    def file(self) -> Any:
        return self._file

    def write(self, text: str, style: str | None = None) -> None:
        """
        Write a text segment without a trailing newline.

        Args:
            text: Literal text (not interpreted as markup)
            style: Theme style tag or rich style string
        """
        if self._rich_console:
            self._rich_console.print(
                Text(text, style=style or ""), end="", soft_wrap=True
            )
        else:
            self._file.write(text)

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to the console, supporting rich markup when colored."""
        if self._rich_console:
            self._rich_console.print(*args, **kwargs)
        else:
            text = " ".join(self._strip_markup(str(arg)) for arg in args)
            print(text, file=self._file)

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        self._print_labeled("Warning:", "warning", message)

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self._print_labeled("Error:", "error", message)

    def _print_labeled(self, label: str, style: str, message: str) -> None:
        # message is literal text; option tokens like "[<arg>]" must not be
        # read as markup
        self.write(label, style=style)
        self.write(f" {message}\n")

    def flush(self) -> None:
        self._file.flush()

    @staticmethod
    def _strip_markup(text: str) -> str:
        """Remove rich markup tags from text."""
        return re.sub(r"\[/?[^\]]+\]", "", text)


# Global console instance
_global_console: Console | None = None


def get_console(
    *,
    force_terminal: bool | None = None,
    no_color: bool | None = None,
) -> Console:
    """
    Get or create the global console instance.

    Passing any argument creates a new, unshared console instead.
    """
    global _global_console

    if force_terminal is not None or no_color is not None:
        return Console(force_terminal=force_terminal, no_color=no_color)

    if _global_console is None:
        _global_console = Console()

    return _global_console


def reset_console() -> None:
    """Reset the global console instance."""
    global _global_console
    _global_console = None
