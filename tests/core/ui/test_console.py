"""Tests for clipkit.ui.console module."""

from __future__ import annotations

from io import StringIO
from unittest.mock import patch

import pytest

from clipkit.ui.console import (
    HELP_THEME,
    Console,
    _should_use_color,
    get_console,
    reset_console,
)

pytestmark = pytest.mark.unit


class TestColorDetection:
    """Tests for color auto-detection."""

    def test_no_color_env_disables(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert _should_use_color() is False

    def test_force_color_env_enables(self, monkeypatch):
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert _should_use_color() is True

    def test_falls_back_to_tty_check(self):
        with patch("clipkit.ui.console._is_interactive", return_value=False):
            assert _should_use_color() is False
        with patch("clipkit.ui.console._is_interactive", return_value=True):
            assert _should_use_color() is True


class TestConsole:
    """Tests for Console class."""

    def test_plain_write(self):
        output = StringIO()
        console = Console(no_color=True, file=output)

        console.write("-v", style="help.short")
        console.write(" | ")

        assert output.getvalue() == "-v | "
        assert console.is_rich is False

    def test_rich_write_applies_theme(self, monkeypatch):
        """Test styled segments carry ANSI codes when color is enabled."""
        monkeypatch.setenv("TERM", "xterm-256color")
        output = StringIO()
        console = Console(no_color=False, force_terminal=True, file=output)

        console.write("--verbose", style="help.long")

        result = output.getvalue()
        assert console.is_rich is True
        assert "--verbose" in result
        assert "\x1b[" in result

    def test_force_color_styles_redirected_output(self, monkeypatch):
        """Test FORCE_COLOR produces ANSI codes when the output is not a TTY."""
        monkeypatch.setenv("FORCE_COLOR", "1")
        monkeypatch.setenv("TERM", "xterm-256color")
        output = StringIO()

        with patch("clipkit.ui.console._is_interactive", return_value=False):
            console = Console(file=output)
        console.write("--verbose", style="help.long")

        assert console.is_rich is True
        assert "\x1b[" in output.getvalue()

    def test_redirected_output_is_plain_by_default(self):
        output = StringIO()

        with patch("clipkit.ui.console._is_interactive", return_value=False):
            console = Console(file=output)
        console.write("--verbose", style="help.long")

        assert console.is_rich is False
        assert output.getvalue() == "--verbose"

    def test_rich_write_keeps_brackets_literal(self):
        """Test text is not interpreted as rich markup."""
        output = StringIO()
        console = Console(no_color=False, force_terminal=True, file=output)

        console.write(" [<arg>]", style="help.arg")

        assert "[<arg>]" in output.getvalue()

    def test_rich_write_does_not_wrap(self):
        output = StringIO()
        console = Console(no_color=False, force_terminal=False, file=output)

        console.write("x" * 300)

        assert "\n" not in output.getvalue()

    def test_print_strips_markup_without_color(self):
        output = StringIO()
        console = Console(no_color=True, file=output)

        console.print("[green]Success![/green]")

        assert output.getvalue() == "Success!\n"

    def test_print_error(self):
        output = StringIO()
        console = Console(no_color=True, file=output)

        console.print_error("Unknown option '--x'")

        assert output.getvalue() == "Error: Unknown option '--x'\n"

    def test_print_error_keeps_brackets(self):
        output = StringIO()
        console = Console(no_color=False, force_terminal=False, file=output)

        console.print_error("bad [<arg>]")

        assert "bad [<arg>]" in output.getvalue()

    def test_print_warning(self):
        output = StringIO()
        console = Console(no_color=True, file=output)

        console.print_warning("careful")

        assert output.getvalue() == "Warning: careful\n"

    def test_theme_covers_help_styles(self):
        for tag in ("header", "short", "long", "arg", "desc", "required", "footer"):
            assert f"help.{tag}" in HELP_THEME


class TestGlobalConsole:
    """Tests for the shared console."""

    def test_get_console_is_cached(self):
        assert get_console() is get_console()

    def test_arguments_create_new_console(self):
        assert get_console(no_color=True) is not get_console()

    def test_reset_console(self):
        first = get_console()
        reset_console()
        assert get_console() is not first
