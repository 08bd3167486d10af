"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the clipkit test suite.
"""

import logging
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from clipkit import Option, OptionsRegistry
from clipkit.ui import reset_console

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (may use filesystem or CLI entry)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")


# =============================================================================
# Global State
# =============================================================================


@pytest.fixture(autouse=True)
def reset_global_state() -> Generator[None, None, None]:
    """
    Reset logging and the shared console around each test.

    The CLI calls logging.basicConfig, and the shared console caches the
    stream it was created with.
    """
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level
    reset_console()

    yield

    reset_console()
    logging.root.handlers = original_handlers
    logging.root.setLevel(original_level)


@pytest.fixture(autouse=True)
def plain_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep color auto-detection deterministic regardless of the CI environment."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory that is cleaned up after the test.

    Yields:
        Path: Temporary directory path
    """
    temp_path = Path(tempfile.mkdtemp(prefix="clipkit-test-"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def registry() -> OptionsRegistry:
    """
    Provide a registry with a required option, a valued option and a flag.

    Options, in order: -o/--output (argument, required), -v/--verbose,
    -h/--help, -l/--level (argument).
    """
    registry = OptionsRegistry(
        "myapp",
        Option(
            "o", "output", has_argument=True, required=True, description="output file"
        ),
        Option("v", "verbose", description="verbose mode"),
    )
    registry.add(Option("l", "level", has_argument=True, description="log level"))
    return registry


@pytest.fixture
def declaration_file(temp_dir: Path) -> Path:
    """Provide a YAML declaration file matching the registry fixture."""
    path = temp_dir / "options.yaml"
    path.write_text(
        """\
context: myapp
options:
  - short: o
    long: output
    argument: true
    required: true
    description: output file
  - short: v
    long: verbose
    description: verbose mode
"""
    )
    return path
