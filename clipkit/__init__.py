"""
Command-line option declaration, parsing and help rendering.

Example:
    from clipkit import Option, OptionsRegistry, ParsingError

    registry = OptionsRegistry(
        "myapp",
        Option("o", "output", has_argument=True, required=True,
               description="output file"),
    )
    registry.add(Option("v", "verbose", description="verbose mode"))

    try:
        result = registry.parse()
    except ParsingError as e:
        print(e)
        print(registry.help_text())
    else:
        if result.help_requested:
            registry.print_help()
"""

from importlib.metadata import PackageNotFoundError, version

from .config import load_registry, registry_from_dict
from .exceptions import (
    ClipError,
    ConfigError,
    DuplicateOptionError,
    MissingArgumentError,
    MissingRequiredOptionError,
    OptionSpecError,
    ParsingError,
    UnknownOptionError,
)
from .help import ColumnLayout, HelpRenderer, compute_columns, render_plain, render_styled
from .option import Option
from .parser import ParseResult, Parser, parse
from .registry import OptionsRegistry

try:
    __version__ = version("clipkit")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    # Version
    "__version__",
    # Declaration
    "Option",
    "OptionsRegistry",
    "load_registry",
    "registry_from_dict",
    # Parsing
    "Parser",
    "ParseResult",
    "parse",
    # Help
    "ColumnLayout",
    "HelpRenderer",
    "compute_columns",
    "render_plain",
    "render_styled",
    # Exceptions
    "ClipError",
    "ConfigError",
    "DuplicateOptionError",
    "MissingArgumentError",
    "MissingRequiredOptionError",
    "OptionSpecError",
    "ParsingError",
    "UnknownOptionError",
]
