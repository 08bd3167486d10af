#!/usr/bin/env python3
"""
Declare and Parse Example

Demonstrates the core clipkit flow:
- Declaring options on a registry
- Parsing the process arguments
- Showing help on -h/--help or on a parse error

Run: python examples/01_basics/declare_and_parse.py -o out.txt -v input.txt
"""

import sys
from pathlib import Path

# Add parent to path for development
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from clipkit import Option, OptionsRegistry, ParsingError
from clipkit.ui import get_console


def build_registry() -> OptionsRegistry:
    """Declare the example's options."""
    registry = OptionsRegistry(
        "declare_and_parse",
        Option("o", "output", has_argument=True, required=True, description="output file"),
    )
    registry.add(Option("v", "verbose", description="verbose mode"))
    registry.add(Option("l", "level", has_argument=True, description="compression level"))
    return registry


def main() -> int:
    registry = build_registry()
    console = get_console()

    try:
        result = registry.parse()
    except ParsingError as e:
        console.print_error(str(e))
        registry.print_help()
        return 2

    if result.help_requested:
        registry.print_help()
        return 0

    console.print(f"output:    {result.get_value('output')}")
    console.print(f"level:     {result.get_value('level', '6')}")
    console.print(f"verbose:   {result.is_present('verbose')}")
    console.print(f"leftovers: {result.leftovers}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
