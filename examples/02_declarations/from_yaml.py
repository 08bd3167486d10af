#!/usr/bin/env python3
"""
YAML Declarations Example

Demonstrates loading option declarations from a YAML file and printing
both help forms.

Run: python examples/02_declarations/from_yaml.py
"""

import sys
from pathlib import Path

# Add parent to path for development
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from clipkit import load_registry
from clipkit.ui import get_console

DECLARATIONS = Path(__file__).parent / "options.yaml"


def main() -> int:
    registry = load_registry(DECLARATIONS)
    console = get_console()

    console.print("[bold]Aligned help:[/bold]")
    registry.print_help()
    console.print()

    console.print("[bold]Plain help:[/bold]")
    console.write(registry.help_text())

    result = registry.parse(["-s", "/srv/data", "-d", "/mnt/backup", "-n"])
    console.print(f"\nparsed: {result.to_dict()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
