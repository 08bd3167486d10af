"""Allow running clipkit as ``python -m clipkit``."""

import sys

from clipkit.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
