"""
Option-related constants and resource limits.
"""

# Built-in help option, appended to every registry
HELP_SHORT_NAME = "h"
HELP_LONG_NAME = "help"
HELP_DESCRIPTION = "displays the help screen"

# Help screen layout
COLUMN_SEPARATOR = " | "
ARG_MARKER = "[<arg>]"
REQUIRED_MARKER = " (*)"
HELP_HEADER_SUFFIX = " - Help:"
HELP_FOOTER = "* - required arguments"

# Token that ends option scanning
END_OF_OPTIONS = "--"

# Maximum declaration file size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024
