"""
Command-line interface for clipkit.

Entry point is clipkit.cli.cli:main, installed as the ``clipkit`` script.
"""

from .cli import main

__all__ = ["main"]
