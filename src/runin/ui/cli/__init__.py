"""Command line interface package."""

from runin.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
