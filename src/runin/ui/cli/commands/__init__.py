"""Command execution package for CLI."""

from runin.ui.cli.commands.run import RunCommand

__all__ = ["RunCommand"]
