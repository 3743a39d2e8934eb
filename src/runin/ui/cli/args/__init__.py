"""Command line argument handling package."""

from runin.ui.cli.args.parser import COMMAND_SEPARATOR, ArgumentParser
from runin.ui.cli.args.options import RunArgs

__all__ = ["ArgumentParser", "COMMAND_SEPARATOR", "RunArgs"]
