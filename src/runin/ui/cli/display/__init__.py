"""Display helpers for the CLI."""

from .summary import SummaryDisplay, format_elapsed

__all__ = ["SummaryDisplay", "format_elapsed"]
