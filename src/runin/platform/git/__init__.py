"""Git command-line adapter."""

from .probe import GitProbe, parse_ahead_behind

__all__ = ["GitProbe", "parse_ahead_behind"]
