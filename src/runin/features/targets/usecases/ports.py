"""Summary: Ports defining target selection dependencies.
Why: Decouple the dirty filter from git so tests and swaps stay simple."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class VcsProbePort(Protocol):
    """Port for version-control working tree queries.

    Both queries return None when the answer is unknown.
    """

    def has_local_modifications(self, directory: Path) -> bool | None:
        """Return True if tracked files have uncommitted changes."""
        ...

    def diverges_from_upstream(self, directory: Path) -> bool | None:
        """Return True if HEAD is ahead of or behind its upstream."""
        ...


__all__ = ["VcsProbePort"]
