"""
Summary: Keep only directories whose git working tree has pending work.
Why: Lets one command target just the repositories that need attention.
"""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import final

from runin.platform.logging import logger

from .ports import VcsProbePort


@final
class DirtyFilter:
    """Filter directories down to dirty working trees.

    A directory is dirty when tracked files have local modifications or HEAD
    diverges from its upstream. Unknown answers count as clean, so a directory
    that cannot be checked is never selected.
    """

    def __init__(self, probe: VcsProbePort, *, max_workers: int = 1) -> None:
        self._probe: VcsProbePort = probe
        self._max_workers: int = max(1, max_workers)

    def is_dirty(self, directory: Path) -> bool:
        """Return whether ``directory`` has local or unpushed/unpulled work."""

        modified = self._probe.has_local_modifications(directory)
        if modified is None:
            self._log(directory, included=False, reason="status unavailable")
            return False
        if modified:
            self._log(directory, included=True, reason="local changes")
            return True

        diverged = self._probe.diverges_from_upstream(directory)
        if diverged:
            self._log(directory, included=True, reason="diverged from upstream")
            return True

        reason = "no upstream" if diverged is None else "clean"
        self._log(directory, included=False, reason=reason)
        return False

    def filter(self, directories: Sequence[Path]) -> list[Path]:
        """Return the dirty subset of ``directories`` in input order."""

        if self._max_workers == 1 or len(directories) <= 1:
            return [d for d in directories if self.is_dirty(d)]

        with ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="dirty-check"
        ) as executor:
            flags = list(executor.map(self.is_dirty, directories))
        return [d for d, dirty in zip(directories, flags) if dirty]

    @staticmethod
    def _log(directory: Path, *, included: bool, reason: str) -> None:
        event = "targets.dirty.included" if included else "targets.dirty.excluded"
        logger.debug(
            "%s: %s",
            directory,
            reason,
            extra={"run_event": event, "directory": directory, "reason": reason},
        )


__all__ = ["DirtyFilter"]
