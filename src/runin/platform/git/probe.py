"""Where: src/runin/platform/git/probe.py
What: Answer "has local changes" and "diverges from upstream" via the git CLI.
Why: Keep subprocess details and git output parsing out of the dirty filter.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Final, final

from runin.platform.logging import logger

GIT_TIMEOUT_SECONDS: Final[float] = 30.0


def parse_ahead_behind(output: str) -> bool:
    """Return whether ``rev-list --left-right --count`` output shows divergence.

    The command prints ``<behind>\\t<ahead>``. Anything other than two zeros,
    including output that does not parse, counts as diverged.
    """
    parts = output.split()
    if not parts:
        return False
    return parts != ["0", "0"]


@final
class GitProbe:
    """Run read-only git queries in a working tree.

    Each query returns ``None`` when git cannot answer: the directory is not a
    repository, no upstream is configured, or git is not installed.
    """

    def __init__(self, executable: str = "git", timeout: float = GIT_TIMEOUT_SECONDS) -> None:
        self._executable: str = executable
        self._timeout: float = timeout

    def _output(self, directory: Path, *args: str) -> str | None:
        try:
            result = subprocess.run(
                [self._executable, *args],
                cwd=directory,
                capture_output=True,
                text=True,
                stdin=subprocess.DEVNULL,
                timeout=self._timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("git %s failed in %s: %s", " ".join(args), directory, e)
            return None

        if result.returncode != 0:
            logger.debug(
                "git %s exited %d in %s: %s",
                " ".join(args),
                result.returncode,
                directory,
                result.stderr.strip(),
            )
            return None
        return result.stdout

    def has_local_modifications(self, directory: Path) -> bool | None:
        """Tracked files modified or staged; untracked files are ignored."""

        output = self._output(directory, "status", "--porcelain", "-uno")
        if output is None:
            return None
        return bool(output.strip())

    def diverges_from_upstream(self, directory: Path) -> bool | None:
        """HEAD is ahead of or behind its upstream branch."""

        output = self._output(directory, "rev-list", "--count", "--left-right", "@{u}...HEAD")
        if output is None:
            return None
        return parse_ahead_behind(output)


__all__ = ["GitProbe", "parse_ahead_behind"]
