"""Target pattern resolution.

Where: src/runin/features/targets/usecases/resolver.py
What: Expand literal paths, globs and ``group:`` references into directories.
Why: Every later stage works on a plain, deduplicated list of absolute paths.
"""

from __future__ import annotations

import glob
import os
import re
import stat
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import final

from runin.features.targets.domain.models import (
    MAX_GROUP_DEPTH,
    ResolutionWarning,
    WarningReason,
    group_name,
)

_ENV_REFERENCE = re.compile(r"\$(?:\{(?P<braced>[^}]*)\}|(?P<name>[A-Za-z0-9_]+))")


def expand_pattern(pattern: str) -> str:
    """Expand ``~`` and ``$VAR`` / ``${VAR}`` references in ``pattern``.

    Unset variables expand to an empty string. A ``$`` not followed by a
    name is kept as is.
    """

    def _lookup(match: re.Match[str]) -> str:
        name = match.group("braced")
        if name is None:
            name = match.group("name")
        return os.environ.get(name, "")

    return _ENV_REFERENCE.sub(_lookup, os.path.expanduser(pattern))


@final
class TargetResolver:
    """Resolve target patterns against the filesystem and a group table.

    Resolution is best-effort: unknown groups, patterns without matches and
    matches that are not directories are skipped and recorded in
    :attr:`warnings` instead of raising.
    """

    def __init__(
        self,
        groups: Mapping[str, Sequence[str]] | None = None,
        *,
        max_depth: int = MAX_GROUP_DEPTH,
    ) -> None:
        self._groups: Mapping[str, Sequence[str]] = groups or {}
        self._max_depth: int = max_depth
        self._warnings: dict[ResolutionWarning, None] = {}

    @property
    def warnings(self) -> list[ResolutionWarning]:
        """Diagnostics from the most recent :meth:`resolve` call."""

        return list(self._warnings)

    def resolve(self, patterns: Iterable[str]) -> list[Path]:
        """Resolve ``patterns`` into existing directories.

        Args:
            patterns: Literal paths, globs or ``group:<name>`` references.

        Returns:
            list[Path]: Absolute directories, each listed once, in the order
            they were first reached. Matches of a single glob are sorted.
        """
        self._warnings = {}
        seen: set[str] = set()
        resolved: list[Path] = []

        for pattern in patterns:
            self._walk(pattern, 0, seen, resolved)
        return resolved

    def _walk(self, pattern: str, depth: int, seen: set[str], out: list[Path]) -> None:
        if depth > self._max_depth:
            self._warn(pattern, WarningReason.DEPTH_EXCEEDED)
            return

        name = group_name(pattern)
        if name is not None:
            entries = self._groups.get(name)
            if entries is None:
                self._warn(pattern, WarningReason.UNKNOWN_GROUP)
                return
            for entry in entries:
                self._walk(entry, depth + 1, seen, out)
            return

        matches = sorted(glob.glob(expand_pattern(pattern), include_hidden=True))
        if not matches:
            self._warn(pattern, WarningReason.NO_MATCH)
            return

        for match in matches:
            absolute = os.path.abspath(match)
            try:
                mode = os.stat(absolute).st_mode
            except OSError:
                self._warn(pattern, WarningReason.UNREADABLE, absolute)
                continue
            if not stat.S_ISDIR(mode):
                self._warn(pattern, WarningReason.NOT_A_DIRECTORY, absolute)
                continue
            if absolute in seen:
                continue
            seen.add(absolute)
            out.append(Path(absolute))

    def _warn(self, pattern: str, reason: WarningReason, path: str | None = None) -> None:
        self._warnings[ResolutionWarning(pattern=pattern, reason=reason, path=path)] = None


__all__ = ["TargetResolver", "expand_pattern"]
