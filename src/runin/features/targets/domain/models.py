"""
Summary: Target pattern vocabulary and resolution diagnostics.
Why: Share the group prefix, depth bound and warning records across layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

GROUP_PREFIX: Final[str] = "group:"
MAX_GROUP_DEPTH: Final[int] = 10


def group_name(pattern: str) -> str | None:
    """Return the group referenced by ``pattern``, or None for path patterns."""

    if pattern.startswith(GROUP_PREFIX):
        return pattern[len(GROUP_PREFIX):]
    return None


class WarningReason(str, Enum):
    """Why a pattern contributed nothing (or less than it might have)."""

    UNKNOWN_GROUP = "unknown group"
    DEPTH_EXCEEDED = "group nesting too deep"
    NO_MATCH = "no match"
    NOT_A_DIRECTORY = "not a directory"
    UNREADABLE = "cannot stat"


@dataclass(slots=True, frozen=True)
class ResolutionWarning:
    """A pattern or match the resolver skipped."""

    pattern: str
    reason: WarningReason
    path: str | None = None

    def describe(self) -> str:
        if self.path is not None:
            return f"{self.reason.value}: {self.path}"
        return self.reason.value


__all__ = [
    "GROUP_PREFIX",
    "MAX_GROUP_DEPTH",
    "ResolutionWarning",
    "WarningReason",
    "group_name",
]
