"""Data structures that describe command fan-out runs."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class CancellationSignal:
    """Process-wide cancellation flag shared by every job of a run.

    The flag is set at most once and never cleared.
    """

    def __init__(self) -> None:
        self._event: threading.Event = threading.Event()

    def cancel(self) -> None:
        """Raise the signal. Later calls have no further effect."""

        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()


class JobOutcome(str, Enum):
    """How a single job ended."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def success(self) -> bool:
        return self is JobOutcome.SUCCEEDED


@dataclass(slots=True, frozen=True)
class ExecutionJob:
    """One command to run in one directory."""

    directory: Path
    command: tuple[str, ...]


@dataclass(slots=True)
class ExecutionResult:
    """Aggregate outcome of a run.

    Attributes:
        success_count: Jobs whose command exited cleanly.
        failed: Directories whose job failed or was interrupted, in
            completion order.
        abandoned: Directories whose job never started because the run was
            cancelled first. They count as neither success nor failure.
        cancelled: Whether the cancellation signal fired during the run.
    """

    success_count: int = 0
    failed: list[Path] = field(default_factory=list)
    abandoned: list[Path] = field(default_factory=list)
    cancelled: bool = False

    @property
    def failure_count(self) -> int:
        return len(self.failed)

    @property
    def ok(self) -> bool:
        """True when no job failed."""

        return not self.failed


__all__ = ["CancellationSignal", "ExecutionJob", "ExecutionResult", "JobOutcome"]
