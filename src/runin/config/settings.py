"""Where: src/runin/config/settings.py
What: Immutable run settings shared by the runner, engine and service.
Why: Mode switches travel as one value instead of process-wide flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def default_jobs() -> int:
    """Worker cap used when none is given: the host CPU count."""

    return os.cpu_count() or 1


@dataclass(frozen=True, slots=True)
class RunSettings:
    """Mode switches for one invocation.

    Attributes:
        parallel: Run jobs concurrently. When False the worker cap is 1.
        jobs: Maximum concurrent jobs in parallel mode.
        dry_run: Print what would run without spawning anything.
        dirty_only: Keep only directories with local or unpushed git work.
        shell: Join the command and hand it to the platform shell.
        quiet: Suppress status lines; child output is still shown.
    """

    parallel: bool = False
    jobs: int = field(default_factory=default_jobs)
    dry_run: bool = False
    dirty_only: bool = False
    shell: bool = False
    quiet: bool = False

    def __post_init__(self) -> None:
        if self.jobs < 1:
            raise ValueError(f"jobs must be at least 1, got {self.jobs}")

    @property
    def worker_limit(self) -> int:
        """Concurrency cap actually applied by the engine."""

        return self.jobs if self.parallel else 1

    def describe_mode(self) -> str:
        """Short label for the run header, e.g. ``parallel, 4 workers``."""

        if self.parallel:
            return f"parallel, {self.jobs} workers"
        return "seq"


__all__ = ["RunSettings", "default_jobs"]
