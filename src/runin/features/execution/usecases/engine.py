"""
Summary: Bounded-concurrency fan-out of one command over many directories.
Why: Cap parallelism, honor cancellation and fold per-job results safely.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import final

from runin.config.settings import RunSettings
from runin.features.execution.domain.models import (
    CancellationSignal,
    ExecutionJob,
    ExecutionResult,
)
from runin.platform.logging import logger

from .ports import JobRunnerPort


class _ResultAccumulator:
    """Lock-guarded success counter and failure list."""

    def __init__(self) -> None:
        self._lock: threading.Lock = threading.Lock()
        self._result: ExecutionResult = ExecutionResult()

    def record(self, directory: Path, success: bool) -> None:
        with self._lock:
            if success:
                self._result.success_count += 1
            else:
                self._result.failed.append(directory)

    def abandon(self, directory: Path) -> None:
        with self._lock:
            self._result.abandoned.append(directory)

    def finish(self, cancelled: bool) -> ExecutionResult:
        with self._lock:
            self._result.cancelled = cancelled
            return self._result


@final
class ConcurrencyEngine:
    """Run one job per directory on a bounded worker pool.

    At most ``settings.worker_limit`` jobs run at once; with a limit of 1 jobs
    run strictly in input order. A failing job never stops its siblings. Once
    the cancellation signal fires, jobs that have not started yet are
    abandoned and running ones are terminated by the runner.
    """

    def __init__(self, settings: RunSettings, runner: JobRunnerPort) -> None:
        self._settings: RunSettings = settings
        self._runner: JobRunnerPort = runner

    def execute(
        self,
        signal: CancellationSignal,
        directories: Sequence[Path],
        command: Sequence[str],
    ) -> ExecutionResult:
        """Run ``command`` in every directory and aggregate the outcomes.

        Args:
            signal: Shared cancellation signal.
            directories: Resolved target directories.
            command: Argument vector, identical for every job.

        Returns:
            ExecutionResult: Success count and failed directories in
            completion order, plus directories abandoned on cancellation.
        """
        accumulator = _ResultAccumulator()
        jobs = [ExecutionJob(directory=d, command=tuple(command)) for d in directories]

        with ThreadPoolExecutor(
            max_workers=self._settings.worker_limit,
            thread_name_prefix="runin-job",
        ) as executor:
            for job in jobs:
                _ = executor.submit(self._run_one, signal, job, accumulator)

        return accumulator.finish(cancelled=signal.is_set())

    def _run_one(
        self,
        signal: CancellationSignal,
        job: ExecutionJob,
        accumulator: _ResultAccumulator,
    ) -> None:
        directory = job.directory
        if signal.is_set():
            logger.debug(
                "Abandoned %s",
                directory,
                extra={
                    "run_event": "execution.job.abandoned",
                    "directory": directory,
                    "reason": "cancelled before start",
                },
            )
            accumulator.abandon(directory)
            return

        try:
            success = self._runner.run(signal, directory, job.command)
        except Exception as e:
            logger.exception(
                "Job in %s raised: %s",
                directory,
                e,
                extra={
                    "run_event": "execution.job.error",
                    "directory": directory,
                    "reason": str(e),
                },
            )
            success = False
        accumulator.record(directory, success)


__all__ = ["ConcurrencyEngine"]
