"""Process runner for a single directory.

Where: src/runin/features/execution/usecases/process_runner.py
What: Spawn one command, stream both of its outputs through the shared sink,
    and report how it ended.
Why: Keeps every per-child concern (pipes, readers, termination) in one place
    so the engine only deals with booleans.
"""

from __future__ import annotations

import subprocess
import threading
from collections.abc import Sequence
from pathlib import Path
from typing import IO, Final, final

from rich.text import Text

from runin.config.settings import RunSettings
from runin.features.execution.domain.models import CancellationSignal, JobOutcome
from runin.platform.process import build_argv, isolation_kwargs, terminate_process_tree

from .output import OutputSink, make_tag

POLL_INTERVAL_SECONDS: Final[float] = 0.1


def describe_exit(returncode: int) -> str:
    """Human-readable reason for a non-zero exit."""

    if returncode < 0:
        return f"killed by signal {-returncode}"
    return f"exit status {returncode}"


@final
class ProcessRunner:
    """Run a command in a directory with tag-prefixed, line-atomic output."""

    def __init__(
        self,
        settings: RunSettings,
        sink: OutputSink,
        *,
        poll_interval: float = POLL_INTERVAL_SECONDS,
    ) -> None:
        self._settings: RunSettings = settings
        self._sink: OutputSink = sink
        self._poll_interval: float = poll_interval

    def run(
        self,
        signal: CancellationSignal,
        directory: Path,
        command: Sequence[str],
    ) -> bool:
        """Run ``command`` in ``directory``.

        Args:
            signal: Shared cancellation signal. When it fires the child and its
                process group are terminated.
            directory: Working directory for the child.
            command: Argument vector; joined for the shell in shell mode.

        Returns:
            bool: True only if the child exited with status 0. Dry runs always
            succeed.
        """
        return self.run_job(signal, directory, command).success

    def run_job(
        self,
        signal: CancellationSignal,
        directory: Path,
        command: Sequence[str],
    ) -> JobOutcome:
        """Like :meth:`run`, but distinguish failure from cancellation."""

        tag = make_tag(directory)

        if self._settings.dry_run:
            self._sink.line(tag, " ".join(command))
            return JobOutcome.SUCCEEDED

        if signal.is_set():
            self._status(tag, "interrupted")
            return JobOutcome.CANCELLED

        self._status(tag, "starting")

        try:
            argv = build_argv(command, shell=self._settings.shell)
            process = subprocess.Popen(
                argv,
                cwd=directory,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
                **isolation_kwargs(),
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            self._sink.line(tag, f"start failed: {e}", err=True)
            return JobOutcome.FAILED

        readers = [
            threading.Thread(
                target=self._drain,
                args=(stream, tag),
                name=f"runin-{name}-{directory.name}",
                daemon=True,
            )
            for name, stream in (("stdout", process.stdout), ("stderr", process.stderr))
        ]
        for reader in readers:
            reader.start()

        returncode = self._wait(process, signal)
        for reader in readers:
            reader.join()

        if returncode == 0:
            self._status(tag, "done")
            return JobOutcome.SUCCEEDED
        if signal.is_set():
            self._status(tag, "interrupted")
            return JobOutcome.CANCELLED
        self._status(tag, f"failed: {describe_exit(returncode)}")
        return JobOutcome.FAILED

    def _wait(self, process: subprocess.Popen[str], signal: CancellationSignal) -> int:
        """Wait for exit, terminating the child once cancellation is seen."""

        while True:
            try:
                return process.wait(timeout=self._poll_interval)
            except subprocess.TimeoutExpired:
                if signal.is_set():
                    terminate_process_tree(process)
                    return process.wait()

    def _drain(self, stream: IO[str] | None, tag: Text) -> None:
        """Forward every line of ``stream`` to the sink until EOF."""

        if stream is None:
            return
        with stream:
            for raw in stream:
                self._sink.line(tag, raw.rstrip("\r\n"))

    def _status(self, tag: Text, message: str) -> None:
        if self._settings.quiet:
            return
        self._sink.line(tag, message)


__all__ = ["POLL_INTERVAL_SECONDS", "ProcessRunner", "describe_exit"]
