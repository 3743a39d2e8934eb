"""Application service for fanning a command out over directories.

This layer centralizes construction of the resolver, dirty filter, runner and
engine so the CLI only deals with requests and results.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, final

from runin.config.settings import RunSettings
from runin.features.execution import (
    CancellationSignal,
    ConcurrencyEngine,
    ExecutionResult,
    JobRunnerPort,
    OutputSink,
    ProcessRunner,
)
from runin.features.targets import DirtyFilter, TargetResolver, VcsProbePort
from runin.platform.git import GitProbe
from runin.platform.logging import logger

DIRTY_CHECK_WORKERS: int = 8


class RunnerError(Exception):
    """A run cannot start because its inputs are unusable."""


class NoTargetsError(RunnerError):
    """No pattern resolved to an existing directory."""

    def __init__(self) -> None:
        super().__init__("no directories matched")


@dataclass(frozen=True)
class RunRequest:
    """Input parameters for one invocation.

    Attributes:
        patterns: Target patterns as given on the command line.
        command: Argument vector to run in each directory.
    """

    patterns: tuple[str, ...]
    command: tuple[str, ...]


@dataclass(frozen=True)
class RunPlan:
    """Directories selected for a run."""

    directories: list[Path]


@final
class RunService:
    """Application service that resolves targets and executes a command."""

    def __init__(
        self,
        settings: RunSettings,
        groups: Mapping[str, Sequence[str]] | None = None,
        *,
        sink: OutputSink | None = None,
        probe_factory: Callable[[], VcsProbePort] | None = None,
        runner_factory: Callable[[RunSettings, OutputSink], JobRunnerPort] | None = None,
    ) -> None:
        """Create a service with overridable collaborators.

        Tests can inject fake probes and runners while production code relies
        on git and real child processes.
        """
        self._settings: RunSettings = settings
        self._groups: Mapping[str, Sequence[str]] = groups or {}
        self._sink: OutputSink = sink or OutputSink()
        self._probe_factory: Callable[[], VcsProbePort] = probe_factory or GitProbe
        self._runner_factory: Callable[[RunSettings, OutputSink], JobRunnerPort] = (
            runner_factory or ProcessRunner
        )

    @property
    def sink(self) -> OutputSink:
        return self._sink

    def plan(self, request: RunRequest) -> RunPlan:
        """Resolve and, if requested, dirty-filter the request's targets.

        Raises:
            NoTargetsError: If no pattern matched a directory.
        """
        resolver = TargetResolver(self._groups)
        directories = resolver.resolve(request.patterns)
        for warning in resolver.warnings:
            logger.debug(
                "Pattern %s: %s",
                warning.pattern,
                warning.describe(),
                extra={
                    "run_event": "targets.warning",
                    "pattern": warning.pattern,
                    "reason": warning.describe(),
                },
            )

        if not directories:
            raise NoTargetsError()

        if self._settings.dirty_only:
            dirty_filter = DirtyFilter(self._probe_factory(), max_workers=DIRTY_CHECK_WORKERS)
            directories = dirty_filter.filter(directories)

        return RunPlan(directories=directories)

    def execute(
        self,
        signal: CancellationSignal,
        plan: RunPlan,
        request: RunRequest,
    ) -> ExecutionResult:
        """Run the request's command in every planned directory."""

        runner = self._runner_factory(self._settings, self._sink)
        engine = ConcurrencyEngine(self._settings, runner)
        return engine.execute(signal, plan.directories, request.command)


__all__ = [
    "NoTargetsError",
    "RunPlan",
    "RunRequest",
    "RunService",
    "RunnerError",
]
