"""Summary: Ports defining execution use case dependencies.
Why: Let the engine drive real or fake runners without knowing which."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from runin.features.execution.domain.models import CancellationSignal


@runtime_checkable
class JobRunnerPort(Protocol):
    """Port for running one command in one directory."""

    def run(
        self,
        signal: CancellationSignal,
        directory: Path,
        command: Sequence[str],
    ) -> bool:
        """Run ``command`` in ``directory`` and return whether it succeeded."""
        ...


__all__ = ["JobRunnerPort"]
