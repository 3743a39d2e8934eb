"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from runin.config.settings import RunSettings


@final
@dataclass(slots=True)
class RunArgs:
    """Parsed command line for one invocation."""

    targets: tuple[str, ...]
    command: tuple[str, ...]
    parallel: bool
    jobs: int
    dry_run: bool
    dirty: bool
    shell: bool
    quiet: bool
    verbose: bool
    config_path: Path | None

    def to_settings(self) -> RunSettings:
        """Freeze the mode switches into the settings passed to the core."""

        return RunSettings(
            parallel=self.parallel,
            jobs=self.jobs,
            dry_run=self.dry_run,
            dirty_only=self.dirty,
            shell=self.shell,
            quiet=self.quiet,
        )


__all__ = ["RunArgs"]
