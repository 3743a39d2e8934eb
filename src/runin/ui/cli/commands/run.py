"""src/runin/ui/cli/commands/run.py
What: Execute a fan-out run from parsed CLI arguments.
Why: Bridge parsed arguments with the run service and summary display.
"""

from __future__ import annotations

import time

from runin.application.services import RunRequest, RunService
from runin.config.config import Config
from runin.config.settings import RunSettings
from runin.features.execution import CancellationSignal, ExecutionResult
from runin.ui.cli.args.options import RunArgs
from runin.ui.cli.display import SummaryDisplay


class RunCommand:
    """Command for running one command across many directories."""

    args: RunArgs
    settings: RunSettings
    app: RunService
    request: RunRequest
    summary_display: SummaryDisplay

    def __init__(self, args: RunArgs) -> None:
        """Initialize the command.

        Args:
            args: Command line arguments.
        """
        self.args = args
        self.settings = args.to_settings()
        config = Config.load(args.config_path)
        self.app = RunService(self.settings, config.groups)
        self.request = RunRequest(patterns=args.targets, command=args.command)
        self.summary_display = SummaryDisplay()

    def execute(self, signal: CancellationSignal) -> ExecutionResult | None:
        """Resolve targets, run the command and display the summary.

        Returns:
            The aggregated result, or None when ``--dirty`` left nothing to run.

        Raises:
            NoTargetsError: If no pattern matched a directory.
        """
        plan = self.app.plan(self.request)
        if not plan.directories:
            self.summary_display.show_nothing_dirty()
            return None

        self.summary_display.show_header(len(plan.directories), self.settings)

        started = time.perf_counter()
        result = self.app.execute(signal, plan, self.request)
        elapsed = time.perf_counter() - started

        self.summary_display.show_results(result, elapsed, quiet=self.settings.quiet)
        return result
