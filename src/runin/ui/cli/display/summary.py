"""src/runin/ui/cli/display/summary.py
What: Render the run header, final summary and failure report.
Why: Keep console output formatting in one place, away from the engine.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from runin.config.settings import RunSettings
from runin.features.execution import ExecutionResult


def format_elapsed(seconds: float) -> str:
    """Format a duration rounded to the millisecond, e.g. ``12ms`` or ``1.5s``."""

    millis = round(seconds * 1000)
    if millis < 1000:
        return f"{millis}ms"

    minutes, millis = divmod(millis, 60_000)
    secs = f"{millis / 1000:.3f}".rstrip("0").rstrip(".")
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


def _plain_console(*, stderr: bool) -> Console:
    return Console(stderr=stderr, soft_wrap=True, highlight=False, emoji=False)


@final
class SummaryDisplay:
    """Handles header and summary display in CLI."""

    console: Console
    error_console: Console

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.console = console or _plain_console(stderr=False)
        self.error_console = error_console or _plain_console(stderr=True)

    def show_header(self, directory_count: int, settings: RunSettings) -> None:
        """Announce how many directories will run and in which mode."""

        if settings.quiet:
            return
        self.console.print(
            f"running in {directory_count} dirs ({settings.describe_mode()})",
            markup=False,
        )

    def show_nothing_dirty(self) -> None:
        self.console.print("nothing dirty")

    def show_results(
        self,
        result: ExecutionResult,
        elapsed_seconds: float,
        *,
        quiet: bool = False,
    ) -> None:
        """Display the cancellation notice, summary line and failed directories.

        Args:
            result: Aggregated run result.
            elapsed_seconds: Wall time of the execution phase.
            quiet: Whether to suppress the summary line. Failures are always
                reported.
        """
        if result.cancelled:
            self.error_console.print("\n[yellow]cancelled[/yellow]")

        if not quiet:
            self.console.print(
                f"\ndone in {format_elapsed(elapsed_seconds)} - "
                f"[green]{result.success_count} ok[/green], "
                f"[red]{result.failure_count} failed[/red]"
            )

        for directory in result.failed:
            self.error_console.print(f"  FAIL {directory}", markup=False)


__all__ = ["SummaryDisplay", "format_elapsed"]
