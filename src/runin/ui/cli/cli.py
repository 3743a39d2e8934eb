"""Command line interface for runin."""

import signal
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType
from typing import Final, final

from runin.application.services import RunnerError
from runin.features.execution import CancellationSignal, ExecutionResult
from runin.platform.logging import logger
from runin.ui.cli.args import ArgumentParser
from runin.ui.cli.commands import RunCommand

EXIT_FAILURE: Final[int] = 1
EXIT_CANCELLED: Final[int] = 130


@contextmanager
def cancel_on_interrupt(cancellation: CancellationSignal) -> Iterator[CancellationSignal]:
    """Turn the first Ctrl-C into ``cancellation`` instead of an exception.

    After the first interrupt the default handler is restored, so a second
    Ctrl-C raises ``KeyboardInterrupt`` as usual. Outside the main thread the
    handler cannot be installed and the block runs unchanged.
    """
    if threading.current_thread() is not threading.main_thread():
        yield cancellation
        return

    def _handle(_signum: int, _frame: FrameType | None) -> None:
        cancellation.cancel()
        _ = signal.signal(signal.SIGINT, signal.default_int_handler)

    previous = signal.signal(signal.SIGINT, _handle)
    try:
        yield cancellation
    finally:
        _ = signal.signal(signal.SIGINT, previous)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            command = RunCommand(args)
            with cancel_on_interrupt(CancellationSignal()) as cancellation:
                result = command.execute(cancellation)

            exit_code = CommandProcessor.exit_code(result)
            if exit_code:
                sys.exit(exit_code)
            return

        except RunnerError as e:
            logger.error("runin: %s", e)
            sys.exit(EXIT_FAILURE)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(EXIT_CANCELLED)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(EXIT_FAILURE)

    @staticmethod
    def exit_code(result: ExecutionResult | None) -> int:
        """Map a run result to the process exit status.

        Any failed directory wins; otherwise an interrupted run exits 130.
        """
        if result is None:
            return 0
        if result.failed:
            return EXIT_FAILURE
        if result.cancelled:
            return EXIT_CANCELLED
        return 0


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing, so this return is only
        reached when every job succeeded.
    """
    CommandProcessor.process_command()
    return 0
