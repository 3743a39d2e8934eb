"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn, final

from runin.config.settings import default_jobs
from runin.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from runin.ui.cli.args.options import RunArgs

COMMAND_SEPARATOR = "--"

_EPILOG = """\
Targets can be directory paths, globs, or group:name references.

Examples:
  runin ~/projects/* -- git pull
  runin --parallel -j4 services/* -- make test
  runin --dirty group:work -- git status -s
  runin --shell dev/* -- 'npm install && npm test'
"""


def _positive_int(value: str) -> int:
    """argparse type for worker counts."""

    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        The command after ``--`` is split off before parsing, so the parser
        only ever sees flags and target patterns.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="runin",
            usage="runin [flags] <targets>... -- <command> [args...]",
            description="Run a command in multiple directories at once.",
            epilog=_EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "targets",
            nargs="*",
            metavar="TARGET",
            help="Directory path, glob, or group:name reference",
        )
        _ = parser.add_argument(
            "--parallel",
            action="store_true",
            help="Run commands concurrently",
        )
        _ = parser.add_argument(
            "-j",
            "--jobs",
            type=_positive_int,
            default=default_jobs(),
            metavar="N",
            help="Max parallel jobs (default: number of CPUs)",
        )
        _ = parser.add_argument(
            "--dry",
            dest="dry_run",
            action="store_true",
            help="Print what would run, don't actually run it",
        )
        _ = parser.add_argument(
            "--dirty",
            action="store_true",
            help="Only target git repos with uncommitted or unpushed work",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            metavar="PATH",
            help="Path to config file",
        )
        _ = parser.add_argument(
            "--shell",
            action="store_true",
            help="Wrap command in sh -c / cmd /c",
        )
        _ = parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress status lines, only show output",
        )
        _ = parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show diagnostics about skipped patterns and git checks",
        )

        return parser

    @staticmethod
    def split_command(argv: Sequence[str]) -> tuple[list[str], list[str] | None]:
        """Split ``argv`` at the first ``--``.

        Returns:
            tuple: Arguments before the separator, and the command after it
            (None when there is no separator).
        """
        arguments = list(argv)
        try:
            index = arguments.index(COMMAND_SEPARATOR)
        except ValueError:
            return arguments, None
        return arguments[:index], arguments[index + 1:]

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> RunArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            RunArgs: Processed command line arguments.

        Raises:
            SystemExit: If targets, separator or command are missing.
        """
        argv = list(sys.argv[1:] if args_list is None else args_list)
        head, command = ArgumentParser.split_command(argv)

        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_intermixed_args(head)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO
        _ = setup_logger(log_file=DEFAULT_LOG_FILE, console_level=log_level)

        if not parsed_args.targets:
            parser.print_usage(sys.stderr)
            _die("no targets given")
        if command is None:
            _die(f"missing '{COMMAND_SEPARATOR}' before command")
        if not command:
            _die(f"no command given after '{COMMAND_SEPARATOR}'")

        return RunArgs(
            targets=tuple(parsed_args.targets),
            command=tuple(command),
            parallel=parsed_args.parallel,
            jobs=parsed_args.jobs,
            dry_run=parsed_args.dry_run,
            dirty=parsed_args.dirty,
            shell=parsed_args.shell,
            quiet=parsed_args.quiet,
            verbose=parsed_args.verbose,
            config_path=Path(parsed_args.config) if parsed_args.config else None,
        )


def _die(message: str) -> NoReturn:
    logger.error("runin: %s", message)
    sys.exit(1)


__all__ = ["ArgumentParser", "COMMAND_SEPARATOR"]
