"""Child process spawning and termination helpers."""

from .spawn import build_argv, isolation_kwargs, shell_command, terminate_process_tree

__all__ = ["build_argv", "isolation_kwargs", "shell_command", "terminate_process_tree"]
