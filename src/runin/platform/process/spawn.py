"""Platform-specific child process helpers.

Where: src/runin/platform/process/spawn.py
What: Build the argv for direct or shell-wrapped commands and stop child trees.
Why: This is the only place where POSIX and Windows behave differently.
"""

from __future__ import annotations

import os
import signal
import subprocess
from collections.abc import Sequence
from typing import Any, Final

TERMINATE_GRACE_SECONDS: Final[float] = 3.0


def shell_command() -> tuple[str, str]:
    """Return the platform shell and its "run this string" flag."""

    if os.name == "nt":
        return "cmd", "/c"
    return "sh", "-c"


def build_argv(command: Sequence[str], *, shell: bool) -> list[str]:
    """Return the argv to spawn for ``command``.

    In shell mode the words are joined with single spaces and passed to the
    platform shell, so ``["npm install", "&&", "npm test"]`` works as typed.

    Raises:
        ValueError: If ``command`` is empty.
    """
    if not command:
        raise ValueError("command must not be empty")
    if shell:
        sh, flag = shell_command()
        return [sh, flag, " ".join(command)]
    return list(command)


def isolation_kwargs() -> dict[str, Any]:
    """``Popen`` keyword arguments that put the child in its own process group.

    The runner then owns termination of the whole tree, including grandchildren
    started by a wrapping shell.
    """
    if os.name == "nt":
        return {"creationflags": getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", 0)}
    return {"start_new_session": True}


def terminate_process_tree(
    process: subprocess.Popen[str],
    grace_seconds: float = TERMINATE_GRACE_SECONDS,
) -> None:
    """Ask a child and its group to stop, then kill it after ``grace_seconds``."""

    if process.poll() is not None:
        return

    if os.name == "nt":
        process.terminate()
    else:
        try:
            os.killpg(os.getpgid(process.pid), signal.SIGTERM)
        except (ProcessLookupError, PermissionError):
            process.terminate()

    try:
        _ = process.wait(timeout=grace_seconds)
        return
    except subprocess.TimeoutExpired:
        pass

    if os.name == "nt":
        process.kill()
        return
    try:
        os.killpg(os.getpgid(process.pid), signal.SIGKILL)
    except (ProcessLookupError, PermissionError):
        process.kill()


__all__ = [
    "TERMINATE_GRACE_SECONDS",
    "build_argv",
    "isolation_kwargs",
    "shell_command",
    "terminate_process_tree",
]
