"""Where: src/runin/features/execution/usecases/output.py
What: Lock-guarded, tag-prefixed line writer shared by all running jobs.
Why: Lines from concurrent children must never interleave mid-line.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import final

from rich.console import Console
from rich.text import Text

TAG_STYLE = "cyan"


def make_tag(directory: Path) -> Text:
    """Return the ``[<last path component>]`` prefix for ``directory``."""

    name = directory.name or str(directory)
    return Text(f"[{name}]", style=TAG_STYLE)


def _render_tag(console: Console, tag: Text) -> str:
    """Render ``tag`` with the console's color settings, without a newline."""

    with console.capture() as capture:
        console.print(tag, end="")
    return capture.get()


def _plain_console(*, stderr: bool) -> Console:
    return Console(
        stderr=stderr,
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
    )


@final
class OutputSink:
    """Serialize whole-line writes to stdout and stderr.

    One lock guards both streams, so a line printed to either is written
    atomically with respect to every other line.
    """

    def __init__(
        self,
        stdout: Console | None = None,
        stderr: Console | None = None,
    ) -> None:
        self._stdout: Console = stdout or _plain_console(stderr=False)
        self._stderr: Console = stderr or _plain_console(stderr=True)
        self._lock: threading.Lock = threading.Lock()

    def line(self, tag: Text | None, message: str, *, err: bool = False) -> None:
        """Write one line, optionally prefixed with ``tag``.

        Only the tag goes through the console for styling. ``message`` is
        written to the stream verbatim, so tabs, escape sequences and control
        characters in child output reach the terminal unchanged.
        """
        console = self._stderr if err else self._stdout
        with self._lock:
            prefix = f"{_render_tag(console, tag)} " if tag is not None else ""
            stream = console.file
            _ = stream.write(f"{prefix}{message}\n")
            stream.flush()


__all__ = ["OutputSink", "TAG_STYLE", "make_tag"]
