"""Rich console handler for runin diagnostics.

Where: platform/logging/handlers.py
What: Render structured run events with icons and colors, plain text otherwise.
Why: Diagnostics share stderr with child output and must stay easy to scan.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable, Group
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text
from rich.traceback import Traceback


class RunEventRichHandler(RichHandler):
    """Rich handler that styles records carrying a ``run_event`` extra."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "targets.warning": ("⚠️", "yellow"),
        "targets.dirty.included": ("✏️", "green"),
        "targets.dirty.excluded": ("↪️", "yellow"),
        "execution.job.abandoned": ("⏭️", "yellow"),
        "execution.job.error": ("⛔", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "targets.warning": "Skipped pattern ",
        "targets.dirty.included": "Dirty ",
        "targets.dirty.excluded": "Clean or unknown ",
        "execution.job.abandoned": "Abandoned ",
        "execution.job.error": "Job crashed ",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _render_run_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured run events with dedicated styling."""

        event = getattr(record, "run_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, ""))

        subject = getattr(record, "pattern", None) or getattr(record, "directory", None)
        if subject is not None:
            _ = body.append(str(subject), style=Style(color="white"))

        reason = getattr(record, "reason", None)
        if reason:
            _ = body.append(f" ({reason})")

        _ = text.append_text(body)
        return text

    @override
    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        """Emit the message alone, without the padded log columns."""

        if traceback is None:
            return message_renderable
        return Group(message_renderable, traceback)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for run events."""

        event_text = self._render_run_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["RunEventRichHandler"]
