"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helper, and the Rich handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, logger, setup_logger
from .handlers import RunEventRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "RunEventRichHandler",
    "logger",
    "setup_logger",
]
