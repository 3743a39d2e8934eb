"""Shared path utilities for configuration and log locations.

This module centralizes how the tool discovers its config and log files.

Policy:
- Config: an explicit ``--config`` path when given; otherwise
  ``.runin.json`` and ``runin.json`` in the working directory, then
  ``~/.runin.json``.
- Log file: disabled unless ``RUNIN_LOG_FILE`` is set.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_LOG_FILE: Final[str] = "RUNIN_LOG_FILE"
LOCAL_CONFIG_NAMES: Final[tuple[str, ...]] = (".runin.json", "runin.json")
HOME_CONFIG_NAME: Final[str] = ".runin.json"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path | None],
) -> Path | None:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve() if default_path is not None else None


def config_search_paths(
    explicit_path: Path | str | None = None,
    *,
    cwd: Path | None = None,
    home: Path | None = None,
) -> list[Path]:
    """Return config candidates in lookup order.

    Args:
        explicit_path: Path given on the command line. When set, it is the
            only candidate.
        cwd: Directory holding local config files. Defaults to the process
            working directory.
        home: Home directory. Defaults to ``Path.home()``; skipped when it
            cannot be determined.

    Returns:
        list[Path]: Candidate files, most specific first.
    """
    if explicit_path is not None and str(explicit_path) != "":
        return [Path(explicit_path).expanduser()]

    base = cwd if cwd is not None else Path.cwd()
    candidates = [base / name for name in LOCAL_CONFIG_NAMES]

    if home is None:
        try:
            home = Path.home()
        except RuntimeError:
            home = None
    if home is not None:
        candidates.append(home / HOME_CONFIG_NAME)
    return candidates


def default_log_file(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the log file path, or ``None`` when file logging is disabled."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_LOG_FILE,
        default_factory=lambda: None,
    )


__all__ = [
    "HOME_CONFIG_NAME",
    "LOCAL_CONFIG_NAMES",
    "config_search_paths",
    "default_log_file",
    "resolve_overridable_path",
]
