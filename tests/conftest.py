"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test from an empty directory with an empty home.

    Keeps config discovery from picking up ``.runin.json`` files on the host.
    """

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("RUNIN_LOG_FILE", raising=False)
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_dirs(tmp_path: Path) -> Callable[..., list[Path]]:
    """Create directories under ``tmp_path`` and return their paths.

    Returns:
        Callable: Factory taking relative names.
    """

    def _make(*names: str) -> list[Path]:
        created: list[Path] = []
        for name in names:
            path = tmp_path / name
            path.mkdir(parents=True, exist_ok=True)
            created.append(path)
        return created

    return _make
