"""Tests for the git command-line probe."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from runin.features.targets import DirtyFilter
from runin.platform.git import GitProbe, parse_ahead_behind

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def _git(repo: Path, *args: str) -> None:
    _ = subprocess.run(
        [
            "git",
            "-c",
            "user.name=runin",
            "-c",
            "user.email=runin@example.invalid",
            "-c",
            "commit.gpgsign=false",
            *args,
        ],
        cwd=repo,
        check=True,
        capture_output=True,
    )


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Create a git repository with one committed file.

    Returns:
        Path: Repository root.
    """
    root = tmp_path / "repo"
    root.mkdir()
    _git(root, "init", "-q")
    _ = (root / "tracked.txt").write_text("one\n")
    _git(root, "add", "tracked.txt")
    _git(root, "commit", "-q", "-m", "initial")
    return root


@pytest.mark.parametrize(
    ("output", "expected"),
    [
        ("0\t0\n", False),
        ("", False),
        ("  \n", False),
        ("0\t2\n", True),
        ("3\t0\n", True),
        ("garbage", True),
    ],
)
def test_parse_ahead_behind(output: str, expected: bool) -> None:
    assert parse_ahead_behind(output) is expected


def test_missing_executable_is_unknown(tmp_path: Path) -> None:
    """A git binary that cannot be spawned yields None, not an exception."""

    probe = GitProbe(executable="runin-no-such-git-binary")

    assert probe.has_local_modifications(tmp_path) is None
    assert probe.diverges_from_upstream(tmp_path) is None


@requires_git
def test_not_a_repository_is_unknown(tmp_path: Path) -> None:
    plain = tmp_path / "plain"
    plain.mkdir()

    assert GitProbe().has_local_modifications(plain) is None


@requires_git
def test_clean_repository(repo: Path) -> None:
    """A fresh commit has no local changes and no upstream to compare."""

    probe = GitProbe()

    assert probe.has_local_modifications(repo) is False
    assert probe.diverges_from_upstream(repo) is None
    assert DirtyFilter(probe).filter([repo]) == []


@requires_git
def test_modified_tracked_file_is_dirty(repo: Path) -> None:
    _ = (repo / "tracked.txt").write_text("two\n")

    probe = GitProbe()

    assert probe.has_local_modifications(repo) is True
    assert DirtyFilter(probe).filter([repo]) == [repo]


@requires_git
def test_untracked_files_are_ignored(repo: Path) -> None:
    _ = (repo / "scratch.txt").write_text("untracked\n")

    assert GitProbe().has_local_modifications(repo) is False


@requires_git
def test_commits_ahead_of_upstream_diverge(tmp_path: Path, repo: Path) -> None:
    """A clone with an unpushed commit is ahead of its upstream."""

    clone = tmp_path / "clone"
    _ = subprocess.run(
        ["git", "clone", "-q", str(repo), str(clone)], check=True, capture_output=True
    )
    probe = GitProbe()
    assert probe.diverges_from_upstream(clone) is False

    _ = (clone / "tracked.txt").write_text("ahead\n")
    _git(clone, "commit", "-q", "-am", "ahead")

    assert probe.has_local_modifications(clone) is False
    assert probe.diverges_from_upstream(clone) is True
    assert DirtyFilter(probe).filter([clone]) == [clone]
