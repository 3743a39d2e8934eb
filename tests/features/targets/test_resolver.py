"""Tests for target pattern resolution."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from runin.features.targets import (
    MAX_GROUP_DEPTH,
    TargetResolver,
    WarningReason,
    expand_pattern,
)


def test_empty_pattern_list_resolves_to_nothing() -> None:
    """No patterns means no directories and no warnings."""

    resolver = TargetResolver()
    assert resolver.resolve([]) == []
    assert resolver.warnings == []


def test_literal_paths_keep_input_order(make_dirs: Callable[..., list[Path]]) -> None:
    """Literal directories come back absolute and in the order given."""

    b, a = make_dirs("b", "a")

    resolved = TargetResolver().resolve([str(b), str(a)])

    assert resolved == [b, a]
    assert all(path.is_absolute() for path in resolved)


def test_relative_patterns_become_absolute(
    make_dirs: Callable[..., list[Path]], tmp_path: Path
) -> None:
    """Relative patterns are resolved against the working directory."""

    _ = make_dirs("work/x")

    resolved = TargetResolver().resolve(["work/x"])

    assert resolved == [tmp_path / "work" / "x"]


def test_glob_matches_are_sorted_and_skip_files(
    make_dirs: Callable[..., list[Path]], tmp_path: Path
) -> None:
    """Glob expansion is deterministic and only keeps directories."""

    _ = make_dirs("repos/zeta", "repos/alpha", "repos/mid")
    _ = (tmp_path / "repos" / "notes.txt").write_text("not a dir")

    resolver = TargetResolver()
    resolved = resolver.resolve([str(tmp_path / "repos" / "*")])

    assert [p.name for p in resolved] == ["alpha", "mid", "zeta"]
    assert any(w.reason is WarningReason.NOT_A_DIRECTORY for w in resolver.warnings)


def test_duplicates_keep_first_occurrence(make_dirs: Callable[..., list[Path]], tmp_path: Path) -> None:
    """A directory reached twice is listed once, at its first position."""

    a, b, c = make_dirs("d/a", "d/b", "d/c")

    resolved = TargetResolver().resolve([str(b), str(tmp_path / "d" / "*"), str(b)])

    assert resolved == [b, a, c]


def test_dedup_is_by_absolute_path(make_dirs: Callable[..., list[Path]]) -> None:
    """Relative and absolute spellings of one directory collapse."""

    (a,) = make_dirs("same")

    resolved = TargetResolver().resolve(["same", str(a), "./same"])

    assert resolved == [a]


def test_missing_paths_are_skipped_with_warning(make_dirs: Callable[..., list[Path]]) -> None:
    """A pattern without matches contributes nothing and does not raise."""

    (a,) = make_dirs("present")

    resolver = TargetResolver()
    resolved = resolver.resolve(["does-not-exist", str(a)])

    assert resolved == [a]
    assert [w.reason for w in resolver.warnings] == [WarningReason.NO_MATCH]


def test_home_and_environment_are_expanded(
    make_dirs: Callable[..., list[Path]],
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """``~`` and ``$VAR`` references expand before globbing."""

    home_project, env_project = make_dirs("home/project", "envroot/project")
    monkeypatch.setenv("RUNIN_TEST_ROOT", str(tmp_path / "envroot"))

    resolved = TargetResolver().resolve(["~/project", "$RUNIN_TEST_ROOT/project"])

    assert resolved == [home_project, env_project]
    assert expand_pattern("$RUNIN_TEST_ROOT") == str(tmp_path / "envroot")
    assert expand_pattern("${RUNIN_TEST_ROOT}/x") == str(tmp_path / "envroot" / "x")


def test_unset_variables_expand_to_empty(
    make_dirs: Callable[..., list[Path]],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    (project,) = make_dirs("project")
    monkeypatch.delenv("RUNIN_UNSET_VAR", raising=False)

    assert expand_pattern("$RUNIN_UNSET_VAR/x") == "/x"
    assert expand_pattern("pre${RUNIN_UNSET_VAR}post") == "prepost"
    assert expand_pattern("cost$/x") == "cost$/x"
    assert TargetResolver().resolve(["project$RUNIN_UNSET_VAR"]) == [project]


def test_groups_expand_transitively(make_dirs: Callable[..., list[Path]]) -> None:
    """A group that references another group yields both, in listed order."""

    x, y = make_dirs("x", "y")
    groups = {"a": [str(x)], "b": ["group:a", str(y)]}

    assert TargetResolver(groups).resolve(["group:b"]) == [x, y]


def test_group_union_is_deduplicated(make_dirs: Callable[..., list[Path]]) -> None:
    """Overlapping groups do not repeat directories."""

    x, y, z = make_dirs("x", "y", "z")
    groups = {"front": [str(x), str(y)], "back": [str(y), str(z)]}

    resolved = TargetResolver(groups).resolve(["group:front", "group:back"])

    assert resolved == [x, y, z]


def test_unknown_group_is_silently_empty(make_dirs: Callable[..., list[Path]]) -> None:
    """Unknown groups are not an error."""

    (x,) = make_dirs("x")

    resolver = TargetResolver({"known": [str(x)]})
    resolved = resolver.resolve(["group:missing", "group:known"])

    assert resolved == [x]
    assert resolver.warnings[0].reason is WarningReason.UNKNOWN_GROUP
    assert resolver.warnings[0].pattern == "group:missing"


def test_self_referencing_group_terminates(make_dirs: Callable[..., list[Path]]) -> None:
    """A group containing itself stops at the depth bound."""

    (x,) = make_dirs("x")
    groups = {"loop": ["group:loop", str(x)]}

    resolver = TargetResolver(groups)
    resolved = resolver.resolve(["group:loop"])

    assert resolved == [x]
    assert any(w.reason is WarningReason.DEPTH_EXCEEDED for w in resolver.warnings)


def test_mutually_recursive_groups_terminate(make_dirs: Callable[..., list[Path]]) -> None:
    """Two groups referencing each other resolve without hanging."""

    x, y = make_dirs("x", "y")
    groups = {"ping": ["group:pong", str(x)], "pong": ["group:ping", str(y)]}

    resolved = TargetResolver(groups).resolve(["group:ping"])

    assert set(resolved) == {x, y}
    assert len(resolved) == 2


def test_nesting_up_to_depth_bound_is_followed(make_dirs: Callable[..., list[Path]]) -> None:
    """A chain exactly as deep as the bound still reaches its leaf."""

    (leaf,) = make_dirs("leaf")
    groups = {f"g{i}": [f"group:g{i + 1}"] for i in range(MAX_GROUP_DEPTH - 1)}
    groups[f"g{MAX_GROUP_DEPTH - 1}"] = [str(leaf)]

    assert TargetResolver(groups).resolve(["group:g0"]) == [leaf]


def test_nesting_past_depth_bound_is_truncated(make_dirs: Callable[..., list[Path]]) -> None:
    """One level deeper than the bound is abandoned."""

    (leaf,) = make_dirs("leaf")
    groups = {f"g{i}": [f"group:g{i + 1}"] for i in range(MAX_GROUP_DEPTH)}
    groups[f"g{MAX_GROUP_DEPTH}"] = [str(leaf)]

    assert TargetResolver(groups).resolve(["group:g0"]) == []


def test_warnings_reset_between_calls(make_dirs: Callable[..., list[Path]]) -> None:
    """Each resolve call starts with a clean diagnostics list."""

    (x,) = make_dirs("x")
    resolver = TargetResolver()

    _ = resolver.resolve(["nope"])
    assert resolver.warnings
    _ = resolver.resolve([str(x)])
    assert resolver.warnings == []
