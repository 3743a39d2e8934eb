"""Tests for run settings."""

from __future__ import annotations

import dataclasses

import pytest

from runin.config.settings import RunSettings, default_jobs


def test_defaults() -> None:
    settings = RunSettings()

    assert settings.parallel is False
    assert settings.jobs == default_jobs()
    assert settings.worker_limit == 1
    assert settings.describe_mode() == "seq"


def test_parallel_uses_job_count() -> None:
    settings = RunSettings(parallel=True, jobs=6)

    assert settings.worker_limit == 6
    assert settings.describe_mode() == "parallel, 6 workers"


def test_jobs_must_be_positive() -> None:
    with pytest.raises(ValueError):
        _ = RunSettings(jobs=0)


def test_settings_are_immutable() -> None:
    settings = RunSettings()

    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.quiet = True  # pyright: ignore[reportAttributeAccessIssue]
