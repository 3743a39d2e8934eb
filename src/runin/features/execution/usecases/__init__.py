"""Execution use cases."""

from .engine import ConcurrencyEngine
from .output import OutputSink, make_tag
from .ports import JobRunnerPort
from .process_runner import ProcessRunner

__all__ = ["ConcurrencyEngine", "JobRunnerPort", "OutputSink", "ProcessRunner", "make_tag"]
