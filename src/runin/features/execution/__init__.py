# Where: runin.features.execution.__init__
# What: Expose the runner, engine, output sink and run result types.
# Why: Provide a cohesive import surface for the application and UI layers.

from .domain.models import CancellationSignal, ExecutionJob, ExecutionResult, JobOutcome
from .usecases import ConcurrencyEngine, JobRunnerPort, OutputSink, ProcessRunner, make_tag

__all__ = [
    "CancellationSignal",
    "ConcurrencyEngine",
    "ExecutionJob",
    "ExecutionResult",
    "JobOutcome",
    "JobRunnerPort",
    "OutputSink",
    "ProcessRunner",
    "make_tag",
]
