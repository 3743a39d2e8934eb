"""Application services."""

from .run_service import NoTargetsError, RunPlan, RunRequest, RunService, RunnerError

__all__ = ["NoTargetsError", "RunPlan", "RunRequest", "RunService", "RunnerError"]
