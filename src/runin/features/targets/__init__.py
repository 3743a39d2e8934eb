# Where: runin.features.targets.__init__
# What: Expose pattern resolution and dirty filtering.
# Why: Provide a cohesive import surface for the application layer.

from .domain.models import (
    GROUP_PREFIX,
    MAX_GROUP_DEPTH,
    ResolutionWarning,
    WarningReason,
    group_name,
)
from .usecases import DirtyFilter, TargetResolver, VcsProbePort, expand_pattern

__all__ = [
    "GROUP_PREFIX",
    "MAX_GROUP_DEPTH",
    "DirtyFilter",
    "ResolutionWarning",
    "TargetResolver",
    "VcsProbePort",
    "WarningReason",
    "expand_pattern",
    "group_name",
]
