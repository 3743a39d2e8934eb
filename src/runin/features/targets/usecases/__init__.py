"""Target selection use cases."""

from .dirty_filter import DirtyFilter
from .ports import VcsProbePort
from .resolver import TargetResolver, expand_pattern

__all__ = ["DirtyFilter", "TargetResolver", "VcsProbePort", "expand_pattern"]
