"""
Frame engine - stagger scheduling, per-frame state resolution, batch sampling
"""

from .timeline import Timeline, entity_window, entity_windows
from .resolver import AnimationStateResolver, resolve_visual_state, calculate_metadata, build_timeline
from .frame_sampler import FrameSampler

__all__ = [
    "Timeline",
    "entity_window",
    "entity_windows",
    "AnimationStateResolver",
    "resolve_visual_state",
    "calculate_metadata",
    "build_timeline",
    "FrameSampler",
]
