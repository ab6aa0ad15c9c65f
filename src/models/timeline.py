"""
Timeline models

EntityTimingWindow - when one stargazer's local clock starts
TimelineEntry      - one (window_start, window_end, resolver) slot of the
                     flattened composition
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class EntityTimingWindow:
    """
    Activation window of one stargazer

    sequence_start may be negative: the first stargazers start before
    frame 0 so their motion is already under way when the video begins.
    """
    index: int
    sequence_start: float

    def local_frame(self, frame: float) -> float:
        """Frame on this entity's own clock (negative = not started yet)"""
        return frame - self.sequence_start

    def is_active(self, frame: float) -> bool:
        return frame >= self.sequence_start


@dataclass(frozen=True)
class TimelineEntry:
    """
    Half-open window [window_start, window_end) with a pure resolver

    The resolver receives the local frame (frame - origin). origin defaults
    to window_start; tracks on the global clock that stay active before
    frame 0 use window_start=-inf with origin=0.
    """
    name: str
    window_start: float
    resolver: Callable[[float], Any]
    window_end: float = math.inf
    origin: Optional[float] = None

    @property
    def clock_origin(self) -> float:
        return self.window_start if self.origin is None else self.origin

    def contains(self, frame: float) -> bool:
        return self.window_start <= frame < self.window_end

    def evaluate(self, frame: float) -> Any:
        return self.resolver(frame - self.clock_origin)
