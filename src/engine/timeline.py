"""
Timeline Scheduler

Staggers stargazers across the animation window so they cascade in one
after another, and holds the flattened composition as a list of
(window_start, window_end, resolver) entries.

Stagger layout for N stargazers:

    sequence_start(i) = interpolate(i, [0, N], [-fps * 0.5, duration - fps * 2])

The first stargazer starts half a second before frame 0 (its pop-in is
already under way on the first frame), the last one starts early enough
to settle two seconds before the animation ends. Starts are non-decreasing
only when duration >= 1.5 s worth of frames; props validation rejects
shorter animations.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

from animations.interpolate import interpolate
from models.enums import LogCategory
from models.timeline import EntityTimingWindow, TimelineEntry
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.TIMELINE)

PRE_ROLL_SECONDS = 0.5
SETTLE_SECONDS = 2.0


def stagger_range(duration_frames: float, fps: float) -> Tuple[float, float]:
    """(first start, end of the stagger range) in global frames"""
    return -fps * PRE_ROLL_SECONDS, duration_frames - fps * SETTLE_SECONDS


def entity_window(index: int, entity_count: int, duration_frames: float, fps: float) -> EntityTimingWindow:
    """
    Activation window of stargazer `index` out of `entity_count`

    Raises:
        IndexError: index outside [0, entity_count)
    """
    if not 0 <= index < entity_count:
        raise IndexError(f"entity index {index} out of range for {entity_count} entities")

    start, end = stagger_range(duration_frames, fps)

    if entity_count <= 1:
        return EntityTimingWindow(index=index, sequence_start=start)

    sequence_start = interpolate(index, [0, entity_count], [start, end])
    return EntityTimingWindow(index=index, sequence_start=sequence_start)


def entity_windows(entity_count: int, duration_frames: float, fps: float) -> List[EntityTimingWindow]:
    """Windows for all entities, in index order (starts are non-decreasing)"""
    return [entity_window(i, entity_count, duration_frames, fps) for i in range(entity_count)]


class Timeline:
    """
    Flat list of timeline entries evaluated per frame

    No entry holds state; evaluating frame 90 before frame 10 gives the same
    results as the other way round.

    Example:
        timeline = Timeline([
            TimelineEntry("counter", 0, lambda f: f * 2),
            TimelineEntry("late", 30, lambda f: f, window_end=60),
        ])
        timeline.evaluate(40)  # {"counter": 80, "late": 10}
    """

    def __init__(self, entries: Iterable[TimelineEntry]):
        self._entries: Tuple[TimelineEntry, ...] = tuple(entries)

        names = [entry.name for entry in self._entries]
        if len(set(names)) != len(names):
            raise ValueError(f"Timeline entry names must be unique: {names}")

        log.debug("Timeline built", entries=len(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"Timeline({len(self._entries)} entries)"

    @property
    def entries(self) -> Tuple[TimelineEntry, ...]:
        return self._entries

    def get(self, name: str) -> TimelineEntry:
        for entry in self._entries:
            if entry.name == name:
                return entry
        raise KeyError(name)

    def active(self, frame: float) -> List[TimelineEntry]:
        """Entries whose window contains frame, in timeline order"""
        return [entry for entry in self._entries if entry.contains(frame)]

    def evaluate(self, frame: float) -> Dict[str, Any]:
        """Resolve every active entry at frame, keyed by entry name"""
        return {entry.name: entry.evaluate(frame) for entry in self.active(frame)}
