"""
FrameSampler: resolves batches of frames for a render job.

Frames are independent, so a batch can be split across a thread pool with
no locking. Results always come back in the order the frames were
requested, whatever order the workers finish in.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from engine.resolver import build_timeline, calculate_metadata, resolve_visual_state
from models.config import AnimationConfig
from models.enums import LogCategory
from models.visual_state import VisualState
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.RENDER_ENGINE)


class FrameSampler:
    """
    Batch frame evaluation over one AnimationConfig

    Example:
        sampler = FrameSampler(config)
        states = sampler.sample_parallel(sampler.frames(), max_workers=4)
    """

    def __init__(self, config: AnimationConfig):
        self.config = config
        self.metadata = calculate_metadata(config)
        self.timeline = build_timeline(config)

    def frames(self) -> range:
        """Every frame index of the video"""
        return range(self.metadata.duration_in_frames)

    def sample(self, frames: Iterable[float]) -> List[VisualState]:
        """Resolve frames one after another"""
        return [resolve_visual_state(self.config, frame, self.timeline) for frame in frames]

    def sample_parallel(self, frames: Iterable[float], max_workers: Optional[int] = None) -> List[VisualState]:
        """
        Resolve frames on a thread pool

        Args:
            frames: Frame indices, any order, duplicates allowed
            max_workers: Pool size (None = executor default)
        """
        frames = list(frames)
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        log.info("Sampling frames", count=len(frames), workers=max_workers or "default")

        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            return list(pool.map(lambda frame: resolve_visual_state(self.config, frame, self.timeline), frames))
