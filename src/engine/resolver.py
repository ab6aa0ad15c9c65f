"""
Animation State Resolver

Facade turning (AnimationConfig, frame) into the VisualState of that frame:

- star counter: bezier ease from (stars - N) up to stars, held at the end
- horizontal scroll: one elastic offset shared by every avatar
- avatar/star pop-in: spring on each stargazer's local clock

Every function here is pure. Config and frame are explicit arguments, there
is no ambient "current frame", nothing is cached, and frames may be
resolved concurrently or out of order.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from animations import easing
from animations.interpolate import interpolate
from animations.spring import spring_value
from engine.timeline import Timeline, entity_window, entity_windows
from models.config import AnimationConfig
from models.enums import ExtrapolationType, LogCategory
from models.spring import SpringConfig
from models.timeline import EntityTimingWindow, TimelineEntry
from models.visual_state import AvatarState, VideoMetadata, VisualState
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.RENDER_ENGINE)

STAR_COUNT_EASING = easing.bezier(0.5, 1, 0.5, 1)
SCROLL_EASING = easing.elastic(1.5)
POP_SPRING = SpringConfig(stiffness=100)

# Scroll ends with the avatar row's right edge at two thirds of the width
SCROLL_TARGET_RATIO = 2 / 3


def round_half_up(value: float) -> int:
    """Round .5 toward +infinity (123.5 → 124, -0.5 → 0)"""
    return math.floor(value + 0.5)


# === Star counter ===

def star_count(config: AnimationConfig, frame: float) -> int:
    """
    Displayed star count at frame

    Right side is clamped (count holds at stars_final after the animation).
    Left side extends: frames before 0 give counts below stars_initial.
    """
    value = interpolate(
        frame,
        [0, config.animation_duration_frames],
        [config.stars_initial, config.stars_final],
        easing=STAR_COUNT_EASING,
        extrapolate_right=ExtrapolationType.CLAMP,
    )
    return round_half_up(value)


# === Horizontal layout ===

def avatar_slot(config: AnimationConfig, index: int) -> float:
    """Resting offset of avatar column `index` before any scrolling"""
    return config.avatar_gap + index * (config.avatar_size + config.avatar_gap)


def scroll_offset(config: AnimationConfig, frame: float) -> float:
    """Shared horizontal scroll of the avatar row (elastic, clamped at end)"""
    target = -config.entity_count * config.avatar_size + config.video_width * SCROLL_TARGET_RATIO
    return interpolate(
        frame,
        [0, config.animation_duration_frames],
        [0, target],
        easing=SCROLL_EASING,
        extrapolate_right=ExtrapolationType.CLAMP,
    )


def avatar_left(config: AnimationConfig, index: int, frame: float) -> float:
    return avatar_slot(config, index) + scroll_offset(config, frame)


# === Pop-in springs ===

def pop_scale(config: AnimationConfig, local_frame: float) -> float:
    """Spring factor on a stargazer's local clock (0 before it starts)"""
    return spring_value(local_frame, config.fps, POP_SPRING)


def _local_frame(config: AnimationConfig, index: int, frame: float) -> float:
    window = entity_window(index, config.entity_count, config.animation_duration_frames, config.fps)
    return window.local_frame(frame)


def avatar_scale(config: AnimationConfig, index: int, frame: float) -> float:
    return pop_scale(config, _local_frame(config, index, frame))


def star_scale(config: AnimationConfig, index: int, frame: float) -> float:
    """Scale of the star under avatar `index` (same spring as the avatar)"""
    return pop_scale(config, _local_frame(config, index, frame))


# === Composition ===

def avatar_entry_name(index: int) -> str:
    return f"avatar[{index}]"


def build_timeline(config: AnimationConfig) -> Timeline:
    """
    Composition as a flat timeline

    Entries:
        star_count   (-inf, inf), origin 0 → displayed count
        scroll       (-inf, inf), origin 0 → shared horizontal offset
        avatar[i]    [start_i, inf)        → pop-in spring factor of stargazer i

    The two global tracks stay active before frame 0 so negative frames
    keep extending the count below stars_initial.
    """
    entries = [
        TimelineEntry("star_count", -math.inf, lambda local: star_count(config, local), origin=0),
        TimelineEntry("scroll", -math.inf, lambda local: scroll_offset(config, local), origin=0),
    ]
    for window in entity_windows(config.entity_count, config.animation_duration_frames, config.fps):
        entries.append(TimelineEntry(
            avatar_entry_name(window.index),
            window.sequence_start,
            lambda local: pop_scale(config, local),
        ))
    return Timeline(entries)


# === Facade ===

def resolve_visual_state(
    config: AnimationConfig,
    frame: float,
    timeline: Optional[Timeline] = None,
) -> VisualState:
    """
    Full visual state of one frame, evaluated through the flat timeline

    Frames are expected to be >= 0; earlier frames are not rejected and
    give a star count below stars_initial.

    Args:
        config: Render job config
        frame: Global frame
        timeline: build_timeline(config), reused across frames by callers
                  that resolve many of them (built on the fly when None)
    """
    if timeline is None:
        timeline = build_timeline(config)

    values = timeline.evaluate(frame)
    scroll = values["scroll"]

    avatars: List[AvatarState] = []
    for index, image_ref in enumerate(config.stargazer_image_refs):
        name = avatar_entry_name(index)
        # Entries before their window are absent: not started, spring at 0
        scale = values.get(name, 0.0)
        avatars.append(AvatarState(
            index=index,
            image_ref=image_ref,
            left=avatar_slot(config, index) + scroll,
            avatar_scale=scale,
            star_scale=scale,
            avatar_size=round_half_up(config.avatar_size * scale),
            visible=name in values,
        ))

    return VisualState(
        frame=frame,
        star_count=values["star_count"],
        avatars=tuple(avatars),
    )


def calculate_metadata(config: AnimationConfig) -> VideoMetadata:
    """Output size, frame rate and total frame count of the video"""
    return VideoMetadata(
        duration_in_frames=round_half_up(config.duration_in_seconds * config.fps),
        width=round_half_up(config.video_width),
        height=round_half_up(config.video_height),
        fps=config.fps,
    )


class AnimationStateResolver:
    """
    Resolver bound to one render job's config

    Holds only the frozen config plus the timeline and metadata derived
    from it; every frame goes through the same timeline.

    Example:
        resolver = AnimationStateResolver(config)
        state = resolver.resolve(90)
        print(state.star_count)
    """

    def __init__(self, config: AnimationConfig):
        self.config = config
        self.timeline = build_timeline(config)
        self.metadata = calculate_metadata(config)

        log.info(
            "Resolver ready",
            stargazers=config.entity_count,
            animation_frames=config.animation_duration_frames,
            video_frames=self.metadata.duration_in_frames,
        )

    def resolve(self, frame: float) -> VisualState:
        log.debug(f"Resolving frame {frame}")
        return resolve_visual_state(self.config, frame, self.timeline)

    def evaluate_timeline(self, frame: float) -> Dict[str, Any]:
        return self.timeline.evaluate(frame)

    def window(self, index: int) -> EntityTimingWindow:
        return entity_window(index, self.config.entity_count, self.config.animation_duration_frames, self.config.fps)
