"""
Composition configuration models

CompositionProps - raw input schema (pydantic), camelCase keys as they come
                   from the props file or the surrounding renderer
AnimationConfig  - validated, immutable engine configuration (dataclass)

Validation happens once, at the boundary (managers.config_manager); the
engine only ever sees AnimationConfig.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_STARGAZER_COUNT = 20

# Stagger runs from -0.5 s to (duration - 2 s); shorter animations would
# start later stargazers before earlier ones
MIN_ANIMATION_DURATION_SECONDS = 1.5

DEFAULT_PROPS: Dict[str, Any] = {
    "animationDurationInSeconds": 3,
    "fps": 60,
    "stargazerAvatarSize": 128,
    "stargazerAvatarGap": 16,
    "starSize": 32,
    "durationInSeconds": 3,
    "videoWidth": 1280,
    "videoHeight": 720,
    "user": "scastiel",
    "userAvatarUrl": "https://avatars.githubusercontent.com/u/301948?v=4",
    "repository": "book-pr",
    "stars": 143,
    "stargazers": [f"stargazer-{i + 1}" for i in range(DEFAULT_STARGAZER_COUNT)],
}


class CompositionProps(BaseModel):
    """Input props of the stars composition"""
    model_config = ConfigDict(
        strict=True,
        frozen=True,
        populate_by_name=True,
        json_schema_extra={"example": DEFAULT_PROPS},
    )

    animation_duration_in_seconds: float = Field(
        alias="animationDurationInSeconds", ge=MIN_ANIMATION_DURATION_SECONDS,
        description="Length of the counting/scrolling animation (at least 1.5 s)"
    )
    fps: float = Field(gt=0, description="Frames per second")
    stargazer_avatar_size: float = Field(alias="stargazerAvatarSize", ge=0, description="Avatar size in px")
    stargazer_avatar_gap: float = Field(alias="stargazerAvatarGap", ge=0, description="Gap between avatars in px")
    star_size: float = Field(alias="starSize", ge=0, description="Star icon size in px")
    duration_in_seconds: float = Field(alias="durationInSeconds", gt=0, description="Total video length")
    video_width: float = Field(alias="videoWidth", gt=0, description="Output width in px")
    video_height: float = Field(alias="videoHeight", gt=0, description="Output height in px")
    user: str = Field(description="Repository owner (presentation only)")
    user_avatar_url: str = Field(alias="userAvatarUrl", description="Owner avatar (presentation only)")
    repository: str = Field(description="Repository name (presentation only)")
    stars: int = Field(ge=0, description="Final star count")
    stargazers: List[str] = Field(description="Ordered stargazer avatar references")


@dataclass(frozen=True)
class AnimationConfig:
    """
    Immutable engine configuration, created once per render job

    animation_duration_frames is the animation window (seconds * fps); the
    video itself may run longer (duration_in_seconds).
    """
    animation_duration_frames: float
    fps: float
    avatar_size: float
    avatar_gap: float
    star_size: float
    video_width: float
    video_height: float
    stars_final: int
    stargazer_image_refs: Tuple[str, ...]
    duration_in_seconds: float

    # Presentation only, carried through for the renderer
    user: str = ""
    user_avatar_url: str = ""
    repository: str = ""

    @property
    def entity_count(self) -> int:
        return len(self.stargazer_image_refs)

    @property
    def stars_initial(self) -> int:
        """Count shown at frame 0 (may be negative)"""
        return self.stars_final - self.entity_count

    @classmethod
    def from_props(cls, props: CompositionProps) -> "AnimationConfig":
        return cls(
            animation_duration_frames=props.animation_duration_in_seconds * props.fps,
            fps=props.fps,
            avatar_size=props.stargazer_avatar_size,
            avatar_gap=props.stargazer_avatar_gap,
            star_size=props.star_size,
            video_width=props.video_width,
            video_height=props.video_height,
            stars_final=props.stars,
            stargazer_image_refs=tuple(props.stargazers),
            duration_in_seconds=props.duration_in_seconds,
            user=props.user,
            user_avatar_url=props.user_avatar_url,
            repository=props.repository,
        )
