"""
Per-frame output models

Recreated on every call; no identity survives between frames. Two states
for the same config and frame compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class AvatarState:
    """
    One stargazer at one frame

    left is the horizontal offset of the avatar column, avatar_scale and
    star_scale are spring factors (0 before the avatar's sequence starts,
    briefly above 1 while overshooting). avatar_size is the painted size in
    whole pixels.
    """
    index: int
    image_ref: str
    left: float
    avatar_scale: float
    star_scale: float
    avatar_size: int
    visible: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "imageRef": self.image_ref,
            "left": self.left,
            "avatarScale": self.avatar_scale,
            "starScale": self.star_scale,
            "avatarSize": self.avatar_size,
            "visible": self.visible,
        }


@dataclass(frozen=True)
class VisualState:
    """Everything the presentation layer needs to paint one frame"""
    frame: float
    star_count: int
    avatars: Tuple[AvatarState, ...]

    @property
    def star_scales(self) -> Tuple[float, ...]:
        return tuple(avatar.star_scale for avatar in self.avatars)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frame": self.frame,
            "starCount": self.star_count,
            "avatars": [avatar.to_dict() for avatar in self.avatars],
        }


@dataclass(frozen=True)
class VideoMetadata:
    """Per-job output description used to size the render target"""
    duration_in_frames: int
    width: int
    height: int
    fps: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "durationInFrames": self.duration_in_frames,
            "width": self.width,
            "height": self.height,
            "fps": self.fps,
        }
