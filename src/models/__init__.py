"""
Models package - Data models for the stars animation engine
"""

from .enums import ExtrapolationType, DampingRegime, LogLevel, LogCategory
from .errors import EngineError, ConfigValidationError, InvalidRangeError
from .config import AnimationConfig, CompositionProps, DEFAULT_PROPS
from .spring import SpringConfig
from .timeline import EntityTimingWindow, TimelineEntry
from .visual_state import AvatarState, VisualState, VideoMetadata

__all__ = [
    'ExtrapolationType',
    'DampingRegime',
    'LogLevel',
    'LogCategory',
    'EngineError',
    'ConfigValidationError',
    'InvalidRangeError',
    'AnimationConfig',
    'CompositionProps',
    'DEFAULT_PROPS',
    'SpringConfig',
    'EntityTimingWindow',
    'TimelineEntry',
    'AvatarState',
    'VisualState',
    'VideoMetadata',
]
