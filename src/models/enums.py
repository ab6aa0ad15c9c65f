"""
Enums for the stars animation engine
"""

from enum import Enum, auto


class ExtrapolationType(Enum):
    """
    Interpolation behavior outside the input range

    CLAMP: pin progress to the range boundary (output stays in range)
    EXTEND: feed raw progress into the easing (curve keeps going)
    IDENTITY: return the input value unchanged
    """
    CLAMP = auto()
    EXTEND = auto()
    IDENTITY = auto()


class DampingRegime(Enum):
    """Spring damping regime, derived from the damping ratio (zeta)"""
    UNDERDAMPED = auto()   # zeta < 1, overshoots and oscillates
    CRITICAL = auto()      # zeta == 1, fastest approach without overshoot
    OVERDAMPED = auto()    # zeta > 1, slow approach without overshoot


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()         # Props loading, validation
    ANIMATION = auto()      # Easing, interpolation, springs
    TIMELINE = auto()       # Stagger windows, timeline entries
    RENDER_ENGINE = auto()  # Frame resolution and sampling
    SYSTEM = auto()         # Startup, CLI, fatal errors

    GENERAL = auto()        # Default general category
