"""
Spring Evaluator

Closed-form position of a damped harmonic oscillator released at rest from
0 and pulled toward 1:

    m * x'' + c * x' + k * (x - 1) = 0,   x(0) = 0,  x'(0) = 0

Time is elapsed_frames / fps seconds. Nothing is integrated step by step,
so a value depends only on its arguments: frame 500 costs the same as
frame 5 and frames can be evaluated in any order.
"""

from __future__ import annotations

import math

from models.enums import DampingRegime
from models.spring import SpringConfig

DEFAULT_SPRING = SpringConfig()

# Upper bound for measure_spring scans
MAX_SETTLE_FRAMES = 100_000


def _remaining(t: float, config: SpringConfig) -> float:
    """Normalized distance to the target at t seconds (1 at t=0, → 0)"""
    omega0 = config.natural_frequency
    zeta = config.damping_ratio
    regime = config.regime

    if regime == DampingRegime.UNDERDAMPED:
        omega1 = omega0 * math.sqrt(1 - zeta * zeta)
        envelope = math.exp(-zeta * omega0 * t)
        return envelope * (math.cos(omega1 * t) + (zeta * omega0 / omega1) * math.sin(omega1 * t))

    if regime == DampingRegime.CRITICAL:
        return math.exp(-omega0 * t) * (1 + omega0 * t)

    root = math.sqrt(zeta * zeta - 1)
    r1 = -omega0 * (zeta - root)
    r2 = -omega0 * (zeta + root)
    return (r2 * math.exp(r1 * t) - r1 * math.exp(r2 * t)) / (r2 - r1)


def _first_crossing(config: SpringConfig) -> float:
    """
    Seconds until an underdamped spring first reaches the target

    Solves cos(w1 t) + (zeta w0 / w1) sin(w1 t) = 0 for the smallest t > 0.
    Critically and overdamped springs never cross: returns infinity.
    """
    if config.regime != DampingRegime.UNDERDAMPED:
        return math.inf
    omega0 = config.natural_frequency
    zeta = config.damping_ratio
    omega1 = omega0 * math.sqrt(1 - zeta * zeta)
    return (math.pi - math.atan2(omega1, zeta * omega0)) / omega1


def spring_value(
    elapsed_frames: float,
    fps: float,
    config: SpringConfig = DEFAULT_SPRING,
    from_value: float = 0.0,
    to_value: float = 1.0,
) -> float:
    """
    Spring position after elapsed_frames

    Args:
        elapsed_frames: Frames since the spring was released (local clock)
        fps: Frame rate used to convert frames to seconds
        config: Physical parameters
        from_value: Value at release
        to_value: Rest value

    Returns:
        from_value for elapsed_frames <= 0, then a curve settling on to_value
    """
    if not fps > 0:
        raise ValueError(f"fps must be > 0, got {fps}")
    if elapsed_frames <= 0:
        return from_value

    t = elapsed_frames / fps

    if config.overshoot_clamping and t >= _first_crossing(config):
        return to_value

    progress = 1 - _remaining(t, config)
    return from_value + (to_value - from_value) * progress


def measure_spring(
    fps: float,
    config: SpringConfig = DEFAULT_SPRING,
    threshold: float = 0.005,
) -> int:
    """
    Number of frames until the spring stays within threshold of its target

    For underdamped springs the scan runs until the decay envelope itself is
    below threshold, so a later swing back out of the band is never missed.

    Raises:
        ValueError: the spring never settles (no damping) or threshold <= 0
    """
    if not fps > 0:
        raise ValueError(f"fps must be > 0, got {fps}")
    if not threshold > 0:
        raise ValueError(f"threshold must be > 0, got {threshold}")
    if config.damping == 0:
        raise ValueError("undamped spring never settles")

    if config.regime == DampingRegime.UNDERDAMPED:
        omega0 = config.natural_frequency
        zeta = config.damping_ratio
        omega1 = omega0 * math.sqrt(1 - zeta * zeta)
        amplitude = math.sqrt(1 + (zeta * omega0 / omega1) ** 2)
        settle_seconds = math.log(amplitude / threshold) / (zeta * omega0)
        horizon = min(MAX_SETTLE_FRAMES, math.ceil(settle_seconds * fps) + 1)

        last_outside = 0
        for frame in range(horizon + 1):
            if abs(1 - spring_value(frame, fps, config)) >= threshold:
                last_outside = frame
        return last_outside + 1

    # Monotonic approach: first frame inside the band stays inside
    for frame in range(MAX_SETTLE_FRAMES):
        if abs(1 - spring_value(frame, fps, config)) < threshold:
            return frame
    return MAX_SETTLE_FRAMES
