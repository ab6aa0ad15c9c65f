"""
Interpolator

Maps a scalar input (usually a frame index) through an ascending input range
onto an output range, with an optional easing curve and per-side
extrapolation policy.

    interpolate(frame, [0, 180], [123, 143], extrapolate_right="clamp")

Defaults are EXTEND on both sides: a frame outside the input range keeps
following the curve. Callers who want the end state pinned must ask for
CLAMP explicitly.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Union

from animations.easing import EasingFunction
from models.enums import ExtrapolationType
from models.errors import InvalidRangeError
from utils.enum_helper import EnumHelper

ExtrapolationLike = Union[ExtrapolationType, str]


def _validate_ranges(input_range: Sequence[float], output_range: Sequence[float]) -> None:
    if len(input_range) < 2:
        raise InvalidRangeError("input range needs at least two points", input_range, output_range)
    if len(input_range) != len(output_range):
        raise InvalidRangeError(
            f"input range has {len(input_range)} points, output range has {len(output_range)}",
            input_range,
            output_range,
        )
    for value in list(input_range) + list(output_range):
        if not math.isfinite(value):
            raise InvalidRangeError(f"range contains non-finite value {value}", input_range, output_range)
    for lo, hi in zip(input_range, input_range[1:]):
        if not lo < hi:
            raise InvalidRangeError(
                f"input range must be strictly ascending ({lo} >= {hi})",
                input_range,
                output_range,
            )


def _find_segment(x: float, input_range: Sequence[float]) -> int:
    """Index of the segment [input_range[i], input_range[i + 1]] used for x"""
    for i in range(1, len(input_range) - 1):
        if input_range[i] > x:
            return i - 1
    return len(input_range) - 2


def _interpolate_segment(
    x: float,
    x0: float,
    x1: float,
    y0: float,
    y1: float,
    easing: EasingFunction,
    extrapolate_left: ExtrapolationType,
    extrapolate_right: ExtrapolationType,
) -> float:
    t = (x - x0) / (x1 - x0)

    if t < 0:
        if extrapolate_left == ExtrapolationType.IDENTITY:
            return x
        if extrapolate_left == ExtrapolationType.CLAMP:
            t = 0.0
    elif t > 1:
        if extrapolate_right == ExtrapolationType.IDENTITY:
            return x
        if extrapolate_right == ExtrapolationType.CLAMP:
            t = 1.0

    progress = easing(t)

    # Exact boundary outputs regardless of float rounding in the lerp
    if progress == 0:
        return y0
    if progress == 1:
        return y1
    return y0 + progress * (y1 - y0)


def interpolate(
    x: float,
    input_range: Sequence[float],
    output_range: Sequence[float],
    *,
    easing: Optional[EasingFunction] = None,
    extrapolate_left: ExtrapolationLike = ExtrapolationType.EXTEND,
    extrapolate_right: ExtrapolationLike = ExtrapolationType.EXTEND,
) -> float:
    """
    Interpolate x from input_range onto output_range

    Args:
        x: Input value (frame index, entity index, ...)
        input_range: Strictly ascending breakpoints, at least two
        output_range: Output values, same length as input_range
        easing: Curve applied to segment progress (linear if None)
        extrapolate_left: Policy for x below input_range[0]
        extrapolate_right: Policy for x above input_range[-1]

    Returns:
        Interpolated value

    Raises:
        InvalidRangeError: ranges are malformed or not ascending
    """
    _validate_ranges(input_range, output_range)
    if not math.isfinite(x):
        raise InvalidRangeError(f"input value {x} is not finite", input_range, output_range)

    left = EnumHelper.to_enum(ExtrapolationType, extrapolate_left)
    right = EnumHelper.to_enum(ExtrapolationType, extrapolate_right)

    i = _find_segment(x, input_range)
    return _interpolate_segment(
        x,
        input_range[i],
        input_range[i + 1],
        output_range[i],
        output_range[i + 1],
        easing or (lambda t: t),
        left,
        right,
    )
