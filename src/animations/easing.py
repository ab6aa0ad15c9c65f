"""
Easing Functions

Curves mapping linear progress t (0.0 = start, 1.0 = end) to eased progress.
Overshooting curves (elastic, back) leave [0, 1] in the middle but still map
0 → 0 and 1 → 1.

The library never clamps its input: interpolate() decides what reaches the
curve, and with EXTEND extrapolation t can be negative or greater than 1.

Two kinds of members live here:
- plain curves: ease_linear(t), quad(t), bounce(t), ...
- factories returning a curve: bezier(x1, y1, x2, y2), elastic(bounciness),
  poly(n), back(s), and the in_/out/in_out combinators
"""

import math
from typing import Callable, List

EasingFunction = Callable[[float], float]


# === Transition curves ===

def ease_linear(t: float) -> float:
    """
    Linear easing (constant speed)

    Args:
        t: Progress (0.0 = start, 1.0 = end)

    Returns:
        Eased progress
    """
    return t


def ease_in_quad(t: float) -> float:
    """Quadratic ease-in (slow start → fast end)"""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out (fast start → slow end)"""
    return 1 - (1 - t) * (1 - t)


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease-in-out (slow start → fast middle → slow end)"""
    return 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 2 / 2


def ease_in_cubic(t: float) -> float:
    """Cubic ease-in (very slow start)"""
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out (very slow end)"""
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out (very smooth acceleration/deceleration)"""
    return 4 * t ** 3 if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


# === Cubic Bezier ===

# Solver tuning for the x → t inversion
NEWTON_ITERATIONS = 4
NEWTON_MIN_SLOPE = 0.001
SUBDIVISION_PRECISION = 0.0000001
SUBDIVISION_MAX_ITERATIONS = 10
SPLINE_TABLE_SIZE = 11
SAMPLE_STEP_SIZE = 1.0 / (SPLINE_TABLE_SIZE - 1)


def _coeff_a(a1: float, a2: float) -> float:
    return 1.0 - 3.0 * a2 + 3.0 * a1


def _coeff_b(a1: float, a2: float) -> float:
    return 3.0 * a2 - 6.0 * a1


def _coeff_c(a1: float) -> float:
    return 3.0 * a1


def _calc_bezier(t: float, a1: float, a2: float) -> float:
    """Bezier coordinate at parameter t (P0 = 0, P3 = 1)"""
    return ((_coeff_a(a1, a2) * t + _coeff_b(a1, a2)) * t + _coeff_c(a1)) * t


def _slope(t: float, a1: float, a2: float) -> float:
    """Derivative dx/dt at parameter t"""
    return 3.0 * _coeff_a(a1, a2) * t * t + 2.0 * _coeff_b(a1, a2) * t + _coeff_c(a1)


class BezierCurve:
    """
    Cubic Bezier easing curve (like CSS cubic-bezier)

    Control points: P0=(0,0), P1=(x1,y1), P2=(x2,y2), P3=(1,1)

    Evaluating the curve means finding the parameter whose x equals the
    requested progress, then returning y at that parameter. The parameter is
    found from a precomputed sample table, refined with Newton-Raphson, or by
    binary subdivision where the curve is too flat for Newton to converge.

    Common presets:
        ease:        (0.25, 0.1, 0.25, 1.0)
        ease-in:     (0.42, 0, 1.0, 1.0)
        ease-out:    (0, 0, 0.58, 1.0)
        ease-in-out: (0.42, 0, 0.58, 1.0)
    """

    def __init__(self, x1: float, y1: float, x2: float, y2: float):
        if not (0 <= x1 <= 1 and 0 <= x2 <= 1):
            raise ValueError(f"Bezier x values must be in [0, 1], got x1={x1}, x2={x2}")

        self.x1 = x1
        self.y1 = y1
        self.x2 = x2
        self.y2 = y2

        self._samples: List[float] = [
            _calc_bezier(i * SAMPLE_STEP_SIZE, x1, x2) for i in range(SPLINE_TABLE_SIZE)
        ]

    def __repr__(self):
        return f"BezierCurve({self.x1}, {self.y1}, {self.x2}, {self.y2})"

    def __call__(self, t: float) -> float:
        if self.x1 == self.y1 and self.x2 == self.y2:
            return t
        # Exact endpoints, the solver only gets within SUBDIVISION_PRECISION
        if t == 0 or t == 1:
            return t
        return _calc_bezier(self._t_for_x(t), self.y1, self.y2)

    def _t_for_x(self, x: float) -> float:
        interval_start = 0.0
        current = 1
        last = SPLINE_TABLE_SIZE - 1

        while current != last and self._samples[current] <= x:
            interval_start += SAMPLE_STEP_SIZE
            current += 1
        current -= 1

        span = self._samples[current + 1] - self._samples[current]
        dist = (x - self._samples[current]) / span
        guess = interval_start + dist * SAMPLE_STEP_SIZE

        initial_slope = _slope(guess, self.x1, self.x2)
        if initial_slope >= NEWTON_MIN_SLOPE:
            return self._newton_raphson(x, guess)
        if initial_slope == 0.0:
            return guess
        return self._binary_subdivide(x, interval_start, interval_start + SAMPLE_STEP_SIZE)

    def _newton_raphson(self, x: float, guess: float) -> float:
        for _ in range(NEWTON_ITERATIONS):
            slope = _slope(guess, self.x1, self.x2)
            if slope == 0.0:
                return guess
            current_x = _calc_bezier(guess, self.x1, self.x2) - x
            guess -= current_x / slope
        return guess

    def _binary_subdivide(self, x: float, a: float, b: float) -> float:
        current_t = a
        for _ in range(SUBDIVISION_MAX_ITERATIONS):
            current_t = a + (b - a) / 2.0
            current_x = _calc_bezier(current_t, self.x1, self.x2) - x
            if current_x > 0.0:
                b = current_t
            else:
                a = current_t
            if abs(current_x) <= SUBDIVISION_PRECISION:
                break
        return current_t


def bezier(x1: float, y1: float, x2: float, y2: float) -> EasingFunction:
    """
    Create a cubic bezier easing function.

    Args:
        x1, y1: First control point (affects curve start)
        x2, y2: Second control point (affects curve end)

    Returns:
        Easing function that takes t and returns eased progress

    Example:
        # Fast start, long soft landing (star counter)
        counter = bezier(0.5, 1, 0.5, 1)
    """
    return BezierCurve(x1, y1, x2, y2)


# === Named curves ===

def linear(t: float) -> float:
    return t


def quad(t: float) -> float:
    return t * t


def cubic(t: float) -> float:
    return t * t * t


def poly(n: float) -> EasingFunction:
    """Power curve t^n"""
    return lambda t: t ** n


def sin(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def circle(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


def exp(t: float) -> float:
    return 2 ** (10 * (t - 1))


def elastic(bounciness: float = 1) -> EasingFunction:
    """
    Damped oscillation that overshoots 1.0 and settles on it

    bounciness scales the oscillation frequency: 0 gives a plain ease, 1 a
    single overshoot, higher values more swings within the same duration.
    The cos^3 envelope decays to 0 at t = 1, so the curve ends exactly on 1.
    """
    p = bounciness * math.pi
    return lambda t: 1 - math.cos(t * math.pi / 2) ** 3 * math.cos(t * p)


def back(s: float = 1.70158) -> EasingFunction:
    """Pull back below 0 before moving forward; s controls the pull"""
    return lambda t: t * t * ((s + 1) * t - s)


def bounce(t: float) -> float:
    if t < 1 / 2.75:
        return 7.5625 * t * t
    if t < 2 / 2.75:
        t2 = t - 1.5 / 2.75
        return 7.5625 * t2 * t2 + 0.75
    if t < 2.5 / 2.75:
        t2 = t - 2.25 / 2.75
        return 7.5625 * t2 * t2 + 0.9375
    t2 = t - 2.625 / 2.75
    return 7.5625 * t2 * t2 + 0.984375


ease = bezier(0.42, 0, 1, 1)


# === Combinators ===

def in_(easing: EasingFunction) -> EasingFunction:
    """Run an easing forwards (identity wrapper, for readability)"""
    return easing


def out(easing: EasingFunction) -> EasingFunction:
    """Run an easing backwards: in-curve becomes out-curve"""
    return lambda t: 1 - easing(1 - t)


def in_out(easing: EasingFunction) -> EasingFunction:
    """Symmetric: first half forwards, second half backwards"""
    def _in_out(t: float) -> float:
        if t < 0.5:
            return easing(t * 2) / 2
        return 1 - easing((1 - t) * 2) / 2
    return _in_out
