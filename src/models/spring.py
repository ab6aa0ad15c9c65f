"""
Spring configuration model

Physical parameters of the damped oscillator used for pop-in effects.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from models.enums import DampingRegime

# Ratios within this distance of 1.0 are treated as critically damped
CRITICAL_TOLERANCE = 1e-9


@dataclass(frozen=True)
class SpringConfig:
    """
    Immutable spring parameters

    Attributes:
        stiffness: Spring constant k (higher = faster, snappier)
        damping: Damping coefficient c (higher = less bounce)
        mass: Mass m (higher = slower, heavier)
        overshoot_clamping: Stop at the target instead of overshooting it

    Defaults (k=100, c=10, m=1) give a damping ratio of 0.5: a visible
    overshoot of roughly 16% that settles in well under a second.
    """
    stiffness: float = 100.0
    damping: float = 10.0
    mass: float = 1.0
    overshoot_clamping: bool = False

    def __post_init__(self):
        if not self.stiffness > 0:
            raise ValueError(f"stiffness must be > 0, got {self.stiffness}")
        if not self.mass > 0:
            raise ValueError(f"mass must be > 0, got {self.mass}")
        if not self.damping >= 0:
            raise ValueError(f"damping must be >= 0, got {self.damping}")

    @property
    def natural_frequency(self) -> float:
        """omega0 = sqrt(k / m), in rad/s"""
        return math.sqrt(self.stiffness / self.mass)

    @property
    def damping_ratio(self) -> float:
        """zeta = c / (2 * sqrt(k * m))"""
        return self.damping / (2 * math.sqrt(self.stiffness * self.mass))

    @property
    def regime(self) -> DampingRegime:
        zeta = self.damping_ratio
        if abs(zeta - 1) < CRITICAL_TOLERANCE:
            return DampingRegime.CRITICAL
        if zeta < 1:
            return DampingRegime.UNDERDAMPED
        return DampingRegime.OVERDAMPED
