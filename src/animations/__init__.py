"""
Animation math

- easing: curves mapping linear progress to eased progress
- interpolate: range mapping with easing and extrapolation policies
- spring: closed-form damped spring
"""

from .interpolate import interpolate
from .spring import spring_value, measure_spring

__all__ = [
    "interpolate",
    "spring_value",
    "measure_spring",
]
