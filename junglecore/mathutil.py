"""Scalar math helpers used throughout the engine core."""

from __future__ import annotations

import math
from typing import TypeVar

T = TypeVar("T")

PI = 3.1415926535897932
SMALL_NUMBER = 1.0e-8
KINDA_SMALL_NUMBER = 1.0e-4


def clamp(value, low, high):
    """Clamp ``value`` into ``[low, high]``; ``low`` wins if the bounds cross."""
    return max(min(value, high), low)


def lerp(a, b, alpha):
    """Linearly interpolate between ``a`` and ``b`` by ``alpha``."""
    return a * (1.0 - alpha) + b * alpha


def radians_to_degrees(value):
    """Convert an angle in radians to degrees."""
    return value * (180.0 / PI)


def degrees_to_radians(value):
    """Convert an angle in degrees to radians."""
    return value * (PI / 180.0)


def inv_sqrt(value: float) -> float:
    """Return the reciprocal of the square root of ``value``."""
    return 1.0 / math.sqrt(value)


def square(value):
    """Return ``value`` multiplied by itself."""
    return value * value


def ceil_to_int(value: float) -> int:
    """Round ``value`` up to the nearest integer."""
    return int(math.ceil(value))


def unwind_degrees(angle: float) -> float:
    """Bring an angle in degrees into the range ``[-180, 180]``."""
    while angle > 180.0:
        angle -= 360.0
    while angle < -180.0:
        angle += 360.0
    return angle


def trunc(value: float) -> int:
    """Convert to an integer, truncating towards zero."""
    return int(value)


def trunc_float(value: float) -> float:
    """Truncate towards zero, keeping the result a float."""
    return float(trunc(value))


def floor(value: float) -> int:
    """Return the greatest integer less than or equal to ``value``."""
    return trunc(math.floor(value))


def max3(a, b, c):
    """Return the highest of three values."""
    return max(max(a, b), c)


def min3(a, b, c):
    """Return the lowest of three values."""
    return min(min(a, b), c)