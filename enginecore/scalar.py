"""Scalar helpers: trigonometry, interpolation, clamping and random numbers."""

from __future__ import annotations

import math
import random
from typing import Any

E = 2.7182818284590452353602874713527
PI = math.pi
PI2 = PI / 2.0
PI4 = PI / 4.0
DEG_TO_RAD = PI / 180.0
RAD_TO_DEG = 180.0 / PI


def mod(l: float, r: float) -> float:
    """Remainder of ``l / r`` with the quotient truncated toward zero."""
    return l - r * int(l / r)


def sqrt(x: float) -> float:
    """Square root; negative input gives NaN rather than an error."""
    if x < 0 or math.isnan(x):
        return math.nan
    return math.sqrt(x)


def ramp(x: Any) -> Any:
    """Return ``x`` when it is not negative, otherwise zero."""
    if x < 0:
        return type(x)(0)
    return x


def sin(x: float) -> float:
    return math.sin(x)


def cos(x: float) -> float:
    return math.cos(x)


def tan(x: float) -> float:
    """Tangent computed as ``sin(x) / cos(x)``."""
    return sin(x) / cos(x)


def csc(x: float) -> float:
    return 1.0 / sin(x)


def sec(x: float) -> float:
    return 1.0 / cos(x)


def cot(x: float) -> float:
    return 1.0 / tan(x)


def lerp(l: Any, r: Any, t: float) -> Any:
    """Linear interpolation between ``l`` and ``r``; works for vectors too."""
    return l + (r - l) * t


def maximum(l: Any, r: Any) -> Any:
    """Return ``l`` if it is greater than ``r``, otherwise ``r``."""
    return l if l > r else r


def minimum(l: Any, r: Any) -> Any:
    """Return ``r`` if ``l`` is greater than it, otherwise ``l``."""
    return r if l > r else l


def avg(l: Any, r: Any) -> Any:
    """Midpoint of ``l`` and ``r``."""
    return l + (r - l) / 2


def clamp(value: Any, low: Any, high: Any) -> Any:
    """Limit ``value`` to the range ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def random_unit() -> float:
    """Random number in ``[0, 1]``."""
    return random.random()


def random_below(upper: float) -> float:
    """Random number in ``[0, upper]``."""
    return random.random() * upper


def random_between(lower: float, upper: float) -> float:
    """Random number in ``[lower, upper]``."""
    return random.random() * (upper - lower) + lower