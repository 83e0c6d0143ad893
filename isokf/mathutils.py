"""Small numeric helpers: rounding and summary statistics."""

from __future__ import annotations

import math
import sys
from typing import Iterable


def roundn(value: float, precision: int) -> float:
    """Round to ``precision`` decimals, halves away from zero."""
    scale = int(10 ** precision)
    scaled = value * scale
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / scale


def _as_list(values: Iterable[float]) -> list[float]:
    return list(values)


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean."""
    data = _as_list(values)
    if not data:
        raise ValueError("mean of an empty sequence")
    return sum(data) / len(data)


def stddev(values: Iterable[float]) -> float:
    """Sample standard deviation (divides by ``n - 1``)."""
    data = _as_list(values)
    if len(data) < 2:
        raise ValueError("standard deviation needs at least two values")
    mu = sum(data) / len(data)
    accum = sum((d - mu) ** 2 for d in data)
    return math.sqrt(accum / (len(data) - 1))


def max_value(values: Iterable[float]) -> float:
    """Largest value; the largest float for an empty sequence."""
    data = _as_list(values)
    return max(data) if data else sys.float_info.max


def min_value(values: Iterable[float]) -> float:
    """Smallest value; the largest float for an empty sequence."""
    data = _as_list(values)
    return min(data) if data else sys.float_info.max