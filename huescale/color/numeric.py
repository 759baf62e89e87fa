# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""
Scalar helpers shared by the conversion math and the palette generators.

Rounding is always half-up (.5 goes toward +infinity). Python's built-in
round() uses banker's rounding, which shifts a handful of channel values by
one and breaks reproduction of reference palettes.
"""

from __future__ import annotations

import math


def clamp(value: float, lo: float, hi: float) -> float:
    """Limit value to the closed interval [lo, hi]."""
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +infinity."""
    return int(math.floor(value + 0.5))


def round_to(value: float, decimals: int) -> float:
    """Round half-up to a fixed number of decimal places."""
    factor = 10 ** decimals
    return round_half_up(value * factor) / factor


def limit_range(value: float, maximum: int = 255) -> int:
    """Clamp a channel value to [0, maximum] and round it."""
    # clamp first: infinities cannot be rounded
    return round_half_up(clamp(value, 0, maximum))


def limit_alpha(value: float) -> float:
    return float(clamp(value, 0.0, 1.0))


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def ease_in_out(t: float) -> float:
    """Cubic ease-in-out on [0, 1]."""
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def normalize_hue(angle: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    hue = angle % 360.0
    # tiny negative angles wrap to exactly 360.0 in float arithmetic
    return 0.0 if hue >= 360.0 else hue
