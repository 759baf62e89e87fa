# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""
OKLCH fixed-lightness ladder (Tailwind-style 50-950 scale).

The seed's chroma and hue are kept; lightness is replaced by 11 fixed
stops. Chroma is pulled in near the extremes so very light and very dark
steps stay inside sRGB, and very dark seeds get a slight hue shift on their
light steps.

The 500 step (index 5) sits at L = 0.50 regardless of the seed's own
lightness, so it is generally NOT the seed's hex.
"""

from __future__ import annotations

from huescale.color.color import Color, ColorInput
from huescale.schema.color_spaces import OKLCH

# Scale name → target OKLCH lightness, lightest first.
LIGHTNESS_STOPS: dict[int, float] = {
    50: 0.98,
    100: 0.95,
    200: 0.90,
    300: 0.80,
    400: 0.60,
    500: 0.50,
    600: 0.40,
    700: 0.30,
    800: 0.20,
    900: 0.10,
    950: 0.05,
}


def _hue_shift(target_l: float, base_l: float) -> float:
    if base_l < 0.2 and target_l > 0.8:
        return -10.0
    if base_l < 0.2 and target_l > 0.6:
        return -5.0
    return 0.0


def _chroma_shift(target_l: float, base_c: float) -> float:
    if target_l > 0.9 or target_l < 0.1:
        return -base_c * 0.4
    if target_l > 0.8 or target_l < 0.2:
        return -base_c * 0.2
    return 0.0


def generate_oklch_ladder(seed: ColorInput) -> list[str]:
    """
    Generate an 11-step ladder at fixed OKLCH lightness stops.

    Args:
        seed: Any supported color input

    Returns:
        11 lowercase ``#rrggbb`` strings, lightest (50) to darkest (950).

    Raises:
        ParseError: If seed cannot be parsed.
    """
    base = Color.parse(seed).to_oklch()

    result = []
    for target_l in LIGHTNESS_STOPS.values():
        color = Color.parse(OKLCH(
            l=target_l,
            c=max(0.0, base.c + _chroma_shift(target_l, base.c)),
            h=base.h + _hue_shift(target_l, base.l),
        ))
        result.append(color.to_hex_string(include_alpha=False))
    return result
