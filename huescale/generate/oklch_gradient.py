# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""OKLCH gradient: a continuous lightness ramp at the seed's chroma and hue."""

from __future__ import annotations

from typing import Union

from huescale.color.color import Color, ColorInput
from huescale.color.numeric import ease_in_out, lerp
from huescale.generate.options import Interpolation, coerce_option
from huescale.schema.color_spaces import OKLCH

DEFAULT_STEPS = 10
DEFAULT_START_L = 0.95
DEFAULT_END_L = 0.10


def generate_oklch_gradient(
    seed: ColorInput,
    *,
    steps: int = DEFAULT_STEPS,
    start_l: float = DEFAULT_START_L,
    end_l: float = DEFAULT_END_L,
    interpolation: Union[Interpolation, str, None] = Interpolation.EASE_IN_OUT,
) -> list[str]:
    """
    Generate ``steps`` colors from ``start_l`` to ``end_l`` lightness.

    Chroma and hue stay those of the seed. Positions ``t = i / (steps - 1)``
    are eased (cubic ease-in-out by default) before interpolating lightness.

    Args:
        seed: Any supported color input
        steps: Number of colors. 1 yields just the start color, 0 or less
            yields an empty list.
        start_l: OKLCH lightness of the first color
        end_l: OKLCH lightness of the last color
        interpolation: "ease-in-out" (default) or "linear"

    Returns:
        ``steps`` lowercase ``#rrggbb`` strings.

    Raises:
        ParseError: If seed cannot be parsed.
    """
    base = Color.parse(seed).to_oklch()
    if interpolation is None:
        interpolation = Interpolation.EASE_IN_OUT
    # anything unrecognized is applied without easing
    interpolation = coerce_option(interpolation, Interpolation, Interpolation.LINEAR)

    if steps <= 0:
        return []

    result = []
    for i in range(steps):
        t = i / (steps - 1) if steps > 1 else 0.0
        if interpolation is Interpolation.EASE_IN_OUT:
            t = ease_in_out(t)

        color = Color.parse(OKLCH(l=lerp(start_l, end_l, t), c=base.c, h=base.h))
        result.append(color.to_hex_string(include_alpha=False))
    return result
