# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""
Palette generation.

Three independent algorithms turn one seed color into an ordered scale of
hex strings:

1. HSV ladder -- 10 steps, seed kept exactly at index 5 (ant-design)
2. OKLCH ladder -- 11 fixed lightness stops, 50-950 (Tailwind-style)
3. OKLCH gradient -- any number of steps along a lightness ramp

generate() is the single entry point that dispatches on an algorithm tag.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Union

from huescale.color.color import ColorInput
from huescale.generate.hsv_ladder import generate_hsv_ladder
from huescale.generate.oklch_gradient import generate_oklch_gradient
from huescale.generate.oklch_ladder import generate_oklch_ladder
from huescale.generate.options import (
    ALGORITHM_ALIASES,
    Algorithm,
    Interpolation,
    Theme,
    coerce_option,
)

logger = logging.getLogger(__name__)

# Algorithm → (generator, keyword options it understands)
_GENERATORS: dict[Algorithm, tuple[Callable[..., list[str]], frozenset[str]]] = {
    Algorithm.HSV_LADDER: (
        generate_hsv_ladder,
        frozenset({"theme", "background_color"}),
    ),
    Algorithm.OKLCH_LADDER: (
        generate_oklch_ladder,
        frozenset(),
    ),
    Algorithm.OKLCH_GRADIENT: (
        generate_oklch_gradient,
        frozenset({"steps", "start_l", "end_l", "interpolation"}),
    ),
}


def generate(
    seed: ColorInput,
    algorithm: Union[Algorithm, str, None] = Algorithm.HSV_LADDER,
    **options: Any,
) -> list[str]:
    """
    Generate a palette from a seed color.

    Args:
        seed: Any supported color input
        algorithm: "hsv-ladder" (default), "oklch-ladder" or
            "oklch-gradient"; "ant-design", "tailwind" and "oklch" are
            accepted as aliases. Unknown tags fall back to the HSV ladder.
        **options: Algorithm-specific keyword options. Options the chosen
            algorithm does not take are ignored.

    Returns:
        List of lowercase ``#rrggbb`` strings.

    Example:
        >>> generate("#1677ff")[5]
        '#1677ff'
        >>> len(generate("#3b82f6", algorithm="oklch-ladder"))
        11
    """
    algo = coerce_option(algorithm, Algorithm, Algorithm.HSV_LADDER, ALGORITHM_ALIASES)
    generator, accepted = _GENERATORS[algo]

    forwarded = {k: v for k, v in options.items() if k in accepted and v is not None}
    ignored = sorted(set(options) - accepted)
    if ignored:
        logger.debug("Options %s do not apply to %s", ignored, algo.value)

    logger.debug("Generating %s palette", algo.value)
    return generator(seed, **forwarded)


__all__ = [
    "generate",
    "generate_hsv_ladder",
    "generate_oklch_ladder",
    "generate_oklch_gradient",
    "Algorithm",
    "Theme",
    "Interpolation",
]
