# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""
HSV tonal ladder (the ant-design color palette algorithm).

Produces 10 colors from a seed: 5 lighter steps, the seed itself at
index 5, then 4 darker steps. Each step walks hue, saturation and value by
fixed increments in HSV space. Output reproduces the reference palettes of
@ant-design/colors exactly; saturation and value are rounded to two
decimals, half up, before conversion.

Dark theme does not walk HSV again. It blends a background color toward
selected light-theme steps using a fixed (index, percent) table.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from huescale.color.color import Color, ColorInput
from huescale.color.numeric import clamp, round_half_up, round_to
from huescale.generate.options import Theme, coerce_option
from huescale.schema.color_spaces import HSV

logger = logging.getLogger(__name__)

HUE_STEP = 2                 # degrees per step
SATURATION_STEP = 0.16       # lighter steps, and the darkest step
SATURATION_STEP_DARK = 0.05  # darker steps 1-3
BRIGHTNESS_STEP_LIGHT = 0.05
BRIGHTNESS_STEP_DARK = 0.15
LIGHT_COLOR_COUNT = 5
DARK_COLOR_COUNT = 4

# Hues in this band (yellow through blue) rotate toward the cool side when
# lightening; the rest rotate the other way.
COOL_HUE_BAND = (60, 240)

DEFAULT_DARK_BACKGROUND = "#141414"

# (light palette index, mix percent toward it) for each dark-theme step.
DARK_COLOR_MAP: tuple[tuple[int, int], ...] = (
    (7, 15),
    (6, 25),
    (5, 30),
    (5, 45),
    (5, 65),
    (5, 85),
    (4, 90),
    (3, 95),
    (2, 97),
    (1, 98),
)


def _hue(hsv: HSV, i: int, light: bool) -> int:
    base = round_half_up(hsv.h)
    if COOL_HUE_BAND[0] <= base <= COOL_HUE_BAND[1]:
        hue = base - HUE_STEP * i if light else base + HUE_STEP * i
    else:
        hue = base + HUE_STEP * i if light else base - HUE_STEP * i

    if hue < 0:
        hue += 360
    elif hue >= 360:
        hue -= 360
    return hue


def _saturation(hsv: HSV, i: int, light: bool) -> float:
    # True gray stays gray.
    if hsv.h == 0 and hsv.s == 0:
        return hsv.s

    if light:
        saturation = hsv.s - SATURATION_STEP * i
    elif i == DARK_COLOR_COUNT:
        saturation = hsv.s + SATURATION_STEP
    else:
        saturation = hsv.s + SATURATION_STEP_DARK * i

    if saturation > 1:
        saturation = 1.0
    if light and i == LIGHT_COLOR_COUNT and saturation > 0.1:
        saturation = 0.1
    if saturation < 0.06:
        saturation = 0.06

    return round_to(saturation, 2)


def _value(hsv: HSV, i: int, light: bool) -> float:
    if light:
        value = hsv.v + BRIGHTNESS_STEP_LIGHT * i
    else:
        value = hsv.v - BRIGHTNESS_STEP_DARK * i
    return round_to(clamp(value, 0.0, 1.0), 2)


def _step(hsv: HSV, i: int, light: bool) -> Color:
    return Color.parse(HSV(
        h=_hue(hsv, i, light),
        s=_saturation(hsv, i, light),
        v=_value(hsv, i, light),
    ))


def hsv_ladder_colors(seed: Color) -> list[Color]:
    """
    The 10 light-theme steps as Color values.

    The seed entry is an opaque copy of the seed.
    """
    hsv = seed.to_hsv()

    patterns = [_step(hsv, i, light=True) for i in range(LIGHT_COLOR_COUNT, 0, -1)]
    patterns.append(Color(seed.r, seed.g, seed.b))
    patterns.extend(_step(hsv, i, light=False) for i in range(1, DARK_COLOR_COUNT + 1))
    return patterns


def generate_hsv_ladder(
    seed: ColorInput,
    *,
    theme: Union[Theme, str, None] = Theme.LIGHT,
    background_color: Optional[ColorInput] = None,
) -> list[str]:
    """
    Generate a 10-step tonal ladder in HSV space.

    Args:
        seed: Any supported color input
        theme: "light" (default) or "dark"
        background_color: Dark-theme background to blend from
            (default: #141414). Ignored for the light theme.

    Returns:
        10 lowercase ``#rrggbb`` strings. For the light theme, index 5 is
        the seed itself.

    Raises:
        ParseError: If seed or background_color cannot be parsed.
    """
    base = Color.parse(seed)
    theme = coerce_option(theme, Theme, Theme.LIGHT)
    patterns = hsv_ladder_colors(base)

    if theme is Theme.DARK:
        background = Color.parse(background_color or DEFAULT_DARK_BACKGROUND)
        logger.debug("Blending dark ladder from background %s", background.to_hex_string())
        return [
            background.mix(patterns[index], amount).to_hex_string(include_alpha=False)
            for index, amount in DARK_COLOR_MAP
        ]

    return [c.to_hex_string(include_alpha=False) for c in patterns]
