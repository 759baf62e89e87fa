# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""
Option enums for the palette generators.

Every public generator accepts either the enum member or its string value.
Unknown values fall back to a default with a logged warning; generation
itself never fails on options.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TypeVar, Union

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    """Palette generation algorithm."""
    HSV_LADDER = "hsv-ladder"          # 10 steps, seed kept exactly at index 5
    OKLCH_LADDER = "oklch-ladder"      # 11 fixed lightness stops (50-950)
    OKLCH_GRADIENT = "oklch-gradient"  # N steps, continuous lightness ramp


# Names used by the design systems the algorithms were modelled on.
ALGORITHM_ALIASES: dict[str, Algorithm] = {
    "ant-design": Algorithm.HSV_LADDER,
    "tailwind": Algorithm.OKLCH_LADDER,
    "oklch": Algorithm.OKLCH_GRADIENT,
}


class Theme(Enum):
    """Target theme for the HSV ladder."""
    LIGHT = "light"
    DARK = "dark"


class Interpolation(Enum):
    """Easing applied to the gradient parameter."""
    LINEAR = "linear"
    EASE_IN_OUT = "ease-in-out"


E = TypeVar("E", bound=Enum)


def coerce_option(
    value: Union[E, str, None],
    enum_type: type[E],
    default: E,
    aliases: dict[str, E] | None = None,
) -> E:
    """
    Resolve an option given as enum member or string.

    None yields the default silently; an unrecognized value yields the
    default and a warning.
    """
    if value is None:
        return default
    if isinstance(value, enum_type):
        return value
    if aliases and isinstance(value, str) and value in aliases:
        return aliases[value]
    try:
        return enum_type(value)
    except ValueError:
        logger.warning(
            "Unknown %s %r, using %r", enum_type.__name__, value, default.value
        )
        return default
