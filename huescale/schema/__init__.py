# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""
Schema definitions for structured color values and palettes.

All types in this module are immutable (frozen dataclasses).
"""

from huescale.schema.color_spaces import (
    HSL,
    HSV,
    OKLAB,
    OKLCH,
    RGB,
    ColorSpaceValue,
    structure_from_mapping,
)
from huescale.schema.palette import Palette

__all__ = [
    # Color-space structs
    "RGB",
    "HSL",
    "HSV",
    "OKLCH",
    "OKLAB",
    # Tagged union of the above + mapping discriminator
    "ColorSpaceValue",
    "structure_from_mapping",
    # Generated scales
    "Palette",
]
