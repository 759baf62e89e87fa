# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""
Huescale -- Color manipulation and palette generation.

Parses colors in many notations into one immutable Color value, converts
between RGB, HSL, HSV, OKLab and OKLCH, and derives tonal scales from a
single seed color.

Quick start::

    from huescale import parse_color, generate

    c = parse_color("#1677ff")
    c.lighten(10).to_hex_string()
    c.contrast("white")

    generate("#1677ff")                              # 10-step HSV ladder
    generate("#3b82f6", algorithm="oklch-ladder")    # 11 steps, 50-950
    generate("#1677ff", algorithm="oklch-gradient", steps=7)
"""

from __future__ import annotations

__version__ = "1.0.0"

from huescale.color import Color, ColorInput, ParseError, parse_color
from huescale.generate import (
    Algorithm,
    Interpolation,
    Theme,
    generate,
    generate_hsv_ladder,
    generate_oklch_gradient,
    generate_oklch_ladder,
)
from huescale.schema import HSL, HSV, OKLAB, OKLCH, RGB, Palette

__all__ = [
    # Core API
    "Color",
    "ColorInput",
    "parse_color",
    "ParseError",
    # Generators
    "generate",
    "generate_hsv_ladder",
    "generate_oklch_ladder",
    "generate_oklch_gradient",
    "Algorithm",
    "Theme",
    "Interpolation",
    # Types (commonly needed)
    "RGB",
    "HSL",
    "HSV",
    "OKLCH",
    "OKLAB",
    "Palette",
    # Version
    "__version__",
]
