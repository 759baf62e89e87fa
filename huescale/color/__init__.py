# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""
Color core for Huescale.

Color-space math, input parsing and the immutable Color value.
All operations are pure and deterministic.
"""

from huescale.color.color import Color, ColorInput, parse_color
from huescale.color.parse import NAMED_COLORS, ParseError

__all__ = [
    "Color",
    "ColorInput",
    "parse_color",
    "ParseError",
    "NAMED_COLORS",
]
