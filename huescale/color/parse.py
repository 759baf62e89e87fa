# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""
Color input parsing.

Turns every supported input form into canonical ``(r, g, b, a)`` with
integer channels in [0, 255] and alpha in [0, 1]. Forms are tried in this
order:

1. Hex string: ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa`` (``#`` optional)
2. ``rgb(...)`` / ``rgba(...)``
3. ``hsl(...)`` / ``hsla(...)``
4. ``hsv(...)`` / ``hsb(...)``
5. Named color (12 basic CSS names)
6. Structured value: a color-space struct or a mapping of its fields

Numeric values outside their natural range are clamped, never rejected.
Anything that matches none of the forms raises ParseError.

Color instances are handled by Color.parse() itself, before this module is
reached.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

import numpy as np

from huescale.color.colorspace import hsl_to_rgb, hsv_to_rgb, oklab_to_rgb, oklch_to_rgb
from huescale.color.numeric import clamp, limit_alpha, limit_range
from huescale.schema.color_spaces import (
    HSL,
    HSV,
    OKLAB,
    OKLCH,
    RGB,
    ColorSpaceValue,
    structure_from_mapping,
)

logger = logging.getLogger(__name__)

RGBA = tuple[int, int, int, float]


class ParseError(ValueError):
    """Raised when a color input matches none of the recognized forms."""


NAMED_COLORS: dict[str, str] = {
    "black": "#000000",
    "white": "#ffffff",
    "red": "#ff0000",
    "green": "#008000",
    "blue": "#0000ff",
    "cyan": "#00ffff",
    "magenta": "#ff00ff",
    "yellow": "#ffff00",
    "orange": "#ffa500",
    "purple": "#800080",
    "gray": "#808080",
    "grey": "#808080",
}

_HEX_RE = re.compile(r"^#?([0-9a-f]+)$")
_FUNCTIONAL_RE = re.compile(r"^(rgba?|hsla?|hsva?|hsba?)\s*\((.*)\)$")
_NUMBER_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:e[-+]?\d+)?%?")


# =============================================================================
# Strings
# =============================================================================


def _parse_hex(digits: str) -> RGBA:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return r, g, b, a


def _fraction(token: str) -> float:
    """'50%' → 0.5, '0.5' → 0.5."""
    if token.endswith("%"):
        return float(token[:-1]) / 100
    return float(token)


def _alpha(tokens: list[str]) -> float:
    return limit_alpha(_fraction(tokens[3])) if len(tokens) > 3 else 1.0


def _parse_functional(name: str, body: str, original: str) -> RGBA:
    tokens = _NUMBER_RE.findall(body)
    if len(tokens) < 3:
        raise ParseError(f"Expected at least 3 numeric values in {original!r}")

    if name.startswith("rgb"):
        r, g, b = (limit_range(float(t.rstrip("%"))) for t in tokens[:3])
        return r, g, b, _alpha(tokens)

    h = float(tokens[0].rstrip("%"))
    x = clamp(_fraction(tokens[1]), 0.0, 1.0)
    y = clamp(_fraction(tokens[2]), 0.0, 1.0)
    if name.startswith("hsl"):
        r, g, b = hsl_to_rgb(h, x, y)
    else:
        r, g, b = hsv_to_rgb(h, x, y)
    return r, g, b, _alpha(tokens)


def parse_string(value: str) -> RGBA:
    """Parse any supported string form."""
    text = value.strip().lower()

    m = _HEX_RE.match(text)
    if m:
        digits = m.group(1)
        if len(digits) not in (3, 4, 6, 8):
            raise ParseError(
                f"Hex color must have 3, 4, 6 or 8 digits, got {len(digits)} in {value!r}"
            )
        return _parse_hex(digits)

    m = _FUNCTIONAL_RE.match(text)
    if m:
        return _parse_functional(m.group(1), m.group(2), value)

    if text in NAMED_COLORS:
        return _parse_hex(NAMED_COLORS[text][1:])

    raise ParseError(f"Cannot parse color {value!r}")


# =============================================================================
# Structured values
# =============================================================================


def parse_structure(value: ColorSpaceValue) -> RGBA:
    """Convert a color-space struct to canonical RGBA."""
    if isinstance(value, RGB):
        return (
            limit_range(value.r),
            limit_range(value.g),
            limit_range(value.b),
            limit_alpha(value.a),
        )
    if isinstance(value, HSL):
        return (*hsl_to_rgb(value.h, value.s, value.l), limit_alpha(value.a))
    if isinstance(value, HSV):
        return (*hsv_to_rgb(value.h, value.s, value.v), limit_alpha(value.a))
    if isinstance(value, OKLCH):
        rgb = oklch_to_rgb(np.array([value.l, value.c, value.h], dtype=np.float64))
        return int(rgb[0]), int(rgb[1]), int(rgb[2]), limit_alpha(value.a)
    if isinstance(value, OKLAB):
        rgb = oklab_to_rgb(np.array([value.l, value.a, value.b], dtype=np.float64))
        return int(rgb[0]), int(rgb[1]), int(rgb[2]), limit_alpha(value.alpha)
    raise ParseError(f"Unsupported color structure {value!r}")


def parse_mapping(value: Mapping[str, Any]) -> RGBA:
    """Discriminate a mapping by its keys, then convert it."""
    structure = structure_from_mapping(value)
    if structure is None:
        raise ParseError(f"Unrecognized color mapping with keys {sorted(value)}")
    return parse_structure(structure)


def parse_rgba(value: Any) -> RGBA:
    """
    Parse any non-Color input into canonical RGBA.

    Raises:
        ParseError: If the input matches none of the supported forms or
            carries non-numeric channel values.
    """
    try:
        if isinstance(value, str):
            return parse_string(value)
        if isinstance(value, (RGB, HSL, HSV, OKLCH, OKLAB)):
            return parse_structure(value)
        if isinstance(value, Mapping):
            return parse_mapping(value)
    except ParseError:
        logger.debug("Rejected color input %r", value)
        raise
    except (TypeError, ValueError) as e:
        logger.debug("Rejected color input %r", value)
        raise ParseError(f"Invalid channel value in color {value!r}: {e}") from e

    logger.debug("Rejected color input of type %s", type(value).__name__)
    raise ParseError(f"Unsupported color input type {type(value).__name__}")
