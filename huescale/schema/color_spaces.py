# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""
Structured color values, one frozen dataclass per color space.

These types serve two purposes:
- Output of Color.to_rgb(), to_hsl(), ... (every struct carries alpha)
- Structured input to the parser, as a tagged union (ColorSpaceValue)

Mappings (plain dicts) are turned into the matching variant by
structure_from_mapping(), which discriminates on field names:

    {r, g, b[, a]}      → RGB
    {h, s, l[, a]}      → HSL
    {h, s, v[, a]}      → HSV
    {l, c, h[, a]}      → OKLCH
    {l, a, b[, alpha]}  → OKLAB

HSL and HSV share h and s and differ in the third field. OKLCH and OKLAB
share l and differ in c versus a + b. OKLAB stores alpha as ``alpha``
because ``a`` is its green-red axis.

Values are stored as given. Clamping happens when a struct is turned into a
Color, never here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True, slots=True)
class RGB:
    """Red, green, blue in [0, 255]; alpha in [0, 1]."""
    r: float
    g: float
    b: float
    a: float = 1.0

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: Mapping) -> RGB:
        return cls(r=data["r"], g=data["g"], b=data["b"], a=data.get("a", 1.0))


@dataclass(frozen=True, slots=True)
class HSL:
    """
    Hue, saturation, lightness.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation [0, 1]
        l: Lightness [0, 1]
        a: Alpha [0, 1]
    """
    h: float
    s: float
    l: float
    a: float = 1.0

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "l": self.l, "a": self.a}

    @classmethod
    def from_dict(cls, data: Mapping) -> HSL:
        return cls(h=data["h"], s=data["s"], l=data["l"], a=data.get("a", 1.0))


@dataclass(frozen=True, slots=True)
class HSV:
    """Hue (degrees), saturation and value in [0, 1], alpha."""
    h: float
    s: float
    v: float
    a: float = 1.0

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "v": self.v, "a": self.a}

    @classmethod
    def from_dict(cls, data: Mapping) -> HSV:
        return cls(h=data["h"], s=data["s"], v=data["v"], a=data.get("a", 1.0))


@dataclass(frozen=True, slots=True)
class OKLCH:
    """
    A color in OKLCH space.

    Attributes:
        l: Lightness (0.0 = black, 1.0 = white)
        c: Chroma (0.0 = neutral gray, clamped to 0.5 on conversion)
        h: Hue in degrees [0, 360)
        a: Alpha [0, 1]
    """
    l: float
    c: float
    h: float
    a: float = 1.0

    def to_dict(self) -> dict:
        return {"l": self.l, "c": self.c, "h": self.h, "a": self.a}

    @classmethod
    def from_dict(cls, data: Mapping) -> OKLCH:
        return cls(l=data["l"], c=data["c"], h=data["h"], a=data.get("a", 1.0))


@dataclass(frozen=True, slots=True)
class OKLAB:
    """
    A color in OKLab space.

    Attributes:
        l: Lightness [0, 1]
        a: Green-red axis, roughly [-0.5, 0.5]
        b: Blue-yellow axis, roughly [-0.5, 0.5]
        alpha: Alpha [0, 1]
    """
    l: float
    a: float
    b: float
    alpha: float = 1.0

    def to_dict(self) -> dict:
        return {"l": self.l, "a": self.a, "b": self.b, "alpha": self.alpha}

    @classmethod
    def from_dict(cls, data: Mapping) -> OKLAB:
        return cls(
            l=data["l"],
            a=data["a"],
            b=data["b"],
            alpha=data.get("alpha", 1.0),
        )


ColorSpaceValue = Union[RGB, HSL, HSV, OKLCH, OKLAB]

# Checked in order; the first variant whose required fields are all present wins.
_SHAPES: tuple[tuple[frozenset[str], type], ...] = (
    (frozenset("rgb"), RGB),
    (frozenset("hsl"), HSL),
    (frozenset("hsv"), HSV),
    (frozenset("lch"), OKLCH),
    (frozenset("lab"), OKLAB),
)


def structure_from_mapping(data: Mapping[str, Any]) -> Optional[ColorSpaceValue]:
    """
    Pick the color-space variant described by a mapping's keys.

    Returns:
        The matching struct, or None when no shape fits.
    """
    keys = set(data)
    for required, variant in _SHAPES:
        if required <= keys:
            return variant.from_dict(data)
    return None
