# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""
The canonical color value.

A Color is RGB (integers 0-255) plus alpha (0-1). It is immutable: every
transformation returns a new Color. HSL, HSV, OKLab, OKLCH, brightness and
luminance are derived on first access and kept on the instance.

Usage::

    from huescale import parse_color

    c = parse_color("#1677ff")
    c.to_hsl_string()           # 'hsl(215,100%,54%)'
    c.lighten(20).to_hex_string()
    c.contrast("white")
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Union

import numpy as np

from huescale.color.colorspace import oklab_to_oklch, rgb_to_hsl, rgb_to_hsv, rgb_to_oklab
from huescale.color.numeric import clamp, limit_alpha, limit_range, round_half_up
from huescale.color.parse import parse_rgba
from huescale.schema.color_spaces import HSL, HSV, OKLAB, OKLCH, RGB, ColorSpaceValue

ColorInput = Union["Color", str, ColorSpaceValue, dict]


def _gamma_decode(channel: int) -> float:
    v = channel / 255
    return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4


@dataclass(frozen=True)
class Color:
    """
    An RGBA color.

    Construct directly from channels (values are clamped and rounded) or
    from any supported input with Color.parse() / parse_color().

    Attributes:
        r, g, b: Channels in [0, 255]
        a: Alpha in [0, 1]
    """
    r: int = 0
    g: int = 0
    b: int = 0
    a: float = 1.0

    def __post_init__(self) -> None:
        """Clamp channels into range."""
        object.__setattr__(self, "r", limit_range(self.r))
        object.__setattr__(self, "g", limit_range(self.g))
        object.__setattr__(self, "b", limit_range(self.b))
        object.__setattr__(self, "a", limit_alpha(self.a))

    @classmethod
    def parse(cls, value: ColorInput) -> Color:
        """
        Build a Color from any supported input.

        Raises:
            ParseError: If the input matches no supported form.
        """
        if isinstance(value, Color):
            return cls(value.r, value.g, value.b, value.a)
        return cls(*parse_rgba(value))

    # =========================================================================
    # Derived representations (computed once per instance)
    # =========================================================================

    @cached_property
    def _hsl(self) -> HSL:
        h, s, l = rgb_to_hsl(self.r, self.g, self.b)
        return HSL(h=h, s=s, l=l, a=self.a)

    @cached_property
    def _hsv(self) -> HSV:
        h, s, v = rgb_to_hsv(self.r, self.g, self.b)
        return HSV(h=h, s=s, v=v, a=self.a)

    @cached_property
    def _oklab(self) -> OKLAB:
        L, a, b = rgb_to_oklab(np.array([self.r, self.g, self.b], dtype=np.float64))
        return OKLAB(l=float(L), a=float(a), b=float(b), alpha=self.a)

    @cached_property
    def _oklch(self) -> OKLCH:
        lab = self._oklab
        L, C, H = oklab_to_oklch(np.array([lab.l, lab.a, lab.b], dtype=np.float64))
        return OKLCH(l=float(L), c=float(C), h=float(H), a=self.a)

    @cached_property
    def _brightness(self) -> float:
        return (self.r * 299 + self.g * 587 + self.b * 114) / 1000

    @cached_property
    def _luminance(self) -> float:
        return (
            0.2126 * _gamma_decode(self.r)
            + 0.7152 * _gamma_decode(self.g)
            + 0.0722 * _gamma_decode(self.b)
        )

    # =========================================================================
    # Output
    # =========================================================================

    def to_hex_string(self, include_alpha: bool = True) -> str:
        """``#rrggbb``, or ``#rrggbbaa`` when alpha < 1 and include_alpha is set."""
        hex_str = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if include_alpha and self.a < 1:
            hex_str += f"{limit_range(self.a * 255):02x}"
        return hex_str

    def to_rgb(self) -> RGB:
        return RGB(r=self.r, g=self.g, b=self.b, a=self.a)

    def to_rgb_string(self) -> str:
        if self.a < 1:
            return f"rgba({self.r},{self.g},{self.b},{self.a})"
        return f"rgb({self.r},{self.g},{self.b})"

    def to_hsl(self) -> HSL:
        return self._hsl

    def to_hsl_string(self) -> str:
        """``hsl(h,s%,l%)`` with integer degrees and percents."""
        hsl = self._hsl
        h = round_half_up(hsl.h)
        s = round_half_up(hsl.s * 100)
        l = round_half_up(hsl.l * 100)
        if self.a < 1:
            return f"hsla({h},{s}%,{l}%,{self.a})"
        return f"hsl({h},{s}%,{l}%)"

    def to_hsv(self) -> HSV:
        return self._hsv

    def to_oklab(self) -> OKLAB:
        return self._oklab

    def to_oklch(self) -> OKLCH:
        return self._oklch

    def __str__(self) -> str:
        return self.to_rgb_string()

    def clone(self) -> Color:
        return Color(self.r, self.g, self.b, self.a)

    # =========================================================================
    # Transformations
    # =========================================================================

    def _with_hsl(self, s: float, l: float) -> Color:
        return Color.parse(HSL(h=self._hsl.h, s=s, l=l, a=self.a))

    def lighten(self, amount: float = 10) -> Color:
        """Raise HSL lightness by ``amount`` percentage points."""
        return self._with_hsl(self._hsl.s, clamp(self._hsl.l + amount / 100, 0.0, 1.0))

    def darken(self, amount: float = 10) -> Color:
        """Lower HSL lightness by ``amount`` percentage points."""
        return self._with_hsl(self._hsl.s, clamp(self._hsl.l - amount / 100, 0.0, 1.0))

    def saturate(self, amount: float = 10) -> Color:
        return self._with_hsl(clamp(self._hsl.s + amount / 100, 0.0, 1.0), self._hsl.l)

    def desaturate(self, amount: float = 10) -> Color:
        return self._with_hsl(clamp(self._hsl.s - amount / 100, 0.0, 1.0), self._hsl.l)

    def mix(self, other: ColorInput, amount: float = 50) -> Color:
        """
        Blend toward another color.

        Plain per-channel linear interpolation in RGB, alpha included; not
        gamma-correct.

        Args:
            other: Color to blend toward
            amount: 0 keeps this color, 100 yields ``other``
        """
        target = Color.parse(other)
        p = amount / 100
        return Color(
            r=round_half_up(self.r + (target.r - self.r) * p),
            g=round_half_up(self.g + (target.g - self.g) * p),
            b=round_half_up(self.b + (target.b - self.b) * p),
            a=self.a + (target.a - self.a) * p,
        )

    def tint(self, amount: float = 10) -> Color:
        """Mix with opaque white."""
        return self.mix(RGB(255, 255, 255), amount)

    def shade(self, amount: float = 10) -> Color:
        """Mix with opaque black."""
        return self.mix(RGB(0, 0, 0), amount)

    def grayscale(self) -> Color:
        """Rec. 601 luma applied to all three channels; alpha kept."""
        gray = round_half_up(0.299 * self.r + 0.587 * self.g + 0.114 * self.b)
        return Color(gray, gray, gray, self.a)

    # =========================================================================
    # Metrics and predicates
    # =========================================================================

    def get_brightness(self) -> float:
        """Perceived brightness ``(299r + 587g + 114b) / 1000``, range 0-255."""
        return self._brightness

    def get_luminance(self) -> float:
        """WCAG 2.x relative luminance, range 0-1."""
        return self._luminance

    def contrast(self, other: ColorInput) -> float:
        """
        WCAG contrast ratio against another color.

        Returns:
            Ratio in [1, 21]; white on black is 21.
        """
        l1 = self._luminance
        l2 = Color.parse(other)._luminance
        return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)

    def is_dark(self) -> bool:
        return self._brightness < 128

    def is_light(self) -> bool:
        return not self.is_dark()

    def equals(self, other: Any) -> bool:
        """Exact r, g, b, a equality; ``other`` may be any color input."""
        return self == Color.parse(other)


def parse_color(value: ColorInput) -> Color:
    """
    Parse any supported color input into a Color.

    Raises:
        ParseError: If the input matches no supported form.
    """
    return Color.parse(value)
