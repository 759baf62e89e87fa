# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Supported spaces: RGB (0-255), HSL, HSV, OKLab, OKLCH.

Conversion chain for the perceptual spaces: RGB → OKLab → OKLCH

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)

The OKLab transform normalizes channels to [0, 1] and feeds them straight
into the LMS matrix without an sRGB transfer-curve decode. Palettes built on
top of these functions depend on that behavior, so it is kept as is.

HSL/HSV functions work on scalars. OKLab/OKLCH functions accept scalars or
arrays of shape (..., 3) and are pure NumPy.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from huescale.color.numeric import clamp, normalize_hue, round_half_up


# =============================================================================
# RGB ↔ HSL
# =============================================================================


def _hue_from_max(r: float, g: float, b: float, mx: float, d: float) -> float:
    """Hue in degrees from the max channel; assumes d = max - min > 0."""
    if mx == r:
        h = ((g - b) / d + (6 if g < b else 0)) / 6
    elif mx == g:
        h = ((b - r) / d + 2) / 6
    else:
        h = ((r - g) / d + 4) / 6
    return h * 360


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB [0, 255] to HSL.

    Returns:
        (h, s, l) with h in degrees [0, 360) and s, l in [0, 1].
        Achromatic input (max == min) yields h = 0, s = 0.
    """
    r, g, b = r / 255, g / 255, b / 255
    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2

    if mx == mn:
        return 0.0, 0.0, l

    d = mx - mn
    s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
    return _hue_from_max(r, g, b, mx, d), s, l


def _hue_to_channel(p: float, q: float, t: float) -> float:
    t = t % 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert HSL to RGB [0, 255].

    Hue is wrapped into [0, 360); saturation and lightness are clamped to
    [0, 1] before conversion.
    """
    h = normalize_hue(h)
    s = clamp(s, 0.0, 1.0)
    l = clamp(l, 0.0, 1.0)

    if s == 0:
        v = round_half_up(l * 255)
        return v, v, v

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    hk = h / 360

    return (
        round_half_up(_hue_to_channel(p, q, hk + 1 / 3) * 255),
        round_half_up(_hue_to_channel(p, q, hk) * 255),
        round_half_up(_hue_to_channel(p, q, hk - 1 / 3) * 255),
    )


# =============================================================================
# RGB ↔ HSV
# =============================================================================


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB [0, 255] to HSV.

    Returns:
        (h, s, v) with h in degrees [0, 360) and s, v in [0, 1].
        s is 0 for black; h is 0 for any achromatic input.
    """
    r, g, b = r / 255, g / 255, b / 255
    mx = max(r, g, b)
    mn = min(r, g, b)
    d = mx - mn

    s = 0.0 if mx == 0 else d / mx
    h = 0.0 if mx == mn else _hue_from_max(r, g, b, mx, d)
    return h, s, mx


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """Convert HSV to RGB [0, 255]. Same input normalization as hsl_to_rgb."""
    h = normalize_hue(h)
    s = clamp(s, 0.0, 1.0)
    v = clamp(v, 0.0, 1.0)

    sector = int(h // 60)
    f = h / 60 - sector
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    r, g, b = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[sector % 6]

    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)


# =============================================================================
# RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Normalized RGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS (cube-rooted) to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Published inverses, not np.linalg.inv: output must match other OKLab
# implementations to the last digit.
_M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)

MAX_CHROMA = 0.5


def rgb_to_oklab(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert RGB [0, 255] to OKLab.

    Args:
        rgb: Array of shape (..., 3) with RGB values in [0, 255]

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0

    lms = np.einsum('...j,ij->...i', rgb, _M1)
    lms_cbrt = np.cbrt(lms)

    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_rgb(lab: ArrayLike) -> NDArray[np.int64]:
    """
    Convert OKLab to RGB [0, 255].

    Out-of-gamut results are clamped channel-wise after rounding.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Integer array of shape (..., 3)
    """
    lab = np.asarray(lab, dtype=np.float64)

    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3
    rgb = np.einsum('...j,ij->...i', lms, _M1_INV)

    return np.clip(np.floor(rgb * 255.0 + 0.5), 0, 255).astype(np.int64)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Lightness is clamped to [0, 1] and chroma to [0, MAX_CHROMA]; chroma
    beyond that is not useful for building ramps.

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H), H in [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = np.clip(lab[..., 0], 0.0, 1.0)
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.clip(np.sqrt(a**2 + b**2), 0.0, MAX_CHROMA)
    H = np.degrees(np.arctan2(b, a))
    H = np.where(H < 0, H + 360.0, H)

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H in degrees)
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = np.clip(lch[..., 0], 0.0, 1.0)
    C = np.clip(lch[..., 1], 0.0, MAX_CHROMA)
    H_rad = np.radians(lch[..., 2])

    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


# =============================================================================
# Convenience: RGB ↔ OKLCH (full chain)
# =============================================================================


def rgb_to_oklch(rgb: ArrayLike) -> NDArray[np.float64]:
    """RGB [0, 255] → OKLab → OKLCH."""
    return oklab_to_oklch(rgb_to_oklab(rgb))


def oklch_to_rgb(lch: ArrayLike) -> NDArray[np.int64]:
    """OKLCH → OKLab → RGB [0, 255], clamped."""
    return oklab_to_rgb(oklch_to_oklab(lch))
