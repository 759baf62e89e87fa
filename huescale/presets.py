# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""
Preset palette catalogs.

Fixed name → seed tables, each mapped through a generator. Every palette
marks the entry at index 5 as its primary. Catalogs are rebuilt on every
call; nothing is cached.
"""

from __future__ import annotations

from typing import Callable

from huescale.generate import generate_hsv_ladder, generate_oklch_ladder
from huescale.schema.palette import Palette

PRIMARY_INDEX = 5

# ant-design primary colors
HSV_LADDER_SEEDS: dict[str, str] = {
    "red": "#F5222D",
    "volcano": "#FA541C",
    "orange": "#FA8C16",
    "gold": "#FAAD14",
    "yellow": "#FADB14",
    "lime": "#A0D911",
    "green": "#52C41A",
    "cyan": "#13C2C2",
    "blue": "#1677FF",
    "geekblue": "#2F54EB",
    "purple": "#722ED1",
    "magenta": "#EB2F96",
    "grey": "#666666",
}

# Tailwind CSS 500-level colors
OKLCH_LADDER_SEEDS: dict[str, str] = {
    "slate": "#64748b",
    "gray": "#6b7280",
    "zinc": "#71717a",
    "neutral": "#737373",
    "stone": "#78716c",
    "red": "#ef4444",
    "orange": "#f97316",
    "amber": "#f59e0b",
    "yellow": "#eab308",
    "lime": "#84cc16",
    "green": "#22c55e",
    "emerald": "#10b981",
    "teal": "#14b8a6",
    "cyan": "#06b6d4",
    "sky": "#0ea5e9",
    "blue": "#3b82f6",
    "indigo": "#6366f1",
    "violet": "#8b5cf6",
    "purple": "#a855f7",
    "fuchsia": "#d946ef",
    "pink": "#ec4899",
    "rose": "#f43f5e",
}


def _with_primary(colors: list[str]) -> Palette:
    return Palette(colors=tuple(colors), primary=colors[PRIMARY_INDEX])


def _build(seeds: dict[str, str], build: Callable[[str], Palette]) -> dict[str, Palette]:
    return {name: build(seed) for name, seed in seeds.items()}


def _dark_palette(seed: str) -> Palette:
    # The primary marker stays the light-theme seed; only the steps change.
    light = _with_primary(generate_hsv_ladder(seed))
    return Palette(
        colors=tuple(generate_hsv_ladder(seed, theme="dark")),
        primary=light.primary,
    )


def hsv_ladder_palettes() -> dict[str, Palette]:
    """Light-theme HSV ladders for the 13 ant-design primaries."""
    return _build(HSV_LADDER_SEEDS, lambda seed: _with_primary(generate_hsv_ladder(seed)))


def hsv_ladder_dark_palettes() -> dict[str, Palette]:
    """Dark-theme HSV ladders for the 13 ant-design primaries."""
    return _build(HSV_LADDER_SEEDS, _dark_palette)


def oklch_ladder_palettes() -> dict[str, Palette]:
    """OKLCH ladders for the 22 Tailwind primaries."""
    return _build(OKLCH_LADDER_SEEDS, lambda seed: _with_primary(generate_oklch_ladder(seed)))
