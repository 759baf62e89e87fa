# Copyright (c) 2026 Huescale
# SPDX-License-Identifier: MIT

"""Tests for the palette generators and the generate() dispatcher."""

import logging
import re

import pytest

from huescale import (
    OKLCH,
    RGB,
    Algorithm,
    Color,
    Interpolation,
    ParseError,
    Theme,
    generate,
    generate_hsv_ladder,
    generate_oklch_gradient,
    generate_oklch_ladder,
    parse_color,
)
from huescale.generate.hsv_ladder import DARK_COLOR_MAP, hsv_ladder_colors
from huescale.generate.oklch_ladder import LIGHTNESS_STOPS, _chroma_shift, _hue_shift

HEX6 = re.compile(r"^#[0-9a-f]{6}$")

# @ant-design/colors v8.0.1
ANT_DESIGN_PALETTES = {
    "red": [
        "#fff1f0", "#ffccc7", "#ffa39e", "#ff7875", "#ff4d4f",
        "#f5222d", "#cf1322", "#a8071a", "#820014", "#5c0011",
    ],
    "volcano": [
        "#fff2e8", "#ffd8bf", "#ffbb96", "#ff9c6e", "#ff7a45",
        "#fa541c", "#d4380d", "#ad2102", "#871400", "#610b00",
    ],
    "orange": [
        "#fff7e6", "#ffe7ba", "#ffd591", "#ffc069", "#ffa940",
        "#fa8c16", "#d46b08", "#ad4e00", "#873800", "#612500",
    ],
    "gold": [
        "#fffbe6", "#fff1b8", "#ffe58f", "#ffd666", "#ffc53d",
        "#faad14", "#d48806", "#ad6800", "#874d00", "#613400",
    ],
    "yellow": [
        "#feffe6", "#ffffb8", "#fffb8f", "#fff566", "#ffec3d",
        "#fadb14", "#d4b106", "#ad8b00", "#876800", "#614700",
    ],
    "lime": [
        "#fcffe6", "#f4ffb8", "#eaff8f", "#d3f261", "#bae637",
        "#a0d911", "#7cb305", "#5b8c00", "#3f6600", "#254000",
    ],
    "green": [
        "#f6ffed", "#d9f7be", "#b7eb8f", "#95de64", "#73d13d",
        "#52c41a", "#389e0d", "#237804", "#135200", "#092b00",
    ],
    "cyan": [
        "#e6fffb", "#b5f5ec", "#87e8de", "#5cdbd3", "#36cfc9",
        "#13c2c2", "#08979c", "#006d75", "#00474f", "#002329",
    ],
    "blue": [
        "#e6f4ff", "#bae0ff", "#91caff", "#69b1ff", "#4096ff",
        "#1677ff", "#0958d9", "#003eb3", "#002c8c", "#001d66",
    ],
    "geekblue": [
        "#f0f5ff", "#d6e4ff", "#adc6ff", "#85a5ff", "#597ef7",
        "#2f54eb", "#1d39c4", "#10239e", "#061178", "#030852",
    ],
    "purple": [
        "#f9f0ff", "#efdbff", "#d3adf7", "#b37feb", "#9254de",
        "#722ed1", "#531dab", "#391085", "#22075e", "#120338",
    ],
    "magenta": [
        "#fff0f6", "#ffd6e7", "#ffadd2", "#ff85c0", "#f759ab",
        "#eb2f96", "#c41d7f", "#9e1068", "#780650", "#520339",
    ],
    "grey": [
        "#a6a6a6", "#999999", "#8c8c8c", "#808080", "#737373",
        "#666666", "#404040", "#1a1a1a", "#000000", "#000000",
    ],
}


def _lightness(hex_value):
    return parse_color(hex_value).to_oklch().l


# OKLCH ladder stop → fraction of the seed chroma removed
CHROMA_REDUCTION = {0.98: 0.4, 0.95: 0.4, 0.90: 0.2, 0.10: 0.2, 0.05: 0.4}


def _expected_ladder(base, hue_shifts):
    colors = []
    for target in LIGHTNESS_STOPS.values():
        color = Color.parse(OKLCH(
            l=target,
            c=base.c - base.c * CHROMA_REDUCTION.get(target, 0.0),
            h=base.h + hue_shifts.get(target, 0.0),
        ))
        colors.append(color.to_hex_string(include_alpha=False))
    return colors


class TestHsvLadder:
    """Light HSV ladders must match the ant-design reference palettes."""

    @pytest.mark.parametrize("name", sorted(ANT_DESIGN_PALETTES))
    def test_matches_reference(self, name):
        expected = ANT_DESIGN_PALETTES[name]
        assert generate_hsv_ladder(expected[5]) == expected

    def test_seed_kept_at_index_five(self):
        colors = generate_hsv_ladder("#1677ff")
        assert len(colors) == 10
        assert colors[5] == "#1677ff"

    def test_structured_seed(self):
        assert generate_hsv_ladder(RGB(22, 119, 255)) == ANT_DESIGN_PALETTES["blue"]

    def test_seed_alpha_dropped(self):
        colors = generate_hsv_ladder("#1677ff80")
        assert colors == ANT_DESIGN_PALETTES["blue"]
        assert all(HEX6.match(c) for c in colors)

    def test_seed_color_is_opaque(self):
        steps = hsv_ladder_colors(parse_color("#1677ff80"))
        assert steps[5].a == 1.0

    @pytest.mark.parametrize("seed", ["#000000", "#ffffff", "#808080"])
    def test_extremes(self, seed):
        colors = generate_hsv_ladder(seed)
        assert len(colors) == 10
        assert colors[5] == seed
        assert all(HEX6.match(c) for c in colors)

    def test_invalid_seed(self):
        with pytest.raises(ParseError):
            generate_hsv_ladder("nope")


class TestHsvLadderDark:
    """Dark HSV ladders blend a background toward the light steps."""

    def test_length_and_format(self):
        colors = generate_hsv_ladder("#1677ff", theme="dark")
        assert len(colors) == len(DARK_COLOR_MAP) == 10
        assert all(HEX6.match(c) for c in colors)

    def test_reference_steps(self):
        colors = generate_hsv_ladder("#1677ff", theme=Theme.DARK)
        assert colors[0] == "#111a2c"
        assert colors[5] == "#1668dc"

    def test_differs_from_light(self):
        assert generate_hsv_ladder("#1677ff", theme="dark") != generate_hsv_ladder("#1677ff")

    def test_custom_background(self):
        default = generate_hsv_ladder("#1677ff", theme="dark")
        black = generate_hsv_ladder("#1677ff", theme="dark", background_color="#000000")
        assert len(black) == 10
        assert black != default

    def test_explicit_default_background(self):
        assert generate_hsv_ladder(
            "#1677ff", theme="dark", background_color="#141414"
        ) == generate_hsv_ladder("#1677ff", theme="dark")

    def test_background_ignored_for_light(self):
        assert generate_hsv_ladder(
            "#1677ff", background_color="#000000"
        ) == ANT_DESIGN_PALETTES["blue"]

    def test_unknown_theme_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger="huescale"):
            colors = generate_hsv_ladder("#1677ff", theme="sepia")
        assert colors == ANT_DESIGN_PALETTES["blue"]
        assert "sepia" in caplog.text

    def test_invalid_background(self):
        with pytest.raises(ParseError):
            generate_hsv_ladder("#1677ff", theme="dark", background_color="nope")


class TestOklchLadder:
    """OKLCH ladders sit on fixed lightness stops."""

    def test_eleven_steps(self):
        colors = generate_oklch_ladder("#3b82f6")
        assert len(colors) == len(LIGHTNESS_STOPS) == 11
        assert all(HEX6.match(c) for c in colors)

    @pytest.mark.parametrize("seed", [
        "#3b82f6", "#ef4444", "#22c55e", "#f97316", "#eab308",
        "#06b6d4", "#a855f7", "#ec4899", "#64748b", "#6b7280",
    ])
    def test_light_to_dark(self, seed):
        colors = generate_oklch_ladder(seed)
        assert _lightness(colors[2]) > _lightness(colors[8])
        assert _lightness(colors[0]) > _lightness(colors[10])

    def test_lightness_follows_stops(self):
        # Below 0.3 the 8-bit channels are too coarse to hold the target.
        colors = generate_oklch_ladder("#6b7280")
        for color, target in zip(colors, LIGHTNESS_STOPS.values()):
            if target >= 0.3:
                assert _lightness(color) == pytest.approx(target, abs=0.02)

    def test_index_five_is_not_seed(self):
        assert generate_oklch_ladder("#ffffff")[5] != "#ffffff"

    def test_input_forms_agree(self):
        assert generate_oklch_ladder("#3B82F6") == generate_oklch_ladder(RGB(59, 130, 246))

    def test_deterministic(self):
        assert generate_oklch_ladder("#3b82f6") == generate_oklch_ladder("#3b82f6")

    @pytest.mark.parametrize("target, shift", [
        (0.98, -10.0),
        (0.81, -10.0),
        (0.80, -5.0),
        (0.61, -5.0),
        (0.60, 0.0),
        (0.05, 0.0),
    ])
    def test_hue_shift_for_dark_base(self, target, shift):
        assert _hue_shift(target, 0.15) == shift

    def test_no_hue_shift_at_base_lightness_point_two(self):
        assert _hue_shift(0.98, 0.2) == 0.0

    @pytest.mark.parametrize("target, fraction", [
        (0.98, 0.4),
        (0.91, 0.4),
        (0.90, 0.2),
        (0.81, 0.2),
        (0.80, 0.0),
        (0.50, 0.0),
        (0.20, 0.0),
        (0.19, 0.2),
        (0.10, 0.2),
        (0.09, 0.4),
    ])
    def test_chroma_shift_boundaries(self, target, fraction):
        assert _chroma_shift(target, 0.25) == pytest.approx(-0.25 * fraction)

    def test_dark_seed_hue_and_chroma(self):
        seed = parse_color("#030001")
        base = seed.to_oklch()
        assert base.l < 0.2
        assert base.c > 0.02

        hue = {0.98: -10.0, 0.95: -10.0, 0.90: -10.0, 0.80: -5.0}
        assert generate_oklch_ladder(seed) == _expected_ladder(base, hue)

    def test_mid_seed_chroma_only(self):
        base = parse_color("#3b82f6").to_oklch()
        assert base.l >= 0.2
        assert generate_oklch_ladder("#3b82f6") == _expected_ladder(base, {})


class TestOklchGradient:
    """OKLCH gradients ramp lightness at the seed's chroma and hue."""

    def test_defaults(self):
        colors = generate_oklch_gradient("#1677ff")
        assert len(colors) == 10
        assert all(HEX6.match(c) for c in colors)

    @pytest.mark.parametrize("steps", [2, 3, 5, 20])
    def test_step_count(self, steps):
        assert len(generate_oklch_gradient("#1677ff", steps=steps)) == steps

    def test_single_step_is_start(self):
        assert generate_oklch_gradient("#808080", steps=1, start_l=1.0) == ["#ffffff"]

    @pytest.mark.parametrize("steps", [0, -3])
    def test_no_steps(self, steps):
        assert generate_oklch_gradient("#1677ff", steps=steps) == []

    def test_endpoints(self):
        colors = generate_oklch_gradient("#808080", start_l=1.0, end_l=0.0)
        assert colors[0] == "#ffffff"
        assert colors[-1] == "#000000"

    def test_monotonic_lightness(self):
        colors = generate_oklch_gradient("#808080", steps=8)
        values = [_lightness(c) for c in colors]
        assert values == sorted(values, reverse=True)

    def test_direction(self):
        up = generate_oklch_gradient("#1677ff", start_l=0.1, end_l=0.9)
        down = generate_oklch_gradient("#1677ff", start_l=0.9, end_l=0.1)
        assert up[0] != down[0]
        assert up[0] == down[-1]

    def test_easing_changes_interior(self):
        eased = generate_oklch_gradient("#808080", steps=5, interpolation="ease-in-out")
        linear = generate_oklch_gradient("#808080", steps=5, interpolation=Interpolation.LINEAR)
        assert eased[0] == linear[0]
        assert eased[-1] == linear[-1]
        assert eased[1] != linear[1]

    def test_none_interpolation_eases(self):
        assert generate_oklch_gradient("#808080", steps=5, interpolation=None) == (
            generate_oklch_gradient("#808080", steps=5)
        )

    def test_unknown_interpolation_is_linear(self, caplog):
        with caplog.at_level(logging.WARNING, logger="huescale"):
            colors = generate_oklch_gradient("#808080", steps=5, interpolation="bounce")
        assert colors == generate_oklch_gradient("#808080", steps=5, interpolation="linear")
        assert "bounce" in caplog.text


class TestGenerate:
    """Dispatch on the algorithm tag."""

    def test_default_is_hsv_ladder(self):
        assert generate("#1677ff") == ANT_DESIGN_PALETTES["blue"]

    @pytest.mark.parametrize("tag, length", [
        ("hsv-ladder", 10),
        ("ant-design", 10),
        (Algorithm.HSV_LADDER, 10),
        ("oklch-ladder", 11),
        ("tailwind", 11),
        (Algorithm.OKLCH_LADDER, 11),
        ("oklch-gradient", 10),
        ("oklch", 10),
        (Algorithm.OKLCH_GRADIENT, 10),
    ])
    def test_dispatch(self, tag, length):
        assert len(generate("#1677ff", algorithm=tag)) == length

    def test_aliases_match_canonical(self):
        assert generate("#3b82f6", algorithm="tailwind") == generate_oklch_ladder("#3b82f6")
        assert generate("#1677ff", algorithm="oklch") == generate_oklch_gradient("#1677ff")

    def test_unknown_algorithm_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger="huescale"):
            colors = generate("#1677ff", algorithm="rainbow")
        assert colors == ANT_DESIGN_PALETTES["blue"]
        assert "rainbow" in caplog.text

    def test_none_algorithm(self):
        assert generate("#1677ff", algorithm=None) == ANT_DESIGN_PALETTES["blue"]

    def test_options_forwarded(self):
        assert len(generate("#1677ff", algorithm="oklch-gradient", steps=4)) == 4
        assert generate("#1677ff", theme="dark") == generate_hsv_ladder("#1677ff", theme="dark")

    def test_foreign_options_ignored(self):
        assert generate("#1677ff", steps=4, start_l=0.2) == ANT_DESIGN_PALETTES["blue"]
        assert len(generate("#3b82f6", algorithm="tailwind", theme="dark")) == 11

    def test_none_options_use_defaults(self):
        assert len(generate("#1677ff", algorithm="oklch-gradient", steps=None)) == 10
