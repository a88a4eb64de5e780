"""
Tests for palette generation and the Palette value type.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

import adaptivecss
from adaptivecss.colors import (
    BLACK,
    DEFAULT_PALETTE_STEPS,
    WHITE,
    Palette,
    build_palette,
    parse_color,
    relative_luminance,
)
from adaptivecss.colors.palette import to_lab

ACCENT = parse_color("#3B82F6")


@pytest.fixture(scope="module")
def accent_swatches():
    return build_palette(ACCENT)


class TestBuildPalette:
    """Test suite for build_palette."""

    def test_default_length(self, accent_swatches):
        assert len(accent_swatches) == DEFAULT_PALETTE_STEPS

    @pytest.mark.parametrize("steps", [2, 5, 12, 256])
    def test_custom_length(self, steps):
        assert len(build_palette(ACCENT, steps)) == steps

    def test_endpoints_are_white_and_black(self, accent_swatches):
        assert accent_swatches[0] == WHITE
        assert accent_swatches[-1] == BLACK

    def test_lightness_decreases(self, accent_swatches):
        """Swatches are ordered light to dark."""
        lightness = [float(to_lab(color)[0]) for color in accent_swatches]
        for lighter, darker in zip(lightness, lightness[1:]):
            assert lighter >= darker - 2.0

    def test_luminance_spans_light_to_dark(self, accent_swatches):
        luminance = [relative_luminance(color) for color in accent_swatches]
        assert luminance[0] > luminance[len(luminance) // 2] > luminance[-1]

    def test_middle_is_near_base_lightness(self, accent_swatches):
        base_lightness = float(to_lab(ACCENT)[0])
        closest = min(accent_swatches, key=lambda c: abs(float(to_lab(c)[0]) - base_lightness))
        assert abs(float(to_lab(closest)[0]) - base_lightness) < 2.5

    def test_keeps_hue_of_base(self, accent_swatches):
        """Mid swatches of a blue base stay blue."""
        for color in accent_swatches[15:35]:
            assert color.b >= color.r

    def test_gray_base_gives_grays(self):
        for color in build_palette(parse_color("#808080"), 11):
            assert max(color.rgb) - min(color.rgb) <= 2

    def test_extreme_bases(self):
        """Pure white and black bases still produce full ramps."""
        for base in (WHITE, BLACK):
            swatches = build_palette(base, 11)
            assert swatches[0] == WHITE
            assert swatches[-1] == BLACK

    def test_is_deterministic(self):
        assert build_palette(ACCENT, 21) == build_palette(ACCENT, 21)

    def test_too_few_steps(self):
        with pytest.raises(ValueError):
            build_palette(ACCENT, 1)


class TestPalette:
    """Test suite for the Palette value type."""

    @pytest.fixture
    def palette(self):
        return Palette(key="accent", name="Brand", source=ACCENT, swatches=build_palette(ACCENT, 12))

    def test_sequence_protocol(self, palette):
        assert len(palette) == 12
        assert palette[0] == WHITE
        assert list(palette)[-1] == BLACK
        assert palette.last_index == 11

    def test_clamp(self, palette):
        assert palette.clamp(-3) == 0
        assert palette.clamp(5) == 5
        assert palette.clamp(40) == 11

    def test_swatch_is_clamped(self, palette):
        swatch = palette.swatch(99)
        assert swatch.index == 11
        assert swatch.color == BLACK

    def test_best_contrast_returns_own_swatch(self, palette):
        swatch = palette.best_contrast(WHITE, 4.5)
        assert palette[swatch.index] == swatch.color

    def test_hex_swatches(self, palette):
        hexes = palette.hex_swatches()
        assert hexes[0] == "#ffffff"
        assert hexes[-1] == "#000000"
        assert all(len(value) == 7 and value == value.lower() for value in hexes)

    def test_empty_palette_rejected(self):
        with pytest.raises(ValueError):
            Palette(key="x", name="x", source=ACCENT, swatches=())


class TestColourImport:
    def test_import_prints_no_usage_warnings(self):
        """A fresh interpreter imports the palette module without stderr noise."""
        src = Path(adaptivecss.__file__).resolve().parents[1]
        env = {**os.environ, "PYTHONPATH": str(src), "PYTHONWARNINGS": "default"}
        result = subprocess.run(
            [sys.executable, "-c", "import adaptivecss.colors.palette"],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )
        assert "ColourUsageWarning" not in result.stderr
        assert "not available" not in result.stderr
