"""
Tests for the WCAG contrast primitives.
"""

from __future__ import annotations

import pytest

from adaptivecss.colors import (
    BLACK,
    MID_LUMINANCE,
    WHITE,
    Color,
    best_contrast_swatch,
    black_or_white_by_contrast,
    closest_index,
    contrast_ratio,
    is_dark,
    parse_color,
    relative_luminance,
)

GRAYS = tuple(Color(v, v, v) for v in (255, 230, 200, 170, 140, 119, 100, 70, 40, 0))


class TestLuminance:
    """Test suite for relative luminance and contrast ratio."""

    def test_extremes(self):
        assert relative_luminance(WHITE) == pytest.approx(1.0)
        assert relative_luminance(BLACK) == pytest.approx(0.0)

    def test_black_on_white_is_21(self):
        assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)

    def test_ratio_is_symmetric(self):
        a, b = parse_color("#3B82F6"), parse_color("#F3F4F6")
        assert contrast_ratio(a, b) == pytest.approx(contrast_ratio(b, a))

    def test_same_color_is_1(self):
        assert contrast_ratio(GRAYS[3], GRAYS[3]) == pytest.approx(1.0)

    def test_known_aa_boundary(self):
        """#767676 is the lightest gray that passes AA on white; #777777 is not."""
        assert contrast_ratio(parse_color("#767676"), WHITE) >= 4.5
        assert contrast_ratio(parse_color("#777777"), WHITE) < 4.5


class TestIsDark:
    """Test suite for the dark/light split."""

    def test_mid_luminance_value(self):
        # Equal contrast with black and white at the midpoint
        assert (1.05 / (MID_LUMINANCE + 0.05)) == pytest.approx((MID_LUMINANCE + 0.05) / 0.05)

    def test_black_and_white(self):
        assert is_dark(BLACK)
        assert not is_dark(WHITE)

    def test_saturated_blue_is_dark(self):
        assert is_dark(parse_color("#0000ff"))


class TestClosestIndex:
    def test_exact_match(self):
        assert closest_index(GRAYS, Color(140, 140, 140)) == 4

    def test_first_on_ties(self):
        assert closest_index((WHITE, WHITE, BLACK), WHITE) == 0


class TestBestContrastSwatch:
    """Test suite for the directional swatch search."""

    def test_light_reference_walks_toward_dark(self):
        """On a light background the first swatch meeting the ratio is returned."""
        result = best_contrast_swatch(GRAYS, WHITE, 4.5)
        assert contrast_ratio(result.color, WHITE) >= 4.5
        # Every lighter swatch fails, so this is the gentlest passing tone
        for color in GRAYS[:result.index]:
            assert contrast_ratio(color, WHITE) < 4.5

    def test_dark_reference_walks_toward_light(self):
        result = best_contrast_swatch(GRAYS, BLACK, 4.5)
        assert contrast_ratio(result.color, BLACK) >= 4.5
        for color in GRAYS[result.index + 1:]:
            assert contrast_ratio(color, BLACK) < 4.5

    def test_returns_matching_index(self):
        result = best_contrast_swatch(GRAYS, WHITE, 3.0)
        assert GRAYS[result.index] == result.color

    def test_opposite_direction_when_primary_exhausted(self):
        """A light-ish reference near the dark end must search back toward white."""
        swatches = (WHITE, Color(200, 200, 200), Color(190, 190, 190))
        reference = Color(190, 190, 190)
        result = best_contrast_swatch(swatches, reference, 1.5)
        assert result.index == 0
        assert result.color == WHITE

    def test_unreachable_ratio_returns_max_contrast(self):
        swatches = (Color(120, 120, 120), Color(100, 100, 100), Color(140, 140, 140))
        result = best_contrast_swatch(swatches, Color(128, 128, 128), 21.0)
        ratios = [contrast_ratio(c, Color(128, 128, 128)) for c in swatches]
        assert result.index == ratios.index(max(ratios))

    def test_empty_palette_raises(self):
        with pytest.raises(ValueError):
            best_contrast_swatch((), WHITE, 4.5)


class TestBlackOrWhite:
    """Test suite for the black-or-white chooser."""

    def test_preferred_black_when_accessible(self):
        assert black_or_white_by_contrast(WHITE, 4.5, prefer_black=True) == BLACK

    def test_preferred_white_when_accessible(self):
        assert black_or_white_by_contrast(BLACK, 4.5, prefer_black=False) == WHITE

    def test_switches_when_preferred_fails(self):
        assert black_or_white_by_contrast(BLACK, 4.5, prefer_black=True) == WHITE
        assert black_or_white_by_contrast(WHITE, 4.5, prefer_black=False) == BLACK

    def test_keeps_preferred_when_other_is_not_better(self):
        """At an unreachable ratio the higher contrast wins, preferred on ties."""
        mid_gray = parse_color("#777777")
        expected = BLACK if contrast_ratio(BLACK, mid_gray) >= contrast_ratio(WHITE, mid_gray) else WHITE
        assert black_or_white_by_contrast(mid_gray, 21.0, prefer_black=True) == expected
