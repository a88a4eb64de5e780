"""
Color primitives for adaptive-css.

Parsing and formatting, WCAG contrast math, and palette generation.
"""

from .color import BLACK, WHITE, Color, parse_color
from .contrast import (
    MID_LUMINANCE,
    NON_TEXT_MIN_RATIO,
    Swatch,
    best_contrast_swatch,
    black_or_white_by_contrast,
    closest_index,
    contrast_ratio,
    is_dark,
    relative_luminance,
)
from .palette import DEFAULT_PALETTE_STEPS, Palette, build_palette

__all__ = [
    # Values
    "Color",
    "Swatch",
    "Palette",
    "WHITE",
    "BLACK",
    "parse_color",

    # Contrast
    "MID_LUMINANCE",
    "NON_TEXT_MIN_RATIO",
    "relative_luminance",
    "contrast_ratio",
    "is_dark",
    "closest_index",
    "best_contrast_swatch",
    "black_or_white_by_contrast",

    # Palettes
    "DEFAULT_PALETTE_STEPS",
    "build_palette",
]
