"""
WCAG contrast primitives.

Implements relative luminance and contrast ratio per WCAG 2.x, plus the two
searches the semantic selector is built on: the best contrasting swatch in a
palette, and the black-or-white chooser.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .color import BLACK, WHITE, Color

# Luminance at which a color contrasts equally with black and with white.
MID_LUMINANCE = (-0.1 + math.sqrt(0.21)) / 2

# WCAG 2.1 SC 1.4.11: borders, focus rings and other non-text UI.
NON_TEXT_MIN_RATIO = 3.0


@dataclass(frozen=True)
class Swatch:
    """A palette color together with its position in the palette."""

    index: int
    color: Color

    def to_hex(self) -> str:
        return self.color.to_hex()


def _linearize(channel: float) -> float:
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    r, g, b = color.unit_rgb
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(first: Color, second: Color) -> float:
    """WCAG contrast ratio between two colors, in the range [1, 21]."""
    l1 = relative_luminance(first)
    l2 = relative_luminance(second)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def is_dark(color: Color) -> bool:
    return relative_luminance(color) <= MID_LUMINANCE


def closest_index(swatches: Sequence[Color], reference: Color) -> int:
    """Index of the swatch nearest the reference in luminance (first on ties)."""
    target = relative_luminance(reference)
    best_index = 0
    best_distance = math.inf
    for index, swatch in enumerate(swatches):
        distance = abs(relative_luminance(swatch) - target)
        if distance < best_distance:
            best_index = index
            best_distance = distance
    return best_index


def best_contrast_swatch(
    swatches: Sequence[Color],
    reference: Color,
    min_ratio: float,
) -> Swatch:
    """
    Find the least contrasting swatch that still meets `min_ratio`.

    The search starts at the swatch closest to the reference and walks toward
    the lighter end for dark references, toward the darker end otherwise, so
    the first hit is the gentlest tone that clears the bar. When that
    direction has no hit the opposite one is tried from the same start. When
    nothing in the palette reaches the ratio, the highest contrasting swatch
    is returned.

    Args:
        swatches: Palette swatches ordered light to dark
        reference: Color the swatch will be placed on (or against)
        min_ratio: Contrast ratio to reach

    Returns:
        The chosen swatch with its palette index

    Raises:
        ValueError: If the palette is empty
    """
    if not swatches:
        raise ValueError("Cannot search an empty palette")

    start = closest_index(swatches, reference)
    step = -1 if is_dark(reference) else 1

    for direction in (step, -step):
        index = start
        while 0 <= index < len(swatches):
            if contrast_ratio(swatches[index], reference) >= min_ratio:
                return Swatch(index, swatches[index])
            index += direction

    ratios = [contrast_ratio(swatch, reference) for swatch in swatches]
    best = ratios.index(max(ratios))
    return Swatch(best, swatches[best])


def black_or_white_by_contrast(
    reference: Color,
    min_ratio: float,
    prefer_black: bool,
) -> Color:
    """
    Pick black or white text for a background.

    The preferred color wins whenever it meets `min_ratio`. Otherwise the other
    color is used if it contrasts more; if neither clears the bar the higher
    contrast still wins, and a tie goes to the preferred color.
    """
    preferred = BLACK if prefer_black else WHITE
    other = WHITE if prefer_black else BLACK

    preferred_ratio = contrast_ratio(preferred, reference)
    if preferred_ratio >= min_ratio:
        return preferred
    if contrast_ratio(other, reference) > preferred_ratio:
        return other
    return preferred


__all__ = [
    "MID_LUMINANCE",
    "NON_TEXT_MIN_RATIO",
    "Swatch",
    "relative_luminance",
    "contrast_ratio",
    "is_dark",
    "closest_index",
    "best_contrast_swatch",
    "black_or_white_by_contrast",
]
