"""
Perceptually uniform palette generation.

A palette runs from white through the base color to black in equal CIE L*
steps. Chroma is interpolated linearly in Lab on each side of the base, so
every swatch keeps the base hue. Conversions use colour-science with the D65
white point; results are clipped into the sRGB gamut and quantized to 8 bits.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

with warnings.catch_warnings():
    # colour-science warns on import when SciPy or Matplotlib is missing
    warnings.simplefilter("ignore")
    import colour

from .color import Color
from .contrast import Swatch, best_contrast_swatch

DEFAULT_PALETTE_STEPS = 51

_WHITE_LAB = np.array([100.0, 0.0, 0.0])
_BLACK_LAB = np.array([0.0, 0.0, 0.0])


def to_lab(color: Color) -> np.ndarray:
    """Convert a color to CIE Lab (D65)."""
    return colour.XYZ_to_Lab(colour.sRGB_to_XYZ(np.array(color.unit_rgb)))


def build_palette(base: Color, steps: int = DEFAULT_PALETTE_STEPS) -> Tuple[Color, ...]:
    """
    Build an ordered light-to-dark palette around a base color.

    Args:
        base: Brand color the palette is derived from
        steps: Number of swatches; the first is white and the last is black

    Returns:
        Tuple of swatches, index 0 lightest

    Raises:
        ValueError: If fewer than two steps are requested
    """
    if steps < 2:
        raise ValueError(f"A palette needs at least 2 steps, got {steps}")

    base_lab = to_lab(base)
    base_lightness = float(np.clip(base_lab[0], 0.0, 100.0))

    lightness = np.linspace(100.0, 0.0, steps)

    # Guard the spans so pure white or pure black bases do not divide by zero.
    light_span = max(100.0 - base_lightness, 1e-9)
    dark_span = max(base_lightness, 1e-9)
    t_light = np.clip((100.0 - lightness) / light_span, 0.0, 1.0)[:, np.newaxis]
    t_dark = np.clip((base_lightness - lightness) / dark_span, 0.0, 1.0)[:, np.newaxis]

    toward_white = _WHITE_LAB + (base_lab - _WHITE_LAB) * t_light
    toward_black = base_lab + (_BLACK_LAB - base_lab) * t_dark

    lab = np.where((lightness >= base_lightness)[:, np.newaxis], toward_white, toward_black)
    lab[:, 0] = lightness

    rgb = np.clip(colour.XYZ_to_sRGB(colour.Lab_to_XYZ(lab)), 0.0, 1.0)
    return tuple(Color.from_unit_rgb(*row) for row in rgb)


@dataclass(frozen=True)
class Palette:
    """
    A named, immutable light-to-dark sequence of swatches.

    Index arithmetic done by callers goes through `clamp`/`swatch`, so no
    swatch count is ever assumed.
    """

    key: str
    name: str
    source: Color
    swatches: Tuple[Color, ...]

    def __post_init__(self) -> None:
        if not self.swatches:
            raise ValueError(f"Palette '{self.key}' has no swatches")

    def __len__(self) -> int:
        return len(self.swatches)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.swatches)

    def __getitem__(self, index: int) -> Color:
        return self.swatches[index]

    @property
    def last_index(self) -> int:
        return len(self.swatches) - 1

    def clamp(self, index: int) -> int:
        return max(0, min(self.last_index, index))

    def swatch(self, index: int) -> Swatch:
        """Swatch at `index`, clamped into the palette."""
        index = self.clamp(index)
        return Swatch(index, self.swatches[index])

    def best_contrast(self, reference: Color, min_ratio: float) -> Swatch:
        return best_contrast_swatch(self.swatches, reference, min_ratio)

    def hex_swatches(self) -> List[str]:
        return [swatch.to_hex() for swatch in self.swatches]


__all__ = ["DEFAULT_PALETTE_STEPS", "Palette", "build_palette", "to_lab"]
