"""
Palette registry.

Builds one palette per configured color and serves read-only lookups to the
selector and renderer for the rest of the run.
"""

from __future__ import annotations

from typing import Iterator, Mapping, Tuple, Union

from adaptivecss.colors import Palette, build_palette, parse_color
from adaptivecss.colors.palette import DEFAULT_PALETTE_STEPS
from adaptivecss.config.models import REQUIRED_PALETTES, PaletteConfig
from adaptivecss.exceptions import InvalidColorError, PaletteNotFoundError
from adaptivecss.utils.logger import get_logger

logger = get_logger(__name__)


class PaletteRegistry(Mapping[str, Palette]):
    """Immutable mapping of palette key to Palette, in configuration order."""

    def __init__(self, palettes: Tuple[Palette, ...]) -> None:
        self._palettes = {palette.key: palette for palette in palettes}

    def __getitem__(self, key: str) -> Palette:
        return self._palettes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._palettes)

    def __len__(self) -> int:
        return len(self._palettes)

    def get_palette(self, name: str) -> Palette:
        """
        Look up a palette by key.

        Raises:
            PaletteNotFoundError: If no palette has that key
        """
        try:
            return self._palettes[name]
        except KeyError:
            raise PaletteNotFoundError(name) from None

    def additional(self) -> Iterator[Palette]:
        """Palettes other than neutral and accent."""
        for key, palette in self._palettes.items():
            if key not in REQUIRED_PALETTES:
                yield palette


def build_registry(
    palettes: Mapping[str, Union[str, PaletteConfig]],
    steps: int = DEFAULT_PALETTE_STEPS,
) -> PaletteRegistry:
    """
    Generate every configured palette.

    Args:
        palettes: Palette key to base color string or PaletteConfig
        steps: Swatches per palette

    Returns:
        PaletteRegistry holding one palette per entry

    Raises:
        InvalidColorError: If a base color cannot be parsed
    """
    built = []
    for key, value in palettes.items():
        if isinstance(value, str):
            base_text, name = value, None
        else:
            base_text, name = value.base, value.name

        try:
            base = parse_color(base_text)
        except ValueError:
            raise InvalidColorError(key, base_text) from None

        swatches = build_palette(base, steps)
        built.append(Palette(key=key, name=name or key, source=base, swatches=swatches))
        logger.debug(f"Built palette '{key}' from {base.to_hex()} with {len(swatches)} swatches")

    return PaletteRegistry(tuple(built))


__all__ = ["PaletteRegistry", "build_registry"]
