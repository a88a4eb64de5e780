"""
Theme generation pipeline.

config -> palette registry -> light tokens -> dark tokens -> CSS.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Union

from adaptivecss.config.models import SystemConfig
from adaptivecss.registry import PaletteRegistry, build_registry
from adaptivecss.renderer import render_css
from adaptivecss.selector import ModeTokenSet, SelectionPolicy, select_tokens
from adaptivecss.utils.logger import get_logger

logger = get_logger(__name__)

ConfigInput = Union[SystemConfig, Mapping[str, Any]]


@dataclass(frozen=True)
class ColorSystem:
    """Everything computed for one configuration."""

    config: SystemConfig
    registry: PaletteRegistry
    light: ModeTokenSet
    dark: ModeTokenSet

    @property
    def modes(self) -> List[ModeTokenSet]:
        return [self.light, self.dark]

    @property
    def preferred_fg_accessible(self) -> bool:
        """True when the preferred accent text color works in both modes."""
        return self.light.preferred_fg_accessible and self.dark.preferred_fg_accessible

    def to_css(self) -> str:
        return render_css(self.config, self.registry, self.light, self.dark)


def _coerce_config(config: ConfigInput) -> SystemConfig:
    if isinstance(config, SystemConfig):
        return config
    return SystemConfig.model_validate(dict(config))


def generate_color_system(config: ConfigInput) -> ColorSystem:
    """
    Build palettes and select tokens for both modes.

    Args:
        config: SystemConfig or a mapping with config file keys

    Returns:
        ColorSystem

    Raises:
        pydantic.ValidationError: If a mapping does not validate
        InvalidColorError: If a base color cannot be parsed
        PaletteNotFoundError: If neutral or accent is missing
    """
    config = _coerce_config(config)

    with logger.time_operation("generate_color_system"):
        registry = build_registry(config.palettes, config.palette_steps)
        policy = SelectionPolicy.from_config(config)
        light = select_tokens(registry, is_dark=False, policy=policy)
        dark = select_tokens(registry, is_dark=True, policy=policy)

    for tokens in (light, dark):
        if not tokens.preferred_fg_accessible:
            logger.debug(
                f"{tokens.mode} mode: preferred accent text color misses "
                f"{policy.required_ratio:g}:1, using {tokens['color-accent-fg']}"
            )

    return ColorSystem(config=config, registry=registry, light=light, dark=dark)


def generate_css(config: ConfigInput) -> str:
    """Generate the stylesheet for a configuration in one call."""
    return generate_color_system(config).to_css()


def palette_info(system: ColorSystem) -> Dict[str, Dict[str, Any]]:
    """Base color and swatches of every palette, keyed by palette name."""
    return {
        key: {
            "name": palette.name,
            "base": palette.source.to_hex(),
            "swatches": palette.hex_swatches(),
        }
        for key, palette in system.registry.items()
    }


__all__ = [
    "ColorSystem",
    "generate_color_system",
    "generate_css",
    "palette_info",
]
