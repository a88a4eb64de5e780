"""
Pydantic models for adaptive-css configuration.

`SystemConfig` is the immutable generation policy read from a config file
(camelCase keys, as in the JSON files the tool has always accepted).
`ApplicationSettings` holds runtime settings that only come from the
environment.
"""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from adaptivecss.colors.palette import DEFAULT_PALETTE_STEPS

REQUIRED_PALETTES = ("neutral", "accent")

RESERVED_PALETTE_NAMES = frozenset({
    "bg", "bg-subtle", "bg-elevated", "bg-surface",
    "fg", "fg-muted",
    "border", "border-subtle",
    "accent-hover", "accent-active", "accent-fg",
    "focus-ring",
})

_PALETTE_KEY_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")
_PREFIX_RE = re.compile(r"^[A-Za-z0-9_-]*$")

_TRUTHY = ('1', 'true', 'yes', 'on')


class ContrastLevel(str, Enum):
    """WCAG conformance level for text contrast."""

    AA = "AA"
    AAA = "AAA"

    @property
    def ratio(self) -> float:
        return 7.0 if self is ContrastLevel.AAA else 4.5


class PaletteConfig(BaseModel):
    """One brand color input."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    base: str = Field(..., min_length=1, description="Base color, e.g. #3B82F6")
    name: Optional[str] = Field(None, description="Display name, defaults to the palette key")


class SystemConfig(BaseModel):
    """
    Full generation policy for one run.

    Palette entries may be plain strings or `{"base": ..., "name": ...}`
    objects. `neutral` and `accent` are required for generation but are not
    enforced here; a missing one surfaces as `PaletteNotFoundError` when the
    theme is built, so the error names the palette rather than a schema path.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    palettes: Dict[str, PaletteConfig] = Field(
        ...,
        description="Palette name to base color; needs 'neutral' and 'accent'"
    )
    contrast_level: ContrastLevel = Field(
        ContrastLevel.AA,
        description="WCAG level for text pairings: AA (4.5:1) or AAA (7:1)"
    )
    prefer_white_text: bool = Field(
        False,
        description="Prefer white text on accent surfaces instead of black"
    )
    include_palette_vars: bool = Field(True, description="Emit raw --<palette>-<i> variables")
    include_utility_classes: bool = Field(True, description="Emit .bg-*, .text-*, .border-* classes")
    dark_mode_selector: str = Field(
        '[data-theme="dark"]',
        min_length=1,
        description="Selector that switches to dark mode"
    )
    respect_system_preference: bool = Field(
        True,
        description="Emit a prefers-color-scheme: dark block"
    )
    prefix: str = Field("", description="Prefix for every generated variable name")
    palette_steps: int = Field(
        DEFAULT_PALETTE_STEPS,
        ge=5,
        le=256,
        description="Number of swatches generated per palette"
    )

    @field_validator('palettes', mode='before')
    @classmethod
    def expand_palette_shorthand(cls, v: Any) -> Any:
        """Turn `"neutral": "#6B7280"` into `"neutral": {"base": "#6B7280"}`."""
        if not isinstance(v, dict):
            return v
        return {
            key: {"base": value} if isinstance(value, str) else value
            for key, value in v.items()
        }

    @field_validator('palettes')
    @classmethod
    def validate_palette_keys(cls, v: Dict[str, PaletteConfig]) -> Dict[str, PaletteConfig]:
        if not v:
            raise ValueError("at least one palette is required")
        for key in v:
            if not _PALETTE_KEY_RE.match(key):
                raise ValueError(
                    f"palette name '{key}' must start with a letter and contain only "
                    "letters, digits, '-' or '_'"
                )
            # color-<key> and color-<key>-fg must not shadow a semantic token
            if key in RESERVED_PALETTE_NAMES:
                raise ValueError(f"palette name '{key}' is reserved for a semantic token")
            if key.endswith("-fg") and key[:-3] in v:
                raise ValueError(f"palette name '{key}' clashes with '{key[:-3]}' foreground token")
        return v

    @field_validator('contrast_level', mode='before')
    @classmethod
    def normalize_contrast_level(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator('prefix')
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        v = v.strip()
        if not _PREFIX_RE.match(v):
            raise ValueError("prefix may only contain letters, digits, '-' or '_'")
        return v

    @property
    def required_ratio(self) -> float:
        return self.contrast_level.ratio

    def additional_palettes(self) -> list[str]:
        """Palette keys beyond neutral and accent, in configuration order."""
        return [key for key in self.palettes if key not in REQUIRED_PALETTES]

    def to_file_dict(self) -> Dict[str, Any]:
        """Dump using the camelCase keys config files use."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class ApplicationSettings(BaseModel):
    """Runtime settings for logging and console output."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    debug: bool = Field(False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING",
        description="Console logging level"
    )
    no_color: bool = Field(False, description="Disable colored output")
    log_file: Optional[Path] = Field(None, description="Write JSON logs to this file")

    @classmethod
    def from_env(cls) -> ApplicationSettings:
        """
        Read settings from ADAPTIVE_CSS_* variables and NO_COLOR.

        Unknown log levels are ignored rather than rejected.
        """
        data: Dict[str, Any] = {}

        debug = os.getenv('ADAPTIVE_CSS_DEBUG')
        if debug:
            data['debug'] = debug.lower() in _TRUTHY

        level = os.getenv('ADAPTIVE_CSS_LOG_LEVEL')
        if level and level.upper() in ('DEBUG', 'INFO', 'WARNING', 'ERROR'):
            data['log_level'] = level.upper()

        # Respect the standard NO_COLOR convention
        if os.getenv('NO_COLOR'):
            data['no_color'] = True

        log_file = os.getenv('ADAPTIVE_CSS_LOG_FILE')
        if log_file:
            data['log_file'] = Path(log_file)

        return cls(**data)


__all__ = [
    "REQUIRED_PALETTES",
    "RESERVED_PALETTE_NAMES",
    "ContrastLevel",
    "PaletteConfig",
    "SystemConfig",
    "ApplicationSettings",
]
