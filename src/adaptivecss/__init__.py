"""
adaptive-css - Accessible CSS color themes from a handful of brand colors.

adaptive-css turns each brand color into a perceptually even palette and picks
semantic tokens (backgrounds, text, borders, accent states, focus ring) for
light and dark mode so that text pairings meet WCAG AA or AAA wherever the
palette allows it.
"""

__version__ = "0.1.0"
__author__ = "adaptive-css contributors"
__description__ = "WCAG contrast-aware CSS custom property themes for light and dark mode"

from adaptivecss.audit import ComplianceReport, ContrastCheck, audit_system
from adaptivecss.config import SystemConfig, load_config
from adaptivecss.exceptions import (
    AdaptiveCSSError,
    ConfigError,
    InvalidColorError,
    PaletteNotFoundError,
)
from adaptivecss.generator import ColorSystem, generate_color_system, generate_css, palette_info

__all__ = [
    "__version__",
    "__author__",
    "__description__",

    # Generation
    "ColorSystem",
    "SystemConfig",
    "generate_color_system",
    "generate_css",
    "palette_info",
    "load_config",

    # Audit
    "ComplianceReport",
    "ContrastCheck",
    "audit_system",

    # Errors
    "AdaptiveCSSError",
    "ConfigError",
    "InvalidColorError",
    "PaletteNotFoundError",
]
