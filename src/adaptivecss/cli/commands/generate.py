"""
`adaptive-css generate`: write the theme stylesheet.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from adaptivecss.cli.commands.common import resolve_config
from adaptivecss.generator import ColorSystem, generate_color_system
from adaptivecss.utils.console import console
from adaptivecss.utils.logger import get_logger

logger = get_logger(__name__)


def warn_inaccessible_accent(system: ColorSystem) -> None:
    """Warn for each mode whose preferred accent text color was replaced."""
    preferred = "white" if system.config.prefer_white_text else "black"
    ratio = system.config.required_ratio
    for tokens in system.modes:
        if not tokens.preferred_fg_accessible:
            console.warning(
                f"{tokens.mode.capitalize()} mode: {preferred} text on the accent does not "
                f"reach {ratio:g}:1, using {tokens['color-accent-fg']} instead"
            )


def generate_theme(
    config_path: Optional[Path],
    output: Optional[Path],
    overrides: Dict[str, Any],
) -> ColorSystem:
    """
    Generate CSS and write it to a file or stdout.

    Args:
        config_path: Explicit config file, or None to discover one
        output: Target file, or None for stdout
        overrides: Flag values in config file keys

    Returns:
        The generated ColorSystem
    """
    config = resolve_config(config_path, overrides)
    system = generate_color_system(config)
    css = system.to_css()

    warn_inaccessible_accent(system)

    if output is None:
        sys.stdout.write(css)
        sys.stdout.flush()
        return system

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(css, encoding="utf-8")
    logger.info(f"Wrote {len(css)} characters to {output}")

    extras = config.additional_palettes()
    console.success(f"Generated {output}")
    console.print(
        f"[muted]Contrast level:[/muted] WCAG {config.contrast_level.value} "
        f"({config.required_ratio:g}:1)"
    )
    if extras:
        console.print(f"[muted]Additional colors:[/muted] {', '.join(extras)}")

    return system


__all__ = ["generate_theme", "warn_inaccessible_accent"]
