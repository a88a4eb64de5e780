"""
Helpers shared by the adaptive-css commands.

Turns command line flags into config overrides and maps library errors to
exit codes.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import typer
from pydantic import ValidationError

from adaptivecss.config import SystemConfig, load_config
from adaptivecss.exceptions import AdaptiveCSSError, ConfigError
from adaptivecss.utils.console import console
from adaptivecss.utils.logger import get_logger

logger = get_logger(__name__)


def parse_palette_options(values: Optional[List[str]]) -> Dict[str, str]:
    """
    Parse repeated `--palette NAME=COLOR` values.

    Raises:
        ConfigError: If a value has no '=' or an empty side
    """
    palettes: Dict[str, str] = {}
    for raw in values or []:
        name, sep, color = raw.partition("=")
        name, color = name.strip(), color.strip()
        if not sep or not name or not color:
            raise ConfigError(
                f"Invalid --palette value: {raw}",
                suggestion="Use NAME=COLOR, for example --palette success=#10B981",
            )
        palettes[name] = color
    return palettes


def build_overrides(
    neutral: Optional[str] = None,
    accent: Optional[str] = None,
    palettes: Optional[List[str]] = None,
    contrast: Optional[str] = None,
    prefer_white_text: Optional[bool] = None,
    prefix: Optional[str] = None,
    palette_vars: Optional[bool] = None,
    utilities: Optional[bool] = None,
    system_preference: Optional[bool] = None,
) -> Dict[str, Any]:
    """Collect the flags that were actually given, using config file keys."""
    overrides: Dict[str, Any] = {}

    palette_overrides: Dict[str, str] = {}
    if neutral:
        palette_overrides["neutral"] = neutral
    if accent:
        palette_overrides["accent"] = accent
    palette_overrides.update(parse_palette_options(palettes))
    if palette_overrides:
        overrides["palettes"] = palette_overrides

    optional = {
        "contrastLevel": contrast,
        "preferWhiteText": prefer_white_text,
        "prefix": prefix,
        "includePaletteVars": palette_vars,
        "includeUtilityClasses": utilities,
        "respectSystemPreference": system_preference,
    }
    overrides.update({key: value for key, value in optional.items() if value is not None})

    return overrides


def resolve_config(config_path: Optional[Path], overrides: Dict[str, Any]) -> SystemConfig:
    """Load the config file (explicit or discovered) merged with flag overrides."""
    logger.debug(f"Resolving configuration (file: {config_path or 'auto'})")
    return load_config(path=config_path, overrides=overrides)


@contextmanager
def cli_errors() -> Iterator[None]:
    """Display known errors and exit with status 1."""
    try:
        yield
    except AdaptiveCSSError as e:
        logger.debug(f"{type(e).__name__}: {e.message}")
        e.display()
        raise typer.Exit(1)
    except ValidationError as e:
        # Field details were printed by the loader
        console.error(f"Configuration validation failed with {e.error_count()} error(s)")
        raise typer.Exit(1)
    except OSError as e:
        console.error(str(e))
        raise typer.Exit(1)


__all__ = ["parse_palette_options", "build_overrides", "resolve_config", "cli_errors"]
