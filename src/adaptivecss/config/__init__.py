"""
adaptive-css configuration.

Loading, validation and sample-file creation for theme configurations.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .loader import CONFIG_FILENAMES, ConfigLoader
from .models import (
    REQUIRED_PALETTES,
    ApplicationSettings,
    ContrastLevel,
    PaletteConfig,
    SystemConfig,
)

SAMPLE_CONFIG: Dict[str, Any] = {
    "palettes": {
        "neutral": "#6B7280",
        "accent": "#3B82F6",
        "success": "#10B981",
        "warning": "#F59E0B",
        "error": "#EF4444",
    },
    "contrastLevel": "AA",
    "preferWhiteText": False,
    "includePaletteVars": True,
    "includeUtilityClasses": True,
    "darkModeSelector": '[data-theme="dark"]',
    "respectSystemPreference": True,
}


def load_config(
    path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
    base_dir: Optional[Path] = None,
) -> SystemConfig:
    """
    Load and validate a theme configuration.

    Args:
        path: Explicit config file, otherwise the conventional names are searched
        overrides: Highest-precedence values (camelCase keys)
        base_dir: Directory used for discovery and `.env` (defaults to cwd)

    Returns:
        Validated SystemConfig
    """
    return ConfigLoader(base_dir).load(path=path, overrides=overrides)


def init_project_config(
    path: Optional[Path] = None,
    fmt: str = "json",
    force: bool = False,
) -> Path:
    """
    Write a sample configuration file.

    Args:
        path: Target file; defaults to adaptive-css.config.<fmt> in the cwd
        fmt: "json" or "yaml"
        force: Overwrite an existing file

    Returns:
        Path to the created file

    Raises:
        ValueError: If the format is unknown
        FileExistsError: If the file exists and force is False
    """
    fmt = fmt.lower()
    if fmt not in ("json", "yaml"):
        raise ValueError(f"Unknown config format: {fmt}")

    config_path = Path(path) if path else Path.cwd() / f"adaptive-css.config.{fmt}"

    if config_path.exists() and not force:
        raise FileExistsError(
            f"Configuration file already exists: {config_path}\n"
            "Use --force to overwrite or choose a different path."
        )

    if fmt == "json":
        content = json.dumps(SAMPLE_CONFIG, indent=2) + "\n"
    else:
        content = (
            "# adaptive-css configuration\n"
            "# Palettes other than neutral and accent become color-<name> tokens.\n"
            + yaml.safe_dump(SAMPLE_CONFIG, sort_keys=False)
        )

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(content, encoding="utf-8")

    return config_path


__all__ = [
    "CONFIG_FILENAMES",
    "REQUIRED_PALETTES",
    "SAMPLE_CONFIG",
    "ApplicationSettings",
    "ConfigLoader",
    "ContrastLevel",
    "PaletteConfig",
    "SystemConfig",
    "init_project_config",
    "load_config",
]
