"""
Configuration loader for adaptive-css.

Implements layered configuration loading with this precedence:
explicit overrides (CLI flags) > environment variables > config file > defaults

Validation errors are rendered as a Rich panel with per-field tips before being
re-raised.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.panel import Panel
from rich.text import Text

from adaptivecss.exceptions import ConfigError
from adaptivecss.utils.console import console
from adaptivecss.utils.logger import get_logger
from .models import SystemConfig

logger = get_logger(__name__)

CONFIG_FILENAMES = (
    "adaptive-css.config.json",
    "adaptive-css.config.yaml",
    "adaptive-css.config.yml",
)

# Environment variable -> config file key
ENV_MAPPING = {
    "ADAPTIVE_CSS_CONTRAST_LEVEL": "contrastLevel",
    "ADAPTIVE_CSS_PREFER_WHITE_TEXT": "preferWhiteText",
    "ADAPTIVE_CSS_PREFIX": "prefix",
    "ADAPTIVE_CSS_DARK_MODE_SELECTOR": "darkModeSelector",
    "ADAPTIVE_CSS_INCLUDE_PALETTE_VARS": "includePaletteVars",
    "ADAPTIVE_CSS_INCLUDE_UTILITY_CLASSES": "includeUtilityClasses",
    "ADAPTIVE_CSS_RESPECT_SYSTEM_PREFERENCE": "respectSystemPreference",
    "ADAPTIVE_CSS_PALETTE_STEPS": "paletteSteps",
}

_BOOL_VARS = {
    "ADAPTIVE_CSS_PREFER_WHITE_TEXT",
    "ADAPTIVE_CSS_INCLUDE_PALETTE_VARS",
    "ADAPTIVE_CSS_INCLUDE_UTILITY_CLASSES",
    "ADAPTIVE_CSS_RESPECT_SYSTEM_PREFERENCE",
}
_INT_VARS = {"ADAPTIVE_CSS_PALETTE_STEPS"}


class ConfigLoader:
    """
    Loads a SystemConfig from a file, the environment and explicit overrides.

    File discovery looks for the names in CONFIG_FILENAMES, in order, inside
    `base_dir` (the working directory by default).
    """

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()

    def find_config_file(self) -> Optional[Path]:
        """Return the first conventional config file in base_dir, if any."""
        for filename in CONFIG_FILENAMES:
            candidate = self.base_dir / filename
            if candidate.is_file():
                return candidate
        return None

    def load(
        self,
        path: Optional[Path] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> SystemConfig:
        """
        Load configuration from all sources with proper precedence.

        Args:
            path: Explicit config file; must exist when given
            overrides: Values that win over every other source (camelCase keys)

        Returns:
            Validated SystemConfig

        Raises:
            ConfigError: If the file is missing or unreadable, or no palettes
                are configured anywhere
            ValidationError: If the merged configuration is invalid
        """
        config_dict: Dict[str, Any] = {}

        if path is not None:
            config_path: Optional[Path] = Path(path)
            if not config_path.is_absolute():
                config_path = self.base_dir / config_path
            if not config_path.exists():
                raise ConfigError(f"Config file not found: {config_path}")
        else:
            config_path = self.find_config_file()

        if config_path is not None:
            config_dict = self._deep_merge(config_dict, self.load_file(config_path))
            logger.info(f"Loaded config from {config_path}")

        env_path = self.base_dir / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            logger.debug(f"Loaded environment from {env_path}")

        config_dict = self._apply_env_overrides(config_dict)

        if overrides:
            config_dict = self._deep_merge(config_dict, overrides)

        if not config_dict.get("palettes"):
            raise ConfigError(
                "No palettes configured",
                suggestion="Provide a config file with --config, or both --neutral and --accent",
            )

        try:
            return SystemConfig.model_validate(config_dict)
        except ValidationError as e:
            self._handle_validation_error(e)
            raise

    def load_file(self, path: Path) -> Dict[str, Any]:
        """
        Read a JSON or YAML config file.

        Args:
            path: File to read; `.json` is parsed as JSON, anything else as YAML

        Returns:
            Parsed mapping

        Raises:
            ConfigError: If the file cannot be read or does not hold a mapping
        """
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to read {path}: {e}") from e

        try:
            if path.suffix.lower() == ".json":
                content = json.loads(text) if text.strip() else {}
            else:
                content = yaml.safe_load(text) or {}
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigError(
                f"Invalid config file {path}: {e}",
                suggestion="Check the file syntax, or run 'adaptive-css init' for a sample",
            ) from e

        if not isinstance(content, dict):
            raise ConfigError(f"Config file {path} must contain a mapping at the top level")
        return content

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """
        Deep merge two dictionaries with override taking precedence.

        Args:
            base: Base dictionary
            override: Override dictionary (takes precedence)

        Returns:
            Merged dictionary
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply ADAPTIVE_CSS_* environment variables on top of the file values.

        Args:
            config_dict: Base configuration dictionary

        Returns:
            Configuration with environment overrides applied
        """
        result = dict(config_dict)
        for env_var, key in ENV_MAPPING.items():
            value = os.getenv(env_var)
            if value is not None:
                result[key] = self._convert_env_value(env_var, value)
        return result

    def _convert_env_value(self, env_var: str, value: str) -> Any:
        if env_var in _BOOL_VARS:
            return value.lower() in ('1', 'true', 'yes', 'on')

        if env_var in _INT_VARS:
            try:
                return int(value)
            except ValueError:
                console.warning(f"Invalid integer value for {env_var}: {value}")
                return value

        return value

    def _handle_validation_error(self, error: ValidationError) -> None:
        """Display validation errors with helpful suggestions."""
        console.print()
        console.print(
            Panel(
                self._format_validation_errors(error),
                title="[error]❌ Configuration Validation Error[/error]",
                title_align="left",
                border_style="error.text",
                padding=(1, 2),
            )
        )

    def _format_validation_errors(self, error: ValidationError) -> Text:
        text = Text()

        for i, err in enumerate(error.errors()):
            if i > 0:
                text.append("\n")

            field_path = " → ".join(str(loc) for loc in err['loc'])
            text.append("Field: ", style="dim")
            text.append(field_path, style="warning.text")
            text.append("\n")

            text.append("Error: ", style="dim")
            text.append(err['msg'], style="error.text")
            text.append("\n")

            suggestion = self._get_field_suggestion(field_path, err)
            if suggestion:
                text.append("💡 Tip: ", style="info.text")
                text.append(suggestion, style="dim")
                text.append("\n")

        return text

    def _get_field_suggestion(self, field_path: str, error: Dict[str, Any]) -> str:
        """
        Get a suggestion for a validation error.

        Args:
            field_path: Joined location of the failing field
            error: Error dictionary from Pydantic

        Returns:
            Suggestion string or empty string
        """
        field_lower = field_path.lower()

        if error.get('type') == 'extra_forbidden':
            known = ", ".join(
                field.alias or name for name, field in SystemConfig.model_fields.items()
            )
            return f"Remove the unknown key. Known keys: {known}"

        if "contrastlevel" in field_lower or "contrast_level" in field_lower:
            return 'Use "AA" (4.5:1) or "AAA" (7:1)'

        if "palettesteps" in field_lower or "palette_steps" in field_lower:
            return "Palette steps must be between 5 and 256"

        if "palettes" in field_lower:
            return 'Give each palette a base color, e.g. "accent": "#3B82F6"'

        if "prefix" in field_lower:
            return "Use a short identifier such as 'brand'"

        return ""


__all__ = ["ConfigLoader", "CONFIG_FILENAMES", "ENV_MAPPING"]
