"""
`adaptive-css init`: create a sample configuration file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from adaptivecss.config import init_project_config
from adaptivecss.exceptions import ConfigError
from adaptivecss.utils.console import console


def init_config(path: Optional[Path] = None, fmt: str = "json", force: bool = False) -> Path:
    """
    Write the sample config and show the next steps.

    Raises:
        ConfigError: If the format is unknown
        FileExistsError: If the file exists and force is not set
    """
    try:
        config_path = init_project_config(path, fmt=fmt, force=force)
    except ValueError as e:
        raise ConfigError(str(e), suggestion="Use --format json or --format yaml") from None

    console.success(f"Created {config_path}")
    _show_next_steps(config_path)
    return config_path


def _show_next_steps(config_path: Path) -> None:
    content = (
        f"Edit the palettes in [bold]{config_path.name}[/bold], then run:\n\n"
        f"[primary]adaptive-css generate -c {config_path.name} -o colors.css[/primary]\n"
        f"[primary]adaptive-css check -c {config_path.name}[/primary]"
    )
    console.status_panel(title="Next steps", content=content, status="info", emoji="🎨")


__all__ = ["init_config"]
