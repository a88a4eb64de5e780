"""
Pytest configuration and fixtures for adaptive-css testing.

Provides:
- Sample theme configurations (dict and validated SystemConfig)
- Palette registries built from known base colors
- CLI test runner for the Typer app
- Rich console output capturing
- A clean ADAPTIVE_CSS_* environment for every test
"""

from __future__ import annotations

import json
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Generator, Tuple

import pytest
from rich.console import Console
from typer.testing import CliRunner

from adaptivecss.cli.theme import adaptive_theme
from adaptivecss.config import SAMPLE_CONFIG, SystemConfig
from adaptivecss.config.loader import ENV_MAPPING
from adaptivecss.registry import PaletteRegistry, build_registry
from adaptivecss.utils.console import AdaptiveConsole

NEUTRAL = "#6B7280"
ACCENT = "#3B82F6"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every variable that would change configuration or logging."""
    for var in list(ENV_MAPPING) + [
        "ADAPTIVE_CSS_DEBUG",
        "ADAPTIVE_CSS_LOG_LEVEL",
        "ADAPTIVE_CSS_LOG_FILE",
        "NO_COLOR",
    ]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    """
    Reset singleton instances between tests.

    Modules keep the instance they imported, so this only affects code that
    constructs AdaptiveConsole() during the test.
    """
    AdaptiveConsole._instance = None
    yield
    AdaptiveConsole._instance = None


@pytest.fixture
def sample_config_dict() -> Dict[str, Any]:
    """
    The sample config written by `adaptive-css init`.

    Returns a deep copy so tests can modify it freely.
    """
    return json.loads(json.dumps(SAMPLE_CONFIG))


@pytest.fixture
def minimal_config_dict() -> Dict[str, Any]:
    """Only the two required palettes, everything else default."""
    return {"palettes": {"neutral": NEUTRAL, "accent": ACCENT}}


@pytest.fixture
def sample_config(sample_config_dict: Dict[str, Any]) -> SystemConfig:
    return SystemConfig.model_validate(sample_config_dict)


@pytest.fixture
def minimal_config(minimal_config_dict: Dict[str, Any]) -> SystemConfig:
    return SystemConfig.model_validate(minimal_config_dict)


@pytest.fixture
def registry() -> PaletteRegistry:
    """Neutral, accent and success palettes with the default step count."""
    return build_registry({"neutral": NEUTRAL, "accent": ACCENT, "success": "#10B981"})


@pytest.fixture
def small_registry() -> PaletteRegistry:
    """Twelve-swatch palettes, for exercising index clamping."""
    return build_registry({"neutral": NEUTRAL, "accent": ACCENT}, steps=12)


@pytest.fixture
def config_file(tmp_path: Path, sample_config_dict: Dict[str, Any]) -> Path:
    """The sample config written as JSON in a temporary directory."""
    path = tmp_path / "adaptive-css.config.json"
    path.write_text(json.dumps(sample_config_dict, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    """
    Create a Typer CLI test runner.

    Example:
        def test_cli_command(cli_runner):
            result = cli_runner.invoke(app, ["init", "--path", "x.json"])
            assert result.exit_code == 0
    """
    return CliRunner()


@pytest.fixture
def mock_console() -> Tuple[Any, StringIO]:
    """
    A console-like object writing to a StringIO buffer.

    Returns:
        (console, buffer) where console has the AdaptiveConsole helper API
    """
    output_buffer = StringIO()
    test_console = Console(
        file=output_buffer,
        force_terminal=False,
        width=120,
        theme=adaptive_theme,
    )

    class MockConsole:
        def __init__(self, console: Console):
            self._console = console

        def print(self, *args: Any, **kwargs: Any) -> None:
            self._console.print(*args, **kwargs)

        def success(self, message: str, emoji: bool = True) -> None:
            self._console.print(f"✅ {message}")

        def error(self, message: str, emoji: bool = True) -> None:
            self._console.print(f"❌ {message}")

        def warning(self, message: str, emoji: bool = True) -> None:
            self._console.print(f"⚠️  {message}")

        def info(self, message: str, emoji: bool = True) -> None:
            self._console.print(f"ℹ️  {message}")

        def status_panel(self, title: str, content: Any, status: str = "info", emoji: str = "") -> None:
            from rich.panel import Panel

            self._console.print(Panel(content, title=f"{emoji} {title}".strip()))

    return MockConsole(test_console), output_buffer
