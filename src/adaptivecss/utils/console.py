"""
Rich console singleton for adaptive-css.

All human-facing messages go to stderr so generated CSS can be piped from
stdout untouched.
"""

from __future__ import annotations

import os
from typing import Any, Optional

from rich.console import Console
from rich.panel import Panel

from adaptivecss.cli.theme import adaptive_theme


class AdaptiveConsole:
    """
    Singleton console with the adaptive-css theme and message helpers.
    """

    _instance: Optional[AdaptiveConsole] = None

    def __new__(cls) -> AdaptiveConsole:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """Initialize the Rich console on stderr."""
        force_terminal = None
        if os.getenv("ADAPTIVE_CSS_DEBUG"):
            force_terminal = True

        self._console = Console(
            theme=adaptive_theme,
            stderr=True,
            force_terminal=force_terminal,
            no_color=bool(os.getenv("NO_COLOR")) or None,
        )

    @property
    def console(self) -> Console:
        """Access to the underlying Rich console."""
        return self._console

    def print(self, *args: Any, **kwargs: Any) -> None:
        self._console.print(*args, **kwargs)

    def success(self, message: str, emoji: bool = True) -> None:
        prefix = "✅ " if emoji else ""
        self._console.print(f"{prefix}{message}", style="success.text")

    def error(self, message: str, emoji: bool = True) -> None:
        prefix = "❌ " if emoji else ""
        self._console.print(f"{prefix}{message}", style="error.text")

    def warning(self, message: str, emoji: bool = True) -> None:
        prefix = "⚠️  " if emoji else ""
        self._console.print(f"{prefix}{message}", style="warning.text")

    def info(self, message: str, emoji: bool = True) -> None:
        prefix = "ℹ️  " if emoji else ""
        self._console.print(f"{prefix}{message}", style="info.text")

    def status_panel(
        self,
        title: str,
        content: Any,
        status: str = "info",
        emoji: str = "",
    ) -> None:
        """
        Display a status panel with consistent styling.

        Args:
            title: Panel title
            content: Panel body (string or renderable)
            status: Status type (success, warning, error, info)
            emoji: Optional emoji for the title
        """
        title_text = f"{emoji} {title}" if emoji else title

        panel = Panel(
            content,
            title=title_text,
            title_align="left",
            border_style=f"{status}.text" if status != "info" else "panel.border",
            padding=(1, 2),
        )
        self._console.print(panel)


# Global console instance
console = AdaptiveConsole()

__all__ = ["console", "AdaptiveConsole"]
