"""
adaptive-css exception hierarchy.

Every error carries a message, an optional suggestion and a context dict, and
can render itself as a Rich panel for the command line.
"""

from typing import Any, Optional

from rich.panel import Panel
from rich.text import Text

from adaptivecss.utils.console import console


class AdaptiveCSSError(Exception):
    """
    Base exception for all adaptive-css errors.
    """

    def __init__(
        self,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ):
        """
        Initialize the exception.

        Args:
            message: The error message
            suggestion: Optional hint for fixing the error
            context: Optional context data for debugging
        """
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}

    def display(self) -> None:
        """Display the error in the console."""
        error_text = Text(self.message, style="bold red")

        if self.suggestion:
            error_text.append("\n\n💡 ", style="yellow")
            error_text.append(self.suggestion, style="italic yellow")

        panel = Panel(
            error_text,
            title="❌ Error",
            title_align="left",
            border_style="red",
            padding=(1, 2)
        )
        console.print(panel)


class ConfigError(AdaptiveCSSError):
    """Raised when the theme configuration cannot be used."""

    def __init__(
        self,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ):
        if not suggestion and "not found" in message.lower():
            suggestion = "Run 'adaptive-css init' to create a sample configuration"
        super().__init__(message, suggestion, context)


class InvalidColorError(ConfigError):
    """Raised when a palette's base color cannot be parsed."""

    def __init__(self, palette: str, value: Any):
        self.palette = palette
        self.value = value
        super().__init__(
            f'Invalid color "{value}" for palette "{palette}"',
            suggestion='Use a hex color such as "#3B82F6" or rgb(59, 130, 246)',
            context={"palette": palette, "value": value},
        )


class PaletteNotFoundError(ConfigError):
    """Raised when a required palette is missing from the configuration."""

    def __init__(self, palette: str):
        self.palette = palette
        super().__init__(
            f'Palette "{palette}" not found',
            suggestion=f'Add a "{palette}" entry under "palettes" in your configuration',
            context={"palette": palette},
        )
