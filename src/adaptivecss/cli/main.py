"""
adaptive-css command line interface.

Main entry point: declares the commands and their options, sets up logging
and turns library errors into readable messages and exit codes.
"""

from __future__ import annotations

import sys
import traceback
from pathlib import Path
from typing import Any, List, Optional

import typer

from adaptivecss import __version__
from adaptivecss.cli.commands import generate_theme, init_config, run_check, show_palettes
from adaptivecss.cli.commands.common import build_overrides, cli_errors
from adaptivecss.config.models import ApplicationSettings, ContrastLevel
from adaptivecss.utils.console import console
from adaptivecss.utils.logger import get_logger, setup_logging

app = typer.Typer(
    name="adaptive-css",
    help="🎨 adaptive-css: accessible light and dark CSS color themes from your brand colors",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
    context_settings={
        "help_option_names": ["-h", "--help"],
    },
)

_debug_enabled = False

# Options shared by the commands that build a color system
ConfigOption = typer.Option(
    None, "--config", "-c", help="Config file (default: adaptive-css.config.json/.yaml in cwd)"
)
NeutralOption = typer.Option(None, "--neutral", help="Neutral base color, e.g. #6B7280")
AccentOption = typer.Option(None, "--accent", help="Accent base color, e.g. #3B82F6")
PaletteOption = typer.Option(
    None, "--palette", "-p", help="Additional palette as NAME=COLOR (repeatable)"
)
ContrastOption = typer.Option(
    None, "--contrast", case_sensitive=False, help="WCAG level for text: AA or AAA"
)


def initialize_logging(debug: bool = False) -> None:
    """Configure logging from the environment, forcing debug when asked."""
    settings = ApplicationSettings.from_env()
    if debug:
        settings.debug = True
    setup_logging(settings)


def global_exception_handler(exc_type: type, exc_value: BaseException, exc_tb: Any) -> None:
    """
    Last-resort handler for exceptions that escaped the commands.

    Args:
        exc_type: Exception type
        exc_value: Exception instance
        exc_tb: Exception traceback
    """
    logger = get_logger(__name__)

    if isinstance(exc_value, KeyboardInterrupt):
        logger.info("Interrupted by user")
        sys.exit(130)

    error_title = f"Unexpected Error: {exc_type.__name__}"
    error_message = str(exc_value) or "An unexpected error occurred"

    logger.error(f"Uncaught exception: {error_title}: {error_message}")
    console.error(f"{error_title}: {error_message}")

    if _debug_enabled:
        console.print("\n[dim]Full traceback (debug mode):[/dim]")
        traceback.print_exception(exc_type, exc_value, exc_tb)
    else:
        console.info("Run with --debug for the full traceback", emoji=False)

    sys.exit(1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-V", help="Show version and exit"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug logging"
    ),
) -> None:
    """
    adaptive-css: WCAG contrast-aware CSS custom properties.

    Turns a neutral and an accent color (plus any extra brand colors) into
    semantic tokens for light and dark mode.
    """
    global _debug_enabled
    _debug_enabled = debug

    initialize_logging(debug)
    logger = get_logger(__name__)
    logger.debug(f"adaptive-css {__version__} started, command: {ctx.invoked_subcommand}")

    if version:
        typer.echo(f"adaptive-css {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("generate")
def generate_command(
    config: Optional[Path] = ConfigOption,
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write CSS to this file instead of stdout"
    ),
    neutral: Optional[str] = NeutralOption,
    accent: Optional[str] = AccentOption,
    palette: Optional[List[str]] = PaletteOption,
    contrast: Optional[ContrastLevel] = ContrastOption,
    prefer_white_text: Optional[bool] = typer.Option(
        None,
        "--prefer-white-text/--prefer-black-text",
        help="Preferred text color on accent surfaces",
    ),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Prefix for variable names"),
    palette_vars: Optional[bool] = typer.Option(
        None, "--palette-vars/--no-palette-vars", help="Emit raw palette variables"
    ),
    utilities: Optional[bool] = typer.Option(
        None, "--utilities/--no-utilities", help="Emit utility classes"
    ),
    system_preference: Optional[bool] = typer.Option(
        None,
        "--system-preference/--no-system-preference",
        help="Emit a prefers-color-scheme: dark block",
    ),
) -> None:
    """🎨 Generate the CSS color system."""
    with cli_errors():
        overrides = build_overrides(
            neutral=neutral,
            accent=accent,
            palettes=palette,
            contrast=contrast.value if contrast else None,
            prefer_white_text=prefer_white_text,
            prefix=prefix,
            palette_vars=palette_vars,
            utilities=utilities,
            system_preference=system_preference,
        )
        generate_theme(config, output, overrides)


@app.command("init")
def init_command(
    path: Optional[Path] = typer.Option(
        None, "--path", help="Config file to create (default: adaptive-css.config.<format>)"
    ),
    fmt: str = typer.Option("json", "--format", "-f", help="File format: json or yaml"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """🏗️ Create a sample configuration file."""
    with cli_errors():
        init_config(path, fmt=fmt, force=force)


@app.command("palettes")
def palettes_command(
    config: Optional[Path] = ConfigOption,
    neutral: Optional[str] = NeutralOption,
    accent: Optional[str] = AccentOption,
    palette: Optional[List[str]] = PaletteOption,
    as_json: bool = typer.Option(False, "--json", help="Print palette data as JSON"),
) -> None:
    """🌈 Show the generated palettes."""
    with cli_errors():
        overrides = build_overrides(neutral=neutral, accent=accent, palettes=palette)
        show_palettes(config, overrides, as_json=as_json)


@app.command("check")
def check_command(
    config: Optional[Path] = ConfigOption,
    neutral: Optional[str] = NeutralOption,
    accent: Optional[str] = AccentOption,
    palette: Optional[List[str]] = PaletteOption,
    contrast: Optional[ContrastLevel] = ContrastOption,
    prefer_white_text: Optional[bool] = typer.Option(
        None,
        "--prefer-white-text/--prefer-black-text",
        help="Preferred text color on accent surfaces",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with status 1 when an achievable check fails"
    ),
) -> None:
    """✅ Report WCAG contrast ratios for both modes."""
    with cli_errors():
        overrides = build_overrides(
            neutral=neutral,
            accent=accent,
            palettes=palette,
            contrast=contrast.value if contrast else None,
            prefer_white_text=prefer_white_text,
        )
        report = run_check(config, overrides)

    if strict and not report.ok:
        raise typer.Exit(1)


def setup_exception_handling() -> None:
    """Install global exception handler."""
    sys.excepthook = global_exception_handler


def cli_main() -> None:
    """Console script entry point."""
    setup_exception_handling()
    app()


if __name__ == "__main__":
    cli_main()
