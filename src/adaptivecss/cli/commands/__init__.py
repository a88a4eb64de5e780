"""
adaptive-css CLI commands.

Each module implements one command; `adaptivecss.cli.main` declares the
options and calls into them.
"""

from adaptivecss.cli.commands.check import run_check
from adaptivecss.cli.commands.generate import generate_theme
from adaptivecss.cli.commands.init import init_config
from adaptivecss.cli.commands.palettes import show_palettes

__all__ = ["generate_theme", "init_config", "show_palettes", "run_check"]
