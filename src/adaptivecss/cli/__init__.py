"""
adaptive-css command line interface.

The Typer application lives in `adaptivecss.cli.main`; this package stays
import-light because the console theme is loaded from here by the core.
"""
