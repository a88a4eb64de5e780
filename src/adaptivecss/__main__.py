"""
adaptive-css entry point for module execution.

Allows running the CLI as: python -m adaptivecss
"""

from adaptivecss.cli.main import cli_main

if __name__ == "__main__":
    cli_main()
