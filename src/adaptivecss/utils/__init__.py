"""
adaptive-css utilities.

Console output and logging shared by the core and the command line.
"""

from .console import console, AdaptiveConsole
from .logger import setup_logging, get_logger, LoggerAdapter, TimedOperation

__all__ = [
    # Console
    'console',
    'AdaptiveConsole',

    # Logging
    'setup_logging',
    'get_logger',
    'LoggerAdapter',
    'TimedOperation',
]
