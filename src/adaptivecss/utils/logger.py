"""
adaptive-css logging infrastructure using loguru with Rich integration.

Console logs go to stderr through a Rich console; an optional JSON file sink
with rotation is added when a log file is configured.
"""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import Any, Dict, Optional, TYPE_CHECKING

from loguru import logger
from rich.console import Console
from rich.highlighter import Highlighter
from rich.markup import escape
from rich.text import Text

if TYPE_CHECKING:
    from adaptivecss.config.models import ApplicationSettings


def _get_log_level_colors() -> Dict[str, str]:
    """Get log level colors with lazy import to avoid circular dependency."""
    from adaptivecss.cli.theme import SUCCESS, WARNING, ERROR, INFO, MUTED

    return {
        "TRACE": MUTED,
        "DEBUG": MUTED,
        "INFO": INFO,
        "SUCCESS": SUCCESS,
        "WARNING": WARNING,
        "ERROR": ERROR,
        "CRITICAL": ERROR,
    }


class RichLogHighlighter(Highlighter):
    """Highlights hex colors, contrast ratios and durations in log lines."""

    def highlight(self, text: Text) -> None:
        from adaptivecss.cli.theme import INFO, MUTED, SUCCESS

        text.highlight_regex(r'#[0-9a-fA-F]{6}\b', f"bold {INFO}")
        text.highlight_regex(r'\b\d+(\.\d+)?:1\b', f"bold {SUCCESS}")
        text.highlight_regex(r'[/\\][\w/\\.-]+\.[a-zA-Z]+', f"dim {MUTED}")
        text.highlight_regex(r'\d+\.?\d*\s?ms\b', f"italic {SUCCESS}")


def console_formatter(record: Dict[str, Any]) -> str:
    """
    Format a log record as Rich markup.

    Args:
        record: Log record dictionary

    Returns:
        Markup string for console display
    """
    from adaptivecss.cli.theme import INFO
    level_color = _get_log_level_colors().get(record['level'].name, INFO)

    time_str = record['time'].strftime('%H:%M:%S')
    level_str = f"{record['level'].name:<8}"

    logger_name = str(record['extra'].get('name', record['name']))
    if logger_name.startswith('adaptivecss.'):
        logger_name = logger_name[len('adaptivecss.'):]
    logger_str = f"{logger_name:<12}"

    parts = [
        f"[dim]{time_str}[/dim]",
        f"[bold {level_color}]{level_str}[/bold {level_color}]",
        f"[dim]{escape(logger_str)}[/dim]",
        escape(record['message']),
    ]

    context_parts = [
        f"{key}={value}"
        for key, value in record['extra'].items()
        if key != 'name'
    ]
    if context_parts:
        parts.append(f"[dim]({escape(', '.join(context_parts))})[/dim]")

    return " | ".join(parts)


def setup_logging(settings: Optional[ApplicationSettings] = None) -> None:
    """
    Setup loguru with Rich console output and optional JSON file logging.

    Args:
        settings: Application settings. If None, reads the environment directly
    """
    logger.remove()

    if settings:
        log_level = settings.log_level
        debug_mode = settings.debug
        no_color = settings.no_color
        log_file = settings.log_file
    else:
        log_level = os.getenv('ADAPTIVE_CSS_LOG_LEVEL', 'WARNING').upper()
        debug_mode = os.getenv('ADAPTIVE_CSS_DEBUG', '').lower() in ('1', 'true', 'yes', 'on')
        no_color = bool(os.getenv('NO_COLOR'))
        env_log_file = os.getenv('ADAPTIVE_CSS_LOG_FILE')
        log_file = Path(env_log_file) if env_log_file else None

    if debug_mode:
        log_level = 'DEBUG'

    console = Console(
        stderr=True,
        no_color=no_color or None,
        highlighter=RichLogHighlighter() if not no_color else None,
    )

    def console_sink(message: Any) -> None:
        console.print(console_formatter(message.record), highlight=not no_color, markup=True)

    logger.add(
        console_sink,
        format="{message}",
        level=log_level,
        colorize=False,
        backtrace=debug_mode,
        diagnose=debug_mode,
    )

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format="{message}",
            serialize=True,
            level='DEBUG',
            rotation='10 MB',
            retention='7 days',
            backtrace=True,
            diagnose=debug_mode,
        )

    logger.debug(
        "Logging initialized",
        console_level=log_level,
        debug_mode=debug_mode,
        log_file=str(log_file) if log_file else None,
    )


def get_logger(name: str) -> "LoggerAdapter":
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        LoggerAdapter instance with context support
    """
    return LoggerAdapter(logger.bind(name=name), name)


class LoggerAdapter:
    """
    Thin wrapper around a bound loguru logger with timing support.
    """

    def __init__(self, logger_instance: Any, name: str):
        self._logger = logger_instance
        self.name = name

    def bind(self, **kwargs: Any) -> "LoggerAdapter":
        """Bind additional context to the logger."""
        return LoggerAdapter(self._logger.bind(**kwargs), self.name)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, **kwargs)

    def success(self, message: str, **kwargs: Any) -> None:
        self._logger.success(message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logger.exception(message, **kwargs)

    def time_operation(self, operation: str) -> "TimedOperation":
        """Create a context manager that times an operation."""
        return TimedOperation(self, operation)


class TimedOperation:
    """Context manager for timing operations and logging the results."""

    def __init__(self, logger_adapter: LoggerAdapter, operation: str):
        self.logger = logger_adapter
        self.operation = operation
        self.start_time: Optional[float] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self) -> "TimedOperation":
        self.start_time = time.perf_counter()
        self.logger.debug(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.start_time is None:
            return
        self.duration_ms = round((time.perf_counter() - self.start_time) * 1000, 2)

        if exc_type is None:
            self.logger.debug(f"Completed {self.operation} in {self.duration_ms} ms")
        else:
            self.logger.debug(f"Failed {self.operation} after {self.duration_ms} ms: {exc_val}")


__all__ = [
    'setup_logging',
    'get_logger',
    'LoggerAdapter',
    'TimedOperation',
    'RichLogHighlighter',
]
