"""
Rich theme for the adaptive-css command line.

Status colors used by the console helpers, the compliance report and the
palette tables.
"""

from rich.theme import Theme

PRIMARY = "#3B82F6"    # Accent blue, matches the sample config
SUCCESS = "#10B981"    # Passing checks
WARNING = "#F59E0B"    # Degraded contrast, advisory checks
ERROR = "#EF4444"      # Failing checks and errors
INFO = "#60A5FA"       # Informational messages
MUTED = "#6B7280"      # Neutral gray for secondary text

adaptive_theme = Theme({
    "primary": PRIMARY,
    "success": SUCCESS,
    "warning": WARNING,
    "error": ERROR,
    "info": INFO,
    "muted": MUTED,

    "success.text": f"bold {SUCCESS}",
    "warning.text": f"bold {WARNING}",
    "error.text": f"bold {ERROR}",
    "info.text": f"bold {INFO}",

    "panel.border": PRIMARY,
    "table.header": f"bold {PRIMARY}",
    "table.border": MUTED,

    # Compliance report
    "check.pass": f"bold {SUCCESS}",
    "check.fail": f"bold {ERROR}",
    "check.advisory": f"bold {WARNING}",
    "check.ratio": "bold",

    "dim": MUTED,
})

__all__ = ["adaptive_theme", "PRIMARY", "SUCCESS", "WARNING", "ERROR", "INFO", "MUTED"]
