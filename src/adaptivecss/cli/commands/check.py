"""
`adaptive-css check`: WCAG compliance report for a configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from rich.table import Table
from rich.text import Text

from adaptivecss.audit import ComplianceReport, audit_system
from adaptivecss.cli.commands.common import resolve_config
from adaptivecss.generator import generate_color_system
from adaptivecss.utils.console import console

_STATUS_LABELS = {
    "pass": ("✓ pass", "check.pass"),
    "fail": ("✗ fail", "check.fail"),
    "advisory": ("! advisory", "check.advisory"),
}


def _mode_table(report: ComplianceReport, mode: str) -> Table:
    table = Table(
        title=f"{mode.capitalize()} mode",
        header_style="table.header",
        border_style="table.border",
    )
    table.add_column("Check")
    table.add_column("Foreground", no_wrap=True)
    table.add_column("Background", no_wrap=True)
    table.add_column("Ratio", justify="right", style="check.ratio")
    table.add_column("Minimum", justify="right")
    table.add_column("Status", no_wrap=True)

    for check in report.for_mode(mode):
        label, style = _STATUS_LABELS[check.status]
        table.add_row(
            check.label,
            Text(check.foreground, style=f"{check.foreground} on {check.background}"),
            check.background,
            f"{check.ratio:.2f}:1",
            f"{check.minimum:g}:1",
            Text(label, style=style),
        )

    return table


def run_check(
    config_path: Optional[Path],
    overrides: Dict[str, Any],
) -> ComplianceReport:
    """
    Generate the color system for a configuration and print its audit.

    Returns:
        The ComplianceReport; callers decide the exit status
    """
    config = resolve_config(config_path, overrides)
    report = audit_system(generate_color_system(config))

    console.print(
        f"WCAG {report.contrast_level} compliance "
        f"([primary]{report.required_ratio:g}:1[/primary] for text)"
    )
    for mode in ("light", "dark"):
        console.print(_mode_table(report, mode))

    passed = sum(1 for check in report.checks if check.passed)
    summary = f"{passed}/{len(report.checks)} checks passed"
    if report.ok:
        console.success(summary)
    else:
        console.error(f"{summary}, {len(report.failures)} achievable check(s) failed")

    unreachable = [c for c in report.checks if not c.passed and not c.achievable]
    if unreachable:
        console.warning(
            f"{len(unreachable)} check(s) cannot pass with these base colors; "
            "try a different base color or contrast level"
        )

    return report


__all__ = ["run_check"]
