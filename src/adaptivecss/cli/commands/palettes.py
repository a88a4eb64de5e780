"""
`adaptive-css palettes`: inspect the generated palettes.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.table import Table
from rich.text import Text

from adaptivecss.cli.commands.common import resolve_config
from adaptivecss.colors import black_or_white_by_contrast, parse_color
from adaptivecss.generator import generate_color_system, palette_info
from adaptivecss.utils.console import console


def _swatch_cell(hex_value: str) -> Text:
    color = parse_color(hex_value)
    text_color = black_or_white_by_contrast(color, 4.5, prefer_black=True)
    return Text(f" {hex_value} ", style=f"{text_color.to_hex()} on {hex_value}")


def _palette_table(info: Dict[str, Dict[str, Any]], columns: int) -> Table:
    table = Table(
        title="🎨 Palettes",
        header_style="table.header",
        border_style="table.border",
        show_lines=False,
    )
    table.add_column("Palette", style="primary", no_wrap=True)
    table.add_column("Base", no_wrap=True)
    table.add_column("Swatches (light to dark)")

    for key, entry in info.items():
        swatches: List[str] = entry["swatches"]
        # Show an even sample so wide palettes stay readable
        step = max(1, (len(swatches) - 1) // max(1, columns - 1))
        sample = Text()
        for index in range(0, len(swatches), step):
            sample.append_text(_swatch_cell(swatches[index]))
        label = key if entry["name"] == key else f"{key} ({entry['name']})"
        table.add_row(label, _swatch_cell(entry["base"]), sample)

    return table


def show_palettes(
    config_path: Optional[Path],
    overrides: Dict[str, Any],
    as_json: bool = False,
    columns: int = 11,
) -> Dict[str, Dict[str, Any]]:
    """
    Print every palette as JSON on stdout or as a swatch table.

    Returns:
        The palette info mapping
    """
    config = resolve_config(config_path, overrides)
    info = palette_info(generate_color_system(config))

    if as_json:
        sys.stdout.write(json.dumps(info, indent=2) + "\n")
        sys.stdout.flush()
    else:
        console.print(_palette_table(info, columns))
        console.print(f"[muted]{config.palette_steps} swatches per palette[/muted]")

    return info


__all__ = ["show_palettes"]
