"""
CSS rendering.

Pure formatting of two ModeTokenSets and the palette registry into the final
stylesheet. No color is computed here.
"""

from __future__ import annotations

from typing import List, Tuple

from adaptivecss.config.models import SystemConfig
from adaptivecss.registry import PaletteRegistry
from adaptivecss.selector import ModeTokenSet

INDENT = "  "

SYSTEM_PREFERENCE_SELECTOR = ':root:not([data-theme="light"]):not(.light)'

# (heading, [(class selector, property, token), ...])
UTILITY_CLASSES: Tuple[Tuple[str, Tuple[Tuple[str, str, str], ...]], ...] = (
    ("Background Utilities", (
        (".bg-default", "background-color", "color-bg"),
        (".bg-subtle", "background-color", "color-bg-subtle"),
        (".bg-elevated", "background-color", "color-bg-elevated"),
        (".bg-surface", "background-color", "color-bg-surface"),
        (".bg-accent", "background-color", "color-accent"),
    )),
    ("Text Utilities", (
        (".text-default", "color", "color-fg"),
        (".text-muted", "color", "color-fg-muted"),
        (".text-accent", "color", "color-accent"),
        (".text-on-accent", "color", "color-accent-fg"),
    )),
    ("Border Utilities", (
        (".border-default", "border-color", "color-border"),
        (".border-subtle", "border-color", "color-border-subtle"),
        (".border-accent", "border-color", "color-accent"),
    )),
)


def var_name(name: str, prefix: str = "") -> str:
    """`--{prefix-}{name}`"""
    return f"--{prefix}-{name}" if prefix else f"--{name}"


def format_ratio(ratio: float) -> str:
    return f"{ratio:g}:1"


def _indent(lines: List[str], depth: int = 1) -> List[str]:
    pad = INDENT * depth
    return [f"{pad}{line}" if line else "" for line in lines]


def render_header(config: SystemConfig) -> List[str]:
    return [
        "/**",
        " * Adaptive Color System",
        " * Generated with adaptive-css",
        f" * Contrast Level: WCAG {config.contrast_level.value} ({format_ratio(config.required_ratio)})",
        " */",
        "",
    ]


def render_palette_vars(registry: PaletteRegistry, prefix: str = "") -> List[str]:
    """Raw `--<palette>-<i>` variables for every palette, unindented."""
    lines = ["/* Raw Palette Values */"]
    for key, palette in registry.items():
        lines.append(f"/* {key} palette */")
        for index, hex_value in enumerate(palette.hex_swatches()):
            lines.append(f"{var_name(f'{key}-{index}', prefix)}: {hex_value};")
        lines.append("")
    return lines


def render_tokens(tokens: ModeTokenSet, prefix: str = "") -> List[str]:
    """Semantic token declarations grouped by section, unindented."""
    lines: List[str] = []
    for title, entries in tokens.sections():
        if lines:
            lines.append("")
        lines.append(f"/* {title} */")
        for name, value in entries:
            lines.append(f"{var_name(name, prefix)}: {value};")
    return lines


def render_utility_classes(prefix: str = "") -> List[str]:
    lines: List[str] = []
    for title, rules in UTILITY_CLASSES:
        if lines:
            lines.append("")
        lines.append(f"/* {title} */")
        for selector, prop, token in rules:
            lines.append(f"{selector} {{ {prop}: var({var_name(token, prefix)}); }}")
    return lines


def render_css(
    config: SystemConfig,
    registry: PaletteRegistry,
    light: ModeTokenSet,
    dark: ModeTokenSet,
) -> str:
    """
    Assemble the complete stylesheet.

    Args:
        config: Output toggles, selector and prefix
        registry: Palettes for the raw palette variables
        light: Tokens for :root
        dark: Tokens for the dark selector and the system preference block

    Returns:
        CSS text ending with a single newline
    """
    prefix = config.prefix
    lines = render_header(config)

    lines.append(":root {")
    if config.include_palette_vars:
        lines.extend(_indent(render_palette_vars(registry, prefix)))
    lines.append(f"{INDENT}/* Semantic Tokens - Light Mode */")
    lines.extend(_indent(render_tokens(light, prefix)))
    lines.append("}")
    lines.append("")

    dark_lines = render_tokens(dark, prefix)

    lines.append("/* Dark Mode */")
    lines.append(f"{config.dark_mode_selector},")
    lines.append(".dark {")
    lines.extend(_indent(dark_lines))
    lines.append("}")
    lines.append("")

    if config.respect_system_preference:
        lines.append("/* Respect System Preference */")
        lines.append("@media (prefers-color-scheme: dark) {")
        lines.append(f"{INDENT}{SYSTEM_PREFERENCE_SELECTOR} {{")
        lines.extend(_indent(dark_lines, depth=2))
        lines.append(f"{INDENT}}}")
        lines.append("}")
        lines.append("")

    if config.include_utility_classes:
        # Utilities are set off by two blank lines
        lines.append("")
        lines.extend(render_utility_classes(prefix))
        lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"


__all__ = [
    "UTILITY_CLASSES",
    "SYSTEM_PREFERENCE_SELECTOR",
    "var_name",
    "format_ratio",
    "render_header",
    "render_palette_vars",
    "render_tokens",
    "render_utility_classes",
    "render_css",
]
