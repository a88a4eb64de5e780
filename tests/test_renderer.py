"""
Tests for CSS rendering.

Token sets are built by hand so the expected text does not depend on the
palette math.
"""

from __future__ import annotations

import pytest

from adaptivecss.colors import WHITE, Swatch
from adaptivecss.config import SystemConfig
from adaptivecss.registry import build_registry
from adaptivecss.renderer import (
    SYSTEM_PREFERENCE_SELECTOR,
    format_ratio,
    render_css,
    render_tokens,
    render_utility_classes,
    var_name,
)
from adaptivecss.selector import TOKEN_SECTIONS, AccentSelection, AccentTier, ModeTokenSet


def make_tokens(is_dark: bool, value: str, extras=()) -> ModeTokenSet:
    tokens = {name: value for _, names in TOKEN_SECTIONS for name in names}
    for extra in extras:
        tokens[f"color-{extra}"] = value
        tokens[f"color-{extra}-fg"] = "#000000"
    return ModeTokenSet(
        is_dark=is_dark,
        tokens=tokens,
        accent=AccentSelection(Swatch(0, WHITE), AccentTier.PERFECT, True),
        extra_names=tuple(extras),
    )


@pytest.fixture
def small_registry_5():
    return build_registry({"neutral": "#6B7280", "accent": "#3B82F6"}, steps=5)


def make_config(**kwargs) -> SystemConfig:
    data = {"palettes": {"neutral": "#6B7280", "accent": "#3B82F6"}}
    data.update(kwargs)
    return SystemConfig.model_validate(data)


class TestHelpers:
    def test_var_name(self):
        assert var_name("color-bg") == "--color-bg"
        assert var_name("color-bg", "brand") == "--brand-color-bg"

    @pytest.mark.parametrize("ratio, expected", [(4.5, "4.5:1"), (7.0, "7:1"), (3.0, "3:1")])
    def test_format_ratio(self, ratio, expected):
        assert format_ratio(ratio) == expected

    def test_render_tokens_sections(self):
        lines = render_tokens(make_tokens(False, "#111111", extras=("success",)))
        assert lines[0] == "/* Backgrounds */"
        assert lines[1] == "--color-bg: #111111;"
        assert "/* Focus - WCAG 2.2 SC 2.4.13 Focus Appearance */" in lines
        assert lines[-3] == "/* Additional Colors */"
        assert lines[-1] == "--color-success-fg: #000000;"
        # Sections are separated by exactly one blank line
        assert lines.count("") == len(TOKEN_SECTIONS)

    def test_utility_classes_use_prefix(self):
        lines = render_utility_classes("brand")
        assert ".bg-default { background-color: var(--brand-color-bg); }" in lines
        assert ".text-on-accent { color: var(--brand-color-accent-fg); }" in lines
        assert ".border-accent { border-color: var(--brand-color-accent); }" in lines


class TestRenderCss:
    """Test suite for the full document layout."""

    def test_minimal_document_exact(self, small_registry_5):
        config = make_config(
            includePaletteVars=False,
            includeUtilityClasses=False,
            respectSystemPreference=False,
        )
        light = make_tokens(False, "#eeeeee")
        dark = make_tokens(True, "#111111")

        css = render_css(config, small_registry_5, light, dark)

        light_block = "\n".join(f"  {line}" if line else "" for line in render_tokens(light))
        dark_block = "\n".join(f"  {line}" if line else "" for line in render_tokens(dark))
        expected = (
            "/**\n"
            " * Adaptive Color System\n"
            " * Generated with adaptive-css\n"
            " * Contrast Level: WCAG AA (4.5:1)\n"
            " */\n"
            "\n"
            ":root {\n"
            "  /* Semantic Tokens - Light Mode */\n"
            f"{light_block}\n"
            "}\n"
            "\n"
            "/* Dark Mode */\n"
            '[data-theme="dark"],\n'
            ".dark {\n"
            f"{dark_block}\n"
            "}\n"
        )
        assert css == expected

    def test_palette_vars(self, small_registry_5):
        config = make_config(includeUtilityClasses=False, respectSystemPreference=False)
        css = render_css(config, small_registry_5, make_tokens(False, "#eeeeee"), make_tokens(True, "#111111"))

        assert "  /* Raw Palette Values */\n  /* neutral palette */\n  --neutral-0: #ffffff;\n" in css
        assert "  --accent-4: #000000;\n\n  /* Semantic Tokens - Light Mode */" in css

    def test_system_preference_block(self, small_registry_5):
        config = make_config(includePaletteVars=False, includeUtilityClasses=False)
        css = render_css(config, small_registry_5, make_tokens(False, "#eeeeee"), make_tokens(True, "#111111"))

        assert "/* Respect System Preference */\n@media (prefers-color-scheme: dark) {\n" in css
        assert f"  {SYSTEM_PREFERENCE_SELECTOR} {{\n    /* Backgrounds */\n    --color-bg: #111111;" in css
        assert css.endswith("  }\n}\n")

    def test_utility_classes_close_the_document(self, small_registry_5):
        config = make_config()
        css = render_css(config, small_registry_5, make_tokens(False, "#eeeeee"), make_tokens(True, "#111111"))

        assert "  }\n}\n\n\n/* Background Utilities */\n.bg-default { background-color: var(--color-bg); }" in css
        assert css.endswith(".border-accent { border-color: var(--color-accent); }\n")

    def test_prefix_and_custom_selector(self, small_registry_5):
        config = make_config(prefix="brand", darkModeSelector=".theme-dark", contrastLevel="AAA")
        css = render_css(config, small_registry_5, make_tokens(False, "#eeeeee"), make_tokens(True, "#111111"))

        assert " * Contrast Level: WCAG AAA (7:1)" in css
        assert "--brand-neutral-0: #ffffff;" in css
        assert "--brand-color-bg: #eeeeee;" in css
        assert "/* Dark Mode */\n.theme-dark,\n.dark {" in css
        assert "--color-bg:" not in css

    def test_no_trailing_whitespace(self, small_registry_5):
        css = render_css(make_config(), small_registry_5, make_tokens(False, "#eeeeee"), make_tokens(True, "#111111"))
        assert all(line == line.rstrip() for line in css.split("\n"))
        assert css.endswith("\n") and not css.endswith("\n\n")
