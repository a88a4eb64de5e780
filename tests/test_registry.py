"""
Tests for the palette registry.
"""

from __future__ import annotations

import pytest

from adaptivecss.colors import DEFAULT_PALETTE_STEPS, parse_color
from adaptivecss.config.models import PaletteConfig
from adaptivecss.exceptions import InvalidColorError, PaletteNotFoundError
from adaptivecss.registry import PaletteRegistry, build_registry


class TestBuildRegistry:
    """Test suite for build_registry."""

    def test_builds_one_palette_per_entry(self, registry):
        assert list(registry) == ["neutral", "accent", "success"]
        assert len(registry) == 3
        assert all(len(palette) == DEFAULT_PALETTE_STEPS for palette in registry.values())

    def test_accepts_palette_config_objects(self):
        registry = build_registry({
            "neutral": PaletteConfig(base="#6B7280", name="Slate"),
            "accent": "#3B82F6",
        })
        assert registry["neutral"].name == "Slate"
        assert registry["accent"].name == "accent"

    def test_keeps_source_color(self, registry):
        assert registry["accent"].source == parse_color("#3B82F6")

    def test_custom_steps(self, small_registry):
        assert all(len(palette) == 12 for palette in small_registry.values())

    def test_invalid_color_names_palette(self):
        """Unparseable colors fail before any palette is returned."""
        with pytest.raises(InvalidColorError) as exc_info:
            build_registry({"neutral": "not-a-color", "accent": "#3B82F6"})

        assert exc_info.value.palette == "neutral"
        assert '"neutral"' in str(exc_info.value)
        assert exc_info.value.__cause__ is None


class TestPaletteRegistry:
    """Test suite for registry lookups."""

    def test_get_palette(self, registry):
        assert registry.get_palette("accent").key == "accent"

    def test_get_palette_missing_raises(self, registry):
        with pytest.raises(PaletteNotFoundError) as exc_info:
            registry.get_palette("info")
        assert exc_info.value.palette == "info"

    def test_mapping_get_keeps_default_semantics(self, registry):
        assert registry.get("info") is None

    def test_additional_excludes_required(self, registry):
        assert [palette.key for palette in registry.additional()] == ["success"]

    def test_empty_registry(self):
        empty = PaletteRegistry(())
        assert len(empty) == 0
        assert list(empty.additional()) == []
