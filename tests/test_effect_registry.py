"""
Tests for the Effect Algorithm Registry.

Tests cover:
- Registry creation and basic operations
- Algorithm registration and lookup
- Metadata management
- Dispatching applied effects
- Unknown kinds passing through
- Filtering by tags
- Singleton pattern
"""

import unittest

from FX_Libs.EffectsLib.effect_registry import (
    EffectRegistry,
    get_default_registry,
    register_default_effects,
)
from FX_Libs.EffectsLib.effect_settings import AppliedEffect, EffectKind
from FX_Libs.EffectsLib.tone_effects import apply_sepia
from FX_Libs.RasterLib.raster_buffer import RasterBuffer


def invert(buffer, settings):
    array = buffer.to_array()
    array[..., :3] = 255 - array[..., :3]
    return RasterBuffer.from_array(array)


class TestEffectRegistry(unittest.TestCase):
    """Test EffectRegistry basic functionality."""

    def setUp(self):
        """Create a fresh registry for each test."""
        self.registry = EffectRegistry()
        self.image = RasterBuffer.filled(2, 2, (10, 20, 30, 255))

    def test_registry_creation(self):
        self.assertEqual(len(self.registry.list_kinds()), 0)

    def test_register_algorithm(self):
        self.registry.register("invert", invert)

        self.assertTrue(self.registry.has_algorithm("invert"))
        self.assertTrue(self.registry.has_algorithm(" Invert "))
        self.assertIn("invert", self.registry.list_kinds())

    def test_register_with_metadata(self):
        """Test registering with metadata."""
        self.registry.register(
            "invert",
            invert,
            description="Invert colors",
            row_independent=True,
            tags=["color", "test"],
        )

        meta = self.registry.get_metadata("invert")

        self.assertEqual(meta["description"], "Invert colors")
        self.assertTrue(meta["row_independent"])
        self.assertIn("color", meta["tags"])
        self.assertTrue(self.registry.is_row_independent("invert"))

    def test_register_enum_kind(self):
        self.registry.register(EffectKind.SEPIA, apply_sepia)
        self.assertTrue(self.registry.has_algorithm("sepia"))

    def test_register_empty_kind_raises_error(self):
        with self.assertRaises(ValueError):
            self.registry.register("", invert)

    def test_register_non_callable_raises_error(self):
        with self.assertRaises(ValueError):
            self.registry.register("invert", "not callable")

    def test_register_duplicate_kind_raises_error(self):
        """Test that duplicate registration raises RuntimeError."""
        self.registry.register("invert", invert)

        with self.assertRaises(RuntimeError):
            self.registry.register("invert", apply_sepia)

    def test_get_algorithm(self):
        self.registry.register("invert", invert)
        self.assertIs(self.registry.get_algorithm("invert"), invert)

    def test_get_nonexistent_algorithm_raises_error(self):
        with self.assertRaises(KeyError):
            self.registry.get_algorithm("missing")

    def test_get_nonexistent_metadata_raises_error(self):
        with self.assertRaises(KeyError):
            self.registry.get_metadata("missing")

    def test_unregister(self):
        self.registry.register("invert", invert)

        self.assertTrue(self.registry.unregister("invert"))
        self.assertFalse(self.registry.has_algorithm("invert"))
        self.assertFalse(self.registry.unregister("invert"))

    def test_apply_dispatches_with_settings(self):
        seen = []

        def record(buffer, settings):
            seen.append(settings)
            return buffer

        self.registry.register("noise", record)
        effect = AppliedEffect.create("noise", level=40)

        self.registry.apply(effect, self.image)

        self.assertEqual(seen, [effect.settings])

    def test_apply_registered(self):
        self.registry.register("invert", invert)

        result = self.registry.apply(AppliedEffect.create("invert"), self.image)

        self.assertEqual(result.get_pixel(0, 0), (245, 235, 225, 255))

    def test_apply_unknown_kind_passes_through(self):
        """Test that an unregistered kind returns the input unchanged."""
        result = self.registry.apply(AppliedEffect.create("posterize", levels=4), self.image)
        self.assertIs(result, self.image)

    def test_unregistered_kind_is_not_row_independent(self):
        self.assertFalse(self.registry.is_row_independent("invert"))

    def test_filter_by_tag(self):
        self.registry.register("a", invert, tags=["Color"])
        self.registry.register("b", invert, tags=["tone"])
        self.registry.register("c", invert, tags=["color", "tone"])

        self.assertEqual(self.registry.filter_by_tag("color"), ["a", "c"])
        self.assertEqual(self.registry.filter_by_tag("missing"), [])

    def test_get_all_metadata(self):
        self.registry.register("a", invert, description="first")

        all_meta = self.registry.get_all_metadata()

        self.assertEqual(all_meta["a"]["description"], "first")

    def test_clear(self):
        self.registry.register("a", invert)
        self.registry.clear()
        self.assertEqual(self.registry.list_kinds(), [])


class TestDefaultRegistry(unittest.TestCase):
    """Test the built-in registry."""

    def test_singleton(self):
        self.assertIs(get_default_registry(), get_default_registry())

    def test_all_builtin_kinds_registered(self):
        registry = get_default_registry()
        for kind in EffectKind:
            with self.subTest(kind=kind):
                self.assertTrue(registry.has_algorithm(kind))

    def test_row_independent_kinds(self):
        registry = EffectRegistry()
        register_default_effects(registry)

        banded = {kind for kind in registry.list_kinds() if registry.is_row_independent(kind)}

        self.assertEqual(banded, {"blackwhite", "contrast", "duotone", "exposure", "sepia"})

    def test_register_twice_raises_error(self):
        registry = EffectRegistry()
        register_default_effects(registry)

        with self.assertRaises(RuntimeError):
            register_default_effects(registry)


if __name__ == "__main__":
    unittest.main()
