"""
Effect Algorithm Registry.

This module provides a centralized registry mapping effect kinds to their
pixel-transform algorithms. The render pipeline dispatches every applied
effect through a registry; kinds with no registered algorithm pass the
image through unchanged so that rendering never fails on an unknown kind.

Classes:
    EffectRegistry: Registry for effect algorithms

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_effects: Register all built-in effect algorithms
"""

from typing import Any, Callable, Dict, List, Optional, Union
import logging

from FX_Libs.EffectsLib.effect_settings import AppliedEffect, EffectKind
from FX_Libs.RasterLib.raster_buffer import RasterBuffer

logger = logging.getLogger(__name__)

# Type alias for algorithm function
EffectAlgorithm = Callable[[RasterBuffer, Any], RasterBuffer]


def _kind_key(kind: Union[EffectKind, str]) -> str:
    if isinstance(kind, EffectKind):
        return kind.value
    return str(kind).strip().lower()


class EffectRegistry:
    """
    Registry for effect algorithms.

    Example:
        >>> registry = EffectRegistry()
        >>> registry.register("sepia", apply_sepia, row_independent=True)
        >>> result = registry.apply(AppliedEffect.create("sepia"), image)
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._algorithms: Dict[str, EffectAlgorithm] = {}
        self._metadata: Dict[str, Dict[str, Any]] = {}

    def register(
        self,
        kind: Union[EffectKind, str],
        algorithm: EffectAlgorithm,
        description: str = "",
        row_independent: bool = False,
        tags: Optional[List[str]] = None,
    ) -> None:
        """
        Register an effect algorithm.

        Args:
            kind: Effect kind the algorithm implements
            algorithm: Callable taking (buffer, settings) and returning a new buffer
            description: Human-readable description of the effect
            row_independent: True if output rows depend only on the same input
                             rows, which allows the pipeline to split the image
                             into row bands
            tags: Optional list of tags for categorization (e.g., ["tone"])

        Raises:
            ValueError: If kind is empty or algorithm is not callable
            RuntimeError: If kind is already registered
        """
        key = _kind_key(kind)

        if not key:
            raise ValueError("kind cannot be empty")

        if not callable(algorithm):
            raise ValueError(f"algorithm must be callable, got {type(algorithm)}")

        if key in self._algorithms:
            raise RuntimeError(
                f"Effect kind '{key}' is already registered. "
                f"Use unregister() first to replace it."
            )

        self._algorithms[key] = algorithm
        self._metadata[key] = {
            "description": str(description),
            "row_independent": bool(row_independent),
            "tags": list(tags) if tags else [],
        }

        logger.debug(f"Registered algorithm for effect kind: {key}")

    def unregister(self, kind: Union[EffectKind, str]) -> bool:
        """
        Unregister an effect algorithm.

        Returns:
            True if unregistered, False if kind was not registered
        """
        key = _kind_key(kind)

        if key in self._algorithms:
            del self._algorithms[key]
            del self._metadata[key]
            logger.debug(f"Unregistered algorithm for effect kind: {key}")
            return True

        return False

    def get_algorithm(self, kind: Union[EffectKind, str]) -> EffectAlgorithm:
        """
        Get the algorithm for an effect kind.

        Raises:
            KeyError: If kind is not registered
        """
        key = _kind_key(kind)

        if key not in self._algorithms:
            available = ", ".join(self.list_kinds())
            raise KeyError(
                f"No algorithm registered for effect kind '{key}'. "
                f"Available kinds: {available}"
            )

        return self._algorithms[key]

    def has_algorithm(self, kind: Union[EffectKind, str]) -> bool:
        return _kind_key(kind) in self._algorithms

    def is_row_independent(self, kind: Union[EffectKind, str]) -> bool:
        """True if the kind is registered and may be applied band by band."""
        meta = self._metadata.get(_kind_key(kind))
        return bool(meta and meta["row_independent"])

    def apply(self, effect: AppliedEffect, buffer: RasterBuffer) -> RasterBuffer:
        """
        Apply one effect to a buffer.

        Unknown kinds are an identity pass-through: the input buffer is
        returned unchanged.

        Args:
            effect: The effect to apply
            buffer: Input image

        Returns:
            Output image
        """
        key = _kind_key(effect.kind)
        algorithm = self._algorithms.get(key)

        if algorithm is None:
            logger.debug(f"No algorithm for effect kind '{key}', passing image through")
            return buffer

        logger.debug(f"Applying effect: {key} to {buffer.width}x{buffer.height} image")
        return algorithm(buffer, effect.settings)

    def list_kinds(self) -> List[str]:
        """Sorted list of all registered effect kinds."""
        return sorted(self._algorithms.keys())

    def get_metadata(self, kind: Union[EffectKind, str]) -> Dict[str, Any]:
        """
        Get metadata for an effect kind.

        Returns:
            Dictionary with description, row_independent and tags

        Raises:
            KeyError: If kind is not registered
        """
        key = _kind_key(kind)

        if key not in self._metadata:
            raise KeyError(f"No metadata for effect kind: {key}")

        return dict(self._metadata[key])

    def get_all_metadata(self) -> Dict[str, Dict[str, Any]]:
        return {kind: dict(meta) for kind, meta in self._metadata.items()}

    def filter_by_tag(self, tag: str) -> List[str]:
        """Sorted list of effect kinds carrying a tag."""
        tag = str(tag).strip().lower()
        return sorted([
            kind
            for kind, meta in self._metadata.items()
            if tag in [t.lower() for t in meta.get("tags", [])]
        ])

    def clear(self) -> None:
        """Clear all registered algorithms. Use with caution."""
        self._algorithms.clear()
        self._metadata.clear()
        logger.warning("Effect registry cleared")


# Global singleton registry
_default_registry: Optional[EffectRegistry] = None


def get_default_registry() -> EffectRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in effects.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = EffectRegistry()
        register_default_effects(_default_registry)

    return _default_registry


def register_default_effects(registry: EffectRegistry) -> None:
    """
    Register all built-in effect algorithms.

    Args:
        registry: The registry to register algorithms with
    """
    from FX_Libs.EffectsLib.tone_effects import (
        apply_blackwhite,
        apply_contrast,
        apply_duotone,
        apply_exposure,
        apply_noise,
        apply_sepia,
    )
    from FX_Libs.EffectsLib.halftone_effect import apply_halftone
    from FX_Libs.EffectsLib.dither_effect import apply_dither
    from FX_Libs.EffectsLib.vignette_effect import apply_vignette
    from FX_Libs.EffectsLib.kaleidoscope_effect import apply_kaleidoscope
    from FX_Libs.EffectsLib.light_leaks_effect import apply_light_leaks
    from FX_Libs.EffectsLib.texture_effect import apply_texture
    from FX_Libs.EffectsLib.frame_effect import apply_frame

    registry.register(
        kind=EffectKind.HALFTONE,
        algorithm=apply_halftone,
        description="Black dots, squares or lines on a rotated grid, sized by darkness",
        tags=["stylize", "monochrome"],
    )

    registry.register(
        kind=EffectKind.DUOTONE,
        algorithm=apply_duotone,
        description="Map brightness onto a shadow/highlight color pair",
        row_independent=True,
        tags=["color", "tone"],
    )

    registry.register(
        kind=EffectKind.BLACKWHITE,
        algorithm=apply_blackwhite,
        description="Convert to grayscale luminance",
        row_independent=True,
        tags=["tone", "monochrome"],
    )

    registry.register(
        kind=EffectKind.SEPIA,
        algorithm=apply_sepia,
        description="Warm brown sepia tone",
        row_independent=True,
        tags=["color", "tone"],
    )

    # Not row independent: banding would change a seeded noise pattern
    registry.register(
        kind=EffectKind.NOISE,
        algorithm=apply_noise,
        description="Add random per-channel grain",
        tags=["stylize", "grain"],
    )

    registry.register(
        kind=EffectKind.DITHER,
        algorithm=apply_dither,
        description="Floyd-Steinberg black and white dithering",
        tags=["stylize", "monochrome"],
    )

    registry.register(
        kind=EffectKind.EXPOSURE,
        algorithm=apply_exposure,
        description="Brighten or darken by a percentage",
        row_independent=True,
        tags=["adjust", "tone"],
    )

    registry.register(
        kind=EffectKind.CONTRAST,
        algorithm=apply_contrast,
        description="Increase or reduce contrast around mid-gray",
        row_independent=True,
        tags=["adjust", "tone"],
    )

    registry.register(
        kind=EffectKind.VIGNETTE,
        algorithm=apply_vignette,
        description="Blend the edges toward a color with a radial falloff",
        tags=["stylize", "color"],
    )

    registry.register(
        kind=EffectKind.KALEIDOSCOPE,
        algorithm=apply_kaleidoscope,
        description="Mirror one wedge of the image around the centre",
        tags=["stylize", "geometry"],
    )

    registry.register(
        kind=EffectKind.LIGHTLEAKS,
        algorithm=apply_light_leaks,
        description="Blend a band of colored light across the image",
        tags=["stylize", "color"],
    )

    registry.register(
        kind=EffectKind.TEXTURE,
        algorithm=apply_texture,
        description="Blend a procedural noise texture over the image",
        tags=["stylize", "grain"],
    )

    registry.register(
        kind=EffectKind.FRAME,
        algorithm=apply_frame,
        description="Draw a solid color border in one of several styles",
        tags=["stylize", "border"],
    )

    logger.info("Registered default effect algorithms")
