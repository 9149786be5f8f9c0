"""
Layer blend modes for FX Studio.

Blend functions take a base and a layer as float RGB arrays in 0-1 and
return the blended color in the same range. `composite` then mixes the
blended color back over the base with a per-pixel layer opacity.
"""

from typing import Callable, Dict

import numpy as np

BlendFunction = Callable[[np.ndarray, np.ndarray], np.ndarray]


def blend_multiply(base: np.ndarray, layer: np.ndarray) -> np.ndarray:
    return base * layer


def blend_screen(base: np.ndarray, layer: np.ndarray) -> np.ndarray:
    return 1.0 - (1.0 - base) * (1.0 - layer)


def blend_overlay(base: np.ndarray, layer: np.ndarray) -> np.ndarray:
    """Multiply in the base's shadows, screen in its highlights."""
    return np.where(base < 0.5, 2.0 * base * layer, 1.0 - 2.0 * (1.0 - base) * (1.0 - layer))


def blend_soft_light(base: np.ndarray, layer: np.ndarray) -> np.ndarray:
    # pegtop formula: continuous, and a 0.5 layer leaves the base unchanged
    return (1.0 - 2.0 * layer) * base ** 2 + 2.0 * layer * base


BLEND_MODES: Dict[str, BlendFunction] = {
    "multiply": blend_multiply,
    "screen": blend_screen,
    "overlay": blend_overlay,
    "soft-light": blend_soft_light,
}


def composite(base: np.ndarray, layer: np.ndarray, opacity: np.ndarray, mode: str) -> np.ndarray:
    """
    Blend a layer over a base.

    Args:
        base: (..., 3) float RGB in 0-1
        layer: Layer color, broadcastable to base
        opacity: Layer opacity in 0-1, broadcastable to base
        mode: Key of BLEND_MODES

    Returns:
        (..., 3) float RGB in 0-1

    Raises:
        KeyError: If mode is not a known blend mode
    """
    blended = np.clip(BLEND_MODES[mode](base, layer), 0.0, 1.0)
    return base + (blended - base) * opacity
