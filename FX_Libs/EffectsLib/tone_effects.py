"""
Per-pixel tone effects for FX Studio.

Every function here maps each pixel independently of its neighbours, so the
render pipeline may split an image into row bands and process them in
parallel. Alpha is always carried through unchanged.

Example:
    >>> from FX_Libs.RasterLib import RasterBuffer
    >>> gray = RasterBuffer.filled(2, 2, (128, 128, 128, 255))
    >>> apply_blackwhite(gray) == gray
    True

Functions:
    luminance: Perceptual brightness of RGB values
    apply_blackwhite: Replace RGB with rounded luminance
    apply_sepia: Fixed sepia color matrix
    apply_exposure: Scale RGB by (1 + level/100)
    apply_contrast: Contrast curve around mid-gray
    apply_duotone: Map luminance onto a shadow/highlight color ramp
    apply_noise: Add bounded uniform noise per channel
"""

from typing import Any, Optional

import numpy as np

from FX_Libs.constants import (
    LUMA_RED,
    LUMA_GREEN,
    LUMA_BLUE,
    MAX_CHANNEL_VALUE,
    DUOTONE_MILD_EXPONENT,
    DUOTONE_STEEP_EXPONENT,
    NOISE_SCALE,
)
from FX_Libs.EffectsLib.effect_settings import (
    ContrastSettings,
    DuotoneSettings,
    ExposureSettings,
    NoiseSettings,
)
from FX_Libs.RasterLib.raster_buffer import RasterBuffer

# Rows of the sepia matrix, in output channel order
SEPIA_MATRIX = np.array(
    [
        [0.393, 0.769, 0.189],
        [0.349, 0.686, 0.168],
        [0.272, 0.534, 0.131],
    ],
    dtype=np.float64,
)


def luminance(r: Any, g: Any, b: Any) -> Any:
    """
    Perceptual brightness: 0.299 R + 0.587 G + 0.114 B.

    Accepts scalars or numpy arrays and returns the same kind (unrounded).
    """
    return LUMA_RED * r + LUMA_GREEN * g + LUMA_BLUE * b


def _split(buffer: RasterBuffer):
    array = buffer.to_array()
    rgb = array[..., :3].astype(np.float64)
    return array, rgb


def _merge(array: np.ndarray, rgb: np.ndarray) -> RasterBuffer:
    array[..., :3] = np.clip(rgb, 0, MAX_CHANNEL_VALUE).astype(np.uint8)
    return RasterBuffer.from_array(array)


def _array_luminance(rgb: np.ndarray) -> np.ndarray:
    return luminance(rgb[..., 0], rgb[..., 1], rgb[..., 2])


def apply_blackwhite(buffer: RasterBuffer, settings: Any = None) -> RasterBuffer:
    """Replace each RGB channel with the rounded luminance."""
    array, rgb = _split(buffer)
    gray = np.rint(_array_luminance(rgb))
    return _merge(array, np.repeat(gray[..., np.newaxis], 3, axis=2))


def apply_sepia(buffer: RasterBuffer, settings: Any = None) -> RasterBuffer:
    """
    Apply the fixed sepia matrix.

    Results are clamped to 0-255 and truncated, so pure red becomes
    (100, 88, 69).
    """
    array, rgb = _split(buffer)
    toned = rgb @ SEPIA_MATRIX.T
    toned = np.floor(np.clip(toned, 0, MAX_CHANNEL_VALUE))
    return _merge(array, toned)


def apply_exposure(buffer: RasterBuffer, settings: Optional[ExposureSettings] = None) -> RasterBuffer:
    """Multiply RGB by (1 + level/100), rounding and clamping to 0-255."""
    settings = settings or ExposureSettings()
    array, rgb = _split(buffer)
    return _merge(array, np.rint(rgb * (1.0 + settings.level / 100.0)))


def contrast_factor(level: float) -> float:
    """Contrast multiplier for a level in -100..100 (1.0 at level 0)."""
    return (259.0 * (level + 255.0)) / (255.0 * (259.0 - level))


def apply_contrast(buffer: RasterBuffer, settings: Optional[ContrastSettings] = None) -> RasterBuffer:
    """Stretch (or flatten) RGB around 128 by the contrast factor."""
    settings = settings or ContrastSettings()
    factor = contrast_factor(settings.level)
    array, rgb = _split(buffer)
    return _merge(array, np.rint(factor * (rgb - 128.0) + 128.0))


def duotone_exponent(intensity: float) -> float:
    """
    Gamma exponent for a duotone intensity in percent.

    Falls linearly from 1.4 at intensity 0 to 0.6 at intensity 100, so
    higher intensity lifts the midtones toward the highlight color.
    """
    t = max(0.0, min(100.0, float(intensity))) / 100.0
    return DUOTONE_MILD_EXPONENT + (DUOTONE_STEEP_EXPONENT - DUOTONE_MILD_EXPONENT) * t


def apply_duotone(buffer: RasterBuffer, settings: Optional[DuotoneSettings] = None) -> RasterBuffer:
    """
    Map each pixel's luminance onto a two-color ramp.

    Black maps exactly to color1 and white exactly to color2 for every
    intensity. Alpha is preserved.
    """
    settings = settings or DuotoneSettings()
    array, rgb = _split(buffer)

    gray = np.clip(_array_luminance(rgb) / MAX_CHANNEL_VALUE, 0.0, 1.0)
    adjusted = np.power(gray, duotone_exponent(settings.intensity))[..., np.newaxis]

    shadow = np.array(settings.shadow_rgb, dtype=np.float64)
    highlight = np.array(settings.highlight_rgb, dtype=np.float64)
    toned = shadow * (1.0 - adjusted) + highlight * adjusted
    return _merge(array, np.rint(toned))


def apply_noise(buffer: RasterBuffer, settings: Optional[NoiseSettings] = None) -> RasterBuffer:
    """
    Add uniform noise to each RGB channel independently.

    Each offset is drawn from [-level*1.25, level*1.25] and truncated toward
    zero, so no channel moves further than level*1.25. Output is random
    unless settings.seed is set.
    """
    settings = settings or NoiseSettings()
    amplitude = settings.level * NOISE_SCALE / 2.0
    rng = np.random.default_rng(settings.seed)

    array, rgb = _split(buffer)
    offsets = np.trunc(rng.uniform(-amplitude, amplitude, size=rgb.shape))
    return _merge(array, rgb + offsets)
