"""
Texture overlay effect for FX Studio.

A procedural grayscale texture, built from four octaves of a smooth
trigonometric value noise, is blended over the image with the chosen blend
mode and opacity. The texture depends only on the image size and `scale`,
so the effect is deterministic.
"""

from typing import Optional

import numpy as np

from FX_Libs.constants import MAX_CHANNEL_VALUE, TEXTURE_OCTAVES, TEXTURE_ROUGHNESS
from FX_Libs.EffectsLib.blend_modes import composite
from FX_Libs.EffectsLib.effect_settings import TextureSettings
from FX_Libs.RasterLib.raster_buffer import RasterBuffer


def noise_texture(
    width: int,
    height: int,
    scale: float,
    octaves: int = TEXTURE_OCTAVES,
    roughness: float = TEXTURE_ROUGHNESS,
) -> np.ndarray:
    """
    Build the grayscale noise texture.

    Each octave doubles the frequency and multiplies the amplitude by
    `roughness`. The sum is mapped to 0-255 with floor and clamped.

    Returns:
        (height, width) float array of whole numbers in 0-255
    """
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    value = np.zeros((height, width), dtype=np.float64)
    amplitude = 1.0
    frequency = float(scale)

    for _ in range(octaves):
        nx = xs * frequency / width
        ny = ys * frequency / height
        value += np.sin(nx + np.cos(ny)) * np.cos(ny + np.sin(nx)) * amplitude
        amplitude *= roughness
        frequency *= 2.0

    return np.clip(np.floor((value + 1.0) * 127.5), 0, MAX_CHANNEL_VALUE)


def apply_texture(buffer: RasterBuffer, settings: Optional[TextureSettings] = None) -> RasterBuffer:
    """Blend the noise texture over the image; alpha unchanged, opacity 0 is identity."""
    settings = settings or TextureSettings()
    array = buffer.to_array()
    if settings.opacity <= 0.0:
        return RasterBuffer.from_array(array)

    texture = noise_texture(buffer.width, buffer.height, settings.scale) / MAX_CHANNEL_VALUE
    base = array[..., :3].astype(np.float64) / MAX_CHANNEL_VALUE

    result = composite(base, texture[..., np.newaxis], settings.opacity / 100.0, settings.blend)
    array[..., :3] = np.clip(np.rint(result * MAX_CHANNEL_VALUE), 0, MAX_CHANNEL_VALUE).astype(np.uint8)
    return RasterBuffer.from_array(array)
