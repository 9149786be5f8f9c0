"""
Light leak effect for FX Studio.

Simulates film light leaks: a band of color laid along a linear gradient
and blended over the image. The gradient runs through a point at
`position` percent of the width (vertically centred) in the direction of
`angle`, over 1.5 times the longer image side. Its opacity rises from zero
at both ends to a peak at 60% of its length.
"""

import math
from typing import Optional

import numpy as np

from FX_Libs.constants import LIGHTLEAKS_LENGTH_FACTOR, LIGHTLEAKS_STOPS, MAX_CHANNEL_VALUE
from FX_Libs.EffectsLib.blend_modes import composite
from FX_Libs.EffectsLib.effect_settings import LightLeaksSettings
from FX_Libs.RasterLib.raster_buffer import RasterBuffer


def leak_opacity(width: int, height: int, intensity: float, position: float, angle: float) -> np.ndarray:
    """
    Per-pixel opacity of the leak, shape (height, width).

    Stop opacities are quantised to 1/255 steps the way an 8-bit gradient
    color would be.
    """
    center_x = width * position / 100.0
    center_y = height / 2.0
    length = max(width, height) * LIGHTLEAKS_LENGTH_FACTOR
    theta = math.radians(angle)

    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    along = (xs + 0.5 - center_x) * math.cos(theta) + (ys + 0.5 - center_y) * math.sin(theta)
    t = np.clip(along / length + 0.5, 0.0, 1.0)

    stops = [stop for stop, _ in LIGHTLEAKS_STOPS]
    alphas = [math.floor(intensity / 100.0 * share) / MAX_CHANNEL_VALUE for _, share in LIGHTLEAKS_STOPS]
    return np.interp(t, stops, alphas)


def apply_light_leaks(buffer: RasterBuffer, settings: Optional[LightLeaksSettings] = None) -> RasterBuffer:
    """Blend a colored leak over the image; alpha unchanged, intensity 0 is identity."""
    settings = settings or LightLeaksSettings()
    array = buffer.to_array()
    if settings.intensity <= 0.0:
        return RasterBuffer.from_array(array)

    opacity = leak_opacity(
        buffer.width, buffer.height, settings.intensity, settings.position, settings.angle
    )[..., np.newaxis]
    base = array[..., :3].astype(np.float64) / MAX_CHANNEL_VALUE
    layer = np.array(settings.rgb, dtype=np.float64) / MAX_CHANNEL_VALUE

    result = composite(base, layer, opacity, settings.blend)
    array[..., :3] = np.clip(np.rint(result * MAX_CHANNEL_VALUE), 0, MAX_CHANNEL_VALUE).astype(np.uint8)
    return RasterBuffer.from_array(array)
