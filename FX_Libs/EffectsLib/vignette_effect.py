"""
Vignette effect for FX Studio.

Blends the image toward an edge color with a radial mask centred on the
image. The mask is 0 inside an inner radius and rises smoothly to 1 at the
corners; `feather` widens the transition and `amount` both pulls the inner
radius toward the centre and scales the final blend.
"""

from typing import Optional

import numpy as np

from FX_Libs.EffectsLib.effect_settings import VignetteSettings
from FX_Libs.RasterLib.raster_buffer import RasterBuffer


def vignette_mask(width: int, height: int, amount: float, feather: float) -> np.ndarray:
    """
    Blend weight per pixel, shape (height, width), values in 0-1.

    Args:
        width: Image width
        height: Image height
        amount: Strength in percent (0-100)
        feather: Transition width in percent (0-100)
    """
    cx, cy = width / 2.0, height / 2.0
    half_diagonal = max(np.hypot(cx, cy), 1e-6)

    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    distance = np.hypot(xs + 0.5 - cx, ys + 0.5 - cy) / half_diagonal

    inner = (1.0 - amount / 100.0) * (1.0 - feather / 100.0)
    span = max(1.0 - inner, 1e-6)
    t = np.clip((distance - inner) / span, 0.0, 1.0)
    smooth = t * t * (3.0 - 2.0 * t)
    return smooth * (amount / 100.0)


def apply_vignette(buffer: RasterBuffer, settings: Optional[VignetteSettings] = None) -> RasterBuffer:
    """Darken (or tint) the image edges; alpha unchanged, amount 0 is identity."""
    settings = settings or VignetteSettings()
    array = buffer.to_array()
    if settings.amount <= 0.0:
        return RasterBuffer.from_array(array)

    weight = vignette_mask(buffer.width, buffer.height, settings.amount, settings.feather)[..., np.newaxis]
    rgb = array[..., :3].astype(np.float64)
    edge = np.array(settings.rgb, dtype=np.float64)

    blended = rgb * (1.0 - weight) + edge * weight
    array[..., :3] = np.clip(np.rint(blended), 0, 255).astype(np.uint8)
    return RasterBuffer.from_array(array)
