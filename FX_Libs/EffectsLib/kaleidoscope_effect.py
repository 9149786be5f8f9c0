"""
Kaleidoscope effect for FX Studio.

The image is cut into `segments` equal wedges around its centre. Every
wedge shows the same mirrored slice of the source, so the result is
symmetric about each wedge edge. Sampling is nearest-pixel; output pixels
whose source falls outside the image are transparent black.
"""

import math
from typing import Optional, Tuple

import numpy as np

from FX_Libs.EffectsLib.effect_settings import KaleidoscopeSettings
from FX_Libs.RasterLib.raster_buffer import RasterBuffer


def kaleidoscope_coordinates(
    width: int,
    height: int,
    segments: int,
    rotation: float,
    zoom: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Source pixel indices for every output pixel.

    Args:
        width: Image width
        height: Image height
        segments: Number of wedges
        rotation: Rotation of the wedge pattern in degrees
        zoom: Magnification in percent

    Returns:
        (xs, ys) integer arrays of shape (height, width); indices may fall
        outside the image
    """
    cx, cy = width / 2.0, height / 2.0
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    dx = xs + 0.5 - cx
    dy = ys + 0.5 - cy

    radius = np.hypot(dx, dy) / (zoom / 100.0)
    wedge = 2.0 * math.pi / segments
    offset = math.radians(rotation)

    local = np.mod(np.arctan2(dy, dx) - offset, wedge)
    # second half of each wedge mirrors the first
    local = np.minimum(local, wedge - local)
    theta = local + offset

    source_x = np.floor(cx + radius * np.cos(theta)).astype(np.int64)
    source_y = np.floor(cy + radius * np.sin(theta)).astype(np.int64)
    return source_x, source_y


def apply_kaleidoscope(
    buffer: RasterBuffer, settings: Optional[KaleidoscopeSettings] = None
) -> RasterBuffer:
    """Mirror one wedge of the image around the centre."""
    settings = settings or KaleidoscopeSettings()
    source = buffer.to_array()

    xs, ys = kaleidoscope_coordinates(
        buffer.width, buffer.height, settings.segments, settings.rotation, settings.zoom
    )
    inside = (xs >= 0) & (xs < buffer.width) & (ys >= 0) & (ys < buffer.height)

    output = np.zeros_like(source)
    output[inside] = source[ys[inside], xs[inside]]
    return RasterBuffer.from_array(output)
