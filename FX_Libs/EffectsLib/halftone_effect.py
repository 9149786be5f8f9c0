"""
Halftone effect for FX Studio.

Renders the image as black marks on a white page. Mark centres sit on a
square lattice of pitch `spacing` rotated by `angle` about the image origin;
each mark is sized from the luminance of the pixel under its centre, so
dark areas get large marks and white areas get none.

Example:
    >>> from FX_Libs.EffectsLib.effect_settings import HalftoneSettings
    >>> settings = HalftoneSettings(dot_size=3, spacing=8, angle=45, shape="circle")
    >>> result = apply_halftone(image, settings)
"""

import math
from typing import Iterator, List, Optional, Tuple

import numpy as np

from FX_Libs.constants import HALFTONE_BACKGROUND, HALFTONE_INK, MAX_CHANNEL_VALUE
from FX_Libs.EffectsLib.effect_settings import HalftoneSettings
from FX_Libs.EffectsLib.tone_effects import luminance
from FX_Libs.pillow_compat import Image, ImageDraw
from FX_Libs.RasterLib.raster_buffer import RasterBuffer

Point = Tuple[float, float]


def iter_grid_points(width: int, height: int, spacing: float, angle: float) -> Iterator[Point]:
    """
    Yield lattice points that fall inside the image.

    The lattice passes through the image origin, so pixel (0, 0) is always
    a cell centre, and its axes are rotated by `angle`. Lattice indices are
    bounded by projecting the image corners onto both axes.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        spacing: Lattice pitch in pixels
        angle: Lattice rotation in degrees
    """
    theta = math.radians(angle)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    corners = [(0.0, 0.0), (width, 0.0), (0.0, height), (width, height)]
    us = [x * cos_t + y * sin_t for x, y in corners]
    vs = [-x * sin_t + y * cos_t for x, y in corners]

    i_range = range(int(math.floor(min(us) / spacing)), int(math.ceil(max(us) / spacing)) + 1)
    j_range = range(int(math.floor(min(vs) / spacing)), int(math.ceil(max(vs) / spacing)) + 1)

    for j in j_range:
        v = j * spacing
        for i in i_range:
            u = i * spacing
            x = u * cos_t - v * sin_t
            y = u * sin_t + v * cos_t
            if 0 <= x < width and 0 <= y < height:
                yield x, y


def dot_radius(dot_size: float, gray: float) -> float:
    """Mark size for a luminance in 0-255: dot_size * (1 - gray/255), never negative."""
    return max(0.0, dot_size * (1.0 - gray / MAX_CHANNEL_VALUE))


def _rotated(points: List[Point], cx: float, cy: float, cos_t: float, sin_t: float) -> List[Point]:
    return [(cx + px * cos_t - py * sin_t, cy + px * sin_t + py * cos_t) for px, py in points]


def _draw_mark(
    draw,
    shape: str,
    x: float,
    y: float,
    radius: float,
    spacing: float,
    cos_t: float,
    sin_t: float,
) -> None:
    if shape == "circle":
        draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=HALFTONE_INK)
    elif shape == "square":
        corners = [(-radius, -radius), (radius, -radius), (radius, radius), (-radius, radius)]
        draw.polygon(_rotated(corners, x, y, cos_t, sin_t), fill=HALFTONE_INK)
    elif shape == "line":
        # segment spans the cell along the lattice axis; radius is its thickness
        half_len = spacing / 2.0
        half_width = radius / 2.0
        corners = [
            (-half_len, -half_width),
            (half_len, -half_width),
            (half_len, half_width),
            (-half_len, half_width),
        ]
        draw.polygon(_rotated(corners, x, y, cos_t, sin_t), fill=HALFTONE_INK)


def apply_halftone(buffer: RasterBuffer, settings: Optional[HalftoneSettings] = None) -> RasterBuffer:
    """
    Render a halftone pattern of the input.

    Args:
        buffer: Source image (color is discarded)
        settings: Dot size, spacing, angle and shape

    Returns:
        New buffer with RGB in {0, 255} and alpha forced to 255
    """
    settings = settings or HalftoneSettings()
    width, height = buffer.size

    source = buffer.to_array().astype(np.float64)
    gray = np.rint(luminance(source[..., 0], source[..., 1], source[..., 2]))

    page = Image.new("L", (width, height), HALFTONE_BACKGROUND)
    draw = ImageDraw.Draw(page)

    theta = math.radians(settings.angle)
    cos_t, sin_t = math.cos(theta), math.sin(theta)

    for x, y in iter_grid_points(width, height, settings.spacing, settings.angle):
        radius = dot_radius(settings.dot_size, float(gray[int(y), int(x)]))
        if radius <= 0.0:
            continue
        _draw_mark(draw, settings.shape, x, y, radius, settings.spacing, cos_t, sin_t)

    ink = np.asarray(page, dtype=np.uint8)
    output = np.empty((height, width, 4), dtype=np.uint8)
    output[..., 0] = ink
    output[..., 1] = ink
    output[..., 2] = ink
    output[..., 3] = MAX_CHANNEL_VALUE
    return RasterBuffer.from_array(output)
