"""
Frame effect for FX Studio.

Draws a border in a solid color over the image. The border is a rectangle
stroked around a path inset by half the frame width; the ornate and
vintage styles add corner curves or a small repeating pattern along the
top and bottom edges.
"""

import math
from typing import List, Optional, Tuple

from FX_Libs.EffectsLib.effect_settings import FrameSettings
from FX_Libs.pillow_compat import ImageDraw
from FX_Libs.RasterLib import raster_ops
from FX_Libs.RasterLib.raster_buffer import RasterBuffer, RgbaColor

Point = Tuple[float, float]

# (line width, minimum frame width) per style
FRAME_STYLE_WIDTHS = {
    "simple": (1, 2),
    "double": (4, 4),
    "ornate": (8, 8),
    "vintage": (12, 12),
}
DOUBLE_GAP = 2
ORNATE_CORNER = 20
ORNATE_MARGIN = 4
VINTAGE_PATTERN = 10
VINTAGE_MARGIN = 6
BEZIER_STEPS = 16


def frame_width(width: int, height: int, style: str, percent: float) -> int:
    """Frame width in pixels: percent of a tenth of the shorter side, at least the style minimum."""
    scaled = (percent / 100.0) * min(width, height) * 0.1
    return max(FRAME_STYLE_WIDTHS[style][1], int(math.floor(scaled)))


def _stroke_rect(draw, x: float, y: float, w: float, h: float, line_width: float, fill: RgbaColor) -> None:
    half = line_width / 2.0
    x0, x1 = sorted((int(math.floor(x - half)), int(math.ceil(x + w + half)) - 1))
    y0, y1 = sorted((int(math.floor(y - half)), int(math.ceil(y + h + half)) - 1))
    line = max(1, int(round(line_width)))

    if 2 * line >= min(x1 - x0 + 1, y1 - y0 + 1):
        draw.rectangle((x0, y0, x1, y1), fill=fill)
    else:
        draw.rectangle((x0, y0, x1, y1), outline=fill, width=line)


def _quadratic_curve(start: Point, control: Point, end: Point) -> List[Point]:
    points = []
    for step in range(BEZIER_STEPS + 1):
        t = step / BEZIER_STEPS
        u = 1.0 - t
        points.append((
            u * u * start[0] + 2 * u * t * control[0] + t * t * end[0],
            u * u * start[1] + 2 * u * t * control[1] + t * t * end[1],
        ))
    return points


def _draw_ornate_corners(draw, x: float, y: float, w: float, h: float, line: int, fill: RgbaColor) -> None:
    m, c = ORNATE_MARGIN, ORNATE_CORNER
    corners = [
        ((x + m, y + c), (x + m, y + m), (x + c, y + m)),
        ((x + w - c, y + m), (x + w - m, y + m), (x + w - m, y + c)),
        ((x + w - m, y + h - c), (x + w - m, y + h - m), (x + w - c, y + h - m)),
        ((x + c, y + h - m), (x + m, y + h - m), (x + m, y + h - c)),
    ]
    for start, control, end in corners:
        draw.line(_quadratic_curve(start, control, end), fill=fill, width=line)


def _draw_vintage_pattern(draw, x: float, y: float, w: float, h: float, fill: RgbaColor) -> None:
    m, p = VINTAGE_MARGIN, VINTAGE_PATTERN
    for i in range(m, int(w - m), p):
        draw.line([(x + i, y + m), (x + i + p / 2, y + m + p)], fill=fill, width=1)
        draw.line([(x + i, y + h - m), (x + i + p / 2, y + h - m - p)], fill=fill, width=1)

        for dot_y in (y + m + p / 2, y + h - m - p / 2):
            dot_x = x + i + p / 4
            draw.ellipse((dot_x - 1, dot_y - 1, dot_x + 1, dot_y + 1), fill=fill)


def apply_frame(buffer: RasterBuffer, settings: Optional[FrameSettings] = None) -> RasterBuffer:
    """
    Draw a frame over the image.

    Frame pixels are replaced by the opaque frame color; everything else,
    alpha included, is left unchanged.
    """
    settings = settings or FrameSettings()
    image = raster_ops.to_pil_image(buffer)
    draw = ImageDraw.Draw(image)
    fill = settings.rgb + (255,)

    inset = frame_width(buffer.width, buffer.height, settings.style, settings.width)
    x = y = inset / 2.0
    w = buffer.width - inset
    h = buffer.height - inset
    line = FRAME_STYLE_WIDTHS[settings.style][0]

    _stroke_rect(draw, x, y, w, h, line, fill)
    if settings.style == "double":
        _stroke_rect(draw, x + DOUBLE_GAP, y + DOUBLE_GAP, w - 2 * DOUBLE_GAP, h - 2 * DOUBLE_GAP, line, fill)
    elif settings.style == "ornate":
        _draw_ornate_corners(draw, x, y, w, h, line, fill)
    elif settings.style == "vintage":
        _draw_vintage_pattern(draw, x, y, w, h, fill)

    return raster_ops.from_pil_image(image)
