"""
Floyd-Steinberg dithering for FX Studio.

The image is reduced to luminance and quantised to pure black or white in
raster-scan order. Each pixel's quantisation error is pushed onto the
neighbours that have not been visited yet:

          *    7/16
    3/16  5/16 1/16

Shares that would land outside the image are dropped, not redistributed.
Because every pixel depends on the error accumulated before it, this effect
always runs sequentially.
"""

from typing import Any, List

import numpy as np

from FX_Libs.constants import DITHER_THRESHOLD, MAX_CHANNEL_VALUE
from FX_Libs.EffectsLib.tone_effects import luminance
from FX_Libs.RasterLib.raster_buffer import RasterBuffer


def diffuse_error(gray: List[List[float]], width: int, height: int) -> List[List[int]]:
    """
    Quantise rows of luminance values with error diffusion.

    Args:
        gray: height rows of width floats (consumed; values are overwritten)
        width: Row length
        height: Number of rows

    Returns:
        height rows of width ints, each 0 or 255
    """
    output: List[List[int]] = []
    for y in range(height):
        row = gray[y]
        below = gray[y + 1] if y + 1 < height else None
        quantized = [0] * width
        for x in range(width):
            old = row[x]
            new = MAX_CHANNEL_VALUE if old >= DITHER_THRESHOLD else 0
            quantized[x] = new
            error = old - new
            if x + 1 < width:
                row[x + 1] += error * 7 / 16
            if below is not None:
                if x > 0:
                    below[x - 1] += error * 3 / 16
                below[x] += error * 5 / 16
                if x + 1 < width:
                    below[x + 1] += error * 1 / 16
        output.append(quantized)
    return output


def apply_dither(buffer: RasterBuffer, settings: Any = None) -> RasterBuffer:
    """
    Dither an image to black and white.

    Returns:
        New buffer where R == G == B and each is 0 or 255; alpha unchanged
    """
    array = buffer.to_array()
    rgb = array[..., :3].astype(np.float64)
    gray = luminance(rgb[..., 0], rgb[..., 1], rgb[..., 2]).tolist()

    quantized = np.array(diffuse_error(gray, buffer.width, buffer.height), dtype=np.uint8)
    array[..., 0] = quantized
    array[..., 1] = quantized
    array[..., 2] = quantized
    return RasterBuffer.from_array(array)
