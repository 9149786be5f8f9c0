"""
RasterLib - RGBA pixel buffers

This module provides the immutable RasterBuffer type and the whole-image
transforms (crop, resize) that operate on it.
"""

from FX_Libs.RasterLib.raster_buffer import RasterBuffer, RgbaColor
from FX_Libs.RasterLib.raster_ops import (
    crop,
    resize,
    from_pil_image,
    to_pil_image,
)

__all__ = [
    "RasterBuffer",
    "RgbaColor",
    "crop",
    "resize",
    "from_pil_image",
    "to_pil_image",
]
