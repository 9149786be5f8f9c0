"""
Core raster operations for FX Studio.

This module provides the geometric transforms applied to a whole image
(crop and resize) and the conversion helpers used at the boundary with
Pillow images. Every function returns a new RasterBuffer.

Functions:
    crop: Copy a sub-rectangle into a new buffer
    resize: Bilinear resample to new dimensions
    from_pil_image: Build a RasterBuffer from a PIL Image
    to_pil_image: Build an RGBA PIL Image from a RasterBuffer
"""

import logging
from typing import Any

from FX_Libs.errors import InvalidRegion
from FX_Libs.pillow_compat import Image
from FX_Libs.RasterLib.raster_buffer import RasterBuffer

logger = logging.getLogger(__name__)


def _require_buffer(buffer: Any) -> None:
    if not isinstance(buffer, RasterBuffer):
        raise TypeError(f"Expected RasterBuffer, got {type(buffer)}")


def crop(buffer: RasterBuffer, x: int, y: int, width: int, height: int) -> RasterBuffer:
    """
    Copy a sub-rectangle of a buffer.

    Args:
        buffer: Source image
        x: Left edge of the region (0-based)
        y: Top edge of the region (0-based)
        width: Region width in pixels (>= 1)
        height: Region height in pixels (>= 1)

    Returns:
        A new width x height RasterBuffer

    Raises:
        InvalidRegion: If the region is empty or not fully inside the buffer
        TypeError: If buffer is not a RasterBuffer
    """
    _require_buffer(buffer)
    x, y, width, height = int(x), int(y), int(width), int(height)

    if width < 1 or height < 1:
        raise InvalidRegion(f"crop size must be at least 1x1, got {width}x{height}")
    if x < 0 or y < 0 or x + width > buffer.width or y + height > buffer.height:
        raise InvalidRegion(
            f"crop region ({x}, {y}, {width}x{height}) exceeds "
            f"{buffer.width}x{buffer.height} image"
        )

    array = buffer.to_array()
    logger.debug(f"Cropping {buffer.width}x{buffer.height} to {width}x{height} at ({x}, {y})")
    return RasterBuffer.from_array(array[y:y + height, x:x + width])


def resize(buffer: RasterBuffer, new_width: int, new_height: int) -> RasterBuffer:
    """
    Resample a buffer to new dimensions with bilinear filtering.

    Args:
        buffer: Source image
        new_width: Target width in pixels (>= 1)
        new_height: Target height in pixels (>= 1)

    Returns:
        A new new_width x new_height RasterBuffer

    Raises:
        InvalidRegion: If either target dimension is below 1
        TypeError: If buffer is not a RasterBuffer
    """
    _require_buffer(buffer)
    new_width, new_height = int(new_width), int(new_height)

    if new_width < 1 or new_height < 1:
        raise InvalidRegion(f"resize target must be at least 1x1, got {new_width}x{new_height}")

    if (new_width, new_height) == buffer.size:
        return buffer.copy()

    image = to_pil_image(buffer)
    resized = image.resize((new_width, new_height), Image.Resampling.BILINEAR)
    logger.debug(f"Resized {buffer.width}x{buffer.height} to {new_width}x{new_height}")
    return from_pil_image(resized)


def from_pil_image(image: Any) -> RasterBuffer:
    """
    Convert a PIL Image to a RasterBuffer.

    Images in other modes are converted to RGBA first.

    Raises:
        TypeError: If image is not a PIL Image
    """
    if not hasattr(image, "mode") or not hasattr(image, "tobytes"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    if image.mode != "RGBA":
        image = image.convert("RGBA")

    width, height = image.size
    return RasterBuffer(width=width, height=height, pixels=image.tobytes())


def to_pil_image(buffer: RasterBuffer) -> Any:
    """Convert a RasterBuffer to a new RGBA PIL Image."""
    _require_buffer(buffer)
    return Image.frombytes("RGBA", buffer.size, buffer.pixels)
