"""
Raster buffer data model for FX Studio.

A RasterBuffer is an immutable width x height RGBA8 image stored as a flat,
row-major byte string. It is the unit of input and output for every effect:
effects never mutate a buffer, they build a new one.

Classes:
    RasterBuffer: Immutable RGBA pixel buffer

Type Aliases:
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from FX_Libs.constants import CHANNELS
from FX_Libs.errors import DimensionMismatch

RgbaColor = Tuple[int, int, int, int]


@dataclass(frozen=True)
class RasterBuffer:
    """Immutable RGBA8 image.

    Attributes:
        width: Width in pixels (>= 1)
        height: Height in pixels (>= 1)
        pixels: Row-major RGBA bytes, width * height * 4 long
    """
    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.width, int) or not isinstance(self.height, int):
            raise DimensionMismatch(
                f"width and height must be integers, got {type(self.width)} and {type(self.height)}"
            )
        if self.width < 1 or self.height < 1:
            raise DimensionMismatch(f"width and height must be >= 1, got {self.width}x{self.height}")

        if isinstance(self.pixels, (bytearray, memoryview)):
            object.__setattr__(self, "pixels", bytes(self.pixels))
        elif not isinstance(self.pixels, bytes):
            raise TypeError(f"pixels must be bytes, got {type(self.pixels)}")

        expected = self.width * self.height * CHANNELS
        if len(self.pixels) != expected:
            raise DimensionMismatch(
                f"pixel data has {len(self.pixels)} bytes, expected {expected} "
                f"for a {self.width}x{self.height} RGBA image"
            )

    @classmethod
    def from_array(cls, array: np.ndarray) -> "RasterBuffer":
        """
        Build a buffer from a (height, width, 4) array.

        Values are clipped to 0-255 and converted to uint8.

        Raises:
            DimensionMismatch: If the array is not (height, width, 4)
        """
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise DimensionMismatch(f"expected a (height, width, 4) array, got shape {array.shape}")
        height, width = int(array.shape[0]), int(array.shape[1])
        if array.dtype != np.uint8:
            array = np.clip(array, 0, 255).astype(np.uint8)
        return cls(width=width, height=height, pixels=np.ascontiguousarray(array).tobytes())

    @classmethod
    def filled(cls, width: int, height: int, color: RgbaColor) -> "RasterBuffer":
        """Build a buffer where every pixel has the same RGBA color."""
        return cls(width=width, height=height, pixels=bytes(color) * (width * height))

    def to_array(self) -> np.ndarray:
        """Return a writable (height, width, 4) uint8 copy of the pixels."""
        return np.frombuffer(self.pixels, dtype=np.uint8).reshape(self.height, self.width, CHANNELS).copy()

    def get_pixel(self, x: int, y: int) -> RgbaColor:
        """
        Return the RGBA tuple at (x, y).

        Raises:
            IndexError: If the coordinates fall outside the image
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        offset = (y * self.width + x) * CHANNELS
        r, g, b, a = self.pixels[offset:offset + CHANNELS]
        return (r, g, b, a)

    def copy(self) -> "RasterBuffer":
        """Return an equal buffer with its own pixel bytes."""
        return RasterBuffer(width=self.width, height=self.height, pixels=bytes(self.pixels))

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) tuple, in the order Pillow uses."""
        return self.width, self.height
