"""
Error types raised by the effects engine.

All errors are recoverable: the operation that raised them leaves the
original image, the effect stack and the history untouched.
"""


class RasterEffectsError(Exception):
    """Base class for engine errors."""


class ValidationError(RasterEffectsError, ValueError):
    """Effect settings are malformed (bad number, color string or shape)."""


class InvalidRegion(RasterEffectsError, ValueError):
    """A crop or resize request has nonsensical bounds."""


class DimensionMismatch(RasterEffectsError, ValueError):
    """Pixel data length does not agree with width * height * 4."""
