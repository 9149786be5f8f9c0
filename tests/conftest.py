"""
Pytest configuration and shared fixtures for FX Studio tests.

This module provides shared test images and colors used across
multiple test modules.
"""

import numpy as np
import pytest

from FX_Libs.RasterLib.raster_buffer import RasterBuffer


@pytest.fixture
def gray_image():
    """2x2 image where every pixel is (128, 128, 128, 255)."""
    return RasterBuffer.filled(2, 2, (128, 128, 128, 255))


@pytest.fixture
def red_image():
    """3x2 opaque pure red image."""
    return RasterBuffer.filled(3, 2, (255, 0, 0, 255))


@pytest.fixture
def gradient_image():
    """
    Provide a 24x16 color gradient with varying alpha.

    Red rises left to right, green rises top to bottom, blue is their
    difference and alpha cycles so alpha preservation can be checked.
    """
    height, width = 16, 24
    ys, xs = np.mgrid[0:height, 0:width]
    array = np.empty((height, width, 4), dtype=np.uint8)
    array[..., 0] = (xs * 255 // (width - 1)).astype(np.uint8)
    array[..., 1] = (ys * 255 // (height - 1)).astype(np.uint8)
    array[..., 2] = np.abs(array[..., 0].astype(int) - array[..., 1].astype(int)).astype(np.uint8)
    array[..., 3] = ((xs + ys) * 37 % 256).astype(np.uint8)
    return RasterBuffer.from_array(array)


@pytest.fixture
def tall_image():
    """200x150 noisy image, tall enough to be split into several row bands."""
    rng = np.random.default_rng(1234)
    array = rng.integers(0, 256, size=(150, 200, 4), dtype=np.uint8)
    return RasterBuffer.from_array(array)


@pytest.fixture
def sample_rgba_colors():
    """
    Provide a list of sample RGBA color tuples for testing.

    Returns:
        List of (R, G, B, A) tuples with common test colors
    """
    return [
        (255, 0, 0, 255),    # Red
        (0, 255, 0, 255),    # Green
        (0, 0, 255, 255),    # Blue
        (255, 255, 255, 255),  # White
        (0, 0, 0, 255),      # Black
        (128, 128, 128, 128),  # Half-transparent gray
    ]
