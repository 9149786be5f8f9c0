"""
Unit tests for tone_effects module.

Tests luminance, black & white, sepia, exposure, contrast, duotone and
noise on small known images.
"""

import numpy as np
import pytest

from FX_Libs.EffectsLib.effect_settings import (
    ContrastSettings,
    DuotoneSettings,
    ExposureSettings,
    NoiseSettings,
)
from FX_Libs.EffectsLib.tone_effects import (
    apply_blackwhite,
    apply_contrast,
    apply_duotone,
    apply_exposure,
    apply_noise,
    apply_sepia,
    contrast_factor,
    duotone_exponent,
    luminance,
)
from FX_Libs.RasterLib.raster_buffer import RasterBuffer


def _alpha(buffer):
    return buffer.to_array()[..., 3]


class TestLuminance:
    """Tests for luminance function."""

    def test_weights(self):
        assert luminance(255, 0, 0) == pytest.approx(76.245)
        assert luminance(0, 255, 0) == pytest.approx(149.685)
        assert luminance(0, 0, 255) == pytest.approx(29.07)

    def test_gray_is_its_own_luminance(self):
        assert luminance(128, 128, 128) == pytest.approx(128.0)

    def test_accepts_arrays(self):
        result = luminance(np.array([0.0, 255.0]), np.array([0.0, 255.0]), np.array([0.0, 255.0]))
        assert result == pytest.approx([0.0, 255.0])


class TestBlackWhite:
    """Tests for apply_blackwhite function."""

    def test_gray_image_is_unchanged(self, gray_image):
        assert apply_blackwhite(gray_image) == gray_image

    def test_channels_equal_and_alpha_kept(self, gradient_image):
        result = apply_blackwhite(gradient_image).to_array()

        assert np.array_equal(result[..., 0], result[..., 1])
        assert np.array_equal(result[..., 1], result[..., 2])
        assert np.array_equal(result[..., 3], _alpha(gradient_image))

    def test_red_becomes_rounded_luminance(self, red_image):
        assert apply_blackwhite(red_image).get_pixel(0, 0) == (76, 76, 76, 255)


class TestSepia:
    """Tests for apply_sepia function."""

    def test_pure_red(self, red_image):
        assert apply_sepia(red_image).get_pixel(0, 0) == (100, 88, 69, 255)

    def test_white_saturates(self):
        white = RasterBuffer.filled(1, 1, (255, 255, 255, 40))

        assert apply_sepia(white).get_pixel(0, 0) == (255, 255, 238, 40)

    def test_black_stays_black(self):
        black = RasterBuffer.filled(1, 1, (0, 0, 0, 255))
        assert apply_sepia(black).get_pixel(0, 0) == (0, 0, 0, 255)


class TestExposure:
    """Tests for apply_exposure function."""

    def test_level_100_doubles_and_clamps(self):
        image = RasterBuffer.filled(1, 1, (100, 128, 200, 90))

        result = apply_exposure(image, ExposureSettings(level=100))

        assert result.get_pixel(0, 0) == (200, 255, 255, 90)

    def test_level_minus_100_is_black(self, gradient_image):
        result = apply_exposure(gradient_image, ExposureSettings(level=-100)).to_array()

        assert not result[..., :3].any()
        assert np.array_equal(result[..., 3], _alpha(gradient_image))

    def test_level_0_is_identity(self, gradient_image):
        assert apply_exposure(gradient_image, ExposureSettings(level=0)) == gradient_image


class TestContrast:
    """Tests for apply_contrast function."""

    def test_factor_is_one_at_zero(self):
        assert contrast_factor(0) == 1.0

    def test_level_0_is_identity(self, gradient_image):
        assert apply_contrast(gradient_image, ContrastSettings(level=0)) == gradient_image

    def test_positive_level_spreads_from_mid_gray(self):
        image = RasterBuffer.filled(1, 1, (100, 128, 160, 255))

        r, g, b, a = apply_contrast(image, ContrastSettings(level=50)).get_pixel(0, 0)

        assert r < 100
        assert g == 128
        assert b > 160
        assert a == 255

    def test_output_is_clamped(self):
        image = RasterBuffer.filled(1, 1, (0, 255, 10, 255))

        result = apply_contrast(image, ContrastSettings(level=100))

        assert result.get_pixel(0, 0) == (0, 255, 0, 255)


class TestDuotone:
    """Tests for apply_duotone function."""

    @pytest.mark.parametrize("intensity", [0, 25, 50, 100])
    def test_black_maps_to_color1(self, intensity):
        image = RasterBuffer.filled(2, 1, (0, 0, 0, 77))
        settings = DuotoneSettings(color1="#123456", color2="#fedcba", intensity=intensity)

        assert apply_duotone(image, settings).get_pixel(1, 0) == (0x12, 0x34, 0x56, 77)

    @pytest.mark.parametrize("intensity", [0, 25, 50, 100])
    def test_white_maps_to_color2(self, intensity):
        image = RasterBuffer.filled(2, 1, (255, 255, 255, 200))
        settings = DuotoneSettings(color1="#123456", color2="#fedcba", intensity=intensity)

        assert apply_duotone(image, settings).get_pixel(0, 0) == (0xFE, 0xDC, 0xBA, 200)

    def test_exponent_endpoints(self):
        assert duotone_exponent(100) == pytest.approx(0.6)
        assert duotone_exponent(0) == pytest.approx(1.4)
        assert duotone_exponent(50) == pytest.approx(1.0)

    def test_higher_intensity_brightens_midtones(self, gray_image):
        settings_low = DuotoneSettings(intensity=0)
        settings_high = DuotoneSettings(intensity=100)

        low = apply_duotone(gray_image, settings_low).get_pixel(0, 0)[0]
        high = apply_duotone(gray_image, settings_high).get_pixel(0, 0)[0]

        assert low < 128 < high

    def test_alpha_preserved(self, gradient_image):
        result = apply_duotone(gradient_image, DuotoneSettings(color1="#ff0000", color2="#0000ff"))
        assert np.array_equal(_alpha(result), _alpha(gradient_image))


class TestNoise:
    """Tests for apply_noise function."""

    @pytest.mark.parametrize("level", [1, 3, 20, 100])
    def test_offsets_are_bounded(self, gradient_image, level):
        """No channel should move further than level * 1.25."""
        result = apply_noise(gradient_image, NoiseSettings(level=level))

        diff = np.abs(result.to_array().astype(int) - gradient_image.to_array().astype(int))
        assert diff[..., :3].max() <= level * 1.25
        assert not diff[..., 3].any()

    def test_seed_makes_output_reproducible(self, gradient_image):
        settings = NoiseSettings(level=50, seed=7)

        assert apply_noise(gradient_image, settings) == apply_noise(gradient_image, settings)

    def test_changes_pixels(self, tall_image):
        result = apply_noise(tall_image, NoiseSettings(level=100, seed=3))
        assert result != tall_image

    def test_channels_vary_independently(self):
        image = RasterBuffer.filled(32, 32, (128, 128, 128, 255))

        result = apply_noise(image, NoiseSettings(level=100, seed=11)).to_array()

        assert not np.array_equal(result[..., 0], result[..., 1])
