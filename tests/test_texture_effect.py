"""
Unit tests for the texture overlay effect.
"""

import numpy as np

from FX_Libs.EffectsLib.effect_settings import TextureSettings
from FX_Libs.EffectsLib.texture_effect import apply_texture, noise_texture


class TestNoiseTexture:
    """Tests for noise_texture function."""

    def test_values_in_range_and_varied(self):
        texture = noise_texture(64, 48, 1.0)

        assert texture.shape == (48, 64)
        assert texture.min() >= 0
        assert texture.max() <= 255
        assert np.array_equal(texture, np.floor(texture))
        assert texture.std() > 0

    def test_scale_changes_texture(self):
        assert not np.array_equal(noise_texture(32, 32, 0.5), noise_texture(32, 32, 2.0))


class TestApplyTexture:
    """Tests for apply_texture function."""

    def test_zero_opacity_is_identity(self, gradient_image):
        assert apply_texture(gradient_image, TextureSettings(opacity=0)) == gradient_image

    def test_deterministic(self, tall_image):
        settings = TextureSettings(opacity=70, blend="overlay")
        assert apply_texture(tall_image, settings) == apply_texture(tall_image, settings)

    def test_multiply_never_brightens(self, tall_image):
        result = apply_texture(tall_image, TextureSettings(opacity=100, blend="multiply")).to_array()
        assert (result[..., :3] <= tall_image.to_array()[..., :3]).all()

    def test_screen_never_darkens(self, tall_image):
        result = apply_texture(tall_image, TextureSettings(opacity=100, blend="screen")).to_array()
        assert (result[..., :3] >= tall_image.to_array()[..., :3]).all()

    def test_alpha_preserved(self, gradient_image):
        result = apply_texture(gradient_image, TextureSettings(opacity=60, blend="soft-light"))
        assert np.array_equal(result.to_array()[..., 3], gradient_image.to_array()[..., 3])
