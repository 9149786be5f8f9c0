"""
EffectsLib - Effect settings and pixel-transform algorithms

This module provides the validated settings model for every effect kind,
the pure algorithms that implement them and the registry that dispatches
applied effects to those algorithms.
"""

from FX_Libs.EffectsLib.effect_settings import (
    EffectKind,
    AppliedEffect,
    HalftoneSettings,
    DuotoneSettings,
    BlackWhiteSettings,
    SepiaSettings,
    NoiseSettings,
    DitherSettings,
    ExposureSettings,
    ContrastSettings,
    VignetteSettings,
    KaleidoscopeSettings,
    LightLeaksSettings,
    TextureSettings,
    FrameSettings,
    parse_hex_color,
)
from FX_Libs.EffectsLib.tone_effects import (
    luminance,
    apply_blackwhite,
    apply_sepia,
    apply_exposure,
    apply_contrast,
    apply_duotone,
    apply_noise,
)
from FX_Libs.EffectsLib.halftone_effect import apply_halftone
from FX_Libs.EffectsLib.dither_effect import apply_dither
from FX_Libs.EffectsLib.blend_modes import BLEND_MODES, composite
from FX_Libs.EffectsLib.vignette_effect import apply_vignette
from FX_Libs.EffectsLib.kaleidoscope_effect import apply_kaleidoscope
from FX_Libs.EffectsLib.light_leaks_effect import apply_light_leaks
from FX_Libs.EffectsLib.texture_effect import apply_texture
from FX_Libs.EffectsLib.frame_effect import apply_frame
from FX_Libs.EffectsLib.effect_registry import (
    EffectRegistry,
    get_default_registry,
    register_default_effects,
)

__all__ = [
    "EffectKind",
    "AppliedEffect",
    "HalftoneSettings",
    "DuotoneSettings",
    "BlackWhiteSettings",
    "SepiaSettings",
    "NoiseSettings",
    "DitherSettings",
    "ExposureSettings",
    "ContrastSettings",
    "VignetteSettings",
    "KaleidoscopeSettings",
    "LightLeaksSettings",
    "TextureSettings",
    "FrameSettings",
    "parse_hex_color",
    "luminance",
    "apply_blackwhite",
    "apply_sepia",
    "apply_exposure",
    "apply_contrast",
    "apply_duotone",
    "apply_noise",
    "apply_halftone",
    "apply_dither",
    "apply_vignette",
    "BLEND_MODES",
    "composite",
    "apply_kaleidoscope",
    "apply_light_leaks",
    "apply_texture",
    "apply_frame",
    "EffectRegistry",
    "get_default_registry",
    "register_default_effects",
]
