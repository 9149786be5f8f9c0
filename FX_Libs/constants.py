"""
Constants and configuration values for FX Studio.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the effects engine.
"""

# Pixel layout
CHANNELS = 4
MAX_CHANNEL_VALUE = 255

# Luminance weights (R, G, B)
LUMA_RED = 0.299
LUMA_GREEN = 0.587
LUMA_BLUE = 0.114

# Effect kind names
KIND_HALFTONE = "halftone"
KIND_DUOTONE = "duotone"
KIND_BLACKWHITE = "blackwhite"
KIND_SEPIA = "sepia"
KIND_NOISE = "noise"
KIND_DITHER = "dither"
KIND_EXPOSURE = "exposure"
KIND_CONTRAST = "contrast"
KIND_VIGNETTE = "vignette"
KIND_KALEIDOSCOPE = "kaleidoscope"
KIND_LIGHTLEAKS = "lightleaks"
KIND_TEXTURE = "texture"
KIND_FRAME = "frame"

# Halftone ranges and defaults
HALFTONE_DOT_SIZE_RANGE = (0.5, 5.0)
HALFTONE_SPACING_RANGE = (3.0, 20.0)
HALFTONE_ANGLE_RANGE = (0.0, 180.0)
HALFTONE_SHAPES = ("circle", "square", "line")
DEFAULT_HALFTONE_DOT_SIZE = 2.0
DEFAULT_HALFTONE_SPACING = 5.0
DEFAULT_HALFTONE_ANGLE = 45.0
DEFAULT_HALFTONE_SHAPE = "circle"
HALFTONE_BACKGROUND = 255
HALFTONE_INK = 0

# Duotone ranges and defaults
DUOTONE_INTENSITY_RANGE = (0.0, 100.0)
DEFAULT_DUOTONE_COLOR1 = "#000000"
DEFAULT_DUOTONE_COLOR2 = "#ffffff"
DEFAULT_DUOTONE_INTENSITY = 100.0
DUOTONE_MILD_EXPONENT = 1.4
DUOTONE_STEEP_EXPONENT = 0.6

# Noise
NOISE_LEVEL_RANGE = (1.0, 100.0)
DEFAULT_NOISE_LEVEL = 20.0
NOISE_SCALE = 2.5

# Dither
DITHER_THRESHOLD = 128

# Exposure / contrast
LEVEL_RANGE = (-100.0, 100.0)
DEFAULT_LEVEL = 0.0

# Vignette
VIGNETTE_AMOUNT_RANGE = (0.0, 100.0)
VIGNETTE_FEATHER_RANGE = (0.0, 100.0)
DEFAULT_VIGNETTE_AMOUNT = 50.0
DEFAULT_VIGNETTE_FEATHER = 50.0
DEFAULT_VIGNETTE_COLOR = "#000000"

# Kaleidoscope
KALEIDOSCOPE_SEGMENTS_RANGE = (4, 16)
KALEIDOSCOPE_ROTATION_RANGE = (0.0, 360.0)
KALEIDOSCOPE_ZOOM_RANGE = (50.0, 200.0)
DEFAULT_KALEIDOSCOPE_SEGMENTS = 8
DEFAULT_KALEIDOSCOPE_ROTATION = 0.0
DEFAULT_KALEIDOSCOPE_ZOOM = 100.0

# Light leaks
LIGHTLEAKS_INTENSITY_RANGE = (0.0, 100.0)
LIGHTLEAKS_POSITION_RANGE = (0.0, 100.0)
LIGHTLEAKS_ANGLE_RANGE = (0.0, 360.0)
LIGHTLEAKS_BLENDS = ("screen", "overlay", "soft-light")
DEFAULT_LIGHTLEAKS_INTENSITY = 50.0
DEFAULT_LIGHTLEAKS_COLOR = "#ff9933"
DEFAULT_LIGHTLEAKS_POSITION = 50.0
DEFAULT_LIGHTLEAKS_ANGLE = 45.0
DEFAULT_LIGHTLEAKS_BLEND = "screen"
# Gradient stops as (position, peak alpha share); alpha = floor(intensity/100 * share) / 255
LIGHTLEAKS_STOPS = ((0.0, 0), (0.4, 40), (0.6, 80), (0.8, 40), (1.0, 0))
LIGHTLEAKS_LENGTH_FACTOR = 1.5

# Texture
TEXTURE_NAMES = ("noise",)
TEXTURE_OPACITY_RANGE = (0.0, 100.0)
TEXTURE_SCALE_RANGE = (0.5, 2.0)
TEXTURE_BLENDS = ("multiply", "overlay", "soft-light", "screen")
DEFAULT_TEXTURE_NAME = "noise"
DEFAULT_TEXTURE_OPACITY = 50.0
DEFAULT_TEXTURE_SCALE = 1.0
DEFAULT_TEXTURE_BLEND = "overlay"
TEXTURE_OCTAVES = 4
TEXTURE_ROUGHNESS = 0.5

# Frame
FRAME_WIDTH_RANGE = (0.0, 100.0)
FRAME_STYLES = ("simple", "double", "ornate", "vintage")
DEFAULT_FRAME_WIDTH = 50.0
DEFAULT_FRAME_COLOR = "#000000"
DEFAULT_FRAME_STYLE = "simple"

# Render pipeline
DEFAULT_TILE_ROWS = 64

# Export naming
EXPORT_FILE_STEM = "edited-image"
EXPORT_FILE_EXTENSION = ".png"
DEFAULT_OUTPUT_FORMAT = "PNG"
