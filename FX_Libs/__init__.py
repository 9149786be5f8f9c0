"""
FX_Libs - FX Studio effects engine

This package contains the non-destructive image effects engine,
organized into specialized sub-packages:

- RasterLib: RGBA pixel buffers, crop/resize and Pillow conversion
- EffectsLib: Effect settings, pixel-transform algorithms and the effect registry
- EditorLib: Effect stack, render pipeline, undo history and editing session
"""

__version__ = "0.1.0"
