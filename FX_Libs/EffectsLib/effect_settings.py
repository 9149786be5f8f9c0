"""
Effect settings data models for FX Studio.

Each effect kind has its own frozen settings dataclass. Settings are
validated once, when they are constructed: numeric fields are clamped to
their documented range, colors must be 6-digit hex strings and shapes must
be one of the known names. Algorithms can therefore trust the values they
receive and never fail mid-render.

Classes:
    EffectKind: Enumeration of built-in effect kinds
    HalftoneSettings, DuotoneSettings, BlackWhiteSettings, SepiaSettings,
    NoiseSettings, DitherSettings, ExposureSettings, ContrastSettings,
    VignetteSettings, KaleidoscopeSettings, LightLeaksSettings,
    TextureSettings, FrameSettings: Per-kind settings
    AppliedEffect: An effect kind paired with its settings

Functions:
    parse_hex_color: Parse '#rrggbb' into an (r, g, b) tuple
"""

import math
import re
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Type, Union

from FX_Libs.constants import (
    KIND_HALFTONE,
    KIND_DUOTONE,
    KIND_BLACKWHITE,
    KIND_SEPIA,
    KIND_NOISE,
    KIND_DITHER,
    KIND_EXPOSURE,
    KIND_CONTRAST,
    KIND_VIGNETTE,
    KIND_KALEIDOSCOPE,
    KIND_LIGHTLEAKS,
    KIND_TEXTURE,
    KIND_FRAME,
    HALFTONE_DOT_SIZE_RANGE,
    HALFTONE_SPACING_RANGE,
    HALFTONE_ANGLE_RANGE,
    HALFTONE_SHAPES,
    DEFAULT_HALFTONE_DOT_SIZE,
    DEFAULT_HALFTONE_SPACING,
    DEFAULT_HALFTONE_ANGLE,
    DEFAULT_HALFTONE_SHAPE,
    DUOTONE_INTENSITY_RANGE,
    DEFAULT_DUOTONE_COLOR1,
    DEFAULT_DUOTONE_COLOR2,
    DEFAULT_DUOTONE_INTENSITY,
    NOISE_LEVEL_RANGE,
    DEFAULT_NOISE_LEVEL,
    LEVEL_RANGE,
    DEFAULT_LEVEL,
    VIGNETTE_AMOUNT_RANGE,
    VIGNETTE_FEATHER_RANGE,
    DEFAULT_VIGNETTE_AMOUNT,
    DEFAULT_VIGNETTE_FEATHER,
    DEFAULT_VIGNETTE_COLOR,
    KALEIDOSCOPE_SEGMENTS_RANGE,
    KALEIDOSCOPE_ROTATION_RANGE,
    KALEIDOSCOPE_ZOOM_RANGE,
    DEFAULT_KALEIDOSCOPE_SEGMENTS,
    DEFAULT_KALEIDOSCOPE_ROTATION,
    DEFAULT_KALEIDOSCOPE_ZOOM,
    LIGHTLEAKS_INTENSITY_RANGE,
    LIGHTLEAKS_POSITION_RANGE,
    LIGHTLEAKS_ANGLE_RANGE,
    LIGHTLEAKS_BLENDS,
    DEFAULT_LIGHTLEAKS_INTENSITY,
    DEFAULT_LIGHTLEAKS_COLOR,
    DEFAULT_LIGHTLEAKS_POSITION,
    DEFAULT_LIGHTLEAKS_ANGLE,
    DEFAULT_LIGHTLEAKS_BLEND,
    TEXTURE_NAMES,
    TEXTURE_OPACITY_RANGE,
    TEXTURE_SCALE_RANGE,
    TEXTURE_BLENDS,
    DEFAULT_TEXTURE_NAME,
    DEFAULT_TEXTURE_OPACITY,
    DEFAULT_TEXTURE_SCALE,
    DEFAULT_TEXTURE_BLEND,
    FRAME_WIDTH_RANGE,
    FRAME_STYLES,
    DEFAULT_FRAME_WIDTH,
    DEFAULT_FRAME_COLOR,
    DEFAULT_FRAME_STYLE,
)
from FX_Libs.errors import ValidationError

RgbColor = Tuple[int, int, int]

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


class EffectKind(str, Enum):
    HALFTONE = KIND_HALFTONE
    DUOTONE = KIND_DUOTONE
    BLACKWHITE = KIND_BLACKWHITE
    SEPIA = KIND_SEPIA
    NOISE = KIND_NOISE
    DITHER = KIND_DITHER
    EXPOSURE = KIND_EXPOSURE
    CONTRAST = KIND_CONTRAST
    VIGNETTE = KIND_VIGNETTE
    KALEIDOSCOPE = KIND_KALEIDOSCOPE
    LIGHTLEAKS = KIND_LIGHTLEAKS
    TEXTURE = KIND_TEXTURE
    FRAME = KIND_FRAME

    @classmethod
    def lookup(cls, value: Any) -> Optional["EffectKind"]:
        """Return the matching kind, or None when the name is not built in."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


def parse_hex_color(value: Any) -> RgbColor:
    """
    Parse a 6-digit hex color string.

    Args:
        value: Color such as '#ff8800' or 'FF8800'

    Returns:
        (r, g, b) tuple of ints in 0-255

    Raises:
        ValidationError: If the value is not a 6-digit hex color
    """
    match = _HEX_COLOR.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise ValidationError(f"color must be a 6-digit hex string like '#rrggbb', got {value!r}")
    return tuple(int(part, 16) for part in match.groups())


def _normalize_color(name: str, value: Any) -> str:
    try:
        r, g, b = parse_hex_color(value)
    except ValidationError as e:
        raise ValidationError(f"{name}: {e}") from e
    return f"#{r:02x}{g:02x}{b:02x}"


def _clamp_number(name: str, value: Any, bounds: Tuple[float, float]) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} must be a number, got {value!r}") from e
    if math.isnan(number):
        raise ValidationError(f"{name} must be a number, got NaN")
    low, high = bounds
    return max(low, min(high, number))


def _choice(name: str, value: Any, options: Tuple[str, ...]) -> str:
    choice = value.strip().lower() if isinstance(value, str) else value
    if choice not in options:
        raise ValidationError(f"{name} must be one of {', '.join(options)}, got {value!r}")
    return choice


class _SettingsMixin:
    """Shared dict conversion for settings dataclasses."""

    # camelCase names accepted from UI payloads
    _aliases: Dict[str, str] = {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]] = None):
        """Create from dictionary, ignoring unknown keys."""
        data = data or {}
        normalized: Dict[str, Any] = {}
        for key, value in data.items():
            key = cls._aliases.get(key, key)
            if key in cls.__dataclass_fields__:
                normalized[key] = value
        return cls(**normalized)


@dataclass(frozen=True)
class HalftoneSettings(_SettingsMixin):
    """Halftone dot-grid settings.

    Attributes:
        dot_size: Maximum dot radius in pixels (0.5-5)
        spacing: Grid pitch in pixels (3-20)
        angle: Grid rotation in degrees (0-180)
        shape: 'circle', 'square' or 'line'
    """
    dot_size: float = DEFAULT_HALFTONE_DOT_SIZE
    spacing: float = DEFAULT_HALFTONE_SPACING
    angle: float = DEFAULT_HALFTONE_ANGLE
    shape: str = DEFAULT_HALFTONE_SHAPE

    _aliases = {"dotSize": "dot_size"}

    def __post_init__(self) -> None:
        object.__setattr__(self, "dot_size", _clamp_number("dot_size", self.dot_size, HALFTONE_DOT_SIZE_RANGE))
        object.__setattr__(self, "spacing", _clamp_number("spacing", self.spacing, HALFTONE_SPACING_RANGE))
        object.__setattr__(self, "angle", _clamp_number("angle", self.angle, HALFTONE_ANGLE_RANGE))
        object.__setattr__(self, "shape", _choice("shape", self.shape, HALFTONE_SHAPES))


@dataclass(frozen=True)
class DuotoneSettings(_SettingsMixin):
    """Duotone settings.

    Attributes:
        color1: Shadow color as '#rrggbb'
        color2: Highlight color as '#rrggbb'
        intensity: Tone curve strength in percent (0-100)
    """
    color1: str = DEFAULT_DUOTONE_COLOR1
    color2: str = DEFAULT_DUOTONE_COLOR2
    intensity: float = DEFAULT_DUOTONE_INTENSITY

    _aliases = {"shadowColor": "color1", "highlightColor": "color2"}

    def __post_init__(self) -> None:
        object.__setattr__(self, "color1", _normalize_color("color1", self.color1))
        object.__setattr__(self, "color2", _normalize_color("color2", self.color2))
        object.__setattr__(self, "intensity", _clamp_number("intensity", self.intensity, DUOTONE_INTENSITY_RANGE))

    @property
    def shadow_rgb(self) -> RgbColor:
        return parse_hex_color(self.color1)

    @property
    def highlight_rgb(self) -> RgbColor:
        return parse_hex_color(self.color2)


@dataclass(frozen=True)
class BlackWhiteSettings(_SettingsMixin):
    pass


@dataclass(frozen=True)
class SepiaSettings(_SettingsMixin):
    pass


@dataclass(frozen=True)
class DitherSettings(_SettingsMixin):
    pass


@dataclass(frozen=True)
class NoiseSettings(_SettingsMixin):
    """Noise settings.

    Attributes:
        level: Noise strength (1-100); each channel moves by at most level * 1.25
        seed: Optional seed for reproducible noise. None draws fresh entropy.
    """
    level: float = DEFAULT_NOISE_LEVEL
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", _clamp_number("level", self.level, NOISE_LEVEL_RANGE))
        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0:
                raise ValidationError(f"seed must be a non-negative integer or None, got {self.seed!r}")


@dataclass(frozen=True)
class ExposureSettings(_SettingsMixin):
    level: float = DEFAULT_LEVEL

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", _clamp_number("level", self.level, LEVEL_RANGE))


@dataclass(frozen=True)
class ContrastSettings(_SettingsMixin):
    level: float = DEFAULT_LEVEL

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", _clamp_number("level", self.level, LEVEL_RANGE))


@dataclass(frozen=True)
class VignetteSettings(_SettingsMixin):
    """Vignette settings.

    Attributes:
        amount: Darkening strength at the corners in percent (0-100)
        feather: Width of the transition in percent (0-100)
        color: Edge color as '#rrggbb'
    """
    amount: float = DEFAULT_VIGNETTE_AMOUNT
    feather: float = DEFAULT_VIGNETTE_FEATHER
    color: str = DEFAULT_VIGNETTE_COLOR

    _aliases = {"intensity": "amount"}

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _clamp_number("amount", self.amount, VIGNETTE_AMOUNT_RANGE))
        object.__setattr__(self, "feather", _clamp_number("feather", self.feather, VIGNETTE_FEATHER_RANGE))
        object.__setattr__(self, "color", _normalize_color("color", self.color))

    @property
    def rgb(self) -> RgbColor:
        return parse_hex_color(self.color)


@dataclass(frozen=True)
class KaleidoscopeSettings(_SettingsMixin):
    """Kaleidoscope settings.

    Attributes:
        segments: Number of mirrored wedges (4-16)
        rotation: Pattern rotation in degrees (0-360)
        zoom: Magnification in percent (50-200); below 100 the image shrinks
              and samples past its edge come out transparent
    """
    segments: int = DEFAULT_KALEIDOSCOPE_SEGMENTS
    rotation: float = DEFAULT_KALEIDOSCOPE_ROTATION
    zoom: float = DEFAULT_KALEIDOSCOPE_ZOOM

    def __post_init__(self) -> None:
        segments = _clamp_number("segments", self.segments, KALEIDOSCOPE_SEGMENTS_RANGE)
        object.__setattr__(self, "segments", int(round(segments)))
        object.__setattr__(self, "rotation", _clamp_number("rotation", self.rotation, KALEIDOSCOPE_ROTATION_RANGE))
        object.__setattr__(self, "zoom", _clamp_number("zoom", self.zoom, KALEIDOSCOPE_ZOOM_RANGE))


@dataclass(frozen=True)
class LightLeaksSettings(_SettingsMixin):
    """Light leak settings.

    Attributes:
        intensity: Peak strength of the leak in percent (0-100)
        color: Leak color as '#rrggbb'
        position: Horizontal centre of the leak in percent of the width (0-100)
        angle: Direction of the gradient band in degrees (0-360)
        blend: 'screen', 'overlay' or 'soft-light'
    """
    intensity: float = DEFAULT_LIGHTLEAKS_INTENSITY
    color: str = DEFAULT_LIGHTLEAKS_COLOR
    position: float = DEFAULT_LIGHTLEAKS_POSITION
    angle: float = DEFAULT_LIGHTLEAKS_ANGLE
    blend: str = DEFAULT_LIGHTLEAKS_BLEND

    def __post_init__(self) -> None:
        object.__setattr__(self, "intensity", _clamp_number("intensity", self.intensity, LIGHTLEAKS_INTENSITY_RANGE))
        object.__setattr__(self, "color", _normalize_color("color", self.color))
        object.__setattr__(self, "position", _clamp_number("position", self.position, LIGHTLEAKS_POSITION_RANGE))
        object.__setattr__(self, "angle", _clamp_number("angle", self.angle, LIGHTLEAKS_ANGLE_RANGE))
        object.__setattr__(self, "blend", _choice("blend", self.blend, LIGHTLEAKS_BLENDS))

    @property
    def rgb(self) -> RgbColor:
        return parse_hex_color(self.color)


@dataclass(frozen=True)
class TextureSettings(_SettingsMixin):
    """Texture overlay settings.

    Attributes:
        texture: Texture name; only the procedural 'noise' texture exists
        opacity: Strength of the overlay in percent (0-100)
        blend: 'multiply', 'overlay', 'soft-light' or 'screen'
        scale: Base frequency of the texture (0.5-2.0)
    """
    texture: str = DEFAULT_TEXTURE_NAME
    opacity: float = DEFAULT_TEXTURE_OPACITY
    blend: str = DEFAULT_TEXTURE_BLEND
    scale: float = DEFAULT_TEXTURE_SCALE

    def __post_init__(self) -> None:
        object.__setattr__(self, "texture", _choice("texture", self.texture, TEXTURE_NAMES))
        object.__setattr__(self, "opacity", _clamp_number("opacity", self.opacity, TEXTURE_OPACITY_RANGE))
        object.__setattr__(self, "blend", _choice("blend", self.blend, TEXTURE_BLENDS))
        object.__setattr__(self, "scale", _clamp_number("scale", self.scale, TEXTURE_SCALE_RANGE))


@dataclass(frozen=True)
class FrameSettings(_SettingsMixin):
    """Border frame settings.

    Attributes:
        width: Frame inset in percent of a tenth of the shorter side (0-100);
               each style has a minimum inset
        color: Frame color as '#rrggbb'
        style: 'simple', 'double', 'ornate' or 'vintage'
    """
    width: float = DEFAULT_FRAME_WIDTH
    color: str = DEFAULT_FRAME_COLOR
    style: str = DEFAULT_FRAME_STYLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _clamp_number("width", self.width, FRAME_WIDTH_RANGE))
        object.__setattr__(self, "color", _normalize_color("color", self.color))
        object.__setattr__(self, "style", _choice("style", self.style, FRAME_STYLES))

    @property
    def rgb(self) -> RgbColor:
        return parse_hex_color(self.color)


SETTINGS_TYPES: Dict[EffectKind, Type[_SettingsMixin]] = {
    EffectKind.HALFTONE: HalftoneSettings,
    EffectKind.DUOTONE: DuotoneSettings,
    EffectKind.BLACKWHITE: BlackWhiteSettings,
    EffectKind.SEPIA: SepiaSettings,
    EffectKind.NOISE: NoiseSettings,
    EffectKind.DITHER: DitherSettings,
    EffectKind.EXPOSURE: ExposureSettings,
    EffectKind.CONTRAST: ContrastSettings,
    EffectKind.VIGNETTE: VignetteSettings,
    EffectKind.KALEIDOSCOPE: KaleidoscopeSettings,
    EffectKind.LIGHTLEAKS: LightLeaksSettings,
    EffectKind.TEXTURE: TextureSettings,
    EffectKind.FRAME: FrameSettings,
}


@dataclass(frozen=True)
class AppliedEffect:
    """An effect committed to (or previewed on) the effect stack.

    Attributes:
        kind: Built-in EffectKind, or the raw name of an unknown kind.
              Unknown kinds render as an identity pass-through.
        settings: Settings instance matching the kind (a plain dict for
                  unknown kinds)

    Construction validates: a kind name is normalised to its EffectKind and
    a settings mapping (or None) is converted to the matching settings class.
    """
    kind: Union[EffectKind, str]
    settings: Any = field(default=None)

    def __post_init__(self) -> None:
        known = EffectKind.lookup(self.kind)
        settings = self.settings

        if known is None:
            if not str(self.kind).strip():
                raise ValidationError("effect kind cannot be empty")
            if settings is not None and not isinstance(settings, Mapping):
                raise ValidationError(f"effect settings must be a mapping, got {type(settings)}")
            object.__setattr__(self, "kind", str(self.kind))
            object.__setattr__(self, "settings", dict(settings or {}))
            return

        settings_type = SETTINGS_TYPES[known]
        if settings is None or isinstance(settings, Mapping):
            settings = settings_type.from_dict(settings)
        elif not isinstance(settings, settings_type):
            raise ValidationError(
                f"{known.value} effect expects {settings_type.__name__}, got {type(settings).__name__}"
            )
        object.__setattr__(self, "kind", known)
        object.__setattr__(self, "settings", settings)

    @classmethod
    def create(cls, kind: Union[EffectKind, str], **settings: Any) -> "AppliedEffect":
        """
        Build a validated effect from a kind name and keyword settings.

        Raises:
            ValidationError: If a setting is malformed
        """
        return cls(kind=kind, settings=dict(settings))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AppliedEffect":
        """
        Create from a {'type': ..., 'settings': {...}} dictionary.

        Raises:
            ValidationError: If the type is missing or a setting is malformed
        """
        kind = data.get("type", data.get("kind"))
        if kind is None or not str(kind).strip():
            raise ValidationError("effect dictionary requires a 'type'")
        settings = data.get("settings") or {}
        if not isinstance(settings, Mapping):
            raise ValidationError(f"effect settings must be a mapping, got {type(settings)}")
        return cls.create(kind, **settings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        if isinstance(self.settings, _SettingsMixin):
            settings = self.settings.to_dict()
        else:
            settings = dict(self.settings or {})
        return {"type": self.kind_name, "settings": settings}

    @property
    def kind_name(self) -> str:
        return self.kind.value if isinstance(self.kind, EffectKind) else str(self.kind)
