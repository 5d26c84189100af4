"""Colours, colour schemes and the application-wide theme."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum

__all__ = [
    "Rgba",
    "rgb",
    "rgba",
    "ColorScheme",
    "Brightness",
    "WindowAppearance",
    "Theme",
    "set_theme",
    "current_theme",
]


@dataclass(frozen=True)
class Rgba:
    """A colour with red, green, blue and alpha channels in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"channel {field.name} out of range: {value!r}")

    def to_hex(self) -> str:
        """Return the colour as ``#rrggbbaa``."""
        channels = (self.r, self.g, self.b, self.a)
        return "#" + "".join(f"{round(c * 255):02x}" for c in channels)


def _channels(value: int, count: int) -> list[float]:
    shifts = range((count - 1) * 8, -1, -8)
    return [((value >> shift) & 0xFF) / 255.0 for shift in shifts]


def rgb(value: int) -> Rgba:
    """Build an opaque colour from a ``0xRRGGBB`` integer."""
    if not 0 <= value <= 0xFFFFFF:
        raise ValueError(f"rgb value out of range: {value:#x}")
    r, g, b = _channels(value, 3)
    return Rgba(r, g, b, 1.0)


def rgba(value: int) -> Rgba:
    """Build a colour from a ``0xRRGGBBAA`` integer."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"rgba value out of range: {value:#x}")
    r, g, b, a = _channels(value, 4)
    return Rgba(r, g, b, a)


@dataclass(frozen=True)
class ColorScheme:
    """The named colours used by the widgets."""

    neutral: Rgba
    neutral_hover: Rgba
    neutral_disabled: Rgba
    neutral_selected: Rgba
    on_neutral: Rgba
    on_neutral_variant: Rgba
    on_neutral_disabled: Rgba
    on_primary: Rgba
    primary: Rgba
    primary_hover: Rgba
    primary_stroke: Rgba
    neutral_stroke: Rgba
    neutral_stroke_hover: Rgba
    neutral_stroke_disabled: Rgba
    neutral_stroke_dim: Rgba
    neutral_stroke_subtle: Rgba
    subtle: Rgba
    subtle_hover: Rgba
    surface: Rgba

    @classmethod
    def light(cls) -> ColorScheme:
        return cls(
            neutral=rgb(0xFFFFFF),
            neutral_hover=rgb(0xF5F5F5),
            neutral_disabled=rgb(0xF0F0F0),
            neutral_selected=rgb(0xEBEBEB),
            on_neutral=rgb(0x242424),
            on_neutral_variant=rgb(0x424242),
            on_neutral_disabled=rgb(0xBDBDBD),
            on_primary=rgb(0xFFFFFF),
            primary=rgb(0x0F6CBD),
            primary_hover=rgb(0x115EA3),
            primary_stroke=rgb(0x0F6CBD),
            neutral_stroke=rgb(0xD1D1D1),
            neutral_stroke_hover=rgb(0xC7C7C7),
            neutral_stroke_disabled=rgb(0xE0E0E0),
            neutral_stroke_dim=rgb(0xE0E0E0),
            neutral_stroke_subtle=rgb(0xF0F0F0),
            subtle=rgba(0x00000000),
            subtle_hover=rgb(0xF5F5F5),
            surface=rgb(0xFAFAFA),
        )

    @classmethod
    def dark(cls) -> ColorScheme:
        return cls(
            neutral=rgb(0x292929),
            neutral_hover=rgb(0x3D3D3D),
            neutral_disabled=rgb(0x141414),
            neutral_selected=rgb(0x383838),
            on_neutral=rgb(0xFFFFFF),
            on_neutral_variant=rgb(0xD6D6D6),
            on_neutral_disabled=rgb(0x5C5C5C),
            on_primary=rgb(0x000000),
            primary=rgb(0x4AB8F2),
            primary_hover=rgb(0x47B1E8),
            primary_stroke=rgb(0x4AB8F2),
            neutral_stroke=rgb(0x666666),
            neutral_stroke_hover=rgb(0x757575),
            neutral_stroke_disabled=rgb(0x424242),
            neutral_stroke_dim=rgb(0x525252),
            neutral_stroke_subtle=rgb(0x3D3D3D),
            subtle=rgba(0x00000000),
            subtle_hover=rgb(0x383838),
            surface=rgb(0x1C1C1C),
        )


class Brightness(Enum):
    DARK = "dark"
    LIGHT = "light"


class WindowAppearance(Enum):
    """The appearance a window system reports."""

    LIGHT = "light"
    VIBRANT_LIGHT = "vibrant_light"
    DARK = "dark"
    VIBRANT_DARK = "vibrant_dark"


@dataclass(frozen=True)
class Theme:
    """A brightness together with its colour scheme."""

    brightness: Brightness
    colors: ColorScheme

    @staticmethod
    def system(appearance: WindowAppearance) -> Theme:
        """Pick the theme that matches a window appearance."""
        if appearance in (WindowAppearance.LIGHT, WindowAppearance.VIBRANT_LIGHT):
            return Theme.light()
        if appearance in (WindowAppearance.DARK, WindowAppearance.VIBRANT_DARK):
            return Theme.dark()
        raise ValueError(f"unknown window appearance: {appearance!r}")

    @staticmethod
    def light() -> Theme:
        return Theme(Brightness.LIGHT, ColorScheme.light())

    @staticmethod
    def dark() -> Theme:
        return Theme(Brightness.DARK, ColorScheme.dark())


_current: Theme | None = None


def set_theme(theme: Theme) -> None:
    """Install the application-wide theme."""
    global _current
    if not isinstance(theme, Theme):
        raise TypeError(f"expected a Theme, got {type(theme).__name__}")
    _current = theme


def current_theme() -> Theme:
    """Return the installed theme; raise LookupError if none is installed."""
    if _current is None:
        raise LookupError("no theme has been set")
    return _current