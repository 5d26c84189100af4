"""Buttons: the shared button core, plain buttons and toggle buttons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from fluentkit.styles import BorderRadius
from fluentkit.theme import ColorScheme, Rgba, Theme, current_theme, rgba

__all__ = [
    "CursorStyle",
    "ButtonStyle",
    "ButtonAppearance",
    "ButtonShape",
    "ButtonRender",
    "ButtonBase",
    "Button",
    "ToggleButton",
]

_TRANSPARENT = rgba(0xFFFFFF00)

ClickHandler = Callable[[Any], None]


class CursorStyle(Enum):
    """Mouse cursor shown over an element."""

    ARROW = "arrow"
    POINTING_HAND = "pointing_hand"
    NOT_ALLOWED = "not_allowed"
    IBEAM = "ibeam"


@dataclass(frozen=True)
class ButtonStyle:
    """Background, text and outline colours of a button state."""

    bg: Rgba
    text: Rgba
    outline: Rgba


def _colors(theme: Theme | None) -> ColorScheme:
    return (theme if theme is not None else current_theme()).colors


class ButtonAppearance(Enum):
    PRIMARY = "primary"
    OUTLINE = "outline"
    SUBTLE = "subtle"

    def base(self, theme: Theme | None = None) -> ButtonStyle:
        """Colours of the button at rest."""
        c = _colors(theme)
        if self is ButtonAppearance.PRIMARY:
            return ButtonStyle(c.primary, c.on_primary, _TRANSPARENT)
        if self is ButtonAppearance.OUTLINE:
            return ButtonStyle(c.neutral, c.on_neutral, c.neutral_stroke)
        return ButtonStyle(c.subtle, c.on_neutral_variant, _TRANSPARENT)

    def hover(self, theme: Theme | None = None) -> ButtonStyle:
        """Colours of the button under the mouse."""
        c = _colors(theme)
        if self is ButtonAppearance.PRIMARY:
            return ButtonStyle(c.primary_hover, c.on_primary, _TRANSPARENT)
        if self is ButtonAppearance.OUTLINE:
            return ButtonStyle(c.neutral_hover, c.on_neutral, c.neutral_stroke_hover)
        return ButtonStyle(c.subtle_hover, c.on_neutral, _TRANSPARENT)

    def disabled(self, theme: Theme | None = None) -> ButtonStyle:
        """Colours of a disabled button."""
        c = _colors(theme)
        if self is ButtonAppearance.PRIMARY:
            return ButtonStyle(c.neutral_disabled, c.on_neutral_disabled, _TRANSPARENT)
        if self is ButtonAppearance.OUTLINE:
            return ButtonStyle(
                c.neutral_disabled, c.on_neutral_disabled, c.neutral_stroke_disabled
            )
        return ButtonStyle(_TRANSPARENT, c.on_neutral_disabled, _TRANSPARENT)

    def selected(self, theme: Theme | None = None) -> ButtonStyle:
        """Colours of a selected (toggled on) button."""
        return self.disabled(theme)


class ButtonShape(Enum):
    ROUNDED = "rounded"
    CIRCULAR = "circular"
    SQUARE = "square"

    def radius(self) -> BorderRadius:
        """The corner radius that draws this shape."""
        return _SHAPE_RADII[self]


_SHAPE_RADII = {
    ButtonShape.ROUNDED: BorderRadius.MEDIUM,
    ButtonShape.CIRCULAR: BorderRadius.CIRCULAR,
    ButtonShape.SQUARE: BorderRadius.NONE,
}


@dataclass(frozen=True)
class ButtonRender:
    """What a button looks like once rendered against a theme."""

    element_id: Any
    style: ButtonStyle
    hover: ButtonStyle | None
    radius: float
    cursor: CursorStyle
    children: tuple[Any, ...]
    width: float | None
    full_width: bool
    disabled: bool
    selected: bool
    active_opacity: float | None
    padding_x: float = 12.0
    padding_y: float = 5.0
    gap: float = 5.0
    font_size: float = 14.0
    line_height: float = 20.0

    @property
    def icon_color(self) -> Rgba:
        """Colour applied to leading and trailing icons."""
        return self.style.text


class ButtonBase:
    """Shared state and rendering for every kind of button."""

    def __init__(self, element_id: Any) -> None:
        self.element_id = element_id
        self._leading: Any = None
        self._trailing: Any = None
        self._label: Any = None
        self._disabled = False
        self._appearance = ButtonAppearance.PRIMARY
        self._selected = False
        self._shape = ButtonShape.ROUNDED
        self._on_click: ClickHandler | None = None
        self._cursor_style = CursorStyle.POINTING_HAND
        self._width: float | None = None
        self._full_width = False

    def label(self, label: Any) -> ButtonBase:
        self._label = label
        return self

    def leading(self, leading: Any) -> ButtonBase:
        self._leading = leading
        return self

    def trailing(self, trailing: Any) -> ButtonBase:
        self._trailing = trailing
        return self

    def appearance(self, appearance: ButtonAppearance) -> ButtonBase:
        if not isinstance(appearance, ButtonAppearance):
            raise TypeError(f"expected a ButtonAppearance, got {appearance!r}")
        self._appearance = appearance
        return self

    def shape(self, shape: ButtonShape) -> ButtonBase:
        if not isinstance(shape, ButtonShape):
            raise TypeError(f"expected a ButtonShape, got {shape!r}")
        self._shape = shape
        return self

    def on_click(self, handler: ClickHandler) -> ButtonBase:
        if not callable(handler):
            raise TypeError("click handler must be callable")
        self._on_click = handler
        return self

    def cursor_style(self, cursor_style: CursorStyle) -> ButtonBase:
        if not isinstance(cursor_style, CursorStyle):
            raise TypeError(f"expected a CursorStyle, got {cursor_style!r}")
        self._cursor_style = cursor_style
        return self

    def disabled(self, disabled: bool) -> ButtonBase:
        self._disabled = bool(disabled)
        return self

    def width(self, width: float) -> ButtonBase:
        """Fix the width in pixels."""
        if width < 0:
            raise ValueError(f"width must not be negative: {width!r}")
        self._width = float(width)
        self._full_width = False
        return self

    def full_width(self) -> ButtonBase:
        """Stretch the button over its container's width."""
        self._width = None
        self._full_width = True
        return self

    def click(self, event: Any = None) -> bool:
        """Deliver a click; return True if a handler ran."""
        if self._disabled or self._on_click is None:
            return False
        self._on_click(event)
        return True

    def render(self, theme: Theme | None = None) -> ButtonRender:
        """Resolve the button's colours, shape and content against a theme."""
        theme = theme if theme is not None else current_theme()
        children = tuple(
            item
            for item in (self._leading, self._label, self._trailing)
            if item is not None
        )
        if self._disabled:
            style = self._appearance.disabled(theme)
            hover = None
            cursor = CursorStyle.NOT_ALLOWED
            active_opacity = None
        else:
            if self._selected:
                style = self._appearance.selected(theme)
            else:
                style = self._appearance.base(theme)
            hover = self._appearance.hover(theme)
            cursor = self._cursor_style
            active_opacity = 0.8
        return ButtonRender(
            element_id=self.element_id,
            style=style,
            hover=hover,
            radius=self._shape.radius().size(),
            cursor=cursor,
            children=children,
            width=self._width,
            full_width=self._full_width,
            disabled=self._disabled,
            selected=self._selected,
            active_opacity=active_opacity,
        )


class Button(ButtonBase):
    """A push button."""


class ToggleButton(ButtonBase):
    """A button that can be switched on and off."""

    def toggle_state(self, selected: bool) -> ToggleButton:
        self._selected = bool(selected)
        return self