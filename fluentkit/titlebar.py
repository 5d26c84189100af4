"""A custom window title bar with platform-specific window controls."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from fluentkit.platform import Platform
from fluentkit.theme import Brightness, Rgba, Theme, current_theme

__all__ = [
    "CaptionIcon",
    "CaptionButton",
    "WindowsWindowControls",
    "TitleBarRender",
    "TitleBar",
]

TRAFFIC_LIGHT_PADDING = 71.0
_WINDOWS_HEIGHT = 32.0
_MIN_HEIGHT = 34.0

_CLOSE_HOVER = Rgba(232.0 / 255.0, 17.0 / 255.0, 32.0 / 255.0, 1.0)
_LIGHT_HOVER = Rgba(0.1, 0.1, 0.1, 0.2)
_DARK_HOVER = Rgba(0.9, 0.9, 0.9, 0.1)


class CaptionIcon(Enum):
    """Window caption glyphs in the Segoe Fluent Icons font."""

    MINIMIZE = "\ue921"
    RESTORE = "\ue923"
    MAXIMIZE = "\ue922"
    CLOSE = "\ue8bb"

    @property
    def glyph(self) -> str:
        return self.value


@dataclass(frozen=True)
class CaptionButton:
    """One of the minimize, maximize/restore and close buttons."""

    element_id: str
    icon: CaptionIcon
    hover_background_color: Rgba
    width: float = 36.0
    font_size: float = 10.0

    def active_color(self) -> Rgba:
        """The hover colour at a fifth of its opacity, shown while pressed."""
        hover = self.hover_background_color
        return replace(hover, a=hover.a * 0.2)


class WindowsWindowControls:
    """The caption buttons drawn on Windows, where the title bar is custom."""

    FONT = "Segoe Fluent Icons"

    def __init__(self, button_height: float) -> None:
        if button_height < 0:
            raise ValueError(f"button height must not be negative: {button_height!r}")
        self.button_height = float(button_height)

    def render(
        self, theme: Theme | None = None, maximized: bool = False
    ) -> tuple[CaptionButton, ...]:
        """Return the minimize, maximize-or-restore and close buttons."""
        theme = theme if theme is not None else current_theme()
        hover = _LIGHT_HOVER if theme.brightness is Brightness.LIGHT else _DARK_HOVER
        return (
            CaptionButton("minimize", CaptionIcon.MINIMIZE, hover),
            CaptionButton(
                "maximize-or-restore",
                CaptionIcon.RESTORE if maximized else CaptionIcon.MAXIMIZE,
                hover,
            ),
            CaptionButton("close", CaptionIcon.CLOSE, _CLOSE_HOVER),
        )


@dataclass(frozen=True)
class TitleBarRender:
    """A rendered title bar."""

    height: float
    padding_left: float
    zoom_on_double_click: bool
    children: tuple[Any, ...]
    window_controls: tuple[CaptionButton, ...] | None = field(default=None)


class TitleBar:
    """A title bar that hosts custom content in place of the system one."""

    def __init__(self) -> None:
        self._children: list[Any] = []

    def child(self, element: Any) -> TitleBar:
        self._children.append(element)
        return self

    @staticmethod
    def height(rem_size: float = 16.0, platform: Platform | None = None) -> float:
        """The title bar height in pixels for a platform and rem size."""
        platform = platform if platform is not None else Platform.current()
        if platform is Platform.WINDOWS:
            return _WINDOWS_HEIGHT
        return max(1.75 * rem_size, _MIN_HEIGHT)

    def render(
        self,
        theme: Theme | None = None,
        platform: Platform | None = None,
        rem_size: float = 16.0,
        fullscreen: bool = False,
        maximized: bool = False,
    ) -> TitleBarRender:
        """Lay out the title bar for a platform and window state."""
        platform = platform if platform is not None else Platform.current()
        height = self.height(rem_size, platform)
        if not fullscreen and platform is Platform.MAC:
            padding_left = TRAFFIC_LIGHT_PADDING
        else:
            padding_left = 0.5 * rem_size
        controls = None
        if not fullscreen and platform is Platform.WINDOWS:
            controls = WindowsWindowControls(height).render(theme, maximized)
        return TitleBarRender(
            height=height,
            padding_left=padding_left,
            zoom_on_double_click=platform is not Platform.WINDOWS,
            children=tuple(self._children),
            window_controls=controls,
        )