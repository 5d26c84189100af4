"""A selectable tab header."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from fluentkit.button import CursorStyle
from fluentkit.theme import Rgba, Theme, current_theme

__all__ = ["TabRender", "Tab"]

_FONT_WEIGHT_MEDIUM = 500.0

TabClickHandler = Callable[[bool], None]


@dataclass(frozen=True)
class TabRender:
    """A rendered tab: its colours, cursor and underline indicator."""

    element_id: Any
    label: str
    text_color: Rgba
    cursor: CursorStyle
    hover_bg: Rgba | None
    active_opacity: float | None
    indicator_color: Rgba | None
    indicator_hover_color: Rgba | None
    clickable: bool
    padding_y: float = 10.0
    font_size: float = 14.0
    line_height: float = 20.0
    font_weight: float = _FONT_WEIGHT_MEDIUM
    indicator_height: float = 3.0


class Tab:
    """A tab header that shows a label and marks the selected tab."""

    def __init__(self, element_id: Any, label: Any, selected: bool) -> None:
        self.element_id = element_id
        self.label = str(label)
        self.selected = bool(selected)
        self._disabled = False
        self._on_click: TabClickHandler | None = None

    def disabled(self, disabled: bool) -> Tab:
        self._disabled = bool(disabled)
        return self

    def on_click(self, handler: TabClickHandler) -> Tab:
        if not callable(handler):
            raise TypeError("click handler must be callable")
        self._on_click = handler
        return self

    def click(self) -> bool:
        """Deliver a click; return True if a handler ran."""
        if self._disabled or self._on_click is None:
            return False
        self._on_click(True)
        return True

    def render(self, theme: Theme | None = None) -> TabRender:
        """Resolve the tab's colours against a theme."""
        colors = (theme if theme is not None else current_theme()).colors
        if self._disabled:
            return TabRender(
                element_id=self.element_id,
                label=self.label,
                text_color=colors.on_neutral_disabled,
                cursor=CursorStyle.NOT_ALLOWED,
                hover_bg=None,
                active_opacity=None,
                indicator_color=None,
                indicator_hover_color=None,
                clickable=False,
            )
        return TabRender(
            element_id=self.element_id,
            label=self.label,
            text_color=colors.on_neutral if self.selected else colors.on_neutral_variant,
            cursor=CursorStyle.POINTING_HAND,
            hover_bg=colors.subtle_hover,
            active_opacity=0.8,
            indicator_color=colors.primary_stroke if self.selected else None,
            indicator_hover_color=None if self.selected else colors.neutral_stroke,
            clickable=self._on_click is not None,
        )