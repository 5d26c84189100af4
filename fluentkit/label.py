"""A text label with size, weight, colour and decoration options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from fluentkit.theme import Rgba

__all__ = ["LabelSize", "LineHeightStyle", "LabelRender", "Label"]


class LabelSize(Enum):
    """The text size of a label."""

    DEFAULT = "default"
    LARGE = "large"
    SMALL = "small"
    XSMALL = "xsmall"


class LineHeightStyle(Enum):
    """How the line height of a label is chosen."""

    TEXT_LABEL = "text_label"
    UI_LABEL = "ui_label"
    """Sets the line height to 1."""


@dataclass(frozen=True)
class LabelRender:
    """A rendered label: the resolved text style and its children."""

    size: LabelSize
    color: Rgba | None
    weight: float | None
    line_height: float | None
    italic: bool
    underline_thickness: float | None
    strikethrough: bool
    nowrap: bool
    children: tuple[Any, ...]

    @property
    def underline(self) -> bool:
        return self.underline_thickness is not None


class Label:
    """A piece of text, optionally styled."""

    def __init__(self) -> None:
        self._size = LabelSize.DEFAULT
        self._weight: float | None = None
        self._line_height_style = LineHeightStyle.TEXT_LABEL
        self._color: Rgba | None = None
        self._strikethrough = False
        self._italic = False
        self._underline = False
        self._single_line = False
        self._children: list[Any] = []

    def size(self, size: LabelSize) -> Label:
        if not isinstance(size, LabelSize):
            raise TypeError(f"expected a LabelSize, got {size!r}")
        self._size = size
        return self

    def weight(self, weight: float) -> Label:
        """Set the font weight, such as 400 for normal or 500 for medium."""
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise TypeError(f"font weight must be a number, got {weight!r}")
        if weight <= 0:
            raise ValueError(f"font weight must be positive: {weight!r}")
        self._weight = float(weight)
        return self

    def line_height_style(self, line_height_style: LineHeightStyle) -> Label:
        if not isinstance(line_height_style, LineHeightStyle):
            raise TypeError(f"expected a LineHeightStyle, got {line_height_style!r}")
        self._line_height_style = line_height_style
        return self

    def color(self, color: Rgba) -> Label:
        if not isinstance(color, Rgba):
            raise TypeError(f"expected an Rgba colour, got {color!r}")
        self._color = color
        return self

    def strikethrough(self, strikethrough: bool) -> Label:
        self._strikethrough = bool(strikethrough)
        return self

    def italic(self, italic: bool) -> Label:
        self._italic = bool(italic)
        return self

    def underline(self, underline: bool) -> Label:
        self._underline = bool(underline)
        return self

    def single_line(self) -> Label:
        """Keep the text on one line instead of wrapping it."""
        self._single_line = True
        return self

    def child(self, element: Any) -> Label:
        """Append a child element, usually a string."""
        self._children.append(element)
        return self

    def render(self) -> LabelRender:
        """Resolve the label's text style."""
        ui_label = self._line_height_style is LineHeightStyle.UI_LABEL
        return LabelRender(
            size=self._size,
            color=self._color,
            weight=self._weight,
            line_height=1.0 if ui_label else None,
            italic=self._italic,
            underline_thickness=1.0 if self._underline else None,
            strikethrough=self._strikethrough,
            nowrap=self._single_line,
            children=tuple(self._children),
        )