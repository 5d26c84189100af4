"""A thin horizontal or vertical separator line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from fluentkit.theme import Rgba, Theme, current_theme

__all__ = ["Axis", "DividerStyle", "DividerRender", "Divider"]


class Axis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class _Kind(Enum):
    DEFAULT = "default"
    SUBTLE = "subtle"
    STRONG = "strong"
    PRIMARY = "primary"
    CUSTOM = "custom"


@dataclass(frozen=True)
class DividerStyle:
    """How strongly a divider stands out, or a custom colour."""

    kind: _Kind = _Kind.DEFAULT
    color: Rgba | None = None

    DEFAULT: ClassVar[DividerStyle]
    SUBTLE: ClassVar[DividerStyle]
    STRONG: ClassVar[DividerStyle]
    PRIMARY: ClassVar[DividerStyle]

    def __post_init__(self) -> None:
        if self.kind is _Kind.CUSTOM:
            if not isinstance(self.color, Rgba):
                raise TypeError("a custom divider style needs an Rgba colour")
        elif self.color is not None:
            raise ValueError("only a custom divider style carries a colour")

    @staticmethod
    def custom(color: Rgba) -> DividerStyle:
        """A style that paints the divider in the given colour."""
        return DividerStyle(_Kind.CUSTOM, color)

    def fill(self, theme: Theme | None = None) -> Rgba:
        """The colour the divider is painted with."""
        if self.kind is _Kind.CUSTOM:
            assert self.color is not None
            return self.color
        colors = (theme if theme is not None else current_theme()).colors
        if self.kind is _Kind.SUBTLE:
            return colors.neutral_stroke_subtle
        if self.kind is _Kind.STRONG:
            return colors.neutral_stroke
        if self.kind is _Kind.PRIMARY:
            return colors.primary_stroke
        return colors.neutral_stroke_dim


DividerStyle.DEFAULT = DividerStyle(_Kind.DEFAULT)
DividerStyle.SUBTLE = DividerStyle(_Kind.SUBTLE)
DividerStyle.STRONG = DividerStyle(_Kind.STRONG)
DividerStyle.PRIMARY = DividerStyle(_Kind.PRIMARY)


@dataclass(frozen=True)
class DividerRender:
    """A rendered divider: it spans its container along its axis."""

    axis: Axis
    color: Rgba
    label: str | None
    thickness: float = 1.0


class Divider:
    """A one-pixel line separating content."""

    def __init__(self, axis: Axis) -> None:
        if not isinstance(axis, Axis):
            raise TypeError(f"expected an Axis, got {axis!r}")
        self.axis = axis
        self._label: str | None = None
        self._style = DividerStyle.DEFAULT

    @staticmethod
    def vertical() -> Divider:
        return Divider(Axis.VERTICAL)

    @staticmethod
    def horizontal() -> Divider:
        return Divider(Axis.HORIZONTAL)

    def style(self, style: DividerStyle) -> Divider:
        if not isinstance(style, DividerStyle):
            raise TypeError(f"expected a DividerStyle, got {style!r}")
        self._style = style
        return self

    def label(self, label: Any) -> Divider:
        self._label = str(label)
        return self

    def render(self, theme: Theme | None = None) -> DividerRender:
        """Resolve the divider's colour against a theme."""
        return DividerRender(
            axis=self.axis,
            color=self._style.fill(theme),
            label=self._label,
        )