"""Shared style constants."""

from __future__ import annotations

from enum import Enum

__all__ = ["BorderRadius"]


class BorderRadius(Enum):
    """Corner radii, from square to fully rounded."""

    NONE = "none"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"
    CIRCULAR = "circular"

    def size(self) -> float:
        """Return the radius in pixels."""
        return _SIZES[self]


_SIZES = {
    BorderRadius.NONE: 0.0,
    BorderRadius.SMALL: 2.0,
    BorderRadius.MEDIUM: 4.0,
    BorderRadius.LARGE: 6.0,
    BorderRadius.XLARGE: 8.0,
    BorderRadius.CIRCULAR: 10000.0,
}