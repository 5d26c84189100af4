"""Three-way toggle state."""

from __future__ import annotations

from enum import Enum

__all__ = ["ToggleState"]


class ToggleState(Enum):
    UNSELECTED = "unselected"
    INDETERMINATE = "indeterminate"
    SELECTED = "selected"

    def inverse(self) -> ToggleState:
        """Selected becomes unselected; anything else becomes selected."""
        if self is ToggleState.SELECTED:
            return ToggleState.UNSELECTED
        return ToggleState.SELECTED

    @classmethod
    def from_selected(cls, selected: bool | None) -> ToggleState:
        """Map True to selected, and False or None to unselected."""
        return cls.SELECTED if selected else cls.UNSELECTED