"""The editing model behind a text input: text, selection, marking and events.

Offsets are string indices. Methods that speak to input methods take and
return UTF-16 ranges, as input-method interfaces do.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from fluentkit.text import (
    next_boundary,
    previous_boundary,
    range_from_utf16,
    range_to_utf16,
    word_range,
)

__all__ = [
    "InputEvent",
    "Change",
    "PressEnter",
    "Focus",
    "Blur",
    "TextEditor",
]

Range = Tuple[int, int]
Listener = Callable[["InputEvent"], None]
Validator = Callable[[str], bool]


@dataclass(frozen=True)
class InputEvent:
    """Base of the events a text editor emits."""


@dataclass(frozen=True)
class Change(InputEvent):
    """The text changed; carries the new text."""

    text: str


@dataclass(frozen=True)
class PressEnter(InputEvent):
    """Enter was pressed."""


@dataclass(frozen=True)
class Focus(InputEvent):
    """The input gained focus."""


@dataclass(frozen=True)
class Blur(InputEvent):
    """The input lost focus."""


def _as_range(value: Range) -> Range:
    start, end = value
    if start < 0 or end < 0:
        raise ValueError(f"range must not be negative: {value!r}")
    if start > end:
        raise ValueError(f"range start is after its end: {value!r}")
    return int(start), int(end)


class TextEditor:
    """Holds editable text with a selection, an optional marked (IME) range,
    an optional validator, and listeners for :class:`InputEvent`."""

    def __init__(
        self,
        text: str = "",
        *,
        placeholder: str = "",
        multi_line: bool = False,
        rows: int = 2,
        validate: Optional[Validator] = None,
        disabled: bool = False,
    ) -> None:
        if rows < 0:
            raise ValueError(f"rows must not be negative: {rows!r}")
        if validate is not None and not callable(validate):
            raise TypeError("validate must be callable")
        self.text = str(text)
        self.placeholder = str(placeholder)
        self.multi_line = bool(multi_line)
        self.rows = int(rows)
        self.validate = validate
        self.disabled = bool(disabled)
        self.selected_range: Range = (0, 0)
        self.selection_reversed = False
        self.marked_range: Optional[Range] = None
        self.selected_word_range: Optional[Range] = None
        self._listeners: list[Listener] = []

    # events

    def subscribe(self, callback: Listener) -> Callable[[], None]:
        """Call ``callback`` with every emitted event; return an unsubscriber."""
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _emit(self, event: InputEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    # state

    def set_text(self, text: str) -> None:
        """Replace the whole text and put the cursor at the start."""
        whole = range_to_utf16(self.text, 0, len(self.text))
        self.replace_text_in_range(whole, str(text))
        self.selected_range = (0, 0)

    def set_disabled(self, disabled: bool) -> None:
        self.disabled = bool(disabled)

    def _check_offset(self, offset: int) -> int:
        if not 0 <= offset <= len(self.text):
            raise ValueError(
                f"offset {offset!r} outside text of length {len(self.text)}"
            )
        return int(offset)

    # selection

    def cursor_offset(self) -> int:
        """The end of the selection the cursor sits on."""
        start, end = self.selected_range
        return start if self.selection_reversed else end

    def move_to(self, offset: int) -> None:
        """Collapse the selection onto ``offset``."""
        offset = self._check_offset(offset)
        self.selected_range = (offset, offset)

    def select_to(self, offset: int) -> None:
        """Extend the selection from its anchor to ``offset``."""
        offset = self._check_offset(offset)
        start, end = self.selected_range
        if self.selection_reversed:
            start = offset
        else:
            end = offset
        if end < start:
            self.selection_reversed = not self.selection_reversed
            start, end = end, start
        if self.selected_word_range is not None:
            word_start, word_end = self.selected_word_range
            start = min(start, word_start)
            end = max(end, word_end)
        self.selected_range = (start, end)

    def select_word(self, offset: int) -> None:
        """Select the word around ``offset`` and keep it during drags."""
        offset = self._check_offset(offset)
        self.selected_range = word_range(self.text, offset)
        self.selected_word_range = self.selected_range

    def unselect(self) -> None:
        """Collapse the selection onto the cursor."""
        cursor = self.cursor_offset()
        self.selected_range = (cursor, cursor)

    # lines

    def start_of_line(self) -> int:
        """Offset of the start of the cursor's line."""
        if not self.multi_line:
            return 0
        offset = previous_boundary(self.text, self.cursor_offset())
        return self.text[: offset + 1].rfind("\n") + 1

    def end_of_line(self) -> int:
        """Offset of the end of the cursor's line."""
        if not self.multi_line:
            return len(self.text)
        offset = next_boundary(self.text, self.cursor_offset())
        if offset > 0 and self.text[offset - 1] == "\n":
            return offset
        found = self.text.find("\n", offset)
        return found if found >= 0 else len(self.text)

    # input-method interface (UTF-16 ranges)

    def text_for_range(self, start: int, end: int) -> str:
        """The text within a UTF-16 range."""
        start, end = _as_range((start, end))
        lo, hi = range_from_utf16(self.text, start, end)
        return self.text[lo:hi]

    def selected_text_range(self) -> Range:
        """The selection as a UTF-16 range."""
        return range_to_utf16(self.text, *self.selected_range)

    def marked_text_range(self) -> Optional[Range]:
        """The marked range as a UTF-16 range, or None."""
        if self.marked_range is None:
            return None
        return range_to_utf16(self.text, *self.marked_range)

    def unmark_text(self) -> None:
        self.marked_range = None

    def _target_range(self, range_utf16: Optional[Range]) -> Range:
        if range_utf16 is not None:
            start, end = _as_range(range_utf16)
            return range_from_utf16(self.text, start, end)
        if self.marked_range is not None:
            return self.marked_range
        return self.selected_range

    def _is_valid_input(self, new_text: str) -> bool:
        if not new_text:
            return True
        return self.validate is None or bool(self.validate(new_text))

    def _splice(self, range_utf16: Optional[Range], new_text: str) -> Optional[Range]:
        if self.disabled:
            return None
        start, end = self._target_range(range_utf16)
        pending = self.text[:start] + new_text + self.text[end:]
        if not self._is_valid_input(pending):
            return None
        self.text = pending
        return start, end

    def replace_text_in_range(
        self, range_utf16: Optional[Range], new_text: str
    ) -> bool:
        """Replace a UTF-16 range (or the marked range, or the selection).

        Returns False when the editor is disabled or the validator rejects
        the result; the text is then left alone.
        """
        new_text = str(new_text)
        replaced = self._splice(range_utf16, new_text)
        if replaced is None:
            return False
        cursor = replaced[0] + len(new_text)
        self.selected_range = (cursor, cursor)
        self.marked_range = None
        self._emit(Change(self.text))
        return True

    def replace_and_mark_text_in_range(
        self,
        range_utf16: Optional[Range],
        new_text: str,
        new_selected_range_utf16: Optional[Range] = None,
    ) -> bool:
        """Replace like :meth:`replace_text_in_range` and mark the new text."""
        new_text = str(new_text)
        replaced = self._splice(range_utf16, new_text)
        if replaced is None:
            return False
        start, end = replaced
        self.marked_range = (start, start + len(new_text))
        if new_selected_range_utf16 is not None:
            sel_start, sel_end = _as_range(new_selected_range_utf16)
            sel_start, sel_end = range_from_utf16(self.text, sel_start, sel_end)
            self.selected_range = (sel_start + start, sel_end + end)
        else:
            cursor = start + len(new_text)
            self.selected_range = (cursor, cursor)
        self._emit(Change(self.text))
        return True