"""A single- or multi-line text input: key bindings, editing actions,
clipboard, cursor blinking and scrolling on top of the editing model."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

from fluentkit.blink_cursor import BlinkCursor
from fluentkit.editor import Blur, Focus, PressEnter, TextEditor, Validator
from fluentkit.platform import Platform
from fluentkit.text import next_boundary, previous_boundary, range_to_utf16

__all__ = ["KeyBinding", "key_bindings", "Clipboard", "TextInput", "CONTEXT"]

CONTEXT = "Input"

_EDITING_ACTIONS = frozenset(
    {
        "backspace",
        "delete",
        "delete_to_beginning_of_line",
        "delete_to_end_of_line",
        "enter",
    }
)
_MULTI_LINE_ACTIONS = frozenset({"up", "down", "select_up", "select_down"})
_ALWAYS_ACTIONS = frozenset(
    {
        "left",
        "right",
        "select_left",
        "select_right",
        "select_all",
        "select_to_home",
        "select_to_end",
        "home",
        "end",
        "copy",
        "paste",
        "cut",
    }
)
_UNHANDLED_ACTIONS = frozenset({"show_character_palette", "undo", "redo"})


@dataclass(frozen=True)
class KeyBinding:
    """A keystroke bound to a named action within a key context."""

    keystroke: str
    action: str
    context: Optional[str] = CONTEXT


def key_bindings(platform: Optional[Platform] = None) -> list[KeyBinding]:
    """The key bindings of a text input on the given platform."""
    platform = platform if platform is not None else Platform.current()
    mac = platform is Platform.MAC
    entries: list[tuple[str, str, bool]] = [
        ("backspace", "backspace", True),
        ("delete", "delete", True),
        ("cmd-backspace", "delete_to_beginning_of_line", mac),
        ("cmd-delete", "delete_to_end_of_line", mac),
        ("enter", "enter", True),
        ("up", "up", True),
        ("down", "down", True),
        ("left", "left", True),
        ("right", "right", True),
        ("shift-left", "select_left", True),
        ("shift-right", "select_right", True),
        ("shift-up", "select_up", True),
        ("shift-down", "select_down", True),
        ("home", "home", True),
        ("end", "end", True),
        ("shift-home", "select_to_home", True),
        ("shift-end", "select_to_end", True),
        ("ctrl-shift-a", "select_to_home", mac),
        ("ctrl-shift-e", "select_to_end", mac),
        ("shift-cmd-left", "select_to_home", mac),
        ("shift-cmd-right", "select_to_end", mac),
        ("ctrl-cmd-space", "show_character_palette", mac),
        ("cmd-a", "select_all", mac),
        ("ctrl-a", "select_all", not mac),
        ("cmd-c", "copy", mac),
        ("ctrl-c", "copy", not mac),
        ("cmd-x", "cut", mac),
        ("ctrl-x", "cut", not mac),
        ("cmd-v", "paste", mac),
        ("ctrl-v", "paste", not mac),
        ("ctrl-a", "home", mac),
        ("cmd-left", "home", mac),
        ("ctrl-e", "end", mac),
        ("cmd-right", "end", mac),
        ("cmd-z", "undo", mac),
        ("cmd-shift-z", "redo", mac),
        ("ctrl-z", "undo", not mac),
        ("ctrl-y", "redo", not mac),
    ]
    return [KeyBinding(key, action) for key, action, enabled in entries if enabled]


@dataclass
class Clipboard:
    """A clipboard holding at most one piece of text."""

    text: Optional[str] = None

    def read(self) -> Optional[str]:
        return self.text

    def write(self, text: str) -> None:
        self.text = str(text)


class TextInput(TextEditor):
    """A text input field with editing actions, focus and a blinking cursor."""

    def __init__(
        self,
        text: str = "",
        *,
        placeholder: str = "",
        multi_line: bool = False,
        rows: int = 2,
        validate: Optional[Validator] = None,
        disabled: bool = False,
        appearance: bool = True,
        clipboard: Optional[Clipboard] = None,
        clock: Optional[Callable[[], float]] = None,
        content_size: tuple[float, float] = (0.0, 0.0),
        viewport_size: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        super().__init__(
            text,
            placeholder=placeholder,
            multi_line=multi_line,
            rows=rows,
            validate=validate,
            disabled=disabled,
        )
        self.appearance = bool(appearance)
        self.clipboard = clipboard if clipboard is not None else Clipboard()
        self.blink_cursor = BlinkCursor()
        self.focused = False
        self._clock = clock if clock is not None else time.monotonic
        self.scroll_offset: tuple[float, float] = (0.0, 0.0)
        self.content_size = (float(content_size[0]), float(content_size[1]))
        self.viewport_size = (float(viewport_size[0]), float(viewport_size[1]))

    # focus and cursor

    def _pause_blink_cursor(self) -> None:
        self.blink_cursor.pause(self._clock())

    def focus(self, now: Optional[float] = None) -> None:
        """Give the input focus and start the cursor blinking."""
        self.focused = True
        self.blink_cursor.start(self._clock() if now is None else now)
        self._emit(Focus())

    def blur(self) -> None:
        """Take focus away, collapse the selection and stop blinking."""
        self.focused = False
        self.unselect()
        self.blink_cursor.stop()
        self._emit(Blur())

    def show_cursor(self) -> bool:
        """Whether the cursor is drawn: focused and in its visible phase."""
        return self.focused and self.blink_cursor.visible()

    def move_to(self, offset: int) -> None:
        super().move_to(offset)
        self._pause_blink_cursor()

    # movement

    def left(self) -> None:
        self._pause_blink_cursor()
        start, end = self.selected_range
        if start == end:
            self.move_to(previous_boundary(self.text, self.cursor_offset()))
        else:
            self.move_to(start)

    def right(self) -> None:
        self._pause_blink_cursor()
        start, end = self.selected_range
        if start == end:
            self.move_to(next_boundary(self.text, end))
        else:
            self.move_to(end)

    def up(self) -> None:
        if not self.multi_line:
            return
        self._pause_blink_cursor()
        self.move_to(max(self.start_of_line() - 1, 0))

    def down(self) -> None:
        if not self.multi_line:
            return
        self._pause_blink_cursor()
        self.move_to(min(self.end_of_line() + 1, len(self.text)))

    def select_left(self) -> None:
        self.select_to(previous_boundary(self.text, self.cursor_offset()))

    def select_right(self) -> None:
        self.select_to(next_boundary(self.text, self.cursor_offset()))

    def select_up(self) -> None:
        if not self.multi_line:
            return
        self.select_to(max(self.start_of_line() - 1, 0))

    def select_down(self) -> None:
        if not self.multi_line:
            return
        self.select_to(min(self.end_of_line() + 1, len(self.text)))

    def select_all(self) -> None:
        self.move_to(0)
        self.select_to(len(self.text))

    def home(self) -> None:
        self._pause_blink_cursor()
        self.move_to(self.start_of_line())

    def end(self) -> None:
        self._pause_blink_cursor()
        self.move_to(self.end_of_line())

    def select_to_home(self) -> None:
        self.select_to(self.start_of_line())

    def select_to_end(self) -> None:
        self.select_to(self.end_of_line())

    # editing

    def backspace(self) -> None:
        start, end = self.selected_range
        if start == end:
            self.select_to(previous_boundary(self.text, self.cursor_offset()))
        self.replace_text_in_range(None, "")
        self._pause_blink_cursor()

    def delete(self) -> None:
        start, end = self.selected_range
        if start == end:
            self.select_to(next_boundary(self.text, self.cursor_offset()))
        self.replace_text_in_range(None, "")
        self._pause_blink_cursor()

    def _delete_between(self, a: int, b: int) -> None:
        lo, hi = min(a, b), max(a, b)
        self.replace_text_in_range(range_to_utf16(self.text, lo, hi), "")
        self._pause_blink_cursor()

    def delete_to_beginning_of_line(self) -> None:
        self._delete_between(self.start_of_line(), self.cursor_offset())

    def delete_to_end_of_line(self) -> None:
        self._delete_between(self.cursor_offset(), self.end_of_line())

    def enter(self) -> None:
        """Insert a line break in multi-line mode; always emit PressEnter."""
        if self.multi_line:
            self.replace_text_in_range(None, "\n")
            target = next_boundary(self.text, self.cursor_offset()) - 1
            self.move_to(max(target, 0))
        self._emit(PressEnter())

    # clipboard

    def copy(self) -> Optional[str]:
        """Copy the selection to the clipboard; return the copied text."""
        start, end = self.selected_range
        if start == end:
            return None
        selected = self.text[start:end]
        self.clipboard.write(selected)
        return selected

    def cut(self) -> Optional[str]:
        """Move the selection to the clipboard; return the cut text."""
        start, end = self.selected_range
        if start == end:
            return None
        selected = self.text[start:end]
        self.clipboard.write(selected)
        self.replace_text_in_range(None, "")
        return selected

    def paste(self) -> bool:
        """Insert the clipboard text; line breaks are dropped in single-line mode."""
        content = self.clipboard.read()
        if content is None:
            return False
        if not self.multi_line:
            content = content.replace("\n", "")
        return self.replace_text_in_range(None, content)

    # dispatch and scrolling

    def dispatch(self, action: str) -> bool:
        """Run a named action as a key binding would; return True if it ran."""
        if action in _UNHANDLED_ACTIONS:
            return False
        if action in _EDITING_ACTIONS:
            if self.disabled:
                return False
        elif action in _MULTI_LINE_ACTIONS:
            if not self.multi_line:
                return False
        elif action not in _ALWAYS_ACTIONS:
            raise ValueError(f"unknown action: {action!r}")
        handlers: dict[str, Callable[[], object]] = {
            "left": self.left,
            "right": self.right,
            "up": self.up,
            "down": self.down,
            "select_left": self.select_left,
            "select_right": self.select_right,
            "select_up": self.select_up,
            "select_down": self.select_down,
            "select_all": self.select_all,
            "home": self.home,
            "end": self.end,
            "select_to_home": self.select_to_home,
            "select_to_end": self.select_to_end,
            "backspace": self.backspace,
            "delete": self.delete,
            "delete_to_beginning_of_line": self.delete_to_beginning_of_line,
            "delete_to_end_of_line": self.delete_to_end_of_line,
            "enter": self.enter,
            "copy": self.copy,
            "cut": self.cut,
            "paste": self.paste,
        }
        handlers[action]()
        return True

    def scroll(self, dx: float, dy: float) -> tuple[float, float]:
        """Scroll by a pixel delta, clamped to the content; return the offset."""
        content_w, content_h = self.content_size
        view_w, view_h = self.viewport_size
        min_x = min(view_w - content_w, 0.0)
        min_y = min(view_h - content_h, 0.0)
        x = self.scroll_offset[0] + dx
        y = self.scroll_offset[1] + dy
        self.scroll_offset = (min(max(x, min_x), 0.0), min(max(y, min_y), 0.0))
        return self.scroll_offset