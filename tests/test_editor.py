import pytest

from fluentkit.editor import Blur, Change, Focus, InputEvent, PressEnter, TextEditor
from fluentkit.text import range_to_utf16


def recording(editor):
    events = []
    editor.subscribe(events.append)
    return events


def test_set_text_replaces_and_puts_cursor_at_start():
    editor = TextEditor("old text")
    editor.move_to(len("old"))
    events = recording(editor)
    editor.set_text("hello")
    assert editor.text == "hello"
    assert editor.selected_range[0] == editor.selected_range[1] == 0
    assert events == [Change("hello")]


def test_events_are_input_events_and_compare_by_value():
    for event in (Change("a"), PressEnter(), Focus(), Blur()):
        assert isinstance(event, InputEvent)
    assert Change("a") == Change("a")
    assert Change("a") != Change("b")


def test_insert_at_cursor():
    editor = TextEditor("abc")
    editor.move_to(len("abc"))
    assert editor.replace_text_in_range(None, "d") is True
    assert editor.text == "abcd"
    assert editor.cursor_offset() == len("abcd")


def test_replace_selection():
    editor = TextEditor("hello world")
    editor.move_to(len("hello "))
    editor.select_to(len("hello world"))
    editor.replace_text_in_range(None, "there")
    assert editor.text == "hello there"
    assert editor.selected_range == (len("hello there"), len("hello there"))


def test_replace_utf16_range_over_surrogate_pair():
    editor = TextEditor("a\U0001F600b")
    editor.replace_text_in_range((1, 3), "x")
    assert editor.text == "axb"


def test_disabled_editor_ignores_edits():
    editor = TextEditor("keep", disabled=True)
    events = recording(editor)
    assert editor.replace_text_in_range(None, "x") is False
    assert editor.text == "keep"
    assert events == []


def test_validator_rejects_and_allows_empty():
    editor = TextEditor("12", validate=str.isdigit)
    editor.move_to(len("12"))
    assert editor.replace_text_in_range(None, "a") is False
    assert editor.text == "12"
    assert editor.replace_text_in_range(None, "3") is True
    assert editor.text == "123"
    editor.set_text("")
    assert editor.text == ""


def test_marked_text_is_replaced_by_commit():
    editor = TextEditor()
    editor.replace_and_mark_text_in_range(None, "ni", None)
    assert editor.marked_text_range() == (0, len("ni"))
    editor.replace_text_in_range(None, "\u4f60")
    assert editor.text == "\u4f60"
    assert editor.marked_text_range() is None
    assert editor.cursor_offset() == len("\u4f60")


def test_mark_with_selection_keeps_selection_width():
    editor = TextEditor("ab")
    editor.move_to(1)
    editor.replace_and_mark_text_in_range(None, "xy", (0, 1))
    assert editor.text == "axyb"
    start, end = editor.selected_range
    assert end - start == 1
    assert editor.marked_range == (1, 1 + len("xy"))


def test_unmark_text():
    editor = TextEditor()
    editor.replace_and_mark_text_in_range(None, "ka")
    editor.unmark_text()
    assert editor.marked_text_range() is None
    assert editor.text == "ka"


def test_select_to_backwards_reverses_selection():
    editor = TextEditor("hello")
    editor.move_to(3)
    editor.select_to(1)
    assert editor.selection_reversed is True
    assert editor.selected_range == (1, 3)
    assert editor.cursor_offset() == 1
    editor.select_to(5)
    assert editor.selection_reversed is False
    assert editor.selected_range == (3, 5)


def test_select_word_and_keep_it_while_extending():
    text = "foo bar_baz qux"
    editor = TextEditor(text)
    start = text.index("bar_baz")
    editor.select_word(start + 2)
    word = (start, start + len("bar_baz"))
    assert editor.selected_range == word
    editor.select_to(start + 1)
    assert editor.selected_range[0] <= word[0]
    assert editor.selected_range[1] >= word[1]


def test_unselect_collapses_on_cursor():
    editor = TextEditor("hello")
    editor.move_to(4)
    editor.select_to(2)
    editor.unselect()
    assert editor.selected_range == (2, 2)


def test_lines_in_multi_line_editor():
    text = "ab\ncd\nef"
    editor = TextEditor(text, multi_line=True)
    editor.move_to(text.index("d"))
    assert editor.start_of_line() == text.index("c")
    assert editor.end_of_line() == text.rindex("\n")


def test_lines_in_single_line_editor():
    text = "ab\ncd"
    editor = TextEditor(text)
    editor.move_to(text.index("d"))
    assert editor.start_of_line() == 0
    assert editor.end_of_line() == len(text)


def test_text_for_range_uses_utf16():
    editor = TextEditor("a\U0001F600b")
    assert editor.text_for_range(1, 3) == "\U0001F600"
    with pytest.raises(ValueError):
        editor.text_for_range(3, 1)


def test_selected_text_range_in_utf16():
    editor = TextEditor("\U0001F600x")
    editor.move_to(1)
    editor.select_to(2)
    assert editor.selected_text_range() == range_to_utf16(editor.text, 1, 2)


def test_unsubscribe_stops_events():
    editor = TextEditor()
    events = []
    unsubscribe = editor.subscribe(events.append)
    editor.replace_text_in_range(None, "a")
    unsubscribe()
    editor.replace_text_in_range(None, "b")
    assert events == [Change("a")]


def test_offsets_outside_text_raise():
    editor = TextEditor("abc")
    with pytest.raises(ValueError):
        editor.move_to(len("abc") + 1)
    with pytest.raises(ValueError):
        editor.select_to(-1)
    with pytest.raises(ValueError):
        editor.replace_text_in_range((2, 1), "x")