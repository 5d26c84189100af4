import pytest

from fluentkit.editor import Blur, Change, Focus, PressEnter
from fluentkit.input import Clipboard, KeyBinding, TextInput, key_bindings
from fluentkit.platform import Platform


def make(text="", **kwargs):
    kwargs.setdefault("clock", lambda: 0.0)
    return TextInput(text, **kwargs)


def test_key_bindings_mac_uses_cmd():
    bindings = key_bindings(Platform.MAC)
    assert KeyBinding("cmd-a", "select_all") in bindings
    assert KeyBinding("ctrl-a", "select_all") not in bindings
    assert all(b.context == "Input" for b in bindings)


def test_key_bindings_linux_has_no_cmd():
    bindings = key_bindings(Platform.LINUX)
    assert KeyBinding("ctrl-a", "select_all") in bindings
    assert not [b for b in bindings if "cmd" in b.keystroke]


def test_left_and_right_move_cursor():
    text = "abc"
    inp = make(text)
    inp.move_to(len(text))
    inp.left()
    assert inp.cursor_offset() == len(text) - 1
    inp.right()
    assert inp.cursor_offset() == len(text)


def test_left_collapses_selection_to_start():
    inp = make("hello")
    inp.select_all()
    inp.left()
    assert inp.selected_range == (0, 0)


def test_select_all():
    text = "hello world"
    inp = make(text)
    inp.select_all()
    assert inp.selected_range == (0, len(text))


def test_backspace_removes_previous_char_and_emits_change():
    text = "hello"
    inp = make(text)
    events = []
    inp.subscribe(events.append)
    inp.move_to(len(text))
    inp.backspace()
    assert inp.text == text[:-1]
    assert events == [Change(text[:-1])]


def test_backspace_removes_whole_grapheme():
    prefix = "a"
    inp = make(prefix + "e\u0301")
    inp.move_to(len(inp.text))
    inp.backspace()
    assert inp.text == prefix


def test_delete_at_start():
    text = "xyz"
    inp = make(text)
    inp.delete()
    assert inp.text == text[1:]
    assert inp.cursor_offset() == 0


def test_single_line_home_end():
    text = "some text"
    inp = make(text)
    inp.move_to(3)
    inp.end()
    assert inp.cursor_offset() == len(text)
    inp.home()
    assert inp.cursor_offset() == 0


def test_multi_line_home_end():
    text = "ab\ncd"
    inp = make(text, multi_line=True)
    inp.move_to(len(text) - 1)
    inp.home()
    assert inp.cursor_offset() == text.index("\n") + 1
    inp.end()
    assert inp.cursor_offset() == len(text)


def test_up_down_ignored_in_single_line():
    inp = make("abc")
    inp.move_to(1)
    inp.up()
    inp.down()
    assert inp.cursor_offset() == 1
    assert inp.dispatch("up") is False


def test_copy_cut_paste_roundtrip():
    text = "hello world"
    clipboard = Clipboard()
    inp = make(text, clipboard=clipboard)
    inp.move_to(0)
    inp.select_to(5)
    assert inp.copy() == text[:5]
    assert clipboard.read() == text[:5]
    inp.cut()
    assert inp.text == text[5:]
    inp.move_to(len(inp.text))
    inp.paste()
    assert inp.text == text[5:] + text[:5]


def test_copy_without_selection_returns_none():
    clipboard = Clipboard()
    inp = make("abc", clipboard=clipboard)
    assert inp.copy() is None
    assert clipboard.read() is None


def test_paste_single_line_strips_newlines():
    pasted = "x\ny"
    inp = make("", clipboard=Clipboard(pasted))
    inp.paste()
    assert inp.text == pasted.replace("\n", "")


def test_paste_multi_line_keeps_newlines():
    pasted = "x\ny"
    inp = make("", multi_line=True, clipboard=Clipboard(pasted))
    inp.paste()
    assert inp.text == pasted


def test_disabled_blocks_editing_dispatch():
    text = "abc"
    inp = make(text, disabled=True)
    inp.move_to(len(text))
    assert inp.dispatch("backspace") is False
    assert inp.text == text


def test_dispatch_runs_actions_and_rejects_unknown():
    text = "abc"
    inp = make(text)
    assert inp.dispatch("select_all") is True
    assert inp.selected_range == (0, len(text))
    assert inp.dispatch("undo") is False
    with pytest.raises(ValueError):
        inp.dispatch("fly")


def test_enter_single_line_emits_press_enter_only():
    text = "abc"
    inp = make(text)
    events = []
    inp.subscribe(events.append)
    inp.enter()
    assert inp.text == text
    assert events == [PressEnter()]


def test_enter_multi_line_inserts_break():
    text = "abcd"
    inp = make(text, multi_line=True)
    inp.move_to(2)
    inp.enter()
    assert inp.text == text[:2] + "\n" + text[2:]
    assert inp.cursor_offset() == 2 + 1


def test_delete_to_beginning_of_line():
    text = "ab\ncd"
    inp = make(text, multi_line=True)
    inp.move_to(len(text))
    inp.delete_to_beginning_of_line()
    assert inp.text == text[: text.index("\n") + 1]


def test_focus_and_blur_events_and_cursor():
    inp = make("abc")
    events = []
    inp.subscribe(events.append)
    assert inp.show_cursor() is False
    inp.focus(0.0)
    assert inp.show_cursor() is True
    inp.blur()
    assert inp.show_cursor() is False
    assert events == [Focus(), Blur()]


def test_blur_collapses_selection():
    inp = make("hello")
    inp.select_all()
    inp.blur()
    start, end = inp.selected_range
    assert start == end


def test_scroll_is_clamped_to_content():
    content = (100.0, 50.0)
    viewport = (40.0, 20.0)
    inp = make("abc", content_size=content, viewport_size=viewport)
    assert inp.scroll(-1000, -1000) == (
        viewport[0] - content[0],
        viewport[1] - content[1],
    )
    assert inp.scroll(5000, 5000) == (0.0, 0.0)


def test_scroll_without_overflow_stays_at_origin():
    inp = make("abc", content_size=(10, 10), viewport_size=(40, 40))
    assert inp.scroll(-7, -7) == (0.0, 0.0)