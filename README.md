# fluentkit

Fluent-style widget descriptions, colour themes and a toolkit-independent
text input editing model.

Widgets here do not draw anything. Each is a small builder whose `render`
method returns a frozen description (colours, sizes, cursor, children) that
a drawing layer can consume. The text input is an editing model: cursor
movement, selection, grapheme-aware deletion, line navigation, a clipboard,
input-method marked text, UTF-16 offset conversion, cursor blinking and
scroll clamping.

## Installation

```
pip install fluentkit
```

## Themes

```python
from fluentkit.theme import Theme, WindowAppearance, set_theme, current_theme, rgb, rgba

set_theme(Theme.system(WindowAppearance.DARK))
theme = current_theme()
print(theme.brightness, theme.colors.primary.to_hex())

accent = rgb(0x0F6CBD)        # opaque
overlay = rgba(0x3311FF30)    # with alpha
```

`Theme.light()` and `Theme.dark()` hold the two built-in `ColorScheme`s.
`current_theme()` raises `LookupError` until `set_theme` has been called.
Widget `render` methods and `ButtonAppearance` style methods take a theme
argument and fall back to the installed theme when it is omitted.

## Widgets

```python
from fluentkit.button import Button, ButtonAppearance, ButtonShape, ToggleButton
from fluentkit.divider import Divider, DividerStyle
from fluentkit.theme import Theme, rgb

theme = Theme.light()

button = (
    Button(1)
    .label("Outline")
    .appearance(ButtonAppearance.OUTLINE)
    .shape(ButtonShape.CIRCULAR)
    .on_click(lambda event: print("clicked"))
)
print(button.render(theme))
button.click()                   # True: the handler ran

toggle = ToggleButton(2).label("Bold").toggle_state(True)
print(toggle.render(theme).style)

print(Divider.horizontal().style(DividerStyle.STRONG).render(theme))
print(Divider.vertical().style(DividerStyle.custom(rgb(0xC239B3))).render(theme))
```

Other widgets:

- `fluentkit.label.Label` – size (`LabelSize`), weight, colour, italic,
  underline, strikethrough, single-line, and `LineHeightStyle`.
- `fluentkit.tab.Tab` – a tab header with selected and disabled states and a
  click handler called with `True`.
- `fluentkit.titlebar.TitleBar` – title bar height and left padding per
  `Platform`, with `WindowsWindowControls` caption buttons on Windows.

Shared values: `fluentkit.styles.BorderRadius`, `fluentkit.toggle.ToggleState`,
`fluentkit.button.CursorStyle` and `fluentkit.platform.Platform`
(`Platform.current()` raises `RuntimeError` on an unsupported system).

## Text input

```python
from fluentkit.input import TextInput, key_bindings
from fluentkit.editor import Change
from fluentkit.platform import Platform

field = TextInput(placeholder="Type here...")
field.subscribe(lambda event: print(event))
field.set_text("Hello world")
field.select_all()
field.cut()          # returns "Hello world" and stores it on field.clipboard
field.paste()
print(field.text)

field.dispatch("left")
for binding in key_bindings(Platform.LINUX):
    print(binding.keystroke, binding.action)
```

`TextInput` offers `left`, `right`, `up`, `down`, `select_left`,
`select_right`, `select_up`, `select_down`, `select_all`, `home`, `end`,
`select_to_home`, `select_to_end`, `backspace`, `delete`,
`delete_to_beginning_of_line`, `delete_to_end_of_line`, `enter`, `copy`,
`cut` and `paste`, plus `focus`, `blur`, `show_cursor` and `scroll`.
`dispatch` runs an action by name; editing actions are refused while the
input is disabled, and line movement only works with `multi_line=True`.
A `validate` callable can reject edits. Events are `Change`, `PressEnter`,
`Focus` and `Blur`.

Lower-level pieces:

- `fluentkit.editor.TextEditor` – text, selection, marked range, events and
  the UTF-16 based input-method methods (`text_for_range`,
  `replace_text_in_range`, `replace_and_mark_text_in_range`, ...).
- `fluentkit.text` – `offset_to_utf16`, `offset_from_utf16`,
  `range_to_utf16`, `range_from_utf16`, `previous_boundary`,
  `next_boundary`, `is_word_char` and `word_range`.
- `fluentkit.blink_cursor.BlinkCursor` – blink and pause timing; time moves
  only through `advance(now)`.

## What it does not do

There is no window, rendering or event loop. Nothing here shapes or paints
text, so the input has no mouse hit-testing or layout of wrapped lines; the
caller supplies content and viewport sizes for `scroll`. The `undo`, `redo`
and `show_character_palette` actions appear in the key bindings but
`dispatch` does nothing for them and returns `False`. The clipboard is an
in-memory `Clipboard` object, not the system clipboard.

## Running the tests

```
pip install "fluentkit[test]"
pytest
```