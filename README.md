# dockui

Input-handling logic for a small desktop UI. It takes mouse and keyboard
events and updates plain Python objects. Each widget has a
`process_event(event)` method that returns `True` when the widget consumed
the event.

## Modules

- `dockui.core` holds the geometry types `Point2` (supports `+` and `-` with
  another point or a number) and `Box2` (`from_rect`, `contains`, `width`,
  `height`, `p0`, `p1`). It also holds the input types `Event`, `EventType`
  and `Key`. `Event.cursor` is in whole pixels. `Event.pointer` is the centre
  of that pixel.
- `dockui.scrollbars` converts between content size, view size, scroll offset
  and thumb geometry. It provides `thumb_dim`, `thumb_offset`,
  `thumb_dim_offset` (returns `(length, offset)`), `scroll_offset`,
  `max_scroll_offset` and `max_thumb_offset`.
- `dockui.sliders` provides:
  - `Slider`, a handle that can be dragged, clicked into place, or moved one
    pixel at a time with the arrow keys while `is_focused` is set.
  - `SliderMixer`, which does the same for several handles. Its `active` and
    `focused` are list indices.
  - `keep_in_bounds`, which pushes a box back inside its bounds.
- `dockui.panels` provides `PanelManager`, which keeps a tree of docked
  `Panel`s and a list of floating ones.
  - `split` and `split_with` build split nodes.
  - `add_tab` builds tab containers.
  - `undock` takes a panel out of the tree and collapses the node it leaves
    behind.
  - `process_event` handles dragging, docking on drop, resizing edges and
    splitters (minimum 100 pixels), closing, and wheel scrolling.
  - You supply two callbacks. `get_dock(manager, cursor)` returns
    `(panel, Alignment)`. `set_active_panel(manager, cursor)` sets `active`
    and `hover`.
  - `panel_at` finds the leaf or tab container under a point.
- `dockui.stringlist` provides `StringList`, editable bytes held as a linked
  list of pieces. New bytes go into a shared, growing `PieceBuffer`.
  - Positions are `StringListPos` values.
  - Methods: `slice`, `find_first`, `find_last`, `find_word`, `insert`,
    `delete`, `replace`, `append` and `startswith`.
  - Helper functions: `is_start`, `is_end`, `pos_inc`, `pos_dec` and
    `pos_less`.
- `dockui.text` provides `TextEditor`, which edits a list of `TextBox`es.
  - Mouse: click-drag selection, double-click word selection and
    triple-click line selection.
  - Caret keys: arrow keys, Ctrl+arrow word jumps, Home/End (with Ctrl for
    the whole text), and Shift to extend the selection.
  - Editing: Backspace, Delete, Ctrl+X/C/V and typed characters.
  - `TextFlags` can restrict input to digits (`DIGITS_ONLY`) or refuse
    newlines (`SINGLE_LINE`).
  - `get_unsigned` parses a box's contents. It returns 0 for empty text and
    raises `ValueError` for anything that is not digits.

## Example

```python
from dockui.scrollbars import thumb_dim_offset
from dockui.stringlist import PieceBuffer, StringList

size, offset = thumb_dim_offset(1000.0, 250.0, 100.0)   # (62.5, 25.0)

buffer = PieceBuffer()
text = StringList(b"hello world", buffer)
head = text.insert(b", dear", text.end(), text.end())
assert bytes(text) == b"hello world, dear"
```

## What it does not do

The package draws nothing and opens no windows. Anything that needs a
platform or a font is left to you:

- `TextEditor` takes a `TextLayout` object that provides `height`,
  `char_pos` and `metrics`.
- The clipboard is reached through the `copy_to_clipboard` and
  `request_clipboard` callables.
- The mouse cursor shape is set through the optional `set_cursor` hooks,
  which receive `"arrow"` or `"text"`.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```