"""Editable text boxes: caret movement, selection, clipboard and typing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Callable, List, Optional, Protocol

from .core import Event, EventType, Key, Point2
from .stringlist import (
    BytesLike,
    StringList,
    StringListPos,
    is_end,
    is_start,
    pos_dec,
    pos_inc,
    pos_less,
)

TEXT_CURSOR = "text"
NEWLINE = 10

CursorHook = Callable[[str], None]
ClipboardWriter = Callable[[bytes], None]
ClipboardReader = Callable[[Callable[[bytes], None]], None]


class TextFlags(IntFlag):
    SINGLE_LINE = 1 << 1
    WRAP = 1 << 2
    DIGITS_ONLY = 1 << 3


class TextLayout(Protocol):
    """Font metrics used to map between pixels and text positions."""

    height: float

    def char_pos(
        self, point: Point2, data: StringList, wrap: bool, max_width: float
    ) -> StringListPos:
        """The text position nearest to ``point``, relative to the text origin."""
        ...

    def metrics(
        self, data: StringList, pos: StringListPos, wrap: bool, max_width: float
    ) -> Point2:
        """The pixel location of ``pos``: x of the caret, y of its line bottom."""
        ...


@dataclass(eq=False)
class TextBox:
    """A rectangle holding editable text."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    data: StringList = field(default_factory=StringList)
    flags: TextFlags = TextFlags(0)
    scroll: Point2 = field(default_factory=Point2)

    @property
    def pos(self) -> Point2:
        return Point2(self.x, self.y)

    @property
    def wraps(self) -> bool:
        return bool(self.flags & TextFlags.WRAP)

    def contains(self, point: Point2) -> bool:
        return self.x <= point.x < self.x + self.width and self.y <= point.y < self.y + self.height


def _none_pos() -> StringListPos:
    return StringListPos(None, 0)


@dataclass
class TextEditor:
    """Routes input to a set of text boxes and keeps the caret and selection.

    ``head`` is the caret, ``tail`` the other end of the selection and ``tors``
    the text position under the mouse.
    """

    layout: TextLayout
    boxes: List[TextBox] = field(default_factory=list)
    pad: Point2 = field(default_factory=Point2)
    active: Optional[TextBox] = None
    hover: Optional[TextBox] = None
    is_selecting: bool = False
    head: StringListPos = field(default_factory=_none_pos)
    tail: StringListPos = field(default_factory=_none_pos)
    tors: StringListPos = field(default_factory=_none_pos)
    copy_to_clipboard: Optional[ClipboardWriter] = None
    request_clipboard: Optional[ClipboardReader] = None
    set_cursor: Optional[CursorHook] = None

    def _text_cursor(self) -> None:
        if self.set_cursor is not None:
            self.set_cursor(TEXT_CURSOR)

    def _max_width(self, textbox: TextBox) -> float:
        return textbox.width - self.pad.x

    def _char_pos(self, textbox: TextBox, point: Point2) -> StringListPos:
        return self.layout.char_pos(point, textbox.data, textbox.wraps, self._max_width(textbox))

    # -- editing ---------------------------------------------------------

    def copy_selection(self) -> bytes:
        """Send the selected bytes to the clipboard and return them."""
        if self.active is None:
            return b""
        data = self.active.data
        if pos_less(self.tail, self.head):
            selected = data.slice(self.tail, self.head)
        else:
            selected = data.slice(self.head, self.tail)
        if self.copy_to_clipboard is not None:
            self.copy_to_clipboard(selected)
        return selected

    def delete_selection(self) -> None:
        """Delete the selection, or the byte before the caret if it is empty."""
        if self.active is None:
            return
        self.head = self.active.data.delete(self.tail, self.head)
        self.tail = self.head

    def insert_text(self, data: BytesLike) -> None:
        """Replace the selection with ``data``."""
        if self.active is None:
            return
        self.head = self.active.data.insert(data, self.tail, self.head)
        self.tail = self.head

    def replace_data(self, textbox: TextBox, data: BytesLike) -> None:
        """Make ``textbox`` hold exactly ``data``."""
        textbox.data.replace(data)

    def get_unsigned(self, textbox: TextBox) -> int:
        """The contents of ``textbox`` as an unsigned integer; empty text is 0."""
        if len(textbox.data) == 0:
            return 0
        raw = bytes(textbox.data)
        if not raw.isdigit():
            raise ValueError(f"not an unsigned integer: {raw!r}")
        return int(raw)

    # -- events ----------------------------------------------------------

    def process_event(self, event: Event) -> bool:
        """Handle an input event; returns whether the editor consumed it."""
        kind = event.type
        if kind is EventType.MOUSE_MOVE:
            return self._mouse_move(event.pointer)
        if kind is EventType.MOUSE_LEFT_BUTTON_DOWN:
            if self.hover is None:
                self.active = None
                return False
            self.active = self.hover
            self.tail = self.head = self.tors
            self.is_selecting = True
            return True
        if kind is EventType.MOUSE_LEFT_BUTTON_UP:
            self.is_selecting = False
            return False
        if kind is EventType.MOUSE_DOUBLE_CLICK:
            if self.hover is None:
                self.active = None
                return False
            self.active = self.hover
            self.tail, self.head = self.active.data.find_word(self.tors)
            return True
        if kind is EventType.MOUSE_TRIPLE_CLICK:
            if self.hover is None:
                self.active = None
                return False
            self.active = self.hover
            data = self.active.data
            self.tail = pos_inc(data.find_last(data.start(), self.head, NEWLINE))
            self.head = data.find_first(self.head, data.end(), NEWLINE)
            return True
        if kind is EventType.KEYBOARD_PRESS:
            if self.active is None:
                return False
            return self._key_press(self.active, event)
        if kind is EventType.KEYBOARD_CHAR:
            if self.active is None:
                return False
            return self._key_char(self.active, event.character)
        return False

    def _mouse_move(self, cursor: Point2) -> bool:
        if self.is_selecting and self.active is not None:
            textbox = self.active
            if textbox.contains(cursor):
                self.head = self._char_pos(textbox, cursor - textbox.pos)
            self._text_cursor()
            return True

        for textbox in self.boxes:
            if textbox.contains(cursor):
                relative = Point2(cursor.x - (textbox.x + self.pad.x), cursor.y - (textbox.y + self.pad.y))
                self.hover = textbox
                self.tors = self._char_pos(textbox, relative)
                self._text_cursor()
                return True
        self.hover = None
        return False

    def _move_caret(self, head: StringListPos, shift: bool) -> None:
        self.head = head
        if not shift:
            self.tail = head

    def _key_press(self, textbox: TextBox, event: Event) -> bool:
        data = textbox.data
        key = event.key

        if key is Key.LEFT:
            if is_start(self.head):
                return False
            if event.ctrl:
                self.head = self.tail = data.find_word(self.head)[0]
            else:
                self._move_caret(pos_dec(self.head), event.shift)
            return True

        if key is Key.RIGHT:
            if is_end(self.head):
                return False
            if event.ctrl:
                self.head = self.tail = data.find_word(self.head)[1]
            else:
                self._move_caret(pos_inc(self.head), event.shift)
            return True

        if key in (Key.UP, Key.DOWN):
            if (key is Key.UP and is_start(self.head)) or (key is Key.DOWN and is_end(self.head)):
                return False
            where = self.layout.metrics(data, self.head, textbox.wraps, self._max_width(textbox))
            if key is Key.UP:
                where = Point2(where.x, where.y - 2 * self.layout.height)
            self._move_caret(self._char_pos(textbox, where), event.shift)
            return True

        if key is Key.BACKSPACE:
            if is_start(self.head) and is_start(self.tail):
                return False
            self.delete_selection()
            return True

        if key is Key.DELETE:
            if is_end(self.head) and is_end(self.tail):
                return False
            if self.head == self.tail:
                self.head = self.tail = pos_inc(self.head)
            self.delete_selection()
            return True

        if key is Key.HOME:
            if event.ctrl:
                head = data.start()
            else:
                head = pos_inc(data.find_last(data.start(), self.head, NEWLINE))
            self._move_caret(head, event.shift)
            return True

        if key is Key.END:
            head = data.end() if event.ctrl else data.find_first(self.head, data.end(), NEWLINE)
            self._move_caret(head, event.shift)
            return True

        if key is Key.X and event.ctrl:
            self.copy_selection()
            self.delete_selection()
            return True

        if key is Key.C and event.ctrl:
            self.copy_selection()
            return True

        if key is Key.V and event.ctrl:
            if self.request_clipboard is not None:
                self.request_clipboard(self.insert_text)
            return True

        return False

    def _key_char(self, textbox: TextBox, character: int) -> bool:
        is_digit = 0x30 <= character <= 0x39
        if not is_digit and textbox.flags & TextFlags.DIGITS_ONLY:
            return False
        if character == NEWLINE and textbox.flags & TextFlags.SINGLE_LINE:
            return False
        self.head = textbox.data.insert(bytes([character]), self.tail, self.head)
        self.tail = self.head
        return True