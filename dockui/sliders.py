"""Draggable slider handles kept inside their boundaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .core import Box2, Event, EventType, Key, Point2

ARROW = "arrow"

CursorHook = Callable[[str], None]


def keep_in_bounds(x: float, y: float, width: float, height: float, bounds: Box2) -> Box2:
    """A box of the given size at (x, y), pushed back inside ``bounds``."""
    if x < bounds.x0:
        x = bounds.x0
    if x + width >= bounds.x1:
        x = bounds.x1 - width
    if y < bounds.y0:
        y = bounds.y0
    if y + height >= bounds.y1:
        y = bounds.y1 - height
    return Box2(x, y, x + width, y + height)


def _nudge(handle: Box2, bounds: Box2, key: Optional[Key]) -> Box2:
    """Move the handle one pixel in the direction of an arrow key, if it fits."""
    if key is Key.LEFT and bounds.x0 <= handle.x0 - 1:
        return Box2(handle.x0 - 1, handle.y0, handle.x1 - 1, handle.y1)
    if key is Key.RIGHT and handle.x1 + 1 < bounds.x1:
        return Box2(handle.x0 + 1, handle.y0, handle.x1 + 1, handle.y1)
    if key is Key.UP and bounds.y0 <= handle.y0 - 1:
        return Box2(handle.x0, handle.y0 - 1, handle.x1, handle.y1 - 1)
    if key is Key.DOWN and handle.y1 + 1 < bounds.y1:
        return Box2(handle.x0, handle.y0 + 1, handle.x1, handle.y1 + 1)
    return handle


def _centred(cursor: Point2, handle: Box2, bounds: Box2) -> Box2:
    width, height = handle.width, handle.height
    return keep_in_bounds(cursor.x - 0.5 * width, cursor.y - 0.5 * height, width, height, bounds)


@dataclass
class Slider:
    """A single handle that can be dragged, clicked into place or nudged by keys."""

    handle: Box2
    boundaries: Box2
    grab_pos: Point2 = field(default_factory=Point2)
    is_grabbing: bool = False
    is_active: bool = False
    is_focused: bool = False
    set_cursor: Optional[CursorHook] = None

    def _arrow(self) -> None:
        if self.set_cursor is not None:
            self.set_cursor(ARROW)

    def process_event(self, event: Event) -> bool:
        """Handle an input event; returns whether the slider consumed it."""
        width, height = self.handle.width, self.handle.height
        cursor = event.pointer

        if event.type is EventType.MOUSE_MOVE:
            if self.is_grabbing:
                if cursor != self.grab_pos:
                    self.handle = keep_in_bounds(
                        self.grab_pos.x + cursor.x,
                        self.grab_pos.y + cursor.y,
                        width,
                        height,
                        self.boundaries,
                    )
                self._arrow()
                return True
            if self.handle.contains(cursor):
                self.is_active = True
                self._arrow()
                return True
            if self.boundaries.contains(cursor):
                self._arrow()
                return True
            self.is_active = False
            return False

        if event.type is EventType.MOUSE_LEFT_BUTTON_DOWN:
            if self.is_active:
                self.is_grabbing = True
                self.grab_pos = self.handle.p0 - cursor
                return True
            if self.boundaries.contains(cursor):
                self.handle = _centred(cursor, self.handle, self.boundaries)
                self.is_active = True
                return True
            return False

        if event.type is EventType.MOUSE_LEFT_BUTTON_UP:
            self.is_grabbing = False
            return False

        if event.type is EventType.KEYBOARD_PRESS:
            if not self.is_focused:
                return False
            self.handle = _nudge(self.handle, self.boundaries, event.key)
            return True

        return False


@dataclass
class SliderMixer:
    """Several sliders handled together; ``active`` and ``focused`` are indices."""

    handles: List[Box2]
    boundaries: List[Box2]
    grab_pos: Point2 = field(default_factory=Point2)
    is_grabbing: bool = False
    active: Optional[int] = None
    focused: Optional[int] = None
    set_cursor: Optional[CursorHook] = None

    def __post_init__(self) -> None:
        if len(self.handles) != len(self.boundaries):
            raise ValueError("handles and boundaries must have the same length")

    def _arrow(self) -> None:
        if self.set_cursor is not None:
            self.set_cursor(ARROW)

    def process_event(self, event: Event) -> bool:
        """Handle an input event; returns whether the mixer consumed it."""
        cursor = event.pointer

        if event.type is EventType.MOUSE_MOVE:
            if self.is_grabbing:
                if cursor != self.grab_pos and self.active is not None:
                    handle = self.handles[self.active]
                    self.handles[self.active] = keep_in_bounds(
                        self.grab_pos.x + cursor.x,
                        self.grab_pos.y + cursor.y,
                        handle.width,
                        handle.height,
                        self.boundaries[self.active],
                    )
                self._arrow()
                return True

            self.active = None
            for i, handle in enumerate(self.handles):
                if handle.contains(cursor):
                    self.active = i
                    self._arrow()
                    return True
            if any(bounds.contains(cursor) for bounds in self.boundaries):
                self._arrow()
                return True
            return False

        if event.type is EventType.MOUSE_LEFT_BUTTON_DOWN:
            if self.active is not None:
                self.is_grabbing = True
                self.grab_pos = self.handles[self.active].p0 - cursor
                return True
            for i, (handle, bounds) in enumerate(zip(self.handles, self.boundaries)):
                if bounds.contains(cursor):
                    self.handles[i] = _centred(cursor, handle, bounds)
                    self.active = i
                    return True
            return False

        if event.type is EventType.MOUSE_LEFT_BUTTON_UP:
            self.is_grabbing = False
            return False

        if event.type is EventType.KEYBOARD_PRESS:
            if self.focused is None:
                return False
            index = self.focused
            self.handles[index] = _nudge(self.handles[index], self.boundaries[index], event.key)
            return True

        return False