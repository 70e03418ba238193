"""Geometry primitives and input events shared by the widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Point2:
    """A point or offset in pixel space, y pointing down."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Union[Point2, Number]) -> Point2:
        if isinstance(other, Point2):
            return Point2(self.x + other.x, self.y + other.y)
        if isinstance(other, (int, float)):
            return Point2(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other: Union[Point2, Number]) -> Point2:
        if isinstance(other, Point2):
            return Point2(self.x - other.x, self.y - other.y)
        if isinstance(other, (int, float)):
            return Point2(self.x - other, self.y - other)
        return NotImplemented

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Box2:
    """An axis-aligned box given by its two corners."""

    x0: float = 0.0
    y0: float = 0.0
    x1: float = 0.0
    y1: float = 0.0

    @classmethod
    def from_rect(cls, x: float, y: float, width: float, height: float) -> Box2:
        """Build a box from its top-left corner and its size."""
        return cls(x, y, x + width, y + height)

    @property
    def p0(self) -> Point2:
        return Point2(self.x0, self.y0)

    @property
    def p1(self) -> Point2:
        return Point2(self.x1, self.y1)

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def contains(self, point: Point2) -> bool:
        """Whether the point lies inside; the far edges are excluded."""
        return self.x0 <= point.x < self.x1 and self.y0 <= point.y < self.y1


class EventType(Enum):
    MOUSE_MOVE = auto()
    MOUSE_LEFT_BUTTON_DOWN = auto()
    MOUSE_LEFT_BUTTON_UP = auto()
    MOUSE_DOUBLE_CLICK = auto()
    MOUSE_TRIPLE_CLICK = auto()
    MOUSE_VERTICAL_WHEEL = auto()
    MOUSE_HORIZONTAL_WHEEL = auto()
    KEYBOARD_PRESS = auto()
    KEYBOARD_CHAR = auto()


class Key(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    BACKSPACE = auto()
    DELETE = auto()
    HOME = auto()
    END = auto()
    X = auto()
    C = auto()
    V = auto()


@dataclass(frozen=True)
class Event:
    """A mouse or keyboard event; ``cursor`` is in whole pixels."""

    type: EventType
    cursor: Point2 = field(default_factory=Point2)
    wheel_delta: float = 0.0
    key: Optional[Key] = None
    character: int = 0
    ctrl: bool = False
    shift: bool = False

    @property
    def pointer(self) -> Point2:
        """The cursor position at the centre of its pixel."""
        return self.cursor + 0.5