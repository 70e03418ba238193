"""Dockable panels: splitting, tabbing, floating, dragging and resizing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, List, Optional, Tuple

from .core import Event, EventType, Point2

MIN_WIDTH = 100.0
MIN_HEIGHT = 100.0


class Alignment(Enum):
    UNALIGNED = auto()
    LEFT = auto()
    TOP = auto()
    RIGHT = auto()
    BOTTOM = auto()
    CENTER = auto()


class PanelHover(Enum):
    NONE = auto()
    LEFT = auto()
    RIGHT = auto()
    TOP = auto()
    BOTTOM = auto()
    BOTTOM_RIGHT = auto()
    SPLITTER = auto()
    HEADER = auto()
    CLOSING = auto()
    BODY = auto()


class PanelState(Enum):
    REST = auto()
    RESIZE = auto()
    DRAG = auto()


@dataclass
class ScrollArea:
    """Scroll offset and content size of a panel body."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    is_horizontal: bool = False
    is_vertical: bool = False


@dataclass(eq=False)
class Panel:
    """A leaf panel, a split node (``a``/``b``) or a tab container (``tabs``)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    align: Alignment = Alignment.UNALIGNED
    split_point: float = 0.0
    data: Any = None
    a: Optional[Panel] = field(default=None, repr=False)
    b: Optional[Panel] = field(default=None, repr=False)
    parent: Optional[Panel] = field(default=None, repr=False)
    tabs: List[Panel] = field(default_factory=list, repr=False)
    selected: Optional[Panel] = field(default=None, repr=False)
    scroll: ScrollArea = field(default_factory=ScrollArea)

    @property
    def pos(self) -> Point2:
        return Point2(self.x, self.y)

    @pos.setter
    def pos(self, value: Point2) -> None:
        self.x, self.y = value.x, value.y

    @property
    def dim(self) -> Point2:
        return Point2(self.width, self.height)

    @dim.setter
    def dim(self, value: Point2) -> None:
        self.width, self.height = value.x, value.y

    def contains(self, point: Point2) -> bool:
        return self.x <= point.x < self.x + self.width and self.y <= point.y < self.y + self.height


GetDock = Callable[["PanelManager", Point2], Tuple[Optional[Panel], Alignment]]
SetActivePanel = Callable[["PanelManager", Point2], None]


def panel_at(panel: Panel, cursor: Point2) -> Optional[Panel]:
    """The leaf or tab container under ``cursor`` in the tree rooted at ``panel``."""
    if panel.align is Alignment.UNALIGNED:
        return panel if panel.contains(cursor) else None
    found = panel_at(panel.a, cursor)
    if found is not None:
        return found
    return panel_at(panel.b, cursor)


@dataclass
class PanelManager:
    """Owns the docked tree and the floating panels, and routes mouse input.

    ``get_dock`` tells where a dropped panel should dock; ``set_active_panel``
    sets ``active`` and ``hover`` for a cursor position.
    """

    get_dock: GetDock
    set_active_panel: SetActivePanel
    root: Optional[Panel] = None
    floating: List[Panel] = field(default_factory=list)
    active: Optional[Panel] = None
    hover: PanelHover = PanelHover.NONE
    state: PanelState = PanelState.REST
    grab_pos: Point2 = field(default_factory=Point2)

    def _replace_child(self, old: Panel, new: Panel) -> None:
        grand = old.parent
        if grand is None:
            self.root = new
        elif grand.a is old:
            grand.a = new
        else:
            grand.b = new
        new.parent = grand

    def _join(self, old_parent: Panel, align: Alignment, split_point: float, first: Panel) -> Panel:
        new_parent = Panel(
            x=old_parent.x,
            y=old_parent.y,
            width=old_parent.width,
            height=old_parent.height,
            align=align,
            split_point=split_point,
        )
        self._replace_child(old_parent, new_parent)
        new_parent.a = first
        new_parent.b = old_parent
        first.parent = new_parent
        old_parent.parent = new_parent
        return new_parent

    def split(self, old_parent: Panel, align: Alignment, split_point: float) -> Panel:
        """Split ``old_parent`` with a new empty panel on the ``align`` side."""
        return self._join(old_parent, align, split_point, Panel())

    def split_with(self, old_parent: Panel, align: Alignment, panel: Panel) -> Panel:
        """Dock ``panel`` beside ``old_parent``, taking at most half of it."""
        horizontal = align in (Alignment.LEFT, Alignment.RIGHT)
        size = panel.width if horizontal else panel.height
        parent_size = old_parent.width if horizontal else old_parent.height
        return self._join(old_parent, align, min(size, parent_size / 2), panel)

    def undock(self, panel: Panel) -> None:
        """Take ``panel`` out of the tree, collapsing the node it leaves behind."""
        parent = panel.parent
        if parent is None:
            raise ValueError("panel is not docked")

        if parent.align is not Alignment.UNALIGNED:
            sibling = parent.b if parent.a is panel else parent.a
            self._replace_child(parent, sibling)
            panel.parent = None
            sibling.pos = parent.pos
            sibling.dim = parent.dim
            return

        parent.tabs.remove(panel)
        panel.parent = None
        panel.pos = parent.pos
        panel.dim = parent.dim
        if parent.selected is panel:
            parent.selected = parent.tabs[-1] if parent.tabs else None

        if len(parent.tabs) == 1:
            first = parent.tabs.pop()
            parent.selected = None
            self._replace_child(parent, first)

    def add_tab(self, panel: Panel, tab: Panel) -> Panel:
        """Add ``tab`` to ``panel``, wrapping it in a tab container if needed."""
        if not panel.tabs:
            container = Panel(
                x=panel.x,
                y=panel.y,
                width=panel.width,
                height=panel.height,
                align=Alignment.UNALIGNED,
            )
            self._replace_child(panel, container)
            container.tabs.append(panel)
            panel.parent = container
            panel = container

        panel.tabs.append(tab)
        tab.parent = panel
        panel.selected = tab
        tab.pos = panel.pos
        tab.dim = panel.dim
        return panel

    def _bring_to_front(self, panel: Panel) -> None:
        if panel in self.floating:
            self.floating.remove(panel)
            self.floating.append(panel)

    def _drag_split(self, panel: Panel, cursor: Point2) -> None:
        grab = self.grab_pos.x
        if panel.align is Alignment.LEFT:
            panel.split_point = max(MIN_WIDTH, grab + cursor.x)
        elif panel.align is Alignment.TOP:
            panel.split_point = max(MIN_HEIGHT, grab + cursor.y)
        elif panel.align is Alignment.RIGHT:
            panel.split_point = max(MIN_WIDTH, grab - cursor.x)
        elif panel.align is Alignment.BOTTOM:
            panel.split_point = max(MIN_HEIGHT, grab - cursor.y)

    def _resize(self, panel: Panel, cursor: Point2) -> None:
        pos = self.grab_pos + cursor
        hover = self.hover
        if hover is PanelHover.BOTTOM_RIGHT:
            panel.width = max(MIN_WIDTH, pos.x - panel.x)
            panel.height = max(MIN_HEIGHT, pos.y - panel.y)
        elif hover is PanelHover.RIGHT:
            panel.width = max(MIN_WIDTH, pos.x - panel.x)
        elif hover is PanelHover.BOTTOM:
            panel.height = max(MIN_HEIGHT, pos.y - panel.y)
        elif hover is PanelHover.TOP:
            y0 = min(pos.y, panel.y + panel.height - MIN_HEIGHT)
            panel.height = panel.y + panel.height - y0
            panel.y = y0
        elif hover is PanelHover.LEFT:
            x0 = min(pos.x, panel.x + panel.width - MIN_WIDTH)
            panel.width = panel.x + panel.width - x0
            panel.x = x0

    def _grab_split(self, panel: Panel, cursor: Point2) -> None:
        value = {
            Alignment.LEFT: panel.split_point - cursor.x,
            Alignment.TOP: panel.split_point - cursor.y,
            Alignment.RIGHT: panel.split_point + cursor.x,
            Alignment.BOTTOM: panel.split_point + cursor.y,
        }.get(panel.align)
        if value is not None:
            self.grab_pos = Point2(value, self.grab_pos.y)

    def process_event(self, event: Event) -> bool:
        """Handle an input event; returns whether the panels consumed it."""
        cursor = event.pointer

        if event.type is EventType.MOUSE_MOVE:
            panel = self.active
            if panel is not None:
                if self.state is PanelState.DRAG:
                    if panel.parent is not None:
                        self.undock(panel)
                        self.floating.append(panel)
                    panel.pos = self.grab_pos + cursor
                    return True
                if self.state is PanelState.RESIZE:
                    if self.hover is PanelHover.SPLITTER:
                        self._drag_split(panel, cursor)
                    else:
                        self._resize(panel, cursor)
                    return True
            self.set_active_panel(self, cursor)
            return self.active is not None and self.hover is not PanelHover.BODY

        if event.type is EventType.MOUSE_LEFT_BUTTON_DOWN:
            panel = self.active
            if panel is None or self.hover is PanelHover.BODY:
                return False

            if self.hover is PanelHover.HEADER:
                self.state = PanelState.DRAG
                if panel.parent is None:
                    self._bring_to_front(panel)
                elif panel.parent.align is Alignment.UNALIGNED:
                    panel.parent.selected = panel
                    panel.pos = panel.parent.pos
                self.grab_pos = panel.pos - cursor
                return True

            if self.hover is PanelHover.SPLITTER:
                self.state = PanelState.RESIZE
                self._grab_split(panel, cursor)
                return True

            if self.hover is PanelHover.CLOSING:
                if panel.parent is not None:
                    self.undock(panel)
                elif panel in self.floating:
                    self.floating.remove(panel)
                self.active = None
                return True

            self.state = PanelState.RESIZE
            if self.hover in (PanelHover.LEFT, PanelHover.TOP):
                self.grab_pos = panel.pos - cursor
            else:
                self.grab_pos = panel.pos + panel.dim - cursor
            self._bring_to_front(panel)
            return True

        if event.type is EventType.MOUSE_LEFT_BUTTON_UP:
            panel = self.active
            if panel is not None:
                dragging = self.state is PanelState.DRAG
                self.state = PanelState.REST
                if dragging and panel.parent is None:
                    dock_panel, dock = self.get_dock(self, cursor)
                    if (
                        dock_panel is not None
                        and dock_panel is not panel
                        and dock is not Alignment.UNALIGNED
                    ):
                        if panel in self.floating:
                            self.floating.remove(panel)
                        if dock is Alignment.CENTER:
                            self.add_tab(dock_panel, panel)
                        else:
                            self.split_with(dock_panel, dock, panel)
            return False

        if event.type is EventType.MOUSE_VERTICAL_WHEEL:
            panel = self.active
            if panel is not None and self.hover is PanelHover.BODY and panel.scroll.is_vertical:
                panel.scroll.y = max(0.0, panel.scroll.y - event.wheel_delta)
            return False

        if event.type is EventType.MOUSE_HORIZONTAL_WHEEL:
            panel = self.active
            if panel is not None and self.hover is PanelHover.BODY and panel.scroll.is_horizontal:
                panel.scroll.x = max(0.0, panel.scroll.x + event.wheel_delta)
            return False

        return False