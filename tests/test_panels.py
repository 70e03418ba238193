import pytest

from dockui.core import Event, EventType, Point2
from dockui.panels import (
    MIN_HEIGHT,
    MIN_WIDTH,
    Alignment,
    Panel,
    PanelHover,
    PanelManager,
    PanelState,
    panel_at,
)


def make_manager(dock=(None, Alignment.UNALIGNED), seen=None):
    def get_dock(manager, cursor):
        return dock

    def set_active(manager, cursor):
        if seen is not None:
            seen.append(cursor)

    return PanelManager(get_dock=get_dock, set_active_panel=set_active)


def ev(kind, x=0, y=0, delta=0.0):
    return Event(kind, cursor=Point2(x, y), wheel_delta=delta)


def test_split_and_undock_round_trip():
    root = Panel(0, 0, 800, 600)
    mgr = make_manager()
    mgr.root = root
    node = mgr.split(root, Alignment.TOP, 50)
    assert mgr.root is node
    assert node.b is root and root.parent is node
    assert node.a.parent is node
    assert node.split_point == 50
    assert node.pos == root.pos and node.dim == root.dim

    mgr.undock(node.a)
    assert mgr.root is root
    assert root.parent is None


def test_split_with_takes_at_most_half():
    root = Panel(0, 0, 800, 600)
    mgr = make_manager()
    mgr.root = root
    wide = Panel(0, 0, 1000, 50)
    node = mgr.split_with(root, Alignment.LEFT, wide)
    assert node.split_point == root.width / 2
    assert node.a is wide and wide.parent is node


def test_split_with_uses_panel_height_for_top():
    root = Panel(0, 0, 800, 600)
    mgr = make_manager()
    mgr.root = root
    small = Panel(0, 0, 1000, 120)
    node = mgr.split_with(root, Alignment.TOP, small)
    assert node.split_point == small.height


def test_nested_split_replaces_correct_child():
    root = Panel(0, 0, 800, 600)
    mgr = make_manager()
    mgr.root = root
    outer = mgr.split(root, Alignment.LEFT, 200)
    inner = mgr.split(root, Alignment.BOTTOM, 100)
    assert outer.b is inner
    assert inner.parent is outer
    mgr.undock(inner.a)
    assert outer.b is root
    assert root.parent is outer
    assert root.pos == inner.pos


def test_undock_unparented_raises():
    mgr = make_manager()
    with pytest.raises(ValueError):
        mgr.undock(Panel())


def test_add_tab_creates_container_and_undock_collapses():
    first = Panel(10, 20, 300, 200)
    mgr = make_manager()
    mgr.root = first
    tab = Panel()
    container = mgr.add_tab(first, tab)
    assert mgr.root is container
    assert container.tabs == [first, tab]
    assert container.selected is tab
    assert tab.pos == first.pos and tab.dim == first.dim

    mgr.undock(tab)
    assert mgr.root is first
    assert first.parent is None
    assert tab.parent is None
    assert container.tabs == []


def test_undock_middle_tab_keeps_container():
    first = Panel(0, 0, 300, 200)
    mgr = make_manager()
    mgr.root = first
    second, third = Panel(), Panel()
    container = mgr.add_tab(first, second)
    assert mgr.add_tab(container, third) is container
    mgr.undock(second)
    assert container.tabs == [first, third]
    assert container.selected is third
    assert mgr.root is container


def test_undock_selected_tab_selects_last():
    first = Panel(0, 0, 300, 200)
    mgr = make_manager()
    mgr.root = first
    second, third = Panel(), Panel()
    container = mgr.add_tab(first, second)
    mgr.add_tab(container, third)
    container.selected = first
    mgr.undock(first)
    assert container.selected is third


def test_panel_at_finds_leaf():
    root = Panel(0, 0, 800, 600)
    mgr = make_manager()
    mgr.root = root
    node = mgr.split(root, Alignment.LEFT, 200)
    left = node.a
    left.x, left.y, left.width, left.height = 0, 0, 200, 600
    root.x, root.width = 200, 600
    assert panel_at(node, Point2(50, 50)) is left
    assert panel_at(node, Point2(500, 50)) is root
    assert panel_at(node, Point2(900, 50)) is None


def test_mouse_move_asks_for_active_panel():
    seen = []
    mgr = make_manager(seen=seen)
    assert mgr.process_event(ev(EventType.MOUSE_MOVE, 3, 4)) is False
    assert seen == [Point2(3.5, 4.5)]


def test_drag_floating_and_dock_left():
    root = Panel(0, 0, 800, 600)
    floating = Panel(100, 100, 200, 150)
    mgr = make_manager(dock=(root, Alignment.LEFT))
    mgr.root = root
    mgr.floating.append(floating)
    mgr.active = floating
    mgr.hover = PanelHover.HEADER

    assert mgr.process_event(ev(EventType.MOUSE_LEFT_BUTTON_DOWN, 150, 110)) is True
    assert mgr.state is PanelState.DRAG
    assert mgr.process_event(ev(EventType.MOUSE_MOVE, 160, 125)) is True
    assert floating.pos == Point2(110, 115)

    assert mgr.process_event(ev(EventType.MOUSE_LEFT_BUTTON_UP, 160, 125)) is False
    assert mgr.state is PanelState.REST
    assert floating not in mgr.floating
    assert mgr.root.a is floating and mgr.root.b is root
    assert mgr.root.split_point == floating.width


def test_drop_in_centre_makes_tab():
    root = Panel(0, 0, 800, 600)
    floating = Panel(100, 100, 200, 150)
    mgr = make_manager(dock=(root, Alignment.CENTER))
    mgr.root = root
    mgr.floating.append(floating)
    mgr.active = floating
    mgr.hover = PanelHover.HEADER
    mgr.process_event(ev(EventType.MOUSE_LEFT_BUTTON_DOWN, 150, 110))
    mgr.process_event(ev(EventType.MOUSE_LEFT_BUTTON_UP, 150, 110))
    assert mgr.root.tabs == [root, floating]
    assert mgr.floating == []


def test_drag_docked_panel_undocks_it():
    root = Panel(0, 0, 800, 600)
    mgr = make_manager()
    mgr.root = root
    node = mgr.split(root, Alignment.LEFT, 200)
    leaf = node.a
    mgr.active = leaf
    mgr.state = PanelState.DRAG
    assert mgr.process_event(ev(EventType.MOUSE_MOVE, 10, 10)) is True
    assert leaf.parent is None
    assert mgr.floating == [leaf]
    assert mgr.root is root


def test_header_click_brings_floating_to_front():
    a, b = Panel(0, 0, 200, 200), Panel(50, 50, 200, 200)
    mgr = make_manager()
    mgr.floating.extend([a, b])
    mgr.active = a
    mgr.hover = PanelHover.HEADER
    mgr.process_event(ev(EventType.MOUSE_LEFT_BUTTON_DOWN, 10, 10))
    assert mgr.floating == [b, a]


def test_close_floating_panel():
    panel = Panel(0, 0, 200, 200)
    mgr = make_manager()
    mgr.floating.append(panel)
    mgr.active = panel
    mgr.hover = PanelHover.CLOSING
    assert mgr.process_event(ev(EventType.MOUSE_LEFT_BUTTON_DOWN, 5, 5)) is True
    assert mgr.floating == []
    assert mgr.active is None


def test_body_click_not_consumed():
    panel = Panel(0, 0, 200, 200)
    mgr = make_manager()
    mgr.active = panel
    mgr.hover = PanelHover.BODY
    assert mgr.process_event(ev(EventType.MOUSE_LEFT_BUTTON_DOWN, 5, 5)) is False
    assert mgr.state is PanelState.REST


def test_splitter_drag_respects_minimum():
    root = Panel(0, 0, 800, 600)
    mgr = make_manager()
    mgr.root = root
    node = mgr.split(root, Alignment.LEFT, 200)
    mgr.active = node
    mgr.hover = PanelHover.SPLITTER
    assert mgr.process_event(ev(EventType.MOUSE_LEFT_BUTTON_DOWN, 200, 50)) is True
    assert mgr.state is PanelState.RESIZE
    mgr.process_event(ev(EventType.MOUSE_MOVE, 20, 50))
    assert node.split_point == MIN_WIDTH
    mgr.process_event(ev(EventType.MOUSE_MOVE, 300, 50))
    assert node.split_point == 300


def test_resize_right_clamps_to_minimum_width():
    panel = Panel(100, 100, 200, 150)
    mgr = make_manager()
    mgr.floating.append(panel)
    mgr.active = panel
    mgr.hover = PanelHover.RIGHT
    mgr.process_event(ev(EventType.MOUSE_LEFT_BUTTON_DOWN, 299, 120))
    mgr.process_event(ev(EventType.MOUSE_MOVE, 0, 120))
    assert panel.width == MIN_WIDTH
    assert panel.height == 150


def test_resize_left_keeps_right_edge():
    panel = Panel(100, 100, 200, 150)
    right_edge = panel.x + panel.width
    mgr = make_manager()
    mgr.floating.append(panel)
    mgr.active = panel
    mgr.hover = PanelHover.LEFT
    mgr.process_event(ev(EventType.MOUSE_LEFT_BUTTON_DOWN, 100, 120))
    mgr.process_event(ev(EventType.MOUSE_MOVE, 900, 120))
    assert panel.width == MIN_WIDTH
    assert panel.x + panel.width == right_edge


def test_resize_top_keeps_bottom_edge():
    panel = Panel(100, 100, 200, 150)
    bottom = panel.y + panel.height
    mgr = make_manager()
    mgr.floating.append(panel)
    mgr.active = panel
    mgr.hover = PanelHover.TOP
    mgr.process_event(ev(EventType.MOUSE_LEFT_BUTTON_DOWN, 150, 100))
    mgr.process_event(ev(EventType.MOUSE_MOVE, 150, 900))
    assert panel.height == MIN_HEIGHT
    assert panel.y + panel.height == bottom


def test_vertical_wheel_scrolls_and_clamps():
    panel = Panel(0, 0, 200, 200)
    panel.scroll.is_vertical = True
    mgr = make_manager()
    mgr.active = panel
    mgr.hover = PanelHover.BODY
    assert mgr.process_event(ev(EventType.MOUSE_VERTICAL_WHEEL, delta=30)) is False
    assert panel.scroll.y == 0
    mgr.process_event(ev(EventType.MOUSE_VERTICAL_WHEEL, delta=-40))
    assert panel.scroll.y == 40


def test_horizontal_wheel_needs_flag():
    panel = Panel(0, 0, 200, 200)
    mgr = make_manager()
    mgr.active = panel
    mgr.hover = PanelHover.BODY
    mgr.process_event(ev(EventType.MOUSE_HORIZONTAL_WHEEL, delta=25))
    assert panel.scroll.x == 0
    panel.scroll.is_horizontal = True
    mgr.process_event(ev(EventType.MOUSE_HORIZONTAL_WHEEL, delta=25))
    assert panel.scroll.x == 25