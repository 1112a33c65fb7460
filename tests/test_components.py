import pytest

from formlayout.components import (
    Component,
    DrawText,
    FrameContext,
    Label,
    Panel,
    create_label,
    create_panel,
)
from formlayout.framework import Colors, color_to_u32
from formlayout.geometry import Point, Rectangle, Size


class _Box(Component):
    def __init__(self):
        super().__init__()
        self.drawn = []

    def size(self):
        return Size(10.0, 10.0)

    def _update_internal(self, content_rect, frame):
        self.drawn.append(content_rect)


RECT = Rectangle(10.0, 20.0, 100.0, 50.0)


def test_component_is_abstract():
    with pytest.raises(TypeError):
        Component()


def test_default_content_size_follows_parent():
    box = _Box()
    assert Component.content_width(box, 200, 80) == 200
    assert Component.content_height(box, 200, 80) == 80
    assert Component.content_width(box, 200, 80, 0.5) == 100


@pytest.mark.parametrize(
    "spec, expected",
    [(Size.CONTENT, 30.0), (Size.PARENT, 200.0), (Size.FILL, 200.0), (Size(40.0, 5.0), 40.0)],
)
def test_dimension(spec, expected):
    assert _Box().dimension(spec, 200.0, 30.0) == expected


def test_update_draws_when_visible_and_enabled():
    box = _Box()
    box.update(RECT, FrameContext())
    assert box.drawn == [RECT]


def test_invisible_component_is_not_drawn():
    box = _Box()
    box.visible = False
    box.update(RECT, FrameContext())
    assert box.drawn == []


def test_disabled_component_is_not_drawn_nor_hovered():
    box = _Box()
    box.enabled = False
    box.update(RECT, FrameContext(mouse_pos=Point(20.0, 30.0)))
    assert box.drawn == []
    assert box.hovered is False


def test_hover_tracks_mouse_position():
    box = _Box()
    box.update(RECT, FrameContext(mouse_pos=Point(20.0, 30.0)))
    assert box.hovered is True
    box.update(RECT, FrameContext(mouse_pos=Point(0.0, 0.0)))
    assert box.hovered is False


def test_drop_payload_reaches_callback_once():
    box = _Box()
    received = []
    box.on_drag_drop = received.append
    frame = FrameContext(drop_payload="file.txt")
    box.update(RECT, frame)
    box.update(RECT, frame)
    assert received == ["file.txt"]
    assert frame.drop_payload is None


def test_disabled_component_leaves_payload():
    box = _Box()
    received = []
    box.on_drag_drop = received.append
    box.enabled = False
    frame = FrameContext(drop_payload="file.txt")
    box.update(RECT, frame)
    assert received == []
    assert frame.drop_payload == "file.txt"


def test_take_drop_payload_only_once():
    frame = FrameContext(drop_payload="data")
    assert frame.take_drop_payload() == "data"
    assert frame.take_drop_payload() is None


def test_measure_text_lines_stack():
    frame = FrameContext()
    one = frame.measure_text("abc")
    two = frame.measure_text("abc\nab")
    assert two.height == 2 * one.height
    assert two.width == one.width
    assert frame.measure_text("") == Size(0.0, 0.0)


def test_label_defaults():
    label = Label("Hello")
    assert label.size() == Size.CONTENT
    assert label.text_color == Colors.WHITE


def test_label_draws_at_top_left_in_white():
    frame = FrameContext()
    Label("Hello").update(RECT, frame)
    assert frame.draw_list == [DrawText(Point(10.0, 20.0), 0xFFFFFFFF, "Hello")]


def test_label_colour_packing_matches_for_exact_channels():
    frame = FrameContext()
    create_label("x", color=Colors.RED).update(RECT, frame)
    assert frame.draw_list[0].color == color_to_u32(Colors.RED)


def test_empty_label_draws_nothing():
    frame = FrameContext()
    Label("").update(RECT, frame)
    assert frame.draw_list == []


def test_label_content_size_uses_measurer():
    label = Label("abcd", measurer=lambda text: Size(len(text) * 10.0, 20.0))
    assert label.content_width(500, 500) == 40
    assert label.content_height(500, 500) == 20
    assert label.content_width(500, 500, 0.5) == 20


def test_empty_label_content_size_is_zero():
    label = Label("")
    assert label.content_width(100, 100) == 0
    assert label.content_height(100, 100) == 0


def test_panel_defaults_to_parent_size():
    assert Panel().size() == Size.PARENT
    assert create_panel().size() == Size.PARENT


def test_panel_updates_content():
    box = _Box()
    panel = create_panel(box)
    panel.update(RECT, FrameContext())
    assert box.drawn == [RECT]


def test_invisible_panel_skips_content():
    box = _Box()
    panel = Panel(box)
    panel.visible = False
    panel.update(RECT, FrameContext())
    assert box.drawn == []


def test_panel_content_size_delegates():
    label = Label("abc", measurer=lambda text: Size(len(text) * 10.0, 20.0))
    panel = Panel(label)
    assert panel.content_width(1, 1) == label.content_width(1, 1)
    assert panel.content_height(1, 1) == label.content_height(1, 1)


def test_empty_panel_content_size_is_zero():
    panel = Panel()
    assert panel.content_width(300, 300) == 0
    assert panel.content_height(300, 300) == 0


def test_panel_content_can_be_replaced():
    panel = create_panel(Label("a"))
    new = Label("b")
    panel.content = new
    frame = FrameContext()
    panel.update(RECT, frame)
    assert [d.text for d in frame.draw_list] == ["b"]


def test_create_label_with_size_and_colour():
    label = create_label("t", Size.FILL, Colors.YELLOW)
    assert label.size() == Size.FILL
    assert label.text_color == Colors.YELLOW
    assert label.text == "t"


def test_create_panel_with_size():
    panel = create_panel(None, Size(40.0, 30.0))
    assert panel.size() == Size(40.0, 30.0)
    assert panel.content is None