"""UI components: the component base class, panels that hold content, and text labels.

Components draw into a :class:`FrameContext`, which carries one frame's input
state (mouse position, clicks, a pending drop payload) and collects the draw
commands the components issue.
"""

from __future__ import annotations

import abc
from collections.abc import Callable
from dataclasses import dataclass, field

from .framework import Color, Colors
from .geometry import Point, Rectangle, Size

DragDropCallback = Callable[[str], None]
TextMeasurer = Callable[[str], Size]


@dataclass(frozen=True)
class DrawText:
    """A request to draw ``text`` at ``position`` in a packed 0xAABBGGRR colour."""

    position: Point
    color: int
    text: str


@dataclass
class FrameContext:
    """Input state for one frame and the draw commands issued during it.

    Text is measured with a fixed-pitch font of ``char_width`` by ``line_height``.
    """

    mouse_pos: Point = field(default_factory=Point)
    mouse_clicked: bool = False
    drop_payload: str | None = None
    char_width: float = 7.0
    line_height: float = 13.0
    draw_list: list[DrawText] = field(default_factory=list)

    def measure_text(self, text: str) -> Size:
        """Size of ``text`` when drawn: widest line by number of lines."""
        if not text:
            return Size(0.0, 0.0)
        lines = text.split("\n")
        widest = max(len(line) for line in lines)
        return Size(widest * self.char_width, len(lines) * self.line_height)

    def take_drop_payload(self) -> str | None:
        """Accept the pending drop payload; it can be taken only once."""
        payload, self.drop_payload = self.drop_payload, None
        return payload


def _pack_color(color: Color) -> int:
    """Pack a colour as 0xAABBGGRR, truncating each channel to a byte."""
    r, g, b, a = (
        int(channel * 255) & 0xFF for channel in (color.r, color.g, color.b, color.a)
    )
    return a << 24 | b << 16 | g << 8 | r


class Component(abc.ABC):
    """Base class for all UI components: visibility, enablement, input and layout."""

    def __init__(self) -> None:
        self.enabled = True
        self.visible = True
        self.hovered = False
        self.on_drag_drop: DragDropCallback | None = None

    @abc.abstractmethod
    def size(self) -> Size:
        """The size specification of this component."""

    @abc.abstractmethod
    def _update_internal(self, content_rect: Rectangle, frame: FrameContext) -> None:
        """Draw the component; called by :meth:`update` when it is visible and enabled."""

    def update(self, content_rect: Rectangle, frame: FrameContext) -> None:
        """Handle input for this frame and draw the component into ``content_rect``."""
        if not self.visible:
            return
        self.hovered = self._handle_mouse_input(content_rect, frame)
        if self.enabled:
            self._handle_drag_drop(frame)
            self._update_internal(content_rect, frame)

    def content_width(
        self, parent_width: int, parent_height: int, layout_correction: float = 1.0
    ) -> int:
        """Width the content needs; by default the parent's width."""
        return int(float(parent_width) * layout_correction)

    def content_height(
        self, parent_width: int, parent_height: int, layout_correction: float = 1.0
    ) -> int:
        """Height the content needs; by default the parent's height."""
        return int(float(parent_height) * layout_correction)

    def dimension(
        self, size_spec: Size, parent_dimension: float, content_dimension: float
    ) -> float:
        """Resolve one dimension of a size specification."""
        if size_spec == Size.CONTENT:
            return content_dimension
        if size_spec in (Size.PARENT, Size.FILL):
            return parent_dimension
        return size_spec.width

    def _handle_mouse_input(self, rect: Rectangle, frame: FrameContext) -> bool:
        if not self.enabled:
            return False
        return rect.contains(frame.mouse_pos)

    def _handle_drag_drop(self, frame: FrameContext) -> None:
        if self.on_drag_drop is None:
            return
        payload = frame.take_drop_payload()
        if payload is not None:
            self.on_drag_drop(payload)


class Panel(Component):
    """A container holding a single content component."""

    def __init__(self, content: Component | None = None) -> None:
        super().__init__()
        self.content = content
        self.size_spec = Size.PARENT

    def size(self) -> Size:
        return self.size_spec

    def _update_internal(self, content_rect: Rectangle, frame: FrameContext) -> None:
        if self.content is not None and self.visible:
            self.content.update(content_rect, frame)

    def content_width(
        self, parent_width: int, parent_height: int, layout_correction: float = 1.0
    ) -> int:
        if self.content is None:
            return 0
        return self.content.content_width(parent_width, parent_height, layout_correction)

    def content_height(
        self, parent_width: int, parent_height: int, layout_correction: float = 1.0
    ) -> int:
        if self.content is None:
            return 0
        return self.content.content_height(parent_width, parent_height, layout_correction)


class Label(Component):
    """A leaf component that draws a line or block of text."""

    def __init__(self, text: str, measurer: TextMeasurer | None = None) -> None:
        super().__init__()
        self.text = text
        self.text_color: Color = Colors.WHITE
        self.size_spec = Size.CONTENT
        self.measurer: TextMeasurer = measurer or FrameContext().measure_text

    def size(self) -> Size:
        return self.size_spec

    def _update_internal(self, content_rect: Rectangle, frame: FrameContext) -> None:
        if not self.text:
            return
        frame.draw_list.append(
            DrawText(content_rect.top_left(), _pack_color(self.text_color), self.text)
        )

    def content_width(
        self, parent_width: int, parent_height: int, layout_correction: float = 1.0
    ) -> int:
        if not self.text:
            return 0
        return int(self.measurer(self.text).width * layout_correction)

    def content_height(
        self, parent_width: int, parent_height: int, layout_correction: float = 1.0
    ) -> int:
        if not self.text:
            return 0
        return int(self.measurer(self.text).height * layout_correction)


def create_label(
    text: str, size: Size | None = None, color: Color | None = None
) -> Label:
    """Create a label, optionally with a size specification and a text colour."""
    label = Label(text)
    if size is not None:
        label.size_spec = size
    if color is not None:
        label.text_color = color
    return label


def create_panel(content: Component | None = None, size: Size | None = None) -> Panel:
    """Create a panel around ``content``, optionally with a size specification."""
    panel = Panel(content)
    if size is not None:
        panel.size_spec = size
    return panel