# formlayout

Geometry primitives and a small component tree for laying out
immediate-mode user interfaces.

The package has four modules:

- `formlayout.geometry`: the frozen dataclasses `Point`, `Size` and
  `Rectangle`.
- `formlayout.coordinate`: `Coordinate`, an ordered line/column position
  in a body of text.
- `formlayout.framework`: `Version`, the `Framework` lifecycle flags,
  the `Alignment`, `HorizontalAlignment` and `VerticalAlignment` enums,
  `Color` and `Colors`, and the helpers `color_to_u32`, `u32_to_color`,
  `clamp` and `lerp`.
- `formlayout.components`: `Component`, `Panel` and `Label`, which draw
  into a `FrameContext` as `DrawText` records.

## Installation

```
pip install formlayout
```

To run the tests:

```
pip install "formlayout[test]"
pytest
```

## Geometry

```python
from formlayout.geometry import Point, Size, Rectangle

a = Rectangle(10, 20, 100, 50)
b = Rectangle(60, 30, 80, 40)

a.union(b)             # Rectangle(x=10, y=20, width=130, height=50)
a.intersection(b)      # Rectangle(x=60, y=30, width=50, height=40)
a.area()               # 5000
a.aspect_ratio()       # 2.0
a.distance_to_point(Point(0, 0))

container = Rectangle(0, 0, 400, 300)
Rectangle(0, 0, 100, 50).center_in(container)
container.subdivide_horizontal(4)   # four equal columns, left to right
container.create_grid(3, 3)         # cells indexed [row][col]

Rectangle.from_two_points(Point(10, 20), Point(110, 80))
Rectangle.from_center(Point(200, 150), Size(100, 60))
```

A rectangle is empty when its width or height is zero or less. The union
of an empty rectangle with another is the other rectangle. Rectangles
that do not overlap have an empty intersection, `Rectangle()`.
`contains` includes the edges. `scale` takes one factor for both axes or
one for each axis and scales the position as well as the size.
`fit_inside` returns the largest copy that keeps the aspect ratio,
centred in the container. `str()` of a rectangle gives
`Rectangle(10.000000, 20.000000, 100.000000, 50.000000)`, and
`debug_print()` prints the fields with two decimals.

`Point` supports `+`, `-`, `*` by a number and `/` by a number. Dividing
by zero gives the origin. `Size` supports the same operators, plus
component-wise `max` and `min`. The special sizes `Size.CONTENT`,
`Size.PARENT` and `Size.FILL` are sentinel values, `(-1, -1)`,
`(-2, -2)` and `(-3, -3)`, that select how a component is sized.

## Coordinates

```python
from formlayout.coordinate import Coordinate

Coordinate(3, 5) < Coordinate(4, 0)    # True
Coordinate(-2, 7)                      # clamped to line 0, column 7
Coordinate().is_valid()                # False: (-1, -1)
```

If you give only one of line and column, `TypeError` is raised.

## Framework helpers

```python
from formlayout.framework import Colors, Framework, Version, clamp, color_to_u32, lerp

Version.version_string()         # "1.0.0"
Version.is_at_least(1, 0)        # True

Framework.initialize()
Framework.begin_frame()
Framework.in_frame()             # True
Framework.end_frame()
Framework.shutdown()

color_to_u32(Colors.RED)         # 0xFF0000FF, laid out as 0xAABBGGRR
clamp(15, 0, 10)                 # 10
lerp(0.0, 10.0, 0.25)            # 2.5
```

`u32_to_color` raises `ValueError` for a value outside 0 to 0xFFFFFFFF.

## Components

```python
from formlayout.components import FrameContext, create_label, create_panel
from formlayout.framework import Colors
from formlayout.geometry import Point, Rectangle, Size

label = create_label("Hello", color=Colors.YELLOW)
panel = create_panel(label, Size.PARENT)

frame = FrameContext(mouse_pos=Point(5, 5))
panel.update(Rectangle(0, 0, 640, 480), frame)
frame.draw_list   # [DrawText(position=Point(x=0.0, y=0.0), color=..., text='Hello')]
label.hovered     # True
```

`Component.update` does nothing for a component that is not visible.
For a visible component, it records whether the mouse position lies
inside the rectangle, in the `hovered` attribute. If the component is
enabled, it also passes a pending `drop_payload` to its `on_drag_drop`
callback and then draws. A payload can be taken only once per frame.
A `Panel` updates its `content` with the same rectangle. A `Label` with
text appends one `DrawText` at the rectangle's top-left corner.

`content_width` and `content_height` report the space a component
needs. By default this is the parent's size times `layout_correction`.
A panel reports its content's needs, or 0 when it has no content. A
label measures its text. By default it uses a fixed-pitch font of 7 by
13 units per character and per line, and you can pass a different
measurer to `Label`. `Component.dimension` resolves one dimension of a
size specification against the parent and content dimensions.

## What this package does not do

It does not open windows, render anything or read input devices. It
does not act on the `mouse_clicked` flag of a `FrameContext`. You fill
in a `FrameContext` for each frame, and a rendering layer of your own
draws the `DrawText` records that the components leave in `draw_list`.
There are no layout containers beyond `Panel`, and no text editing
component.