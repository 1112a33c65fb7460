"""Two-dimensional geometry used for component layout: points, sizes and rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Point:
    """A 2D point with ``x`` and ``y`` coordinates."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_tuple(cls, vec: tuple[float, float]) -> Point:
        """Build a point from an ``(x, y)`` pair."""
        x, y = vec
        return cls(float(x), float(y))

    def to_tuple(self) -> tuple[float, float]:
        """Return the point as an ``(x, y)`` pair."""
        return (self.x, self.y)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    def __truediv__(self, factor: float) -> Point:
        """Divide both coordinates; dividing by zero yields the origin."""
        if factor != 0.0:
            return Point(self.x / factor, self.y / factor)
        return Point()

    def distance_to(self, other: Point) -> float:
        return math.sqrt(self.distance_squared_to(other))

    def distance_squared_to(self, other: Point) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def normalize(self) -> Point:
        """Return the unit vector in this direction, or the origin for a zero vector."""
        length = self.length()
        if length > 0.0:
            return Point(self.x / length, self.y / length)
        return Point()

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def __str__(self) -> str:
        return f"Point({self.x:.6f}, {self.y:.6f})"


@dataclass(frozen=True)
class Size:
    """A 2D size; the class constants CONTENT, PARENT and FILL mark special sizing modes."""

    width: float = 0.0
    height: float = 0.0

    CONTENT: ClassVar[Size]
    PARENT: ClassVar[Size]
    FILL: ClassVar[Size]

    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0

    def area(self) -> float:
        return self.width * self.height

    def aspect_ratio(self) -> float:
        """Width divided by height, or 0 when the height is zero."""
        return self.width / self.height if self.height != 0.0 else 0.0

    def __add__(self, other: Size) -> Size:
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other: Size) -> Size:
        return Size(self.width - other.width, self.height - other.height)

    def __mul__(self, factor: float) -> Size:
        return Size(self.width * factor, self.height * factor)

    def __truediv__(self, factor: float) -> Size:
        """Divide both dimensions; dividing by zero yields an empty size."""
        if factor != 0.0:
            return Size(self.width / factor, self.height / factor)
        return Size()

    def max(self, other: Size) -> Size:
        """Component-wise maximum."""
        return Size(max(self.width, other.width), max(self.height, other.height))

    def min(self, other: Size) -> Size:
        """Component-wise minimum."""
        return Size(min(self.width, other.width), min(self.height, other.height))

    def __str__(self) -> str:
        if self == Size.CONTENT:
            return "Size.CONTENT"
        if self == Size.PARENT:
            return "Size.PARENT"
        if self == Size.FILL:
            return "Size.FILL"
        return f"Size({self.width:.6f}, {self.height:.6f})"


# Negative sentinel values select the sizing behaviour.
Size.CONTENT = Size(-1.0, -1.0)
Size.PARENT = Size(-2.0, -2.0)
Size.FILL = Size(-3.0, -3.0)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    # Construction

    @classmethod
    def from_location_size(cls, location: Point, size: Size) -> Rectangle:
        return cls(location.x, location.y, size.width, size.height)

    @classmethod
    def from_two_points(cls, p1: Point, p2: Point) -> Rectangle:
        """The smallest rectangle spanning both points."""
        min_x, max_x = min(p1.x, p2.x), max(p1.x, p2.x)
        min_y, max_y = min(p1.y, p2.y), max(p1.y, p2.y)
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    @classmethod
    def from_center(cls, center: Point, size: Size) -> Rectangle:
        return cls(
            center.x - size.width / 2.0,
            center.y - size.height / 2.0,
            size.width,
            size.height,
        )

    @classmethod
    def from_tuples(
        cls, pos: tuple[float, float], size: tuple[float, float]
    ) -> Rectangle:
        """Build a rectangle from ``(x, y)`` and ``(width, height)`` pairs."""
        return cls(float(pos[0]), float(pos[1]), float(size[0]), float(size[1]))

    # Properties

    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0

    def area(self) -> float:
        return self.width * self.height

    def aspect_ratio(self) -> float:
        """Width divided by height, or 0 when the height is zero."""
        return self.width / self.height if self.height != 0.0 else 0.0

    def perimeter(self) -> float:
        return 2.0 * (self.width + self.height)

    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def left(self) -> float:
        return self.x

    def right(self) -> float:
        return self.x + self.width

    def top(self) -> float:
        return self.y

    def bottom(self) -> float:
        return self.y + self.height

    def top_left(self) -> Point:
        return Point(self.x, self.y)

    def top_right(self) -> Point:
        return Point(self.right(), self.y)

    def bottom_left(self) -> Point:
        return Point(self.x, self.bottom())

    def bottom_right(self) -> Point:
        return Point(self.right(), self.bottom())

    # Containment and set operations

    def contains(self, point: Point) -> bool:
        """True when the point lies inside or on the edge of the rectangle."""
        return (
            self.x <= point.x <= self.right() and self.y <= point.y <= self.bottom()
        )

    def contains_point(self, point: Point) -> bool:
        return self.contains(point)

    def contains_rectangle(self, other: Rectangle) -> bool:
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right() <= self.right()
            and other.bottom() <= self.bottom()
        )

    def union(self, other: Rectangle) -> Rectangle:
        """Bounding rectangle of both; an empty operand is ignored."""
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        min_x = min(self.x, other.x)
        min_y = min(self.y, other.y)
        max_x = max(self.right(), other.right())
        max_y = max(self.bottom(), other.bottom())
        return Rectangle(min_x, min_y, max_x - min_x, max_y - min_y)

    def intersection(self, other: Rectangle) -> Rectangle:
        """Overlapping area, or an empty rectangle at the origin when none."""
        max_left = max(self.x, other.x)
        max_top = max(self.y, other.y)
        min_right = min(self.right(), other.right())
        min_bottom = min(self.bottom(), other.bottom())
        if max_left < min_right and max_top < min_bottom:
            return Rectangle(
                max_left, max_top, min_right - max_left, min_bottom - max_top
            )
        return Rectangle()

    # Transformations

    def scale(self, x_factor: float, y_factor: float | None = None) -> Rectangle:
        """Scale position and size; one factor scales both axes equally."""
        if y_factor is None:
            y_factor = x_factor
        return Rectangle(
            self.x * x_factor,
            self.y * y_factor,
            self.width * x_factor,
            self.height * y_factor,
        )

    def align_left(self, container: Rectangle) -> Rectangle:
        return Rectangle(container.x, self.y, self.width, self.height)

    def align_right(self, container: Rectangle) -> Rectangle:
        return Rectangle(container.right() - self.width, self.y, self.width, self.height)

    def align_top(self, container: Rectangle) -> Rectangle:
        return Rectangle(self.x, container.y, self.width, self.height)

    def align_bottom(self, container: Rectangle) -> Rectangle:
        return Rectangle(
            self.x, container.bottom() - self.height, self.width, self.height
        )

    def align_center_horizontal(self, container: Rectangle) -> Rectangle:
        return Rectangle(
            container.x + (container.width - self.width) / 2.0,
            self.y,
            self.width,
            self.height,
        )

    def align_center_vertical(self, container: Rectangle) -> Rectangle:
        return Rectangle(
            self.x,
            container.y + (container.height - self.height) / 2.0,
            self.width,
            self.height,
        )

    def center_in(self, container: Rectangle) -> Rectangle:
        return Rectangle(
            container.x + (container.width - self.width) / 2.0,
            container.y + (container.height - self.height) / 2.0,
            self.width,
            self.height,
        )

    def clamp_to(self, bounds: Rectangle) -> Rectangle:
        """Move the rectangle so it stays within ``bounds``, keeping its size."""
        new_x = max(bounds.x, min(self.x, bounds.right() - self.width))
        new_y = max(bounds.y, min(self.y, bounds.bottom() - self.height))
        return Rectangle(new_x, new_y, self.width, self.height)

    def fit_inside(self, container: Rectangle) -> Rectangle:
        """Largest aspect-preserving copy centred in ``container``."""
        if self.is_empty() or container.is_empty():
            return Rectangle()
        factor = min(container.width / self.width, container.height / self.height)
        new_size = Size(self.width * factor, self.height * factor)
        return Rectangle.from_center(container.center(), new_size)

    def rotate90(self) -> Rectangle:
        """Swap width and height, keeping the top-left corner."""
        return Rectangle(self.x, self.y, self.height, self.width)

    # Subdivision

    def subdivide_horizontal(self, count: int) -> list[Rectangle]:
        """Split into ``count`` equal columns, left to right."""
        if count <= 0:
            return []
        sub_width = self.width / count
        return [
            Rectangle(self.x + i * sub_width, self.y, sub_width, self.height)
            for i in range(count)
        ]

    def subdivide_vertical(self, count: int) -> list[Rectangle]:
        """Split into ``count`` equal rows, top to bottom."""
        if count <= 0:
            return []
        sub_height = self.height / count
        return [
            Rectangle(self.x, self.y + i * sub_height, self.width, sub_height)
            for i in range(count)
        ]

    def create_grid(self, rows: int, cols: int) -> list[list[Rectangle]]:
        """Split into a ``rows`` by ``cols`` grid of equal cells, indexed [row][col]."""
        if rows <= 0:
            return []
        if cols <= 0:
            return [[] for _ in range(rows)]
        cell_width = self.width / cols
        cell_height = self.height / rows
        return [
            [
                Rectangle(
                    self.x + col * cell_width,
                    self.y + row * cell_height,
                    cell_width,
                    cell_height,
                )
                for col in range(cols)
            ]
            for row in range(rows)
        ]

    # Distances

    def distance_to_point(self, point: Point) -> float:
        """Shortest distance from the rectangle's edge to the point; 0 inside."""
        dx = max(0.0, self.x - point.x, point.x - self.right())
        dy = max(0.0, self.y - point.y, point.y - self.bottom())
        return math.sqrt(dx * dx + dy * dy)

    def distance_to(self, other: Rectangle) -> float:
        """Shortest gap between two rectangles; 0 when they overlap."""
        if not self.intersection(other).is_empty():
            return 0.0
        dx = max(0.0, self.x - other.right(), other.x - self.right())
        dy = max(0.0, self.y - other.bottom(), other.y - self.bottom())
        return math.sqrt(dx * dx + dy * dy)

    # Conversion and output

    def position_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def size_tuple(self) -> tuple[float, float]:
        return (self.width, self.height)

    def __str__(self) -> str:
        return (
            f"Rectangle({self.x:.6f}, {self.y:.6f}, "
            f"{self.width:.6f}, {self.height:.6f})"
        )

    def debug_print(self) -> None:
        """Print the rectangle's fields to standard output."""
        print(
            f"Rectangle: x={self.x:.2f}, y={self.y:.2f}, "
            f"width={self.width:.2f}, height={self.height:.2f}"
        )