"""Framework version, lifecycle, alignment options, colours and small helpers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


class Version:
    """Version information of the framework."""

    MAJOR = 1
    MINOR = 0
    PATCH = 0
    STRING = "1.0.0"

    @classmethod
    def version_string(cls) -> str:
        return cls.STRING

    @classmethod
    def is_at_least(cls, major: int, minor: int, patch: int = 0) -> bool:
        """True when this version is at or above ``major.minor.patch``."""
        return (cls.MAJOR, cls.MINOR, cls.PATCH) >= (major, minor, patch)


class Framework:
    """Process-wide lifecycle of the framework."""

    _initialized = False
    _in_frame = False

    @classmethod
    def initialize(cls) -> None:
        """Prepare the framework for use; call once at start-up."""
        cls._initialized = True

    @classmethod
    def shutdown(cls) -> None:
        """Release the framework; call once at exit."""
        cls._initialized = False
        cls._in_frame = False

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def begin_frame(cls) -> None:
        """Mark the start of a frame, before components are updated."""
        cls._in_frame = True

    @classmethod
    def end_frame(cls) -> None:
        """Mark the end of a frame, after all components were updated."""
        cls._in_frame = False

    @classmethod
    def in_frame(cls) -> bool:
        """True between ``begin_frame`` and ``end_frame``."""
        return cls._in_frame


class Alignment(enum.Enum):
    HORIZONTAL = enum.auto()
    VERTICAL = enum.auto()


class HorizontalAlignment(enum.Enum):
    LEFT = enum.auto()
    CENTER = enum.auto()
    RIGHT = enum.auto()


class VerticalAlignment(enum.Enum):
    TOP = enum.auto()
    CENTER = enum.auto()
    BOTTOM = enum.auto()


@dataclass(frozen=True)
class Color:
    """An RGBA colour with channels from 0.0 to 1.0."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


class Colors:
    """Common colour constants."""

    WHITE = Color(1.0, 1.0, 1.0, 1.0)
    BLACK = Color(0.0, 0.0, 0.0, 1.0)
    RED = Color(1.0, 0.0, 0.0, 1.0)
    GREEN = Color(0.0, 1.0, 0.0, 1.0)
    BLUE = Color(0.0, 0.0, 1.0, 1.0)
    YELLOW = Color(1.0, 1.0, 0.0, 1.0)
    CYAN = Color(0.0, 1.0, 1.0, 1.0)
    MAGENTA = Color(1.0, 0.0, 1.0, 1.0)
    GRAY = Color(0.5, 0.5, 0.5, 1.0)
    TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


def _channel_to_byte(value: float) -> int:
    return int(clamp(value, 0.0, 1.0) * 255.0 + 0.5)


def color_to_u32(color: Color) -> int:
    """Pack a colour into a 32-bit integer laid out as 0xAABBGGRR."""
    return (
        _channel_to_byte(color.a) << 24
        | _channel_to_byte(color.b) << 16
        | _channel_to_byte(color.g) << 8
        | _channel_to_byte(color.r)
    )


def u32_to_color(value: int) -> Color:
    """Unpack a 0xAABBGGRR integer into a colour."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"packed colour out of range: {value!r}")
    scale = 1.0 / 255.0
    return Color(
        (value & 0xFF) * scale,
        ((value >> 8) & 0xFF) * scale,
        ((value >> 16) & 0xFF) * scale,
        ((value >> 24) & 0xFF) * scale,
    )


def clamp(value: T, minimum: T, maximum: T) -> T:
    """Limit ``value`` to the range ``minimum`` to ``maximum``."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def lerp(a, b, t: float):
    """Linear interpolation from ``a`` (t = 0) to ``b`` (t = 1)."""
    return a + t * (b - a)