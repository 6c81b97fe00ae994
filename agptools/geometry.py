"""Planar geometry: vectors, axis-aligned and rotated rectangles, lines, directions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from numbers import Real


def _fmt(value: float) -> str:
    """Format a number the way the string representations of this module expect."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return f"{value:f}"


@dataclass(frozen=True, eq=True)
class Vec2D:
    """A 2D vector, also used as a point."""

    x: float = 0
    y: float = 0

    def __iter__(self):
        yield self.x
        yield self.y

    def mag(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def mag2(self) -> float:
        return self.x * self.x + self.y * self.y

    def vers_x(self) -> float:
        return self.x / abs(self.x) if self.x else 0

    def vers_y(self) -> float:
        return self.y / abs(self.y) if self.y else 0

    def norm(self) -> Vec2D:
        r = 1 / self.mag()
        return Vec2D(self.x * r, self.y * r)

    def perp(self, y_up: bool = False) -> Vec2D:
        """Perpendicular vector, clockwise on screen."""
        return Vec2D(self.y, -self.x) if y_up else Vec2D(-self.y, self.x)

    def floor(self) -> Vec2D:
        return Vec2D(math.floor(self.x), math.floor(self.y))

    def ceil(self) -> Vec2D:
        return Vec2D(math.ceil(self.x), math.ceil(self.y))

    def max(self, other: Vec2D) -> Vec2D:
        return Vec2D(max(self.x, other.x), max(self.y, other.y))

    def min(self, other: Vec2D) -> Vec2D:
        return Vec2D(min(self.x, other.x), min(self.y, other.y))

    def dot(self, other: Vec2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2D) -> float:
        return self.x * other.y - self.y * other.x

    def distance(self, other: Vec2D) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def rot(self, angle: float, center: Vec2D, y_up: bool = False) -> Vec2D:
        """Rotate by ``angle`` radians, counterclockwise, around ``center``."""
        dx = self.x - center.x
        dy = self.y - center.y
        c = math.cos(angle)
        s = math.sin(angle)
        if y_up:
            return Vec2D(dx * c - dy * s + center.x, dx * s + dy * c + center.y)
        return Vec2D(dx * c + dy * s + center.x, -dx * s + dy * c + center.y)

    def __str__(self) -> str:
        return f"({_fmt(self.x)},{_fmt(self.y)})"

    def __add__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        if isinstance(other, Vec2D):
            return Vec2D(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vec2D(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vec2D(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vec2D):
            return Vec2D(self.x / other.x, self.y / other.y)
        if isinstance(other, Real):
            return Vec2D(self.x / other, self.y / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, Real):
            return Vec2D(other / self.x, other / self.y)
        return NotImplemented

    def __pos__(self) -> Vec2D:
        return Vec2D(+self.x, +self.y)

    def __neg__(self) -> Vec2D:
        return Vec2D(-self.x, -self.y)

    def __lt__(self, other: Vec2D) -> bool:
        """Vectors are ordered by magnitude."""
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.mag() < other.mag()


@dataclass
class Rect:
    """Axis-aligned rectangle.

    ``(x, y)`` is the upper-left corner when ``y_up`` is false and the
    bottom-left corner when it is true.
    """

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    y_up: bool = False

    @classmethod
    def from_points(cls, v1: Vec2D, v2: Vec2D, y_up: bool = False) -> Rect:
        """Rectangle with position ``v1`` and size ``v2 - v1``."""
        return cls(v1.x, v1.y, v2.x - v1.x, v2.y - v1.y, y_up)

    @property
    def pos(self) -> Vec2D:
        return Vec2D(self.x, self.y)

    @pos.setter
    def pos(self, value: Vec2D) -> None:
        self.x, self.y = value.x, value.y

    @property
    def size(self) -> Vec2D:
        return Vec2D(self.width, self.height)

    @size.setter
    def size(self, value: Vec2D) -> None:
        self.width, self.height = value.x, value.y

    def top(self) -> float:
        return self.y + self.height if self.y_up else self.y

    def right(self) -> float:
        return self.x + self.width

    def bottom(self) -> float:
        return self.y if self.y_up else self.y + self.height

    def left(self) -> float:
        return self.x

    def area(self) -> float:
        return self.width * self.height

    def tl(self) -> Vec2D:
        return Vec2D(self.left(), self.top())

    def tr(self) -> Vec2D:
        return Vec2D(self.right(), self.top())

    def br(self) -> Vec2D:
        return Vec2D(self.right(), self.bottom())

    def bl(self) -> Vec2D:
        return Vec2D(self.left(), self.bottom())

    def vertices(self) -> tuple[Vec2D, Vec2D, Vec2D, Vec2D]:
        """Corners counterclockwise, starting from the position corner."""
        if self.y_up:
            return (self.bl(), self.br(), self.tr(), self.tl())
        return (self.tl(), self.bl(), self.br(), self.tr())

    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0

    def intersects(self, other: Rect) -> bool:
        horizontal = self.left() < other.right() and self.right() > other.left()
        if self.y_up:
            return horizontal and self.bottom() < other.top() and self.top() > other.bottom()
        return horizontal and self.top() < other.bottom() and self.bottom() > other.top()

    def contains(self, point: Vec2D) -> bool:
        """Strict containment: points on the border are outside."""
        inside_x = self.left() < point.x < self.right()
        if self.y_up:
            return inside_x and self.bottom() < point.y < self.top()
        return inside_x and self.top() < point.y < self.bottom()

    def center(self) -> Vec2D:
        return Vec2D(self.x + self.width / 2, self.y + self.height / 2)

    def united(self, other: Rect) -> Rect:
        """Smallest rectangle covering both rectangles."""
        left = min(self.left(), other.left())
        right = max(self.right(), other.right())
        if self.y_up:
            low = min(self.bottom(), other.bottom())
            high = max(self.top(), other.top())
        else:
            low = min(self.top(), other.top())
            high = max(self.bottom(), other.bottom())
        return Rect.from_points(Vec2D(left, low), Vec2D(right, high), self.y_up)

    def adjust(self, dx1: float, dy1: float, dx2: float, dy2: float) -> None:
        """Move the position corner by (dx1, dy1) and the opposite corner by (dx2, dy2)."""
        self.x += dx1
        self.y += dy1
        self.width += dx2 - dx1
        self.height += dy2 - dy1

    def __str__(self) -> str:
        flag = "true" if self.y_up else "false"
        return (
            f"R[{_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.width)}, "
            f"{_fmt(self.height)}](yUp={flag})"
        )

    def __add__(self, other):
        if isinstance(other, Vec2D):
            return Rect(self.x + other.x, self.y + other.y, self.width, self.height, self.y_up)
        if isinstance(other, Real):
            return Rect(self.x + other, self.y + other, self.width, self.height, self.y_up)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec2D):
            return Rect(self.x - other.x, self.y - other.y, self.width, self.height, self.y_up)
        if isinstance(other, Real):
            return Rect(self.x - other, self.y - other, self.width, self.height, self.y_up)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vec2D):
            return Rect(self.x, self.y, self.width * other.x, self.height * other.y, self.y_up)
        if isinstance(other, Real):
            return Rect(self.x, self.y, self.width * other, self.height * other, self.y_up)
        return NotImplemented


@dataclass(frozen=True)
class Line:
    """Segment between two points."""

    start: Vec2D
    end: Vec2D

    def bounding_rect(self) -> Rect:
        return Rect.from_points(self.start.min(self.end), self.start.max(self.end))


@dataclass
class RotatedRect:
    """Rectangle rotated by ``angle`` radians (counterclockwise) around its center."""

    center: Vec2D
    size: Vec2D
    angle: float = 0.0
    y_up: bool = False

    @classmethod
    def from_upper_edge(cls, upper_edge: Line, height: float, y_up: bool = False) -> RotatedRect:
        """Rectangle hanging from the given upper edge with the given height."""
        edge = upper_edge.end - upper_edge.start
        normal = edge.perp(y_up).norm()
        center = upper_edge.start + edge / 2 + (height / 2) * normal
        return cls(center, Vec2D(edge.mag(), height), math.atan2(edge.y, edge.x), y_up)

    def vertices(self) -> tuple[Vec2D, Vec2D, Vec2D, Vec2D]:
        half = self.size / 2
        rect = Rect.from_points(self.center - half, self.center + half)
        return tuple(p.rot(self.angle, self.center) for p in rect.vertices())

    def to_rect(self) -> Rect:
        """The rectangle ignoring rotation."""
        return Rect(
            self.center.x - self.size.x / 2,
            self.center.y - self.size.y / 2,
            self.size.x,
            self.size.y,
            self.y_up,
        )

    def bounding_rect(self) -> Rect:
        verts = self.vertices()
        xs = [v.x for v in verts]
        ys = [v.y for v in verts]
        return Rect.from_points(Vec2D(min(xs), min(ys)), Vec2D(max(xs), max(ys)), self.y_up)

    def contains(self, point: Vec2D) -> bool:
        """True if the point lies in or on the rectangle."""
        verts = self.vertices()
        for a, b in zip(verts, verts[1:] + verts[:1]):
            if (point - a).cross(b - a) < 0.0:
                return False
        return True

    def __str__(self) -> str:
        flag = "true" if self.y_up else "false"
        return (
            f"RR[{_fmt(self.center.x)}, {_fmt(self.center.y)}, {_fmt(self.size.x)}, "
            f"{_fmt(self.size.y)} @{_fmt(self.angle)} yUp={flag}]"
        )

    def __add__(self, other):
        if isinstance(other, Vec2D):
            return RotatedRect(self.center + other, self.size, self.angle, self.y_up)
        if isinstance(other, Real):
            return RotatedRect(self.center + Vec2D(other, other), self.size, self.angle, self.y_up)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec2D):
            return RotatedRect(self.center - other, self.size, self.angle, self.y_up)
        if isinstance(other, Real):
            return RotatedRect(self.center - Vec2D(other, other), self.size, self.angle, self.y_up)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Real):
            return RotatedRect(self.center, self.size * other, self.angle, self.y_up)
        return NotImplemented


class Direction(Enum):
    """Axis-aligned direction (y axis pointing down)."""

    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3
    NONE = 4


def dir2vec(direction: Direction, y_up: bool = False) -> Vec2D:
    if direction is Direction.RIGHT:
        return Vec2D(1.0, 0.0)
    if direction is Direction.LEFT:
        return Vec2D(-1.0, 0.0)
    if direction is Direction.UP:
        return Vec2D(0.0, 1.0 if y_up else -1.0)
    if direction is Direction.DOWN:
        return Vec2D(0.0, -1.0 if y_up else 1.0)
    return Vec2D(0.0, 0.0)


def dir2str(direction: Direction) -> str:
    if direction is Direction.NONE:
        return "none"
    return direction.name


_INVERSE = {
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.NONE: Direction.NONE,
}


def inverse(direction: Direction) -> Direction:
    return _INVERSE[direction]


def normal2dir(normal: Vec2D, y_up: bool = False) -> Direction:
    down_y, up_y = (-1, 1) if y_up else (1, -1)
    if normal.x == 0 and normal.y == down_y:
        return Direction.DOWN
    if normal.x == 0 and normal.y == up_y:
        return Direction.UP
    if normal.x == 1 and normal.y == 0:
        return Direction.RIGHT
    if normal.x == -1 and normal.y == 0:
        return Direction.LEFT
    return Direction.NONE


class RoomState(IntEnum):
    INACTIVE = 0
    COMBAT = 1
    ACTIVE = 2


class RoomType(IntEnum):
    EMPTY = 0
    INITIAL = 1
    NORMAL = 2
    TREASURE = 3
    SHOP = 4
    BOSS = 5


class DoorState(IntEnum):
    OPEN = 0
    CLOSE = 1


class DoorPosition(Enum):
    TOP = 0
    BOTTOM = 1
    LEFT = 2
    RIGHT = 3


class PanelPosition(Enum):
    TOP = 0
    BOTTOM = 1
    LEFT = 2
    RIGHT = 3