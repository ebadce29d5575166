# _geometry.py
"""Point and Rectangle value types used for partitioning and range queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar, Union

from ._common import Bounds, validate_point, validate_rect

# Coordinate type, int or float
T = TypeVar("T", int, float)


def _halve(value: Any) -> Any:
    # Floor division keeps integer grids integral
    if isinstance(value, int):
        return value // 2
    return value / 2


def _splits(extent: Any) -> bool:
    half = _halve(extent)
    return half != 0 and extent - half != 0


@dataclass(frozen=True)
class Point(Generic[T]):
    """
    Immutable 2D coordinate.

    Points unpack like tuples, so ``x, y = point`` works and any API taking a
    point also accepts a plain ``(x, y)`` tuple.
    """

    x: T
    y: T

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y

    def as_tuple(self) -> tuple[T, T]:
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: Any) -> Point:
        x, y = validate_point(t)
        return cls(x, y)

    @classmethod
    def coerce(cls, point: PointLike) -> Point:
        """Return `point` unchanged if it is a Point, else build one from (x, y)."""
        if isinstance(point, Point):
            return point
        return cls.from_tuple(point)


PointLike = Union[Point, tuple]


@dataclass(frozen=True)
class Rectangle(Generic[T]):
    """
    Axis-aligned rectangle as (left, top, width, height).

    Width and height may be negative. Every predicate normalizes the extents
    first, so ``Rectangle(10, 10, -10, -10)`` behaves exactly like
    ``Rectangle(0, 0, 10, 10)``.

    The left and top edges are inclusive, the right and bottom edges are
    exclusive. This half-open convention decides which quadrant a point lying
    on a shared edge belongs to.
    """

    left: T
    top: T
    width: T
    height: T

    # ---- Construction ----

    @classmethod
    def from_points(cls, position: PointLike, size: PointLike) -> Rectangle:
        """Build a rectangle from a top-left position and a (width, height) size."""
        px, py = position
        sx, sy = size
        return cls(px, py, sx, sy)

    @classmethod
    def from_bounds(cls, bounds: Bounds) -> Rectangle:
        """Build a rectangle from (min_x, min_y, max_x, max_y)."""
        min_x, min_y, max_x, max_y = validate_rect(bounds)
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    @classmethod
    def coerce(cls, rect: RectLike) -> Rectangle:
        """Return `rect` unchanged if it is a Rectangle, else read (left, top, width, height)."""
        if isinstance(rect, Rectangle):
            return rect
        return cls(*validate_rect(rect))

    # ---- Normalization ----

    def normalized(self) -> Bounds:
        """Return (min_x, min_y, max_x, max_y) regardless of extent signs."""
        right = self.left + self.width
        bottom = self.top + self.height
        return (
            min(self.left, right),
            min(self.top, bottom),
            max(self.left, right),
            max(self.top, bottom),
        )

    def to_bounds(self) -> Bounds:
        return self.normalized()

    def center(self) -> Point:
        return Point(self.left + _halve(self.width), self.top + _halve(self.height))

    def area(self) -> Any:
        return abs(self.width * self.height)

    # ---- Predicates ----

    def contains(self, point: PointLike) -> bool:
        """Return True if the point lies inside the half-open rectangle."""
        x, y = point
        min_x, min_y, max_x, max_y = self.normalized()
        return min_x <= x < max_x and min_y <= y < max_y

    def intersection(self, other: Rectangle) -> Rectangle | None:
        """
        Return the overlapping rectangle, or None.

        Rectangles that only share an edge or a corner do not intersect.

        Example:
            ```python
            Rectangle(0, 0, 10, 10).intersection(Rectangle(5, 5, 10, 10))
            # Rectangle(left=5, top=5, width=5, height=5)
            ```
        """
        s_min_x, s_min_y, s_max_x, s_max_y = self.normalized()
        r_min_x, r_min_y, r_max_x, r_max_y = other.normalized()

        left = max(s_min_x, r_min_x)
        top = max(s_min_y, r_min_y)
        right = min(s_max_x, r_max_x)
        bottom = min(s_max_y, r_max_y)

        if left < right and top < bottom:
            return Rectangle(left, top, right - left, bottom - top)
        return None

    def intersects(self, other: Rectangle) -> bool:
        return self.intersection(other) is not None

    # ---- Partitioning ----

    def is_divisible(self) -> bool:
        """
        Return True if splitting shrinks at least one axis.

        An integer rectangle of extent 1 (or -1) on both axes yields a
        quadrant identical to itself, so it cannot usefully be split.
        """
        return _splits(self.width) or _splits(self.height)

    def quadrants(self) -> tuple[Rectangle, Rectangle, Rectangle, Rectangle]:
        """
        Split into four quadrants ordered NW, NE, SE, SW.

        Quadrants are anchored on the unnormalized left/top corner. The east
        and south quadrants take the remainder of the extent, so the four
        always tile this rectangle exactly, including integer rectangles with
        odd extents.
        """
        x, y = self.left, self.top
        w = _halve(self.width)
        h = _halve(self.height)
        rw = self.width - w
        rh = self.height - h
        return (
            Rectangle(x, y, w, h),  # NW
            Rectangle(x + w, y, rw, h),  # NE
            Rectangle(x + w, y + h, rw, rh),  # SE
            Rectangle(x, y + h, w, rh),  # SW
        )


RectLike = Union[Rectangle, tuple]
