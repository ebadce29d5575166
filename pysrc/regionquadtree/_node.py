# _node.py
"""QuadNode - the recursive region quadtree engine."""

from __future__ import annotations

from typing import Generic, Iterator

from ._common import Bounds
from ._geometry import Point, PointLike, Rectangle, RectLike, T
from ._log import logger

QUADRANT_NAMES = ("NW", "NE", "SE", "SW")


class QuadNode(Generic[T]):
    """
    A single node of a region quadtree.

    A node starts as a leaf storing up to `capacity` points in `children`.
    The first insertion past capacity subdivides it into four quadrants
    (`quads`, ordered NW, NE, SE, SW) that receive every later insertion.
    Points stored before the split stay attached to this node unless
    `redistribute` is enabled.

    Attributes:
        bounds: Region governed by this node.
        capacity: Max points stored directly while a leaf.
        max_capacity: Capacity given to quadrants created on subdivision.
        children: Points stored directly at this node, in insertion order.
        quads: None for a leaf, else a 4-tuple of QuadNode.
        depth: Distance from the root (0 for the root).
        max_depth: Optional depth at which leaves stop subdividing.
        redistribute: Move stored points into the quadrants on subdivision.

    Thread-safety:
        Instances are not thread-safe.
    """

    __slots__ = (
        "bounds",
        "capacity",
        "children",
        "depth",
        "max_capacity",
        "max_depth",
        "quads",
        "redistribute",
    )

    def __init__(
        self,
        bounds: Rectangle[T],
        capacity: int,
        *,
        max_capacity: int | None = None,
        depth: int = 0,
        max_depth: int | None = None,
        redistribute: bool = False,
    ):
        self.bounds = bounds
        self.capacity = capacity
        self.max_capacity = capacity if max_capacity is None else max_capacity
        self.children: list[Point[T]] = []
        self.quads: tuple[QuadNode[T], ...] | None = None
        self.depth = depth
        self.max_depth = max_depth
        self.redistribute = redistribute

    def __repr__(self) -> str:
        kind = "leaf" if self.quads is None else "internal"
        return (
            f"QuadNode({kind}, depth={self.depth}, bounds={self.bounds!r}, "
            f"points={len(self.children)})"
        )

    @property
    def is_leaf(self) -> bool:
        return self.quads is None

    # ---- Insertion ----

    def insert(self, point: PointLike) -> bool:
        """
        Insert a point into this subtree.

        Args:
            point: Point or (x, y) tuple.

        Returns:
            True if the point was stored, False if it lies outside `bounds`.
        """
        return self._insert(Point.coerce(point))

    def _insert(self, point: Point[T]) -> bool:
        node = self
        if not node.bounds.contains(point):
            return False

        # Quadrants tile without overlap, so at most one can take the point
        while True:
            if node.quads is None:
                if len(node.children) < node.capacity or node._at_depth_limit():
                    node.children.append(point)
                    return True
                node.subdivide()

            child = node.quadrant_for(point)
            if child is None:
                # Only reachable when rounding leaves a sliver no quadrant covers
                return False
            node = child

    def quadrant_for(self, point: PointLike) -> QuadNode[T] | None:
        """Return the quadrant (NW, NE, SE, SW order) containing `point`, if any."""
        if self.quads is None:
            return None
        return next((q for q in self.quads if q.bounds.contains(point)), None)

    def _at_depth_limit(self) -> bool:
        if self.max_depth is not None and self.depth >= self.max_depth:
            return True
        return not self.bounds.is_divisible()

    # ---- Subdivision ----

    def subdivide(self) -> None:
        """
        Split this node into four quadrants. No-op if already split.

        Stored points stay in `children` unless `redistribute` is set.
        """
        if self.quads is not None:
            return

        quads = tuple(
            QuadNode(
                rect,
                self.max_capacity,
                depth=self.depth + 1,
                max_depth=self.max_depth,
                redistribute=self.redistribute,
            )
            for rect in self.bounds.quadrants()
        )
        assert len(quads) == len(QUADRANT_NAMES), "subdivision must yield four quadrants"
        self.quads = quads
        logger.debug(
            "Subdivided node at depth %d with bounds %s", self.depth, self.bounds.to_bounds()
        )

        if self.redistribute and self.children:
            pending = self.children
            self.children = []
            for point in pending:
                child = self.quadrant_for(point)
                if child is None or not child._insert(point):
                    self.children.append(point)

    # ---- Queries ----

    def query(self, rect: RectLike) -> list[Point[T]]:
        """
        Return every stored point inside `rect`.

        Order is deterministic: this node's points in insertion order, then
        the results of the NW, NE, SE and SW quadrants.
        """
        rect = Rectangle.coerce(rect)
        found: list[Point[T]] = []
        stack: list[QuadNode[T]] = [self]
        while stack:
            node = stack.pop()
            if node.bounds.intersection(rect) is None:
                continue

            found.extend(p for p in node.children if rect.contains(p))

            if node.quads is not None:
                stack.extend(reversed(node.quads))
        return found

    def walk(self) -> Iterator[QuadNode[T]]:
        """Yield this node and all descendants in pre-order (self, NW, NE, SE, SW)."""
        stack: list[QuadNode[T]] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.quads is not None:
                stack.extend(reversed(node.quads))

    def count(self) -> int:
        """Return the number of points stored in this subtree."""
        return sum(len(node.children) for node in self.walk())

    def max_level(self) -> int:
        """Return the depth of the deepest node in this subtree."""
        return max(node.depth for node in self.walk())

    def node_boundaries(self) -> list[Bounds]:
        return [node.bounds.to_bounds() for node in self.walk()]

    # ---- Reset ----

    def clear(self) -> None:
        """Drop every point and quadrant, keeping bounds and capacities."""
        self.children.clear()
        self.quads = None

    def remove_nearest(self, point: PointLike) -> None:
        """Nearest-point removal is not supported."""
        raise NotImplementedError("remove_nearest is not supported by QuadNode")
