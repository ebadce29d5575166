# quadtree.py
"""QuadTree - region quadtree point index over a root QuadNode."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

from ._common import (
    QUADTREE_DTYPE_TO_NP_DTYPE,
    Bounds,
    _is_np_array,
    scalar_for_dtype,
    validate_capacity,
    validate_max_depth,
    validate_np_dtype,
    validate_point,
)
from ._geometry import Point, PointLike, Rectangle, RectLike
from ._insert_result import InsertResult
from ._log import logger
from ._node import QuadNode

if TYPE_CHECKING:
    from ._config import QuadTreeConfig


class QuadTree:
    """
    Region quadtree indexing 2D points.

    Points are kept at the finest node that can hold them under a fixed
    per-node capacity. A node that is full splits into four equal quadrants
    (NW, NE, SE, SW) and routes later insertions to them. Points stored
    before the split stay where they are unless `redistribute` is enabled.

    Performance characteristics:
        Inserts: average O(log n)
        Rect queries: average O(log n + k) where k is matches returned

    Thread-safety:
        Instances are not thread-safe. Use external synchronization if you
        mutate the same tree from multiple threads.

    Args:
        bounds: World rectangle as a Rectangle or (left, top, width, height).
            The right and bottom edges are exclusive, so pick bounds strictly
            larger than the largest coordinate you intend to insert.
        capacity: Max number of points the root stores before splitting.
        max_depth: Optional depth at which leaves stop splitting and grow
            past capacity instead. Unbounded if omitted.
        dtype: Coordinate type ('f32', 'f64', 'i32', 'i64'). Default is 'f64'.
            Inserted coordinates are coerced to float or int accordingly.
        presplit: Split the root up front so it never stores points itself
            and always routes to its quadrants.
        child_capacity: Capacity of nodes created by splitting. Defaults to
            `capacity`.
        redistribute: Move a node's stored points into its quadrants when it
            splits. Requires `max_depth`.

    Raises:
        ValueError: If parameters are invalid.
        TypeError: If dtype is not supported.

    Example:
        ```python
        qt = QuadTree((0.0, 0.0, 100.0, 100.0), capacity=4)
        qt.insert((10.0, 20.0))
        for point in qt.query((5.0, 5.0, 20.0, 20.0)):
            print(f"Point at ({point.x}, {point.y})")
        ```
    """

    __slots__ = (
        "_bounds",
        "_capacity",
        "_child_capacity",
        "_count",
        "_dtype",
        "_max_depth",
        "_native",
        "_presplit",
        "_redistribute",
        "_scalar",
    )

    # ---- Initialization ----

    def __init__(
        self,
        bounds: RectLike,
        capacity: int,
        *,
        max_depth: int | None = None,
        dtype: str = "f64",
        presplit: bool = False,
        child_capacity: int | None = None,
        redistribute: bool = False,
    ):
        self._scalar = scalar_for_dtype(dtype)
        self._dtype = dtype
        rect = Rectangle.coerce(bounds)
        self._bounds = Rectangle(
            self._scalar(rect.left),
            self._scalar(rect.top),
            self._scalar(rect.width),
            self._scalar(rect.height),
        )
        self._capacity = validate_capacity(capacity)
        self._child_capacity = validate_capacity(
            capacity if child_capacity is None else child_capacity,
            name="child_capacity",
            minimum=1,
        )
        self._max_depth = validate_max_depth(max_depth)
        if redistribute and self._max_depth is None:
            raise ValueError("redistribute requires max_depth to bound co-located points")
        self._presplit = presplit
        self._redistribute = redistribute

        self._native = self._new_native()
        self._count = 0

    @classmethod
    def from_config(cls, config: QuadTreeConfig) -> QuadTree:
        """Build a tree from a QuadTreeConfig."""
        return config.build()

    def _new_native(self) -> QuadNode:
        """Create the root node."""
        root = QuadNode(
            self._bounds,
            self._capacity,
            max_capacity=self._child_capacity,
            max_depth=self._max_depth,
            redistribute=self._redistribute,
        )
        if self._presplit:
            root.subdivide()
        return root

    def _coerce_point(self, point: PointLike) -> Point:
        x, y = point if isinstance(point, Point) else validate_point(point)
        return Point(self._scalar(x), self._scalar(y))

    # ---- Properties ----

    @property
    def bounds(self) -> Rectangle:
        return self._bounds

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def child_capacity(self) -> int:
        return self._child_capacity

    @property
    def max_depth(self) -> int | None:
        return self._max_depth

    @property
    def dtype(self) -> str:
        return self._dtype

    @property
    def root(self) -> QuadNode:
        """The root node, for callers that walk the tree themselves."""
        return self._native

    @property
    def children(self) -> list[Point]:
        """Points stored directly at the root."""
        return self._native.children

    @property
    def quads(self) -> tuple[QuadNode, ...] | None:
        """The root's quadrants (NW, NE, SE, SW), or None while it is a leaf."""
        return self._native.quads

    # ---- Insertion ----

    def insert(self, point: PointLike) -> bool:
        """
        Insert a single point.

        Args:
            point: Point or (x, y) tuple.

        Returns:
            True if the point was stored, False if it lies outside the bounds.
            A rejected point leaves the tree unchanged.
        """
        if self._native.insert(self._coerce_point(point)):
            self._count += 1
            return True
        return False

    def insert_many(self, points: Any) -> InsertResult:
        """
        Bulk insert points.

        Points outside the bounds are skipped and reported, the rest are
        inserted in order.

        Args:
            points: Sequence of points or an (N, 2) NumPy array.

        Returns:
            InsertResult with the accepted count and rejected positions.
        """
        if _is_np_array(points):
            return self.insert_many_np(points)

        result = InsertResult(count=0)
        for i, point in enumerate(points):
            if self.insert(point):
                result.count += 1
            else:
                result.rejected.append(i)
        return result

    def insert_many_np(self, points: Any) -> InsertResult:
        """
        Bulk insert points from a NumPy array.

        Args:
            points: NumPy array of shape (N, 2) with dtype matching the tree's dtype.

        Returns:
            InsertResult with the accepted count and rejected positions.

        Raises:
            TypeError: If points is not a NumPy array or dtype doesn't match.
            ValueError: If the array is not of shape (N, 2).
            ImportError: If NumPy is not installed.
        """
        if not _is_np_array(points):
            raise TypeError("insert_many_np requires a NumPy array")

        import numpy as np

        if not isinstance(points, np.ndarray):
            raise TypeError("insert_many_np requires a NumPy array")

        if points.size == 0:
            return InsertResult(count=0)

        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"expected an array of shape (N, 2), got {points.shape}")

        validate_np_dtype(points, self._dtype)

        return self.insert_many(points.tolist())

    # ---- Queries ----

    def query(self, rect: RectLike) -> list[Point]:
        """
        Return all points inside an axis-aligned rectangle.

        Args:
            rect: Query rectangle as a Rectangle or (left, top, width, height).

        Returns:
            List of Point. Each node contributes its own points in insertion
            order, then its NW, NE, SE and SW quadrants in turn.

        Example:
            ```python
            for point in qt.query((10.0, 10.0, 10.0, 10.0)):
                print(f"Found point at ({point.x}, {point.y})")
            ```
        """
        return self._native.query(rect)

    def query_np(self, rect: RectLike) -> Any:
        """
        Return all points inside an axis-aligned rectangle as a NumPy array.

        Args:
            rect: Query rectangle as a Rectangle or (left, top, width, height).

        Returns:
            NDArray with shape (N, 2) and dtype matching the tree.

        Raises:
            ImportError: If NumPy is not installed.
        """
        import numpy as np

        found = self._native.query(rect)
        np_dtype = QUADTREE_DTYPE_TO_NP_DTYPE[self._dtype]
        return np.array([p.as_tuple() for p in found], dtype=np_dtype).reshape(-1, 2)

    # ---- Traversal ----

    def walk(self) -> Iterator[QuadNode]:
        """
        Yield every node in pre-order (node, then NW, NE, SE, SW).

        Useful for renderers that draw node outlines and stored points.
        """
        return self._native.walk()

    def get_all_node_boundaries(self) -> list[Bounds]:
        """
        Return all node boundaries in the tree as (min_x, min_y, max_x, max_y).

        Useful for visualization.
        """
        return self._native.node_boundaries()

    def get_inner_max_depth(self) -> int:
        """Return the depth of the deepest node (0 while the root is a leaf)."""
        return self._native.max_level()

    def node_count(self) -> int:
        return sum(1 for _ in self._native.walk())

    def subdivide(self) -> None:
        """Split the root into quadrants. No-op if already split."""
        self._native.subdivide()

    # ---- Reset ----

    def clear(self) -> None:
        """
        Empty the tree in place, preserving bounds, capacities and max_depth.

        A presplit root is split again so it keeps routing to its quadrants.
        """
        self._native.clear()
        if self._presplit:
            self._native.subdivide()
        logger.debug("Cleared tree after %d points", self._count)
        self._count = 0

    def remove_nearest(self, point: PointLike) -> None:
        """
        Remove the stored point nearest to `point`.

        Raises:
            NotImplementedError: Always. Point removal is not supported.
        """
        self._native.remove_nearest(point)

    # ---- Utilities ----

    def __len__(self) -> int:
        """Return the number of points in the tree."""
        return self._count

    def __contains__(self, point: PointLike) -> bool:
        """
        Check if a point with exactly these coordinates is stored.

        Example:
            ```python
            qt.insert((10.0, 20.0))
            assert (10.0, 20.0) in qt
            assert (5.0, 5.0) not in qt
            ```
        """
        target = self._coerce_point(point)
        node: QuadNode | None = self._native
        if not node.bounds.contains(target):
            return False
        # Stored copies can only live on the path of nodes covering the point
        while node is not None:
            if target in node.children:
                return True
            if node.quads is None:
                return False
            node = node.quadrant_for(target)
        return False

    def __iter__(self) -> Iterator[Point]:
        """
        Iterate over all stored points in query order.

        Example:
            ```python
            for point in qt:
                print(f"({point.x}, {point.y})")
            ```
        """
        for node in self._native.walk():
            yield from node.children

    def __repr__(self) -> str:
        return (
            f"QuadTree(bounds={self._bounds!r}, capacity={self._capacity}, "
            f"dtype={self._dtype!r}, points={self._count})"
        )
