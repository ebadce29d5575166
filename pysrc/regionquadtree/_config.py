# _config.py
"""QuadTreeConfig - construction-time options for QuadTree."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from ._geometry import Rectangle, RectLike
from ._log import logger

if TYPE_CHECKING:
    from .quadtree import QuadTree


@dataclass(frozen=True)
class QuadTreeConfig:
    """
    Immutable builder for QuadTree.

    Every ``with_*`` method returns a new config, so a tree is fully
    configured before its first insertion.

    `child_capacity` is captured by `new()`. A later `with_capacity()` only
    changes how many points the root stores itself, nodes created by
    splitting keep the capacity captured at construction.

    Example:
        ```python
        qt = (
            QuadTreeConfig.new((0, 0, 800, 600), capacity=4)
            .with_capacity(0)
            .with_quads()
            .build()
        )
        ```
    """

    bounds: Rectangle
    capacity: int
    child_capacity: int
    max_depth: int | None = None
    presplit: bool = False
    redistribute: bool = False
    dtype: str = "f64"

    @classmethod
    def new(cls, bounds: RectLike, capacity: int) -> QuadTreeConfig:
        return cls(Rectangle.coerce(bounds), capacity, capacity)

    def with_bounds(self, bounds: RectLike) -> QuadTreeConfig:
        return replace(self, bounds=Rectangle.coerce(bounds))

    def with_capacity(self, capacity: int) -> QuadTreeConfig:
        return replace(self, capacity=capacity)

    def with_quads(self, enabled: bool = True) -> QuadTreeConfig:
        """Pre-split the root into quadrants of `child_capacity`."""
        return replace(self, presplit=enabled)

    def with_max_depth(self, max_depth: int | None) -> QuadTreeConfig:
        return replace(self, max_depth=max_depth)

    def with_redistribute(self, enabled: bool = True) -> QuadTreeConfig:
        return replace(self, redistribute=enabled)

    def with_dtype(self, dtype: str) -> QuadTreeConfig:
        return replace(self, dtype=dtype)

    def build(self) -> QuadTree:
        """
        Build a new, empty QuadTree.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If dtype is not supported.
        """
        from .quadtree import QuadTree

        logger.debug("Building quadtree from %r", self)
        return QuadTree(
            self.bounds,
            self.capacity,
            max_depth=self.max_depth,
            dtype=self.dtype,
            presplit=self.presplit,
            child_capacity=self.child_capacity,
            redistribute=self.redistribute,
        )
