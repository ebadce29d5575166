"""regionquadtree - Region quadtree spatial index for 2D points."""

from ._config import QuadTreeConfig
from ._geometry import Point, Rectangle
from ._insert_result import InsertResult
from ._log import set_debug
from ._node import QuadNode
from .quadtree import QuadTree

__all__ = [
    "InsertResult",
    "Point",
    "QuadNode",
    "QuadTree",
    "QuadTreeConfig",
    "Rectangle",
    "set_debug",
]
