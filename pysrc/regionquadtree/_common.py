# _common.py
"""Common utilities and constants shared across the quadtree modules."""

from __future__ import annotations

from typing import Any, Callable, Union

# Type aliases
Bounds = tuple[float, float, float, float]
"""Normalized axis-aligned rectangle as (min_x, min_y, max_x, max_y)."""

RectTuple = tuple[float, float, float, float]
"""Rectangle as (left, top, width, height)."""

PointTuple = tuple[float, float]
"""2D point as (x, y)."""

Number = Union[int, float]

# Dtype mappings
QUADTREE_DTYPE_TO_NP_DTYPE = {
    "f32": "float32",
    "f64": "float64",
    "i32": "int32",
    "i64": "int64",
}
"""Mapping from quadtree dtype strings to NumPy dtype strings."""

QUADTREE_DTYPE_TO_SCALAR: dict[str, Callable[[Any], Number]] = {
    "f32": float,
    "f64": float,
    "i32": int,
    "i64": int,
}
"""Mapping from quadtree dtype strings to the Python scalar used for coordinates."""


def _is_np_array(x: Any) -> bool:
    """
    Check if x is a NumPy array without importing NumPy.

    This allows dtype checking without forcing NumPy as a hard dependency.

    Args:
        x: Object to check.

    Returns:
        True if x is a NumPy array.
    """
    mod = getattr(x.__class__, "__module__", "")
    return mod.startswith("numpy") and hasattr(x, "ndim") and hasattr(x, "shape")


def scalar_for_dtype(dtype: str) -> Callable[[Any], Number]:
    """
    Return the coordinate coercion function for a dtype.

    Raises:
        TypeError: If the dtype is not supported.
    """
    scalar = QUADTREE_DTYPE_TO_SCALAR.get(dtype)
    if scalar is None:
        raise TypeError(f"Unsupported dtype: {dtype}")
    return scalar


def validate_rect(rect: Any) -> RectTuple:
    """
    Validate a rectangle given as a sequence.

    Args:
        rect: Rectangle as sequence of 4 numbers (left, top, width, height).

    Returns:
        Validated rectangle as tuple.

    Raises:
        ValueError: If the rectangle is invalid.
    """
    if type(rect) is not tuple:
        rect = tuple(rect)
    if len(rect) != 4:
        raise ValueError(
            "rectangle must be a tuple of four numeric values (left, top, width, height)"
        )
    return rect  # type: ignore[return-value]


def validate_point(point: Any) -> PointTuple:
    """
    Validate a point given as a sequence.

    Raises:
        ValueError: If the point does not have exactly two components.
    """
    if type(point) is not tuple:
        point = tuple(point)
    if len(point) != 2:
        raise ValueError("point must be a tuple of two numeric values (x, y)")
    return point  # type: ignore[return-value]


def validate_capacity(capacity: int, *, name: str = "capacity", minimum: int = 0) -> int:
    """
    Validate a node capacity.

    Raises:
        ValueError: If capacity is not an integer at least `minimum`.
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ValueError(f"{name} must be an integer, got {capacity!r}")
    if capacity < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {capacity}")
    return capacity


def validate_max_depth(max_depth: int | None) -> int | None:
    """
    Validate an optional depth cutoff.

    Raises:
        ValueError: If max_depth is negative or not an integer.
    """
    if max_depth is None:
        return None
    return validate_capacity(max_depth, name="max_depth")


def validate_np_dtype(geoms: Any, expected_dtype: str) -> None:
    """
    Validate that a NumPy array's dtype matches expected dtype.

    Args:
        geoms: NumPy array to validate.
        expected_dtype: Expected quadtree dtype ('f32', 'f64', 'i32', 'i64').

    Raises:
        TypeError: If dtype doesn't match.
    """
    expected_np_dtype = QUADTREE_DTYPE_TO_NP_DTYPE.get(expected_dtype)
    if geoms.dtype != expected_np_dtype:
        raise TypeError(
            f"NumPy array dtype {geoms.dtype} does not match quadtree dtype {expected_dtype}"
        )
