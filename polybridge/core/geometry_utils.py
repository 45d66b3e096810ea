"""Common ring manipulation utilities.

Rings are handled internally as ``(n, 2)`` float arrays without a repeated
closing vertex. These helpers convert between that form, plain point lists
and Shapely polygons, and normalize orientation.
"""

from typing import List, Sequence, Union

import numpy as np
from shapely.geometry import Polygon

from .types import Point, Winding


def as_ring_array(points: Union[Polygon, Sequence[Sequence[float]]]) -> np.ndarray:
    """Convert a polygon or point sequence into an open ``(n, 2)`` float array.

    A Shapely polygon contributes its exterior. An explicit closing vertex
    (last equal to first) is dropped.

    Examples:
        >>> as_ring_array([(0, 0), (1, 0), (1, 1), (0, 0)])
        array([[0., 0.],
               [1., 0.],
               [1., 1.]])
    """
    if isinstance(points, Polygon):
        if points.is_empty:
            return np.empty((0, 2))
        if points.has_z:
            raise ValueError("Expected a 2-D polygon, got one with z coordinates")
        coords = np.asarray(points.exterior.coords, dtype=float)
    else:
        coords = np.asarray(points, dtype=float)

    if coords.size == 0:
        return np.empty((0, 2))
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f"Expected a sequence of (x, y) pairs, got array of shape {coords.shape}")

    if len(coords) > 1 and np.array_equal(coords[0], coords[-1]):
        coords = coords[:-1]
    return coords


def ring_signed_area(coords: np.ndarray) -> float:
    """Shoelace signed area of an open ring (positive when counter-clockwise)."""
    if len(coords) < 3:
        return 0.0
    x = coords[:, 0]
    y = coords[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


def orient_ring(coords: np.ndarray, winding: Winding = Winding.CCW) -> np.ndarray:
    """Return ``coords`` ordered with the requested winding.

    The first vertex is kept in place so the traversal start is stable.
    Degenerate (zero area) rings are returned unchanged.
    """
    area = ring_signed_area(coords)
    if area == 0.0:
        return coords
    if (area > 0) == (winding is Winding.CCW):
        return coords
    return np.vstack([coords[:1], coords[:0:-1]])


def ring_to_points(coords: np.ndarray) -> List[Point]:
    """Convert a ring array into a list of ``(x, y)`` float tuples."""
    return [(float(x), float(y)) for x, y in coords]


def ring_to_polygon(coords: Union[np.ndarray, Sequence[Point]]) -> Polygon:
    """Build a Shapely polygon from an open ring (empty polygon for < 3 points)."""
    if len(coords) < 3:
        return Polygon()
    return Polygon(coords)


__all__ = [
    'as_ring_array',
    'ring_signed_area',
    'orient_ring',
    'ring_to_points',
    'ring_to_polygon',
]
