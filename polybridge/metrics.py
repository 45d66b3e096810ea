"""Reporting helpers for planned bridges.

None of these feed back into planning; they summarize inputs and results
for display: shoelace areas, bounding boxes for framing, and a compact
summary of a :class:`~polybridge.bridge.models.MergeResult`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Union

import numpy as np
from shapely.geometry import Polygon

from .bridge.models import MergeResult
from .core.geometry_utils import as_ring_array, ring_signed_area
from .core.types import Point


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box."""

    min_x: float = 0.0
    min_y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def max_x(self) -> float:
        return self.min_x + self.width

    @property
    def max_y(self) -> float:
        return self.min_y + self.height


def signed_area(points: Union[Polygon, Sequence[Point]]) -> float:
    """Shoelace area of a ring, positive when counter-clockwise."""
    if not isinstance(points, Polygon) and len(points) < 3:
        return 0.0
    return ring_signed_area(as_ring_array(points))


def polygon_area(points: Union[Polygon, Sequence[Point]]) -> float:
    """Absolute shoelace area of a ring (0.0 for fewer than three points)."""
    return abs(signed_area(points))


def compute_bounds(shapes: Iterable[Sequence[Point]]) -> Bounds:
    """Bounding box of every point in ``shapes`` (all zeros when there are none).

    Examples:
        >>> compute_bounds([[(0, 0), (4, 0), (4, 2)], [(10, -1), (11, 3), (9, 3)]])
        Bounds(min_x=0.0, min_y=-1.0, width=11.0, height=4.0)
    """
    arrays = [np.asarray(shape, dtype=float).reshape(-1, 2) for shape in shapes if len(shape)]
    if not arrays:
        return Bounds()

    coords = np.vstack(arrays)
    min_xy = coords.min(axis=0)
    max_xy = coords.max(axis=0)
    return Bounds(
        min_x=float(min_xy[0]),
        min_y=float(min_xy[1]),
        width=float(max_xy[0] - min_xy[0]),
        height=float(max_xy[1] - min_xy[1]),
    )


def measure_result(
    polygons: Sequence[Sequence[Point]],
    result: MergeResult,
) -> Dict[str, Optional[float]]:
    """Return summary metrics for a planning result.

    ``merged_area`` is None when the union failed.
    """
    corridor_area = sum(polygon_area(c.points) for c in result.corridors)
    return {
        "is_merged": result.is_merged,
        "merged_area": polygon_area(result.polygon) if result.is_merged else None,
        "input_area": sum(polygon_area(p) for p in polygons),
        "corridor_area": corridor_area,
        "corridor_count": len(result.corridors),
        "connection_length": sum(c.distance for c in result.connections),
    }


__all__ = [
    "Bounds",
    "signed_area",
    "polygon_area",
    "compute_bounds",
    "measure_result",
]
