"""Boundary union of the input polygons and their corridors.

The planner only depends on the narrow :data:`UnionFunc` contract: take a
list of rings, return the outer ring of their combined area, and raise when
that area is not one connected piece. :func:`union_rings` implements it on
top of Shapely; any other implementation can be passed to
:func:`polybridge.plan_bridges` instead.
"""

from typing import Callable, List, Sequence

from shapely.geometry import MultiPolygon, Polygon
from shapely.ops import unary_union

from ..core.errors import MergeError
from ..core.geometry_utils import as_ring_array, ring_to_points
from ..core.types import Point, Ring

UnionFunc = Callable[[List[Ring]], Sequence[Point]]


def union_rings(rings: List[Ring]) -> List[Point]:
    """Merge rings into the outer boundary of their combined area.

    Args:
        rings: Simple rings that may touch or overlap

    Returns:
        Exterior of the union as an open ring. Interior holes are dropped.

    Raises:
        MergeError: If the union is empty or splits into several parts

    Examples:
        >>> merged = union_rings([[(0, 0), (2, 0), (2, 2), (0, 2)],
        ...                       [(1, 0), (3, 0), (3, 2), (1, 2)]])
        >>> Polygon(merged).area
        6.0
    """
    polygons = [Polygon(ring) for ring in rings if len(ring) >= 3]
    if not polygons:
        raise MergeError("Nothing to merge")

    merged = unary_union(polygons)

    if isinstance(merged, MultiPolygon):
        raise MergeError(f"Union produced {len(merged.geoms)} disconnected parts")
    if not isinstance(merged, Polygon) or merged.is_empty:
        raise MergeError(f"Union produced {merged.geom_type} instead of a polygon")

    return ring_to_points(as_ring_array(merged))


__all__ = [
    'UnionFunc',
    'union_rings',
]
