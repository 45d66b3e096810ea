"""Core bridge planning orchestration logic."""

import warnings
from typing import Callable, List, Optional, Sequence, Union

import numpy as np
from shapely.geometry import Polygon

from ..core.errors import MergeWarning
from ..core.geometry_utils import as_ring_array, orient_ring, ring_to_points
from ..core.options import BridgeOptions
from ..core.types import Point, Winding
from ..core.validation_utils import validate_polygons
from .corridors import build_corridor, corridor_footprint
from .distance import compute_pairwise_connections
from .models import Corridor, MergeResult
from .planner import select_spanning_connections
from .union import UnionFunc, union_rings

PolygonInput = Union[Polygon, Sequence[Sequence[float]]]


def plan_bridges(
    polygons: Sequence[PolygonInput],
    options: Optional[BridgeOptions] = None,
    union_func: Optional[UnionFunc] = None,
    cancel_check: Optional[Callable[[], bool]] = None,
) -> MergeResult:
    """Connect disjoint polygons with minimal corridors and merge them.

    The pipeline runs once per call and keeps no state:

    1. Validate the input and normalize every ring to ``options.winding``
    2. Measure the boundary distance of every polygon pair
    3. Select a minimum spanning tree of those connections
    4. Build one corridor per selected connection
    5. Union the polygons and corridors into a single outer ring

    Args:
        polygons: Shapely polygons or sequences of ``(x, y)`` pairs
        options: Corridor width settings (defaults to :class:`BridgeOptions`)
        union_func: Replacement for :func:`~polybridge.bridge.union.union_rings`
        cancel_check: Optional callable polled once per polygon pair; returning
            True aborts with :class:`~polybridge.core.errors.BridgeCancelledError`

    Returns:
        MergeResult whose ``connections`` form a spanning tree over all input
        polygons (``len(polygons) - 1`` entries) in acceptance order, with one
        corridor per connection in the same order. If the union fails,
        ``polygon`` is empty and a :class:`~polybridge.core.errors.MergeWarning`
        is issued.

    Raises:
        ValidationError: If the polygon list is structurally invalid
        ConfigurationError: If the options are out of range

    Examples:
        >>> squares = [
        ...     [(0, 0), (10, 0), (10, 10), (0, 10)],
        ...     [(20, 0), (30, 0), (30, 10), (20, 10)],
        ... ]
        >>> result = plan_bridges(squares, BridgeOptions(corridor_width=4.0))
        >>> result.connections[0].distance
        10.0
        >>> result.corridors[0].width
        4.0
    """
    options = (options or BridgeOptions()).validate()
    union_func = union_func or union_rings

    rings = [orient_ring(ring, options.winding) for ring in validate_polygons(polygons)]

    candidates = compute_pairwise_connections(
        rings,
        max_workers=options.max_workers,
        cancel_check=cancel_check,
    )
    connections = select_spanning_connections(len(rings), candidates)
    corridors = [
        build_corridor(
            connection,
            options.corridor_width,
            options.min_corridor_width,
            winding=options.winding,
        )
        for connection in connections
    ]

    merged = _merge_boundary(rings, corridors, options, union_func)
    return MergeResult(polygon=merged, corridors=corridors, connections=connections)


def merge_disjoint_polygons(
    polygons: Sequence[PolygonInput],
    corridor_width: float = 14.0,
    min_corridor_width: float = 0.0,
    winding: Union[Winding, str] = Winding.CCW,
    union_func: Optional[UnionFunc] = None,
) -> MergeResult:
    """Keyword-argument form of :func:`plan_bridges`.

    Examples:
        >>> result = merge_disjoint_polygons(polygons, corridor_width=8.0)
        >>> len(result.corridors) == len(polygons) - 1
        True
    """
    options = BridgeOptions(
        corridor_width=corridor_width,
        min_corridor_width=min_corridor_width,
        winding=winding,
    )
    return plan_bridges(polygons, options, union_func=union_func)


def _merge_boundary(
    rings: List[np.ndarray],
    corridors: List[Corridor],
    options: BridgeOptions,
    union_func: UnionFunc,
) -> List[Point]:
    """Union rings and corridor footprints, degrading to ``[]`` on failure."""
    shapes: List[List[Point]] = [ring_to_points(ring) for ring in rings]
    for corridor in corridors:
        footprint = corridor_footprint(corridor, options.corridor_overlap, options.winding)
        shapes.append(ring_to_points(as_ring_array(footprint)))

    try:
        merged = union_func(shapes)
        merged_ring = as_ring_array(merged) if merged is not None else np.empty((0, 2))
    except Exception as e:
        # Connections and corridors are already final; only the outline is lost.
        warnings.warn(
            MergeWarning(f"Boundary union failed: {e}", corridor_count=len(corridors)),
            stacklevel=3,
        )
        return []

    if len(merged_ring) < 3:
        warnings.warn(
            MergeWarning("Boundary union returned no polygon", corridor_count=len(corridors)),
            stacklevel=3,
        )
        return []

    return ring_to_points(orient_ring(merged_ring, options.winding))


__all__ = [
    'plan_bridges',
    'merge_disjoint_polygons',
]
