"""Boundary distance oracle and pairwise distance computation.

The oracle evaluates every edge of one ring against every edge of the
other. Each edge pair contributes five candidate point pairs: the four
endpoint-to-segment projections and, for segments that cross, the crossing
point itself. The closest candidate over the whole grid is the answer.
"""

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from itertools import combinations
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from ..core.constants import DISTANCE_EPSILON
from ..core.errors import BridgeCancelledError
from ..core.spatial_utils import (
    project_points_onto_segments,
    ring_edges,
    segment_crossings,
)
from ..core.types import Point
from .models import Connection


def boundary_distance(
    ring_a: np.ndarray,
    ring_b: np.ndarray
) -> Tuple[float, Point, Point]:
    """Minimal distance between the boundaries of two rings.

    Args:
        ring_a: Open ring of shape (n, 2)
        ring_b: Open ring of shape (m, 2)

    Returns:
        Tuple of (distance, point_a, point_b) where ``point_a`` lies on the
        boundary of A and ``point_b`` on the boundary of B

    Notes:
        Ties within ``DISTANCE_EPSILON`` of the minimum resolve to the first
        candidate in traversal order: edges of A ascending, then edges of B
        ascending. The result is therefore deterministic for a given input.

    Examples:
        >>> a = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        >>> b = a + [10, 0]
        >>> boundary_distance(a, b)[0]
        9.0
    """
    a_start, a_end = ring_edges(ring_a)
    b_start, b_end = ring_edges(ring_b)

    # Grid of edge pairs: axis 0 walks edges of A, axis 1 edges of B.
    a0 = a_start[:, np.newaxis, :]
    a1 = a_end[:, np.newaxis, :]
    b0 = b_start[np.newaxis, :, :]
    b1 = b_end[np.newaxis, :, :]
    a0, a1, b0, b1 = np.broadcast_arrays(a0, a1, b0, b1)

    on_b_from_a0, d_a0 = project_points_onto_segments(a0, b0, b1)
    on_b_from_a1, d_a1 = project_points_onto_segments(a1, b0, b1)
    on_a_from_b0, d_b0 = project_points_onto_segments(b0, a0, a1)
    on_a_from_b1, d_b1 = project_points_onto_segments(b1, a0, a1)

    crosses, crossing = segment_crossings(a0, a1, b0, b1)
    d_cross = np.where(crosses, 0.0, np.inf)

    distances = np.stack([d_a0, d_a1, d_b0, d_b1, d_cross], axis=-1)
    points_a = np.stack([a0, a1, on_a_from_b0, on_a_from_b1, crossing], axis=-2)
    points_b = np.stack([on_b_from_a0, on_b_from_a1, b0, b1, crossing], axis=-2)

    flat = distances.reshape(-1)
    best = float(flat.min())
    first = int(np.flatnonzero(flat <= best + DISTANCE_EPSILON)[0])

    point_a = points_a.reshape(-1, 2)[first]
    point_b = points_b.reshape(-1, 2)[first]
    return best, (float(point_a[0]), float(point_a[1])), (float(point_b[0]), float(point_b[1]))


def connect_pair(rings: Sequence[np.ndarray], i: int, j: int) -> Connection:
    """Build the candidate connection between polygons ``i`` and ``j``."""
    distance, point_i, point_j = boundary_distance(rings[i], rings[j])
    return Connection(
        from_index=i,
        to_index=j,
        distance=distance,
        from_point=point_i,
        to_point=point_j,
    )


def compute_pairwise_connections(
    rings: Sequence[np.ndarray],
    max_workers: Optional[int] = None,
    cancel_check: Optional[Callable[[], bool]] = None,
) -> List[Connection]:
    """Evaluate the boundary distance oracle for every unordered polygon pair.

    Args:
        rings: Open rings in the caller's input order
        max_workers: Thread count for the evaluation (None or 1 = sequential)
        cancel_check: Optional callable polled once per pair; returning True
            aborts the computation

    Returns:
        One connection per pair ``(i, j)`` with ``i < j``, in lexicographic
        pair order regardless of how the work was scheduled

    Raises:
        BridgeCancelledError: If ``cancel_check`` requested cancellation
    """
    pairs = list(combinations(range(len(rings)), 2))
    if not pairs:
        return []

    def evaluate(pair: Tuple[int, int]) -> Connection:
        if cancel_check is not None and cancel_check():
            raise BridgeCancelledError(
                f"Cancelled while measuring polygons {pair[0]} and {pair[1]}"
            )
        return connect_pair(rings, pair[0], pair[1])

    if max_workers is None or max_workers <= 1 or len(pairs) == 1:
        return [evaluate(pair) for pair in pairs]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(evaluate, pair) for pair in pairs]
        done, pending = wait(futures, return_when=FIRST_EXCEPTION)
        if pending:
            # A pair failed or was cancelled; drop the queued ones.
            executor.shutdown(wait=True, cancel_futures=True)
            failed = next(f for f in futures if f in done and f.exception() is not None)
            failed.result()
        # Collected in submission order, which keeps the output stable.
        return [future.result() for future in futures]


__all__ = [
    'boundary_distance',
    'connect_pair',
    'compute_pairwise_connections',
]
