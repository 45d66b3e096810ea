"""Vectorized segment geometry used by the boundary distance oracle.

All functions broadcast over leading dimensions so a full edge-by-edge grid
of two rings can be evaluated in one pass.
"""

from typing import Tuple

import numpy as np

from .constants import EDGE_EPSILON


def ring_edges(coords: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(starts, ends)`` of the edges of an open ring.

    Edge ``k`` runs from vertex ``k`` to vertex ``k + 1``; the last edge
    closes the ring back to vertex 0.

    Examples:
        >>> starts, ends = ring_edges(np.array([[0, 0], [1, 0], [1, 1]]))
        >>> ends[-1]
        array([0, 0])
    """
    return coords, np.roll(coords, -1, axis=0)


def project_points_onto_segments(
    points: np.ndarray,
    segment_start: np.ndarray,
    segment_end: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """Project points onto segments and calculate distances.

    Uses the parametric representation P(t) = start + t * (end - start)
    with t clamped to [0, 1]. Segments shorter than ``sqrt(EDGE_EPSILON)``
    are treated as the single point ``segment_start``.

    Args:
        points: Array of shape (..., 2)
        segment_start: Array of shape (..., 2), broadcastable with ``points``
        segment_end: Array of shape (..., 2), broadcastable with ``points``

    Returns:
        Tuple of (projected_points, distances) with shapes (..., 2) and (...)

    Examples:
        >>> proj, dist = project_points_onto_segments(
        ...     np.array([0.5, 1.0]), np.array([0.0, 0.0]), np.array([1.0, 0.0]))
        >>> proj
        array([0.5, 0. ])
        >>> dist
        1.0
    """
    line_vec = segment_end - segment_start
    line_len_sq = np.sum(line_vec * line_vec, axis=-1)
    degenerate = line_len_sq < EDGE_EPSILON

    safe_len_sq = np.where(degenerate, 1.0, line_len_sq)
    t = np.sum((points - segment_start) * line_vec, axis=-1) / safe_len_sq
    t = np.where(degenerate, 0.0, np.clip(t, 0.0, 1.0))

    projection = segment_start + t[..., np.newaxis] * line_vec
    distance = np.linalg.norm(points - projection, axis=-1)
    return projection, distance


def segment_crossings(
    a_start: np.ndarray,
    a_end: np.ndarray,
    b_start: np.ndarray,
    b_end: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """Find where non-parallel segment pairs intersect.

    Returns:
        Tuple of (mask, points): ``mask`` is True where segment A and segment
        B intersect at a single point, ``points`` holds that point (undefined
        where ``mask`` is False). Parallel and degenerate pairs are never
        reported; endpoint projections already cover them.
    """
    da = a_end - a_start
    db = b_end - b_start
    offset = b_start - a_start

    denom = _cross(da, db)
    scale = np.sqrt(np.sum(da * da, axis=-1) * np.sum(db * db, axis=-1))
    valid = np.abs(denom) > EDGE_EPSILON * np.maximum(scale, 1.0)

    safe_denom = np.where(valid, denom, 1.0)
    t = _cross(offset, db) / safe_denom
    u = _cross(offset, da) / safe_denom

    mask = valid & (t >= 0.0) & (t <= 1.0) & (u >= 0.0) & (u <= 1.0)
    points = a_start + np.where(mask, t, 0.0)[..., np.newaxis] * da
    return mask, points


def _cross(v: np.ndarray, w: np.ndarray) -> np.ndarray:
    return v[..., 0] * w[..., 1] - v[..., 1] * w[..., 0]


__all__ = [
    'ring_edges',
    'project_points_onto_segments',
    'segment_crossings',
]
