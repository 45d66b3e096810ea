"""Corridor synthesis - turn connections into bounded-width strips."""

from typing import Tuple, Union

import numpy as np
from shapely.geometry import LineString, Polygon
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry.polygon import orient

from ..core.constants import CONTACT_TOLERANCE, DISTANCE_EPSILON
from ..core.types import Point, Winding, coerce_enum
from .models import Connection, Corridor


def effective_corridor_width(
    distance: float,
    corridor_width: float,
    min_corridor_width: float
) -> float:
    """Width actually used for a corridor spanning a gap of ``distance``.

    A corridor is never wider than the gap it spans. Gaps narrower than
    ``min_corridor_width`` get a corridor exactly as wide as the gap;
    otherwise the requested width is clamped to ``[min_corridor_width, distance]``.

    Examples:
        >>> effective_corridor_width(20.0, 14.0, 6.0)
        14.0
        >>> effective_corridor_width(10.0, 14.0, 6.0)
        10.0
        >>> effective_corridor_width(4.0, 14.0, 6.0)
        4.0
    """
    if distance < min_corridor_width:
        return max(distance, 0.0)
    return min(max(corridor_width, min_corridor_width), distance)


def corridor_axes(connection: Connection) -> Tuple[np.ndarray, np.ndarray]:
    """Unit direction from ``from_point`` to ``to_point`` and its left normal.

    Near-coincident witness points fall back to the x axis.
    """
    start = np.asarray(connection.from_point, dtype=float)
    end = np.asarray(connection.to_point, dtype=float)
    delta = end - start
    length = float(np.hypot(delta[0], delta[1]))

    if length < DISTANCE_EPSILON:
        direction = np.array([1.0, 0.0])
    else:
        direction = delta / length
    normal = np.array([-direction[1], direction[0]])
    return direction, normal


def build_corridor(
    connection: Connection,
    corridor_width: float,
    min_corridor_width: float = 0.0,
    winding: Union[Winding, str] = Winding.CCW,
) -> Corridor:
    """Build the corridor quadrilateral for a connection.

    The corners are ``from_point +/- n * w / 2`` and ``to_point +/- n * w / 2``
    where ``n`` is the unit normal of the connection and ``w`` the effective
    width from :func:`effective_corridor_width`.

    Args:
        connection: Selected connection
        corridor_width: Requested width
        min_corridor_width: Lower bound of the width clamp
        winding: Orientation of the returned corners

    Returns:
        Corridor with four corners in the requested winding
    """
    winding = coerce_enum(winding, Winding)
    width = effective_corridor_width(connection.distance, corridor_width, min_corridor_width)
    _, normal = corridor_axes(connection)

    start = np.asarray(connection.from_point, dtype=float)
    end = np.asarray(connection.to_point, dtype=float)
    points = _strip_corners(start, end, normal * (width / 2.0), winding)

    return Corridor(
        from_index=connection.from_index,
        to_index=connection.to_index,
        points=points,
        connection=connection,
        width=width,
    )


def corridor_footprint(
    corridor: Corridor,
    overlap: float = 0.0,
    winding: Union[Winding, str] = Winding.CCW,
) -> Polygon:
    """Union input for a corridor, reaching ``overlap * width`` into each polygon.

    Witness points sit exactly on polygon boundaries, so a bare corridor can
    touch a polygon at a single vertex. Pushing both ends back along the
    connection direction turns such contacts into area overlaps.

    Corridors narrower than ``CONTACT_TOLERANCE`` (touching or nearly
    touching polygons) have no usable strip; the witness segment buffered by
    ``CONTACT_TOLERANCE`` is returned instead.

    Returns:
        The footprint polygon
    """
    winding = coerce_enum(winding, Winding)
    start = np.asarray(corridor.connection.from_point, dtype=float)
    end = np.asarray(corridor.connection.to_point, dtype=float)

    if corridor.width < CONTACT_TOLERANCE:
        if np.array_equal(start, end):
            contact = ShapelyPoint(start).buffer(CONTACT_TOLERANCE)
        else:
            contact = LineString([start, end]).buffer(CONTACT_TOLERANCE)
        return orient(contact, sign=1.0 if winding is Winding.CCW else -1.0)

    direction, normal = corridor_axes(corridor.connection)
    reach = direction * (corridor.width * overlap)
    return Polygon(_strip_corners(start - reach, end + reach, normal * (corridor.width / 2.0), winding))


def _strip_corners(
    start: np.ndarray,
    end: np.ndarray,
    half_normal: np.ndarray,
    winding: Winding
) -> Tuple[Point, ...]:
    # Right side forward, left side back: counter-clockwise.
    corners = [start - half_normal, end - half_normal, end + half_normal, start + half_normal]
    if winding is Winding.CW:
        corners = [corners[0], corners[3], corners[2], corners[1]]
    return tuple((float(c[0]), float(c[1])) for c in corners)


__all__ = [
    'effective_corridor_width',
    'corridor_axes',
    'build_corridor',
    'corridor_footprint',
]
