"""Result types produced by bridge planning."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from shapely.geometry import Polygon

from ..core.types import Point


@dataclass(frozen=True)
class Connection:
    """Shortest boundary-to-boundary link between two input polygons.

    Attributes:
        from_index: Index of the first polygon in the caller's input order
        to_index: Index of the second polygon (always greater than ``from_index``)
        distance: Minimal Euclidean distance between the two boundaries
        from_point: Witness point on the boundary of ``from_index``
        to_point: Witness point on the boundary of ``to_index``
    """

    from_index: int
    to_index: int
    distance: float
    from_point: Point
    to_point: Point

    @property
    def sort_key(self) -> Tuple[float, int, int]:
        return (self.distance, self.from_index, self.to_index)


@dataclass(frozen=True)
class Corridor:
    """Quadrilateral strip bridging the witness points of a connection.

    Attributes:
        from_index: Index of the first connected polygon
        to_index: Index of the second connected polygon
        points: The four corners, wound like every other union input
        connection: The connection this corridor realizes
        width: Effective corridor width after clamping
    """

    from_index: int
    to_index: int
    points: Tuple[Point, ...]
    connection: Connection
    width: float

    @property
    def polygon(self) -> Polygon:
        if self.width <= 0:
            return Polygon()
        return Polygon(self.points)

    @property
    def area(self) -> float:
        return self.width * self.connection.distance


@dataclass
class MergeResult:
    """Outcome of :func:`polybridge.plan_bridges`.

    ``polygon`` is the merged outer ring (open, without a repeated closing
    vertex). It is empty when the union step failed, in which case
    ``corridors`` and ``connections`` are still complete.
    """

    polygon: List[Point] = field(default_factory=list)
    corridors: List[Corridor] = field(default_factory=list)
    connections: List[Connection] = field(default_factory=list)

    @property
    def is_merged(self) -> bool:
        return len(self.polygon) >= 3

    @property
    def geometry(self) -> Polygon:
        if not self.is_merged:
            return Polygon()
        return Polygon(self.polygon)


__all__ = [
    'Connection',
    'Corridor',
    'MergeResult',
]
