"""Tests for corridor synthesis."""

import math

import pytest
from shapely.geometry import Point

from polybridge.bridge.corridors import (
    build_corridor,
    corridor_axes,
    corridor_footprint,
    effective_corridor_width,
)
from polybridge.bridge.models import Connection
from polybridge.core.constants import CONTACT_TOLERANCE
from polybridge.core.types import Winding


def _horizontal(length: float = 4.0) -> Connection:
    return Connection(0, 1, length, (1.0, 0.5), (1.0 + length, 0.5))


class TestEffectiveCorridorWidth:
    """Tests for effective_corridor_width()."""

    def test_requested_width_fits(self):
        assert effective_corridor_width(20.0, 14.0, 6.0) == 14.0

    def test_clamped_to_distance(self):
        assert effective_corridor_width(10.0, 14.0, 6.0) == 10.0

    def test_gap_below_minimum_uses_gap(self):
        assert effective_corridor_width(4.0, 14.0, 6.0) == 4.0

    def test_zero_distance(self):
        assert effective_corridor_width(0.0, 14.0, 0.0) == 0.0

    @pytest.mark.parametrize("distance", [0.0, 0.5, 3.0, 6.0, 9.9, 14.0, 50.0])
    def test_never_wider_than_request_or_gap(self, distance):
        width = effective_corridor_width(distance, 10.0, 2.0)
        assert width <= 10.0
        assert width <= distance


class TestBuildCorridor:
    """Tests for build_corridor()."""

    def test_horizontal_corridor_corners(self):
        corridor = build_corridor(_horizontal(), corridor_width=2.0)

        assert corridor.width == 2.0
        assert corridor.points == (
            (1.0, -0.5), (5.0, -0.5), (5.0, 1.5), (1.0, 1.5)
        )
        assert corridor.from_index == 0
        assert corridor.to_index == 1

    def test_counter_clockwise_by_default(self):
        polygon = build_corridor(_horizontal(), corridor_width=2.0).polygon

        assert polygon.is_valid
        assert polygon.exterior.is_ccw
        assert polygon.area == pytest.approx(8.0)

    def test_clockwise_winding(self):
        corridor = build_corridor(_horizontal(), corridor_width=2.0, winding="cw")
        polygon = corridor.polygon

        assert not polygon.exterior.is_ccw
        assert polygon.area == pytest.approx(8.0)
        assert corridor.points[0] == (1.0, -0.5)

    def test_diagonal_corridor_is_perpendicular(self):
        connection = Connection(0, 1, 5.0, (0.0, 0.0), (3.0, 4.0))
        corridor = build_corridor(connection, corridor_width=2.0)

        p0, p1, _, p3 = corridor.points
        # Short sides have the corridor width, long sides the connection length
        assert math.dist(p0, p3) == pytest.approx(2.0)
        assert math.dist(p0, p1) == pytest.approx(5.0)
        assert corridor.polygon.area == pytest.approx(10.0)
        assert corridor.area == pytest.approx(10.0)

    def test_width_limited_by_distance(self):
        corridor = build_corridor(_horizontal(1.5), corridor_width=14.0, min_corridor_width=6.0)

        assert corridor.width == 1.5

    def test_coincident_witness_points(self):
        connection = Connection(0, 1, 0.0, (2.0, 2.0), (2.0, 2.0))
        corridor = build_corridor(connection, corridor_width=5.0)

        assert corridor.width == 0.0
        assert all(point == (2.0, 2.0) for point in corridor.points)
        assert corridor.polygon.is_empty

    def test_corridor_keeps_connection(self):
        connection = _horizontal()
        assert build_corridor(connection, corridor_width=1.0).connection is connection


class TestCorridorAxes:
    """Tests for corridor_axes()."""

    def test_default_direction_for_coincident_points(self):
        direction, normal = corridor_axes(Connection(0, 1, 0.0, (1.0, 1.0), (1.0, 1.0)))

        assert tuple(direction) == (1.0, 0.0)
        assert tuple(normal) == (0.0, 1.0)

    def test_normal_is_left_of_direction(self):
        direction, normal = corridor_axes(Connection(0, 1, 2.0, (0.0, 0.0), (0.0, 2.0)))

        assert tuple(direction) == pytest.approx((0.0, 1.0))
        assert tuple(normal) == pytest.approx((-1.0, 0.0))


class TestCorridorFootprint:
    """Tests for corridor_footprint()."""

    def test_footprint_reaches_past_witness_points(self):
        connection = Connection(0, 1, 10.0, (0.0, 0.0), (10.0, 0.0))
        corridor = build_corridor(connection, corridor_width=2.0)
        footprint = corridor_footprint(corridor, overlap=0.5)

        assert footprint.bounds == pytest.approx((-1.0, -1.0, 11.0, 1.0))
        assert footprint.area == pytest.approx(24.0)
        assert footprint.contains(corridor.polygon)

    def test_zero_overlap_matches_corridor(self):
        corridor = build_corridor(_horizontal(), corridor_width=2.0)
        footprint = corridor_footprint(corridor, overlap=0.0)

        assert footprint.equals(corridor.polygon)

    def test_narrow_corridor_footprint_covers_witness_points(self):
        connection = Connection(0, 1, 1e-12, (0.0, 0.0), (1e-12, 0.0))
        corridor = build_corridor(connection, corridor_width=3.0)
        footprint = corridor_footprint(corridor, overlap=0.01)

        assert footprint.contains(Point(0.0, 0.0))
        assert footprint.contains(Point(1e-12, 0.0))
        min_x, _, max_x, _ = footprint.bounds
        assert max_x - min_x == pytest.approx(2 * CONTACT_TOLERANCE, rel=1e-3)

    def test_zero_width_corridor_footprint(self):
        connection = Connection(0, 1, 0.0, (2.0, 3.0), (2.0, 3.0))
        corridor = build_corridor(connection, corridor_width=3.0)
        footprint = corridor_footprint(corridor, winding=Winding.CW)

        assert corridor.width == 0.0
        assert footprint.contains(Point(2.0, 3.0))
        assert footprint.area > 0.0
        assert not footprint.exterior.is_ccw

    def test_footprint_winding(self):
        corridor = build_corridor(_horizontal(), corridor_width=2.0, winding=Winding.CW)
        footprint = corridor_footprint(corridor, overlap=0.1, winding=Winding.CW)

        assert not footprint.exterior.is_ccw
