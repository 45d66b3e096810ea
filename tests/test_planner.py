"""Tests for spanning tree selection."""

import numpy as np
import pytest

from polybridge.bridge.distance import compute_pairwise_connections
from polybridge.bridge.models import Connection
from polybridge.bridge.planner import (
    UnionFind,
    is_spanning_tree,
    select_spanning_connections,
)


def _conn(i: int, j: int, distance: float) -> Connection:
    return Connection(i, j, distance, (0.0, 0.0), (distance, 0.0))


def _pairs(connections):
    return [(c.from_index, c.to_index) for c in connections]


class TestUnionFind:
    """Tests for the UnionFind helper."""

    def test_union_and_find(self):
        forest = UnionFind(4)
        assert forest.union(0, 1)
        assert forest.union(2, 3)
        assert forest.find(0) == forest.find(1)
        assert forest.find(0) != forest.find(2)
        assert forest.sets == 2

    def test_union_of_joined_sets_returns_false(self):
        forest = UnionFind(3)
        forest.union(0, 1)
        forest.union(1, 2)
        assert not forest.union(0, 2)
        assert forest.sets == 1

    def test_larger_set_keeps_its_root(self):
        forest = UnionFind(5)
        forest.union(0, 1)
        forest.union(0, 2)
        root = forest.find(0)
        forest.union(3, 0)
        assert forest.find(3) == root
        assert forest.size[root] == 4
        assert forest.sets == 2


class TestSelectSpanningConnections:
    """Tests for select_spanning_connections()."""

    def test_chain_beats_direct_link(self):
        """Gaps 5 and 7 are chosen over the redundant end-to-end link of 12."""
        candidates = [_conn(0, 1, 5.0), _conn(0, 2, 12.0), _conn(1, 2, 7.0)]
        tree = select_spanning_connections(3, candidates)

        assert _pairs(tree) == [(0, 1), (1, 2)]
        assert sum(c.distance for c in tree) == pytest.approx(12.0)

    def test_rejects_cycle_even_when_shorter(self):
        candidates = [
            _conn(0, 1, 1.0),
            _conn(1, 2, 2.0),
            _conn(0, 2, 2.5),
            _conn(2, 3, 3.0),
        ]
        tree = select_spanning_connections(4, candidates)

        assert _pairs(tree) == [(0, 1), (1, 2), (2, 3)]

    def test_ties_break_by_index(self):
        candidates = [_conn(1, 2, 4.0), _conn(0, 2, 4.0), _conn(0, 1, 4.0)]
        tree = select_spanning_connections(3, candidates)

        assert _pairs(tree) == [(0, 1), (0, 2)]

    def test_single_polygon(self):
        assert select_spanning_connections(1, []) == []

    def test_acceptance_order(self):
        candidates = [_conn(0, 1, 9.0), _conn(1, 2, 3.0), _conn(0, 2, 20.0)]
        tree = select_spanning_connections(3, candidates)

        assert [c.distance for c in tree] == [3.0, 9.0]

    def test_collinear_squares(self):
        rings = [
            np.array([(0, 0), (1, 0), (1, 1), (0, 1)], dtype=float),
            np.array([(6, 0), (7, 0), (7, 1), (6, 1)], dtype=float),
            np.array([(14, 0), (15, 0), (15, 1), (14, 1)], dtype=float),
        ]
        tree = select_spanning_connections(3, compute_pairwise_connections(rings))

        assert _pairs(tree) == [(0, 1), (1, 2)]
        assert [c.distance for c in tree] == pytest.approx([5.0, 7.0])


class TestIsSpanningTree:
    """Tests for is_spanning_tree()."""

    def test_valid_tree(self):
        assert is_spanning_tree(3, [_conn(0, 1, 1.0), _conn(1, 2, 1.0)])

    def test_single_node(self):
        assert is_spanning_tree(1, [])

    def test_cycle(self):
        assert not is_spanning_tree(3, [_conn(0, 1, 1.0), _conn(1, 0, 1.0)])

    def test_wrong_edge_count(self):
        assert not is_spanning_tree(4, [_conn(0, 1, 1.0), _conn(1, 2, 1.0)])

    def test_index_out_of_range(self):
        assert not is_spanning_tree(2, [_conn(0, 5, 1.0)])
