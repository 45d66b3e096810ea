"""Minimum spanning tree selection over candidate connections."""

from typing import Iterable, List

from .models import Connection


class UnionFind:
    """Disjoint sets over polygon indices ``0 .. count - 1``.

    Tracks the number of remaining sets so the planner can stop as soon as
    everything is connected.
    """

    def __init__(self, count: int):
        self.parent = list(range(count))
        self.size = [1] * count
        self.sets = count

    def find(self, index: int) -> int:
        parent = self.parent
        while parent[index] != index:
            # Path halving
            parent[index] = parent[parent[index]]
            index = parent[index]
        return index

    def union(self, a: int, b: int) -> bool:
        """Join the sets holding ``a`` and ``b``; False if they already share one."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self.size[root_a] < self.size[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        self.size[root_a] += self.size[root_b]
        self.sets -= 1
        return True


def select_spanning_connections(
    count: int,
    candidates: Iterable[Connection]
) -> List[Connection]:
    """Select a minimum spanning tree from candidate connections (Kruskal).

    Candidates are visited by ascending distance, ties broken by
    ``(from_index, to_index)``. A candidate is accepted when it joins two
    different components; selection stops once ``count - 1`` connections
    are accepted.

    Args:
        count: Number of polygons (graph nodes)
        candidates: Candidate connections, typically the complete pair graph

    Returns:
        Accepted connections in acceptance order

    Examples:
        >>> tree = select_spanning_connections(3, compute_pairwise_connections(rings))
        >>> len(tree)
        2
    """
    if count <= 1:
        return []

    forest = UnionFind(count)
    accepted: List[Connection] = []

    for connection in sorted(candidates, key=lambda c: c.sort_key):
        if forest.union(connection.from_index, connection.to_index):
            accepted.append(connection)
            if forest.sets == 1:
                break

    return accepted


def is_spanning_tree(count: int, connections: Iterable[Connection]) -> bool:
    """Check that ``connections`` form a spanning tree over ``count`` nodes.

    Replays the connections through a fresh union-find: the check fails on
    the first connection that closes a cycle, on a wrong edge count, or when
    more than one component remains.
    """
    connections = list(connections)
    if count < 1 or len(connections) != count - 1:
        return False

    forest = UnionFind(count)
    for connection in connections:
        if not (0 <= connection.from_index < count and 0 <= connection.to_index < count):
            return False
        if not forest.union(connection.from_index, connection.to_index):
            return False
    return forest.sets == 1


__all__ = [
    'UnionFind',
    'select_spanning_connections',
    'is_spanning_tree',
]
