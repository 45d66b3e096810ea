"""Bridge planning: distance oracle, spanning tree, corridors and union."""

from .core import plan_bridges, merge_disjoint_polygons
from .models import Connection, Corridor, MergeResult
from .distance import boundary_distance, compute_pairwise_connections
from .planner import UnionFind, select_spanning_connections, is_spanning_tree
from .corridors import effective_corridor_width, build_corridor, corridor_footprint
from .union import UnionFunc, union_rings

__all__ = [
    'plan_bridges',
    'merge_disjoint_polygons',
    'Connection',
    'Corridor',
    'MergeResult',
    'boundary_distance',
    'compute_pairwise_connections',
    'UnionFind',
    'select_spanning_connections',
    'is_spanning_tree',
    'effective_corridor_width',
    'build_corridor',
    'corridor_footprint',
    'UnionFunc',
    'union_rings',
]
