"""Polybridge - connect disjoint polygons with minimal corridors.

This library plans the shortest set of corridors that joins a collection of
disjoint simple polygons into one contiguous region, builds the corridor
geometry, and merges everything into a single outline using Shapely.
"""


# Bridge planning
from .bridge import (
    plan_bridges,
    merge_disjoint_polygons,
    boundary_distance,
    compute_pairwise_connections,
    select_spanning_connections,
    is_spanning_tree,
    effective_corridor_width,
    build_corridor,
    union_rings,
)

# Result types
from .bridge import Connection, Corridor, MergeResult

# Input handling
from .core.validation_utils import validate_polygons, parse_polygons

# Reporting
from .metrics import Bounds, polygon_area, compute_bounds, measure_result

# Options and types
from .core import BridgeOptions, Winding

# Core exceptions
from .core import (
    PolybridgeError,
    ValidationError,
    ConfigurationError,
    MergeError,
    BridgeCancelledError,
    MergeWarning,
)

__all__ = [

    # Bridge planning
    'plan_bridges',
    'merge_disjoint_polygons',
    'boundary_distance',
    'compute_pairwise_connections',
    'select_spanning_connections',
    'is_spanning_tree',
    'effective_corridor_width',
    'build_corridor',
    'union_rings',

    # Result types
    'Connection',
    'Corridor',
    'MergeResult',

    # Input handling
    'validate_polygons',
    'parse_polygons',

    # Reporting
    'Bounds',
    'polygon_area',
    'compute_bounds',
    'measure_result',

    # Options and types
    'BridgeOptions',
    'Winding',

    # Core exceptions
    'PolybridgeError',
    'ValidationError',
    'ConfigurationError',
    'MergeError',
    'BridgeCancelledError',
    'MergeWarning',
]
