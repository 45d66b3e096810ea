"""Numeric tolerances shared by the distance oracle and corridor synthesis."""

# Distances (and distance ties) closer than this are treated as equal.
DISTANCE_EPSILON = 1e-9

# Squared edge length below which an edge is treated as a single point.
EDGE_EPSILON = 1e-12

# Corridors narrower than this are replaced in the union by the witness
# segment buffered by this radius, so touching or near-touching polygons
# still overlap in area.
CONTACT_TOLERANCE = 1e-6

__all__ = [
    'DISTANCE_EPSILON',
    'EDGE_EPSILON',
    'CONTACT_TOLERANCE',
]
