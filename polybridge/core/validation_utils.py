"""Structural validation and parsing of polygon input.

The planner assumes a non-empty list of distinct polygons with at least
three finite vertices each. These helpers enforce that contract and turn
violations into :class:`~polybridge.core.errors.ValidationError`.
"""

import json
from typing import List, Sequence, Union

import numpy as np
from shapely.geometry import Polygon

from .errors import ValidationError
from .geometry_utils import as_ring_array


def validate_polygons(
    polygons: Sequence[Union[Polygon, Sequence[Sequence[float]]]]
) -> List[np.ndarray]:
    """Validate input polygons and convert them to open ring arrays.

    Args:
        polygons: Shapely polygons or sequences of ``(x, y)`` pairs

    Returns:
        One ``(n, 2)`` float array per polygon, in input order

    Raises:
        ValidationError: If the list is empty, a polygon has fewer than
            three distinct vertices or non-finite coordinates, or two
            polygons have identical coordinates

    Examples:
        >>> rings = validate_polygons([[(0, 0), (1, 0), (1, 1)]])
        >>> rings[0].shape
        (3, 2)

        >>> validate_polygons([])
        Traceback (most recent call last):
        ...
        ValidationError: At least one polygon is required.
    """
    if polygons is None or len(polygons) == 0:
        raise ValidationError("At least one polygon is required.")

    rings: List[np.ndarray] = []
    seen = {}

    for index, polygon in enumerate(polygons):
        try:
            coords = as_ring_array(polygon)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Polygon {index} is not a sequence of (x, y) pairs: {e}") from e

        if not np.all(np.isfinite(coords)):
            raise ValidationError(f"Polygon {index} contains non-finite coordinates.")

        distinct = np.unique(coords, axis=0)
        if len(distinct) < 3:
            raise ValidationError(
                f"Polygon {index} must have at least three distinct points, got {len(distinct)}."
            )

        key = coords.tobytes()
        if key in seen:
            raise ValidationError(
                f"Polygon {index} duplicates polygon {seen[key]}; "
                "polygons with identical coordinates must be given only once."
            )
        seen[key] = index
        rings.append(coords)

    return rings


def parse_polygons(raw: str) -> List[np.ndarray]:
    """Parse a JSON payload of polygons and validate it.

    The payload is an array of polygons, each an array of ``[x, y]`` number
    pairs, for example ``[[[0, 0], [4, 0], [4, 4]], [[10, 0], [14, 0], [12, 3]]]``.

    Raises:
        ValidationError: If the JSON is malformed or has the wrong shape, or
            the polygons fail :func:`validate_polygons`
    """
    try:
        value = json.loads(raw)
    except (TypeError, json.JSONDecodeError) as e:
        raise ValidationError(f"Invalid JSON: {e}") from e

    if not isinstance(value, list):
        raise ValidationError("Expected a JSON array of polygons.")

    for index, polygon in enumerate(value):
        if not isinstance(polygon, list):
            raise ValidationError(f"Polygon {index} must be an array of points.")
        if len(polygon) < 3:
            raise ValidationError(f"Polygon {index} must have at least three points.")
        for point in polygon:
            if not _is_number_pair(point):
                raise ValidationError(
                    f"Polygon {index} has an invalid point {point!r}; expected [x, y]."
                )

    return validate_polygons(value)


def _is_number_pair(point) -> bool:
    if not isinstance(point, list) or len(point) != 2:
        return False
    return all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in point)


__all__ = [
    'validate_polygons',
    'parse_polygons',
]
