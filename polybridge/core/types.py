"""Type definitions for polybridge operations.

This module defines the enums and type aliases shared across the library.
"""

from enum import Enum
from typing import Sequence, Tuple, Type, TypeVar, Union

Point = Tuple[float, float]
Ring = Sequence[Point]

E = TypeVar('E', bound=Enum)


class Winding(Enum):
    """Ring orientation applied to every polygon handed to the union step.

    Attributes:
        CCW: Counter-clockwise in a y-up coordinate system (default)
        CW: Clockwise in a y-up coordinate system

    Examples:
        >>> from polybridge import plan_bridges, BridgeOptions, Winding
        >>> result = plan_bridges(polygons, BridgeOptions(winding=Winding.CW))
    """
    CCW = 'ccw'
    CW = 'cw'


def coerce_enum(value: Union[E, str], enum_type: Type[E]) -> E:
    """Return ``value`` as a member of ``enum_type``.

    Accepts an enum member or its string value (case-insensitive).

    Raises:
        ValueError: If the string does not name a member of ``enum_type``
    """
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        for member in enum_type:
            if member.value == normalized:
                return member
    valid = ", ".join(repr(m.value) for m in enum_type)
    raise ValueError(f"Unknown {enum_type.__name__}: {value!r} (expected one of {valid})")


__all__ = [
    'Point',
    'Ring',
    'Winding',
    'coerce_enum',
]
