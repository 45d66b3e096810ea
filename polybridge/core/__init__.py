"""Core types and utilities for polybridge.

This module provides type definitions, enums, options, exceptions, and
tolerances used throughout the library.
"""

from .types import (
    Point,
    Ring,
    Winding,
    coerce_enum,
)

from .options import BridgeOptions

from .constants import (
    DISTANCE_EPSILON,
    EDGE_EPSILON,
    CONTACT_TOLERANCE,
)

from .errors import (
    PolybridgeError,
    ValidationError,
    ConfigurationError,
    MergeError,
    BridgeCancelledError,
    MergeWarning,
)

__all__ = [
    # Types
    'Point',
    'Ring',
    'Winding',
    'coerce_enum',

    # Options
    'BridgeOptions',

    # Tolerances
    'DISTANCE_EPSILON',
    'EDGE_EPSILON',
    'CONTACT_TOLERANCE',

    # Exceptions
    'PolybridgeError',
    'ValidationError',
    'ConfigurationError',
    'MergeError',
    'BridgeCancelledError',
    'MergeWarning',
]
