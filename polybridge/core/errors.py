"""Exception and warning types raised by polybridge."""


class PolybridgeError(Exception):
    """Base class for all polybridge errors."""
    pass


class ValidationError(PolybridgeError):
    """Raised when input polygons are structurally invalid.

    Covers an empty polygon list, polygons with fewer than three distinct
    vertices, non-finite coordinates and duplicate polygons.
    """
    pass


class ConfigurationError(PolybridgeError):
    """Raised when bridge options are out of range."""
    pass


class MergeError(PolybridgeError):
    """Raised when the boundary union cannot produce a single outer ring."""
    pass


class BridgeCancelledError(PolybridgeError):
    """Raised when a cancellation check asks the planner to stop."""
    pass


class MergeWarning(UserWarning):
    """Issued when bridges were planned but the merged boundary is unavailable.

    Attributes:
        message: Human readable description of the union failure
        corridor_count: Number of corridors that were still produced
    """

    def __init__(self, message: str, corridor_count: int = 0):
        super().__init__(message)
        self.message = message
        self.corridor_count = corridor_count

    def __str__(self) -> str:
        return f"{self.message} ({self.corridor_count} corridor(s) still available)"


__all__ = [
    'PolybridgeError',
    'ValidationError',
    'ConfigurationError',
    'MergeError',
    'BridgeCancelledError',
    'MergeWarning',
]
