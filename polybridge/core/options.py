"""Bridge planning options."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Optional, Union

from .errors import ConfigurationError
from .types import Winding, coerce_enum


@dataclass
class BridgeOptions:
    """Settings for :func:`polybridge.plan_bridges`.

    Attributes:
        corridor_width: Requested corridor width, must be positive
        min_corridor_width: Lower bound for the corridor width, between 0 and
            ``corridor_width``. Gaps narrower than this get a corridor exactly
            as wide as the gap.
        winding: Orientation of every ring handed to the union and of the
            merged ring (enum or string value)
        corridor_overlap: Fraction of the effective width by which corridor
            footprints reach into the two polygons they join during the union
        max_workers: Number of threads for the pairwise distance stage
            (None or 1 runs sequentially)
    """

    corridor_width: float = 14.0
    min_corridor_width: float = 0.0
    winding: Union[Winding, str] = Winding.CCW
    corridor_overlap: float = 0.01
    max_workers: Optional[int] = None

    def validate(self) -> "BridgeOptions":
        """Check ranges and coerce the winding, returning ``self``.

        Raises:
            ConfigurationError: If any setting is out of range
        """
        if not _is_finite_number(self.corridor_width) or self.corridor_width <= 0:
            raise ConfigurationError(
                f"corridor_width must be a positive number, got {self.corridor_width!r}"
            )
        if not _is_finite_number(self.min_corridor_width) or self.min_corridor_width < 0:
            raise ConfigurationError(
                f"min_corridor_width must be a non-negative number, got {self.min_corridor_width!r}"
            )
        if self.min_corridor_width > self.corridor_width:
            raise ConfigurationError(
                f"min_corridor_width ({self.min_corridor_width}) must not exceed "
                f"corridor_width ({self.corridor_width})"
            )
        if not _is_finite_number(self.corridor_overlap) or self.corridor_overlap < 0:
            raise ConfigurationError(
                f"corridor_overlap must be a non-negative number, got {self.corridor_overlap!r}"
            )
        if self.max_workers is not None and (
            isinstance(self.max_workers, bool)
            or not isinstance(self.max_workers, int)
            or self.max_workers < 1
        ):
            raise ConfigurationError(
                f"max_workers must be None or a positive integer, got {self.max_workers!r}"
            )
        try:
            self.winding = coerce_enum(self.winding, Winding)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        return self


def _is_finite_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


__all__ = ['BridgeOptions']
