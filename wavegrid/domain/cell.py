"""Integer grid coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Cell:
    """A grid cell at column ``x`` and row ``z``, 0-indexed."""

    x: int
    z: int

    def distance_to(self, x: float, z: float) -> float:
        """Planar Euclidean distance from this cell to the point ``(x, z)``."""
        return math.hypot(self.x - x, self.z - z)
