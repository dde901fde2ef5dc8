"""Random per-cell phase table used by the jitter mode."""

from __future__ import annotations

import math

import numpy as np

from wavegrid.errors import ConfigurationError


class RandomOffsetTable:
    """Read-only ``grid_size x grid_size`` table of phases in ``[0, 2*pi)``.

    A table belongs to one grid size. When the grid is resized a new table is
    generated; existing tables are never mutated.
    """

    def __init__(self, phases: np.ndarray) -> None:
        if phases.ndim != 2 or phases.shape[0] != phases.shape[1]:
            raise ConfigurationError("offset table must be a square 2-D array")
        table = np.array(phases, dtype=np.float64)
        table.setflags(write=False)
        self._phases = table

    @property
    def grid_size(self) -> int:
        return int(self._phases.shape[0])

    @property
    def phases(self) -> np.ndarray:
        """The underlying read-only array, indexed ``[x, z]``."""
        return self._phases

    def phase(self, x: int, z: int) -> float:
        """Return the phase for cell ``(x, z)``; out-of-range coordinates raise IndexError."""
        n = self.grid_size
        if not (0 <= x < n and 0 <= z < n):
            raise IndexError(f"cell ({x}, {z}) outside offset table of size {n}")
        return float(self._phases[x, z])

    def __len__(self) -> int:
        return self.grid_size


def generate_offsets(grid_size: int, rng: np.random.Generator | None = None) -> RandomOffsetTable:
    """Draw ``grid_size**2`` independent uniform phases in ``[0, 2*pi)``."""
    if grid_size < 1:
        raise ConfigurationError("grid_size must be >= 1")
    generator = rng if rng is not None else np.random.default_rng()
    return RandomOffsetTable(generator.uniform(0.0, 2 * math.pi, size=(grid_size, grid_size)))
