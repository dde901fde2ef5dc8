"""Domain layer: grid cells, random phase tables and the emitter pool."""

from wavegrid.domain.cell import Cell
from wavegrid.domain.emitters import (
    Emitter,
    EmitterPool,
    now_ms,
    random_cell_in_margin,
    random_duration,
)
from wavegrid.domain.offsets import RandomOffsetTable, generate_offsets

__all__ = [
    "Cell",
    "Emitter",
    "EmitterPool",
    "RandomOffsetTable",
    "generate_offsets",
    "now_ms",
    "random_cell_in_margin",
    "random_duration",
]
