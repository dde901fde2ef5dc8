"""Field layer: scalar and vectorised height functions per wave mode."""

from wavegrid.field.grid import cell_coordinates, evaluate_grid
from wavegrid.field.waves import (
    FieldContext,
    HeightSample,
    ambient_wave,
    cell_jitter,
    evaluate,
    radial_pulse,
    ripple_contribution,
    ripple_field,
)

__all__ = [
    "FieldContext",
    "HeightSample",
    "ambient_wave",
    "cell_coordinates",
    "cell_jitter",
    "evaluate",
    "evaluate_grid",
    "radial_pulse",
    "ripple_contribution",
    "ripple_field",
]
