"""Configuration layer: tuning constants and typed config dataclasses."""

from wavegrid.config.constants import (
    COLOR_THRESHOLD,
    EXPIRY_LEAD_MS,
    GRID_SIZE,
    MARGIN,
    NUM_EMITTERS,
    RIPPLE_RADIUS,
)
from wavegrid.config.types import (
    BUBBLE_TIMING,
    RAINDROP_TIMING,
    AmbientWaveConfig,
    EmitterTiming,
    GridConfig,
    JitterConfig,
    RadialPulseConfig,
    RippleConfig,
    SessionConfig,
    WaveConfig,
    WaveMode,
)

__all__ = [
    "AmbientWaveConfig",
    "BUBBLE_TIMING",
    "COLOR_THRESHOLD",
    "EXPIRY_LEAD_MS",
    "EmitterTiming",
    "GRID_SIZE",
    "GridConfig",
    "JitterConfig",
    "MARGIN",
    "NUM_EMITTERS",
    "RAINDROP_TIMING",
    "RIPPLE_RADIUS",
    "RadialPulseConfig",
    "RippleConfig",
    "SessionConfig",
    "WaveConfig",
    "WaveMode",
]
