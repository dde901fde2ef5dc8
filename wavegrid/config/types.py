"""Configuration dataclasses for the wave-field engine.

All frozen dataclasses that parameterise the grid, the emitter lifecycle, the
per-mode wave functions and a whole simulation session live here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from wavegrid.config.constants import (
    AMBIENT_AMPLITUDE,
    AMBIENT_COORD_SHIFT,
    AMBIENT_PHASE_X,
    AMBIENT_PHASE_Z,
    AMBIENT_WAVE_SPEED,
    BASE_HUE,
    BASE_LIGHTNESS,
    BASE_SATURATION,
    BLEND_PERCENT,
    BUBBLE_MAX_DURATION_MS,
    BUBBLE_MIN_DURATION_MS,
    EXPIRY_LEAD_MS,
    GRID_SIZE,
    JITTER_SCALE,
    JITTER_WAVE_SPEED,
    MARGIN,
    NUM_EMITTERS,
    PULSE_SCALE,
    PULSE_WAVE_SPEED,
    RAINDROP_MAX_DURATION_MS,
    RAINDROP_MIN_DURATION_MS,
    RIPPLE_HEIGHT_MULTIPLIER,
    RIPPLE_NORMALIZATION_MS,
    RIPPLE_RADIUS,
    RIPPLE_TIME_DECAY_FACTOR,
    RIPPLE_WAVE_SPEED,
)
from wavegrid.errors import ConfigurationError

__all__ = [
    "AmbientWaveConfig",
    "BUBBLE_TIMING",
    "EmitterTiming",
    "GridConfig",
    "JitterConfig",
    "RAINDROP_TIMING",
    "RadialPulseConfig",
    "RippleConfig",
    "SessionConfig",
    "WaveConfig",
    "WaveMode",
]

# ---------------------------------------------------------------------------
# Mode selector
# ---------------------------------------------------------------------------


class WaveMode(Enum):
    """Height function selector; values match the animation slider positions."""

    AMBIENT = 1
    RADIAL_PULSE = 2
    JITTER = 3
    RIPPLE = 4
    RESERVED_5 = 5
    RESERVED_6 = 6
    RESERVED_7 = 7
    RESERVED_8 = 8
    RESERVED_9 = 9

    @property
    def implemented(self) -> bool:
        """False for the reserved slots that evaluate to a placeholder zero."""
        return self.value <= WaveMode.RIPPLE.value


# ---------------------------------------------------------------------------
# Grid and emitter lifecycle
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GridConfig:
    """Square grid of ``grid_size`` cells per side with an emitter spawn inset."""

    grid_size: int = GRID_SIZE
    margin: int = MARGIN

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ConfigurationError("grid_size must be >= 1")
        if self.margin < 0:
            raise ConfigurationError("margin must be >= 0")
        if 2 * self.margin >= self.grid_size:
            raise ConfigurationError(
                f"margin {self.margin} leaves no spawn region in a {self.grid_size}-cell grid"
            )

    @property
    def center(self) -> tuple[float, float]:
        """Geometric center of the grid in cell coordinates."""
        mid = (self.grid_size - 1) / 2
        return mid, mid

    @property
    def spawn_range(self) -> tuple[int, int]:
        """Half-open ``[low, high)`` coordinate range where emitters may spawn."""
        return self.margin, self.grid_size - self.margin

    @property
    def pulse_radius(self) -> float:
        """Distance from center at which the radial pulse envelope reaches zero."""
        return self.grid_size / 2 - self.margin

    def contains(self, x: int, z: int) -> bool:
        return 0 <= x < self.grid_size and 0 <= z < self.grid_size


@dataclass(frozen=True)
class EmitterTiming:
    """Lifetime window and early-expiry lead for ripple emitters."""

    min_duration_ms: float = RAINDROP_MIN_DURATION_MS
    max_duration_ms: float = RAINDROP_MAX_DURATION_MS
    lead_ms: float = EXPIRY_LEAD_MS

    def __post_init__(self) -> None:
        if self.min_duration_ms <= 0.0:
            raise ConfigurationError("min_duration_ms must be > 0")
        if self.max_duration_ms < self.min_duration_ms:
            raise ConfigurationError("max_duration_ms must be >= min_duration_ms")
        if self.lead_ms < 0.0:
            raise ConfigurationError("lead_ms must be >= 0")


RAINDROP_TIMING = EmitterTiming()
"""Short-lived raindrops: 0.5-4 s lifetimes."""

BUBBLE_TIMING = EmitterTiming(
    min_duration_ms=BUBBLE_MIN_DURATION_MS,
    max_duration_ms=BUBBLE_MAX_DURATION_MS,
)
"""Longer-lived bubbles: 1-6 s lifetimes."""


# ---------------------------------------------------------------------------
# Per-mode wave parameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AmbientWaveConfig:
    """Mode 1: two crossing sinusoids with fixed per-axis phase steps."""

    wave_speed: float = AMBIENT_WAVE_SPEED
    amplitude: float = AMBIENT_AMPLITUDE
    phase_x: float = AMBIENT_PHASE_X
    phase_z: float = AMBIENT_PHASE_Z
    coord_shift: int = AMBIENT_COORD_SHIFT


@dataclass(frozen=True)
class RadialPulseConfig:
    """Mode 2: center-anchored pulse with a linear envelope."""

    wave_speed: float = PULSE_WAVE_SPEED
    scale: float = PULSE_SCALE


@dataclass(frozen=True)
class JitterConfig:
    """Mode 3: per-cell flicker with a random fixed phase."""

    wave_speed: float = JITTER_WAVE_SPEED
    scale: float = JITTER_SCALE


@dataclass(frozen=True)
class RippleConfig:
    """Mode 4: summed ripples from the emitter pool."""

    wave_speed: float = RIPPLE_WAVE_SPEED
    ripple_radius: float = RIPPLE_RADIUS
    time_decay_factor: float = RIPPLE_TIME_DECAY_FACTOR
    normalization_ms: float = RIPPLE_NORMALIZATION_MS
    height_multiplier: float = RIPPLE_HEIGHT_MULTIPLIER

    def __post_init__(self) -> None:
        if self.ripple_radius <= 0.0:
            raise ConfigurationError("ripple_radius must be > 0")
        if self.normalization_ms <= 0.0:
            raise ConfigurationError("normalization_ms must be > 0")


@dataclass(frozen=True)
class WaveConfig:
    """Bundle of parameters for every implemented wave mode."""

    ambient: AmbientWaveConfig = field(default_factory=AmbientWaveConfig)
    pulse: RadialPulseConfig = field(default_factory=RadialPulseConfig)
    jitter: JitterConfig = field(default_factory=JitterConfig)
    ripple: RippleConfig = field(default_factory=RippleConfig)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SessionConfig:
    """Initial state of a simulation session; later changes go through the session."""

    grid: GridConfig = field(default_factory=GridConfig)
    n_emitters: int = NUM_EMITTERS
    mode: WaveMode = WaveMode.AMBIENT
    blend_percent: float = BLEND_PERCENT
    hue: float = BASE_HUE
    saturation: float = BASE_SATURATION
    lightness: float = BASE_LIGHTNESS
    palette: str = "default"
    timing: EmitterTiming = RAINDROP_TIMING
    waves: WaveConfig = field(default_factory=WaveConfig)

    def __post_init__(self) -> None:
        if self.n_emitters < 0:
            raise ConfigurationError("n_emitters must be >= 0")
        if not 0.0 <= self.blend_percent <= 100.0:
            raise ValueError("blend_percent must be in [0, 100]")
        for name in ("hue", "saturation", "lightness"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ValueError(f"{name} must be in [0.0, 1.0]")
