"""Per-cell height functions for each wave mode.

Every function here is pure arithmetic over its arguments; the only state it
reads is the emitter pool, which must already have been ticked for the frame.
"""

from __future__ import annotations

import math
import warnings
from collections.abc import Iterable
from dataclasses import dataclass, field

from wavegrid.config.types import (
    AmbientWaveConfig,
    GridConfig,
    JitterConfig,
    RadialPulseConfig,
    RippleConfig,
    WaveConfig,
    WaveMode,
)
from wavegrid.domain.cell import Cell
from wavegrid.domain.emitters import Emitter, EmitterPool
from wavegrid.domain.offsets import RandomOffsetTable
from wavegrid.errors import ConfigurationError, UnimplementedModeWarning


@dataclass(frozen=True)
class HeightSample:
    """Height produced for one cell, tagged with the mode that produced it.

    ``implemented`` is False for reserved modes, whose zero height is a
    placeholder rather than a computed value.
    """

    height: float
    mode: WaveMode
    implemented: bool = True


@dataclass(frozen=True)
class FieldContext:
    """Per-frame inputs shared by every cell evaluation."""

    grid: GridConfig
    now: float = 0.0
    offsets: RandomOffsetTable | None = None
    pool: EmitterPool | None = None
    waves: WaveConfig = field(default_factory=WaveConfig)


def ambient_wave(t: float, cell: Cell, config: AmbientWaveConfig | None = None) -> float:
    """Two crossing sinusoids phased by absolute cell coordinate."""
    cfg = config or AmbientWaveConfig()
    phase_x = (cell.x + cfg.coord_shift) * cfg.phase_x
    phase_z = (cell.z + cfg.coord_shift) * cfg.phase_z
    wt = t * cfg.wave_speed
    return cfg.amplitude * (math.sin(wt + phase_x) + math.sin(wt + phase_z))


def radial_pulse(
    t: float, cell: Cell, grid: GridConfig, config: RadialPulseConfig | None = None
) -> float:
    """Center-anchored wave whose amplitude falls linearly to zero at ``grid.pulse_radius``."""
    cfg = config or RadialPulseConfig()
    radius = grid.pulse_radius
    if radius <= 0.0:
        raise ConfigurationError("radial pulse radius must be > 0")
    cx, cz = grid.center
    distance = cell.distance_to(cx, cz)
    envelope = max(0.0, 1.0 - distance / radius)
    return math.sin(t * cfg.wave_speed - distance) * envelope * cfg.scale


def cell_jitter(
    t: float, cell: Cell, offsets: RandomOffsetTable, config: JitterConfig | None = None
) -> float:
    """Fast per-cell flicker, ``0.5*sin(2*(wt + phi))`` scaled."""
    cfg = config or JitterConfig()
    arg = t * cfg.wave_speed + offsets.phase(cell.x, cell.z)
    return math.sin(arg) * math.cos(arg) * cfg.scale


def ripple_contribution(
    t: float, now: float, cell: Cell, emitter: Emitter, config: RippleConfig
) -> float:
    """Height added to ``cell`` by a single emitter; zero beyond the ripple radius.

    Intensity and the warped time both shrink as the emitter approaches
    ``due`` and go negative while it is overdue but not yet respawned.
    """
    distance = cell.distance_to(emitter.location.x, emitter.location.z)
    if distance > config.ripple_radius:
        return 0.0
    remaining = emitter.remaining(now)
    intensity = remaining / emitter.duration
    adjusted_time = remaining * config.time_decay_factor / config.normalization_ms
    envelope = max(0.0, 1.0 - distance / config.ripple_radius)
    return (
        math.sin((t + adjusted_time) * config.wave_speed - distance)
        * envelope
        * adjusted_time
        * intensity
    )


def ripple_field(
    t: float,
    now: float,
    cell: Cell,
    emitters: Iterable[Emitter],
    config: RippleConfig | None = None,
) -> float:
    """Linear sum of every emitter's ripple at ``cell``."""
    cfg = config or RippleConfig()
    height = 0.0
    for emitter in emitters:
        height += ripple_contribution(t, now, cell, emitter, cfg)
    return height * cfg.height_multiplier


def evaluate(mode: WaveMode, t: float, cell: Cell, context: FieldContext) -> HeightSample:
    """Dispatch to the height function selected by ``mode``.

    Reserved modes return a zero sample flagged ``implemented=False`` and
    emit ``UnimplementedModeWarning``.
    """
    waves = context.waves
    if mode is WaveMode.AMBIENT:
        height = ambient_wave(t, cell, waves.ambient)
    elif mode is WaveMode.RADIAL_PULSE:
        height = radial_pulse(t, cell, context.grid, waves.pulse)
    elif mode is WaveMode.JITTER:
        if context.offsets is None:
            raise ConfigurationError("jitter mode requires a RandomOffsetTable")
        height = cell_jitter(t, cell, context.offsets, waves.jitter)
    elif mode is WaveMode.RIPPLE:
        if context.pool is None:
            raise ConfigurationError("ripple mode requires an EmitterPool")
        height = ripple_field(t, context.now, cell, context.pool, waves.ripple)
    else:
        warn_unimplemented(mode)
        return HeightSample(height=0.0, mode=mode, implemented=False)
    return HeightSample(height=height, mode=mode)


def warn_unimplemented(mode: WaveMode) -> None:
    warnings.warn(
        f"wave mode {mode.value} is reserved and not implemented; height is 0",
        UnimplementedModeWarning,
        stacklevel=3,
    )
