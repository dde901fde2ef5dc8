"""Whole-grid height evaluation with numpy.

Mirrors the scalar functions in ``wavegrid.field.waves`` cell for cell; the
returned arrays are indexed ``[x, z]``.
"""

from __future__ import annotations

import numpy as np

from wavegrid.config.types import (
    AmbientWaveConfig,
    GridConfig,
    JitterConfig,
    RadialPulseConfig,
    RippleConfig,
    WaveMode,
)
from wavegrid.domain.emitters import EmitterPool
from wavegrid.domain.offsets import RandomOffsetTable
from wavegrid.errors import ConfigurationError
from wavegrid.field.waves import FieldContext, warn_unimplemented


def cell_coordinates(grid_size: int) -> tuple[np.ndarray, np.ndarray]:
    """Return float ``(xs, zs)`` coordinate arrays of shape ``(grid_size, grid_size)``."""
    axis = np.arange(grid_size, dtype=np.float64)
    xs, zs = np.meshgrid(axis, axis, indexing="ij")
    return xs, zs


def ambient_wave_grid(t: float, grid: GridConfig, cfg: AmbientWaveConfig) -> np.ndarray:
    xs, zs = cell_coordinates(grid.grid_size)
    wt = t * cfg.wave_speed
    return cfg.amplitude * (
        np.sin(wt + (xs + cfg.coord_shift) * cfg.phase_x)
        + np.sin(wt + (zs + cfg.coord_shift) * cfg.phase_z)
    )


def radial_pulse_grid(t: float, grid: GridConfig, cfg: RadialPulseConfig) -> np.ndarray:
    radius = grid.pulse_radius
    if radius <= 0.0:
        raise ConfigurationError("radial pulse radius must be > 0")
    xs, zs = cell_coordinates(grid.grid_size)
    cx, cz = grid.center
    distance = np.hypot(xs - cx, zs - cz)
    envelope = np.maximum(0.0, 1.0 - distance / radius)
    return np.sin(t * cfg.wave_speed - distance) * envelope * cfg.scale


def cell_jitter_grid(
    t: float, grid: GridConfig, offsets: RandomOffsetTable, cfg: JitterConfig
) -> np.ndarray:
    if offsets.grid_size != grid.grid_size:
        raise ConfigurationError(
            f"offset table size {offsets.grid_size} does not match grid size {grid.grid_size}"
        )
    arg = t * cfg.wave_speed + offsets.phases
    return np.sin(arg) * np.cos(arg) * cfg.scale


def ripple_field_grid(
    t: float, now: float, grid: GridConfig, pool: EmitterPool, cfg: RippleConfig
) -> np.ndarray:
    xs, zs = cell_coordinates(grid.grid_size)
    height = np.zeros_like(xs)
    for emitter in pool:
        distance = np.hypot(xs - emitter.location.x, zs - emitter.location.z)
        inside = distance <= cfg.ripple_radius
        if not inside.any():
            continue
        remaining = emitter.remaining(now)
        intensity = remaining / emitter.duration
        adjusted_time = remaining * cfg.time_decay_factor / cfg.normalization_ms
        envelope = np.maximum(0.0, 1.0 - distance / cfg.ripple_radius)
        wave = np.sin((t + adjusted_time) * cfg.wave_speed - distance)
        height += np.where(inside, wave * envelope * adjusted_time * intensity, 0.0)
    return height * cfg.height_multiplier


def evaluate_grid(mode: WaveMode, t: float, context: FieldContext) -> np.ndarray:
    """Heights for every cell of ``context.grid`` under ``mode``.

    Reserved modes yield a zero array and emit ``UnimplementedModeWarning``.
    """
    grid = context.grid
    waves = context.waves
    if mode is WaveMode.AMBIENT:
        return ambient_wave_grid(t, grid, waves.ambient)
    if mode is WaveMode.RADIAL_PULSE:
        return radial_pulse_grid(t, grid, waves.pulse)
    if mode is WaveMode.JITTER:
        if context.offsets is None:
            raise ConfigurationError("jitter mode requires a RandomOffsetTable")
        return cell_jitter_grid(t, grid, context.offsets, waves.jitter)
    if mode is WaveMode.RIPPLE:
        if context.pool is None:
            raise ConfigurationError("ripple mode requires an EmitterPool")
        return ripple_field_grid(t, context.now, grid, context.pool, waves.ripple)
    warn_unimplemented(mode)
    return np.zeros((grid.grid_size, grid.grid_size), dtype=np.float64)
