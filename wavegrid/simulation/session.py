"""Simulation session: the per-frame entry point for a renderer.

A session owns every piece of mutable engine state (offset table, emitter
pool, mode, blend and base color). Nothing is shared between sessions.
Configuration changes happen between frames; ``frame`` always ticks the
emitter pool before evaluating ripple heights.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random

import numpy as np

from wavegrid.color.mapper import hsl_to_rgb, map_height_colors
from wavegrid.color.palette import RGB, HeightPalette, get_palette
from wavegrid.config.types import GridConfig, SessionConfig, WaveMode
from wavegrid.domain.emitters import EmitterPool, now_ms
from wavegrid.domain.offsets import RandomOffsetTable, generate_offsets
from wavegrid.field.grid import evaluate_grid
from wavegrid.field.waves import FieldContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frame:
    """Heights and colors for one rendered frame, both indexed ``[x, z]``."""

    heights: np.ndarray
    colors: np.ndarray
    mode: WaveMode
    implemented: bool
    respawned: tuple[int, ...] = ()


def parse_mode(raw: int | WaveMode) -> WaveMode:
    """Accept a ``WaveMode`` or its integer slider value."""
    if isinstance(raw, WaveMode):
        return raw
    try:
        return WaveMode(raw)
    except ValueError as exc:
        valid = ", ".join(str(m.value) for m in WaveMode)
        raise ValueError(f"mode must be one of {valid}") from exc


class FieldSession:
    """State and per-frame evaluation for one animated grid."""

    def __init__(
        self,
        config: SessionConfig | None = None,
        seed: int | None = None,
        now: float | None = None,
    ) -> None:
        self.config = config or SessionConfig()
        self._rng = Random(seed)
        self._np_rng = np.random.default_rng(seed)
        self.grid = self.config.grid
        self.mode = self.config.mode
        self.blend_percent = float(self.config.blend_percent)
        self.palette: HeightPalette = get_palette(self.config.palette)
        self.hsl = (self.config.hue, self.config.saturation, self.config.lightness)
        self.base_color: RGB = hsl_to_rgb(*self.hsl)
        self.offsets: RandomOffsetTable = generate_offsets(self.grid.grid_size, self._np_rng)
        self.pool = EmitterPool.create(
            self.config.n_emitters, self.grid, self.config.timing, self._rng, now=now
        )

    # ------------------------------------------------------------------
    # Configuration changes
    # ------------------------------------------------------------------

    def set_grid(
        self, grid_size: int, margin: int | None = None, now: float | None = None
    ) -> None:
        """Resize the grid; regenerates the offset table and the emitter pool."""
        grid = GridConfig(
            grid_size=grid_size,
            margin=self.grid.margin if margin is None else margin,
        )
        if grid == self.grid:
            return
        count = len(self.pool)
        self.grid = grid
        self.offsets = generate_offsets(grid.grid_size, self._np_rng)
        self.pool = EmitterPool.create(count, grid, self.config.timing, self._rng, now=now)
        logger.debug("grid set to %d cells, margin %d", grid.grid_size, grid.margin)

    def set_emitter_count(self, count: int, now: float | None = None) -> None:
        self.pool.resize(count, now=now)
        logger.debug("emitter pool resized to %d", count)

    def set_mode(self, mode: int | WaveMode) -> None:
        self.mode = parse_mode(mode)
        logger.debug("mode set to %s", self.mode.name)

    def set_blend_percent(self, blend_percent: float) -> None:
        if not 0.0 <= blend_percent <= 100.0:
            raise ValueError("blend_percent must be in [0, 100]")
        self.blend_percent = float(blend_percent)

    def set_base_hsl(self, hue: float, saturation: float, lightness: float) -> None:
        """Update the base color from an HSL triple."""
        self.base_color = hsl_to_rgb(hue, saturation, lightness)
        self.hsl = (hue, saturation, lightness)

    def set_palette(self, name: str) -> None:
        self.palette = get_palette(name)

    # ------------------------------------------------------------------
    # Per-frame evaluation
    # ------------------------------------------------------------------

    def context(self, now: float) -> FieldContext:
        return FieldContext(
            grid=self.grid,
            now=now,
            offsets=self.offsets,
            pool=self.pool,
            waves=self.config.waves,
        )

    def frame(self, elapsed: float, now: float | None = None) -> Frame:
        """Compute heights and colors for every cell.

        ``elapsed`` is animation time in seconds; ``now`` is wall-clock time in
        milliseconds and drives the emitter lifecycle.
        """
        stamp = now_ms() if now is None else now
        respawned: list[int] = []
        if self.mode is WaveMode.RIPPLE:
            respawned = self.pool.tick(stamp)
        heights = evaluate_grid(self.mode, elapsed, self.context(stamp))
        colors = map_height_colors(heights, self.blend_percent, self.base_color, self.palette)
        return Frame(
            heights=heights,
            colors=colors,
            mode=self.mode,
            implemented=self.mode.implemented,
            respawned=tuple(respawned),
        )
