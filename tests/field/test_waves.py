"""Tests for wavegrid.field.waves height functions and mode dispatch."""

from __future__ import annotations

import math
from random import Random

import numpy as np
import pytest

from wavegrid.config.types import (
    AmbientWaveConfig,
    EmitterTiming,
    GridConfig,
    RippleConfig,
    WaveMode,
)
from wavegrid.domain.cell import Cell
from wavegrid.domain.emitters import Emitter, EmitterPool
from wavegrid.domain.offsets import RandomOffsetTable
from wavegrid.errors import ConfigurationError, UnimplementedModeWarning
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


def _single_emitter_pool(location: Cell, duration: float, due: float) -> EmitterPool:
    pool = EmitterPool(GridConfig(grid_size=10), EmitterTiming(lead_ms=0.0), Random(0))
    pool.emitters = [Emitter(location=location, duration=duration, due=due)]
    return pool


class TestAmbientWave:
    def test_origin_at_time_zero(self) -> None:
        # sin(2 * 0.7) + sin(2 * 0.9)
        assert ambient_wave(0.0, Cell(0, 0)) == pytest.approx(1.959297360866655, abs=1e-12)

    def test_periodic_in_time(self) -> None:
        period = 2 * math.pi / 2.0
        cell = Cell(3, 7)
        for t in (0.0, 0.37, 1.9, 12.5):
            assert ambient_wave(t + period, cell) == pytest.approx(ambient_wave(t, cell), abs=1e-9)

    def test_amplitude_scales(self) -> None:
        cell = Cell(1, 2)
        base = ambient_wave(0.4, cell)
        scaled = ambient_wave(0.4, cell, AmbientWaveConfig(amplitude=0.15))
        assert scaled == pytest.approx(0.15 * base)

    def test_bounded_by_twice_amplitude(self) -> None:
        for x in range(6):
            for z in range(6):
                assert abs(ambient_wave(x * 0.31 + z, Cell(x, z))) <= 2.0


class TestRadialPulse:
    def test_zero_outside_envelope(self) -> None:
        grid = GridConfig(grid_size=10, margin=1)
        cx, cz = grid.center
        checked = 0
        for x in range(10):
            for z in range(10):
                cell = Cell(x, z)
                if cell.distance_to(cx, cz) >= grid.pulse_radius:
                    assert radial_pulse(0.3, cell, grid) == 0.0
                    checked += 1
        assert checked > 0

    def test_center_cell_is_scaled_sinusoid(self) -> None:
        grid = GridConfig(grid_size=9)
        for t in (0.0, 0.1, 0.25, 1.7):
            assert radial_pulse(t, Cell(4, 4), grid) == pytest.approx(1.5 * math.sin(5.0 * t))

    def test_envelope_decays_linearly(self) -> None:
        grid = GridConfig(grid_size=9)
        t = 0.8
        distance = 2.0
        expected = math.sin(5.0 * t - distance) * (1 - distance / 4.5) * 1.5
        assert radial_pulse(t, Cell(6, 4), grid) == pytest.approx(expected)

    def test_independent_of_elapsed_offset_by_period(self) -> None:
        grid = GridConfig(grid_size=8)
        period = 2 * math.pi / 5.0
        assert radial_pulse(0.2 + period, Cell(3, 3), grid) == pytest.approx(
            radial_pulse(0.2, Cell(3, 3), grid)
        )


class TestCellJitter:
    def test_matches_half_double_angle(self) -> None:
        table = RandomOffsetTable(np.array([[0.0, 0.0, 0.0], [0.0, 0.0, 0.3], [0.0, 0.0, 0.0]]))
        for t in (0.0, 0.05, 1.3):
            expected = 0.5 * math.sin(2 * (12.0 * t + 0.3))
            assert cell_jitter(t, Cell(1, 2), table) == pytest.approx(expected, abs=1e-12)

    def test_out_of_range_cell_fails(self) -> None:
        table = RandomOffsetTable(np.zeros((3, 3)))
        with pytest.raises(IndexError):
            cell_jitter(0.0, Cell(3, 0), table)


class TestRippleField:
    def test_height_at_emitter_location(self) -> None:
        pool = _single_emitter_pool(Cell(5, 5), duration=1000.0, due=2000.0)
        now, t = 1500.0, 1.0
        adjusted = 500.0 / 2000.0
        intensity = 0.5
        expected = math.sin((t + adjusted) * 12.0) * adjusted * intensity
        assert ripple_field(t, now, Cell(5, 5), pool) == pytest.approx(expected, abs=1e-12)

    def test_partial_distance(self) -> None:
        pool = _single_emitter_pool(Cell(5, 5), duration=1000.0, due=2000.0)
        now, t = 1500.0, 1.0
        expected = math.sin(1.25 * 12.0 - 3.0) * (1 - 3.0 / 4.0) * 0.25 * 0.5
        assert ripple_field(t, now, Cell(5, 8), pool) == pytest.approx(expected, abs=1e-12)

    def test_hard_cutoff_beyond_radius(self) -> None:
        pool = _single_emitter_pool(Cell(5, 5), duration=1000.0, due=2000.0)
        assert ripple_field(1.0, 1500.0, Cell(5, 0), pool) == 0.0
        assert ripple_field(1.0, 1500.0, Cell(0, 0), pool) == 0.0

    def test_overdue_emitter_still_contributes(self) -> None:
        pool = _single_emitter_pool(Cell(2, 2), duration=1000.0, due=2000.0)
        now, t = 2100.0, 0.5
        adjusted = -100.0 / 2000.0
        intensity = -0.1
        expected = math.sin((t + adjusted) * 12.0) * adjusted * intensity
        assert ripple_field(t, now, Cell(2, 2), pool) == pytest.approx(expected, abs=1e-12)

    def test_zero_at_due(self) -> None:
        pool = _single_emitter_pool(Cell(2, 2), duration=1000.0, due=2000.0)
        assert ripple_field(0.7, 2000.0, Cell(2, 3), pool) == 0.0

    def test_overlapping_emitters_sum(self) -> None:
        a = Emitter(location=Cell(3, 3), duration=800.0, due=1500.0)
        b = Emitter(location=Cell(4, 5), duration=2000.0, due=2600.0)
        cfg = RippleConfig()
        cell = Cell(4, 4)
        now, t = 1000.0, 2.0
        expected = ripple_contribution(t, now, cell, a, cfg) + ripple_contribution(
            t, now, cell, b, cfg
        )
        assert ripple_field(t, now, cell, [a, b], cfg) == pytest.approx(expected)
        assert ripple_contribution(t, now, cell, a, cfg) != 0.0
        assert ripple_contribution(t, now, cell, b, cfg) != 0.0

    def test_height_multiplier(self) -> None:
        emitters = [Emitter(location=Cell(1, 1), duration=1000.0, due=1800.0)]
        base = ripple_field(0.3, 1000.0, Cell(1, 2), emitters)
        doubled = ripple_field(0.3, 1000.0, Cell(1, 2), emitters, RippleConfig(height_multiplier=2))
        assert doubled == pytest.approx(2 * base)

    def test_empty_pool_is_flat(self) -> None:
        assert ripple_field(1.0, 0.0, Cell(0, 0), []) == 0.0


class TestEvaluate:
    def test_dispatches_ambient(self) -> None:
        context = FieldContext(grid=GridConfig())
        sample = evaluate(WaveMode.AMBIENT, 0.5, Cell(1, 1), context)
        assert sample == HeightSample(ambient_wave(0.5, Cell(1, 1)), WaveMode.AMBIENT)
        assert sample.implemented is True

    def test_dispatches_radial_pulse(self) -> None:
        grid = GridConfig(grid_size=9)
        sample = evaluate(WaveMode.RADIAL_PULSE, 0.2, Cell(4, 4), FieldContext(grid=grid))
        assert sample.height == pytest.approx(1.5 * math.sin(1.0))

    def test_dispatches_ripple_with_context_clock(self) -> None:
        pool = _single_emitter_pool(Cell(5, 5), duration=1000.0, due=2000.0)
        context = FieldContext(grid=GridConfig(grid_size=10), now=1500.0, pool=pool)
        sample = evaluate(WaveMode.RIPPLE, 1.0, Cell(5, 5), context)
        assert sample.height == pytest.approx(ripple_field(1.0, 1500.0, Cell(5, 5), pool))

    def test_jitter_requires_offsets(self) -> None:
        with pytest.raises(ConfigurationError):
            evaluate(WaveMode.JITTER, 0.0, Cell(0, 0), FieldContext(grid=GridConfig()))

    def test_ripple_requires_pool(self) -> None:
        with pytest.raises(ConfigurationError):
            evaluate(WaveMode.RIPPLE, 0.0, Cell(0, 0), FieldContext(grid=GridConfig()))

    @pytest.mark.parametrize("value", [5, 6, 7, 8, 9])
    def test_reserved_modes_are_flagged(self, value: int) -> None:
        context = FieldContext(grid=GridConfig())
        with pytest.warns(UnimplementedModeWarning):
            sample = evaluate(WaveMode(value), 1.0, Cell(0, 0), context)
        assert sample.height == 0.0
        assert sample.implemented is False
        assert sample.mode is WaveMode(value)

    def test_reserved_sample_differs_from_computed_zero(self) -> None:
        pool = _single_emitter_pool(Cell(2, 2), duration=1000.0, due=2000.0)
        context = FieldContext(grid=GridConfig(grid_size=10), now=2000.0, pool=pool)
        computed = evaluate(WaveMode.RIPPLE, 0.0, Cell(2, 2), context)
        with pytest.warns(UnimplementedModeWarning):
            reserved = evaluate(WaveMode.RESERVED_5, 0.0, Cell(2, 2), context)
        assert computed.height == reserved.height == 0.0
        assert computed != reserved
