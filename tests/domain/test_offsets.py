"""Tests for wavegrid.domain.offsets."""

from __future__ import annotations

import math

import numpy as np
import pytest

from wavegrid.domain.offsets import RandomOffsetTable, generate_offsets
from wavegrid.errors import ConfigurationError


def test_shape_matches_grid_size() -> None:
    table = generate_offsets(7, np.random.default_rng(0))
    assert table.phases.shape == (7, 7)
    assert table.grid_size == 7
    assert len(table) == 7


def test_values_in_half_open_turn() -> None:
    table = generate_offsets(20, np.random.default_rng(1))
    assert np.all(table.phases >= 0.0)
    assert np.all(table.phases < 2 * math.pi)


def test_same_seed_same_table() -> None:
    a = generate_offsets(5, np.random.default_rng(3))
    b = generate_offsets(5, np.random.default_rng(3))
    assert np.array_equal(a.phases, b.phases)


def test_unseeded_tables_vary() -> None:
    a = generate_offsets(8)
    b = generate_offsets(8)
    assert not np.array_equal(a.phases, b.phases)


def test_table_is_read_only() -> None:
    table = generate_offsets(3, np.random.default_rng(0))
    with pytest.raises(ValueError):
        table.phases[0, 0] = 1.0


def test_source_array_changes_do_not_leak() -> None:
    source = np.zeros((2, 2))
    table = RandomOffsetTable(source)
    source[0, 0] = 5.0
    assert table.phase(0, 0) == 0.0


def test_phase_lookup_indexed_x_then_z() -> None:
    table = RandomOffsetTable(np.array([[0.1, 0.2], [0.3, 0.4]]))
    assert table.phase(0, 1) == 0.2
    assert table.phase(1, 0) == 0.3


@pytest.mark.parametrize(("x", "z"), [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_out_of_range_lookup_fails_fast(x: int, z: int) -> None:
    table = RandomOffsetTable(np.zeros((2, 2)))
    with pytest.raises(IndexError):
        table.phase(x, z)


def test_non_square_rejected() -> None:
    with pytest.raises(ConfigurationError):
        RandomOffsetTable(np.zeros((2, 3)))


def test_zero_grid_rejected() -> None:
    with pytest.raises(ConfigurationError):
        generate_offsets(0)
