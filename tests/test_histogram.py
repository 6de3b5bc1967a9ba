"""Tests for the z-density histogram and its text formats."""

import io

import numpy as np
import pytest

from hardspheres.histogram import DensityHistogram


def test_bin_layout():
    h = DensityHistogram(4.0, 0.01)
    assert h.n_output_bins == 400
    assert len(h) == 401
    assert h.total == 0


def test_accumulate_single_values():
    h = DensityHistogram(4.0, 0.01)
    h.accumulate(0.0)
    h.accumulate(0.015)
    h.accumulate(3.999)
    assert h.counts[0] == 1
    assert h.counts[1] == 1
    assert h.counts[399] == 1
    assert h.total == 3


def test_accumulate_positions_adds_one_per_sphere():
    rng = np.random.default_rng(0)
    L = 5.0
    h = DensityHistogram(L, 0.01)
    positions = rng.uniform(0, L, size=(64, 3))
    h.accumulate_positions(positions)
    assert h.total == 64
    h.accumulate_positions(positions)
    assert h.total == 128

    expected = np.zeros(len(h), dtype=np.int64)
    for z in positions[:, 2]:
        expected[int(np.floor(z / 0.01))] += 2
    assert np.array_equal(h.counts, expected)


def test_accumulate_positions_same_bin():
    h = DensityHistogram(2.0, 0.5)
    h.accumulate_positions(np.array([[0.0, 0.0, 0.1], [1.0, 1.0, 0.2], [0.0, 0.0, 1.9]]))
    assert list(h.counts) == [2, 0, 0, 1, 0]


def test_partial_last_bin_is_counted_but_not_written():
    h = DensityHistogram(4.005, 0.01)
    assert h.n_output_bins == 400
    h.accumulate(4.004)
    assert h.counts[400] == 1
    out = io.StringIO()
    h.serialize(out, total_moves=1, n_spheres=1)
    lines = out.getvalue().splitlines()
    assert len(lines) == 400
    assert all(line.endswith("   0") for line in lines)


def test_whole_bins_survive_division_rounding():
    # 4.1 / 0.01 evaluates just below 410
    h = DensityHistogram(4.1, 0.01)
    assert h.n_output_bins == 410
    h.accumulate(4.095)
    out = io.StringIO()
    h.serialize(out, total_moves=1, n_spheres=1)
    lines = out.getvalue().splitlines()
    assert len(lines) == 410
    assert lines[-1] == " 4.095   1"
    assert sum(int(line.split()[1]) for line in lines) == h.total == 1


def test_serialize_raw_format():
    h = DensityHistogram(4.0, 0.01)
    h.accumulate(0.001)
    h.accumulate(0.002)
    h.accumulate(1.234)
    out = io.StringIO()
    h.serialize(out, total_moves=4, n_spheres=4)
    lines = out.getvalue().splitlines()

    assert len(lines) == 400
    assert lines[0] == " 0.005   2"
    assert lines[1] == " 0.015   0"
    assert lines[123] == " 1.235   1"
    assert lines[-1] == " 3.995   0"
    z = [float(line.split()[0]) for line in lines]
    assert z == sorted(z)


def test_serialize_extended_format():
    h = DensityHistogram(4.0, 0.01)
    for _ in range(10):
        h.accumulate(0.001)
    out = io.StringIO()
    h.serialize(out, total_moves=100, n_spheres=4, extended=True)
    lines = out.getvalue().splitlines()

    # 10 * 4 / 100 / (4 * 4 * 0.01) = 2.5
    assert lines[0] == " 0.005    2.50000   10"
    assert lines[1] == " 0.015    0.00000   0"
    assert len(lines) == 400


def test_normalized_density():
    h = DensityHistogram(2.0, 0.5)
    h.accumulate_positions(np.array([[0.0, 0.0, 0.1], [1.0, 1.0, 0.2], [0.0, 0.0, 1.9]]))
    density = h.normalized_density(total_moves=3, n_spheres=3)
    # count * N / (total_moves * L^2 * bin_width)
    assert density == pytest.approx([2 * 3 / 3 / 2.0, 0.0, 0.0, 1 * 3 / 3 / 2.0])


def test_normalized_density_before_any_moves():
    h = DensityHistogram(2.0, 0.5)
    assert np.all(h.normalized_density(total_moves=0, n_spheres=3) == 0.0)
