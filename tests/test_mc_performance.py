"""Performance tests for the compiled sweep kernel."""

import time

import numpy as np
import pytest

from hardspheres.lattice import init_lattice
from hardspheres.mc import advance_sweeps
from hardspheres.rng import NumpyRandomSource
from hardspheres.vector import random_displacements


@pytest.mark.slow
def test_sweep_performance():
    """Sanity check: compiled sweeps should reach a reasonable move rate.

    Uses a conservative threshold to avoid CI flakiness; mostly logs numbers.
    """
    N = 500
    L = 24.0
    n_sweeps = 50
    rng = NumpyRandomSource(42)
    positions = init_lattice(N, L)
    displacements = np.stack([random_displacements(N, 0.1, rng) for _ in range(n_sweeps)])

    t_start = time.perf_counter()
    result = advance_sweeps(positions, L, 2.0, displacements)
    wall_time = time.perf_counter() - t_start

    moves_per_second = result["attempts"] / wall_time if wall_time > 0 else 0.0
    print(f"\nHard-sphere sweep performance (N={N}, sweeps={n_sweeps}):")
    print(f"  Wall time: {wall_time:.3f} s")
    print(f"  Moves/s: {moves_per_second:.1f}")
    print(f"  Acceptance: {result['acceptance']:.3f}")

    assert moves_per_second > 20000, (
        f"Sweep performance too low: {moves_per_second:.1f} moves/s"
    )
    assert result["attempts"] == n_sweeps * N
    assert 0.0 < result["acceptance"] < 1.0
