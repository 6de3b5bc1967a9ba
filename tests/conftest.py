"""Pytest configuration and fixtures."""

import numpy as np
import pytest


def pytest_addoption(parser):
    """Add command-line options for pytest."""
    parser.addoption(
        "--runslow",
        action="store_true",
        default=False,
        help="run slow tests"
    )


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --runslow is given."""
    if config.getoption("--runslow"):
        return

    skip_slow = pytest.mark.skip(reason="need --runslow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(scope="session", autouse=True)
def warmup_numba_jit():
    """Compile the numba kernels once per session on a tiny configuration.

    Keeps JIT compilation time out of the individual tests.
    """
    from hardspheres.geometry_numba import find_overlap_numba, overlaps_any_numba
    from hardspheres.mc_numba import hs_sweeps_numba

    L = 6.0
    positions = np.array([[0.5, 0.5, 0.5], [3.5, 3.5, 3.5]], dtype=np.float64)
    find_overlap_numba(positions, L, 4.0)
    overlaps_any_numba(positions, 0, 1.0, 1.0, 1.0, L, 4.0)
    hs_sweeps_numba(positions.copy(), L, 4.0, np.zeros((1, 2, 3), dtype=np.float64))


@pytest.fixture
def output_file(tmp_path):
    """Path for a density file inside the test's temporary directory."""
    return str(tmp_path / "density.dat")
