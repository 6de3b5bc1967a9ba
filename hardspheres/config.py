"""Simulation parameters."""

import math
from dataclasses import dataclass, replace
from typing import Optional

from .errors import ConfigurationError

RADIUS = 1.0
MOVE_SCALE = 0.05
BIN_WIDTH = 0.01
INITIAL_OUTPUT_PERIOD = 1.0  # seconds
MAX_OUTPUT_PERIOD = 60.0 * 30.0  # seconds

RNG_NAMES = ("pcg64", "xorshift")
BACKENDS = ("numba", "python")


def default_output_path(n_spheres, length, iterations):
    """Build an output file name that records the run parameters.

    Args:
        n_spheres: Number of spheres
        length: Cell side length
        iterations: Number of iterations

    Returns:
        File name, e.g. ``density-N4-L4-I1.dat``
    """
    return f"density-N{n_spheres}-L{length:g}-I{iterations}.dat"


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of a hard-sphere density run.

    Args:
        n_spheres: Number of spheres
        length: Side length of the periodic cubic cell
        iterations: Number of sweeps (one attempted move per sphere each)
        output_path: Density file, or None for ``default_output_path``
        move_scale: Standard deviation of the Gaussian trial displacement
        bin_width: Width of the z-density histogram bins
        radius: Sphere radius; spheres exclude each other within 2*radius
        seed: Random seed
        rng: Random source name ("pcg64" or "xorshift")
        extended_output: Also write the normalized density column
        backend: "numba" for compiled kernels, "python" for the reference code
        initial_period: First checkpoint interval in seconds
        max_period: Cap on the checkpoint interval in seconds
    """
    n_spheres: int
    length: float
    iterations: int
    output_path: Optional[str] = None
    move_scale: float = MOVE_SCALE
    bin_width: float = BIN_WIDTH
    radius: float = RADIUS
    seed: int = 0
    rng: str = "pcg64"
    extended_output: bool = False
    backend: str = "numba"
    initial_period: float = INITIAL_OUTPUT_PERIOD
    max_period: float = MAX_OUTPUT_PERIOD

    @property
    def diameter(self):
        return 2.0 * self.radius

    @property
    def density_path(self):
        if self.output_path is not None:
            return self.output_path
        return default_output_path(self.n_spheres, self.length, self.iterations)

    def validate(self):
        """Check parameter ranges.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigurationError: If any parameter is out of range
        """
        positive = {
            "n_spheres": self.n_spheres,
            "length": self.length,
            "iterations": self.iterations,
            "move_scale": self.move_scale,
            "bin_width": self.bin_width,
            "radius": self.radius,
            "initial_period": self.initial_period,
            "max_period": self.max_period,
        }
        for name, value in positive.items():
            if not (math.isfinite(value) and value > 0):
                raise ConfigurationError(f"{name} must be positive and finite, got {value!r}")
        if self.rng not in RNG_NAMES:
            raise ConfigurationError(f"unknown random source {self.rng!r}; expected one of {RNG_NAMES}")
        if self.backend not in BACKENDS:
            raise ConfigurationError(f"unknown backend {self.backend!r}; expected one of {BACKENDS}")
        return self

    def with_updates(self, **changes):
        return replace(self, **changes)
