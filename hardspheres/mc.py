"""Hard-sphere Monte Carlo engine with z-density accumulation and checkpointing."""

import enum
import time

import numpy as np

from .config import SimulationConfig
from .geometry import overlaps_any, wrap_into_cell
from .histogram import DensityHistogram
from .lattice import init_lattice
from .mc_numba import hs_sweeps_numba
from .output import write_checkpoint
from .rng import make_random_source
from .scheduler import CheckpointScheduler, format_elapsed
from .vector import Vector3, random_displacements


def _sweeps_python(positions, L, diameter, displacements):
    """Reference implementation of hs_sweeps_numba."""
    n_accept = 0
    n_attempt = 0
    for sweep in displacements:
        for i in range(positions.shape[0]):
            n_attempt += 1
            candidate = wrap_into_cell(
                Vector3.from_array(positions[i]) + Vector3.from_array(sweep[i]), L
            )
            if not overlaps_any(positions, i, candidate, L, diameter):
                positions[i] = candidate.to_array()
                n_accept += 1
    return n_accept, n_attempt


def advance_sweeps(positions, L, diameter, displacements, backend="numba"):
    """Advance the system by one sweep per block of pre-generated displacements.

    Spheres are moved one at a time in index order. A move is kept only if
    the trial center overlaps no other sphere, and a kept move is seen by
    every later trial in the same sweep.

    Args:
        positions: Sphere centers, shape (N, 3) (modified in place, must be float64, contiguous)
        L: Cell side length
        diameter: Exclusion distance
        displacements: Trial displacements, shape (N, 3) for one sweep or (n_sweeps, N, 3)
        backend: "numba" or "python"

    Returns:
        dict with keys: attempts, accepts, acceptance
    """
    displacements = np.ascontiguousarray(displacements, dtype=np.float64)
    if displacements.ndim == 2:
        displacements = displacements[np.newaxis]
    if displacements.shape[1:] != positions.shape:
        raise ValueError(
            f"displacements shape {displacements.shape} does not match positions {positions.shape}"
        )

    if backend == "numba":
        n_accept, n_attempt = hs_sweeps_numba(
            positions, float(L), float(diameter * diameter), displacements
        )
    elif backend == "python":
        n_accept, n_attempt = _sweeps_python(positions, float(L), float(diameter), displacements)
    else:
        raise ValueError(f"unknown backend {backend!r}")

    return {
        "attempts": int(n_attempt),
        "accepts": int(n_accept),
        "acceptance": n_accept / max(n_attempt, 1),
    }


class SimulationState(enum.Enum):
    INITIALIZING = "initializing"
    RUNNING = "running"
    CHECKPOINTING = "checkpointing"
    FINISHED = "finished"


class HardSphereSimulation:
    """Hard spheres in a periodic cube, sampled by single-sphere trial moves.

    Each iteration attempts one Gaussian move per sphere, then adds every
    sphere's z coordinate to the density histogram. The histogram is written
    to ``config.density_path`` on a doubling time schedule and always after
    the last iteration.

    Args:
        config: SimulationConfig
        rng: RandomSource, or None to build one from config.rng and config.seed
        clock: Callable returning wall-clock seconds
        verbose: Print progress lines to stdout
    """

    def __init__(self, config: SimulationConfig, rng=None, clock=time.perf_counter, verbose=True):
        self.config = config.validate()
        self.rng = rng if rng is not None else make_random_source(config.rng, config.seed)
        self.scheduler = CheckpointScheduler(config.initial_period, config.max_period, clock=clock)
        self.histogram = DensityHistogram(config.length, config.bin_width)
        self.verbose = verbose
        self.state = SimulationState.INITIALIZING
        self.positions = None
        self.iteration = 0
        self.total_moves = 0
        self.accepted_moves = 0

    @property
    def acceptance(self):
        return self.accepted_moves / max(self.total_moves, 1)

    def _log(self, message):
        if self.verbose:
            print(message, flush=True)

    def initialize(self):
        """Place the spheres and check the placement.

        Raises:
            GeometryInfeasibleError: If the cell is too small for the spheres
            InitialOverlapError: If the placement has overlaps
        """
        cfg = self.config
        self.positions = init_lattice(cfg.n_spheres, cfg.length, cfg.radius, backend=cfg.backend)
        self._log(f"Placed {cfg.n_spheres} spheres.")
        self.state = SimulationState.RUNNING
        return self.positions

    def step(self):
        """Run one iteration: a move attempt for every sphere, then histogram accumulation.

        Returns:
            dict with keys: attempts, accepts, acceptance
        """
        if self.state is SimulationState.INITIALIZING:
            raise RuntimeError("initialize() must be called before step()")
        cfg = self.config
        displacements = random_displacements(cfg.n_spheres, cfg.move_scale, self.rng)
        result = advance_sweeps(
            self.positions, cfg.length, cfg.diameter, displacements, backend=cfg.backend
        )
        self.total_moves += result["attempts"]
        self.accepted_moves += result["accepts"]
        self.histogram.accumulate_positions(self.positions)
        self.iteration += 1
        return result

    def checkpoint(self, now):
        """Write the density file and report progress."""
        self.state = SimulationState.CHECKPOINTING
        self.scheduler.mark(now)
        self._log(
            f"Saving data after {format_elapsed(self.scheduler.elapsed(now))}, "
            f"{self.iteration} iterations complete."
        )
        try:
            write_checkpoint(
                self.config.density_path,
                self.histogram,
                self.total_moves,
                self.config.n_spheres,
                extended=self.config.extended_output,
            )
        finally:
            self.state = SimulationState.RUNNING

    def run(self):
        """Run all iterations.

        Returns:
            Dictionary with results:
            - L: Cell side length
            - iterations: Iterations completed
            - total_moves: Attempted moves
            - accepted_moves: Accepted moves
            - acceptance: Acceptance ratio
            - checkpoints: Number of checkpoint writes
            - output_path: Density file path
        """
        if self.state is SimulationState.INITIALIZING:
            self.initialize()
        iterations = self.config.iterations
        self.scheduler.start()
        while self.iteration < iterations:
            self.step()
            now = self.scheduler.clock()
            if self.scheduler.due(now, final=self.iteration == iterations):
                self.checkpoint(now)
        self.state = SimulationState.FINISHED

        return {
            "L": self.config.length,
            "iterations": self.iteration,
            "total_moves": self.total_moves,
            "accepted_moves": self.accepted_moves,
            "acceptance": self.acceptance,
            "checkpoints": self.scheduler.n_checkpoints,
            "output_path": self.config.density_path,
        }


def run_hard_sphere_mc(N=256, L=12.0, iterations=1000, output_path=None, rng=None,
                       verbose=False, **kwargs):
    """Run a hard-sphere density simulation.

    Args:
        N: Number of spheres
        L: Cell side length
        iterations: Number of sweeps
        output_path: Density file, or None for the default name
        rng: Optional RandomSource overriding seed/rng in kwargs
        verbose: Print progress lines
        **kwargs: Any other SimulationConfig field (move_scale, bin_width, seed, ...)

    Returns:
        Result dictionary from HardSphereSimulation.run
    """
    config = SimulationConfig(n_spheres=N, length=L, iterations=iterations,
                              output_path=output_path, **kwargs)
    sim = HardSphereSimulation(config, rng=rng, verbose=verbose)
    return sim.run()
