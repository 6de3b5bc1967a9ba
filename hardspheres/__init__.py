"""hardspheres: Monte Carlo density profiles of hard spheres in a periodic cube."""

from .errors import (
    SimulationError,
    ConfigurationError,
    GeometryInfeasibleError,
    InitialOverlapError,
)
from .config import SimulationConfig, default_output_path, RADIUS
from .vector import Vector3, random_displacements
from .rng import RandomSource, NumpyRandomSource, XorshiftRandomSource, make_random_source
from .geometry import wrap_into_cell, minimum_image_delta, overlap, find_overlap
from .lattice import fcc_cell_width, place_fcc, audit_overlaps, init_lattice
from .histogram import DensityHistogram
from .scheduler import CheckpointScheduler, format_elapsed
from .output import write_checkpoint
from .mc import advance_sweeps, HardSphereSimulation, SimulationState, run_hard_sphere_mc

__all__ = [
    "SimulationError",
    "ConfigurationError",
    "GeometryInfeasibleError",
    "InitialOverlapError",
    "SimulationConfig",
    "default_output_path",
    "RADIUS",
    "Vector3",
    "random_displacements",
    "RandomSource",
    "NumpyRandomSource",
    "XorshiftRandomSource",
    "make_random_source",
    "wrap_into_cell",
    "minimum_image_delta",
    "overlap",
    "find_overlap",
    "fcc_cell_width",
    "place_fcc",
    "audit_overlaps",
    "init_lattice",
    "DensityHistogram",
    "CheckpointScheduler",
    "format_elapsed",
    "write_checkpoint",
    "advance_sweeps",
    "HardSphereSimulation",
    "SimulationState",
    "run_hard_sphere_mc",
]
