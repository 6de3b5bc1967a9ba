"""Initial placement of spheres on a face-centered cubic lattice."""

import itertools
import math

import numpy as np

from .config import RADIUS
from .errors import GeometryInfeasibleError, InitialOverlapError
from .geometry import find_overlap
from .geometry_numba import find_overlap_numba
from .vector import Vector3

SITES_PER_CELL = 4


def fcc_cell_width(length, radius=RADIUS):
    """Width of the FCC unit cells that tile a cubic cell of side length.

    The cubic cell is divided into as many unit cells per axis as fit with a
    width of at least 2*sqrt(2)*radius, the width at which neighboring FCC
    sites are exactly one diameter apart. The unit cells are then stretched
    to fill the cell.

    Args:
        length: Side length of the periodic cell
        radius: Sphere radius

    Returns:
        (cells_per_axis, cell_width)

    Raises:
        GeometryInfeasibleError: If not even one unit cell fits
    """
    min_cell_width = 2.0 * math.sqrt(2.0) * radius
    cells = int(length / min_cell_width)
    if cells < 1:
        raise GeometryInfeasibleError(
            f"Placement cell size too small: side {length} is below the minimum "
            f"FCC cell width {min_cell_width:.4f}"
        )
    cell_width = length / cells
    if cell_width < min_cell_width:
        raise GeometryInfeasibleError(
            f"Placement cell size too small: {cell_width:.4f} < {min_cell_width:.4f}"
        )
    return cells, cell_width


def fcc_sites(cells, cell_width):
    """Yield FCC sites, cell by cell (axis 0 outermost), four per cell.

    Within a cell the three face centers come first and the cell origin last.
    """
    half = cell_width / 2.0
    offsets = (
        Vector3(0.0, half, half),
        Vector3(half, 0.0, half),
        Vector3(half, half, 0.0),
        Vector3(0.0, 0.0, 0.0),
    )
    for i, j, k in itertools.product(range(cells), repeat=3):
        origin = Vector3(i * cell_width, j * cell_width, k * cell_width)
        for offset in offsets:
            yield origin + offset


def place_fcc(n_spheres, length, radius=RADIUS):
    """Place n_spheres centers on the FCC lattice filling the cell.

    Placement stops after n_spheres sites, possibly partway through a cell.

    Args:
        n_spheres: Number of spheres
        length: Side length of the periodic cell
        radius: Sphere radius

    Returns:
        Sphere centers, shape (n_spheres, 3), float64 and C-contiguous

    Raises:
        GeometryInfeasibleError: If the cell cannot hold n_spheres sites
    """
    cells, cell_width = fcc_cell_width(length, radius)
    capacity = SITES_PER_CELL * cells ** 3
    if n_spheres > capacity:
        raise GeometryInfeasibleError(
            f"Placement cell size too small: {n_spheres} spheres requested but "
            f"only {capacity} FCC sites fit in a cell of side {length}"
        )
    positions = np.empty((n_spheres, 3), dtype=np.float64)
    for b, site in enumerate(itertools.islice(fcc_sites(cells, cell_width), n_spheres)):
        positions[b] = site.to_array()
    return positions


def audit_overlaps(positions, length, diameter, backend="numba"):
    """Raise if any two spheres overlap.

    Args:
        positions: Sphere centers, shape (N, 3)
        length: Side length of the periodic cell
        diameter: Exclusion distance
        backend: "numba" or "python"

    Raises:
        InitialOverlapError: On the first overlapping pair found
    """
    if backend == "numba":
        i, j = find_overlap_numba(positions, float(length), float(diameter * diameter))
        pair = None if i < 0 else (int(i), int(j))
    else:
        pair = find_overlap(positions, length, diameter)
    if pair is not None:
        raise InitialOverlapError(*pair)


def init_lattice(n_spheres, length, radius=RADIUS, backend="numba"):
    """Place spheres on the FCC lattice and verify that none overlap.

    Args:
        n_spheres: Number of spheres
        length: Side length of the periodic cell
        radius: Sphere radius
        backend: Overlap audit backend, "numba" or "python"

    Returns:
        Sphere centers, shape (n_spheres, 3)

    Raises:
        GeometryInfeasibleError: If the cell is too small
        InitialOverlapError: If the placement has overlaps
    """
    positions = place_fcc(n_spheres, length, radius)
    audit_overlaps(positions, length, 2.0 * radius, backend=backend)
    return positions
