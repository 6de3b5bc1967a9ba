"""Periodic boundary geometry: cell wrapping, minimum image, overlap test.

These are the Python reference implementations. The engine runs the compiled
kernels in geometry_numba.py, which perform the same floating point operations
in the same order and therefore give identical results.
"""

from .config import RADIUS
from .vector import Vector3


def wrap_coordinate(c, L):
    """Reduce one coordinate into [0, L) by repeated shifts of L."""
    while c >= L or c < 0.0:
        if c < 0.0:
            c += L
        else:
            c -= L
    return c


def minimum_image_coordinate(d, L):
    """Reduce one displacement component into (-L/2, L/2] by repeated shifts of L."""
    half_L = 0.5 * L
    while d > half_L:
        d -= L
    while d <= -half_L:
        d += L
    return d


def wrap_into_cell(v, L):
    """Wrap a point into the primary periodic cell.

    Args:
        v: Point, Vector3
        L: Cell side length

    Returns:
        Vector3 with every component in [0, L)
    """
    return Vector3(wrap_coordinate(v.x, L), wrap_coordinate(v.y, L), wrap_coordinate(v.z, L))


def minimum_image_delta(a, b, L):
    """Shortest displacement from a to b under periodic boundaries.

    Args:
        a: Start point, Vector3
        b: End point, Vector3
        L: Cell side length

    Returns:
        b - a with every component in (-L/2, L/2]
    """
    d = b - a
    return Vector3(
        minimum_image_coordinate(d.x, L),
        minimum_image_coordinate(d.y, L),
        minimum_image_coordinate(d.z, L),
    )


def overlap(a, b, L, diameter=2.0 * RADIUS):
    """True if hard spheres centered at a and b overlap.

    Spheres touching exactly (distance == diameter) do not overlap.
    """
    return minimum_image_delta(a, b, L).norm_squared() < diameter * diameter


def overlaps_any(positions, i, candidate, L, diameter=2.0 * RADIUS):
    """Test a trial position of sphere i against every other sphere.

    Args:
        positions: Current sphere centers, shape (N, 3)
        i: Index of the moving sphere (skipped)
        candidate: Trial center of sphere i, Vector3
        L: Cell side length
        diameter: Exclusion distance

    Returns:
        True if the trial position overlaps any sphere j != i
    """
    for j in range(len(positions)):
        if j != i and overlap(candidate, Vector3.from_array(positions[j]), L, diameter):
            return True
    return False


def find_overlap(positions, L, diameter=2.0 * RADIUS):
    """Exhaustive all-pairs overlap search.

    Args:
        positions: Sphere centers, shape (N, 3)
        L: Cell side length
        diameter: Exclusion distance

    Returns:
        First overlapping pair (i, j) with i < j, or None
    """
    spheres = [Vector3.from_array(p) for p in positions]
    n = len(spheres)
    for i in range(n):
        for j in range(i + 1, n):
            if overlap(spheres[i], spheres[j], L, diameter):
                return i, j
    return None
