"""Numba-compiled periodic geometry kernels.

Same arithmetic as the reference functions in geometry.py, written on scalars
so that compiled and Python results agree bit for bit.
"""

from numba import njit


@njit(cache=True)
def wrap_coordinate_numba(c, L):
    """Reduce one coordinate into [0, L)."""
    while c >= L or c < 0.0:
        if c < 0.0:
            c += L
        else:
            c -= L
    return c


@njit(cache=True)
def minimum_image_coordinate_numba(d, L):
    """Reduce one displacement component into (-L/2, L/2]."""
    half_L = 0.5 * L
    while d > half_L:
        d -= L
    while d <= -half_L:
        d += L
    return d


@njit(cache=True)
def distance_squared_numba(ax, ay, az, bx, by, bz, L):
    """Squared minimum-image distance between points a and b."""
    dx = minimum_image_coordinate_numba(bx - ax, L)
    dy = minimum_image_coordinate_numba(by - ay, L)
    dz = minimum_image_coordinate_numba(bz - az, L)
    return dx * dx + dy * dy + dz * dz


@njit(cache=True)
def overlaps_any_numba(positions, i, cx, cy, cz, L, diameter2):
    """Test a trial center (cx, cy, cz) of sphere i against all spheres j != i.

    Args:
        positions: Sphere centers, shape (N, 3) float64
        i: Index of the moving sphere
        cx, cy, cz: Trial center
        L: Cell side length
        diameter2: Squared exclusion distance

    Returns:
        True if any sphere j != i lies closer than the diameter
    """
    N = positions.shape[0]
    for j in range(N):
        if j == i:
            continue
        d2 = distance_squared_numba(
            cx, cy, cz, positions[j, 0], positions[j, 1], positions[j, 2], L
        )
        if d2 < diameter2:
            return True
    return False


@njit(cache=True)
def find_overlap_numba(positions, L, diameter2):
    """All-pairs overlap search.

    Returns:
        (i, j) of the first overlapping pair with i < j, or (-1, -1)
    """
    N = positions.shape[0]
    for i in range(N - 1):
        for j in range(i + 1, N):
            d2 = distance_squared_numba(
                positions[i, 0], positions[i, 1], positions[i, 2],
                positions[j, 0], positions[j, 1], positions[j, 2], L
            )
            if d2 < diameter2:
                return i, j
    return -1, -1
