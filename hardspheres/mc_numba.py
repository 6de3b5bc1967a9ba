"""Numba-compiled hard-sphere sweep kernel."""

from numba import njit

from .geometry_numba import overlaps_any_numba, wrap_coordinate_numba


@njit(cache=True)
def hs_sweeps_numba(
    positions,      # (N, 3) float64, C-contig, mutated in-place
    L,              # float64
    diameter2,      # float64, squared exclusion distance
    displacements,  # (n_sweeps, N, 3) float64, pre-generated displacements
):
    """Execute n_sweeps hard-sphere sweeps in compiled code.

    For each sweep s:
        For each sphere i in index order:
            Propose new_pos = wrap(positions[i] + displacements[s, i])
            Accept iff new_pos overlaps no sphere j != i at its current position
            If accepted: positions[i] = new_pos (visible to later spheres)

    Returns:
        (n_accept, n_attempt) where n_attempt = n_sweeps * N
    """
    N = positions.shape[0]
    n_sweeps = displacements.shape[0]
    n_accept = 0
    n_attempt = 0

    for s in range(n_sweeps):
        for i in range(N):
            n_attempt += 1
            cx = wrap_coordinate_numba(positions[i, 0] + displacements[s, i, 0], L)
            cy = wrap_coordinate_numba(positions[i, 1] + displacements[s, i, 1], L)
            cz = wrap_coordinate_numba(positions[i, 2] + displacements[s, i, 2], L)
            if not overlaps_any_numba(positions, i, cx, cy, cz, L, diameter2):
                positions[i, 0] = cx
                positions[i, 1] = cy
                positions[i, 2] = cz
                n_accept += 1

    return n_accept, n_attempt
