#!/usr/bin/env python3
"""Benchmark script comparing compiled and reference hard-sphere sweeps.

Times advance_sweeps with the numba kernel and with the Python reference
implementation for a range of system sizes at fixed cell width per sphere.
"""

import argparse
import csv
import time
from pathlib import Path
import numpy as np

# Import from the repository checkout
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from hardspheres.lattice import fcc_cell_width, init_lattice
from hardspheres.mc import advance_sweeps
from hardspheres.rng import NumpyRandomSource
from hardspheres.vector import random_displacements


def cell_length_for(N, sites_per_volume):
    """Smallest cell side holding N spheres at roughly the requested site density.

    Args:
        N: Number of spheres
        sites_per_volume: Target number density

    Returns:
        Cell side length with room for N FCC sites
    """
    L = max((N / sites_per_volume) ** (1/3), 2 * np.sqrt(2))
    while True:
        cells, _ = fcc_cell_width(L)
        if 4 * cells ** 3 >= N:
            return L
        L *= 1.05


def benchmark(N, L, sweeps, scale, backend, seed):
    """Time one run of advance_sweeps.

    Returns:
        dict with keys: seconds, seconds_per_sweep, seconds_per_move, acceptance
    """
    rng = NumpyRandomSource(seed)
    positions = init_lattice(N, L)
    displacements = np.stack([random_displacements(N, scale, rng) for _ in range(sweeps)])

    # warm up the JIT on a copy so compilation is not timed
    if backend == "numba":
        advance_sweeps(positions.copy(), L, 2.0, displacements[:1], backend=backend)

    t_start = time.perf_counter()
    result = advance_sweeps(positions, L, 2.0, displacements, backend=backend)
    seconds = time.perf_counter() - t_start

    return {
        "seconds": seconds,
        "seconds_per_sweep": seconds / sweeps,
        "seconds_per_move": seconds / result["attempts"],
        "acceptance": result["acceptance"],
    }


def main():
    parser = argparse.ArgumentParser(description="Benchmark hard-sphere sweep backends")
    parser.add_argument("--sizes", type=int, nargs="+", default=[32, 108, 256, 500],
                        help="System sizes (number of spheres)")
    parser.add_argument("--density", type=float, default=0.05, help="Sphere number density")
    parser.add_argument("--sweeps", type=int, default=20, help="Sweeps per timing")
    parser.add_argument("--scale", type=float, default=0.05, help="Trial move standard deviation")
    parser.add_argument("--repeats", type=int, default=3, help="Repeats per size")
    parser.add_argument("--backends", nargs="+", default=["numba", "python"],
                        choices=["numba", "python"], help="Backends to time")
    parser.add_argument("--csv", type=str, default=None, help="Write results to this CSV file")
    args = parser.parse_args()

    csv_rows = []
    print("=" * 70)
    print("Hard-sphere sweep benchmark")
    print("=" * 70)

    for backend in args.backends:
        print(f"Backend: {backend}")
        print("-" * 70)
        print(f"{'N':>8} {'L':>8} {'seconds':>12} {'s/sweep':>12} {'us/move':>12} {'accept':>8}")
        print("-" * 70)

        for N in args.sizes:
            L = cell_length_for(N, args.density)
            times = []
            for repeat in range(args.repeats):
                result = benchmark(N, L, args.sweeps, args.scale, backend, seed=1000 + N * 10 + repeat)
                times.append(result)
                csv_rows.append({
                    "backend": backend,
                    "N": N,
                    "L": L,
                    "sweeps": args.sweeps,
                    "repeat": repeat + 1,
                    "seconds": result["seconds"],
                    "seconds_per_sweep": result["seconds_per_sweep"],
                    "seconds_per_move": result["seconds_per_move"] * 1e6,  # microseconds
                    "acceptance": result["acceptance"],
                })

            avg_time = np.mean([t["seconds"] for t in times])
            avg_sweep = np.mean([t["seconds_per_sweep"] for t in times])
            avg_move = np.mean([t["seconds_per_move"] for t in times]) * 1e6  # microseconds
            avg_acc = np.mean([t["acceptance"] for t in times])
            print(f"{N:>8} {L:>8.2f} {avg_time:>12.4f} {avg_sweep:>12.6f} {avg_move:>12.2f} {avg_acc:>8.3f}")

        print()

    if args.csv:
        csv_path = Path(args.csv)
        fieldnames = [
            "backend", "N", "L", "sweeps", "repeat",
            "seconds", "seconds_per_sweep", "seconds_per_move", "acceptance"
        ]
        with open(csv_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(csv_rows)
        print(f"CSV written to: {csv_path}")

    print("=" * 70)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
