"""Checkpoint file writing."""

import os
from pathlib import Path


def write_checkpoint(path, histogram, total_moves, n_spheres, extended=False):
    """Replace the density file with the current histogram.

    The data go to a temporary file next to the target, which is then renamed
    over it, so an interrupted write never leaves a truncated file behind.

    Args:
        path: Output file path
        histogram: DensityHistogram
        total_moves: Cumulative attempted moves
        n_spheres: Number of spheres
        extended: Include the normalized density column

    Returns:
        Path of the written file
    """
    path = Path(path)
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        with open(tmp_path, "w") as f:
            histogram.serialize(f, total_moves, n_spheres, extended=extended)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except Exception:
        if tmp_path.exists():
            tmp_path.unlink()
        raise
    return path
