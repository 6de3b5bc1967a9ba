"""One-dimensional density histogram along z."""

import math

import numpy as np

from .config import BIN_WIDTH

RAW_FORMAT = "%6.3f   %d\n"
EXTENDED_FORMAT = "%6.3f   %8.5f   %d\n"
BIN_TOLERANCE = 1e-9


class DensityHistogram:
    """Counts of sphere centers in slabs of fixed width along z.

    Bins cover [0, length). A quotient length/bin_width within BIN_TOLERANCE
    of an integer counts as that integer, so 4.1/0.01 gives 410 whole bins.
    One bin beyond floor(length/bin_width) is kept so
    that a partial last slab, or a coordinate that rounds onto the upper edge,
    still has somewhere to go; only the whole bins are written out.

    Args:
        length: Side length of the periodic cell
        bin_width: Slab width
    """

    def __init__(self, length, bin_width=BIN_WIDTH):
        self.length = float(length)
        self.bin_width = float(bin_width)
        self.n_output_bins = int(math.floor(self.length / self.bin_width + BIN_TOLERANCE))
        self.counts = np.zeros(self.n_output_bins + 1, dtype=np.int64)

    def __len__(self):
        return len(self.counts)

    @property
    def total(self):
        return int(self.counts.sum())

    def bin_index(self, z):
        return int(math.floor(z / self.bin_width))

    def accumulate(self, z):
        """Add one count for a center at height z, 0 <= z < length."""
        self.counts[self.bin_index(z)] += 1

    def accumulate_positions(self, positions):
        """Add one count per sphere, binned by its z coordinate.

        Args:
            positions: Sphere centers, shape (N, 3), already wrapped into the cell
        """
        idx = np.floor(positions[:, 2] / self.bin_width).astype(np.int64)
        np.add.at(self.counts, idx, 1)

    def bin_centers(self):
        return (np.arange(self.n_output_bins) + 0.5) * self.bin_width

    def normalized_density(self, total_moves, n_spheres):
        """Number density per bin: count * N / (total_moves * length^2 * bin_width).

        Args:
            total_moves: Cumulative attempted moves
            n_spheres: Number of spheres

        Returns:
            Array of densities for the written bins
        """
        shell_volume = self.length * self.length * self.bin_width
        counts = self.counts[:self.n_output_bins].astype(np.float64)
        return counts * n_spheres / max(total_moves, 1) / shell_volume

    def serialize(self, stream, total_moves, n_spheres, extended=False):
        """Write one line per whole bin, ordered by increasing z.

        Raw lines hold the bin center and count; extended lines put the
        normalized density between them.

        Args:
            stream: Text stream to write to
            total_moves: Cumulative attempted moves
            n_spheres: Number of spheres
            extended: Include the normalized density column
        """
        centers = self.bin_centers()
        if extended:
            density = self.normalized_density(total_moves, n_spheres)
            for z_i in range(self.n_output_bins):
                stream.write(EXTENDED_FORMAT % (centers[z_i], density[z_i], self.counts[z_i]))
        else:
            for z_i in range(self.n_output_bins):
                stream.write(RAW_FORMAT % (centers[z_i], self.counts[z_i]))
