"""Command-line driver: ``hardspheres N len iterations [output_path]``."""

import argparse
import sys

from .config import BACKENDS, BIN_WIDTH, MOVE_SCALE, RADIUS, RNG_NAMES, SimulationConfig
from .errors import ConfigurationError, SimulationError
from .mc import HardSphereSimulation


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigurationError instead of exiting with status 2."""

    def error(self, message):
        raise ConfigurationError(f"{self.prog}: error: {message}")


def build_parser():
    parser = _ArgumentParser(
        prog="hardspheres",
        description="Hard-sphere Monte Carlo in a periodic cube; writes the density profile along z.",
    )
    parser.add_argument("N", type=int, help="number of spheres")
    parser.add_argument("len", type=float, help="side length of the cubic cell")
    parser.add_argument("iterations", type=int, help="number of iterations (one move attempt per sphere each)")
    parser.add_argument("output_path", nargs="?", default=None,
                        help="density file (default: density-N<N>-L<len>-I<iterations>.dat)")
    parser.add_argument("--seed", type=int, default=0, help="random seed (default: 0)")
    parser.add_argument("--scale", type=float, default=MOVE_SCALE,
                        help=f"standard deviation of trial moves (default: {MOVE_SCALE})")
    parser.add_argument("--bin-width", type=float, default=BIN_WIDTH,
                        help=f"density histogram bin width (default: {BIN_WIDTH})")
    parser.add_argument("--radius", type=float, default=RADIUS,
                        help=f"sphere radius (default: {RADIUS})")
    parser.add_argument("--rng", choices=RNG_NAMES, default="pcg64", help="random number generator")
    parser.add_argument("--backend", choices=BACKENDS, default="numba",
                        help="numba kernels or the Python reference implementation")
    parser.add_argument("--extended", action="store_true",
                        help="also write the normalized density column")
    return parser


def config_from_args(args):
    return SimulationConfig(
        n_spheres=args.N,
        length=args.len,
        iterations=args.iterations,
        output_path=args.output_path,
        move_scale=args.scale,
        bin_width=args.bin_width,
        radius=args.radius,
        seed=args.seed,
        rng=args.rng,
        extended_output=args.extended,
        backend=args.backend,
    ).validate()


def main(argv=None):
    """Run the simulation from command-line arguments.

    Returns:
        Process exit status: 0 on success, 1 for bad arguments, 176 if the
        cell is too small, 19 if the initial placement overlaps
    """
    parser = build_parser()
    try:
        config = config_from_args(parser.parse_args(argv))
        sim = HardSphereSimulation(config)
        result = sim.run()
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        parser.print_usage(sys.stderr)
        return e.exit_code
    except SimulationError as e:
        print(e, file=sys.stderr)
        return e.exit_code

    print(f"Acceptance: {result['acceptance']:.4f} "
          f"({result['accepted_moves']}/{result['total_moves']} moves)")
    print(f"Density written to: {result['output_path']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
