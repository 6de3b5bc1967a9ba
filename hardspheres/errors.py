"""Exceptions raised before the main loop starts, with their exit statuses."""


class SimulationError(Exception):
    """Base class for fatal simulation setup errors."""
    exit_code = 1


class ConfigurationError(SimulationError, ValueError):
    """Malformed or insufficient simulation parameters."""
    exit_code = 1


class GeometryInfeasibleError(SimulationError):
    """The cell is too small to place the requested spheres."""
    exit_code = 176


class InitialOverlapError(SimulationError):
    """Initial placement produced overlapping spheres.

    Args:
        i: Index of the first sphere of the overlapping pair
        j: Index of the second sphere of the overlapping pair
    """
    exit_code = 19

    def __init__(self, i, j, message=None):
        self.pair = (i, j)
        if message is None:
            message = f"ERROR in initial placement: spheres {i} and {j} overlap"
        super().__init__(message)


__all__ = [
    "SimulationError",
    "ConfigurationError",
    "GeometryInfeasibleError",
    "InitialOverlapError",
]
