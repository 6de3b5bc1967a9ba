"""Seedable uniform random sources.

Every source exposes ``seed(value)`` and ``uniform()`` returning a float in
[0, 1). The same seed and the same sequence of calls always reproduce the same
numbers, so runs can be repeated exactly.
"""

import numpy as np

from .errors import ConfigurationError

_MASK32 = 0xFFFFFFFF


class RandomSource:
    """Interface for uniform [0, 1) generators."""

    def seed(self, value):
        raise NotImplementedError

    def uniform(self):
        raise NotImplementedError


class NumpyRandomSource(RandomSource):
    """PCG64 generator from ``numpy.random.default_rng``.

    Args:
        seed: Integer seed
    """

    def __init__(self, seed=0):
        self.seed(seed)

    def seed(self, value):
        self._generator = np.random.default_rng(value)

    def uniform(self):
        return float(self._generator.random())


class XorshiftRandomSource(RandomSource):
    """Marsaglia xorshift128 generator (period 2**128 - 1).

    The state starts from the classic words 123456789, 362436069, 521288629
    and 88675123; the low and high 32 bits of the seed are xor-ed into the
    first two. The last two words are never zero, so the state never is.
    Output is ``w / 2**32``.

    Args:
        seed: Non-negative integer seed
    """

    def __init__(self, seed=0):
        self.seed(seed)

    def seed(self, value):
        value = int(value)
        if value < 0:
            raise ConfigurationError(f"xorshift seed must be non-negative, got {value}")
        self._x = 123456789 ^ (value & _MASK32)
        self._y = 362436069 ^ ((value >> 32) & _MASK32)
        self._z = 521288629
        self._w = 88675123

    def next_uint32(self):
        t = (self._x ^ (self._x << 11)) & _MASK32
        self._x, self._y, self._z = self._y, self._z, self._w
        self._w = (self._w ^ (self._w >> 19) ^ (t ^ (t >> 8))) & _MASK32
        return self._w

    def uniform(self):
        return self.next_uint32() * (1.0 / 4294967296.0)


def make_random_source(name, seed):
    """Build a random source by name.

    Args:
        name: "pcg64" or "xorshift"
        seed: Integer seed

    Returns:
        RandomSource instance
    """
    if name == "pcg64":
        return NumpyRandomSource(seed)
    if name == "xorshift":
        return XorshiftRandomSource(seed)
    raise ConfigurationError(f"unknown random source {name!r}")
