"""Three-component double precision vector used for sphere centers and moves."""

import math

import numpy as np

_AXES = ("x", "y", "z")


class Vector3:
    """Immutable 3D vector.

    Arithmetic returns new vectors; nothing mutates an existing instance.
    Axis access by index accepts only 0, 1 and 2.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x=0.0, y=0.0, z=0.0):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vector3 is immutable")

    @classmethod
    def from_array(cls, a):
        return cls(a[0], a[1], a[2])

    def to_array(self):
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __getitem__(self, axis):
        if axis not in (0, 1, 2):
            raise IndexError(f"Vector3 axis out of range: {axis!r}")
        return getattr(self, _AXES[axis])

    def with_axis(self, axis, value):
        """Return a copy with one component replaced.

        Args:
            axis: 0, 1 or 2
            value: New component value

        Returns:
            New Vector3
        """
        if axis not in (0, 1, 2):
            raise IndexError(f"Vector3 axis out of range: {axis!r}")
        c = [self.x, self.y, self.z]
        c[axis] = value
        return Vector3(*c)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar):
        if isinstance(scalar, Vector3):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, Vector3):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self):
        return f"({self.x:6.2f}, {self.y:6.2f}, {self.z:6.2f})"

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm_squared(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self):
        return math.sqrt(self.norm_squared())

    def normalized(self):
        """Unit vector parallel to self.

        Raises:
            ZeroDivisionError: If the vector has zero length
        """
        return self / self.norm()

    @classmethod
    def random_gaussian(cls, scale, rng):
        """Random displacement with i.i.d. Gaussian components.

        Uses the polar Box-Muller method: two uniforms in (-1, 1) are drawn
        until their squared radius lies in (0, 1). The first pair gives x and
        y; a second, independent pair gives z and its spare is discarded.

        Args:
            scale: Standard deviation of each component
            rng: RandomSource providing uniform() in [0, 1)

        Returns:
            Displacement Vector3
        """
        u, v, fac = _polar_pair(scale, rng)
        x = u * fac
        y = v * fac
        u, _, fac = _polar_pair(scale, rng)
        return cls(x, y, u * fac)


def _polar_pair(scale, rng):
    while True:
        u = 2.0 * rng.uniform() - 1.0
        v = 2.0 * rng.uniform() - 1.0
        r2 = u * u + v * v
        if 0.0 < r2 < 1.0:
            return u, v, scale * math.sqrt(-2.0 * math.log(r2) / r2)


def random_displacements(n, scale, rng):
    """Draw one Gaussian displacement per sphere, in index order.

    Args:
        n: Number of displacements
        scale: Standard deviation of each component
        rng: RandomSource

    Returns:
        Array of displacements, shape (n, 3), float64 and C-contiguous
    """
    out = np.empty((n, 3), dtype=np.float64)
    for i in range(n):
        d = Vector3.random_gaussian(scale, rng)
        out[i, 0] = d.x
        out[i, 1] = d.y
        out[i, 2] = d.z
    return out
