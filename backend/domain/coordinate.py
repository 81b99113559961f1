"""
Integer grid coordinates with toroidal (wraparound) arithmetic.
"""

from typing import NamedTuple


class Coordinate(NamedTuple):
    """An (x, y) cell on the grid."""

    x: int
    y: int

    def translate(self, other: "Coordinate") -> "Coordinate":
        return add(self, other)

    def wrapped(self, n: int) -> "Coordinate":
        return wrap(self, n)


def add(a: Coordinate, b: Coordinate) -> Coordinate:
    """Componentwise sum of two coordinates."""
    return Coordinate(a[0] + b[0], a[1] + b[1])


def wrap_axis(k: int, n: int) -> int:
    """
    Euclidean modulo: always in [0, n) for n > 0.

    Same result as ((k % n) + n) % n; Python's % already floors toward
    negative infinity, so negative k wraps to the far edge.
    """
    return ((k % n) + n) % n


def wrap(v: Coordinate, n: int) -> Coordinate:
    """Wrap both axes of v into [0, n)."""
    return Coordinate(wrap_axis(v[0], n), wrap_axis(v[1], n))


def equals(a: Coordinate, b: Coordinate) -> bool:
    """Exact cell equality."""
    if a is None or b is None:
        return False
    return a[0] == b[0] and a[1] == b[1]
