"""
Tests for toroidal coordinate arithmetic.
"""

import os
import sys

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.coordinate import Coordinate, add, equals, wrap, wrap_axis  # noqa: E402


class TestWrapAxis:
    """Tests for the Euclidean modulo."""

    def test_result_always_in_range(self):
        """wrap_axis(k, n) lands in [0, n) for negative and positive k."""
        for n in range(1, 8):
            for k in range(-50, 51):
                assert 0 <= wrap_axis(k, n) < n

    def test_periodic_in_n(self):
        """wrap_axis(k, n) == wrap_axis(k + n, n)."""
        for n in (1, 2, 5, 20):
            for k in range(-45, 46):
                assert wrap_axis(k, n) == wrap_axis(k + n, n)

    def test_negative_wraps_to_far_edge(self):
        """-1 wraps to n - 1, not to -1."""
        assert wrap_axis(-1, 20) == 19
        assert wrap_axis(-21, 20) == 19
        assert wrap_axis(20, 20) == 0


class TestCoordinate:
    """Tests for Coordinate helpers."""

    def test_add_is_componentwise(self):
        assert add(Coordinate(3, 4), Coordinate(-1, 2)) == Coordinate(2, 6)

    def test_wrap_both_axes(self):
        """wrap() normalizes each axis independently."""
        assert wrap(Coordinate(-1, 20), 20) == Coordinate(19, 0)
        assert wrap(Coordinate(20, -1), 20) == Coordinate(0, 19)
        assert wrap(Coordinate(5, 7), 20) == Coordinate(5, 7)

    def test_methods_match_functions(self):
        c = Coordinate(19, 10)
        assert c.translate(Coordinate(1, 0)) == Coordinate(20, 10)
        assert c.translate(Coordinate(1, 0)).wrapped(20) == Coordinate(0, 10)

    def test_equals_is_exact(self):
        """Cells compare by exact integer equality."""
        assert equals(Coordinate(1, 2), (1, 2))
        assert not equals(Coordinate(1, 2), Coordinate(2, 1))
        assert not equals(Coordinate(1, 2), None)

    def test_coordinate_is_hashable_value(self):
        """Coordinates work as set members and compare equal to plain tuples."""
        cells = {Coordinate(1, 1), Coordinate(1, 1), Coordinate(2, 1)}
        assert len(cells) == 2
        assert (2, 1) in cells
