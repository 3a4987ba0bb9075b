# tests/test_kernel.py
"""
KERNEL TESTS: Exact Integer Vector Math and Planes
==================================================

The whole engine rests on these few functions. Because everything is
integer, results are compared with == (no tolerances anywhere).
"""

import numpy as np
import pytest

from mini_bsp.errors import InvalidTriangleIndexError
from mini_bsp.kernel.vector import (
    subtract, cross, dot, compute_plane, classify_point_to_plane,
    is_degenerate, triangle_vertices, triangle_plane,
)


def test_subtract_dot_cross_basics():
    assert subtract((5, 3, 1), (1, 1, 1)) == (4, 2, 0)
    assert dot((1, 2, 3), (4, -5, 6)) == 12
    assert cross((1, 0, 0), (0, 1, 0)) == (0, 0, 1)
    assert cross((0, 1, 0), (0, 0, 1)) == (1, 0, 0)
    assert cross((0, 0, 1), (1, 0, 0)) == (0, 1, 0)


def test_cross_is_anticommutative_and_zero_for_parallel():
    rng = np.random.default_rng(7)
    for _ in range(50):
        a = tuple(int(v) for v in rng.integers(-20, 21, size=3))
        b = tuple(int(v) for v in rng.integers(-20, 21, size=3))
        ab = cross(a, b)
        ba = cross(b, a)
        assert ab == tuple(-v for v in ba)
        # a × b is perpendicular to both inputs
        assert dot(ab, a) == 0
        assert dot(ab, b) == 0

    assert cross((2, 4, 6), (1, 2, 3)) == (0, 0, 0)
    assert cross((0, 0, 0), (1, 2, 3)) == (0, 0, 0)


def test_no_overflow_on_large_coordinates():
    big = 10 ** 12
    n = cross((big, 0, 0), (0, big, 0))
    assert n == (0, 0, big * big)


def test_compute_plane_anchor_and_normal():
    plane = compute_plane((1, 1, 1), (3, 1, 1), (1, 4, 1))
    assert plane.point == (1, 1, 1)
    assert plane.normal == (0, 0, 6)


def test_plane_contains_its_own_vertices():
    """
    WHAT IS THIS TEST?
    ==================
    Every vertex of a non-degenerate triangle must be exactly ON the plane
    computed from that triangle. With integer math "exactly" means the dot
    product is 0, not just small.
    """
    rng = np.random.default_rng(42)
    checked = 0
    for _ in range(100):
        p0, p1, p2 = (tuple(int(v) for v in rng.integers(-50, 51, size=3)) for _ in range(3))
        plane = compute_plane(p0, p1, p2)
        if is_degenerate(plane):
            continue
        for p in (p0, p1, p2):
            assert classify_point_to_plane(plane, p) == 0
        checked += 1
    assert checked > 90


def test_classify_point_sides():
    plane = compute_plane((0, 0, 0), (1, 0, 0), (0, 1, 0))
    assert classify_point_to_plane(plane, (7, -3, 1)) == 1
    assert classify_point_to_plane(plane, (7, -3, -1)) == -1
    assert classify_point_to_plane(plane, (7, -3, 0)) == 0


def test_reversed_winding_flips_sides():
    up = compute_plane((0, 0, 0), (1, 0, 0), (0, 1, 0))
    down = compute_plane((0, 0, 0), (0, 1, 0), (1, 0, 0))
    assert up.normal == (0, 0, 1)
    assert down.normal == (0, 0, -1)
    assert classify_point_to_plane(up, (0, 0, 5)) == -classify_point_to_plane(down, (0, 0, 5))


def test_degenerate_plane_classifies_everything_on():
    plane = compute_plane((0, 0, 0), (1, 1, 1), (2, 2, 2))
    assert is_degenerate(plane)
    for p in [(100, -4, 3), (0, 0, 0), (-9, 9, -9)]:
        assert classify_point_to_plane(plane, p) == 0


class TestTriangleVertices:
    points = [(0, 0, 0), (1, 0, 0), (0, 1, 0)]

    def test_resolves_one_based_indices(self):
        assert triangle_vertices((3, 1, 2), self.points) == ((0, 1, 0), (0, 0, 0), (1, 0, 0))

    def test_triangle_plane(self):
        assert triangle_plane((1, 2, 3), self.points).normal == (0, 0, 1)

    @pytest.mark.parametrize("triangle", [(1, 2, 4), (0, 1, 2), (-1, 1, 2)])
    def test_out_of_range_index_fails_fast(self, triangle):
        with pytest.raises(InvalidTriangleIndexError, match="out of range"):
            triangle_vertices(triangle, self.points)
