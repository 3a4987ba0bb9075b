# tests/test_query.py
"""
QUERY TESTS: Tree Walk vs. Brute Force
======================================

The tree walk must find exactly what a scan over all triangles finds,
while skipping subtrees on the far side of each plane.

RANDOM SCENES:
--------------
To compare against brute force without the hit-point rounding getting in
the way, random scenes use axis-aligned triangles on EVEN coordinates and
axis-parallel segments with ODD endpoints. Then:
- no segment endpoint ever lies on a triangle's plane
- every crossing point has integer coordinates (rounding is a no-op)
so the intersection predicate is exact geometry and the walk must agree
with the scan on every segment.
"""

import numpy as np
import pytest

from mini_bsp.bsp import build_bsp
from mini_bsp.errors import InvalidTriangleIndexError
from mini_bsp.io import format_results
from mini_bsp.model import BSPData
from mini_bsp.query import brute_force_segments, process_segments, query_bsp


def random_axis_aligned_scene(seed: int, n_triangles: int = 25, n_segments: int = 60) -> BSPData:
    rng = np.random.default_rng(seed)
    points = []
    triangles = []
    for _ in range(n_triangles):
        axis = int(rng.integers(0, 3))
        c = 2 * int(rng.integers(-3, 4))
        base = len(points)
        for _ in range(3):
            p = [2 * int(v) for v in rng.integers(-4, 5, size=3)]
            p[axis] = c
            points.append(tuple(p))
        triangles.append((base + 1, base + 2, base + 3))

    segments = []
    for _ in range(n_segments):
        axis = int(rng.integers(0, 3))
        a = [2 * int(v) + 1 for v in rng.integers(-5, 5, size=3)]
        b = list(a)
        b[axis] = 2 * int(rng.integers(-5, 5)) + 1
        segments.append(tuple(a + b))
    return BSPData(points=points, triangles=triangles, segments=segments)


def random_general_scene(seed: int, n_triangles: int = 20, n_segments: int = 40) -> BSPData:
    rng = np.random.default_rng(seed)
    points = [tuple(int(v) for v in row) for row in rng.integers(-10, 11, size=(3 * n_triangles, 3))]
    triangles = [(3 * i + 1, 3 * i + 2, 3 * i + 3) for i in range(n_triangles)]
    segments = [tuple(int(v) for v in row) for row in rng.integers(-12, 13, size=(n_segments, 6))]
    return BSPData(points=points, triangles=triangles, segments=segments)


class TestScenarios:

    def test_square_split_along_diagonal(self, square_scene):
        results = process_segments(square_scene)
        assert results[0] == [1, 2]
        assert format_results(results[:1]) == "2 1 2"

    def test_segment_outside_everything(self, square_scene):
        results = process_segments(square_scene)
        assert results[1] == []
        assert format_results(results[1:]) == "0"

    def test_coplanar_segment_through_interior(self):
        data = BSPData(
            points=[(0, 0, 0), (4, 0, 0), (0, 4, 0)],
            triangles=[(1, 2, 3)],
            segments=[(1, 1, 0, 2, 1, 0)],
        )
        assert process_segments(data) == [[1]]

    def test_spanning_triangle_reported_once(self, layered_scene):
        # Vertical line through T5's first vertex, clear of every other triangle
        layered_scene.segments = [(3, 0, -5, 3, 0, 5)]
        assert process_segments(layered_scene) == [[5]]

    def test_stack_of_slabs(self, layered_scene):
        # Through the origin column: hits T1, T3, T4 (T2 and T5 are elsewhere)
        layered_scene.segments = [(0, 0, -5, 0, 0, 5), (0, 0, 1, 0, 0, 5), (0, 0, -1, 0, 0, 1)]
        assert process_segments(layered_scene) == [[1, 3, 4], [3], [1]]

    def test_no_triangles(self):
        data = BSPData(points=[(0, 0, 0)], triangles=[], segments=[(0, 0, 0, 1, 1, 1)])
        assert process_segments(data) == [[]]

    def test_no_segments(self, square_scene):
        square_scene.segments = []
        assert process_segments(square_scene) == []


def test_query_bsp_returns_fresh_sets(square_scene):
    root = build_bsp(square_scene.triangles, square_scene.points)
    first = query_bsp(root, (1, 1, -1), (1, 1, 1), square_scene.triangles, square_scene.points)
    first.add(99)
    second = query_bsp(root, (1, 1, -1), (1, 1, 1), square_scene.triangles, square_scene.points)
    assert second == {1, 2}
    assert query_bsp(None, (0, 0, 0), (1, 1, 1), [], []) == set()


def test_far_side_subtree_is_skipped(layered_scene, monkeypatch):
    """A segment strictly above T1's plane never visits T1's back subtree (T4)."""
    import mini_bsp.query as query_module

    visited = []
    real = query_module.segment_intersects_triangle

    def spy(a, b, triangle, points):
        visited.append(layered_scene.triangles.index(triangle) + 1)
        return real(a, b, triangle, points)

    monkeypatch.setattr(query_module, "segment_intersects_triangle", spy)
    root = build_bsp(layered_scene.triangles, layered_scene.points)
    hits = query_bsp(root, (0, 0, 1), (0, 0, 5), layered_scene.triangles, layered_scene.points)

    assert hits == {3}
    assert 4 not in visited


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4, 5])
def test_tree_walk_matches_brute_force(seed):
    data = random_axis_aligned_scene(seed)
    expected = brute_force_segments(data)
    assert process_segments(data) == expected
    # the scenes are not trivially empty
    assert any(expected)


@pytest.mark.parametrize("seed", [10, 11, 12])
def test_general_scenes_only_report_real_hits(seed):
    data = random_general_scene(seed)
    brute = brute_force_segments(data)
    for found, all_hits in zip(process_segments(data), brute):
        assert found == sorted(set(found))
        assert set(found) <= set(all_hits)


def test_idempotent():
    data = random_general_scene(3)
    assert process_segments(data) == process_segments(data)


def test_invalid_index_raises_before_building():
    data = BSPData(points=[(0, 0, 0), (1, 0, 0)], triangles=[(1, 2, 3)], segments=[])
    with pytest.raises(InvalidTriangleIndexError, match="Triangle 1 references vertex 3"):
        process_segments(data)
