# mini_bsp/kernel/vector.py
"""
VECTOR KERNEL: Exact Integer 3D Arithmetic
==========================================

PURPOSE:
--------
Everything the BSP engine needs to reason about planes:

    subtract(a, b)            a - b
    cross(a, b)               a × b
    dot(a, b)                 a · b
    compute_plane(p0, p1, p2) anchor p0, normal (p1-p0) × (p2-p0)
    classify_point_to_plane   sign of normal · (point - anchor)

All inputs are integer triples, so every result is exact. A collinear
triangle produces a zero normal; nothing is raised here. Against a zero
normal every dot product is 0, so every point classifies as ON.

USAGE:
------
    plane = compute_plane((0, 0, 0), (1, 0, 0), (0, 1, 0))
    plane.normal                                     # (0, 0, 1)
    classify_point_to_plane(plane, (5, 5, 3))        # +1
    classify_point_to_plane(plane, (5, 5, -3))       # -1
    classify_point_to_plane(plane, (5, 5, 0))        #  0
"""

from typing import List, Sequence, Tuple

from ..errors import InvalidTriangleIndexError
from ..model import Plane, Point, Triangle


def subtract(a: Sequence[int], b: Sequence[int]) -> Point:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def cross(a: Sequence[int], b: Sequence[int]) -> Point:
    return (a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0])


def dot(a: Sequence[int], b: Sequence[int]) -> int:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def compute_plane(p0: Point, p1: Point, p2: Point) -> Plane:
    """
    Plane through three points.

    The normal is left unnormalized so it stays an integer vector.
    Collinear inputs give a zero normal (see `is_degenerate`).
    """
    return Plane(point=tuple(p0), normal=cross(subtract(p1, p0), subtract(p2, p0)))


def classify_point_to_plane(plane: Plane, point: Sequence[int]) -> int:
    """
    Side of `plane` that `point` lies on.

    Returns:
    --------
    int
        +1 in front (same side as the normal), -1 behind, 0 exactly on.
    """
    d = dot(plane.normal, subtract(point, plane.point))
    if d > 0:
        return 1
    if d < 0:
        return -1
    return 0


def is_degenerate(plane: Plane) -> bool:
    """True if the plane came from a zero-area triangle."""
    return plane.normal == (0, 0, 0)


def triangle_vertices(triangle: Triangle, points: List[Point]) -> Tuple[Point, Point, Point]:
    """
    Resolve the 1-based vertex indices of `triangle`.

    Indices are bounds-checked: a plain `points[i - 1]` would silently wrap
    around for index 0 or negative values.

    Raises:
        InvalidTriangleIndexError: if any index is outside [1, len(points)]
    """
    n = len(points)
    resolved = []
    for v in triangle:
        if not 1 <= v <= n:
            raise InvalidTriangleIndexError(
                f"Vertex index {v} out of range [1, {n}] in triangle {tuple(triangle)}"
            )
        resolved.append(points[v - 1])
    return resolved[0], resolved[1], resolved[2]


def triangle_plane(triangle: Triangle, points: List[Point]) -> Plane:
    """Plane of a triangle given by 1-based vertex indices."""
    return compute_plane(*triangle_vertices(triangle, points))
