# mini_bsp/intersect.py
"""
SEGMENT-TRIANGLE INTERSECTION
=============================

PURPOSE:
--------
Decide whether the closed segment a-b touches a triangle. Two regimes:

1. NOT PARALLEL (normal · (b - a) != 0)
   Solve for t where the line a + t(b - a) meets the triangle's plane.
   Reject t outside [0, 1]. Otherwise compute the hit point, ROUND it to
   integer coordinates, and test containment with barycentric (u, v).

2. PARALLEL (normal · (b - a) == 0)
   If a is not exactly on the plane the segment never meets it. If it is,
   the whole segment lies in the plane and the test becomes 2D: project
   everything onto the axis plane facing the normal, then hit if either
   endpoint is inside the triangle or the segment crosses any edge.

ROUNDING:
---------
The hit point is rounded to the nearest integer (halves away from zero)
before the barycentric test. This can misclassify hits within half a unit
of an edge. The behaviour is kept as-is: results are reproducible
bit-for-bit, and the domain is integer geometry.

t and the hit point are computed with `fractions.Fraction`, so the only
approximation anywhere is that one rounding step.
"""

import math
from fractions import Fraction
from typing import List, Sequence

from .kernel.planar import dominant_axis, point_in_triangle_2d, project_2d, segments_intersect_2d
from .kernel.vector import compute_plane, dot, is_degenerate, subtract, triangle_vertices
from .model import Point, Triangle


def round_half_away(value: Fraction) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return math.floor(value + Fraction(1, 2))
    return -math.floor(-value + Fraction(1, 2))


def line_plane_parameter(a: Point, b: Point, p0: Point, normal: Point):
    """
    Parameter t of the point where line a + t(b - a) crosses the plane.

    Returns None when the line is parallel to the plane.
    """
    denom = dot(normal, subtract(b, a))
    if denom == 0:
        return None
    return Fraction(dot(normal, subtract(p0, a)), denom)


def point_in_triangle_3d(p: Point, p0: Point, p1: Point, p2: Point) -> bool:
    """
    Barycentric containment of p in triangle p0-p1-p2 (edges included).

    p is expressed as p0 + u(p1 - p0) + v(p2 - p0) in the least-squares
    sense; inside means u >= 0, v >= 0, u + v <= 1. A zero-area triangle
    has no barycentric frame and contains nothing.
    """
    v0 = subtract(p1, p0)
    v1 = subtract(p2, p0)
    v2 = subtract(p, p0)

    d00 = dot(v0, v0)
    d01 = dot(v0, v1)
    d11 = dot(v1, v1)
    d20 = dot(v2, v0)
    d21 = dot(v2, v1)

    denom = d00 * d11 - d01 * d01
    if denom == 0:
        return False

    # u = u_num / denom, v = v_num / denom, with denom > 0 (Gram determinant)
    u_num = d11 * d20 - d01 * d21
    v_num = d00 * d21 - d01 * d20
    return u_num >= 0 and v_num >= 0 and u_num + v_num <= denom


def coplanar_segment_hits_triangle(
    a: Point, b: Point, p0: Point, p1: Point, p2: Point, normal: Sequence[int]
) -> bool:
    """2D test for a segment lying in the triangle's plane."""
    axis = dominant_axis(normal)
    a2, b2 = project_2d(a, axis), project_2d(b, axis)
    t0, t1, t2 = project_2d(p0, axis), project_2d(p1, axis), project_2d(p2, axis)

    if point_in_triangle_2d(a2, t0, t1, t2) or point_in_triangle_2d(b2, t0, t1, t2):
        return True

    for e0, e1 in ((t0, t1), (t1, t2), (t2, t0)):
        if segments_intersect_2d(a2, b2, e0, e1):
            return True
    return False


def segment_intersects_triangle(
    a: Point, b: Point, triangle: Triangle, points: List[Point]
) -> bool:
    """
    True if the closed segment a-b touches the triangle.

    Parameters:
    -----------
    a, b : Point
        Segment endpoints

    triangle : Triangle
        1-based vertex indices into `points`

    points : List[Point]
        Shared vertex list

    Raises:
    -------
    InvalidTriangleIndexError
        If the triangle references a vertex outside `points`
    """
    p0, p1, p2 = triangle_vertices(triangle, points)
    plane = compute_plane(p0, p1, p2)
    if is_degenerate(plane):
        return False
    normal = plane.normal

    t = line_plane_parameter(a, b, p0, normal)
    if t is not None:
        if t < 0 or t > 1:
            return False
        hit = tuple(round_half_away(a[i] + t * (b[i] - a[i])) for i in range(3))
        return point_in_triangle_3d(hit, p0, p1, p2)

    # Parallel: only a segment lying in the plane can touch the triangle
    if dot(normal, subtract(a, p0)) != 0:
        return False
    return coplanar_segment_hits_triangle(a, b, p0, p1, p2, normal)
