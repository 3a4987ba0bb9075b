# mini_bsp/kernel/planar.py
"""
PLANAR PREDICATES: 2D Tests for the Coplanar Case
=================================================

PURPOSE:
--------
When a query segment lies in the plane of a triangle, the 3D line-plane
solver has nothing to solve (the segment is parallel to the plane). The
question becomes 2D: does the segment touch the triangle inside their
common plane?

We answer it by PROJECTING onto an axis-aligned plane: drop the coordinate
where the normal is largest in magnitude. That projection never collapses
the triangle (the dropped axis is the one the plane is most "facing"), and
it keeps integer coordinates, so all predicates below stay exact.

PREDICATES:
-----------
    orientation(p, q, r)          0 collinear, 1 clockwise, 2 counterclockwise
    on_segment(p, q, r)           q within the bounding box of p-r
    segments_intersect_2d         classic four-orientation test
    point_in_triangle_2d          same-sign half-plane test (edges included)
"""

from typing import Sequence, Tuple

Point2D = Tuple[int, int]

COLLINEAR = 0
CLOCKWISE = 1
COUNTERCLOCKWISE = 2


def orientation(p: Point2D, q: Point2D, r: Point2D) -> int:
    """Turn direction of the path p -> q -> r."""
    val = (q[1] - p[1]) * (r[0] - q[0]) - (q[0] - p[0]) * (r[1] - q[1])
    if val == 0:
        return COLLINEAR
    return CLOCKWISE if val > 0 else COUNTERCLOCKWISE


def on_segment(p: Point2D, q: Point2D, r: Point2D) -> bool:
    """
    True if q lies within the bounding box of segment p-r.

    Only meaningful when p, q, r are already known to be collinear.
    """
    return (min(p[0], r[0]) <= q[0] <= max(p[0], r[0])
            and min(p[1], r[1]) <= q[1] <= max(p[1], r[1]))


def segments_intersect_2d(p1: Point2D, q1: Point2D, p2: Point2D, q2: Point2D) -> bool:
    """True if closed segments p1-q1 and p2-q2 share at least one point."""
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)

    # General case: each segment straddles the other's line
    if o1 != o2 and o3 != o4:
        return True

    # Collinear special cases: an endpoint lies on the other segment
    if o1 == COLLINEAR and on_segment(p1, p2, q1):
        return True
    if o2 == COLLINEAR and on_segment(p1, q2, q1):
        return True
    if o3 == COLLINEAR and on_segment(p2, p1, q2):
        return True
    if o4 == COLLINEAR and on_segment(p2, q1, q2):
        return True

    return False


def _signed_area2(p1: Point2D, p2: Point2D, p3: Point2D) -> int:
    return (p1[0] - p3[0]) * (p2[1] - p3[1]) - (p2[0] - p3[0]) * (p1[1] - p3[1])


def point_in_triangle_2d(pt: Point2D, v1: Point2D, v2: Point2D, v3: Point2D) -> bool:
    """
    True if pt lies inside triangle v1-v2-v3 or on its boundary.

    Works for either winding: the point is outside only when the three
    edge tests disagree in sign.
    """
    d1 = _signed_area2(pt, v1, v2)
    d2 = _signed_area2(pt, v2, v3)
    d3 = _signed_area2(pt, v3, v1)

    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_neg and has_pos)


def dominant_axis(normal: Sequence[int]) -> int:
    """
    Axis (0=x, 1=y, 2=z) along which `normal` is largest in magnitude.

    Ties resolve toward x, then y: y wins only if strictly larger than x,
    z wins only if strictly larger than both.
    """
    ax, ay, az = abs(normal[0]), abs(normal[1]), abs(normal[2])
    axis = 0
    if ay > ax:
        axis = 1
    if az > ax and az > ay:
        axis = 2
    return axis


def project_2d(point: Sequence[int], drop_axis: int) -> Point2D:
    """Drop one coordinate of a 3D point, keeping the other two in order."""
    if drop_axis == 0:
        return (point[1], point[2])
    if drop_axis == 1:
        return (point[0], point[2])
    return (point[0], point[1])
