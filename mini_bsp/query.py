# mini_bsp/query.py
"""
QUERY TRAVERSAL: Which Triangles Does a Segment Touch?
======================================================

PURPOSE:
--------
Walk the BSP tree for one segment and collect the 1-based indices of every
triangle it intersects.

At each node (pre-order):
    1. Test the node's own triangle
    2. Classify both endpoints against the node's plane (+1 / 0 / -1)
    3. Visit FRONT if no endpoint is strictly behind
       Visit BACK  if no endpoint is strictly in front
       Visit BOTH  if the segment straddles the plane (+1 and -1)

A segment lying in the plane (0, 0) visits both children. A segment
strictly on one side never visits the other, which is where the speed-up
over a brute-force scan comes from.

Each call returns a fresh set and merges the children's sets into it, so
there is no accumulator threaded through the recursion.
"""

import logging
from typing import List, Optional, Set

from .bsp import BSPNode, build_bsp, count_nodes, tree_depth
from .intersect import segment_intersects_triangle
from .kernel.vector import classify_point_to_plane
from .model import BSPData, Point, Triangle, segment_endpoints

logger = logging.getLogger(__name__)


def query_bsp(
    node: Optional[BSPNode],
    a: Point,
    b: Point,
    triangles: List[Triangle],
    points: List[Point],
) -> Set[int]:
    """
    Collect 1-based indices of triangles under `node` hit by segment a-b.

    Returns:
    --------
    Set[int]
        Hit indices (a spanning triangle stored twice is reported once)
    """
    if node is None:
        return set()

    result: Set[int] = set()
    if segment_intersects_triangle(a, b, triangles[node.index], points):
        result.add(node.index + 1)

    sa = classify_point_to_plane(node.plane, a)
    sb = classify_point_to_plane(node.plane, b)
    straddles = (sa > 0 and sb < 0) or (sa < 0 and sb > 0)

    if straddles or (sa >= 0 and sb >= 0):
        result |= query_bsp(node.front, a, b, triangles, points)
    if straddles or (sa <= 0 and sb <= 0):
        result |= query_bsp(node.back, a, b, triangles, points)
    return result


def process_segments(data: BSPData, strict: bool = False) -> List[List[int]]:
    """
    Answer every segment of `data` against one shared BSP tree.

    Parameters:
    -----------
    data : BSPData
        Points, triangles and query segments

    strict : bool
        Forwarded to build_bsp (raise on degenerate triangles)

    Returns:
    --------
    List[List[int]]
        One ascending, duplicate-free list of 1-based triangle indices per
        segment, in input segment order

    Raises:
    -------
    InvalidTriangleIndexError
        If any triangle references a vertex outside the point list
    """
    data.validate()
    root = build_bsp(data.triangles, data.points, strict=strict)
    logger.debug(
        "BSP tree built: %d nodes, depth %d, %d triangles; querying %d segments",
        count_nodes(root), tree_depth(root), len(data.triangles), len(data.segments),
    )
    return query_segments(root, data)


def query_segments(root: Optional[BSPNode], data: BSPData) -> List[List[int]]:
    """Run every segment of `data` against an already built tree."""
    results = []
    for segment in data.segments:
        a, b = segment_endpoints(segment)
        results.append(sorted(query_bsp(root, a, b, data.triangles, data.points)))
    return results


def brute_force_segments(data: BSPData) -> List[List[int]]:
    """
    Reference answer: test every triangle against every segment.

    Uses the same intersection predicate as the tree walk, so the two
    must agree whenever the traversal visits every candidate.
    """
    data.validate()
    results = []
    for segment in data.segments:
        a, b = segment_endpoints(segment)
        hits = [
            i + 1 for i, tri in enumerate(data.triangles)
            if segment_intersects_triangle(a, b, tri, data.points)
        ]
        results.append(hits)
    return results
