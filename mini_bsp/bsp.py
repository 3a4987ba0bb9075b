# mini_bsp/bsp.py
"""
BSP CONSTRUCTION: Recursive Partitioning of Triangles by Plane
==============================================================

PURPOSE:
--------
Build a Binary Space Partitioning tree over a list of triangles:

    1. Pick a pivot triangle (the FIRST index in the working set)
    2. Its plane splits space into a front and a back half
    3. Classify every other triangle against that plane
    4. Recurse on the front set and on the back set

Each node owns exactly one triangle and its plane. Children are optional;
`None` is an empty half-space.

TIE-BREAK POLICY:
-----------------
    FRONT     -> front set
    BACK      -> back set
    COPLANAR  -> front set   (lies in the plane, either side would do)
    SPANNING  -> BOTH sets   (no clipping; the index is duplicated)

Duplicating spanning triangles keeps the build simple at the cost of a
larger tree. Queries stay correct because a spanning triangle is reachable
from both sides of the plane it crosses.

SHAPE:
------
The pivot is not randomized, so the shape follows input order: O(n) depth
for adversarial input (e.g. a sorted stack of parallel triangles),
O(log n) on average for shuffled input. The tree is never rebalanced.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import DegenerateTriangleError
from .kernel.vector import classify_point_to_plane, is_degenerate, triangle_plane, triangle_vertices
from .model import Plane, Point, Position, Triangle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BSPNode:
    """
    One node of the BSP tree.

    Parameters:
    -----------
    index : int
        0-based position of the partitioning triangle in the triangle list
        (reported to users as index + 1)

    plane : Plane
        Plane of that triangle

    front : Optional[BSPNode]
        Subtree of triangles on the normal side (plus coplanar and spanning)

    back : Optional[BSPNode]
        Subtree of triangles on the opposite side (plus spanning)
    """
    index: int
    plane: Plane
    front: Optional["BSPNode"] = None
    back: Optional["BSPNode"] = None


def classify_triangle(triangle: Triangle, plane: Plane, points: List[Point]) -> Position:
    """
    Classify a triangle against a plane from the sides of its three vertices.

    All vertices on the plane      -> COPLANAR
    None strictly behind           -> FRONT
    None strictly in front         -> BACK
    Some in front, some behind     -> SPANNING
    """
    front = back = 0
    for vertex in triangle_vertices(triangle, points):
        side = classify_point_to_plane(plane, vertex)
        if side > 0:
            front += 1
        elif side < 0:
            back += 1

    if front > 0 and back > 0:
        return Position.SPANNING
    if front > 0:
        return Position.FRONT
    if back > 0:
        return Position.BACK
    return Position.COPLANAR


def build_bsp(
    triangles: List[Triangle],
    points: List[Point],
    indices: Optional[Sequence[int]] = None,
    strict: bool = False,
) -> Optional[BSPNode]:
    """
    Recursively build a BSP tree.

    Parameters:
    -----------
    triangles : List[Triangle]
        All triangles (1-based vertex indices)

    points : List[Point]
        Shared vertex list

    indices : Optional[Sequence[int]]
        0-based triangle positions to partition. Defaults to all of them.

    strict : bool
        If True, a degenerate (zero-area) pivot raises instead of producing
        a zero-normal plane.

    Returns:
    --------
    Optional[BSPNode]
        Root of the tree, or None for an empty working set

    Raises:
    -------
    InvalidTriangleIndexError
        If a triangle references a vertex outside the point list
    DegenerateTriangleError
        In strict mode, if a pivot triangle has a zero normal
    """
    if indices is None:
        indices = range(len(triangles))
    if len(indices) == 0:
        return None

    pivot = indices[0]
    plane = triangle_plane(triangles[pivot], points)
    if is_degenerate(plane):
        if strict:
            raise DegenerateTriangleError(
                f"Triangle {pivot + 1} {tuple(triangles[pivot])} has zero area"
            )
        # Zero normal: every other triangle classifies as COPLANAR
        logger.warning("Degenerate pivot triangle %d; all remaining triangles go front", pivot + 1)

    front: List[int] = []
    back: List[int] = []
    for idx in indices[1:]:
        pos = classify_triangle(triangles[idx], plane, points)
        if pos is Position.FRONT or pos is Position.COPLANAR:
            front.append(idx)
        elif pos is Position.BACK:
            back.append(idx)
        else:
            front.append(idx)
            back.append(idx)

    return BSPNode(
        index=pivot,
        plane=plane,
        front=build_bsp(triangles, points, front, strict),
        back=build_bsp(triangles, points, back, strict),
    )


# =============================================================================
# Tree inspection
# =============================================================================

def iter_nodes(node: Optional[BSPNode], depth: int = 0) -> Iterator[Tuple[BSPNode, int]]:
    """Yield (node, depth) pairs in pre-order, front subtree before back."""
    if node is None:
        return
    yield node, depth
    yield from iter_nodes(node.front, depth + 1)
    yield from iter_nodes(node.back, depth + 1)


def count_nodes(node: Optional[BSPNode]) -> int:
    return sum(1 for _ in iter_nodes(node))


def tree_depth(node: Optional[BSPNode]) -> int:
    """Number of levels in the tree (0 for an empty tree, 1 for a single node)."""
    if node is None:
        return 0
    return 1 + max(tree_depth(node.front), tree_depth(node.back))


def format_tree(node: Optional[BSPNode], start_depth: int = 0) -> str:
    """
    Depth-indented summary of the tree shape.

    Example:
    --------
    >>> print(format_tree(root))
    Node at depth 0: triangle 1 (front=yes, back=no)
      Node at depth 1: triangle 2 (front=no, back=no)
    """
    lines = []
    for n, depth in iter_nodes(node, start_depth):
        indent = "  " * depth
        lines.append(
            f"{indent}Node at depth {depth}: triangle {n.index + 1} "
            f"(front={'yes' if n.front else 'no'}, back={'yes' if n.back else 'no'})"
        )
    return "\n".join(lines)
