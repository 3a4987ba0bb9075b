# mini_bsp/kernel - Exact integer geometry kernel
"""
KERNEL: THE GEOMETRIC FOUNDATION
================================

This package contains the primitives every other module is built on:
- vector.py:  3D integer vector arithmetic, planes, point/plane sidedness
- planar.py:  2D predicates used when a segment lies in a triangle's plane

Nothing here knows about trees or queries. The BSP engine only asks two
kinds of questions: "which side of this plane?" and "do these touch?".
"""

from .vector import (
    subtract, cross, dot, compute_plane, classify_point_to_plane,
    is_degenerate, triangle_vertices, triangle_plane,
)
from .planar import (
    orientation, on_segment, segments_intersect_2d, point_in_triangle_2d,
    dominant_axis, project_2d,
)

__all__ = [
    'subtract', 'cross', 'dot', 'compute_plane', 'classify_point_to_plane',
    'is_degenerate', 'triangle_vertices', 'triangle_plane',
    'orientation', 'on_segment', 'segments_intersect_2d', 'point_in_triangle_2d',
    'dominant_axis', 'project_2d',
]
