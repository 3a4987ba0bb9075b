# mini_bsp/model.py
"""
MODEL DEFINITIONS: Points, Triangles, Segments, Planes
======================================================

PURPOSE:
--------
This module defines the plain data structures shared by the kernel and the
BSP engine:
- Point:    (x, y, z) integer triple, used both as position and as vector
- Triangle: (a, b, c) 1-based indices into the point list
- Segment:  (xa, ya, za, xb, yb, zb) raw endpoint coordinates
- Plane:    anchor point + (unnormalized) integer normal
- Position: where a triangle sits relative to a plane
- BSPData:  the three input collections read from the input stream

WHY INTEGERS?
-------------
All coordinates are integers and Python ints never overflow, so every
plane test (cross product, dot product) is EXACT. There is no epsilon
anywhere: a point is ON a plane only when the dot product is exactly 0.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .errors import InvalidTriangleIndexError


Point = Tuple[int, int, int]
Triangle = Tuple[int, int, int]
Segment = Tuple[int, int, int, int, int, int]


def segment_endpoints(segment: Segment) -> Tuple[Point, Point]:
    """Split a 6-tuple segment into its (start, end) points."""
    xa, ya, za, xb, yb, zb = segment
    return (xa, ya, za), (xb, yb, zb)


@dataclass(frozen=True)
class Plane:
    """
    A plane through `point` with normal `normal`.

    The normal is the raw cross product of two triangle edges, so its
    length is twice the triangle area and its direction follows the
    winding order (a, b, c). A zero normal marks a degenerate triangle.
    Anti-parallel normals through the same point describe the same
    geometric plane; no canonicalization is done.
    """
    point: Point
    normal: Point


class Position(Enum):
    """Classification of a triangle against a plane."""
    FRONT = "front"
    BACK = "back"
    COPLANAR = "coplanar"
    SPANNING = "spanning"


@dataclass
class BSPData:
    """
    The three input collections.

    Parameters:
    -----------
    points : List[Point]
        Vertex coordinates. Triangles refer to them with 1-based indices.

    triangles : List[Triangle]
        Vertex index triples (1-based).

    segments : List[Segment]
        Query segments as (xa, ya, za, xb, yb, zb).

    Examples:
    ---------
    >>> data = BSPData(points=[(0, 0, 0), (1, 0, 0), (0, 1, 0)],
    ...                triangles=[(1, 2, 3)],
    ...                segments=[(0, 0, -1, 0, 0, 1)])
    >>> data.validate()
    """
    points: List[Point] = field(default_factory=list)
    triangles: List[Triangle] = field(default_factory=list)
    segments: List[Segment] = field(default_factory=list)

    def validate(self) -> None:
        """
        Check every triangle index against the point list.

        Raises:
            InvalidTriangleIndexError: on the first out-of-range vertex index
        """
        n = len(self.points)
        for t_idx, tri in enumerate(self.triangles):
            for v in tri:
                if not 1 <= v <= n:
                    raise InvalidTriangleIndexError(
                        f"Triangle {t_idx + 1} references vertex {v}, "
                        f"valid range is [1, {n}]"
                    )

    def bounding_box(self) -> Optional[Tuple[Point, Point]]:
        """Axis-aligned (min, max) corners of all points, or None if empty."""
        if not self.points:
            return None
        arr = np.asarray(self.points, dtype=np.int64)
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return tuple(int(v) for v in lo), tuple(int(v) for v in hi)

    # ------------------------------------------------------------------
    # Diagnostic dumps
    # ------------------------------------------------------------------

    def format_points(self) -> str:
        lines = [f"Points (count: {len(self.points)}):"]
        for x, y, z in self.points:
            lines.append(f"  ({x}, {y}, {z})")
        return "\n".join(lines)

    def format_triangles(self) -> str:
        lines = [f"Triangles (count: {len(self.triangles)}):"]
        for a, b, c in self.triangles:
            lines.append(f"  [{a}, {b}, {c}]")
        return "\n".join(lines)

    def format_segments(self) -> str:
        lines = [f"Segments (count: {len(self.segments)}):"]
        for xa, ya, za, xb, yb, zb in self.segments:
            lines.append(f"  ({xa}, {ya}, {za}) -> ({xb}, {yb}, {zb})")
        return "\n".join(lines)
