# mini_bsp - BSP trees over 3D triangles with segment queries
"""
MINI-BSP: Binary Space Partitioning for Segment/Triangle Queries
================================================================

This package provides:
- An exact integer geometry kernel (planes, sidedness, 2D predicates)
- BSP tree construction over indexed triangles
- Segment queries: which triangles does a segment touch?

ARCHITECTURE:
-------------
    kernel/         Integer vector math and 2D predicates
    model.py        Point/Triangle/Segment, Plane, Position, BSPData
    bsp.py          Tree construction and inspection
    intersect.py    Segment-triangle intersection test
    query.py        Tree walk and per-segment processing
    io.py           Text input parsing and result formatting
    cli.py          Command line entry point (python -m mini_bsp)
    viz.py          Plotly scene view
"""

from .errors import InvalidTriangleIndexError, DegenerateTriangleError, InputFormatError
from .model import BSPData, Plane, Position
from .bsp import BSPNode, build_bsp, classify_triangle
from .intersect import segment_intersects_triangle
from .query import query_bsp, process_segments

__version__ = "0.1.0"

__all__ = [
    'BSPData', 'Plane', 'Position', 'BSPNode',
    'build_bsp', 'classify_triangle', 'segment_intersects_triangle',
    'query_bsp', 'process_segments',
    'InvalidTriangleIndexError', 'DegenerateTriangleError', 'InputFormatError',
    '__version__',
]
