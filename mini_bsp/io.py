# mini_bsp/io.py
"""
TEXT I/O: Reading Scenes, Writing Results
=========================================

INPUT FORMAT (whitespace separated integers):
---------------------------------------------
    n t l                       counts: points, triangles, segments
    x y z           (n times)   point coordinates
    a b c           (t times)   1-based vertex indices
    xa ya za xb yb zb (l times) segment endpoints

Line breaks carry no meaning; only the token order does.

OUTPUT FORMAT:
--------------
One line per segment: the number of intersected triangles followed by
their ascending 1-based indices, e.g. "2 1 2" or "0".
"""

from typing import List, Optional, TextIO

import numpy as np

from .bsp import BSPNode, format_tree
from .errors import InputFormatError
from .model import BSPData


def parse_input(text: str) -> BSPData:
    """
    Parse the whole input text into a BSPData.

    Raises:
        InputFormatError: on non-integer tokens, negative counts or
            a stream that ends early
    """
    tokens = text.split()
    if len(tokens) < 3:
        raise InputFormatError(f"Expected 3 header counts, got {len(tokens)} tokens")
    try:
        values = np.array(tokens, dtype=np.int64)
    except (ValueError, OverflowError) as e:
        raise InputFormatError(f"Input contains a non-integer token: {e}") from e

    n, t, l = (int(v) for v in values[:3])
    if n < 0 or t < 0 or l < 0:
        raise InputFormatError(f"Counts must be non-negative, got n={n}, t={t}, l={l}")

    needed = 3 + 3 * n + 3 * t + 6 * l
    if len(values) < needed:
        raise InputFormatError(
            f"Input ended early: header promises {needed - 3} values, found {len(values) - 3}"
        )

    pos = 3
    points = [tuple(row) for row in values[pos:pos + 3 * n].reshape(n, 3).tolist()]
    pos += 3 * n
    triangles = [tuple(row) for row in values[pos:pos + 3 * t].reshape(t, 3).tolist()]
    pos += 3 * t
    segments = [tuple(row) for row in values[pos:pos + 6 * l].reshape(l, 6).tolist()]

    return BSPData(points=points, triangles=triangles, segments=segments)


def read_input(stream: TextIO) -> BSPData:
    return parse_input(stream.read())


def format_result_line(hits: List[int]) -> str:
    return " ".join(str(v) for v in [len(hits), *hits])


def format_results(results: List[List[int]]) -> str:
    """Render all per-segment results, one line each."""
    return "\n".join(format_result_line(hits) for hits in results)


def format_diagnostics(data: BSPData, root: Optional[BSPNode] = None, start_depth: int = 0) -> str:
    """Verbose dump: points, triangles, segments, and the tree shape if given."""
    parts = [data.format_points(), data.format_triangles(), data.format_segments()]
    if root is not None:
        parts.append("BSP tree:")
        parts.append(format_tree(root, start_depth))
    return "\n".join(parts)
