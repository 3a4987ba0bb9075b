# tests/conftest.py
"""Shared scenes for the BSP tests."""

import logging

import pytest

from mini_bsp.model import BSPData


SQUARE_TEXT = """4 2 2
0 0 0
2 0 0
2 2 0
0 2 0
1 2 3
1 3 4
1 1 -1 1 1 1
10 10 10 20 20 20
"""


@pytest.fixture
def square_scene() -> BSPData:
    """
    A 2x2 square in the z=0 plane split along its diagonal into two
    triangles, with one vertical segment through the diagonal midpoint
    and one segment far away from everything.
    """
    return BSPData(
        points=[(0, 0, 0), (2, 0, 0), (2, 2, 0), (0, 2, 0)],
        triangles=[(1, 2, 3), (1, 3, 4)],
        segments=[(1, 1, -1, 1, 1, 1), (10, 10, 10, 20, 20, 20)],
    )


@pytest.fixture
def layered_scene() -> BSPData:
    """
    Five triangles around the z=0 plane:

        T1  z=0 at the origin        (first pivot)
        T2  z=0 elsewhere            COPLANAR with T1
        T3  z=2                      FRONT of T1
        T4  z=-2                     BACK of T1
        T5  z from -1 to 1           SPANNING T1's plane
    """
    points = [
        (0, 0, 0), (1, 0, 0), (0, 1, 0),
        (5, 5, 0), (6, 5, 0), (5, 6, 0),
        (0, 0, 2), (1, 0, 2), (0, 1, 2),
        (0, 0, -2), (1, 0, -2), (0, 1, -2),
        (3, 0, -1), (4, 0, 1), (3, 1, 1),
    ]
    triangles = [(1, 2, 3), (4, 5, 6), (7, 8, 9), (10, 11, 12), (13, 14, 15)]
    return BSPData(points=points, triangles=triangles, segments=[])


@pytest.fixture
def square_text() -> str:
    """The square scene in the text input format."""
    return SQUARE_TEXT


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches, so they never outlive a captured stream."""
    yield
    logger = logging.getLogger("mini_bsp")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
