# mini_bsp/errors.py
"""Exceptions raised by the geometry kernel and the BSP engine."""


class InvalidTriangleIndexError(IndexError):
    """Raised when a triangle references a vertex outside [1, n_points]."""
    pass


class DegenerateTriangleError(ValueError):
    """Raised in strict mode when a triangle has collinear or repeated vertices."""
    pass


class InputFormatError(ValueError):
    """Raised when the input stream cannot be parsed into points/triangles/segments."""
    pass
