import numbers
from typing import Any, Mapping, Sequence, Tuple

import numpy as np

from .point import as_point

__all__ = ["Coefficients", "triangle_vertices", "triangle_basis"]

Coefficients = Tuple[float, float, float, float, float, float]

VERTEX_KEYS: Tuple[str, ...] = ("px", "py", "qx", "qy", "rx", "ry")


def triangle_vertices(triangle: Any) -> Coefficients:
    """Return flat vertex coordinates `(px, py, qx, qy, rx, ry)` of a triangle.

    A triangle is either a flat sequence of six numbers, a sequence of three
    points, an array of shape (6,) or (3, 2), or a mapping or object providing
    `px`, `py`, `qx`, `qy`, `rx` and `ry`.
    """
    if isinstance(triangle, Mapping):
        return tuple(float(triangle[key]) for key in VERTEX_KEYS)  # type: ignore
    if isinstance(triangle, np.ndarray):
        vertices = np.asarray(triangle, dtype=np.float64)
        if vertices.shape not in ((6,), (3, 2)):
            raise ValueError(f"invalid triangle shape: {vertices.shape}")
        return tuple(vertices.ravel().tolist())  # type: ignore
    if isinstance(triangle, Sequence) and not isinstance(triangle, str):
        if len(triangle) == 6 and all(isinstance(value, numbers.Real) for value in triangle):
            return tuple(float(value) for value in triangle)  # type: ignore
        if len(triangle) == 3:
            p, q, r = (as_point(vertex) for vertex in triangle)
            return p.x, p.y, q.x, q.y, r.x, r.y
        raise ValueError(f"invalid triangle: {triangle!r}")
    return tuple(float(getattr(triangle, key)) for key in VERTEX_KEYS)  # type: ignore


def triangle_basis(triangle: Any) -> Coefficients:
    """Return matrix coefficients spanned by the triangle edges towards its
    third vertex, translated to that vertex.
    """
    px, py, qx, qy, rx, ry = triangle_vertices(triangle)
    return px - rx, py - ry, qx - rx, qy - ry, rx, ry
