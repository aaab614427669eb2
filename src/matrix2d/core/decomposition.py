"""Decomposition of affine matrices into translate, rotation, scale and skew.

Both strategies are lossy: reflections and degenerate matrices map several
coefficient sets onto the same decomposed values.

See https://en.wikipedia.org/wiki/QR_decomposition and
https://en.wikipedia.org/wiki/LU_decomposition
"""

import math

from typing import NamedTuple

from .point import Point

__all__ = ["Decomposition", "decompose_qr", "decompose_lu"]


class Decomposition(NamedTuple):
    translate: Point
    rotation: float
    scale: Point
    skew: Point


def decompose_qr(a: float, b: float, c: float, d: float, e: float, f: float) -> Decomposition:
    """Return QR-like decomposition of matrix coefficients.

    Pivots on the first column (`a`, `b`) if non-zero, otherwise on the second
    column (`c`, `d`) with the rotation offset by a quarter turn. A matrix
    without linear part decomposes into zero scale.
    """
    determinant = a * d - b * c
    rotation = 0.
    scale = Point(1., 1.)
    skew = Point(0., 0.)

    if a or b:
        r = math.sqrt(a * a + b * b)
        rotation = math.acos(a / r) if b > 0 else -math.acos(a / r)
        scale = Point(r, determinant / r)
        skew = Point(math.atan((a * c + b * d) / (r * r)), 0.)
    elif c or d:
        s = math.sqrt(c * c + d * d)
        rotation = math.pi * 0.5 - (math.acos(-c / s) if d > 0 else -math.acos(c / s))
        scale = Point(determinant / s, s)
        skew = Point(0., math.atan((a * c + b * d) / (s * s)))
    else:
        scale = Point(0., 0.)

    return Decomposition(Point(e, f), rotation, scale, skew)


def decompose_lu(a: float, b: float, c: float, d: float, e: float, f: float) -> Decomposition:
    """Return LU-like decomposition of matrix coefficients.

    Scale and skew are direct ratios of the coefficients. If both `a` and `b`
    are zero the skew is fixed at a quarter of pi.
    """
    determinant = a * d - b * c
    rotation = 0.
    scale = Point(1., 1.)
    skew = Point(0., 0.)

    if a:
        skew = Point(math.atan(c / a), math.atan(b / a))
        scale = Point(a, determinant / a)
    elif b:
        rotation = math.pi * 0.5
        scale = Point(b, determinant / b)
        skew = Point(math.atan(d / b), 0.)
    else:
        scale = Point(c, d)
        skew = Point(math.pi * 0.25, 0.)

    return Decomposition(Point(e, f), rotation, scale, skew)
