"""Two dimensional affine transformation matrices."""

from .core.constants import EPSILON
from .core.decomposition import Decomposition
from .core.errors import (
    MatrixError,
    NotInvertibleError,
    DivisionByZeroError,
    UnsupportedDimensionalityError,
)
from .core.matrix import Matrix
from .core.point import Point
from .core.sync import SurfaceSync, StyleSync

__version__ = "1.0.0"

__all__ = [
    "EPSILON",
    "Decomposition",
    "MatrixError",
    "NotInvertibleError",
    "DivisionByZeroError",
    "UnsupportedDimensionalityError",
    "Matrix",
    "Point",
    "SurfaceSync",
    "StyleSync",
]
