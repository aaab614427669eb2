__all__ = [
    "MatrixError",
    "NotInvertibleError",
    "DivisionByZeroError",
    "UnsupportedDimensionalityError",
]


class MatrixError(Exception):
    """Base class for all matrix errors."""


class NotInvertibleError(MatrixError, ValueError):
    """Raised if the determinant of a matrix is (close to) zero."""


class DivisionByZeroError(MatrixError, ZeroDivisionError):
    """Raised on division of a matrix by scalar zero."""


class UnsupportedDimensionalityError(MatrixError, ValueError):
    """Raised if a matrix-like source object is flagged as three dimensional."""
