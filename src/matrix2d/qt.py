"""PyQt5 adapter, converting between matrices and `QTransform`."""

from typing import Any

from PyQt5 import QtGui

from .core.errors import UnsupportedDimensionalityError
from .core.matrix import Matrix
from .core.sync import Sync

__all__ = ["to_qtransform", "from_qtransform", "PainterSync"]


def to_qtransform(matrix: Matrix) -> QtGui.QTransform:
    # QTransform(m11, m12, m21, m22, dx, dy) uses the same row vector layout.
    return QtGui.QTransform(*matrix.to_list())


def from_qtransform(transform: QtGui.QTransform) -> Matrix:
    if not transform.isAffine():
        raise UnsupportedDimensionalityError("Cannot create matrix from projective transform.")
    return Matrix(
        transform.m11(), transform.m12(),
        transform.m21(), transform.m22(),
        transform.dx(), transform.dy()
    )


class PainterSync(Sync):
    """Keep the world transform of a `QPainter` in sync with a matrix."""

    def __init__(self, painter: Any) -> None:
        self.painter = painter

    def __call__(self, matrix: Matrix) -> None:
        self.painter.setTransform(to_qtransform(matrix))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.painter!r})"
