import pytest

pytest.importorskip("PyQt5")

from PyQt5 import QtGui

from matrix2d.core.errors import UnsupportedDimensionalityError
from matrix2d.core.matrix import Matrix
from matrix2d.qt import PainterSync, from_qtransform, to_qtransform


class FakePainter:

    def __init__(self):
        self.transforms = []

    def setTransform(self, transform):
        self.transforms.append(transform)


def test_to_qtransform():
    t = to_qtransform(Matrix(1, 2, 3, 4, 5, 6))
    assert (t.m11(), t.m12(), t.m21(), t.m22(), t.dx(), t.dy()) == (1, 2, 3, 4, 5, 6)
    assert t.map(1., 1.) == (9, 12)
    assert Matrix(1, 2, 3, 4, 5, 6).apply_to_point(1, 1) == (9, 12)


def test_from_qtransform():
    t = QtGui.QTransform().translate(10, 20).rotate(90)
    m = from_qtransform(t)
    assert m.to_list() == [0, 1, -1, 0, 10, 20]
    assert m == Matrix().translate(10, 20).rotate_deg(90)
    assert to_qtransform(m) == t


def test_from_qtransform_projective():
    t = QtGui.QTransform(1, 0, 0.5, 0, 1, 0, 0, 0, 1)
    with pytest.raises(UnsupportedDimensionalityError):
        from_qtransform(t)


def test_painter_sync():
    painter = FakePainter()
    m = Matrix()
    PainterSync(painter).attach(m)
    m.translate(3, 4)
    assert len(painter.transforms) == 2
    assert painter.transforms[-1] == QtGui.QTransform(1, 0, 0, 1, 3, 4)
