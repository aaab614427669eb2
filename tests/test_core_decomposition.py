import math

import pytest

from matrix2d.core.decomposition import decompose_lu, decompose_qr
from matrix2d.core.matrix import Matrix


def test_decompose_qr():
    m = Matrix().translate(10, -5).rotate(0.4).scale(2, 3)
    translate, rotation, scale, skew = decompose_qr(*m.to_list())
    assert translate == (10, -5)
    assert rotation == pytest.approx(0.4)
    assert scale.x == pytest.approx(2)
    assert scale.y == pytest.approx(3)
    assert skew.x == pytest.approx(0, abs=1e-14)
    assert skew.y == 0


def test_decompose_qr_negative_rotation():
    m = Matrix().rotate(-0.5).scale(4, 1)
    result = m.decompose_qr()
    assert result.rotation == pytest.approx(-0.5)
    assert result.scale.x == pytest.approx(4)
    assert result.scale.y == pytest.approx(1)


def test_decompose_qr_skew():
    m = Matrix().skew_x(0.3)
    result = m.decompose_qr()
    assert result.rotation == 0
    assert result.scale == (1, 1)
    assert result.skew.x == pytest.approx(0.3)


def test_decompose_qr_second_column():
    result = decompose_qr(0, 0, 0, 2, 7, 8)
    assert result.translate == (7, 8)
    assert result.rotation == 0
    assert result.scale == (0, 2)
    assert result.skew == (0, 0)


def test_decompose_qr_zero():
    result = decompose_qr(0, 0, 0, 0, 1, 2)
    assert result.translate == (1, 2)
    assert result.rotation == 0
    assert result.scale == (0, 0)
    assert result.skew == (0, 0)


def test_decompose_lu():
    result = decompose_lu(2, 0, 1, 3, 5, 6)
    assert result.translate == (5, 6)
    assert result.rotation == 0
    assert result.scale == (2, 3)
    assert result.skew == (math.atan(0.5), 0)


def test_decompose_lu_pivot_b():
    result = decompose_lu(0, 2, -1, 0, 0, 0)
    assert result.rotation == math.pi * 0.5
    assert result.scale == (2, 1)
    assert result.skew == (0, 0)


def test_decompose_lu_degenerate():
    result = decompose_lu(0, 0, 3, 4, 0, 0)
    assert result.rotation == 0
    assert result.scale == (3, 4)
    assert result.skew == (math.pi * 0.25, 0)
