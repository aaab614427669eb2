"""Two dimensional affine transformation matrix.

The six coefficients represent the homogeneous matrix

    | a  c  e |
    | b  d  f |
    | 0  0  1 |

applied to column vectors `[x, y, 1]`. Accumulative operations multiply the
current matrix from the right, so transformations applied later in a chain
act in the coordinate frame established by the earlier ones.
"""

import logging
import math
import numbers
from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

import numpy as np

from .constants import DEFAULT_PRECISION, EPSILON
from .decomposition import Decomposition, decompose_lu, decompose_qr
from .errors import DivisionByZeroError, NotInvertibleError, UnsupportedDimensionalityError
from .event import Event
from .formatting import format_css, format_css3d, format_csv, format_fixed, format_json
from .point import Point, as_point
from .triangles import Coefficients, triangle_basis

__all__ = ["Matrix", "coefficients"]

logger = logging.getLogger(__name__)


def coefficients(obj: Any) -> Coefficients:
    """Return coefficients `a` to `f` of a matrix-like object."""
    return (
        float(obj.a), float(obj.b), float(obj.c),
        float(obj.d), float(obj.e), float(obj.f)
    )


def is_equal(f1: float, f2: float) -> bool:
    return abs(f1 - f2) < EPSILON


class Matrix:
    """Affine 2D transformation matrix, initialized as identity matrix.

    Listeners added to `changed`, or passed as `listeners`, are called with the
    matrix after every mutation of its coefficients. Listeners passed to the
    constructor are called once with the initial coefficients.

    >>> Matrix().translate(10, 20).apply_to_point(1, 2)
    Point(x=11.0, y=22.0)
    """

    __slots__ = ["a", "b", "c", "d", "e", "f", "changed"]

    def __init__(self, a: float = 1., b: float = 0., c: float = 0.,
                 d: float = 1., e: float = 0., f: float = 0., *,
                 listeners: Iterable[Callable] = ()) -> None:
        self.a: float = float(a)
        self.b: float = float(b)
        self.c: float = float(c)
        self.d: float = float(d)
        self.e: float = float(e)
        self.f: float = float(f)
        self.changed: Event = Event()
        for listener in listeners:
            self.changed.add(listener)
        if len(self.changed):
            self._notify()

    # Named constructors

    @classmethod
    def from_values(cls, a: float, b: float, c: float, d: float, e: float, f: float) -> "Matrix":
        return cls(a, b, c, d, e, f)

    @classmethod
    def from_matrix(cls, obj: Any) -> "Matrix":
        """Create matrix from any object providing attributes `a` to `f`.

        Objects flagged as three dimensional (`is2D` or `is_2d` being `False`)
        are rejected.
        """
        for name in ("is2D", "is_2d"):
            flag = getattr(obj, name, None)
            if isinstance(flag, bool) and not flag:
                raise UnsupportedDimensionalityError(f"Cannot create matrix from 3D matrix: {obj!r}")
        return cls(*coefficients(obj))

    @classmethod
    def from_transform_list(cls, items: Iterable[Any]) -> "Matrix":
        """Create matrix by multiplying a list of transforms in list order.

        Items are either matrix-like or provide a matrix-like `matrix`
        attribute, like the items of an SVG transform list.
        """
        matrix = cls()
        for item in items:
            matrix.multiply(getattr(item, "matrix", item))
        return matrix

    @classmethod
    def from_triangles(cls, t1: Any, t2: Any) -> "Matrix":
        """Return matrix transforming triangle `t1` into triangle `t2`.

        Raises `NotInvertibleError` if `t1` is degenerate.
        """
        m1 = cls(*triangle_basis(t1))
        m2 = cls(*triangle_basis(t2))
        logger.debug("Fitting triangle basis %r onto %r", m1, m2)
        return m2.multiply(m1.inverse())

    @classmethod
    def from_vector(cls, vector: Any, tx: float = 0., ty: float = 0., do_scale: bool = False) -> "Matrix":
        """Create matrix translated by (`tx`, `ty`) and rotated towards `vector`.

        The length of the vector is either applied as uniform scale
        (`do_scale`) or as translation along the rotated x-axis.
        """
        v = as_point(vector)
        q = math.hypot(v.x, v.y)
        scale = q if do_scale else 1.
        distance = 1. if do_scale else q
        return (
            cls()
            .translate(tx, ty)
            .rotate_from_vector(v)
            .scale_u(scale)
            .translate(distance, 0.)
        )

    @classmethod
    def from_numpy(cls, array: Any) -> "Matrix":
        """Create matrix from a 2x3 or homogeneous 3x3 array."""
        m = np.asarray(array, dtype=np.float64)
        if m.shape not in ((2, 3), (3, 3)):
            raise ValueError(f"invalid matrix shape: {m.shape}")
        if m.shape == (3, 3) and not np.array_equal(m[2], [0., 0., 1.]):
            raise UnsupportedDimensionalityError(f"not an affine matrix: {m[2].tolist()}")
        return cls(m[0, 0], m[1, 0], m[0, 1], m[1, 1], m[0, 2], m[1, 2])

    # Absolute transforms

    def set_transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> "Matrix":
        """Replace current matrix by absolute values."""
        self.a = float(a)
        self.b = float(b)
        self.c = float(c)
        self.d = float(d)
        self.e = float(e)
        self.f = float(f)
        return self._notify()

    def reset(self) -> "Matrix":
        return self.set_transform(1., 0., 0., 1., 0., 0.)

    def transform(self, a2: float, b2: float, c2: float, d2: float, e2: float, f2: float) -> "Matrix":
        """Multiply current matrix (left) with matrix values (right)."""
        a1, b1, c1, d1, e1, f1 = self.a, self.b, self.c, self.d, self.e, self.f
        self.a = a1 * a2 + c1 * b2
        self.b = b1 * a2 + d1 * b2
        self.c = a1 * c2 + c1 * d2
        self.d = b1 * c2 + d1 * d2
        self.e = a1 * e2 + c1 * f2 + e1
        self.f = b1 * e2 + d1 * f2 + f1
        return self._notify()

    def multiply(self, other: Any) -> "Matrix":
        """Multiply current matrix with matrix-like object `other`."""
        return self.transform(*coefficients(other))

    def concat(self, child: Any) -> "Matrix":
        """Return new matrix of this matrix multiplied with `child`."""
        return self.clone().multiply(child)

    def __matmul__(self, other: Any) -> "Matrix":
        return self.concat(other)

    def divide(self, other: "Matrix") -> "Matrix":
        """Multiply current matrix with the inverse of `other`."""
        return self.multiply(other.inverse())

    def divide_scalar(self, d: float) -> "Matrix":
        if d == 0:
            raise DivisionByZeroError("Division by zero")
        self.a /= d
        self.b /= d
        self.c /= d
        self.d /= d
        self.e /= d
        self.f /= d
        return self._notify()

    # Accumulative transforms

    def translate(self, tx: float, ty: float) -> "Matrix":
        return self.transform(1., 0., 0., 1., tx, ty)

    def translate_x(self, tx: float) -> "Matrix":
        return self.transform(1., 0., 0., 1., tx, 0.)

    def translate_y(self, ty: float) -> "Matrix":
        return self.transform(1., 0., 0., 1., 0., ty)

    def rotate(self, angle: float) -> "Matrix":
        """Rotate by `angle` in radians."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        return self.transform(cos, sin, -sin, cos, 0., 0.)

    def rotate_deg(self, angle: float) -> "Matrix":
        return self.rotate(math.radians(angle))

    def rotate_from_vector(self, x: Any, y: Optional[float] = None) -> "Matrix":
        """Rotate by the angle of vector (`x`, `y`).

        Argument `x` can also be a point, in which case `y` is ignored.
        """
        if y is None:
            x, y = as_point(x)
        return self.rotate(math.atan2(y, x))

    def scale(self, sx: float, sy: float) -> "Matrix":
        return self.transform(sx, 0., 0., sy, 0., 0.)

    def scale_u(self, f: float) -> "Matrix":
        """Scale uniformly by factor `f`."""
        return self.transform(f, 0., 0., f, 0., 0.)

    def scale_x(self, sx: float) -> "Matrix":
        return self.transform(sx, 0., 0., 1., 0., 0.)

    def scale_y(self, sy: float) -> "Matrix":
        return self.transform(1., 0., 0., sy, 0., 0.)

    def scale_from_vector(self, x: float, y: float) -> "Matrix":
        """Scale uniformly by the length of vector (`x`, `y`)."""
        return self.scale_u(math.hypot(x, y))

    def shear(self, sx: float, sy: float) -> "Matrix":
        return self.transform(1., sy, sx, 1., 0., 0.)

    def shear_x(self, sx: float) -> "Matrix":
        return self.transform(1., 0., sx, 1., 0., 0.)

    def shear_y(self, sy: float) -> "Matrix":
        return self.transform(1., sy, 0., 1., 0., 0.)

    def skew(self, ax: float, ay: float) -> "Matrix":
        """Skew by angles in radians."""
        return self.shear(math.tan(ax), math.tan(ay))

    def skew_deg(self, ax: float, ay: float) -> "Matrix":
        return self.skew(math.radians(ax), math.radians(ay))

    def skew_x(self, ax: float) -> "Matrix":
        return self.shear_x(math.tan(ax))

    def skew_y(self, ay: float) -> "Matrix":
        return self.shear_y(math.tan(ay))

    def flip_x(self) -> "Matrix":
        return self.transform(-1., 0., 0., 1., 0., 0.)

    def flip_y(self) -> "Matrix":
        return self.transform(1., 0., 0., -1., 0., 0.)

    # Derived matrices

    def inverse(self, keep_listeners: bool = False) -> "Matrix":
        """Return new inverse matrix.

        The returned matrix is only subscribed to the listeners of this matrix
        if `keep_listeners` is set. Raises `NotInvertibleError` for singular
        matrices.
        """
        dt = self.determinant()
        if is_equal(dt, 0.):
            logger.debug("Matrix not invertible: %r, determinant=%e", self, dt)
            raise NotInvertibleError(f"Matrix is not invertible: {self!r}")
        m = type(self)(
            self.d / dt,
            -self.b / dt,
            -self.c / dt,
            self.a / dt,
            (self.c * self.f - self.d * self.e) / dt,
            -(self.a * self.f - self.b * self.e) / dt
        )
        if keep_listeners:
            m.changed = self.changed.copy()
        return m

    def clone(self, keep_listeners: bool = False) -> "Matrix":
        m = type(self)(*self.to_list())
        if keep_listeners:
            m.changed = self.changed.copy()
        return m

    def interpolate(self, other: Any, t: float) -> "Matrix":
        """Return new matrix interpolated coefficient-wise towards `other`.

        `t` is not clamped. This interpolation is naive: for animations
        involving rotation use `interpolate_anim()` to avoid flipping.
        """
        return type(self)(*[
            v2 if t == 1 else v1 + (v2 - v1) * t
            for v1, v2 in zip(self.to_list(), coefficients(other))
        ])

    def interpolate_anim(self, other: "Matrix", t: float) -> "Matrix":
        """Return new matrix interpolated via QR decomposition of both matrices.

        Translation, rotation angle and scale are interpolated independently
        and recomposed in that order, which keeps rotations from flipping. The
        skew component is not interpolated.
        """
        d1 = self.decompose_qr()
        d2 = other.decompose_qr()
        t1, t2 = d1.translate, d2.translate
        s1, s2 = d1.scale, d2.scale
        return (
            type(self)()
            .translate(t1.x + (t2.x - t1.x) * t, t1.y + (t2.y - t1.y) * t)
            .rotate(d1.rotation + (d2.rotation - d1.rotation) * t)
            .scale(s1.x + (s2.x - s1.x) * t, s1.y + (s2.y - s1.y) * t)
        )

    # Properties

    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def decompose_qr(self) -> Decomposition:
        return decompose_qr(*self.to_list())

    def decompose_lu(self) -> Decomposition:
        return decompose_lu(*self.to_list())

    def decompose(self, use_lu: bool = False) -> Decomposition:
        return self.decompose_lu() if use_lu else self.decompose_qr()

    def is_identity(self) -> bool:
        return (self.a, self.b, self.c, self.d, self.e, self.f) == (1., 0., 0., 1., 0., 0.)

    def is_invertible(self) -> bool:
        return not is_equal(self.determinant(), 0.)

    def is_valid(self) -> bool:
        """Return False if a scale axis collapsed to zero (`a * d == 0`)."""
        return self.a * self.d != 0

    def is_equal(self, other: Any) -> bool:
        """Return True if coefficients of `other` match within tolerance."""
        return all(is_equal(v1, v2) for v1, v2 in zip(self.to_list(), coefficients(other)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.is_equal(other)

    __hash__ = None  # type: ignore

    # Points

    def apply_to_point(self, x: float, y: float) -> Point:
        return Point(
            x * self.a + y * self.c + self.e,
            x * self.b + y * self.d + self.f
        )

    def apply_to_array(self, points: Sequence[Any]) -> List[Any]:
        """Return transformed points in the same format as `points`.

        Accepts either a flat sequence `[x1, y1, x2, y2, ...]` or a sequence of
        points.
        """
        if len(points) == 0:
            return []
        if isinstance(points[0], numbers.Real):
            if len(points) % 2:
                raise ValueError(f"odd number of coordinates: {len(points)}")
            result: List[float] = []
            for i in range(0, len(points), 2):
                result.extend(self.apply_to_point(points[i], points[i + 1]))
            return result
        return [self.apply_to_point(*as_point(point)) for point in points]

    def apply_to_typed_array(self, points: Union[Sequence[float], np.ndarray], use64: bool = False) -> np.ndarray:
        """Return transformed point pairs as flat `float32` (or `float64`) array."""
        buffer = np.asarray(points, dtype=np.float64).ravel()
        if buffer.size % 2:
            raise ValueError(f"odd number of coordinates: {buffer.size}")
        x = buffer[0::2]
        y = buffer[1::2]
        result = np.empty_like(buffer)
        result[0::2] = x * self.a + y * self.c + self.e
        result[1::2] = x * self.b + y * self.d + self.f
        return result.astype(np.float64 if use64 else np.float32)

    def reflect_vector(self, x: float, y: float) -> Point:
        """Reflect incoming vector (`x`, `y`) on the transformed y-axis."""
        nx, ny = self.c, self.d
        d = (nx * x + ny * y) * 2.
        return Point(x - d * nx, y - d * ny)

    def apply_to_object(self, obj: Any) -> "Matrix":
        """Write coefficients `a` to `f` onto `obj`."""
        obj.a, obj.b, obj.c, obj.d, obj.e, obj.f = self.to_list()
        return self

    # Export

    def to_list(self) -> List[float]:
        return [self.a, self.b, self.c, self.d, self.e, self.f]

    def to_typed_array(self) -> np.ndarray:
        return np.array(self.to_list(), dtype=np.float32)

    def to_numpy(self) -> np.ndarray:
        """Return homogeneous 3x3 matrix."""
        return np.array([
            [self.a, self.c, self.e],
            [self.b, self.d, self.f],
            [0., 0., 1.]
        ], dtype=np.float64)

    def to_string(self, fix_len: int = DEFAULT_PRECISION) -> str:
        return format_fixed(self.to_list(), fix_len)

    def to_csv(self) -> str:
        return format_csv(self.to_list())

    def to_json(self) -> str:
        return format_json(self.to_list())

    def to_css(self) -> str:
        return format_css(self.to_list())

    def to_css3d(self) -> str:
        return format_css3d(self.to_list())

    def __iter__(self):
        return iter(self.to_list())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        args = ", ".join(repr(value) for value in self.to_list())
        return f"{type(self).__name__}({args})"

    def _notify(self) -> "Matrix":
        self.changed(self)
        return self
