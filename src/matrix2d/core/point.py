import numbers
from typing import Any, Mapping, NamedTuple

__all__ = ["Point", "as_point"]


class Point(NamedTuple):
    x: float
    y: float


def as_point(value: Any) -> Point:
    """Return point from an object or mapping with `x` and `y`, or from a pair.

    >>> as_point((1, 2))
    Point(x=1.0, y=2.0)
    """
    if isinstance(value, Point):
        return value
    if isinstance(value, Mapping):
        return Point(float(value["x"]), float(value["y"]))
    if hasattr(value, "x") and hasattr(value, "y"):
        return Point(float(value.x), float(value.y))
    if isinstance(value, numbers.Real):
        raise TypeError(f"not a point: {value!r}")
    x, y = value
    return Point(float(x), float(y))
