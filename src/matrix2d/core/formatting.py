import json
import math
from typing import Iterable, List

from .constants import CSV_LINE_END, DEFAULT_PRECISION

__all__ = [
    "format_number",
    "format_fixed",
    "format_csv",
    "format_json",
    "format_css",
    "format_css3d",
]

NAMES: str = "abcdef"


def format_number(value: float) -> str:
    """Format number without trailing fraction for integral values.
    >>> format_number(2.0)
    '2'
    >>> format_number(0.25)
    '0.25'
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return format(int(value))
    return repr(value)


def _numbers(values: Iterable[float]) -> List[str]:
    return [format_number(value) for value in values]


def format_fixed(values: Iterable[float], fix_len: int = DEFAULT_PRECISION) -> str:
    """Pretty format matrix values with fixed number of decimals.
    >>> format_fixed([1, 0, 0, 1, 0, 0], 2)
    'a=1.00 b=0.00 c=0.00 d=1.00 e=0.00 f=0.00'
    """
    return " ".join(f"{name}={value:.{fix_len}f}" for name, value in zip(NAMES, values))


def format_csv(values: Iterable[float]) -> str:
    """Return comma separated values terminated by CR+LF."""
    return ",".join(_numbers(values)) + CSV_LINE_END


def format_json(values: Iterable[float]) -> str:
    return json.dumps(dict(zip(NAMES, values)), separators=(",", ":"))


def format_css(values: Iterable[float]) -> str:
    """Return CSS `matrix()` transform function.
    >>> format_css([1, 0, 0, 1, 10, 20])
    'matrix(1,0,0,1,10,20)'
    """
    return f"matrix({','.join(_numbers(values))})"


def format_css3d(values: Iterable[float]) -> str:
    """Return CSS `matrix3d()` transform function in column-major order."""
    a, b, c, d, e, f = _numbers(values)
    return f"matrix3d({a},{b},0,0,{c},{d},0,0,0,0,1,0,{e},{f},0,1)"
