"""Synchronize matrices with drawing surfaces and style properties.

A sync object is a listener of `Matrix.changed`: once attached it pushes the
absolute transform of the matrix on every mutation.
"""

import logging
from typing import Any, MutableMapping

from .matrix import Matrix

__all__ = ["Sync", "SurfaceSync", "StyleSync"]

logger = logging.getLogger(__name__)


class Sync:

    def attach(self, matrix: Matrix) -> Matrix:
        """Subscribe to matrix changes and push current transform."""
        logger.debug("Attaching %r to %r", self, matrix)
        matrix.changed.add(self)
        self(matrix)
        return matrix

    def detach(self, matrix: Matrix) -> Matrix:
        logger.debug("Detaching %r from %r", self, matrix)
        matrix.changed.remove(self)
        return matrix

    def __call__(self, matrix: Matrix) -> None:
        raise NotImplementedError()


class SurfaceSync(Sync):
    """Push transforms to a surface providing `set_transform(a, b, c, d, e, f)`."""

    def __init__(self, surface: Any) -> None:
        self.surface = surface

    def __call__(self, matrix: Matrix) -> None:
        self.surface.set_transform(*matrix.to_list())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.surface!r})"


class StyleSync(Sync):
    """Write CSS transform functions into a style mapping."""

    def __init__(self, style: MutableMapping[str, str], use_3d: bool = False, prop: str = "transform") -> None:
        self.style = style
        self.use_3d = use_3d
        self.prop = prop

    def __call__(self, matrix: Matrix) -> None:
        self.style[self.prop] = matrix.to_css3d() if self.use_3d else matrix.to_css()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prop={self.prop!r}, use_3d={self.use_3d!r})"
