"""
Protocol definitions for matrix3d interfaces.

Defines the surfaces that code consuming composed transforms can rely on
without depending on TransformComposer itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import numpy as np

    from matrix3d.types import AngleLike


@runtime_checkable
class MatrixProvider(Protocol):
    """Protocol for objects that produce a composed 4x4 matrix."""

    def compose(self) -> np.ndarray:
        """Return the composed matrix in column-major layout."""
        ...

    def serialize(self) -> str:
        """Return the composed matrix as a CSS ``matrix3d()`` value."""
        ...


@runtime_checkable
class TransformBuilder(Protocol):
    """Protocol for chainable transform builders."""

    def perspective(self, distance: float | None = None) -> TransformBuilder:
        """Set perspective."""
        ...

    def rotate3d(
        self,
        x: float | None = None,
        y: float | None = None,
        z: float | None = None,
        angle: AngleLike | None = None,
    ) -> TransformBuilder:
        """Set rotation about an axis."""
        ...

    def scale3d(
        self, x: float | None = None, y: float | None = None, z: float | None = None
    ) -> TransformBuilder:
        """Set scaling."""
        ...

    def skew(self, x: AngleLike | None = None, y: AngleLike | None = None) -> TransformBuilder:
        """Set skew."""
        ...

    def translate3d(
        self, x: float | None = None, y: float | None = None, z: float | None = None
    ) -> TransformBuilder:
        """Set translation."""
        ...

    def reset(self) -> TransformBuilder:
        """Reset all slots."""
        ...
