"""
TransformComposer: CSS-style transform functions composed into one 4x4 matrix.

Each transform function fills one named slot (perspective, translate, rotate,
skew, scale). Calling a function again replaces its slot rather than
accumulating. ``compose()`` multiplies the slots onto the base matrix in a
fixed order and returns the result in column-major layout.

Example:
    >>> composer = (TransformComposer()
    ...     .perspective(500)
    ...     .translate3d(10, 20, 0)
    ...     .rotate("45deg")
    ...     .scale(2, 2)
    ... )
    >>> composer.serialize()  # "matrix3d(...)" for a CSS transform property
"""

from __future__ import annotations

import logging
import math
from copy import deepcopy
from decimal import Decimal
from typing import Self

import numpy as np

from matrix3d.config import CONFIG
from matrix3d.constants import COMPOSE_ORDER, CSS_FUNCTION
from matrix3d.shared.angles import to_radians
from matrix3d.shared.matrix import as_matrix, flip, identity, multiply, to3d
from matrix3d.transform import elementary
from matrix3d.transform.state import TransformState
from matrix3d.types import AngleLike, Matrix4x4
from matrix3d.validators import validate_angle, validate_number, validate_shape

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Format a matrix entry the way JavaScript converts numbers to strings.

    Uses the shortest round-tripping digits. Plain decimal notation is used
    for magnitudes in ``[1e-6, 1e21)``, exponent notation otherwise, with an
    unpadded, explicitly signed exponent (``1e-7``, ``1.5e+21``). ``-0.0``
    gives ``"0"``.

    :param value: Matrix entry
    :returns: Number literal
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple))
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    # value == 0.<digits> * 10**point
    k = len(digits)
    point = k + exponent
    if k <= point <= 21:
        body = digits + "0" * (point - k)
    elif 0 < point <= 21:
        body = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        e = point - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


class TransformComposer:
    """
    Composable 3D transform built from independently settable slots.

    Slots and the functions that fill them:
    - perspective: perspective
    - translate: translate3d, translate, translate_x, translate_y, translate_z
    - rotate: rotate3d, rotate, rotate_x, rotate_y, rotate_z
    - skew: skew, skew_x, skew_y
    - scale: scale3d, scale, scale_x, scale_y, scale_z

    Composition order: base, perspective, translate, rotate, skew, scale,
    followed by a single flip into column-major layout.

    Omitted arguments take the neutral value of their operation (0 for
    offsets and angles, 1 for scale factors). Angles are radians when given
    as numbers, or strings such as ``"90deg"`` / ``"1.5rad"``, or
    ``Radians`` / ``Degrees`` instances.
    """

    __slots__ = ("validate_arguments", "strict_shape", "_state")

    def __init__(
        self,
        data: Matrix4x4 | None = None,
        *,
        validate_arguments: bool | None = None,
        strict_shape: bool | None = None,
    ):
        """
        Initialize the composer with all slots at identity.

        :param data: Optional base matrix, validated as in :meth:`set_base`
        :param validate_arguments: Type-check setter arguments (default: CONFIG)
        :param strict_shape: Also check base-matrix row lengths (default: CONFIG)
        :raises ShapeError: If data does not have four rows
        :raises TypeArgumentError: If data is not a sequence
        """
        self.validate_arguments = (
            CONFIG.validate_arguments if validate_arguments is None else validate_arguments
        )
        self.strict_shape = CONFIG.strict_shape if strict_shape is None else strict_shape
        self._state = TransformState()

        if data is not None:
            self.set_base(data)

    # ========================================================================
    # Base Matrix
    # ========================================================================

    def set_base(self, data: Matrix4x4) -> None:
        """
        Replace the base matrix.

        Only the number of rows is checked unless ``strict_shape`` is set.
        A base that is not truly 4x4 fails later, when composed.

        :param data: 4x4 matrix (nested sequences or array)
        :raises ShapeError: If data does not have four rows
        :raises TypeArgumentError: If data is not a sequence
        """
        validate_shape(data, strict=self.strict_shape)
        self._state.base = as_matrix(data) if self.strict_shape else deepcopy(data)
        logger.debug("[TransformComposer] Base matrix replaced")

    @property
    def base(self) -> Matrix4x4:
        """Copy of the base matrix."""
        return deepcopy(self._state.base)

    @property
    def state(self) -> TransformState:
        """Copy of the current base and slots."""
        return self._state.copy()

    # ========================================================================
    # Perspective
    # ========================================================================

    @validate_number("distance")
    def perspective(self, distance: float | None = None) -> Self:
        """
        Set the perspective slot.

        :param distance: Distance to the viewer (0 = no perspective)
        :return: Self for method chaining
        """
        distance = CONFIG.perspective_distance.resolve(distance)
        self._state.perspective = elementary.perspective(distance)
        logger.debug("[TransformComposer] perspective(%s)", distance)
        return self

    # ========================================================================
    # Rotation
    # ========================================================================

    @validate_angle("angle")
    @validate_number("x", "y", "z")
    def rotate3d(
        self,
        x: float | None = None,
        y: float | None = None,
        z: float | None = None,
        angle: AngleLike | None = None,
    ) -> Self:
        """
        Set the rotation slot to a rotation about the axis ``(x, y, z)``.

        :param x: Axis x component
        :param y: Axis y component
        :param z: Axis z component
        :param angle: Rotation angle (radians, "90deg", "1.5rad", Radians or Degrees)
        :return: Self for method chaining

        Example:
            >>> TransformComposer().rotate3d(1, 1, 0, "30deg")
        """
        x = CONFIG.rotate_axis.resolve(x)
        y = CONFIG.rotate_axis.resolve(y)
        z = CONFIG.rotate_axis.resolve(z)
        radians = to_radians(CONFIG.rotate_angle.resolve(angle))

        self._state.rotate = elementary.rotate3d(x, y, z, radians)
        logger.debug("[TransformComposer] rotate3d(%s, %s, %s, %s rad)", x, y, z, radians)
        return self

    def rotate(self, angle: AngleLike | None = None) -> Self:
        """Rotate about the z axis."""
        return self.rotate3d(0, 0, 1, angle)

    def rotate_x(self, angle: AngleLike | None = None) -> Self:
        """Rotate about the x axis."""
        return self.rotate3d(1, 0, 0, angle)

    def rotate_y(self, angle: AngleLike | None = None) -> Self:
        """Rotate about the y axis."""
        return self.rotate3d(0, 1, 0, angle)

    def rotate_z(self, angle: AngleLike | None = None) -> Self:
        """Rotate about the z axis."""
        return self.rotate3d(0, 0, 1, angle)

    # ========================================================================
    # Scale
    # ========================================================================

    @validate_number("x", "y", "z")
    def scale3d(
        self,
        x: float | None = None,
        y: float | None = None,
        z: float | None = None,
    ) -> Self:
        """
        Set the scale slot.

        :param x: X scale factor (default 1)
        :param y: Y scale factor (default 1)
        :param z: Z scale factor (default 1)
        :return: Self for method chaining
        """
        x = CONFIG.scale_factor.resolve(x)
        y = CONFIG.scale_factor.resolve(y)
        z = CONFIG.scale_factor.resolve(z)

        self._state.scale = elementary.scale3d(x, y, z)
        logger.debug("[TransformComposer] scale3d(%s, %s, %s)", x, y, z)
        return self

    def scale(self, x: float | None = None, y: float | None = None) -> Self:
        """Scale in the xy plane; z stays at 1 and an omitted y is 1."""
        return self.scale3d(x, y)

    def scale_x(self, x: float | None = None) -> Self:
        return self.scale3d(x)

    def scale_y(self, y: float | None = None) -> Self:
        return self.scale3d(None, y)

    def scale_z(self, z: float | None = None) -> Self:
        return self.scale3d(None, None, z)

    # ========================================================================
    # Skew
    # ========================================================================

    @validate_angle("x", "y")
    def skew(self, x: AngleLike | None = None, y: AngleLike | None = None) -> Self:
        """
        Set the skew slot.

        The 2D skew matrix is promoted into 4x4 space before it is stored.

        :param x: Skew angle along the x axis
        :param y: Skew angle along the y axis
        :return: Self for method chaining
        """
        ax = to_radians(CONFIG.skew_angle.resolve(x))
        ay = to_radians(CONFIG.skew_angle.resolve(y))

        self._state.skew = to3d(elementary.skew(ax, ay))
        logger.debug("[TransformComposer] skew(%s rad, %s rad)", ax, ay)
        return self

    def skew_x(self, x: AngleLike | None = None) -> Self:
        return self.skew(x)

    def skew_y(self, y: AngleLike | None = None) -> Self:
        return self.skew(None, y)

    # ========================================================================
    # Translation
    # ========================================================================

    @validate_number("x", "y", "z")
    def translate3d(
        self,
        x: float | None = None,
        y: float | None = None,
        z: float | None = None,
    ) -> Self:
        """
        Set the translation slot.

        :param x: X offset
        :param y: Y offset
        :param z: Z offset
        :return: Self for method chaining
        """
        x = CONFIG.translate_offset.resolve(x)
        y = CONFIG.translate_offset.resolve(y)
        z = CONFIG.translate_offset.resolve(z)

        self._state.translate = elementary.translate3d(x, y, z)
        logger.debug("[TransformComposer] translate3d(%s, %s, %s)", x, y, z)
        return self

    def translate(self, x: float | None = None, y: float | None = None) -> Self:
        return self.translate3d(x, y)

    def translate_x(self, x: float | None = None) -> Self:
        return self.translate3d(x)

    def translate_y(self, y: float | None = None) -> Self:
        return self.translate3d(None, y)

    def translate_z(self, z: float | None = None) -> Self:
        return self.translate3d(None, None, z)

    # ========================================================================
    # Composition
    # ========================================================================

    def compose(self) -> np.ndarray:
        """
        Compose base and slots into the final matrix.

        ``base @ perspective @ translate @ rotate @ skew @ scale``, flipped
        into column-major layout. Recomputed on every call.

        :return: 4x4 float64 matrix
        :raises ShapeError: If the stored base is not 4x4
        """
        matrix = self._state.base
        for name in COMPOSE_ORDER:
            matrix = multiply(matrix, getattr(self._state, name))
        return flip(matrix)

    def serialize(self) -> str:
        """
        Format the composed matrix as a CSS ``matrix3d()`` value.

        Rows of :meth:`compose` are concatenated and comma-joined without
        whitespace.

        :return: String such as ``"matrix3d(1,0,0,0,0,1,0,0,0,0,1,0,0,0,0,1)"``
        """
        values = self.compose().ravel()
        return f"{CSS_FUNCTION}({','.join(format_number(v) for v in values)})"

    def is_neutral(self) -> bool:
        """Check if the composed matrix is the identity."""
        return bool(np.allclose(self.compose(), identity()))

    # ========================================================================
    # Utilities
    # ========================================================================

    def reset(self) -> Self:
        """
        Return the base and every slot to identity.

        :return: Self for method chaining
        """
        self._state = TransformState()
        logger.debug("[TransformComposer] Reset to identity")
        return self

    def copy(self) -> Self:
        """
        Create a deep copy of this composer.

        :return: New TransformComposer with the same base, slots and modes

        Example:
            >>> spin = TransformComposer().translate(10, 0)
            >>> spun = spin.copy().rotate("90deg")  # spin is unchanged
        """
        return deepcopy(self)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        """String representation listing the modified slots."""
        parts = self._state.modified_slots()
        if not np.array_equal(np.asarray(self._state.base, dtype=object), identity()):
            parts.insert(0, "base")
        if not parts:
            return "TransformComposer(identity)"
        return f"TransformComposer({', '.join(parts)})"
