"""Argument validation for composer setters.

Numeric setters are wrapped with :func:`validate_number` or
:func:`validate_angle`. The checks run only when the instance's
``validate_arguments`` flag is true; with the flag off, arguments go straight
to the matrix builders.

Example:
    >>> class Builder:
    ...     validate_arguments = True
    ...
    ...     @validate_number("x", "y")
    ...     def translate(self, x=None, y=None):
    ...         return x, y
    >>> Builder().translate(1, "2")  # raises TypeArgumentError naming "y"
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from numbers import Real
from typing import Any

from matrix3d.constants import MATRIX_SIZE
from matrix3d.shared.angles import is_angle_like


class ShapeError(ValueError):
    """Raised when a matrix does not have the required 4x4 shape."""


class TypeArgumentError(TypeError):
    """Raised when a setter argument has the wrong type.

    :param param: Name of the offending parameter
    :param received: The value that was passed
    :param expected: Human-readable description of accepted types
    """

    def __init__(self, param: str, received: Any, expected: str = "a real number"):
        self.param = param
        self.received = type(received).__name__
        super().__init__(f"{param}: expected {expected}, got {self.received}")


def is_real_number(value: object) -> bool:
    """Check if value is a real number (bool excluded)."""
    return isinstance(value, Real) and not isinstance(value, bool)


def _checked(
    names: tuple[str, ...], predicate: Callable[[object], bool], expected: str
) -> Callable[[Callable], Callable]:
    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)
        missing = [n for n in names if n not in signature.parameters]
        if missing:
            raise ValueError(f"{func.__name__} has no parameter(s) {', '.join(missing)}")

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            if getattr(self, "validate_arguments", True):
                arguments = signature.bind(self, *args, **kwargs).arguments
                for name in names:
                    value = arguments.get(name)
                    # Omitted arguments resolve to a numeric default
                    if value is not None and not predicate(value):
                        raise TypeArgumentError(name, value, expected)
            return func(self, *args, **kwargs)

        return wrapper

    return decorator


def validate_number(*names: str) -> Callable[[Callable], Callable]:
    """Decorator rejecting non-numeric values for the named parameters.

    ``None`` is accepted since it stands for the parameter's default.

    :param names: Parameter names to check
    :returns: Decorator function
    """
    return _checked(names, is_real_number, "a real number")


def validate_angle(*names: str) -> Callable[[Callable], Callable]:
    """Decorator rejecting values that cannot be read as an angle.

    Accepted: real numbers, unit strings such as ``"45deg"``, ``Radians`` and
    ``Degrees``. ``None`` is accepted since it stands for the default.

    :param names: Parameter names to check
    :returns: Decorator function
    """
    return _checked(names, is_angle_like, "an angle (number, str, Radians or Degrees)")


def validate_shape(data: Any, strict: bool = False) -> None:
    """Validate a base matrix before it is stored.

    Only the number of rows is checked unless ``strict`` is set, in which case
    every row must also hold exactly four entries.

    :param data: Candidate base matrix
    :param strict: Also check row lengths
    :raises TypeArgumentError: If data is not a sized sequence
    :raises ShapeError: If data does not have four rows (or four columns when strict)
    """
    if isinstance(data, str | bytes) or not hasattr(data, "__len__"):
        raise TypeArgumentError("data", data, "a 4x4 array of rows")

    rows = len(data)
    if rows != MATRIX_SIZE:
        raise ShapeError(f"data: expected a 4x4 matrix, got {rows} rows")

    if strict:
        for i, row in enumerate(data):
            if not hasattr(row, "__len__"):
                raise ShapeError(f"data: row {i} is not a sequence ({type(row).__name__})")
            if len(row) != MATRIX_SIZE:
                raise ShapeError(f"data: row {i} has {len(row)} entries, expected 4")
