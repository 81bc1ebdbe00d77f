"""Angle normalization for angle-bearing transform arguments.

Angles reach the composer in one of four forms:

- ``Radians(value)`` / ``Degrees(value)``: explicit unit tags
- a real number, interpreted as radians
- a string such as ``"90deg"`` or ``".75rad"``

All of them resolve to a float in radians through :func:`to_radians`.

Example:
    >>> to_radians("90deg")  # 1.5707963267948966
    >>> to_radians(Degrees(180))  # 3.141592653589793
    >>> to_radians(0.5)  # 0.5
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from numbers import Real

from matrix3d.constants import DEG_TO_RAD, DEGREE_MARKER

logger = logging.getLogger(__name__)

# Leading numeric portion of a string, with the same acceptance rules as parseFloat.
# Digits are ASCII only; whitespace is any Unicode space.
_LEADING_NUMBER = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


@dataclass(frozen=True)
class Radians:
    """Angle expressed in radians."""

    value: float

    def to_radians(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class Degrees:
    """Angle expressed in degrees."""

    value: float

    def to_radians(self) -> float:
        return float(self.value) * DEG_TO_RAD


def parse_leading_float(text: str) -> float:
    """Parse the leading numeric portion of a string.

    Leading whitespace is skipped and the longest numeric prefix is used, so
    ``"12.5deg"`` gives ``12.5`` and ``"  -3e2rad"`` gives ``-300.0``.

    :param text: String to parse
    :returns: Parsed value, or NaN when the string has no numeric prefix
    """
    match = _LEADING_NUMBER.match(text)
    if match is None:
        logger.warning("[angles] No numeric value in angle string %r, using NaN", text)
        return math.nan
    return float(match.group(1))


def to_radians(angle: Radians | Degrees | Real | str) -> float:
    """Resolve an angle-bearing argument to radians.

    Strings are parsed with :func:`parse_leading_float`; when the string
    contains ``"deg"`` anywhere the value is converted from degrees, otherwise
    it is taken as radians. Values of any other type pass through unchanged.

    :param angle: Radians, Degrees, real number or unit string
    :returns: Angle in radians (other inputs returned as given)
    """
    if isinstance(angle, Radians | Degrees):
        return angle.to_radians()

    if isinstance(angle, str):
        value = parse_leading_float(angle)
        if DEGREE_MARKER in angle:
            value *= DEG_TO_RAD
        return value

    return angle


def is_angle_like(value: object) -> bool:
    """Check if value is an accepted angle-bearing argument.

    :param value: Value to check
    :returns: True for Radians, Degrees, strings and real numbers (bool excluded)
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, Radians | Degrees | str | Real)
