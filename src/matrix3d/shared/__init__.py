"""Shared utilities for matrix3d.

Angle normalization and rotation helpers used by the elementary matrix
builders. Matrix algebra lives in :mod:`matrix3d.shared.matrix`.
"""

from matrix3d.shared.angles import (
    Degrees,
    Radians,
    is_angle_like,
    parse_leading_float,
    to_radians,
)
from matrix3d.shared.rotation import (
    axis_angle_to_quaternion,
    quaternion_identity,
    quaternion_to_rotation_matrix,
)

__all__ = [
    # Angle utilities
    "Radians",
    "Degrees",
    "to_radians",
    "parse_leading_float",
    "is_angle_like",
    # Rotation utilities
    "axis_angle_to_quaternion",
    "quaternion_to_rotation_matrix",
    "quaternion_identity",
]
