"""
3D transform module - CSS transform functions composed into a 4x4 matrix.

Example:
    >>> from matrix3d.transform import TransformComposer
    >>> composer = TransformComposer().translate(10, 20).rotate("45deg").scale(2, 2)
    >>> composer.serialize()
"""

from matrix3d.transform.composer import TransformComposer, format_number
from matrix3d.transform.elementary import (
    perspective,
    rotate3d,
    scale3d,
    skew,
    translate3d,
)
from matrix3d.transform.state import TransformState

__all__ = [
    "TransformComposer",
    "TransformState",
    "format_number",
    # Elementary matrices
    "perspective",
    "rotate3d",
    "scale3d",
    "skew",
    "translate3d",
]
