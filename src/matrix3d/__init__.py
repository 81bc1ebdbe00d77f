"""
matrix3d - CSS 3D transform composition

Builds a 4x4 homogeneous transformation matrix from independently settable
CSS transform functions and serializes it for a ``matrix3d()`` value.

Features:
- Chainable setters mirroring CSS: perspective, rotate3d/rotate/rotate_x..z,
  scale3d/scale/scale_x..z, skew/skew_x/skew_y, translate3d/translate/translate_x..z
- Angles as radians, "90deg" / "1.5rad" strings, or Radians/Degrees
- Fixed composition order: perspective, translate, rotate, skew, scale
- Optional base matrix the transforms are applied onto
- Type checks that follow ``__debug__`` and can be toggled per instance

Example:
    >>> from matrix3d import TransformComposer
    >>>
    >>> composer = TransformComposer().translate3d(10, 20, 0).rotate("45deg").scale(2, 2)
    >>> matrix = composer.compose()  # 4x4 numpy array, column-major
    >>> composer.serialize()  # "matrix3d(...)"

Example - Presets:
    >>> from matrix3d import get_preset, composer_from_dict
    >>>
    >>> flipped = get_preset("flip_x")
    >>> custom = composer_from_dict({"perspective": 800, "rotate_y": "30deg"})
"""

__version__ = "0.1.0"

from matrix3d.config import CONFIG, ComposerConfig, OperationSpec
from matrix3d.config.presets import (
    DOUBLE_SIZE,
    FLIP_X,
    FLIP_Y,
    FLIP_Z,
    HALF_SIZE,
    HALF_TURN,
    QUARTER_TURN,
    apply_operations,
    composer_from_dict,
    get_preset,
    load_composer_json,
    save_operations_json,
)
from matrix3d.protocols import MatrixProvider, TransformBuilder
from matrix3d.shared.angles import Degrees, Radians, to_radians
from matrix3d.shared.matrix import flip, identity, multiply, to3d
from matrix3d.transform import TransformComposer, TransformState
from matrix3d.validators import ShapeError, TypeArgumentError

__all__ = [
    # Version
    "__version__",
    # Core
    "TransformComposer",
    "TransformState",
    # Angles
    "Radians",
    "Degrees",
    "to_radians",
    # Matrix primitives
    "identity",
    "multiply",
    "flip",
    "to3d",
    # Errors
    "ShapeError",
    "TypeArgumentError",
    # Config
    "CONFIG",
    "ComposerConfig",
    "OperationSpec",
    # Presets
    "FLIP_X",
    "FLIP_Y",
    "FLIP_Z",
    "DOUBLE_SIZE",
    "HALF_SIZE",
    "QUARTER_TURN",
    "HALF_TURN",
    "get_preset",
    "apply_operations",
    "composer_from_dict",
    "load_composer_json",
    "save_operations_json",
    # Protocols
    "MatrixProvider",
    "TransformBuilder",
]
