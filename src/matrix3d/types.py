"""Type aliases for matrix3d.

Provides unified type hints for matrix and angle parameters across all modules.
"""

from collections.abc import Sequence
from numbers import Real

import numpy as np

from matrix3d.shared.angles import Degrees, Radians

# 4x4 homogeneous matrix (any nested sequence or array)
Matrix4x4 = Sequence[Sequence[float]] | np.ndarray

# Angle-bearing argument: radians, degrees, raw radians or a "90deg" / "1.5rad" string
AngleLike = Radians | Degrees | Real | str
