"""Transform state: the base matrix plus five named transform slots."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from matrix3d.constants import COMPOSE_ORDER
from matrix3d.shared.matrix import identity


@dataclass(eq=False)
class TransformState:
    """Matrices held by a TransformComposer.

    Every slot starts at identity and is replaced whole by its setter, so
    composition is always defined.

    Attributes:
        base: Base matrix that the slots are multiplied onto
        perspective: Perspective slot [4, 4]
        translate: Translation slot [4, 4]
        rotate: Rotation slot [4, 4]
        skew: Skew slot [4, 4]
        scale: Scale slot [4, 4]
    """

    base: Any = field(default_factory=identity)
    perspective: np.ndarray = field(default_factory=identity)
    translate: np.ndarray = field(default_factory=identity)
    rotate: np.ndarray = field(default_factory=identity)
    skew: np.ndarray = field(default_factory=identity)
    scale: np.ndarray = field(default_factory=identity)

    def slots(self) -> list[tuple[str, np.ndarray]]:
        """Return (name, matrix) pairs in composition order."""
        return [(name, getattr(self, name)) for name in COMPOSE_ORDER]

    def modified_slots(self) -> list[str]:
        """Return names of slots that differ from identity, in composition order."""
        eye = identity()
        return [name for name, matrix in self.slots() if not np.array_equal(matrix, eye)]

    def copy(self) -> TransformState:
        """Return an independent deep copy."""
        return deepcopy(self)

    def __eq__(self, other: object) -> bool:
        """Compare base and slots element-wise."""
        if not isinstance(other, TransformState):
            return NotImplemented
        # Base may be a ragged nested sequence when shape checks are weak
        base_a = np.asarray(self.base, dtype=object)
        base_b = np.asarray(other.base, dtype=object)
        if not np.array_equal(base_a, base_b):
            return False
        return all(np.array_equal(getattr(self, n), getattr(other, n)) for n in COMPOSE_ORDER)
