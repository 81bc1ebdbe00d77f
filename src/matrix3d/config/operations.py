"""Operation specifications for composer setters.

This module defines the OperationSpec dataclass that specifies the default
and kind of each setter parameter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal


@dataclass(frozen=True)
class OperationSpec:
    """Specification for a composer setter parameter.

    Attributes:
        name: Parameter name (e.g., "distance", "angle")
        default: Value substituted when the argument is omitted
        kind: "number" for plain real numbers, "angle" for angle-bearing arguments
        description: Human-readable description
    """

    name: str
    default: float
    kind: Literal["number", "angle"] = "number"
    description: str = ""

    def resolve(self, value: Any) -> Any:
        """Substitute the default for an omitted (None) argument.

        :param value: Argument as passed by the caller
        :returns: value, or the default when value is None
        """
        return self.default if value is None else value

    def __repr__(self) -> str:
        return f"OperationSpec({self.name}, default={self.default}, {self.kind})"
