"""Transform composer configuration.

This module defines the parameter specifications and validation modes used
by every TransformComposer.
"""

from __future__ import annotations

from dataclasses import dataclass

from matrix3d.config.operations import OperationSpec


@dataclass(frozen=True)
class ComposerConfig:
    """Configuration for all composer setters.

    Attributes:
        validate_arguments: Type-check setter arguments. Follows ``__debug__``,
            so running under ``python -O`` skips the checks.
        strict_shape: Require every base-matrix row to hold four entries.
            When False only the number of rows is checked.
    """

    validate_arguments: bool = __debug__
    strict_shape: bool = False

    perspective_distance: OperationSpec = OperationSpec(
        name="distance",
        default=0.0,
        description="Distance to the viewer: 0=no perspective",
    )

    rotate_axis: OperationSpec = OperationSpec(
        name="axis",
        default=0.0,
        description="Rotation axis component",
    )

    rotate_angle: OperationSpec = OperationSpec(
        name="angle",
        default=0.0,
        kind="angle",
        description="Rotation angle: radians, or a string with a deg/rad unit",
    )

    scale_factor: OperationSpec = OperationSpec(
        name="factor",
        default=1.0,
        description="Scale multiplier: 1.0=no change",
    )

    skew_angle: OperationSpec = OperationSpec(
        name="angle",
        default=0.0,
        kind="angle",
        description="Skew angle: radians, or a string with a deg/rad unit",
    )

    translate_offset: OperationSpec = OperationSpec(
        name="offset",
        default=0.0,
        description="Translation offset: 0=no movement",
    )

    def get_spec(self, name: str) -> OperationSpec:
        """Get operation spec by name.

        :param name: Spec attribute name (e.g., "scale_factor")
        :return: OperationSpec for the operation
        :raises AttributeError: If operation not found
        """
        return getattr(self, name)

    def get_all_specs(self) -> dict[str, OperationSpec]:
        """Get all operation specs as a dictionary.

        :return: Dictionary mapping spec names to specs
        """
        return {
            "perspective_distance": self.perspective_distance,
            "rotate_axis": self.rotate_axis,
            "rotate_angle": self.rotate_angle,
            "scale_factor": self.scale_factor,
            "skew_angle": self.skew_angle,
            "translate_offset": self.translate_offset,
        }


# Singleton instance for use throughout the codebase
CONFIG = ComposerConfig()
