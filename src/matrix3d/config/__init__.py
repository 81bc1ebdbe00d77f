"""Configuration module for matrix3d.

This module provides the parameter specifications and validation modes used
by every TransformComposer.

Usage:
    from matrix3d.config import CONFIG
    CONFIG.scale_factor.default  # 1.0
    CONFIG.validate_arguments  # True unless running under python -O

Presets live in :mod:`matrix3d.config.presets`.
"""

from matrix3d.config.composer import CONFIG, ComposerConfig
from matrix3d.config.operations import OperationSpec

__all__ = [
    "CONFIG",
    "ComposerConfig",
    "OperationSpec",
]
