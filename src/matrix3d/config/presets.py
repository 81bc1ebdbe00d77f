"""Preset library for matrix3d composers.

Provides pre-configured transform operations for common use cases, with
support for building composers from dict and JSON.

An operation dict maps setter names to their arguments:

    {"base": [[...], ...], "translate3d": [10, 20, 0], "rotate": "45deg"}

A list or tuple is passed positionally, a dict as keyword arguments, ``None``
calls the setter with no arguments, and any other value is passed as the
single argument. ``"base"`` is applied before the other operations.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from matrix3d.transform.composer import TransformComposer

logger = logging.getLogger(__name__)

# Setter names accepted as operation keys
OPERATIONS = frozenset(
    {
        "perspective",
        "rotate3d",
        "rotate",
        "rotate_x",
        "rotate_y",
        "rotate_z",
        "scale3d",
        "scale",
        "scale_x",
        "scale_y",
        "scale_z",
        "skew",
        "skew_x",
        "skew_y",
        "translate3d",
        "translate",
        "translate_x",
        "translate_y",
        "translate_z",
    }
)

BASE_KEY = "base"

# ============================================================================
# Transform Presets
# ============================================================================

FLIP_X = {"scale_x": -1}
FLIP_Y = {"scale_y": -1}
FLIP_Z = {"scale_z": -1}

DOUBLE_SIZE = {"scale3d": [2, 2, 2]}
HALF_SIZE = {"scale3d": [0.5, 0.5, 0.5]}

QUARTER_TURN = {"rotate": "90deg"}
HALF_TURN = {"rotate": "180deg"}

TRANSFORM_PRESETS: dict[str, dict[str, Any]] = {
    "flip_x": FLIP_X,
    "flip_y": FLIP_Y,
    "flip_z": FLIP_Z,
    "double_size": DOUBLE_SIZE,
    "half_size": HALF_SIZE,
    "quarter_turn": QUARTER_TURN,
    "half_turn": HALF_TURN,
}

# ============================================================================
# Loading Functions
# ============================================================================


def get_preset(name: str, **options: Any) -> TransformComposer:
    """Build a new composer from a named preset.

    :param name: Preset name (case-insensitive)
    :param options: Keyword options forwarded to TransformComposer
    :returns: Fresh TransformComposer with the preset applied
    :raises KeyError: If preset not found
    """
    name_lower = name.lower()
    if name_lower not in TRANSFORM_PRESETS:
        available = ", ".join(TRANSFORM_PRESETS.keys())
        raise KeyError(f"Unknown transform preset '{name}'. Available: {available}")
    return composer_from_dict(TRANSFORM_PRESETS[name_lower], **options)


def apply_operations(composer: TransformComposer, d: dict[str, Any]) -> TransformComposer:
    """Apply an operation dict to an existing composer.

    :param composer: Composer to modify in place
    :param d: Operation dict
    :returns: The same composer
    :raises ValueError: If d contains an unknown operation
    """
    unknown = [key for key in d if key != BASE_KEY and key not in OPERATIONS]
    if unknown:
        valid = ", ".join(sorted(OPERATIONS))
        raise ValueError(f'operation="{unknown[0]}" is not valid. Choose from: {valid}')

    if BASE_KEY in d:
        composer.set_base(d[BASE_KEY])

    for name, args in d.items():
        if name == BASE_KEY:
            continue
        setter = getattr(composer, name)
        if args is None:
            setter()
        elif isinstance(args, list | tuple):
            setter(*args)
        elif isinstance(args, dict):
            setter(**args)
        else:
            setter(args)

    logger.debug("[presets] Applied %d operation(s)", len(d))
    return composer


def composer_from_dict(d: dict[str, Any], **options: Any) -> TransformComposer:
    """Create a TransformComposer from an operation dict.

    Example:
        >>> composer = composer_from_dict({"translate": [10, 20], "rotate": "45deg"})

    :param d: Operation dict
    :param options: Keyword options forwarded to TransformComposer
    :returns: New TransformComposer
    """
    return apply_operations(TransformComposer(**options), d)


def load_composer_json(path: str | Path, **options: Any) -> TransformComposer:
    """Load a TransformComposer from a JSON operation file.

    :param path: Path to JSON file
    :param options: Keyword options forwarded to TransformComposer
    :returns: New TransformComposer
    """
    with open(path) as f:
        d = json.load(f)
    return composer_from_dict(d, **options)


def save_operations_json(d: dict[str, Any], path: str | Path) -> None:
    """Save an operation dict to a JSON file.

    :param d: Operation dict
    :param path: Output path
    """
    with open(path, "w") as f:
        json.dump(d, f, indent=2)
