"""
Example: composing CSS 3D transforms.

Demonstrates how to use matrix3d for:
- Chaining transform functions
- Angle units (radians, "deg"/"rad" strings, Degrees/Radians)
- Applying transforms onto a base matrix
- Presets and operation dicts
- Switching argument validation off
"""

import logging

import numpy as np

from matrix3d import Degrees, TransformComposer, composer_from_dict, get_preset

# Configure logging to see each setter call
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


def example_1_chaining():
    """Example 1: Chained transform functions."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Chaining")
    print("=" * 70)

    composer = (
        TransformComposer()
        .perspective(800)
        .translate3d(10, 20, 0)
        .rotate_y("30deg")
        .scale(2, 2)
    )

    print(composer)
    print(f"transform: {composer.serialize()};")


def example_2_angle_units():
    """Example 2: Equivalent angle inputs."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Angle Units")
    print("=" * 70)

    for angle in ("90deg", Degrees(90), np.pi / 2, "1.5707963267948966rad"):
        print(f"{angle!r:>28} -> {TransformComposer().rotate(angle).serialize()}")


def example_3_base_matrix():
    """Example 3: Transforms applied onto an existing matrix."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Base Matrix")
    print("=" * 70)

    base = np.eye(4)
    base[0, 3] = 100.0  # Existing offset along x

    composer = TransformComposer(base).rotate("45deg")
    print(np.round(composer.compose(), 3))


def example_4_presets():
    """Example 4: Presets and operation dicts."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Presets")
    print("=" * 70)

    print(f"flip_x: {get_preset('flip_x').serialize()}")

    composer = composer_from_dict({"skew_x": "15deg", "translate": [5, 5]})
    print(f"from dict: {composer.serialize()}")


def example_5_unchecked():
    """Example 5: Skipping argument validation."""
    print("\n" + "=" * 70)
    print("EXAMPLE 5: Validation Off")
    print("=" * 70)

    composer = TransformComposer(validate_arguments=False)
    composer.translate3d(np.float32(1.5), 2, 3)
    print(composer.serialize())


def main():
    """Run all examples."""
    example_1_chaining()
    example_2_angle_units()
    example_3_base_matrix()
    example_4_presets()
    example_5_unchecked()

    print("\n" + "=" * 70)
    print("ALL EXAMPLES COMPLETED")
    print("=" * 70)


if __name__ == "__main__":
    main()
