"""Tests for TransformComposer.

Tests cover:
- base matrix handling and shape validation
- slot replacement and method chaining
- fixed composition order and the final flip
- matrix3d() serialization
- convenience setters against their generic forms
- argument validation modes
"""

import math

import numpy as np
import pytest

from matrix3d import (
    Degrees,
    MatrixProvider,
    Radians,
    ShapeError,
    TransformBuilder,
    TransformComposer,
    TypeArgumentError,
)
from matrix3d.transform import elementary
from matrix3d.transform.composer import format_number

IDENTITY_CSS = "matrix3d(1,0,0,0,0,1,0,0,0,0,1,0,0,0,0,1)"


@pytest.fixture
def base_matrix():
    """Non-symmetric 4x4 base matrix."""
    return np.arange(1.0, 17.0).reshape(4, 4)


class TestBaseMatrix:
    """Test base matrix construction and replacement."""

    def test_default_base_is_identity(self):
        np.testing.assert_array_equal(TransformComposer().compose(), np.eye(4))

    def test_compose_with_base_only_is_flipped_base(self, base_matrix):
        """Test a composer with only a base composes to its flip."""
        composer = TransformComposer(base_matrix)
        np.testing.assert_array_equal(composer.compose(), base_matrix.T)

    def test_random_bases(self):
        """Test the flip property over several random bases."""
        rng = np.random.default_rng(7)
        for _ in range(10):
            base = rng.normal(size=(4, 4))
            np.testing.assert_array_equal(TransformComposer(base).compose(), base.T)

    def test_nested_list_base(self):
        data = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
        composer = TransformComposer(data)
        np.testing.assert_array_equal(composer.compose(), np.array(data, dtype=float).T)

    def test_set_base_replaces(self, base_matrix):
        composer = TransformComposer(base_matrix)
        assert composer.set_base(np.eye(4)) is None
        np.testing.assert_array_equal(composer.compose(), np.eye(4))

    def test_set_base_copies_input(self):
        """Test later changes to the caller's data do not leak in."""
        data = [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]]
        composer = TransformComposer(data)
        data[0][3] = 99
        np.testing.assert_array_equal(composer.compose(), np.eye(4))

    def test_wrong_row_count_raises(self):
        """Test [[1, 2], [3, 4]] is rejected."""
        with pytest.raises(ShapeError):
            TransformComposer().set_base([[1, 2], [3, 4]])
        with pytest.raises(ShapeError):
            TransformComposer([[1, 2], [3, 4]])

    def test_four_rows_accepted_regardless_of_content(self):
        """Test only the row count is checked by default."""
        composer = TransformComposer()
        composer.set_base([[1], [2, 3], [4, 5, 6], [7]])
        assert len(composer.base) == 4

    def test_malformed_base_fails_on_compose(self):
        """Test a base with the right row count but bad rows fails when composed."""
        composer = TransformComposer([[1, 2, 3], [4, 5, 6], [7, 8, 9], [1, 2, 3]])
        with pytest.raises(ShapeError, match="got shape"):
            composer.compose()

    def test_ragged_base_fails_on_compose_with_shape_error(self):
        composer = TransformComposer([[1], [2, 3], [4, 5, 6], [7]])
        with pytest.raises(ShapeError, match="ragged"):
            composer.compose()
        with pytest.raises(ShapeError):
            composer.serialize()

    def test_strict_shape_checks_rows(self):
        with pytest.raises(ShapeError, match="row 0"):
            TransformComposer([[1], [2, 3], [4, 5, 6], [7]], strict_shape=True)

    def test_strict_shape_stores_array(self, base_matrix):
        composer = TransformComposer(base_matrix.tolist(), strict_shape=True)
        assert isinstance(composer.base, np.ndarray)
        np.testing.assert_array_equal(composer.base, base_matrix)

    def test_non_sequence_base_raises(self):
        with pytest.raises(TypeArgumentError, match="data:"):
            TransformComposer().set_base(3.0)


class TestSlots:
    """Test slot replacement and chaining."""

    def test_setters_return_same_instance(self):
        composer = TransformComposer()
        assert composer.perspective(100) is composer
        assert composer.rotate3d(0, 0, 1, 1.0) is composer
        assert composer.scale3d(2) is composer
        assert composer.skew("10deg") is composer
        assert composer.translate3d(1, 2, 3) is composer
        assert composer.rotate_x(1.0).scale_y(2).translate_z(3).skew_y(0.1) is composer

    def test_rotation_is_replaced_not_accumulated(self):
        """Test a second rotate3d discards the first."""
        twice = TransformComposer().rotate3d(1, 0, 0, "90deg").rotate3d(0, 0, 1, "45deg")
        once = TransformComposer().rotate3d(0, 0, 1, "45deg")
        np.testing.assert_array_equal(twice.compose(), once.compose())

    def test_scale_is_replaced_not_accumulated(self):
        twice = TransformComposer().scale3d(2, 2, 2).scale3d(3, 1, 1)
        np.testing.assert_array_equal(twice.compose(), np.diag([3.0, 1.0, 1.0, 1.0]))

    def test_convenience_setter_replaces_whole_slot(self):
        """Test translate_y resets the x offset of an earlier translate3d."""
        composer = TransformComposer().translate3d(4, 0, 0).translate_y(5)
        np.testing.assert_array_equal(composer.compose()[3], [0.0, 5.0, 0.0, 1.0])

    def test_defaults_are_neutral(self):
        composer = (
            TransformComposer()
            .perspective()
            .rotate3d()
            .scale3d()
            .skew()
            .translate3d()
        )
        np.testing.assert_array_equal(composer.compose(), np.eye(4))
        assert composer.is_neutral()

    def test_state_holds_slots(self):
        composer = TransformComposer().translate3d(1, 2, 3)
        state = composer.state
        np.testing.assert_array_equal(state.translate, elementary.translate3d(1, 2, 3))
        np.testing.assert_array_equal(state.rotate, np.eye(4))
        assert state.modified_slots() == ["translate"]

    def test_state_is_a_copy(self):
        composer = TransformComposer()
        composer.state.scale[0, 0] = 5.0
        np.testing.assert_array_equal(composer.compose(), np.eye(4))

    def test_state_equality(self):
        """Test states compare element-wise and return a bool."""
        a = TransformComposer().translate3d(1, 2, 3)
        b = TransformComposer().translate3d(1, 2, 3)
        assert a.state == a.state
        assert a.state == b.state
        assert (a.state != b.state) is False

        b.rotate_z("10deg")
        assert a.state != b.state
        assert TransformComposer().state == TransformComposer().state

    def test_state_equality_compares_base(self, base_matrix):
        plain = TransformComposer()
        based = TransformComposer(base_matrix)
        assert plain.state != based.state
        assert based.state == TransformComposer(base_matrix.copy()).state

    def test_state_equality_with_ragged_base(self):
        ragged = [[1], [2, 3], [4, 5, 6], [7]]
        assert TransformComposer(ragged).state == TransformComposer(ragged).state
        assert TransformComposer(ragged).state != TransformComposer().state

    def test_state_not_equal_to_other_types(self):
        assert TransformComposer().state != "identity"


class TestCompose:
    """Test composition order and flip."""

    def test_translation_lands_in_last_row(self):
        """Test flipped layout puts the offset in entries 12..14."""
        matrix = TransformComposer().translate3d(1, 2, 3).compose()
        np.testing.assert_array_equal(matrix[3], [1.0, 2.0, 3.0, 1.0])

    def test_fixed_order(self, base_matrix):
        """Test base @ perspective @ translate @ rotate @ skew @ scale, flipped."""
        composer = (
            TransformComposer(base_matrix)
            .scale3d(2, 3, 4)
            .skew("10deg", "5deg")
            .rotate3d(1, 2, 3, 0.4)
            .translate3d(5, 6, 7)
            .perspective(250)
        )
        P = elementary.perspective(250)
        T = elementary.translate3d(5, 6, 7)
        R = elementary.rotate3d(1, 2, 3, 0.4)
        K = np.eye(4)
        K[0, 1] = math.tan(math.radians(10))
        K[1, 0] = math.tan(math.radians(5))
        S = elementary.scale3d(2, 3, 4)
        expected = (base_matrix @ P @ T @ R @ K @ S).T
        np.testing.assert_allclose(composer.compose(), expected, rtol=1e-12, atol=1e-12)

    def test_swapped_order_differs(self):
        """Test translate-then-rotate is not rotate-then-translate."""
        composer = TransformComposer().translate3d(10, 0, 0).rotate3d(0, 0, 1, "90deg")
        T = elementary.translate3d(10, 0, 0)
        R = elementary.rotate3d(0, 0, 1, math.pi / 2)

        np.testing.assert_allclose(composer.compose(), (T @ R).T, atol=1e-12)
        assert not np.allclose(composer.compose(), (R @ T).T)

    def test_idempotent(self):
        composer = TransformComposer().perspective(400).rotate_y("30deg").scale(2, 3)
        first = composer.compose()
        second = composer.compose()
        np.testing.assert_array_equal(first, second)
        assert composer.serialize() == composer.serialize()

    def test_compose_returns_new_array(self):
        composer = TransformComposer()
        matrix = composer.compose()
        matrix[0, 0] = 42.0
        np.testing.assert_array_equal(composer.compose(), np.eye(4))

    def test_skew_is_promoted(self):
        matrix = TransformComposer().skew("45deg").compose()
        assert abs(matrix[1, 0] - 1.0) < 1e-12
        assert matrix.shape == (4, 4)


class TestSerialize:
    """Test matrix3d() serialization."""

    def test_identity_literal(self):
        assert TransformComposer().serialize() == IDENTITY_CSS

    def test_translation_literal(self):
        css = TransformComposer().translate3d(1, 2, 3).serialize()
        assert css == "matrix3d(1,0,0,0,0,1,0,0,0,0,1,0,1,2,3,1)"

    def test_fractional_values(self):
        css = TransformComposer().scale3d(0.5, 1.25, 1).serialize()
        assert css == "matrix3d(0.5,0,0,0,0,1.25,0,0,0,0,1,0,0,0,0,1)"

    def test_no_whitespace(self):
        css = TransformComposer().rotate3d(1, 1, 0, "33deg").perspective(300).serialize()
        assert " " not in css
        assert css.startswith("matrix3d(") and css.endswith(")")
        assert len(css[len("matrix3d(") : -1].split(",")) == 16

    def test_str_is_serialize(self):
        composer = TransformComposer().translate_x(4)
        assert str(composer) == composer.serialize()

    def test_format_number(self):
        assert format_number(1.0) == "1"
        assert format_number(-0.0) == "0"
        assert format_number(-2.0) == "-2"
        assert format_number(0.1) == "0.1"
        assert format_number(np.float64(6.123233995736766e-17)) == "6.123233995736766e-17"
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"
        assert format_number(math.nan) == "NaN"

    def test_format_number_exponent_thresholds(self):
        """Test decimal vs exponent notation and unpadded exponents."""
        assert format_number(1e-5) == "0.00001"
        assert format_number(1e-6) == "0.000001"
        assert format_number(1e-7) == "1e-7"
        assert format_number(-2.5e-7) == "-2.5e-7"
        assert format_number(1e20) == "100000000000000000000"
        assert format_number(1e21) == "1e+21"
        assert format_number(1.5e300) == "1.5e+300"
        assert format_number(123.456) == "123.456"
        assert format_number(1000.0) == "1000"

    def test_small_perspective_literal(self):
        css = TransformComposer().perspective(1e7).serialize()
        assert css == "matrix3d(1,0,0,0,0,1,0,0,0,0,1,-1e-7,0,0,0,1)"


class TestConvenienceSetters:
    """Test convenience setters equal their generic forms."""

    @pytest.mark.parametrize("angle", [0.3, "45deg", "1.5rad", Degrees(20), Radians(-0.4)])
    def test_rotate_is_rotate3d_z(self, angle):
        np.testing.assert_array_equal(
            TransformComposer().rotate(angle).compose(),
            TransformComposer().rotate3d(0, 0, 1, angle).compose(),
        )

    def test_rotate_axes(self):
        a = "30deg"
        pairs = [
            (TransformComposer().rotate_x(a), TransformComposer().rotate3d(1, 0, 0, a)),
            (TransformComposer().rotate_y(a), TransformComposer().rotate3d(0, 1, 0, a)),
            (TransformComposer().rotate_z(a), TransformComposer().rotate3d(0, 0, 1, a)),
        ]
        for convenience, generic in pairs:
            np.testing.assert_array_equal(convenience.compose(), generic.compose())

    def test_scale_bindings(self):
        pairs = [
            (TransformComposer().scale_x(2), TransformComposer().scale3d(2, 1, 1)),
            (TransformComposer().scale_y(3), TransformComposer().scale3d(1, 3, 1)),
            (TransformComposer().scale_z(4), TransformComposer().scale3d(1, 1, 4)),
            (TransformComposer().scale(2, 3), TransformComposer().scale3d(2, 3, 1)),
            (TransformComposer().scale(2), TransformComposer().scale3d(2, 1, 1)),
        ]
        for convenience, generic in pairs:
            np.testing.assert_array_equal(convenience.compose(), generic.compose())

    def test_translate_bindings(self):
        pairs = [
            (TransformComposer().translate_x(5), TransformComposer().translate3d(5, 0, 0)),
            (TransformComposer().translate_y(5), TransformComposer().translate3d(0, 5, 0)),
            (TransformComposer().translate_z(5), TransformComposer().translate3d(0, 0, 5)),
            (TransformComposer().translate(1, 2), TransformComposer().translate3d(1, 2, 0)),
        ]
        for convenience, generic in pairs:
            np.testing.assert_array_equal(convenience.compose(), generic.compose())

    def test_skew_bindings(self):
        pairs = [
            (TransformComposer().skew_x("20deg"), TransformComposer().skew("20deg", 0)),
            (TransformComposer().skew_y("20deg"), TransformComposer().skew(0, "20deg")),
        ]
        for convenience, generic in pairs:
            np.testing.assert_array_equal(convenience.compose(), generic.compose())

    def test_angle_forms_agree(self):
        """Test degree strings, Degrees and radians give the same rotation."""
        from_string = TransformComposer().rotate("90deg").compose()
        from_tag = TransformComposer().rotate(Degrees(90)).compose()
        from_radians = TransformComposer().rotate(math.pi / 2).compose()
        np.testing.assert_allclose(from_string, from_radians, atol=1e-15)
        np.testing.assert_allclose(from_tag, from_radians, atol=1e-15)


class TestValidation:
    """Test argument validation modes."""

    def test_default_follows_debug(self):
        assert TransformComposer().validate_arguments is __debug__

    def test_non_numeric_rejected(self):
        composer = TransformComposer(validate_arguments=True)
        with pytest.raises(TypeArgumentError, match="distance:"):
            composer.perspective("100")
        with pytest.raises(TypeArgumentError, match="z:"):
            composer.scale3d(1, 1, "2")
        with pytest.raises(TypeArgumentError, match="x:"):
            composer.translate3d([1])

    def test_convenience_setters_name_parameter(self):
        composer = TransformComposer(validate_arguments=True)
        with pytest.raises(TypeArgumentError) as exc:
            composer.translate_y("5")
        assert exc.value.param == "y"
        assert exc.value.received == "str"

    def test_angle_rejected(self):
        composer = TransformComposer(validate_arguments=True)
        with pytest.raises(TypeArgumentError, match="angle:"):
            composer.rotate([90])
        with pytest.raises(TypeArgumentError, match="y:"):
            composer.skew(0, object())

    def test_rejected_call_leaves_slot_untouched(self):
        composer = TransformComposer(validate_arguments=True).translate3d(1, 2, 3)
        with pytest.raises(TypeArgumentError):
            composer.translate3d("9")
        np.testing.assert_array_equal(composer.compose()[3], [1.0, 2.0, 3.0, 1.0])

    def test_unchecked_mode_defers_to_builders(self):
        """Test bad arguments reach the matrix builders when checks are off."""
        composer = TransformComposer(validate_arguments=False)
        with pytest.raises(TypeError) as exc:
            composer.perspective("100")
        assert not isinstance(exc.value, TypeArgumentError)


class TestUtilities:
    """Test reset, copy, repr and protocols."""

    def test_reset(self, base_matrix):
        composer = TransformComposer(base_matrix).rotate(1.0).scale(2)
        assert composer.reset() is composer
        assert composer.serialize() == IDENTITY_CSS

    def test_copy_is_independent(self):
        original = TransformComposer(validate_arguments=False).translate(10, 0)
        clone = original.copy().rotate("90deg")
        assert clone is not original
        assert clone.validate_arguments is False
        assert original.state.modified_slots() == ["translate"]
        assert clone.state.modified_slots() == ["translate", "rotate"]

    def test_repr(self, base_matrix):
        assert repr(TransformComposer()) == "TransformComposer(identity)"
        composer = TransformComposer(base_matrix).scale(2).translate(1, 1)
        assert repr(composer) == "TransformComposer(base, translate, scale)"

    def test_is_neutral(self):
        assert TransformComposer().is_neutral()
        assert not TransformComposer().translate_x(1).is_neutral()

    def test_protocols(self):
        composer = TransformComposer()
        assert isinstance(composer, MatrixProvider)
        assert isinstance(composer, TransformBuilder)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
