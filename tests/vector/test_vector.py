"""
Tests for Vector.

Validates:
    - Construction by dimension, copy, and from array-likes
    - Bounds-checked get/set that never mutate on failure
    - resize growing (zero fill) and shrinking (truncation)
    - In-place vs copy-returning scalar and elementwise arithmetic
    - Inner product, exact equality, display, Python operators
"""

import warnings

import numpy as np
import pytest

from pylinalg import Vector, inner_product
from pylinalg.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidDimensionError,
    NonFiniteValueWarning,
    ValidationError,
)
from pylinalg.core.tolerances import EXACT


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    @pytest.mark.parametrize("dim", [1, 2, 7, 100])
    def test_zero_filled(self, dim):
        v = Vector(dim)
        assert v.dimension == dim
        assert len(v) == dim
        assert all(v.get(i) == 0.0 for i in range(dim))

    @pytest.mark.parametrize("dim", [0, -1, -10])
    def test_non_positive_dimension(self, dim):
        with pytest.raises(InvalidDimensionError):
            Vector(dim)

    def test_non_integer_dimension(self):
        with pytest.raises(InvalidDimensionError):
            Vector(2.5)

    def test_from_values(self):
        v = Vector.from_values([1, 2, 3])
        assert v.to_list() == [1.0, 2.0, 3.0]
        assert isinstance(v.get(0), float)

    def test_from_values_copies_input(self):
        source = np.array([1.0, 2.0])
        v = Vector.from_values(source)
        source[0] = 99.0
        assert v.get(0) == 1.0

    def test_from_values_rejects_2d(self):
        with pytest.raises(ValidationError, match="expected 1D"):
            Vector.from_values([[1.0, 2.0]])

    def test_from_values_rejects_empty(self):
        with pytest.raises(InvalidDimensionError):
            Vector.from_values([])

    def test_from_values_warns_on_nan(self):
        with pytest.warns(NonFiniteValueWarning, match="1 NaN"):
            v = Vector.from_values([1.0, float("nan")])
        assert v.dimension == 2

    def test_from_values_finite_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Vector.from_values([1.0, 2.0])


# ═══════════════════════════════════════════════════════════════════════
# Copy semantics
# ═══════════════════════════════════════════════════════════════════════


class TestCopy:

    def test_copy_equals_original(self, v123):
        assert Vector.copy_of(v123).equals(v123)
        assert v123.copy() == v123

    def test_mutating_copy_leaves_original(self, v123):
        c = Vector.copy_of(v123)
        c.set(0, 42.0)
        c.add_scalar_in_place(1.0)
        c.resize(1)
        assert v123.to_list() == [1.0, 2.0, 3.0]

    def test_copy_of_random_vector(self, rng):
        v = Vector.from_values(rng.standard_normal(50))
        c = v.copy()
        assert c == v
        assert c is not v

    def test_to_array_is_independent(self, v123):
        arr = v123.to_array()
        arr[:] = 0.0
        assert v123.get(2) == 3.0


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_get_set(self):
        v = Vector(3)
        v.set(1, 2.5)
        assert v.get(1) == 2.5
        v[2] = -1.0
        assert v[2] == -1.0

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_get_out_of_bounds(self, v123, index):
        with pytest.raises(IndexOutOfBoundsError):
            v123.get(index)

    @pytest.mark.parametrize("index", [-1, 3])
    def test_set_out_of_bounds_leaves_vector(self, v123, index):
        with pytest.raises(IndexOutOfBoundsError):
            v123.set(index, 9.0)
        assert v123.to_list() == [1.0, 2.0, 3.0]

    def test_subscript_out_of_bounds_is_index_error(self, v123):
        with pytest.raises(IndexError):
            v123[3]

    def test_set_rejects_string_value(self, v123):
        with pytest.raises(TypeError):
            v123.set(0, "4.0")
        assert v123.get(0) == 1.0

    def test_bool_index_rejected(self, v123):
        with pytest.raises(TypeError, match="bool"):
            v123[True]
        with pytest.raises(TypeError, match="bool"):
            v123.set(False, 9.0)
        assert v123.to_list() == [1.0, 2.0, 3.0]

    def test_iteration(self, v123):
        assert list(v123) == [1.0, 2.0, 3.0]

    def test_shape(self, v123):
        assert v123.shape == (3,)


# ═══════════════════════════════════════════════════════════════════════
# resize
# ═══════════════════════════════════════════════════════════════════════


class TestResize:

    def test_grow_zero_fills(self):
        v = Vector.from_values([1.0, 2.0])
        v.resize(4)
        assert v.to_list() == [1.0, 2.0, 0.0, 0.0]
        assert v.dimension == 4

    def test_shrink_truncates(self):
        v = Vector.from_values([1.0, 2.0])
        v.resize(1)
        assert v.to_list() == [1.0]

    def test_shrink_is_irreversible(self):
        v = Vector.from_values([1.0, 2.0])
        v.resize(1)
        v.resize(2)
        assert v.to_list() == [1.0, 0.0]

    def test_same_dimension_keeps_values(self, v123):
        v123.resize(3)
        assert v123.to_list() == [1.0, 2.0, 3.0]

    @pytest.mark.parametrize("new_dim", [0, -3])
    def test_invalid_dimension_leaves_vector(self, v123, new_dim):
        with pytest.raises(InvalidDimensionError):
            v123.resize(new_dim)
        assert v123.to_list() == [1.0, 2.0, 3.0]


# ═══════════════════════════════════════════════════════════════════════
# Scalar arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestScalarArithmetic:

    def test_add_scalar_returns_new(self, v123):
        result = v123.add_scalar(1.5)
        assert result.to_list() == [2.5, 3.5, 4.5]
        assert v123.to_list() == [1.0, 2.0, 3.0]

    def test_add_scalar_in_place(self, v123):
        returned = v123.add_scalar_in_place(-1.0)
        assert v123.to_list() == [0.0, 1.0, 2.0]
        assert returned is v123

    def test_multiply_scalar_returns_new(self, v123):
        result = v123.multiply_scalar(2.0)
        assert result.to_list() == [2.0, 4.0, 6.0]
        assert v123.to_list() == [1.0, 2.0, 3.0]

    def test_multiply_scalar_in_place(self, v123):
        v123.multiply_scalar_in_place(-0.5)
        assert v123.to_list() == [-0.5, -1.0, -1.5]

    def test_add_scalar_matches_entrywise(self, rng):
        v = Vector.from_values(rng.standard_normal(20))
        d = 0.37
        result = v.add_scalar(d)
        for i in range(v.dimension):
            assert result.get(i) == v.get(i) + d


# ═══════════════════════════════════════════════════════════════════════
# Elementwise arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestElementwiseArithmetic:

    def test_results_share_receiver_type(self):
        class Tagged(Vector):
            __slots__ = ()

        v = Tagged.from_values([1.0, 2.0])
        w = Vector.from_values([3.0, 4.0])
        for result in (
            v.add_scalar(1.0),
            v.multiply_scalar(2.0),
            v.add_elementwise(w),
            v.multiply_elementwise(w),
        ):
            assert type(result) is Tagged

    def test_add_elementwise(self, v123):
        other = Vector.from_values([10.0, 20.0, 30.0])
        assert v123.add_elementwise(other).to_list() == [11.0, 22.0, 33.0]
        assert v123.to_list() == [1.0, 2.0, 3.0]

    def test_add_elementwise_in_place(self, v123):
        v123.add_elementwise_in_place(Vector.from_values([1.0, 1.0, 1.0]))
        assert v123.to_list() == [2.0, 3.0, 4.0]

    def test_multiply_elementwise(self, v123):
        other = Vector.from_values([4.0, 5.0, 6.0])
        assert v123.multiply_elementwise(other).to_list() == [4.0, 10.0, 18.0]
        assert other.to_list() == [4.0, 5.0, 6.0]

    def test_multiply_elementwise_in_place(self, v123):
        v123.multiply_elementwise_in_place(Vector.from_values([0.0, -1.0, 2.0]))
        assert v123.to_list() == [0.0, -2.0, 6.0]

    def test_in_place_with_self(self, v123):
        v123.add_elementwise_in_place(v123)
        assert v123.to_list() == [2.0, 4.0, 6.0]

    @pytest.mark.parametrize("method", [
        "add_elementwise",
        "add_elementwise_in_place",
        "multiply_elementwise",
        "multiply_elementwise_in_place",
    ])
    def test_mismatch_leaves_receiver(self, v123, method):
        with pytest.raises(DimensionMismatchError) as exc_info:
            getattr(v123, method)(Vector(2))
        assert exc_info.value.left_shape == (3,)
        assert exc_info.value.right_shape == (2,)
        assert v123.to_list() == [1.0, 2.0, 3.0]


# ═══════════════════════════════════════════════════════════════════════
# Inner product
# ═══════════════════════════════════════════════════════════════════════


class TestInnerProduct:

    def test_hand_computed(self, v123):
        assert inner_product(v123, Vector.from_values([4.0, 5.0, 6.0])) == 32.0

    def test_method_form(self, v123):
        assert v123.inner_product(v123) == 14.0

    def test_mismatch(self, v123):
        with pytest.raises(DimensionMismatchError):
            inner_product(v123, Vector(4))

    def test_matches_ascending_accumulation(self, rng):
        a = rng.standard_normal(64)
        b = rng.standard_normal(64)
        expected = 0.0
        for x, y in zip(a.tolist(), b.tolist()):
            expected += x * y
        assert inner_product(Vector.from_values(a), Vector.from_values(b)) == expected


# ═══════════════════════════════════════════════════════════════════════
# Equality
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:

    def test_equal_content(self, v123):
        assert v123.equals(Vector.from_values([1.0, 2.0, 3.0]))

    def test_different_dimension(self, v123):
        assert not v123.equals(Vector.from_values([1.0, 2.0]))

    def test_no_tolerance(self):
        a = Vector.from_values([0.1 + 0.2])
        b = Vector.from_values([0.3])
        assert a != b
        assert a.allclose(b)

    def test_nan_never_equal(self):
        with pytest.warns(NonFiniteValueWarning):
            v = Vector.from_values([float("nan")])
        assert not v.equals(v.copy())

    def test_other_types_unequal(self, v123):
        assert not v123.equals([1.0, 2.0, 3.0])
        assert v123 != [1.0, 2.0, 3.0]
        assert v123 != "[ 1.0 2.0 3.0 ]"

    def test_allclose_dimension_mismatch(self, v123):
        assert not v123.allclose(Vector(2))

    def test_allclose_exact_tier(self):
        a = Vector.from_values([0.1 + 0.2])
        assert not a.allclose(Vector.from_values([0.3]), tier=EXACT)

    def test_unhashable(self, v123):
        with pytest.raises(TypeError):
            hash(v123)


# ═══════════════════════════════════════════════════════════════════════
# Display
# ═══════════════════════════════════════════════════════════════════════


class TestDisplay:

    def test_display_string(self):
        v = Vector.from_values([-1.2, 2.0, 10.125])
        assert v.to_display_string() == "[ -1.200  2.000 10.125 ]"

    def test_str_is_display(self, v123):
        assert str(v123) == "[  1.000  2.000  3.000 ]"

    def test_repr(self, v123):
        assert repr(v123) == "Vector([1.0, 2.0, 3.0])"


# ═══════════════════════════════════════════════════════════════════════
# Operators
# ═══════════════════════════════════════════════════════════════════════


class TestOperators:

    def test_add_scalar_both_sides(self, v123):
        assert (v123 + 1).to_list() == [2.0, 3.0, 4.0]
        assert (1 + v123).to_list() == [2.0, 3.0, 4.0]

    def test_mul_scalar_both_sides(self, v123):
        assert (v123 * 2).to_list() == [2.0, 4.0, 6.0]
        assert (2 * v123).to_list() == [2.0, 4.0, 6.0]

    def test_add_and_mul_vectors(self, v123):
        assert (v123 + v123).to_list() == [2.0, 4.0, 6.0]
        assert (v123 * v123).to_list() == [1.0, 4.0, 9.0]

    def test_in_place_operators_mutate(self, v123):
        alias = v123
        v123 += 1.0
        v123 *= Vector.from_values([1.0, 0.0, 2.0])
        assert alias is v123
        assert v123.to_list() == [2.0, 0.0, 8.0]

    def test_matmul_is_inner_product(self, v123):
        assert v123 @ Vector.from_values([4.0, 5.0, 6.0]) == 32.0

    def test_unsupported_operand(self, v123):
        with pytest.raises(TypeError):
            v123 + "x"

    def test_numpy_operand_not_broadcast(self, v123):
        with pytest.raises(TypeError):
            v123 + np.ones(3)
