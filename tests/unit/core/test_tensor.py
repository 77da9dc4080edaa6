"""Tests for the fixed-shape rank-3 tensor."""

import numpy as np
import pytest

from eigix.core import (
    ArgumentCountMismatchError,
    DivideByZeroError,
    ElementTypeMismatchError,
    FixedMatrix,
    FixedTensor3,
    OutOfRangeError,
    ShapeMismatchError,
)


def test_default_construction_is_zero_filled():
    t = FixedTensor3(2, 3, 4, dtype="int64")
    assert t.shape == (2, 3, 4)
    assert (t.depth, t.rows, t.cols) == (2, 3, 4)
    assert t.size == 24
    assert all(t.get(d, r, c) == 0 for d in range(2) for r in range(3) for c in range(4))


def test_set_then_get():
    t = FixedTensor3(2, 2, 2)
    t.set(1, 0, 1, 2.5)
    t[0, 1, 0] = -1.0
    assert t.get(1, 0, 1) == 2.5
    assert t[0, 1, 0] == -1.0
    assert t.tolist() == [[[0.0, 0.0], [-1.0, 0.0]], [[0.0, 2.5], [0.0, 0.0]]]


@pytest.mark.parametrize("index", [(2, 0, 0), (0, 3, 0), (0, 0, 4), (-1, 0, 0)])
def test_out_of_range_on_any_axis(index):
    t = FixedTensor3(2, 3, 4)
    with pytest.raises(OutOfRangeError, match="Tensor3D access out of bounds"):
        t.get(*index)
    with pytest.raises(OutOfRangeError):
        t.set(*index, 1.0)


def test_index_with_wrong_number_of_coordinates():
    t = FixedTensor3(1, 1, 1)
    with pytest.raises(TypeError):
        t[0, 0]


def test_populate_fill_order_is_depth_then_row_then_column():
    t = FixedTensor3.from_values(2, 2, 3, range(12), dtype="int64")
    assert t.get(0, 0, 2) == 2
    assert t.get(0, 1, 0) == 3
    assert t.get(1, 0, 0) == 6
    assert t.get(1, 1, 2) == 11


def test_populate_rejects_wrong_count():
    t = FixedTensor3(2, 2, 2)
    with pytest.raises(ArgumentCountMismatchError, match="expected 8, got 7"):
        t.populate([1.0] * 7)
    with pytest.raises(ValueError):
        t.populate([1.0] * 9)
    assert t == FixedTensor3(2, 2, 2)


def test_single_element_scaled_by_five():
    point = FixedTensor3.from_values(1, 1, 1, [5], dtype="int64")
    scaled = point * 5
    assert scaled.shape == (1, 1, 1)
    assert scaled.get(0, 0, 0) == 25


@pytest.mark.parametrize("scalar", [3, -2, 0, 2.5, np.float64(0.5)])
def test_scalar_multiplication_commutes(scalar):
    t = FixedTensor3.from_values(2, 1, 2, [1.0, -2.0, 3.5, 0.0])
    assert t * scalar == scalar * t
    assert t.scale(scalar) == t * scalar


def test_numpy_scalar_on_the_left_uses_tensor_scaling():
    t = FixedTensor3.from_values(1, 1, 2, [1, 2], dtype="int64")
    result = np.int64(3) * t
    assert isinstance(result, FixedTensor3)
    assert result.tolist() == [[[3, 6]]]


def test_tensor_times_tensor_is_not_defined():
    a = FixedTensor3.from_values(1, 1, 1, [5], dtype="int64")
    with pytest.raises(TypeError):
        a * a


def test_addition_subtraction_round_trip():
    a = FixedTensor3.from_values(2, 1, 2, [1, 2, 3, 4], dtype="int32")
    b = FixedTensor3.from_values(2, 1, 2, [10, -20, 30, -40], dtype="int32")
    assert (a + b).tolist() == [[[11, -18]], [[33, -36]]]
    assert (a + b) - b == a
    assert (a + b).dtype == np.int32


def test_addition_rejects_different_shapes():
    with pytest.raises(ShapeMismatchError, match="2x1x2 and 1x2x2"):
        FixedTensor3(2, 1, 2) + FixedTensor3(1, 2, 2)


def test_addition_rejects_mixed_element_types():
    with pytest.raises(ElementTypeMismatchError):
        FixedTensor3(1, 1, 1, dtype="int64") - FixedTensor3(1, 1, 1, dtype="int32")


def test_tensor_and_matrix_do_not_mix():
    with pytest.raises(TypeError):
        FixedTensor3(1, 1, 1) + FixedMatrix(1, 1)
    with pytest.raises(TypeError):
        FixedTensor3(1, 1, 1).add(FixedMatrix(1, 1))


def test_division_guard_for_both_element_kinds():
    floats = FixedTensor3.from_values(1, 1, 2, [1.0, 2.0])
    ints = FixedTensor3.from_values(1, 1, 2, [1, 2], dtype="int64")
    with pytest.raises(DivideByZeroError):
        floats / 1e-17
    with pytest.raises(DivideByZeroError):
        ints / 0
    # 0.4 becomes 0 once converted to the integer element type
    with pytest.raises(DivideByZeroError):
        ints / 0.4


def test_negative_divisor_wraps_for_unsigned_tensor():
    t = FixedTensor3.from_values(1, 1, 1, [255], dtype="uint8")
    # -1 becomes 255 in uint8
    assert (t / -1).tolist() == [[[1]]]


def test_division_then_multiplication_recovers_values():
    floats = FixedTensor3.from_values(1, 2, 2, [1.0, -7.5, 3.25, 100.0])
    assert ((floats / 3.0) * 3.0).allclose(floats)
    ints = FixedTensor3.from_values(1, 1, 3, [6, -12, 18], dtype="int64")
    assert (ints / 6) * 6 == ints


def test_repr():
    assert repr(FixedTensor3(1, 2, 3)) == "FixedTensor3(depth=1, rows=2, cols=3, dtype=float64)"
