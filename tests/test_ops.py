import math

import pytest

from zanpy.array import NdArray
from zanpy.ops import (
    add,
    divide,
    dot_prod,
    maximum,
    mean,
    minimum,
    multiply,
    subtract,
    total,
)


@pytest.fixture
def grid():
    return NdArray([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], [2, 3])


@pytest.fixture
def other():
    return NdArray([6.0, 5.0, 4.0, 3.0, 2.0, 1.0], [2, 3])


def test_add_is_commutative(grid, other):
    assert add(grid, other).data == add(other, grid).data


def test_add_then_subtract_round_trip(grid, other):
    restored = subtract(add(grid, other), other)
    assert restored.data == grid.data
    assert restored.shape == grid.shape


def test_subtract_self_is_zero(grid):
    assert subtract(grid, grid).data == [0.0] * 6


def test_multiply_by_ones_is_identity(grid):
    assert multiply(grid, NdArray.ones([2, 3])).data == grid.data


def test_divide_self_is_one(grid):
    assert divide(grid, grid).data == [1.0] * 6


def test_add_broadcast_zero_row(grid):
    result = add(grid, NdArray.zeros([3]))
    assert result.shape == (2, 3)
    assert result.data == grid.data


def test_multiply_broadcast_column_and_row():
    column = NdArray([2.0, 3.0], [2, 1])
    row = NdArray.ones([1, 4])
    result = multiply(column, row)
    assert result.shape == (2, 4)
    assert result.data == [2.0] * 4 + [3.0] * 4


def test_broadcast_respects_transposed_strides(grid):
    original = NdArray(grid.data, grid.shape)
    grid.transpose()
    result = add(grid, NdArray.zeros([3, 2]))
    assert result.get([2, 1]) == original.get([1, 2])


def test_incompatible_shapes_raise():
    with pytest.raises(ValueError):
        add(NdArray.zeros([2, 3]), NdArray.zeros([3, 2]))


def test_divide_by_zero_follows_float_rules():
    result = divide(NdArray([1.0, -1.0, 0.0], [3]), NdArray.zeros([3]))
    assert result.data[0] == math.inf
    assert result.data[1] == -math.inf
    assert math.isnan(result.data[2])


def test_dot_prod_of_zeros():
    assert dot_prod(NdArray.zeros([4]), NdArray.zeros([4])) == 0.0


def test_dot_prod_accumulates_pair_sums():
    assert dot_prod(NdArray([1.0, 2.0], [2]), NdArray([3.0, 4.0], [2])) == 10.0


def test_dot_prod_rejects_matrices(grid, other):
    with pytest.raises(ValueError):
        dot_prod(grid, other)


def test_dot_prod_rejects_length_mismatch():
    with pytest.raises(ValueError):
        dot_prod(NdArray.zeros([2]), NdArray.zeros([3]))


def test_total_of_ones():
    assert total(NdArray.ones([3, 4])) == 12.0


def test_mean_of_constant_array():
    assert mean(NdArray.ones([5, 2])) == 1.0


def test_mean_of_empty_is_nan():
    assert repr(mean(NdArray.zeros([0]))) == "nan"


def test_mean_times_count_is_total(grid):
    assert mean(grid) * len(grid.data) == total(grid)


def test_maximum_and_minimum():
    array = NdArray([3.0, -2.5, 9.0, 0.0], [2, 2])
    assert maximum(array) == 9.0
    assert minimum(array) == -2.5


def test_maximum_of_empty_raises():
    with pytest.raises(ValueError):
        maximum(NdArray.zeros([0]))


def test_minimum_of_empty_raises():
    with pytest.raises(ValueError):
        minimum(NdArray.zeros([0]))