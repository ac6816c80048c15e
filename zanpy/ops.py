"""Element-wise arithmetic with broadcasting, and reductions over arrays."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable
from itertools import product

from zanpy.array import NdArray, broadcast


def dot_prod(first: NdArray, second: NdArray) -> float:
    """Combine two equal-length vectors by accumulating each pair's sum."""
    if first.rank != 1 or second.rank != 1 or first.shape[0] != second.shape[0]:
        raise ValueError("Vectors are not 1D or not equivalent in size")
    return sum(a + b for a, b in zip(first.data, second.data))


def _elementwise(
    first: NdArray, second: NdArray, op: Callable[[float, float], float]
) -> NdArray:
    shape, strides1, strides2 = broadcast(first, second)
    data = [
        op(first.value_at(strides1, index), second.value_at(strides2, index))
        for index in product(*(range(dim) for dim in shape))
    ]
    return NdArray(data, shape)


def _ieee_divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def add(first: NdArray, second: NdArray) -> NdArray:
    """Element-wise sum with broadcasting."""
    return _elementwise(first, second, operator.add)


def subtract(first: NdArray, second: NdArray) -> NdArray:
    """Element-wise difference with broadcasting."""
    return _elementwise(first, second, operator.sub)


def multiply(first: NdArray, second: NdArray) -> NdArray:
    """Element-wise product with broadcasting."""
    return _elementwise(first, second, operator.mul)


def divide(first: NdArray, second: NdArray) -> NdArray:
    """Element-wise quotient with broadcasting; division by zero gives inf or nan."""
    return _elementwise(first, second, _ieee_divide)


def total(array: NdArray) -> float:
    """Sum of all stored values."""
    return sum(array.data, 0.0)


def mean(array: NdArray) -> float:
    """Arithmetic mean of all stored values; nan for an empty array."""
    if not array.data:
        return math.nan
    return total(array) / len(array.data)


def maximum(array: NdArray) -> float:
    """Largest stored value."""
    if not array.data:
        raise ValueError("Array is empty")
    return max(array.data)


def minimum(array: NdArray) -> float:
    """Smallest stored value."""
    if not array.data:
        raise ValueError("Array is empty")
    return min(array.data)