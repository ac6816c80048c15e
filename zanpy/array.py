"""N-dimensional arrays of floats stored as flat row-major data with strides."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import accumulate, zip_longest
from operator import mul

MAX_RANK = 8

Shape = tuple[int, ...]


def _check_shape(shape: Iterable[int]) -> Shape:
    dims = tuple(int(dim) for dim in shape)
    if not dims:
        raise ValueError("Shape must have at least one dimension")
    if len(dims) > MAX_RANK:
        raise ValueError(f"zanpy only supports up to {MAX_RANK} dimensions!")
    if any(dim < 0 for dim in dims):
        raise ValueError("Shape dimensions must be non-negative")
    return dims


def _contiguous_strides(shape: Shape) -> Shape:
    """Row-major strides: the last axis has stride 1."""
    steps = accumulate(reversed(shape[1:]), mul, initial=1)
    return tuple(reversed(list(steps)))


class NdArray:
    """A dense array of floats addressed through a shape and strides."""

    __slots__ = ("data", "shape", "strides")

    def __init__(self, data: Iterable[float], shape: Iterable[int]) -> None:
        self.data: list[float] = [float(value) for value in data]
        self.shape: Shape = _check_shape(shape)
        self.strides: Shape = _contiguous_strides(self.shape)

    @classmethod
    def _from_parts(cls, data: list[float], shape: Shape, strides: Shape) -> NdArray:
        array = cls.__new__(cls)
        array.data = data
        array.shape = shape
        array.strides = strides
        return array

    @property
    def rank(self) -> int:
        """Number of dimensions."""
        return len(self.shape)

    def __repr__(self) -> str:
        return f"NdArray(data={self.data!r}, shape={list(self.shape)!r})"

    def _offset(self, indices: Sequence[int]) -> int:
        indices = tuple(indices)
        if len(indices) != self.rank:
            raise ValueError("Wrong number of indices")
        if any(not 0 <= index < dim for index, dim in zip(indices, self.shape)):
            raise IndexError("Index is out of range")
        return sum(stride * index for stride, index in zip(self.strides, indices))

    def get(self, indices: Sequence[int]) -> float:
        """Return the element at the given multi-dimensional index."""
        return self.data[self._offset(indices)]

    def set(self, indices: Sequence[int], value: float) -> None:
        """Store a value at the given multi-dimensional index."""
        self.data[self._offset(indices)] = float(value)

    def value_at(self, strides: Sequence[int], indices: Sequence[int]) -> float:
        """Read an element using explicit strides; a zero stride repeats an axis."""
        offset = sum(
            stride * index for stride, index in zip(strides, indices, strict=True)
        )
        return self.data[offset]

    @classmethod
    def ones(cls, shape: Iterable[int]) -> NdArray:
        """An array of the given shape filled with 1.0."""
        dims = _check_shape(shape)
        return cls([1.0] * math.prod(dims), dims)

    @classmethod
    def zeros(cls, shape: Iterable[int]) -> NdArray:
        """An array of the given shape filled with 0.0."""
        dims = _check_shape(shape)
        return cls([0.0] * math.prod(dims), dims)

    @classmethod
    def arange(cls, start: float, end: float, step: float) -> NdArray:
        """Evenly spaced values from start towards end, never including end."""
        if step == 0:
            raise ValueError("Step must not be zero")
        span = (end - start) / step
        if math.isnan(span):
            count = 0
        elif math.isinf(span):
            raise ValueError("Range is unbounded")
        else:
            count = max(0, math.ceil(span))
        return cls((start + i * step for i in range(count)), (count,))

    @classmethod
    def identity(cls, size: int) -> NdArray:
        """A size-by-size identity matrix."""
        matrix = cls.zeros((size, size))
        for i in range(size):
            matrix.set((i, i), 1.0)
        return matrix

    def reshape(self, shape: Iterable[int]) -> NdArray:
        """A copy of the data viewed through a new shape of equal size."""
        dims = _check_shape(shape)
        if math.prod(self.shape) != math.prod(dims):
            raise ValueError("Shape values don't match")
        return NdArray(self.data, dims)

    def transpose(self) -> None:
        """Swap the two axes of a matrix in place."""
        if self.rank != 2:
            raise ValueError("Transposition is only allowed for two dimensions")
        self.shape = self.shape[::-1]
        self.strides = self.strides[::-1]

    def permute(self, axes: Sequence[int]) -> NdArray:
        """A new array whose axes are reordered as given."""
        axes = tuple(axes)
        if len(axes) != self.rank:
            raise ValueError("Permutation must match the number of dimensions")
        if any(not 0 <= axis < self.rank for axis in axes):
            raise ValueError("Axis is out of range")
        shape = tuple(self.shape[axis] for axis in axes)
        strides = tuple(self.strides[axis] for axis in axes)
        return NdArray._from_parts(list(self.data), shape, strides)


def broadcast(first: NdArray, second: NdArray) -> tuple[Shape, Shape, Shape]:
    """Return the broadcast shape and the strides to read each operand with it."""
    if first.shape == second.shape:
        return first.shape, first.strides, second.strides

    shape: list[int] = []
    strides1: list[int] = []
    strides2: list[int] = []
    pairs = zip_longest(
        reversed(list(zip(first.shape, first.strides))),
        reversed(list(zip(second.shape, second.strides))),
        fillvalue=(1, 0),
    )
    for (dim1, stride1), (dim2, stride2) in pairs:
        if dim1 != dim2 and dim1 != 1 and dim2 != 1:
            raise ValueError("Dimensions are not compatible")
        shape.append(max(dim1, dim2))
        strides1.append(0 if dim1 == 1 else stride1)
        strides2.append(0 if dim2 == 1 else stride2)

    return tuple(reversed(shape)), tuple(reversed(strides1)), tuple(reversed(strides2))