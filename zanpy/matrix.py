"""A user-facing array type with arithmetic operators and reductions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from zanpy import lin_alg, ops
from zanpy.array import NdArray


class Matrix:
    """An n-dimensional float array supporting +, -, *, / and @."""

    __slots__ = ("_array",)

    def __init__(self, data: Iterable[float], shape: Iterable[int]) -> None:
        self._array = NdArray(data, shape)

    @classmethod
    def _wrap(cls, array: NdArray) -> Matrix:
        matrix = cls.__new__(cls)
        matrix._array = array
        return matrix

    @classmethod
    def ones(cls, shape: Iterable[int]) -> Matrix:
        """A matrix of the given shape filled with 1.0."""
        return cls._wrap(NdArray.ones(shape))

    @classmethod
    def zeros(cls, shape: Iterable[int]) -> Matrix:
        """A matrix of the given shape filled with 0.0."""
        return cls._wrap(NdArray.zeros(shape))

    @classmethod
    def arange(cls, start: float, end: float, step: float) -> Matrix:
        """Evenly spaced values from start towards end, excluding end."""
        return cls._wrap(NdArray.arange(start, end, step))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """A size-by-size identity matrix."""
        return cls._wrap(NdArray.identity(size))

    @property
    def shape(self) -> list[int]:
        """The active dimensions."""
        return list(self._array.shape)

    @property
    def data(self) -> list[float]:
        """A copy of the stored values."""
        return list(self._array.data)

    def __repr__(self) -> str:
        return f"Matrix(data={self.data!r}, shape={self.shape!r})"

    def get(self, indices: Sequence[int]) -> float:
        """The element at the given index."""
        return self._array.get(indices)

    def reshape(self, shape: Iterable[int]) -> Matrix:
        """A new matrix with the same data and a new shape."""
        return Matrix._wrap(self._array.reshape(shape))

    def transpose(self) -> None:
        """Swap the axes of a 2-D matrix in place."""
        self._array.transpose()

    def permute(self, axes: Sequence[int]) -> Matrix:
        """A new matrix with its axes reordered."""
        return Matrix._wrap(self._array.permute(axes))

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix._wrap(ops.add(self._array, other._array))

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix._wrap(ops.subtract(self._array, other._array))

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix._wrap(ops.multiply(self._array, other._array))

    def __truediv__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix._wrap(ops.divide(self._array, other._array))

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix._wrap(lin_alg.mat_mul(self._array, other._array))

    def dot(self, other: Matrix) -> float:
        """Pairwise accumulation of two equal-length vectors."""
        return ops.dot_prod(self._array, other._array)

    def sum(self) -> float:
        """Sum of all values."""
        return ops.total(self._array)

    def mean(self) -> float:
        """Mean of all values."""
        return ops.mean(self._array)

    def max(self) -> float:
        """Largest value."""
        return ops.maximum(self._array)

    def min(self) -> float:
        """Smallest value."""
        return ops.minimum(self._array)

    def inv(self) -> Matrix:
        """The inverse of a square matrix."""
        return Matrix._wrap(lin_alg.inverse(self._array))