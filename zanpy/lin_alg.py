"""Matrix multiplication and inversion for two-dimensional arrays."""

from __future__ import annotations

from zanpy.array import NdArray

SINGULAR_TOLERANCE = 1e-12


def _rows(array: NdArray) -> list[list[float]]:
    """The elements of a 2-D array as rows, honouring its strides."""
    rows, cols = array.shape
    return [[array.get((i, j)) for j in range(cols)] for i in range(rows)]


def mat_mul(first: NdArray, second: NdArray) -> NdArray:
    """The matrix product of two 2-D arrays."""
    if first.rank != 2 or second.rank != 2:
        raise ValueError("Error: Only 2D Matrices Are Allowed")
    rows_a, cols_a = first.shape
    rows_b, cols_b = second.shape
    if cols_a != rows_b:
        raise ValueError("Error: Matrix 1 Column Does Not Match Matrix 2 Rows")

    left = _rows(first)
    columns = list(zip(*_rows(second))) if rows_b else [()] * cols_b
    data = [
        sum((a * b for a, b in zip(row, column)), 0.0)
        for row in left
        for column in columns
    ]
    return NdArray(data, (rows_a, cols_b))


def inverse(array: NdArray) -> NdArray:
    """The inverse of a square matrix by Gauss-Jordan elimination with partial pivoting."""
    if array.rank != 2 or array.shape[0] != array.shape[1]:
        raise ValueError("Matrix must be a square & two dimensional")
    n = array.shape[0]

    work = _rows(array)
    result = _rows(NdArray.identity(n))

    for col in range(n):
        # Ties go to the lowest row in the column.
        pivot_row = max(reversed(range(col, n)), key=lambda r: abs(work[r][col]))
        if abs(work[pivot_row][col]) < SINGULAR_TOLERANCE:
            raise ValueError("Matrix is singular and cannot be inverted!")

        if pivot_row != col:
            work[col], work[pivot_row] = work[pivot_row], work[col]
            result[col], result[pivot_row] = result[pivot_row], result[col]

        pivot_val = work[col][col]
        for row in range(n):
            if row == col:
                continue
            factor = work[row][col] / pivot_val
            work[row] = [x - factor * p for x, p in zip(work[row], work[col])]
            result[row] = [x - factor * p for x, p in zip(result[row], result[col])]

        work[col] = [x / pivot_val for x in work[col]]
        result[col] = [x / pivot_val for x in result[col]]

    return NdArray([value for row in result for value in row], (n, n))