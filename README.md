# zanpy

A small array library in pure Python with no dependencies. Arrays hold
floating-point values in row-major order and have between one and eight
dimensions. Element-wise arithmetic broadcasts the way NumPy does, and
two-dimensional arrays support matrix multiplication and inversion.

## Installation

```
pip install .
```

## Usage

`zanpy.matrix.Matrix` is the main entry point:

```python
from zanpy.matrix import Matrix

a = Matrix([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], [2, 3])
b = Matrix([7.0, 8.0, 9.0, 10.0, 11.0, 12.0], [3, 2])

product = a @ b
product.shape            # [2, 2]
product.get([0, 0])      # 58.0

row = Matrix([10.0, 20.0, 30.0], [3])
(a + row).data           # [11.0, 22.0, 33.0, 14.0, 25.0, 36.0]

Matrix.identity(3).inv().data
Matrix.arange(0.0, 5.0, 1.0).data   # [0.0, 1.0, 2.0, 3.0, 4.0]
```

### Constructors

- `Matrix(data, shape)` – values in row-major order and a shape of one to
  eight non-negative dimensions.
- `Matrix.ones(shape)` and `Matrix.zeros(shape)`.
- `Matrix.arange(start, end, step)` – a one-dimensional matrix of values from
  `start` stepping by `step`, never including `end`. A zero step raises
  `ValueError`.
- `Matrix.identity(size)` – a `size` by `size` identity matrix.

### Members

- `shape` – the dimensions as a list.
- `data` – a copy of the stored values in storage order.
- `get(indices)` – one element. The wrong number of indices raises
  `ValueError`; an index outside its dimension raises `IndexError`.
- `reshape(shape)` – a new matrix with the same number of elements.
- `transpose()` – swaps the two axes of a two-dimensional matrix in place.
- `permute(axes)` – a new matrix with its axes reordered.

`transpose()` and `permute()` change how elements are addressed, not how they
are stored: `get` sees the new order, while `data` keeps the original storage
order.

### Arithmetic

- `+`, `-`, `*` and `/` work element by element between two `Matrix` values,
  with broadcasting. Division by zero gives `inf` or `nan` rather than raising.
- `@` is the matrix product of two two-dimensional matrices.
- `inv()` inverts a square matrix by Gauss-Jordan elimination with partial
  pivoting; a matrix whose pivot falls below `1e-12` is treated as singular.
- `dot(other)` takes two one-dimensional matrices of equal length and returns
  the total of `a + b` over each pair of elements.

### Reductions

`sum()`, `mean()`, `max()` and `min()` run over every stored value. The mean
of an empty matrix is `nan`; `max()` and `min()` of an empty matrix raise
`ValueError`.

Incompatible shapes and singular matrices raise `ValueError`.

### Lower-level pieces

- `zanpy.array.NdArray` – the array type underneath `Matrix`, with `get`,
  `set`, `value_at`, `reshape`, `transpose`, `permute` and the same
  constructors; `zanpy.array.broadcast(first, second)` returns the broadcast
  shape and the strides to read each operand with.
- `zanpy.ops` – `add`, `subtract`, `multiply`, `divide`, `dot_prod`, `total`,
  `mean`, `maximum` and `minimum` on `NdArray` values.
- `zanpy.lin_alg` – `mat_mul` and `inverse` on `NdArray` values.

## Limitations

Arithmetic operators accept only other `Matrix` values: there is no
arithmetic with plain numbers. Matrix multiplication and inversion are limited
to two dimensions, and there is no conversion to or from other array
libraries.

## Running the tests

```
pip install .[test]
pytest
```