"""
Dense two-dimensional matrix backed by a flat numpy buffer.

The quantile components only rely on the matrix contract: a flat `data`
buffer indexable by linear index, a `(rows, cols)` shape, a dtype name and
the total element count `length`.
"""
from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

import numpy as np

from weibull_quantile import dtypes
from weibull_quantile.transformers.base import MatrixShapeError


def _normalize_shape(shape: Any) -> Tuple[int, int]:
    try:
        rows, cols = (int(s) for s in shape)
    except (TypeError, ValueError):
        raise MatrixShapeError(f"Matrix shape must be a pair of integers, got {shape!r}")
    if rows < 0 or cols < 0:
        raise MatrixShapeError(f"Matrix dimensions must be non-negative, got {shape!r}")
    return rows, cols


class Matrix:
    """Row-major matrix with an explicit dtype tag."""

    ndims = 2

    def __init__(self, data: Any, shape: Sequence[int], dtype: str = "float64"):
        rows, cols = _normalize_shape(shape)
        target = dtypes.numpy_dtype(dtype)

        if isinstance(data, np.ndarray) and data.dtype == target:
            # Share the caller's buffer, like a typed-array backed matrix does
            buf = data.reshape(-1)
        else:
            buf = dtypes.cast(np.asarray(data, dtype=np.float64).reshape(-1), dtype)

        if buf.size != rows * cols:
            raise MatrixShapeError(
                f"Matrix data has {buf.size} elements but shape {rows}x{cols} "
                f"requires {rows * cols}"
            )

        self.data = buf
        self.shape = (rows, cols)
        self.dtype = dtype
        self.length = rows * cols
        self.strides = (cols, 1)

    def get(self, i: int, j: int) -> Any:
        return self.data[self._offset(i, j)]

    def set(self, i: int, j: int, value: float) -> "Matrix":
        self.data[self._offset(i, j)] = dtypes.cast([value], self.dtype)[0]
        return self

    def _offset(self, i: int, j: int) -> int:
        rows, cols = self.shape
        if not (0 <= i < rows and 0 <= j < cols):
            raise IndexError(f"Index ({i}, {j}) out of bounds for shape {rows}x{cols}")
        return i * cols + j

    def to_numpy(self) -> np.ndarray:
        """2-D view onto the data buffer."""
        return self.data.reshape(self.shape)

    def __len__(self) -> int:
        return self.length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.shape == other.shape
            and self.dtype == other.dtype
            and np.array_equal(self.data, other.data, equal_nan=self.data.dtype.kind == "f")
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix(shape={self.shape}, dtype={self.dtype!r})"

    def __str__(self) -> str:
        rows = self.to_numpy()
        return ";".join(",".join(str(v) for v in row.tolist()) for row in rows)


def matrix(*args: Any) -> Matrix:
    """Create a matrix.

    matrix(shape)                  zero-filled float64
    matrix(shape, dtype)           zero-filled
    matrix(data, shape)            float64 from data
    matrix(data, shape, dtype)
    """
    data: Optional[Any] = None
    dtype = "float64"

    if len(args) == 1:
        shape = args[0]
    elif len(args) == 2 and (isinstance(args[1], str) or args[1] is None):
        shape, dtype = args[0], args[1] or "float64"
    elif len(args) == 2:
        data, shape = args
    elif len(args) == 3:
        data, shape, dtype = args
    else:
        raise TypeError(f"matrix() takes 1 to 3 arguments ({len(args)} given)")

    rows, cols = _normalize_shape(shape)
    if data is None:
        data = np.zeros(rows * cols, dtype=dtypes.numpy_dtype(dtype))
    return Matrix(data, (rows, cols), dtype)
