"""Dense row-major matrix used by the network engine.

The matrix owns a private float64 ``numpy`` buffer. Every constructor copies
its input and every accessor that exposes values returns a copy, so no two
components ever alias the same storage. Only the in-place helpers
(:meth:`Matrix.apply_` and :meth:`Matrix.combine_`) mutate a matrix.
"""
from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence, Tuple

import numpy as np

from ..errors import ShapeError

ElementwiseFn = Callable[[np.ndarray], np.ndarray]
CombineFn = Callable[[np.ndarray, np.ndarray], np.ndarray]


class Matrix:
    """Two-dimensional array of reals with matrix multiply, apply, combine and transpose."""

    __slots__ = ("_data",)

    def __init__(self, rows: int, cols: int, data: Optional[Iterable[float]] = None) -> None:
        if data is None:
            self._data = np.zeros((rows, cols), dtype=np.float64)
        else:
            flat = np.array(list(data), dtype=np.float64)
            if flat.size != rows * cols:
                raise ShapeError(f"expected {rows * cols} values for a {rows}x{cols} matrix, got {flat.size}")
            self._data = flat.reshape(rows, cols)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "Matrix":
        matrix = cls.__new__(cls)
        matrix._data = array
        return matrix

    @classmethod
    def from_array(cls, array) -> "Matrix":
        """Copy a 2-D array-like (or another matrix) into a new matrix."""

        data = np.array(array, dtype=np.float64, copy=True)
        if data.ndim != 2:
            raise ShapeError(f"matrix data must be 2-D, got {data.ndim}-D")
        return cls._wrap(data)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        return cls.from_array(rows)

    @classmethod
    def uniform(cls, rows: int, cols: int, rng: np.random.Generator) -> "Matrix":
        """Fill a ``rows x cols`` matrix with independent draws from ``[0, 1)``."""

        return cls._wrap(rng.random((rows, cols)))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def shape(self) -> Tuple[int, int]:
        rows, cols = self._data.shape
        return int(rows), int(cols)

    @property
    def rows(self) -> int:
        return self.shape[0]

    @property
    def cols(self) -> int:
        return self.shape[1]

    def at(self, i: int, j: int) -> float:
        return float(self._data[i, j])

    def row(self, i: int) -> list[float]:
        return self._data[i].tolist()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    def copy(self) -> "Matrix":
        return Matrix._wrap(self._data.copy())

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._data, dtype=dtype, copy=True)

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"Matrix(rows={rows}, cols={cols})"

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------
    def matmul(self, other: "Matrix") -> "Matrix":
        """Matrix product ``self x other``."""

        if self.cols != other.rows:
            raise ShapeError(f"cannot multiply {self.shape} by {other.shape}")
        return Matrix._wrap(self._data @ other._data)

    def apply(self, func: ElementwiseFn) -> "Matrix":
        """Return a new matrix with ``func`` applied to every element."""

        return Matrix._wrap(self._checked(func(self._data.copy()), self.shape))

    def combine(self, other: "Matrix", func: CombineFn) -> "Matrix":
        """Element-wise binary operation between two matrices of identical shape."""

        self._require_same_shape(other)
        return Matrix._wrap(self._checked(func(self._data.copy(), other._data.copy()), self.shape))

    def transpose(self) -> "Matrix":
        return Matrix._wrap(self._data.T.copy())

    # In-place variants, reserved for weight updates.
    def apply_(self, func: ElementwiseFn) -> "Matrix":
        self._data[...] = self._checked(func(self._data.copy()), self.shape)
        return self

    def combine_(self, other: "Matrix", func: CombineFn) -> "Matrix":
        self._require_same_shape(other)
        self._data[...] = self._checked(func(self._data.copy(), other._data.copy()), self.shape)
        return self

    def _require_same_shape(self, other: "Matrix") -> None:
        if self.shape != other.shape:
            raise ShapeError(f"element-wise operation needs equal shapes, got {self.shape} and {other.shape}")

    @staticmethod
    def _checked(result: np.ndarray, shape: Tuple[int, int]) -> np.ndarray:
        result = np.asarray(result, dtype=np.float64)
        if result.shape != shape:
            raise ShapeError(f"element-wise function changed shape {shape} to {result.shape}")
        return result


def as_matrix(value) -> Matrix:
    """Coerce an array-like boundary value to a :class:`Matrix` copy."""

    if isinstance(value, Matrix):
        return value.copy()
    return Matrix.from_array(value)


__all__ = ["Matrix", "as_matrix"]
