"""
Dense real matrix container.

A Matrix has fixed dimensions chosen at construction and owns its element
storage. Elements may be changed in place through set(); every operation in
pyalgebra.operations returns a new Matrix instead of touching its operands.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import ShapeError, ValidationError
from pyalgebra.core.validation import (
    check_array,
    check_index,
    check_positive_int,
    check_real,
)


class Matrix:
    """
    Rectangular, fixed-size, mutable matrix of real numbers.

    Indices are zero-based; the valid range is [0, rows-1] x [0, cols-1].
    Negative indices are rejected rather than counted from the end.

    Construction:
        Matrix(2, 2, [[1, 2], [3, 4]])
        Matrix.from_numpy(np.eye(3))

    Raises (construction):
        ValidationError: If rows/cols are not positive integers or an
            element is not a real number
        ShapeError: If elements don't have exactly rows rows of cols entries
    """

    __slots__ = ('_rows', '_cols', '_elements')

    def __init__(self, rows: int, cols: int, elements: list[list[float]]):
        self._rows = check_positive_int(rows, 'rows')
        self._cols = check_positive_int(cols, 'cols')

        if not hasattr(elements, '__len__'):
            raise ValidationError(
                f"elements: expected a sequence of rows, got {type(elements).__name__}"
            )
        if len(elements) != self._rows:
            raise ShapeError(
                f"elements: invalid number of rows, expected {self._rows}, got {len(elements)}",
                expected=(self._rows, self._cols),
            )
        for i, row in enumerate(elements):
            n_cols = len(row) if hasattr(row, '__len__') else None
            if n_cols != self._cols:
                got = repr(row) if n_cols is None else n_cols
                raise ShapeError(
                    f"elements: invalid number of columns in row {i}, "
                    f"expected {self._cols}, got {got}",
                    expected=(self._rows, self._cols),
                )

        arr = check_array(elements, 'elements')
        if arr.ndim != 2:
            raise ShapeError(
                f"elements: expected rows of scalars, got {arr.ndim}D with shape {arr.shape}",
                expected=(self._rows, self._cols),
                actual=arr.shape,
            )
        self._elements: list[list[float]] = arr.tolist()

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix:
        """Build a Matrix from a 2-D array-like."""
        arr = check_array(array, 'array')
        if arr.ndim != 2:
            raise ShapeError(
                f"array: expected 2D array, got {arr.ndim}D with shape {arr.shape}",
                actual=arr.shape,
            )
        rows, cols = arr.shape
        return cls(rows, cols, arr.tolist())

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def elements(self) -> list[list[float]]:
        """Copy of the element rows. Mutating it does not affect the matrix."""
        return [list(row) for row in self._elements]

    def get(self, i: int, j: int) -> float:
        """
        Return element (i, j).

        Raises:
            ElementIndexError: If i or j is out of bounds
        """
        i = check_index(i, self._rows, 'i', shape=self.shape)
        j = check_index(j, self._cols, 'j', shape=self.shape)
        return self._elements[i][j]

    def set(self, i: int, j: int, value: float) -> None:
        """
        Overwrite element (i, j) in place.

        Raises:
            ElementIndexError: If i or j is out of bounds
            ValidationError: If value is not a real number
        """
        i = check_index(i, self._rows, 'i', shape=self.shape)
        j = check_index(j, self._cols, 'j', shape=self.shape)
        self._elements[i][j] = check_real(value, 'value')

    def copy(self) -> Matrix:
        return Matrix(self._rows, self._cols, self._elements)

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        return np.array(self._elements, dtype=np.float64)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._elements == other._elements

    # Mutable container
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, elements={self._elements!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(repr(x) for x in row) for row in self._elements)
