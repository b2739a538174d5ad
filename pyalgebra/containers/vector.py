"""
Dense real vector container.

Vectors carry no row/column orientation.
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


class Vector:
    """
    Fixed-size, mutable vector of real numbers.

    Construction:
        Vector(3, [1, 2, 3])
        Vector.from_numpy(np.zeros(4))

    Raises (construction):
        ValidationError: If dim is not a positive integer or an element is
            not a real number
        ShapeError: If len(elements) != dim
    """

    __slots__ = ('_dim', '_elements')

    def __init__(self, dim: int, elements: list[float]):
        self._dim = check_positive_int(dim, 'dim')

        if not hasattr(elements, '__len__'):
            raise ValidationError(
                f"elements: expected a sequence, got {type(elements).__name__}"
            )
        if len(elements) != self._dim:
            raise ShapeError(
                f"elements: invalid number of elements, expected {self._dim}, got {len(elements)}",
                expected=(self._dim,),
                actual=(len(elements),),
            )

        arr = check_array(elements, 'elements')
        if arr.ndim != 1:
            raise ShapeError(
                f"elements: expected a flat sequence, got {arr.ndim}D with shape {arr.shape}",
                expected=(self._dim,),
                actual=arr.shape,
            )
        self._elements: list[float] = arr.tolist()

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Vector:
        """Build a Vector from a 1-D array-like."""
        arr = check_array(array, 'array')
        if arr.ndim != 1:
            raise ShapeError(
                f"array: expected 1D array, got {arr.ndim}D with shape {arr.shape}",
                actual=arr.shape,
            )
        return cls(arr.shape[0], arr.tolist())

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def shape(self) -> tuple[int]:
        return (self._dim,)

    @property
    def elements(self) -> list[float]:
        """Copy of the elements. Mutating it does not affect the vector."""
        return list(self._elements)

    def get(self, i: int) -> float:
        """
        Return element i.

        Raises:
            ElementIndexError: If i is outside [0, dim-1]
        """
        i = check_index(i, self._dim, 'i', shape=self.shape)
        return self._elements[i]

    def set(self, i: int, value: float) -> None:
        """
        Overwrite element i in place.

        Raises:
            ElementIndexError: If i is outside [0, dim-1]
            ValidationError: If value is not a real number
        """
        i = check_index(i, self._dim, 'i', shape=self.shape)
        self._elements[i] = check_real(value, 'value')

    def copy(self) -> Vector:
        return Vector(self._dim, self._elements)

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        return np.array(self._elements, dtype=np.float64)

    def __len__(self) -> int:
        return self._dim

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector(dim={self._dim}, elements={self._elements!r})"

    def __str__(self) -> str:
        return " ".join(repr(x) for x in self._elements)
