"""
Input validation utilities for PyAlgebra.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except integer -> float for element values)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import (
    ElementIndexError,
    ShapeError,
    UnsupportedOperandError,
    ValidationError,
)


def is_real(value: Any) -> bool:
    """
    True for real scalars: Python/NumPy ints and floats, never bool.

    numbers.Real covers NumPy scalar types through the abstract base
    class registry.
    """
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def check_positive_int(value: Any, name: str) -> int:
    """
    Validate a container dimension.

    Args:
        value: Dimension to validate
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not an integer or is < 1
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        )
    if value < 1:
        raise ValidationError(f"{name}: expected a positive integer, got {value}")
    return int(value)


def check_real(value: Any, name: str) -> float:
    """
    Validate a single element value.

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number, or is an integer
            too large to represent as a float
    """
    if not is_real(value):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    try:
        return float(value)
    except OverflowError as e:
        raise ValidationError(
            f"{name}: {type(value).__name__} value too large to represent as a float"
        ) from e


def _real_object_array(
    result: NDArray[Any],
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Convert an object-dtype array whose entries are all real scalars.

    NumPy falls back to object dtype for reals it has no dtype for, such as
    fractions.Fraction or integers beyond 64 bits.
    """
    values = result.ravel().tolist()
    if not all(is_real(v) for v in values):
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    converted = [check_real(v, name) for v in values]
    return np.array(converted, dtype=np.float64).reshape(result.shape)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert element data to a float64 numpy array.

    Shape must already be validated by the caller; this only checks the
    element values. Accepts exactly the values check_real accepts: rejects
    mixed or non-numeric data, booleans and complex numbers.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to a real array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        return _real_object_array(result, name)

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64)


def check_index(
    index: Any,
    size: int,
    name: str,
    shape: tuple[int, ...] | None = None,
) -> int:
    """
    Validate a zero-based element index against a dimension.

    Negative indices are out of range; there is no wrap-around.

    Args:
        index: Index to validate
        size: Length of the dimension being indexed
        name: Parameter name for error messages
        shape: Full container shape, attached to the raised error

    Returns:
        The index as a plain int

    Raises:
        UnsupportedOperandError: If index is not an integer
        ElementIndexError: If index is outside [0, size - 1]
    """
    if isinstance(index, (bool, np.bool_)):
        raise UnsupportedOperandError(
            f"{name}: index must be an integer, got bool",
            kinds=('bool',),
        )
    try:
        i = operator.index(index)
    except TypeError as e:
        raise UnsupportedOperandError(
            f"{name}: index must be an integer, got {type(index).__name__}",
            kinds=(type(index).__name__,),
        ) from e

    if not 0 <= i < size:
        raise ElementIndexError(
            f"{name}: index {i} out of bounds, valid range is [0, {size - 1}]",
            index=(i,),
            shape=shape,
        )
    return i


def check_same_shape(
    a: tuple[int, ...],
    b: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Args:
        a: Shape of the left operand
        b: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        ShapeError: If shapes differ
    """
    if a != b:
        raise ShapeError(
            f"{operation}: incompatible dimensions {a} and {b}, shapes must match",
            expected=a,
            actual=b,
        )
