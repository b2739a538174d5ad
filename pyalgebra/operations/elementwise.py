"""
Shape-preserving operations: transpose, sum and times.

None of these mutate their operands; every result is a new container.
"""

from typing import Any

from pyalgebra.containers.matrix import Matrix
from pyalgebra.containers.vector import Vector
from pyalgebra.core.validation import check_real, check_same_shape
from pyalgebra.operations._dispatch import Kind, kinds_of, reject


def transpose(a: Matrix | Vector) -> Matrix | Vector:
    """
    Transpose a matrix, or copy a vector.

    A Vector has no orientation, so its transpose is an equal Vector with
    its own storage.

    Args:
        a: Matrix (m x n) or Vector

    Returns:
        Matrix (n x m) with element (j, i) = a(i, j), or a Vector copy

    Raises:
        UnsupportedOperandError: If a is neither a Matrix nor a Vector
    """
    kind, = kinds_of(a)
    if kind is Kind.MATRIX:
        elements = a.elements
        transposed = [[row[j] for row in elements] for j in range(a.cols)]
        return Matrix(a.cols, a.rows, transposed)
    if kind is Kind.VECTOR:
        return Vector(a.dim, a.elements)
    reject('transpose', a)


def sum(a: Matrix | Vector, b: Matrix | Vector) -> Matrix | Vector:
    """
    Elementwise sum of two matrices or two vectors.

    Raises:
        ShapeError: If the operands' shapes differ
        UnsupportedOperandError: If the operands are not both matrices or
            both vectors
    """
    kinds = kinds_of(a, b)
    if kinds == (Kind.MATRIX, Kind.MATRIX):
        check_same_shape(a.shape, b.shape, 'sum')
        result = [
            [x + y for x, y in zip(row_a, row_b)]
            for row_a, row_b in zip(a.elements, b.elements)
        ]
        return Matrix(a.rows, a.cols, result)
    if kinds == (Kind.VECTOR, Kind.VECTOR):
        check_same_shape(a.shape, b.shape, 'sum')
        return Vector(a.dim, [x + y for x, y in zip(a.elements, b.elements)])
    reject('sum', a, b)


def times(a: Any, b: Any) -> Matrix | Vector:
    """
    Scalar or elementwise product.

    Signatures, matched in this order:
        1. (scalar, Matrix): every element scaled by the scalar
        2. (Matrix, Matrix): elementwise (Hadamard) product, not the
           matrix product (see dot)
        3. (Vector, Vector): elementwise product, returned as a Vector

    Raises:
        ShapeError: If two container operands differ in shape
        UnsupportedOperandError: For any other combination, including
            (Matrix, scalar) and (Matrix, Vector)
    """
    kinds = kinds_of(a, b)
    if kinds == (Kind.SCALAR, Kind.MATRIX):
        scalar = check_real(a, 'a')
        result = [[scalar * x for x in row] for row in b.elements]
        return Matrix(b.rows, b.cols, result)
    if kinds == (Kind.MATRIX, Kind.MATRIX):
        check_same_shape(a.shape, b.shape, 'times')
        result = [
            [x * y for x, y in zip(row_a, row_b)]
            for row_a, row_b in zip(a.elements, b.elements)
        ]
        return Matrix(a.rows, a.cols, result)
    if kinds == (Kind.VECTOR, Kind.VECTOR):
        check_same_shape(a.shape, b.shape, 'times')
        return Vector(a.dim, [x * y for x, y in zip(a.elements, b.elements)])
    reject('times', a, b)
