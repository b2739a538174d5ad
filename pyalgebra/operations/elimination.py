"""
Gaussian elimination and linear-system solving.

Elimination never swaps rows. A pivot that is exactly zero raises
SingularMatrixError, even when a row exchange would have avoided it.
Pivots that are merely tiny are not detected; if they blow a finite
working matrix up to inf/nan a RuntimeWarning is emitted and the result is
returned as computed.
"""

import warnings

import numpy as np

from pyalgebra.containers.matrix import Matrix
from pyalgebra.containers.vector import Vector
from pyalgebra.core.exceptions import ShapeError, SingularMatrixError
from pyalgebra.operations._dispatch import Kind, kind_of, kinds_of, reject


def _forward_eliminate(m: list[list[float]], matrix_name: str) -> None:
    """
    Reduce m to row-echelon form in place.

    One pivot per row. Each row update spans from the pivot column to the
    last column, so an augmented right-hand side is reduced with the
    coefficients. Columns left of the pivot are already zero and skipped.
    """
    n = len(m)
    input_finite = bool(np.all(np.isfinite(m)))
    for i in range(n):
        pivot = m[i][i]
        if pivot == 0:
            raise SingularMatrixError(
                f"{matrix_name}: zero pivot at row {i}; elimination without "
                f"row exchanges cannot proceed",
                matrix_name=matrix_name,
                pivot_index=i,
            )
        pivot_row = m[i]
        for k in range(i + 1, n):
            factor = m[k][i] / pivot
            row = m[k]
            for j in range(i, len(row)):
                row[j] -= factor * pivot_row[j]

    if input_finite and not np.all(np.isfinite(m)):
        warnings.warn(
            f"{matrix_name}: elimination of a finite matrix produced non-finite "
            f"values; the matrix likely has near-zero pivots",
            RuntimeWarning,
            stacklevel=3,
        )


def gauss(a: Matrix) -> Matrix:
    """
    Forward Gaussian elimination without pivoting.

    Works on a copy; a is left untouched.

    Args:
        a: Square matrix (n x n)

    Returns:
        New n x n Matrix in row-echelon (upper triangular) form

    Raises:
        ShapeError: If a is not square
        SingularMatrixError: If a pivot is exactly zero
        UnsupportedOperandError: If a is not a Matrix
    """
    if kind_of(a) is not Kind.MATRIX:
        reject('gauss', a)
    if a.rows != a.cols:
        raise ShapeError(
            f"gauss: matrix must be square, got shape {a.shape}",
            expected=(a.rows, a.rows),
            actual=a.shape,
        )

    m = a.elements
    _forward_eliminate(m, 'A')
    return Matrix(a.rows, a.cols, m)


def solve(a: Matrix) -> Vector:
    """
    Solve a linear system given as an augmented matrix.

    Columns 0..n-1 of a hold the coefficients and column n the right-hand
    side. Forward elimination (as in gauss) is followed by back
    substitution from the last row upwards.

    Example:
        2x +  y =  5
         x + 3y = 10

        >>> solve(Matrix(2, 3, [[2, 1, 5], [1, 3, 10]])).elements
        [1.0, 3.0]

    Args:
        a: Augmented matrix (n x (n + 1))

    Returns:
        Solution Vector of length n

    Raises:
        ShapeError: If a is not n x (n + 1)
        SingularMatrixError: If a pivot is exactly zero
        UnsupportedOperandError: If a is not a Matrix
    """
    if kind_of(a) is not Kind.MATRIX:
        reject('solve', a)
    n = a.rows
    if a.cols != n + 1:
        raise ShapeError(
            f"solve: augmented matrix must be n x (n + 1), got shape {a.shape}",
            expected=(n, n + 1),
            actual=a.shape,
        )

    m = a.elements
    _forward_eliminate(m, '[A|b]')

    x = [0.0] * n
    for i in range(n - 1, -1, -1):
        x[i] = m[i][n] / m[i][i]
        for k in range(i - 1, -1, -1):
            m[k][n] -= m[k][i] * x[i]

    return Vector(n, x)


def augment(coefficients: Matrix, constants: Vector) -> Matrix:
    """
    Append a right-hand side to a square coefficient matrix.

    Produces the n x (n + 1) input expected by solve().

    Raises:
        ShapeError: If coefficients is not square or constants.dim != n
        UnsupportedOperandError: If the operands are not (Matrix, Vector)
    """
    if kinds_of(coefficients, constants) != (Kind.MATRIX, Kind.VECTOR):
        reject('augment', coefficients, constants)
    n = coefficients.rows
    if coefficients.cols != n:
        raise ShapeError(
            f"augment: coefficient matrix must be square, got shape {coefficients.shape}",
            expected=(n, n),
            actual=coefficients.shape,
        )
    if constants.dim != n:
        raise ShapeError(
            f"augment: constants must have {n} elements, got {constants.dim}",
            expected=(n,),
            actual=constants.shape,
        )

    rows = [row + [c] for row, c in zip(coefficients.elements, constants.elements)]
    return Matrix(n, n + 1, rows)
