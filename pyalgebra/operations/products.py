"""Matrix product."""

from pyalgebra.containers.matrix import Matrix
from pyalgebra.core.exceptions import ShapeError
from pyalgebra.operations._dispatch import Kind, kinds_of, reject


def dot(a: Matrix, b: Matrix) -> Matrix:
    """
    Standard matrix product a @ b.

    Naive O(m*n*p) triple loop, accumulating each entry in k order.

    Args:
        a: Left matrix (m x n)
        b: Right matrix (n x p)

    Returns:
        Matrix (m x p) with (i, j) = sum_k a(i, k) * b(k, j)

    Raises:
        ShapeError: If a.cols != b.rows
        UnsupportedOperandError: If either operand is not a Matrix
    """
    if kinds_of(a, b) != (Kind.MATRIX, Kind.MATRIX):
        reject('dot', a, b)
    if a.cols != b.rows:
        raise ShapeError(
            f"dot: incompatible dimensions {a.shape} and {b.shape}, "
            f"a.cols ({a.cols}) must equal b.rows ({b.rows})",
            expected=(a.cols, b.cols),
            actual=b.shape,
        )

    left = a.elements
    right = b.elements
    result = [[0.0] * b.cols for _ in range(a.rows)]
    for i in range(a.rows):
        for j in range(b.cols):
            for k in range(a.cols):
                result[i][j] += left[i][k] * right[k][j]

    return Matrix(a.rows, b.cols, result)
