"""
Operations over Matrix and Vector.

Public API:
    transpose(a)            Matrix transpose, or Vector copy
    sum(a, b)               Elementwise sum
    times(a, b)             Scalar or elementwise (Hadamard) product
    dot(a, b)               Matrix product
    gauss(a)                Forward elimination, no pivoting
    solve(a)                Solve an augmented system [A|b]
    augment(A, b)           Build [A|b] from A and b
    identity(n)             n x n identity matrix
    LinearAlgebra           All of the above as static methods
"""

from pyalgebra.operations.elementwise import transpose, sum, times
from pyalgebra.operations.products import dot
from pyalgebra.operations.elimination import gauss, solve, augment
from pyalgebra.operations.algebra import LinearAlgebra, identity

__all__ = [
    "transpose",
    "sum",
    "times",
    "dot",
    "gauss",
    "solve",
    "augment",
    "identity",
    "LinearAlgebra",
]
