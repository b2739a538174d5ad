"""
LinearAlgebra facade.

Groups the operations as static methods so callers can hold a single
namespace, mirroring the module-level functions one-to-one.
"""

from pyalgebra.containers.matrix import Matrix
from pyalgebra.core.validation import check_positive_int
from pyalgebra.operations.elementwise import sum, times, transpose
from pyalgebra.operations.elimination import augment, gauss, solve
from pyalgebra.operations.products import dot


def identity(n: int) -> Matrix:
    """n x n identity matrix."""
    n = check_positive_int(n, 'n')
    return Matrix(n, n, [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)])


class LinearAlgebra:
    """
    Stateless collection of Matrix/Vector operations.

    Every method returns a new container and leaves its arguments
    unchanged.

    Example:
        >>> a = Matrix(2, 2, [[2, 1], [1, 1]])
        >>> LinearAlgebra.gauss(a).elements
        [[2.0, 1.0], [0.0, 0.5]]
    """

    transpose = staticmethod(transpose)
    sum = staticmethod(sum)
    times = staticmethod(times)
    dot = staticmethod(dot)
    gauss = staticmethod(gauss)
    solve = staticmethod(solve)
    augment = staticmethod(augment)
    identity = staticmethod(identity)
