"""
PyAlgebra: small dense linear algebra for Python.

Matrix and Vector containers with bounds-checked element access, and
the operations built on them: transpose, sum, scalar/elementwise product,
matrix product, Gaussian elimination and linear-system solving.

Submodules:
    core: Exceptions, validators, tolerance tiers
    containers: Matrix and Vector
    operations: The LinearAlgebra operation set
"""

__version__ = "0.1.0"

from pyalgebra.containers import Matrix, Vector
from pyalgebra.operations import (
    LinearAlgebra,
    augment,
    dot,
    gauss,
    identity,
    solve,
    sum,
    times,
    transpose,
)
from pyalgebra.core.exceptions import (
    PyAlgebraError,
    ValidationError,
    ShapeError,
    ElementIndexError,
    UnsupportedOperandError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    # Containers
    "Matrix",
    "Vector",
    # Operations
    "LinearAlgebra",
    "transpose",
    "sum",
    "times",
    "dot",
    "gauss",
    "solve",
    "augment",
    "identity",
    # Exceptions
    "PyAlgebraError",
    "ValidationError",
    "ShapeError",
    "ElementIndexError",
    "UnsupportedOperandError",
    "NumericalError",
    "SingularMatrixError",
]
