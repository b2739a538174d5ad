"""
Matrix and Vector containers.

Both are fixed-size and mutable through bounds-checked set(); all
arithmetic lives in pyalgebra.operations.
"""

from pyalgebra.containers.matrix import Matrix
from pyalgebra.containers.vector import Vector

__all__ = [
    "Matrix",
    "Vector",
]
