"""
Core infrastructure for PyAlgebra.

This module provides shared abstractions used by the containers and the
operations built on top of them.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Comparison tolerance tiers
"""

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
    "PyAlgebraError",
    "ValidationError",
    "ShapeError",
    "ElementIndexError",
    "UnsupportedOperandError",
    "NumericalError",
    "SingularMatrixError",
]
