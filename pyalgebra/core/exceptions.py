"""
Exception hierarchy for PyAlgebra.

All exceptions inherit from PyAlgebraError to allow catching any
library-specific error. Index and operand-kind errors additionally inherit
from the matching builtin (IndexError, TypeError) so callers that only know
the builtins still catch them.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyAlgebraError(Exception):
    """Base exception for all PyAlgebra errors."""
    pass


class ValidationError(PyAlgebraError):
    """
    Input validation failed.

    Raised when user-provided inputs (dimensions, element values) fail
    validation checks.
    """
    pass


class ShapeError(ValidationError):
    """
    Container dimensions are incorrect or inconsistent.

    Raised when supplied elements don't match the declared dimensions, or
    when two operands have incompatible shapes.

    Attributes:
        expected: Expected shape, if known
        actual: Shape that was received, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | None = None,
        actual: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ElementIndexError(PyAlgebraError, IndexError):
    """
    Element access outside the container bounds.

    Attributes:
        index: The offending index tuple
        shape: Shape of the container that was accessed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | None = None,
        shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class UnsupportedOperandError(PyAlgebraError, TypeError):
    """
    Operation invoked on an unsupported combination of operand kinds.

    Attributes:
        operation: Name of the operation (e.g. 'times')
        kinds: Type names of the operands that were received
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        kinds: tuple[str, ...] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.kinds = kinds


class NumericalError(PyAlgebraError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    A zero pivot was met during elimination.

    Elimination does not swap rows, so this is raised for any exact zero
    on the working diagonal, including matrices that are invertible but
    would need a row exchange.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Row (and column) of the zero pivot
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
