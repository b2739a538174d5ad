"""
Operand-kind tagging shared by the operations.

Each operation compares the tuple of operand kinds against its supported
signatures in a fixed priority order. Anything unmatched is rejected with
UnsupportedOperandError.
"""

from enum import Enum
from typing import Any, NoReturn

from pyalgebra.containers.matrix import Matrix
from pyalgebra.containers.vector import Vector
from pyalgebra.core.exceptions import UnsupportedOperandError
from pyalgebra.core.validation import is_real


class Kind(Enum):
    MATRIX = 'matrix'
    VECTOR = 'vector'
    SCALAR = 'scalar'


def kind_of(value: Any) -> Kind | None:
    """Tag a value with its operand kind, or None if unsupported."""
    if isinstance(value, Matrix):
        return Kind.MATRIX
    if isinstance(value, Vector):
        return Kind.VECTOR
    if is_real(value):
        return Kind.SCALAR
    return None


def kinds_of(*values: Any) -> tuple[Kind | None, ...]:
    return tuple(kind_of(v) for v in values)


def reject(operation: str, *values: Any) -> NoReturn:
    """Raise UnsupportedOperandError naming the received operand types."""
    names = tuple(type(v).__name__ for v in values)
    raise UnsupportedOperandError(
        f"{operation}: unsupported operand types ({', '.join(names)})",
        operation=operation,
        kinds=names,
    )
