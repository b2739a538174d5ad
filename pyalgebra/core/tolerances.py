"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the different kinds of operation:
- Exact: transpose, sum, scalar and elementwise products (one rounding
  step per element, or none)
- Accumulated: dot, where each entry sums n products
- Elimination: gauss and solve, where rounding compounds across pivots

Used by the test suite to compare results against NumPy references.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bitwise equal, at most one rounding per element',
)

ACCUMULATED = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='accumulated',
    description='Naive summation of products, double precision',
)

ELIMINATION = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='elimination',
    description='Forward elimination without pivoting, well-conditioned input',
)

_TIERS_BY_OPERATION = {
    'transpose': EXACT,
    'sum': EXACT,
    'times': EXACT,
    'dot': ACCUMULATED,
    'gauss': ELIMINATION,
    'solve': ELIMINATION,
}


def select_tolerance(operation: str) -> ToleranceTier:
    """Select the tolerance tier for a given operation name."""
    try:
        return _TIERS_BY_OPERATION[operation]
    except KeyError:
        raise ValueError(f"Unknown operation: {operation!r}") from None
