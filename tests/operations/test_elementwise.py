"""
Tests for transpose, sum and times.

Includes the dispatch priority of times() and the round-trip and
commutativity properties.
"""

from fractions import Fraction

import numpy as np
import pytest

from pyalgebra import Matrix, Vector, sum, times, transpose
from pyalgebra.core.exceptions import ShapeError, UnsupportedOperandError, ValidationError
from pyalgebra.core.tolerances import select_tolerance


def _random_matrix(rng, rows, cols):
    return Matrix.from_numpy(rng.standard_normal((rows, cols)))


# ═══════════════════════════════════════════════════════════════════════
# transpose
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:

    def test_matrix_shape_and_values(self, rect_2x3):
        result = transpose(rect_2x3)
        assert result.shape == (3, 2)
        assert result.elements == [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]

    def test_round_trip(self, rng):
        a = _random_matrix(rng, 4, 7)
        assert transpose(transpose(a)) == a

    def test_matches_numpy(self, rng):
        a = _random_matrix(rng, 3, 5)
        np.testing.assert_array_equal(transpose(a).to_numpy(), a.to_numpy().T)

    def test_operand_not_mutated(self, rect_2x3):
        transpose(rect_2x3)
        assert rect_2x3.shape == (2, 3)

    def test_vector_is_copied_unchanged(self, vector_3):
        result = transpose(vector_3)
        assert isinstance(result, Vector)
        assert result == vector_3
        assert result is not vector_3

    def test_vector_result_not_aliased(self, vector_3):
        result = transpose(vector_3)
        result.set(0, 100.0)
        assert vector_3.get(0) == 1.0

    @pytest.mark.parametrize("value", [3.0, [[1, 2]], np.eye(2), None])
    def test_unsupported(self, value):
        with pytest.raises(TypeError):
            transpose(value)


# ═══════════════════════════════════════════════════════════════════════
# sum
# ═══════════════════════════════════════════════════════════════════════


class TestSum:

    def test_matrix_elementwise(self):
        a = Matrix(2, 2, [[1, 2], [3, 4]])
        b = Matrix(2, 2, [[10, 20], [30, 40]])
        assert sum(a, b).elements == [[11.0, 22.0], [33.0, 44.0]]

    def test_matrix_commutative(self, rng):
        a = _random_matrix(rng, 3, 3)
        b = _random_matrix(rng, 3, 3)
        assert sum(a, b) == sum(b, a)

    def test_matrix_matches_numpy(self, rng):
        a = _random_matrix(rng, 2, 5)
        b = _random_matrix(rng, 2, 5)
        tol = select_tolerance('sum')
        np.testing.assert_allclose(
            sum(a, b).to_numpy(), a.to_numpy() + b.to_numpy(),
            rtol=tol.rtol, atol=tol.atol,
        )

    def test_matrix_shape_mismatch(self, square_2x2, rect_2x3):
        with pytest.raises(ShapeError, match="sum: incompatible dimensions"):
            sum(square_2x2, rect_2x3)

    def test_transposed_shape_mismatch(self, rect_2x3):
        with pytest.raises(ShapeError):
            sum(rect_2x3, transpose(rect_2x3))

    def test_vector_elementwise(self, vector_3):
        result = sum(vector_3, Vector(3, [0.5, 0.5, 0.5]))
        assert isinstance(result, Vector)
        assert result.elements == [1.5, 2.5, 3.5]

    def test_vector_dim_mismatch(self, vector_3):
        with pytest.raises(ShapeError):
            sum(vector_3, Vector(2, [1, 2]))

    def test_mixed_kinds(self, square_2x2):
        with pytest.raises(UnsupportedOperandError, match=r"sum: unsupported operand types \(Matrix, Vector\)"):
            sum(square_2x2, Vector(2, [1, 2]))

    def test_scalar_operand(self, square_2x2):
        with pytest.raises(TypeError):
            sum(1.0, square_2x2)

    def test_operands_not_mutated(self, square_2x2):
        other = Matrix(2, 2, [[1, 1], [1, 1]])
        sum(square_2x2, other)
        assert square_2x2.elements == [[2.0, 1.0], [1.0, 1.0]]
        assert other.elements == [[1.0, 1.0], [1.0, 1.0]]


# ═══════════════════════════════════════════════════════════════════════
# times
# ═══════════════════════════════════════════════════════════════════════


class TestTimesScalar:

    def test_scales_every_element(self, rect_2x3):
        assert times(2, rect_2x3).elements == [[2.0, 4.0, 6.0], [8.0, 10.0, 12.0]]

    def test_zero_gives_zero_matrix(self, rng):
        a = _random_matrix(rng, 3, 4)
        result = times(0, a)
        assert result.shape == a.shape
        assert result == Matrix(3, 4, [[0.0] * 4 for _ in range(3)])

    def test_one_is_identity(self, rng):
        a = _random_matrix(rng, 3, 4)
        assert times(1, a) == a

    def test_numpy_scalar(self, square_2x2):
        assert times(np.float64(0.5), square_2x2).elements == [[1.0, 0.5], [0.5, 0.5]]

    def test_fraction_scalar(self, square_2x2):
        assert times(Fraction(1, 2), square_2x2).elements == [[1.0, 0.5], [0.5, 0.5]]

    def test_int_too_large_for_float(self, square_2x2):
        with pytest.raises(ValidationError, match="too large"):
            times(10**400, square_2x2)

    def test_large_int_scalar_converted(self):
        assert times(2**64, Matrix(1, 1, [[1]])).elements == [[float(2**64)]]

    def test_scalar_on_right_rejected(self, square_2x2):
        with pytest.raises(UnsupportedOperandError):
            times(square_2x2, 2.0)

    def test_scalar_times_vector_rejected(self, vector_3):
        with pytest.raises(UnsupportedOperandError):
            times(2.0, vector_3)

    def test_bool_is_not_a_scalar(self, square_2x2):
        with pytest.raises(TypeError):
            times(True, square_2x2)


class TestTimesElementwise:

    def test_hadamard_not_matrix_product(self):
        a = Matrix(2, 2, [[1, 2], [3, 4]])
        b = Matrix(2, 2, [[5, 6], [7, 8]])
        assert times(a, b).elements == [[5.0, 12.0], [21.0, 32.0]]

    def test_hadamard_matches_numpy(self, rng):
        a = _random_matrix(rng, 3, 2)
        b = _random_matrix(rng, 3, 2)
        np.testing.assert_array_equal(times(a, b).to_numpy(), a.to_numpy() * b.to_numpy())

    def test_matrix_shape_mismatch(self, square_2x2, rect_2x3):
        with pytest.raises(ShapeError, match="times"):
            times(square_2x2, rect_2x3)

    def test_vector_product_is_vector(self, vector_3):
        result = times(vector_3, Vector(3, [2, 0, -1]))
        assert isinstance(result, Vector)
        assert result.elements == [2.0, 0.0, -3.0]

    def test_vector_dim_mismatch(self, vector_3):
        with pytest.raises(ShapeError):
            times(vector_3, Vector(4, [1, 2, 3, 4]))

    def test_matrix_vector_rejected(self, square_2x2):
        with pytest.raises(UnsupportedOperandError) as exc_info:
            times(square_2x2, Vector(2, [1, 1]))
        assert exc_info.value.operation == 'times'
        assert exc_info.value.kinds == ('Matrix', 'Vector')
