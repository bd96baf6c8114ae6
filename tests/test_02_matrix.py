"""Test matrix construction, linear operators, display and conversions."""
import io
import random
import numpy as np
import pytest
import sympy
from fractions import Fraction
from ratmat import Matrix, Rational, DimensionMismatchError, TooManyValuesError, NumpyNumberSource


def test_empty(dimension):
    zero = Matrix.empty(dimension + 1, dimension)
    assert zero.width == dimension + 1
    assert zero.height == dimension
    assert len(zero.elements) == dimension
    assert all(len(row) == dimension + 1 for row in zero.elements)
    assert all(value == Rational.ZERO for row in zero.elements for value in row)


def test_empty_rows_are_independent():
    zero = Matrix.empty(2, 2)
    zero.elements[0][0] = Rational.ONE
    assert zero.elements[1][0] == Rational.ZERO


def test_negative_dimensions():
    with pytest.raises(ValueError):
        Matrix.empty(-1, 2)
    with pytest.raises(ValueError):
        Matrix.empty(2, -1)
    with pytest.raises(TypeError):
        Matrix.empty(2.0, 2)


def test_identity(dimension):
    identity = Matrix.identity(dimension)
    assert identity.is_identity()
    for i in range(dimension):
        for j in range(dimension):
            assert identity.get_value_at(i, j) == (Rational.ONE if i == j else Rational.ZERO)


def test_empty_is_not_identity(dimension):
    assert not Matrix.empty(dimension, dimension).is_identity()


def test_is_identity_non_square():
    assert not Matrix.empty(2, 3).is_identity()
    assert not Matrix.identity(2).append(Matrix.empty(1, 2)).is_identity()


def test_of_row_major(matrix_2x2):
    assert matrix_2x2.row(0) == [Rational(1), Rational(2)]
    assert matrix_2x2.row(1) == [Rational(3), Rational(4)]


def test_of_non_square_row_major():
    m = Matrix.of(3, 2, 1, 2, 3, 4, 5, 6)
    assert m.width == 3
    assert m.height == 2
    assert m.row(0) == [Rational(1), Rational(2), Rational(3)]
    assert m.column(2) == [Rational(3), Rational(6)]


def test_of_partial_fill():
    m = Matrix.of(2, 2, 5, '1/2', Fraction(2, 3))
    assert m.row(0) == [Rational(5), Rational(1, 2)]
    assert m.row(1) == [Rational(2, 3), Rational.ZERO]


def test_of_too_many_values():
    with pytest.raises(TooManyValuesError):
        Matrix.of(2, 2, 1, 2, 3, 4, 5)
    with pytest.raises(ValueError):
        Matrix.of(1, 1, 1, 2)


def test_random_range(number_source):
    m = Matrix.random(4, 3, (-2, 5), source=number_source)
    assert m.shape == (3, 4)
    for row in m.elements:
        for value in row:
            assert value.is_integer()
            assert Rational(-2) <= value <= Rational(5)


def test_random_closed_range(number_source):
    m = Matrix.random(3, 3, (7, 7), source=number_source)
    assert all(value == Rational(7) for row in m.elements for value in row)


def test_random_reaches_both_ends(number_source):
    m = Matrix.random(20, 20, (0, 1), source=number_source)
    values = {value for row in m.elements for value in row}
    assert values == {Rational.ZERO, Rational.ONE}


def test_random_reproducible():
    first = Matrix.random(4, 4, (-10, 10), source=NumpyNumberSource(seed=7))
    second = Matrix.random(4, 4, (-10, 10), source=NumpyNumberSource(seed=7))
    assert first == second
    first = Matrix.random(4, 4, (-10, 10), source=random.Random(7))
    second = Matrix.random(4, 4, (-10, 10), source=random.Random(7))
    assert first == second


def test_random_default_source():
    m = Matrix.random(2, 3, (0, 10))
    assert m.shape == (3, 2)


def test_random_invalid():
    with pytest.raises(ValueError):
        Matrix.random(2, 2, (3, 1))
    with pytest.raises(ValueError):
        NumpyNumberSource(seed=1).randint(3, 1)
    with pytest.raises(TypeError):
        Matrix.random(2, 2, (0, 1), source=object())


def test_from_rows_ragged():
    with pytest.raises(DimensionMismatchError):
        Matrix.from_rows([[1, 2], [3]])


def test_add_subtract(matrix_2x2):
    other = Matrix.from_rows([['1/2', 0], [-3, '1/4']])
    assert matrix_2x2 + other == Matrix.from_rows([['3/2', 2], [0, '17/4']])
    assert matrix_2x2.subtract(other) == Matrix.from_rows([['1/2', 2], [6, '15/4']])
    assert (matrix_2x2 + other) - other == matrix_2x2


def test_add_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        Matrix.identity(2) + Matrix.identity(3)
    with pytest.raises(DimensionMismatchError):
        Matrix.identity(2).subtract(Matrix.empty(3, 2))


def test_negate(matrix_2x2):
    assert -matrix_2x2 == Matrix.of(2, 2, -1, -2, -3, -4)
    assert matrix_2x2 + matrix_2x2.negate() == Matrix.empty(2, 2)


def test_scalar_multiply(matrix_2x2):
    half = Rational(1, 2)
    expected = Matrix.from_rows([['1/2', 1], ['3/2', 2]])
    assert matrix_2x2.scalar_multiply(half) == expected
    assert matrix_2x2 * half == expected
    assert half * matrix_2x2 == expected
    assert 2 * matrix_2x2 == Matrix.of(2, 2, 2, 4, 6, 8)
    assert matrix_2x2 * Fraction(1, 2) == expected


def test_multiply(matrix_2x3):
    other = Matrix.from_rows([[1, 0], [0, 1], [1, 1]])
    product = matrix_2x3 * other
    assert product.shape == (2, 2)
    assert product == Matrix.from_rows([[4, 5], [10, 11]])
    assert matrix_2x3 @ other == product
    assert matrix_2x3.multiply(other) == product


def test_multiply_shape():
    product = Matrix.empty(3, 2).multiply(Matrix.empty(4, 3))
    assert product.width == 4
    assert product.height == 2


def test_multiply_dimension_mismatch(matrix_2x3):
    with pytest.raises(DimensionMismatchError):
        matrix_2x3 * matrix_2x3


def test_multiply_identity(matrix_2x3, matrix_rational):
    assert Matrix.identity(2) * matrix_2x3 == matrix_2x3
    assert matrix_2x3 * Matrix.identity(3) == matrix_2x3
    assert Matrix.identity(3) * matrix_rational == matrix_rational
    assert matrix_rational * Matrix.identity(3) == matrix_rational


def test_dot():
    u = [Rational(1, 2), Rational(2)]
    v = [Rational(4), Rational(-1, 4)]
    assert Matrix.dot(u, v) == Rational(3, 2)
    assert Matrix.dot([], []) == Rational.ZERO
    with pytest.raises(DimensionMismatchError):
        Matrix.dot(u, v[:1])


def test_transpose(matrix_2x3):
    transposed = matrix_2x3.transpose()
    assert transposed.width == 2
    assert transposed.height == 3
    for i in range(matrix_2x3.height):
        for j in range(matrix_2x3.width):
            assert transposed.elements[j][i] == matrix_2x3.elements[i][j]
    assert transposed.transpose() == matrix_2x3


def test_transpose_involution(number_source):
    m = Matrix.random(5, 3, (-9, 9), source=number_source)
    assert m.transpose().transpose() == m


def test_copy_of_is_deep(matrix_2x2):
    clone = matrix_2x2.copy_of()
    assert clone == matrix_2x2
    assert clone.elements is not matrix_2x2.elements
    assert all(a is not b for a, b in zip(clone.elements, matrix_2x2.elements))
    clone.elements[0][0] = Rational(99)
    assert matrix_2x2.get_value_at(0, 0) == Rational(1)


def test_results_do_not_alias_operands(matrix_2x2):
    for result in (matrix_2x2 + Matrix.empty(2, 2), -matrix_2x2, matrix_2x2 * 1, matrix_2x2.transpose(),
                   matrix_2x2.append(Matrix.empty(0, 2)), matrix_2x2.sub_matrix(0, 2, 0, 2)):
        result.elements[0][0] = Rational(42)
        assert matrix_2x2.get_value_at(0, 0) == Rational(1)


def test_append(matrix_2x2, matrix_2x3):
    appended = matrix_2x2.append(matrix_2x3)
    assert appended.width == 5
    assert appended.height == 2
    assert appended.row(0) == [Rational(v) for v in (1, 2, 1, 2, 3)]
    assert appended.sub_matrix(0, 2, 2, 5) == matrix_2x3


def test_append_dimension_mismatch(matrix_2x2):
    with pytest.raises(DimensionMismatchError):
        matrix_2x2.append(Matrix.identity(3))


def test_sub_matrix_bounds(matrix_2x3):
    assert matrix_2x3.sub_matrix(1, 2, 0, 2) == Matrix.of(2, 1, 4, 5)
    with pytest.raises(ValueError):
        matrix_2x3.sub_matrix(0, 3, 0, 1)
    with pytest.raises(ValueError):
        matrix_2x3.sub_matrix(1, 0, 0, 1)


def test_equality(matrix_2x2):
    assert matrix_2x2 == Matrix.from_rows([[1, 2], [3, 4]])
    assert matrix_2x2 != Matrix.from_rows([[1, 2], [3, 5]])
    assert Matrix.empty(2, 3) != Matrix.empty(3, 2)
    assert matrix_2x2 != [[1, 2], [3, 4]]
    with pytest.raises(TypeError):
        hash(matrix_2x2)


def test_display(matrix_rational):
    m = Matrix.from_rows([[1, '1/2'], [-3, '-2/4']])
    assert str(m) == "1 \t1/2 \t\n-3 \t-1/2 \t\n"
    stream = io.StringIO()
    m.dump(stream)
    assert stream.getvalue() == str(m)
    assert str(Matrix.empty(0, 0)) == ""


def test_dump_stdout(capsys, matrix_2x2):
    matrix_2x2.dump()
    assert capsys.readouterr().out == "1 \t2 \t\n3 \t4 \t\n"


def test_repr_round_trip(matrix_rational):
    assert eval(repr(matrix_rational), {'Matrix': Matrix}) == matrix_rational


def test_numpy_conversion(matrix_rational):
    array = matrix_rational.to_numpy()
    assert array.shape == (3, 3)
    assert array.dtype == np.float64
    assert array[0, 0] == 0.5
    objects = matrix_rational.to_numpy(dtype=object)
    assert objects[1, 0] == Rational(-2, 5)
    assert Matrix.from_numpy(objects) == matrix_rational


def test_from_numpy():
    m = Matrix.from_numpy(np.array([[1, 2], [3, 4]]))
    assert m == Matrix.of(2, 2, 1, 2, 3, 4)
    m = Matrix.from_numpy(np.array([[0.5, 0.25, 0.1]]))
    assert m == Matrix.from_rows([['1/2', '1/4', '1/10']])
    with pytest.raises(ValueError):
        Matrix.from_numpy(np.zeros(3))


def test_from_numpy_small_values():
    m = Matrix.from_numpy(np.array([[1e-7, 0.0], [0.0, 1.0]]))
    assert not m.get_value_at(0, 0).is_zero()
    assert m.determinant() == Rational.value_of(1e-7)
    inverse = m.inverse()
    assert (m * inverse).is_identity()
    assert inverse.get_value_at(0, 0) == Rational.value_of(1e-7).reciprocal()


def test_sympy_conversion(matrix_rational):
    sym = matrix_rational.to_sympy()
    assert sym.shape == (3, 3)
    assert sym[0, 1] == sympy.Rational(1, 3)
    assert Matrix.from_sympy(sym) == matrix_rational
