import random
import pytest
from ratmat import Matrix, NumpyNumberSource

# Initialize the list of number sources, both seeded for reproducibility
number_sources = ['numpy', 'random']


@pytest.fixture(params=number_sources, scope="session")
def number_source_kind(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for parametrized number source names."""
    return request.param


@pytest.fixture
def number_source(number_source_kind):
    """Provide a freshly seeded number source of the requested kind."""
    if number_source_kind == 'numpy':
        return NumpyNumberSource(seed=42)
    return random.Random(42)


@pytest.fixture(params=[1, 2, 3, 4, 5], scope="session")
def dimension(request: pytest.FixtureRequest) -> int:
    """Provide session-level fixture for square matrix dimensions."""
    return request.param


@pytest.fixture
def matrix_2x2():
    return Matrix.of(2, 2, 1, 2, 3, 4)


@pytest.fixture
def matrix_2x3():
    """Two rows, three columns."""
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def matrix_3x3():
    return Matrix.from_rows([[2, -1, 0], [-1, 2, -1], [0, -1, 2]])


@pytest.fixture
def matrix_rational():
    return Matrix.from_rows([['1/2', '1/3', 0], ['-2/5', 1, '3/4'], [7, '-1/6', '2/3']])


@pytest.fixture
def matrix_singular():
    return Matrix.from_rows([[1, 2], [2, 4]])


@pytest.fixture
def matrix_needs_swap():
    """Zero in the top left corner, elimination requires a row swap."""
    return Matrix.from_rows([[0, 2, 1], [1, 1, 1], [3, 0, 2]])
