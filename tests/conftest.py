import pytest

from densematrix import DenseMatrix


@pytest.fixture
def matrix_a() -> DenseMatrix:
    return DenseMatrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def matrix_b() -> DenseMatrix:
    return DenseMatrix.from_rows([[5, 6], [7, 8]])
