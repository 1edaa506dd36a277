import numpy as np
import pytest

from densematrix import DenseMatrix, ExceptionType, InvalidDimensionError, MatrixError, OutOfRangeError


@pytest.mark.parametrize("rows, cols", [(1, 1), (2, 3), (5, 1), (np.int64(4), 7)])
def test_dimensions_are_reported(rows, cols):
    m = DenseMatrix(rows, cols)
    assert m.get_row_count() == rows
    assert m.get_column_count() == cols
    assert m.shape == (rows, cols)


@pytest.mark.parametrize("rows, cols", [(0, 1), (1, 0), (-1, 3), (3, -2), (0, 0)])
def test_non_positive_dimensions_are_rejected(rows, cols):
    with pytest.raises(InvalidDimensionError) as exc_info:
        DenseMatrix(rows, cols)
    assert exc_info.value.type is ExceptionType.INVALID_DIMENSION


@pytest.mark.parametrize("rows, cols", [(2.0, 2), (2, "3"), (True, 2)])
def test_non_integer_dimensions_are_rejected(rows, cols):
    with pytest.raises(InvalidDimensionError):
        DenseMatrix(rows, cols)


def test_default_dtype_is_float64():
    assert DenseMatrix(2, 2).dtype == np.float64


def test_explicit_dtype():
    m = DenseMatrix(2, 2, dtype=np.int32)
    assert m.dtype == np.int32


@pytest.mark.parametrize("dtype", [str, bool, object, np.bool_, "U1"])
def test_non_numeric_dtype_is_rejected(dtype):
    with pytest.raises(ValueError):
        DenseMatrix(2, 2, dtype=dtype)


def test_from_rows_rejects_non_numeric_dtype():
    with pytest.raises(ValueError):
        DenseMatrix.from_rows([[True, True]], dtype=bool)


def test_set_then_get_returns_value():
    m = DenseMatrix(3, 4)
    for i in range(3):
        for j in range(4):
            m.set_element(i, j, i * 10 + j + 0.5)
    for i in range(3):
        for j in range(4):
            assert m.get_element(i, j) == i * 10 + j + 0.5


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (2, 0), (0, 3), (5, 5)])
def test_out_of_range_access(row, col):
    m = DenseMatrix(2, 3)
    with pytest.raises(OutOfRangeError) as exc_info:
        m.get_element(row, col)
    assert exc_info.value.type is ExceptionType.OUT_OF_RANGE
    with pytest.raises(OutOfRangeError):
        m.set_element(row, col, 1.0)


def test_out_of_range_is_an_index_error():
    m = DenseMatrix(1, 1)
    with pytest.raises(IndexError):
        m.get_element(1, 0)


def test_non_integer_index_is_a_type_error():
    m = DenseMatrix(2, 2)
    with pytest.raises(TypeError):
        m.get_element(0.5, 0)


def test_fill_from_is_row_major():
    m = DenseMatrix(2, 3)
    seq = [1, 2, 3, 4, 5, 6]
    m.fill_from(seq)
    for i in range(2):
        for j in range(3):
            assert m.get_element(i, j) == seq[i * 3 + j]


def test_fill_from_accepts_numpy_arrays():
    m = DenseMatrix(2, 2)
    m.fill_from(np.arange(4))
    assert m.to_list() == [[0, 1], [2, 3]]


@pytest.mark.parametrize("seq", [[], [1, 2, 3], [1, 2, 3, 4, 5], [[1, 2], [3]]])
def test_fill_from_length_mismatch(seq):
    m = DenseMatrix(2, 2)
    m.fill_from([9, 9, 9, 9])
    with pytest.raises(OutOfRangeError):
        m.fill_from(seq)
    # contents untouched after a failed fill
    assert m.to_list() == [[9, 9], [9, 9]]


@pytest.mark.parametrize("seq", [
    [[1, 2], [3, 4]],
    [[1], [2], [3], [4]],
    [[1], [2, 3], 4, 5],
    np.arange(4).reshape(2, 2),
    np.arange(4).reshape(4, 1),
])
def test_fill_from_rejects_nested_input(seq):
    m = DenseMatrix(2, 2)
    with pytest.raises(OutOfRangeError):
        m.fill_from(seq)


def test_fill_from_accepts_one_shot_iterables():
    m = DenseMatrix(2, 3)
    m.fill_from(x * 2 for x in range(6))
    assert m.to_list() == [[0, 2, 4], [6, 8, 10]]


def test_fill_from_generator_length_mismatch():
    m = DenseMatrix(2, 2)
    with pytest.raises(OutOfRangeError):
        m.fill_from(iter(range(3)))


def test_from_rows(matrix_a):
    assert matrix_a.shape == (2, 2)
    assert matrix_a.get_element(1, 0) == 3


@pytest.mark.parametrize("rows_data", [[], [[]], [[1, 2], [3]]])
def test_from_rows_rejects_empty_or_ragged(rows_data):
    with pytest.raises(InvalidDimensionError):
        DenseMatrix.from_rows(rows_data)


def test_to_array_is_a_copy(matrix_a):
    arr = matrix_a.to_array()
    assert arr.shape == (2, 2)
    arr[0, 0] = 100
    assert matrix_a.get_element(0, 0) == 1


def test_buffer_is_read_only(matrix_a):
    with pytest.raises(ValueError):
        matrix_a.buffer[0] = 100


def test_equality(matrix_a, matrix_b):
    assert matrix_a == DenseMatrix.from_rows([[1, 2], [3, 4]])
    assert matrix_a != matrix_b
    assert matrix_a != DenseMatrix.from_rows([[1, 2, 3, 4]])


def test_repr():
    assert repr(DenseMatrix(2, 3)) == "DenseMatrix(rows=2, cols=3, dtype=float64)"


def test_error_message_carries_type():
    err = OutOfRangeError("bad index")
    assert isinstance(err, MatrixError)
    assert err.message == "bad index"
    assert str(err) == "Out of Range: bad index"
