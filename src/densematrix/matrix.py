"""
Dense Matrix Storage
====================
A fixed-size 2D grid of numeric values stored row-major in one contiguous
NumPy buffer. Element (row, col) lives at offset row*cols + col.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence, TYPE_CHECKING

import numpy as np

from densematrix.config import DEFAULT_DTYPE, check_numeric_dtype
from densematrix.exceptions import InvalidDimensionError, OutOfRangeError
from densematrix.utils import flatten_rows, in_range, row_major_offset

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class DenseMatrix:
    """
    Represents a dense, row-major matrix with bounds-checked element access.

    The dimensions are fixed at construction. The contents are uninitialized
    until written with set_element() or fill_from().
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        dtype: npt.DTypeLike = None,
    ) -> None:
        """
        Allocate an uninitialized rows x cols matrix.

        Args:
            rows: Number of rows, must be > 0.
            cols: Number of columns, must be > 0.
            dtype: Numeric element type. Defaults to config.DEFAULT_DTYPE.

        Raises:
            InvalidDimensionError: If either dimension is not a positive integer.
            ValueError: If `dtype` is not an integer, float or complex type.
        """
        if not _is_integer(rows) or not _is_integer(cols) or rows <= 0 or cols <= 0:
            raise InvalidDimensionError(
                f"Matrix dimensions must be positive integers, got rows={rows!r}, cols={cols!r}."
            )
        self._rows = int(rows)
        self._cols = int(cols)
        self._data: npt.NDArray[Any] = np.empty(
            self._rows * self._cols,
            dtype=DEFAULT_DTYPE if dtype is None else check_numeric_dtype(np.dtype(dtype)),
        )
        logger.debug(f"Allocated {self._rows}x{self._cols} matrix ({self._data.dtype}).")

    @classmethod
    def from_rows(
        cls,
        rows_data: Sequence[Sequence[Any]],
        dtype: npt.DTypeLike = None,
    ) -> DenseMatrix:
        """
        Build a matrix from a nested list of equal-length rows.

        Raises:
            InvalidDimensionError: If the input is empty or ragged.
        """
        try:
            flat, n_rows, n_cols = flatten_rows(rows_data)
        except ValueError as e:
            raise InvalidDimensionError(str(e)) from e
        matrix = cls(n_rows, n_cols, dtype=dtype)
        matrix.fill_from(flat)
        return matrix

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rows={self._rows}, cols={self._cols}, dtype={self._data.dtype})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def buffer(self) -> npt.NDArray[Any]:
        """Read-only view of the flat row-major backing store."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def get_row_count(self) -> int:
        return self._rows

    def get_column_count(self) -> int:
        return self._cols

    def _offset(self, row: int, col: int, caller: str) -> int:
        if not _is_integer(row) or not _is_integer(col):
            raise TypeError(f"{caller}: indices must be integers, got ({row!r}, {col!r}).")
        if not in_range(row, self._rows) or not in_range(col, self._cols):
            raise OutOfRangeError(
                f"{caller} index ({row}, {col}) out of range for {self._rows}x{self._cols} matrix."
            )
        return row_major_offset(row, col, self._cols)

    def get_element(self, row: int, col: int) -> Any:
        """
        Return the element at (row, col).

        Raises:
            OutOfRangeError: If row is not in [0, rows) or col is not in [0, cols).
        """
        return self._data[self._offset(row, col, "get_element")].item()

    def set_element(self, row: int, col: int, value: Any) -> None:
        """
        Overwrite the element at (row, col) with `value`.

        Raises:
            OutOfRangeError: If row is not in [0, rows) or col is not in [0, cols).
        """
        self._data[self._offset(row, col, "set_element")] = value

    def fill_from(self, source: Iterable[Any] | npt.NDArray[Any]) -> None:
        """
        Overwrite the whole matrix from a flat row-major sequence.

        Element source[i*cols + j] is written to (i, j).

        Args:
            source: Exactly rows*cols elements. Any iterable is accepted;
                non-array input is materialized into a list first.

        Raises:
            OutOfRangeError: If the length of `source` is not rows*cols,
                or it is not flat.
        """
        if isinstance(source, np.ndarray):
            if source.ndim != 1 or source.size != self._data.size:
                raise OutOfRangeError(
                    f"fill_from expected {self._data.size} elements, got shape {source.shape}."
                )
        else:
            source = list(source)
            if len(source) != self._data.size:
                raise OutOfRangeError(
                    f"fill_from expected {self._data.size} elements, got {len(source)}."
                )
            if any(np.ndim(item) != 0 for item in source):
                raise OutOfRangeError("fill_from expects a flat sequence of scalars.")
        values = np.asarray(source, dtype=self._data.dtype)
        self._data[:] = values
        logger.debug(f"Filled {self._rows}x{self._cols} matrix from {values.size} values.")

    def to_array(self) -> npt.NDArray[Any]:
        """Copy of the contents as a (rows, cols) array."""
        return self._data.reshape(self._rows, self._cols).copy()

    def to_list(self) -> list[list[Any]]:
        """Contents as nested Python lists, row by row."""
        return self._data.reshape(self._rows, self._cols).tolist()
