from __future__ import annotations

from typing import Any, Sequence


def row_major_offset(row: int, col: int, cols: int) -> int:
    """Linear offset of element (row, col) in a row-major buffer with `cols` columns."""
    return row * cols + col


def in_range(index: int, upper: int) -> bool:
    """True if 0 <= index < upper."""
    return 0 <= index < upper


def flatten_rows(rows_data: Sequence[Sequence[Any]]) -> tuple[list[Any], int, int]:
    """
    Flatten a nested list of rows into a single row-major list.

    :var rows_data: Rows of equal length, e.g. [[1, 2], [3, 4]].

    :return: (flat, n_rows, n_cols). Raises ValueError for empty or ragged input.

    **Example**:

        flatten_rows([[1, 2], [3, 4]])
        # Output: ([1, 2, 3, 4], 2, 2)
    """
    if len(rows_data) == 0 or len(rows_data[0]) == 0:
        raise ValueError("Rows must be non-empty.")
    n_cols = len(rows_data[0])
    flat: list[Any] = []
    for i, row in enumerate(rows_data):
        if len(row) != n_cols:
            raise ValueError(f"Row {i} has {len(row)} elements, expected {n_cols}.")
        flat.extend(row)
    return flat, len(rows_data), n_cols
