"""
Matrix Errors
=============
Typed failures raised by matrix construction and element access.

Shape mismatches in the arithmetic operations are NOT reported here; those
return None (see densematrix.operations).
"""
from __future__ import annotations

from enum import StrEnum


class ExceptionType(StrEnum):
    INVALID_DIMENSION = "Invalid Dimension"
    OUT_OF_RANGE = "Out of Range"


class MatrixError(Exception):
    """
    Base class for hard failures raised by DenseMatrix.

    Args:
        exception_type: The kind of failure.
        message: Human-readable description.
    """
    def __init__(self, exception_type: ExceptionType, message: str) -> None:
        super().__init__(f"{exception_type}: {message}")
        self.type = exception_type
        self.message = message


class InvalidDimensionError(MatrixError, ValueError):
    """Raised when a matrix is constructed with a non-positive dimension."""
    def __init__(self, message: str) -> None:
        super().__init__(ExceptionType.INVALID_DIMENSION, message)


class OutOfRangeError(MatrixError, IndexError):
    """Raised on out-of-bounds element access or a mis-sized bulk fill."""
    def __init__(self, message: str) -> None:
        super().__init__(ExceptionType.OUT_OF_RANGE, message)
