"""
Dense row-major matrices with bounds-checked access and basic arithmetic
(add, multiply, GEMM). Pure Python/NumPy, no global state.
"""
import logging

from densematrix.exceptions import ExceptionType, MatrixError, InvalidDimensionError, OutOfRangeError
from densematrix.matrix import DenseMatrix
from densematrix.operations import MatrixOperations, add, multiply, gemm
from densematrix.logging_config import setup_logging

# Library: leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DenseMatrix",
    "MatrixOperations",
    "add",
    "multiply",
    "gemm",
    "ExceptionType",
    "MatrixError",
    "InvalidDimensionError",
    "OutOfRangeError",
    "setup_logging",
]
