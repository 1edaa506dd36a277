"""
Matrix Operations
=================
Stateless arithmetic over DenseMatrix operands.

Every operation returns a freshly allocated matrix and leaves its operands
untouched. A missing operand or incompatible shapes yield None instead of an
exception; callers are expected to check for it.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from densematrix.matrix import DenseMatrix
from densematrix.utils import row_major_offset

logger = logging.getLogger(__name__)


class MatrixOperations:
    """
    Namespace for Add, Multiply and GEMM.
    """

    @staticmethod
    def add(
        matrix_a: Optional[DenseMatrix],
        matrix_b: Optional[DenseMatrix],
    ) -> Optional[DenseMatrix]:
        """
        Elementwise sum A + B.

        Args:
            matrix_a: Left operand.
            matrix_b: Right operand, same shape as `matrix_a`.

        Returns:
            A new matrix with result[i][j] = A[i][j] + B[i][j],
            or None if an operand is missing or the shapes differ.
        """
        if matrix_a is None or matrix_b is None:
            logger.debug("add: missing operand.")
            return None
        if matrix_a.shape != matrix_b.shape:
            logger.debug(f"add: shape mismatch {matrix_a.shape} vs {matrix_b.shape}.")
            return None

        rows, cols = matrix_a.shape
        result = DenseMatrix(rows, cols, dtype=np.result_type(matrix_a.dtype, matrix_b.dtype))
        result.fill_from(matrix_a.buffer + matrix_b.buffer)
        return result

    @staticmethod
    def multiply(
        matrix_a: Optional[DenseMatrix],
        matrix_b: Optional[DenseMatrix],
    ) -> Optional[DenseMatrix]:
        """
        Matrix product A x B.

        Each entry is the dot product of a row of A and a column of B,
        accumulated from the element type's zero.

        Returns:
            A new (A.rows x B.cols) matrix, or None if an operand is missing
            or A.cols != B.rows.
        """
        if matrix_a is None or matrix_b is None:
            logger.debug("multiply: missing operand.")
            return None
        rows_a, cols_a = matrix_a.shape
        rows_b, cols_b = matrix_b.shape
        if cols_a != rows_b:
            logger.debug(f"multiply: inner dimensions differ ({cols_a} vs {rows_b}).")
            return None

        dtype = np.result_type(matrix_a.dtype, matrix_b.dtype)
        a = matrix_a.buffer
        b = matrix_b.buffer
        products = np.empty(rows_a * cols_b, dtype=dtype)
        for i in range(rows_a):
            for j in range(cols_b):
                acc = dtype.type(0)
                for k in range(cols_a):
                    acc += a[row_major_offset(i, k, cols_a)] * b[row_major_offset(k, j, cols_b)]
                products[row_major_offset(i, j, cols_b)] = acc

        result = DenseMatrix(rows_a, cols_b, dtype=dtype)
        result.fill_from(products)
        return result

    @staticmethod
    def gemm(
        matrix_a: Optional[DenseMatrix],
        matrix_b: Optional[DenseMatrix],
        matrix_c: Optional[DenseMatrix],
    ) -> Optional[DenseMatrix]:
        """
        Generalized multiply-add (A x B) + C.

        Returns None if either the product or the sum cannot be formed.
        """
        return MatrixOperations.add(MatrixOperations.multiply(matrix_a, matrix_b), matrix_c)


add = MatrixOperations.add
multiply = MatrixOperations.multiply
gemm = MatrixOperations.gemm
