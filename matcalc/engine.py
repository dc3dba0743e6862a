# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Linear-algebra engine
=====================

Textbook algorithms on ``Matrix`` values. Results are always new matrices;
inputs are never modified.

The determinant is the recursive Laplace expansion along the first row,
O(n!) in time. Every summation runs in a fixed sequential order, not
through BLAS, so results reproduce bit for bit.
"""

import logging
import math
from typing import Optional, Tuple

import numpy as np

from .errors import DimensionMismatch, NotSquare, SingularMatrix
from .matrix import Matrix
from .utils import cofactor_sign

logger = logging.getLogger(__name__)


def frobenius_norm(matrix: Matrix) -> float:
    """sqrt of the sum of every element squared, accumulated in row-major order."""
    total = 0.0
    for v in matrix.values.tolist():
        total += v * v
    return math.sqrt(total)


def transpose(matrix: Matrix) -> Matrix:
    """Return the cols-by-rows matrix T with T[j, i] = M[i, j]."""
    A = matrix.to_array()
    return Matrix(np.ascontiguousarray(A.T))


def multiply(left: Matrix, right: Matrix) -> Matrix:
    """
    Strict matrix product ``left @ right``.

    Each output element accumulates ``left[k, j] * right[j, i]`` for
    j = 0 .. left.cols-1, starting from zero.

    Raises
    ------
    DimensionMismatch : left.cols != right.rows
    """
    if left.cols != right.rows:
        raise DimensionMismatch(left.shape, right.shape)

    A = left.to_array().tolist()
    B = right.to_array().tolist()
    n_inner = left.cols
    out = Matrix.zeros(left.rows, right.cols)
    values = out.values

    for k in range(out.rows):
        a_row = A[k]
        for i in range(out.cols):
            s = 0.0
            for j in range(n_inner):
                s += a_row[j] * B[j][i]
            values[k * out.cols + i] = s
    return out


def product(first: Matrix, second: Matrix) -> Tuple[Matrix, bool]:
    """
    Matrix product that forgives operands given in the wrong order.

    Tries ``first @ second``; when that is not conformable but
    ``second @ first`` is, computes that instead.

    Returns
    -------
    result  : Matrix
    swapped : bool
        True when the operands were swapped.

    Raises
    ------
    DimensionMismatch : neither order is conformable.
    """
    if first.cols == second.rows:
        return multiply(first, second), False
    if second.cols == first.rows:
        logger.debug(
            f"product(): {first.shape} x {second.shape} not conformable, "
            f"computing {second.shape} x {first.shape} instead"
        )
        return multiply(second, first), True
    raise DimensionMismatch(first.shape, second.shape)


def minor(matrix: Matrix, row: int, col: int) -> Matrix:
    """Sub-matrix left after deleting ``row`` and ``col``."""
    A = matrix.to_array()
    keep_rows = np.arange(matrix.rows) != row
    keep_cols = np.arange(matrix.cols) != col
    return Matrix(A[keep_rows][:, keep_cols])


def _expand(A: np.ndarray) -> float:
    """Laplace expansion along row 0 of an n-by-n array, n >= 2."""
    n = A.shape[0]
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    det = 0.0
    for top_row in range(n):
        # minor without row 0 and column top_row
        sub = A[1:, np.arange(n) != top_row]
        det += cofactor_sign(0, top_row) * float(A[0, top_row]) * _expand(sub)
    return det


def determinant(matrix: Matrix) -> float:
    """
    Determinant by recursive cofactor expansion along the first row.

    1x1 returns its element, 2x2 returns ad - bc, larger matrices sum
    (-1)^j * m[0, j] * det(minor(0, j)) over j = 0 .. n-1.
    """
    if not matrix.is_square:
        raise NotSquare("determinant", matrix.rows, matrix.cols)
    if matrix.rows == 1:
        return matrix[0, 0]
    return _expand(matrix.to_array())


def cofactor(matrix: Matrix) -> Matrix:
    """C[i, j] = (-1)^(i+j) * det(minor(i, j)) for a square matrix."""
    if not matrix.is_square:
        raise NotSquare("cofactor matrix", matrix.rows, matrix.cols)
    n = matrix.rows
    if n == 1:
        return Matrix.from_rows([[1.0]])
    C = Matrix.zeros(n, n)
    for i in range(n):
        for j in range(n):
            C[i, j] = cofactor_sign(i, j) * determinant(minor(matrix, i, j))
    return C


def adjoint(matrix: Matrix) -> Matrix:
    """
    Adjugate (classical adjoint), the transpose of the cofactor matrix.

    The adjoint of a 1x1 matrix is [[1]] whatever its element.
    """
    if not matrix.is_square:
        raise NotSquare("adjoint", matrix.rows, matrix.cols)
    if matrix.rows == 1:
        return Matrix.from_rows([[1.0]])
    return transpose(cofactor(matrix))


def inverse(matrix: Matrix, det: Optional[float] = None) -> Matrix:
    """
    adj(A) / det(A), element by element.

    ``det`` may be passed in when the caller has already computed it.

    Raises
    ------
    NotSquare      : A is not square.
    SingularMatrix : det(A) is exactly zero.
    """
    if not matrix.is_square:
        raise NotSquare("inverse of the matrix", matrix.rows, matrix.cols)
    if det is None:
        det = determinant(matrix)
    if det == 0:
        raise SingularMatrix()

    adj = adjoint(matrix)
    return Matrix(adj.to_array() / det)
