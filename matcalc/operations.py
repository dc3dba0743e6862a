# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
File-level operations: parse the input file(s), check the matrices suit the
operation, then hand them to the engine.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict

from . import engine
from .errors import NotSquare, SingularMatrix
from .matrix import Matrix
from .parser import parse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductResult:
    matrix: Matrix
    swapped: bool


@dataclass(frozen=True)
class Operation:
    flag: str
    name: str
    n_inputs: int
    returns_matrix: bool
    run: Callable


def _require_square(matrix: Matrix, what: str) -> None:
    if not matrix.is_square:
        raise NotSquare(what, matrix.rows, matrix.cols)


def frobenius_norm_of(path: str) -> float:
    return engine.frobenius_norm(parse(path))


def transpose_of(path: str) -> Matrix:
    return engine.transpose(parse(path))


def product_of(path1: str, path2: str) -> ProductResult:
    # both files are read before any dimension check
    a = parse(path1)
    b = parse(path2)
    matrix, swapped = engine.product(a, b)
    if swapped:
        logger.info(f"Swapped the order of {path1} and {path2} to find their product")
    return ProductResult(matrix, swapped)


def determinant_of(path: str) -> float:
    a = parse(path)
    _require_square(a, "determinant")
    return engine.determinant(a)


def adjoint_of(path: str) -> Matrix:
    a = parse(path)
    _require_square(a, "adjoint")
    return engine.adjoint(a)


def inverse_of(path: str) -> Matrix:
    a = parse(path)
    _require_square(a, "inverse of the matrix")
    det = engine.determinant(a)
    if det == 0:
        raise SingularMatrix()
    return engine.inverse(a, det)


OPERATIONS: Dict[str, Operation] = {
    op.flag: op
    for op in (
        Operation("f", "Frobenius Norm", 1, False, frobenius_norm_of),
        Operation("t", "Transpose", 1, True, transpose_of),
        Operation("m", "Matrix Product", 2, True, product_of),
        Operation("d", "Determinant", 1, False, determinant_of),
        Operation("a", "Adjoint", 1, True, adjoint_of),
        Operation("i", "Inverse", 1, True, inverse_of),
    )
}
