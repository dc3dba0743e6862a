# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
matcalc
=======

A small matrix calculator: reads matrices from a strict, human-editable
text format and applies textbook linear-algebra operations to them.

Public API
~~~~~~~~~~
- Data model
    - `Matrix`
- Reading / writing
    - `parse`, `parse_text`, `read_matrix`, `format_matrix`, `write_matrix`
- Engine
    - `frobenius_norm`, `transpose`, `multiply`, `product`,
      `determinant`, `cofactor`, `adjoint`, `inverse`
- Errors
    - `MatCalcError`, `FileOpenError`, `InvalidFile`, `InvalidMatrix`,
      `NotSquare`, `DimensionMismatch`, `SingularMatrix`, `UsageError`

The file-level wrappers used by the command line live in
`matcalc.operations`.

Example
-------
>>> import matcalc as mc
>>> A = mc.parse_text("matrix 2 2\\n1 2\\n3 4\\nend\\n")
>>> mc.determinant(A)
-2.0
"""

from .engine import (
    adjoint,
    cofactor,
    determinant,
    frobenius_norm,
    inverse,
    minor,
    multiply,
    product,
    transpose,
)
from .errors import (
    DimensionMismatch,
    FileOpenError,
    InvalidFile,
    InvalidMatrix,
    MatCalcError,
    NotSquare,
    SingularMatrix,
    UsageError,
)
from .matrix import Matrix
from .parser import parse, parse_text, read_matrix
from .utils import VERSION as __version__
from .writer import format_matrix, write_matrix

__all__ = [
    "Matrix",
    "parse",
    "parse_text",
    "read_matrix",
    "format_matrix",
    "write_matrix",
    "frobenius_norm",
    "transpose",
    "multiply",
    "product",
    "minor",
    "determinant",
    "cofactor",
    "adjoint",
    "inverse",
    "MatCalcError",
    "UsageError",
    "FileOpenError",
    "InvalidFile",
    "InvalidMatrix",
    "NotSquare",
    "DimensionMismatch",
    "SingularMatrix",
]

# ---------------------------------------------------------------------
# Library code only logs; the command line decides what gets shown.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
