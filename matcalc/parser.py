# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix file parser
==================

Grammar (blank lines and ``#`` comments allowed anywhere)::

    matrix <rows> <cols>
    <cols floating-point values>      # repeated <rows> times
    end

The first violation is fatal and raised as ``InvalidFile`` carrying the file
name, line number and offending token.
"""

import io
import logging
import re
from typing import Optional, TextIO, Tuple

from .errors import FileOpenError
from .matrix import Matrix
from .reader import MatrixReader
from .utils import MAX_ROWS_COLS

logger = logging.getLogger(__name__)

HEADER_KEYWORD = "matrix"
END_KEYWORD = "end"

_INT = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_int(token: Optional[str], reader: MatrixReader) -> int:
    """Parse a row/column count, which must lie in [1, MAX_ROWS_COLS]."""
    if token is None or not _INT.fullmatch(token):
        raise reader.fail("Stated rows or columns are invalid.")
    value = int(token)
    if value < 1:
        raise reader.fail("Stated rows or columns are invalid.")
    if value > MAX_ROWS_COLS:
        raise reader.fail(
            "Rows or columns of the matrix are bigger than the maximum value allowed."
        )
    return value


def parse_float(token: str, reader: MatrixReader) -> float:
    """Parse a matrix element; the whole token has to be a decimal number."""
    if not _FLOAT.fullmatch(token):
        raise reader.fail("Matrix element is invalid.")
    return float(token)


def _expect_line_end(reader: MatrixReader) -> None:
    if reader.next_token() is not None:
        raise reader.fail("There are unexpected characters in the file.")


def read_header(reader: MatrixReader) -> Tuple[int, int]:
    token = reader.read_line()
    if token != HEADER_KEYWORD:
        raise reader.fail(f"Expected the '{HEADER_KEYWORD}' keyword.")

    rows = parse_int(reader.next_token(), reader)
    cols = parse_int(reader.next_token(), reader)
    _expect_line_end(reader)
    return rows, cols


def read_values(reader: MatrixReader, matrix: Matrix) -> None:
    values = matrix.values
    for i in range(matrix.rows):
        token = reader.read_line()
        for j in range(matrix.cols):
            if token is None:
                raise reader.fail("Number of stated columns does not match file.")
            # 'end' showing up early means rows are missing, not a bad number
            if token == END_KEYWORD:
                raise reader.fail("Number of stated rows does not match file.")
            values[i * matrix.cols + j] = parse_float(token, reader)
            token = reader.next_token()

        if token is not None:
            raise reader.fail("There are unexpected characters in the file.")


def read_end(reader: MatrixReader) -> None:
    token = reader.read_line()
    if token != END_KEYWORD:
        raise reader.fail("Could not find the end of the file.")
    _expect_line_end(reader)


def read_matrix(stream: TextIO, name: str) -> Matrix:
    """Parse one matrix from an already open text stream."""
    reader = MatrixReader(stream, name)
    rows, cols = read_header(reader)
    logger.debug(f"{name}: declared {rows}x{cols}")

    matrix = Matrix.zeros(rows, cols)
    read_values(reader, matrix)
    read_end(reader)
    return matrix


def parse_text(text: str, name: str = "<string>") -> Matrix:
    return read_matrix(io.StringIO(text, newline="\n"), name)


def parse(file_name: str) -> Matrix:
    """
    Read and validate the matrix stored in ``file_name``.

    Raises
    ------
    FileOpenError : the file cannot be opened.
    InvalidFile   : the content does not follow the grammar.
    """
    try:
        f = open(file_name, "r", encoding="utf-8", errors="replace", newline="\n")
    except OSError as e:
        raise FileOpenError(str(file_name), e) from e

    logger.info(f"Processing file {file_name}...")
    with f:
        return read_matrix(f, str(file_name))
