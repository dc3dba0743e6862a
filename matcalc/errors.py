# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Error taxonomy
==============

Every failure is fatal for the run. Each class carries the process exit
status the command line front end returns for it; a ``MemoryError`` raised
while allocating a matrix buffer maps to ``MEMORY_ERROR``.
"""

from typing import Optional

NO_ERROR = 0
INCORRECT_ARGUMENTS = 1
MEMORY_ERROR = 2
FILE_OPEN_ERROR = 3
INVALID_FILE = 4
INVALID_MATRIX = 5


class MatCalcError(Exception):
    """Base class for every error the calculator reports."""

    exit_code: int = 1


class UsageError(MatCalcError):
    """Malformed invocation: wrong operation or operand count."""

    exit_code = INCORRECT_ARGUMENTS


class FileOpenError(MatCalcError):
    """A named file could not be opened for reading or writing."""

    exit_code = FILE_OPEN_ERROR

    def __init__(self, file_name: str, cause: Optional[OSError] = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Error opening the file {file_name}.")


class InvalidFile(MatCalcError):
    """
    The content of a matrix file violates the file grammar.

    Attributes
    ----------
    file_name : str
        Name used for diagnostics (a path, or a label for in-memory text).
    line_number : int
        1-based physical line the reader was on.
    token : str
        Offending token, empty when the line or the file ran out.
    reason : str
        What was wrong, may be empty.
    """

    exit_code = INVALID_FILE

    def __init__(self, file_name: str, line_number: int, token: str, reason: str = ""):
        self.file_name = file_name
        self.line_number = line_number
        self.token = token
        self.reason = reason
        super().__init__(file_name, line_number, token, reason)

    def __str__(self) -> str:
        head = f"{self.file_name} is an invalid matrix file."
        if self.reason:
            head = f"{head} {self.reason}"
        return (
            f"{head}\nThe invalid string in line {self.line_number} "
            f"of the file is\n{self.token}"
        )


class InvalidMatrix(MatCalcError):
    """Well-formed matrices that the requested operation cannot accept."""

    exit_code = INVALID_MATRIX


class NotSquare(InvalidMatrix):
    def __init__(self, operation: str, rows: int, cols: int):
        self.operation = operation
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"This matrix is not square ({rows}x{cols}), "
            f"thus the {operation} cannot be found."
        )


class DimensionMismatch(InvalidMatrix):
    def __init__(self, left: tuple, right: tuple):
        self.left = left
        self.right = right
        super().__init__(
            "It is not possible to find the matrix product of these two "
            f"matrices ({left[0]}x{left[1]} and {right[0]}x{right[1]})."
        )


class SingularMatrix(InvalidMatrix):
    def __init__(self):
        super().__init__(
            "The determinant is 0, so the inverse of the matrix could not be found."
        )
