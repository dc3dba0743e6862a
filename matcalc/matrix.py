# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix data model
"""

from typing import Iterable, Sequence, Tuple

import numpy as np


class Matrix:
    """
    A rows-by-cols block of float64 values held in row-major order.

    The shape is fixed at construction; ``values`` is the flat view of the
    buffer, so ``values[r * cols + c]`` is the element on row r, column c.
    """

    __slots__ = ("_data",)

    def __init__(self, data: np.ndarray):
        data = np.array(data, dtype=float, order="C")
        if data.ndim != 2:
            raise ValueError(f"Matrix data must be 2-D, got {data.ndim}-D")
        rows, cols = data.shape
        if rows < 1 or cols < 1:
            raise ValueError(f"Matrix must be at least 1x1, got {rows}x{cols}")
        self._data = data

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        if rows < 1 or cols < 1:
            raise ValueError(f"Matrix must be at least 1x1, got {rows}x{cols}")
        return cls(np.zeros((rows, cols), dtype=float))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> "Matrix":
        return cls(np.array([list(r) for r in rows], dtype=float))

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    @property
    def values(self) -> np.ndarray:
        """Flat row-major view; writes go straight into the buffer."""
        return self._data.reshape(-1)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def to_array(self) -> np.ndarray:
        return self._data.copy()

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = index
        return float(self._data[row, col])

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        row, col = index
        self._data[row, col] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def allclose(self, other: "Matrix", rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        return self.shape == other.shape and bool(
            np.allclose(self._data, other._data, rtol=rtol, atol=atol)
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data.tolist()})"
