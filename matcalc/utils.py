# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from importlib.metadata import version as _pkg_version

import numpy as np

try:  # installed via pip / build backend
    VERSION: str = _pkg_version("matcalc")
except Exception:  # running from a checkout
    VERSION = "0.0.0.dev0"

MAX_LINE_LENGTH: int = 40000  # including the trailing newline
MAX_ROWS_COLS: int = 2000
TOKEN_SEPARATORS: str = " \t\r\n"


def cofactor_sign(row: int, col: int) -> float:
    """Return +1 or -1 following the (-1)^(row+col) checkerboard."""
    return -1.0 if (row + col) & 1 else 1.0


def random_nonsingular(n, low=-10, high=10, seed=None) -> np.ndarray:
    """
    Build an n-by-n matrix with random entries that is strictly
    diagonally dominant, hence nonsingular.

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    A = rng.uniform(low, high, size=(n, n))
    # push every diagonal entry past the sum of its row
    row_sums = np.abs(A).sum(axis=1)
    A[np.diag_indices(n)] = row_sums + rng.uniform(1.0, 2.0, size=n)
    return np.asarray(A)
