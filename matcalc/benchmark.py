#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Cofactor-expansion determinant against numpy.linalg.det.

    python -m matcalc.benchmark

Needs the ``bench`` extra (pandas, tabulate).
"""

import time

import numpy as np
import pandas as pd

from .engine import determinant, inverse
from .matrix import Matrix
from .utils import random_nonsingular

REPEATS = 3
SIZES = (2, 3, 4, 5, 6, 7)


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def run(sizes=SIZES, repeats=REPEATS, seed=0) -> pd.DataFrame:
    records = []
    for n in sizes:
        A = random_nonsingular(n, seed=seed + n)
        M = Matrix(A)

        t_np = min(wall(np.linalg.det, A) for _ in range(repeats))
        t_ours = min(wall(determinant, M) for _ in range(repeats))

        d_np = float(np.linalg.det(A))
        d_ours = determinant(M)
        rel_err = abs(d_ours - d_np) / max(1.0, abs(d_np))

        # residual of A @ inv(A) - I
        inv_err = np.linalg.norm(A @ inverse(M).to_array() - np.eye(n), np.inf)
        records.append((f"{n}x{n}", t_ours, t_ours / t_np, rel_err, inv_err))

    return pd.DataFrame(
        records,
        columns=["size", "sec", "sec/NumPy", "det_rel_err", "inv_residual"],
    )


if __name__ == "__main__":
    df = run()
    print(df.to_markdown(index=False))
