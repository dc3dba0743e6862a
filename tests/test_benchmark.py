# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from matcalc.benchmark import run


def test_benchmark_table():
    df = run(sizes=(2, 3, 4), repeats=1)
    assert list(df["size"]) == ["2x2", "3x3", "4x4"]
    assert (df["det_rel_err"] < 1e-10).all()
    assert (df["inv_residual"] < 1e-10).all()


def test_benchmark_table_renders_as_markdown():
    table = run(sizes=(2,), repeats=1).to_markdown(index=False)
    assert "sec/NumPy" in table
    assert "2x2" in table
