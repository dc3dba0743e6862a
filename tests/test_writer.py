# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import io
from importlib.metadata import version

import numpy as np
import pytest

from matcalc.errors import FileOpenError
from matcalc.matrix import Matrix
from matcalc.parser import parse, parse_text
from matcalc.writer import REV_DATE, VERSION, format_matrix, write_matrix


def test_format_matrix_layout():
    M = Matrix.from_rows([[1, 2.5], [-3, 1e-20]])
    text = format_matrix(M, command="matcalc -t in.txt")
    assert text == (
        "# matcalc -t in.txt\n"
        f"# Version = {VERSION}, Revision date = {REV_DATE}\n"
        "matrix 2 2\n"
        "1\t2.5\n"
        "-3\t1e-20\n"
        "end\n"
    )


def test_format_matrix_without_command():
    text = format_matrix(Matrix.from_rows([[1]]))
    assert text.splitlines()[0].startswith("# Version = ")


def test_values_use_twelve_significant_digits():
    text = format_matrix(Matrix.from_rows([[1 / 3, 123456789.123456789]]))
    assert "0.333333333333\t123456789.123\n" in text


def test_round_trip():
    rng = np.random.default_rng(5)
    M = Matrix(rng.normal(scale=1e3, size=(4, 6)))
    again = parse_text(format_matrix(M, command="matcalc -t x"))
    assert again.shape == M.shape
    np.testing.assert_allclose(again.to_array(), M.to_array(), rtol=1e-11, atol=0)


def test_write_to_path(tmp_path):
    path = tmp_path / "out.txt"
    M = Matrix.from_rows([[1, 2], [3, 4]])
    name = write_matrix(M, str(path), command="cmd")
    assert name == str(path)
    assert parse(str(path)) == M


def test_write_to_stream():
    buf = io.StringIO()
    write_matrix(Matrix.from_rows([[9]]), buf)
    assert "matrix 1 1\n9\nend\n" in buf.getvalue()


def test_write_to_stdout(capsys):
    name = write_matrix(Matrix.from_rows([[1, 2]]), None, command="matcalc -t a")
    out = capsys.readouterr().out
    assert name == "stdout"
    assert out.startswith("# matcalc -t a\n")
    assert "matrix 1 2\n1\t2\nend\n" in out


def test_unwritable_path(tmp_path):
    target = tmp_path / "no-such-dir" / "out.txt"
    with pytest.raises(FileOpenError):
        write_matrix(Matrix.from_rows([[1]]), str(target))


def test_header_version_comes_from_package_metadata():
    import matcalc

    assert VERSION == matcalc.__version__ == version("matcalc")
    text = format_matrix(Matrix.from_rows([[1]]))
    assert f"# Version = {version('matcalc')}, Revision date = {REV_DATE}\n" in text
