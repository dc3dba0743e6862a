# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import pytest


@pytest.fixture
def matrix_file(tmp_path):
    """Write rows of numbers as a matrix file and return its path as str."""

    def _write(name, rows):
        lines = [f"matrix {len(rows)} {len(rows[0])}"]
        lines += [" ".join(str(v) for v in row) for row in rows]
        lines.append("end")
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return str(path)

    return _write
