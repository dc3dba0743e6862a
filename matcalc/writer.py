# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import sys
from typing import List, Optional, TextIO, Union

from .errors import FileOpenError
from .matrix import Matrix
from .parser import END_KEYWORD, HEADER_KEYWORD
from .utils import VERSION

logger = logging.getLogger(__name__)

REV_DATE = "30-Oct-2019"
VALUE_FORMAT = "%.12g"


def format_value(value: float) -> str:
    return VALUE_FORMAT % value


def format_matrix(matrix: Matrix, command: Optional[str] = None) -> str:
    """
    Render ``matrix`` in the same grammar the parser reads, preceded by
    comment lines naming the command and the program version.
    """
    lines: List[str] = []
    if command is not None:
        lines.append(f"# {command}")
    lines.append(f"# Version = {VERSION}, Revision date = {REV_DATE}")
    lines.append(f"{HEADER_KEYWORD} {matrix.rows} {matrix.cols}")
    for row in matrix.to_array().tolist():
        lines.append("\t".join(format_value(v) for v in row))
    lines.append(END_KEYWORD)
    return "\n".join(lines) + "\n"


def write_matrix(
    matrix: Matrix,
    destination: Union[str, TextIO, None] = None,
    command: Optional[str] = None,
) -> str:
    """
    Write ``matrix`` to a path, to an open text stream, or to stdout when
    ``destination`` is None.

    Returns
    -------
    name : str
        Where the matrix went ("stdout" for standard output).
    """
    text = format_matrix(matrix, command)

    if destination is None:
        sys.stdout.write(text)
        return "stdout"
    if not isinstance(destination, str):
        destination.write(text)
        return getattr(destination, "name", "<stream>")

    try:
        f = open(destination, "w", encoding="utf-8")
    except OSError as e:
        raise FileOpenError(destination, e) from e
    with f:
        f.write(text)
    logger.debug(f"wrote {matrix.rows}x{matrix.cols} matrix to {destination}")
    return destination
