# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Line-oriented tokenizer for matrix files.
"""

import logging
import re
from typing import Iterator, List, Optional, TextIO

from .errors import InvalidFile
from .utils import MAX_LINE_LENGTH, TOKEN_SEPARATORS

logger = logging.getLogger(__name__)

COMMENT = "#"

_SPLIT = re.compile(f"[{re.escape(TOKEN_SEPARATORS)}]+")


def split_tokens(line: str) -> List[str]:
    """Split on space, tab, CR and LF only (not on other whitespace)."""
    return [tok for tok in _SPLIT.split(line) if tok]


class MatrixReader:
    """
    Cursor over one matrix file.

    Tracks the 1-based physical line number and the most recently extracted
    token so every error can point at the exact spot in the file. The cursor
    only moves forward.

    Parameters
    ----------
    stream : TextIO
        Any text stream (an open file, ``io.StringIO``...).
    name : str
        Name reported in diagnostics.
    """

    def __init__(self, stream: TextIO, name: str):
        self.name = name
        self.line_number = 0
        self.token: Optional[str] = None
        self._lines: Iterator[str] = iter(stream)
        self._tokens: List[str] = []
        self._pos = 0

    def fail(self, reason: str = "", token: Optional[str] = None) -> InvalidFile:
        """Build the error for the current position (the caller raises it)."""
        if token is None:
            token = self.token if self.token is not None else ""
        return InvalidFile(self.name, self.line_number, token, reason)

    def read_line(self) -> str:
        """
        Move to the next significant line and return its first token.

        Blank lines and lines whose first token starts with ``#`` are skipped,
        but still counted. Raises ``InvalidFile`` when the input runs out or a
        line is longer than ``MAX_LINE_LENGTH``.
        """
        while True:
            self.line_number += 1
            line = next(self._lines, None)
            if line is None:
                raise self.fail("The file ended unexpectedly.", token="")
            if len(line) > MAX_LINE_LENGTH:
                raise self.fail(
                    f"Line is longer than {MAX_LINE_LENGTH} characters.",
                    token=line[:40],
                )

            tokens = split_tokens(line)
            if not tokens or tokens[0].startswith(COMMENT):
                continue

            self.token = tokens[0]
            self._tokens = tokens
            self._pos = 1
            return self.token

    def next_token(self) -> Optional[str]:
        """
        Return the next token on the current line, or None at end of line.

        A token starting with ``#`` begins a trailing comment and ends the line.
        """
        if self._pos >= len(self._tokens) or self._tokens[self._pos].startswith(COMMENT):
            self._pos = len(self._tokens)
            self.token = None
            return None
        self.token = self._tokens[self._pos]
        self._pos += 1
        return self.token
