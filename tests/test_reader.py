# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import io

import pytest

from matcalc.errors import InvalidFile
from matcalc.reader import MatrixReader, split_tokens
from matcalc.utils import MAX_LINE_LENGTH, MAX_ROWS_COLS


def make_reader(text: str) -> MatrixReader:
    return MatrixReader(io.StringIO(text, newline="\n"), "mem.txt")


def test_split_tokens_on_file_separators_only():
    assert split_tokens("  1\t2 \r\n") == ["1", "2"]
    assert split_tokens("\t\t\r\n") == []
    # vertical tab is not a separator
    assert split_tokens("1\x0b2") == ["1\x0b2"]


def test_read_line_skips_blank_and_comment_lines():
    reader = make_reader("\n# a comment\n   \n#another\nmatrix 1 1\n")
    assert reader.read_line() == "matrix"
    assert reader.line_number == 5
    assert reader.token == "matrix"


def test_next_token_walks_the_line():
    reader = make_reader("a b\tc\n")
    assert reader.read_line() == "a"
    assert reader.next_token() == "b"
    assert reader.next_token() == "c"
    assert reader.next_token() is None
    assert reader.token is None


def test_trailing_comment_ends_the_line():
    reader = make_reader("1 2 # 3 4\n")
    reader.read_line()
    assert reader.next_token() == "2"
    assert reader.next_token() is None
    assert reader.next_token() is None


def test_comment_glued_to_token_is_part_of_token():
    reader = make_reader("1 2#x\n")
    reader.read_line()
    assert reader.next_token() == "2#x"


def test_end_of_input_reports_empty_token():
    reader = make_reader("only\n\n")
    reader.read_line()
    with pytest.raises(InvalidFile) as info:
        reader.read_line()
    err = info.value
    assert err.file_name == "mem.txt"
    assert err.line_number == 3
    assert err.token == ""
    assert "ended unexpectedly" in err.reason


def test_overlong_line_is_rejected():
    reader = make_reader("1 " * MAX_LINE_LENGTH + "\n")
    with pytest.raises(InvalidFile) as info:
        reader.read_line()
    assert info.value.line_number == 1


def test_crlf_lines_are_counted_once():
    reader = make_reader("# c\r\n\r\nx y\r\n")
    assert reader.read_line() == "x"
    assert reader.line_number == 3
    assert reader.next_token() == "y"
    assert reader.next_token() is None


def test_fail_uses_current_token():
    reader = make_reader("bad token\n")
    reader.read_line()
    err = reader.fail("oops")
    assert (err.line_number, err.token, err.reason) == (1, "bad", "oops")


def test_line_of_exactly_max_length_is_accepted():
    line = "1" + " " * (MAX_LINE_LENGTH - 2) + "\n"
    assert len(line) == MAX_LINE_LENGTH
    reader = make_reader(line)
    assert reader.read_line() == "1"
    assert reader.next_token() is None


def test_line_one_past_max_length_is_rejected():
    line = "1" + " " * (MAX_LINE_LENGTH - 1) + "\n"
    assert len(line) == MAX_LINE_LENGTH + 1
    reader = make_reader(line)
    with pytest.raises(InvalidFile) as info:
        reader.read_line()
    assert info.value.line_number == 1
    assert "longer than" in info.value.reason


def test_wide_row_tokens_come_back_in_order():
    n = MAX_ROWS_COLS
    reader = make_reader(" ".join(str(k) for k in range(n)) + " # tail\n")
    assert reader.read_line() == "0"
    got = []
    while True:
        tok = reader.next_token()
        if tok is None:
            break
        got.append(tok)
    assert got == [str(k) for k in range(1, n)]
    assert reader.next_token() is None
