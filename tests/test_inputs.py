import io

import pytest

from algodrills.inputs import read_line, read_sized


def test_read_sized_single_line():
    assert read_sized(io.StringIO("3 1 2 3\n")) == [1, 2, 3]


def test_read_sized_across_lines():
    assert read_sized(io.StringIO("3\n1\n2 3\n")) == [1, 2, 3]


def test_read_sized_zero():
    assert read_sized(io.StringIO("0\n")) == []


def test_read_sized_length_matches_count():
    values = read_sized(io.StringIO("4\n9 8 7 6 5\n"))
    assert len(values) == 4
    assert values == [9, 8, 7, 6]


def test_read_sized_too_short():
    with pytest.raises(EOFError):
        read_sized(io.StringIO("3\n1 2\n"))


def test_read_sized_empty():
    with pytest.raises(EOFError):
        read_sized(io.StringIO(""))


def test_read_sized_bad_token():
    with pytest.raises(ValueError):
        read_sized(io.StringIO("2\n1 x\n"))


def test_read_sized_negative_rejected():
    with pytest.raises(ValueError):
        read_sized(io.StringIO("1\n-5\n"))


def test_read_sized_upper_bound():
    assert read_sized(io.StringIO("1 4294967295")) == [4294967295]
    with pytest.raises(ValueError):
        read_sized(io.StringIO("1 4294967296"))


def test_read_line_successive_lines():
    stream = io.StringIO("4 5 6\n7 8\n")
    assert read_line(stream) == [4, 5, 6]
    assert read_line(stream) == [7, 8]


def test_read_line_skips_blank_lines():
    assert read_line(io.StringIO("\n   \n10 20\n")) == [10, 20]


def test_read_line_without_newline():
    assert read_line(io.StringIO("1 2")) == [1, 2]


def test_read_line_exhausted():
    with pytest.raises(EOFError):
        read_line(io.StringIO("\n\n"))


def test_read_line_bad_token():
    with pytest.raises(ValueError):
        read_line(io.StringIO("1 2.5\n"))