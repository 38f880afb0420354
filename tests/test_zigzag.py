import pytest
from hypothesis import given, strategies as st

from leetsolve.zigzag import convert

TEXT = "PAYPALISHIRING"


def test_three_rows():
    assert convert(TEXT, 3) == "PAHNAPLSIIGYIR"


def test_four_rows():
    assert convert(TEXT, 4) == "PINALSIGYAHRPI"


@pytest.mark.parametrize("rows", [1, 0, -2])
def test_single_or_fewer_rows_is_identity(rows):
    assert convert(TEXT, rows) == TEXT


def test_rows_at_least_length_is_identity():
    assert convert("abc", 3) == "abc"
    assert convert("abc", 10) == "abc"


def test_two_rows_splits_even_and_odd_positions():
    text = "abcdefg"
    assert convert(text, 2) == text[::2] + text[1::2]


def test_first_row_holds_cycle_starts():
    text = "abcdefghijklmnop"
    rows = 4
    cycle = 2 * rows - 2
    result = convert(text, rows)
    assert result.startswith(text[::cycle])


@given(st.text(max_size=60), st.integers(1, 12))
def test_is_a_permutation(text, rows):
    result = convert(text, rows)
    assert sorted(result) == sorted(text)


@given(st.text(min_size=1, max_size=60))
def test_first_character_kept_in_front(text):
    assert convert(text, 3)[0] == text[0]