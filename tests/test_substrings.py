import pytest
from hypothesis import given, strategies as st

from leetsolve.substrings import length_of_longest_substring, longest_palindrome

small_text = st.text(alphabet="abcde", max_size=40)


@pytest.mark.parametrize(
    "text, expected",
    [("abcabcbb", 3), ("bbbbb", 1), ("", 0)],
)
def test_longest_substring_examples(text, expected):
    assert length_of_longest_substring(text) == expected


def test_longest_substring_all_distinct():
    text = "abcdefg"
    assert length_of_longest_substring(text) == len(text)


@given(small_text)
def test_longest_substring_bounds(text):
    n = length_of_longest_substring(text)
    assert n <= len(set(text))
    assert n <= len(text)
    windows = [text[i : i + n] for i in range(len(text) - n + 1)]
    assert any(len(set(w)) == n for w in windows)
    if n < len(text):
        wider = [text[i : i + n + 1] for i in range(len(text) - n)]
        assert all(len(set(w)) <= n for w in wider)


def test_palindrome_prefers_first_odd():
    assert longest_palindrome("babad") == "bab"


def test_palindrome_even():
    assert longest_palindrome("cbbd") == "bb"


def test_palindrome_empty_and_single():
    assert longest_palindrome("") == ""
    assert longest_palindrome("q") == "q"


def test_whole_string_palindrome():
    text = "racecar"
    assert longest_palindrome(text) == text


@given(small_text)
def test_palindrome_invariants(text):
    result = longest_palindrome(text)
    assert result == result[::-1]
    assert result in text
    assert (len(result) == 0) == (len(text) == 0)


@given(st.text(alphabet="ab", min_size=1, max_size=10), st.booleans())
def test_palindrome_at_least_as_long_as_planted(half, odd):
    planted = half + ("z" if odd else "") + half[::-1]
    text = "xyw" + planted + "uvt"
    result = longest_palindrome(text)
    assert len(result) >= len(planted)
    assert result == result[::-1]