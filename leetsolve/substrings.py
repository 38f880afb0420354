"""Substring searches: longest run without repeats, longest palindrome."""


def length_of_longest_substring(s):
    """Return the length of the longest substring of s with no repeated character."""
    last_seen = {}
    start = 0
    best = 0
    for i, ch in enumerate(s):
        start = max(start, last_seen.get(ch, 0))
        last_seen[ch] = i + 1
        best = max(best, i - start + 1)
    return best


def _expand(s, lo, hi):
    """Grow a palindrome around lo..hi; return its half-open bounds."""
    while lo >= 0 and hi < len(s) and s[lo] == s[hi]:
        lo -= 1
        hi += 1
    return lo + 1, hi


def longest_palindrome(s):
    """Return the longest palindromic substring of s.

    Odd-length centres are tried first, then even-length ones; on a tie
    the earliest one found is kept.
    """
    best_start, best_end = 0, 0
    for lo_offset in (0, 1):
        for centre in range(len(s)):
            start, end = _expand(s, centre, centre + lo_offset)
            if end - start > best_end - best_start:
                best_start, best_end = start, end
    return s[best_start:best_end]