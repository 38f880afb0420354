"""Median of two sorted sequences."""

import math
from heapq import merge


def find_median_merged(a, b):
    """Return the median of two sorted sequences by merging them."""
    merged = list(merge(a, b))
    if not merged:
        raise ValueError("median of empty input")
    mid = len(merged) // 2
    if len(merged) % 2:
        return float(merged[mid])
    return (merged[mid - 1] + merged[mid]) / 2.0


def find_median_sorted_arrays(a, b):
    """Return the median of two sorted sequences by binary search on the shorter."""
    if len(a) > len(b):
        a, b = b, a
    n, m = len(a), len(b)
    total = n + m
    if total == 0:
        raise ValueError("median of empty input")
    half = (total + 1) // 2
    lo, hi = 0, n
    while lo <= hi:
        i = (lo + hi) // 2
        j = half - i
        left_a = a[i - 1] if i > 0 else -math.inf
        right_a = a[i] if i < n else math.inf
        left_b = b[j - 1] if j > 0 else -math.inf
        right_b = b[j] if j < m else math.inf
        if left_a <= right_b and left_b <= right_a:
            left = max(left_a, left_b)
            if total % 2:
                return float(left)
            return (left + min(right_a, right_b)) / 2.0
        if left_a > right_b:
            hi = i - 1
        else:
            lo = i + 1
    raise ValueError("inputs must be sorted")