"""Find two positions in a sequence whose values add up to a target."""

from itertools import combinations
from operator import itemgetter


def two_sum_brute(nums, target):
    """Return the first index pair (i, j), i < j, with nums[i] + nums[j] == target.

    Pairs are tried in order of i, then j. Returns None when no pair matches.
    """
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return (i, j)
    return None


def two_sum_two_pointer(nums, target):
    """Return an index pair whose values sum to target, found on sorted values.

    The values are sorted, then scanned from both ends. The first index
    belongs to the smaller value. Returns None when no pair matches.
    """
    items = sorted(enumerate(nums), key=itemgetter(1))
    lo, hi = 0, len(items) - 1
    while lo < hi:
        total = items[lo][1] + items[hi][1]
        if total > target:
            hi -= 1
        elif total < target:
            lo += 1
        else:
            return (items[lo][0], items[hi][0])
    return None