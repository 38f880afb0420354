# leetsolve

Small solutions to a handful of classic interview puzzles. The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `leetsolve.two_sum` | `two_sum_brute(nums, target)`, `two_sum_two_pointer(nums, target)` |
| `leetsolve.linked_list` | `ListNode`, `build_list(values)`, `list_values(node)`, `add_two_numbers(l1, l2)`, `add_two_numbers_recursive(l1, l2)` |
| `leetsolve.substrings` | `length_of_longest_substring(s)`, `longest_palindrome(s)` |
| `leetsolve.median` | `find_median_sorted_arrays(a, b)`, `find_median_merged(a, b)` |
| `leetsolve.zigzag` | `convert(s, num_rows)` |
| `leetsolve.integers` | `reverse(x)`, `my_atoi(s)`, `is_palindrome(x)` |

### Two sum

- `two_sum_brute` tries pairs in order and returns the first index pair `(i, j)` with `i < j` whose values add up to the target.
- `two_sum_two_pointer` sorts the values and scans them from both ends. The first index it returns belongs to the smaller value.
- Both return `None` when no pair matches.

### Linked lists

- `ListNode` is a dataclass with `val` and `next` fields. Iterating over a node yields the values from that node to the end of the list.
- `build_list` turns an iterable into a linked list, or `None` when the iterable is empty.
- `list_values` turns a linked list back into a Python list.
- `add_two_numbers` and `add_two_numbers_recursive` add two numbers whose digits are stored least significant digit first. The first loops and the second recurses; both return the same list.

### Substrings

- `length_of_longest_substring` returns the length of the longest run of characters with no character repeated.
- `longest_palindrome` returns the longest palindromic substring. Odd-length centres are tried first and then even-length ones. When two palindromes are equally long, the first one found is kept.

### Median

- `find_median_merged` merges the two sorted inputs and then takes the median.
- `find_median_sorted_arrays` does a binary search on the shorter input.
- Both return a `float`. Both raise `ValueError` when the two inputs are empty together. `find_median_sorted_arrays` also raises `ValueError` when its search fails because the inputs are not sorted.

### Zigzag

- `convert` writes the string in a zigzag across `num_rows` rows and reads it back row by row.
- The string comes back unchanged when `num_rows` is 1 or less, or when it is at least the length of the string.

### Integers

These follow signed 32-bit rules.

- `reverse` reverses the decimal digits and returns 0 when the result falls outside the 32-bit range.
- `my_atoi` skips leading spaces and reads an optional sign. It then reads digits up to the first other character and clamps the result to the 32-bit range. It returns 0 when there are no digits.
- `is_palindrome` is `False` for negative numbers.

## Examples

```python
from leetsolve.two_sum import two_sum_brute
from leetsolve.linked_list import build_list, list_values, add_two_numbers
from leetsolve.substrings import length_of_longest_substring, longest_palindrome
from leetsolve.median import find_median_sorted_arrays
from leetsolve.zigzag import convert
from leetsolve.integers import reverse, my_atoi, is_palindrome

two_sum_brute([2, 7, 11, 15], 9)              # (0, 1)

# Digits are stored least significant first: 342 + 465 = 807
list_values(add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4])))
# [7, 0, 8]

length_of_longest_substring("abcabcbb")       # 3
longest_palindrome("cbbd")                    # "bb"

find_median_sorted_arrays([1, 3], [2])        # 2.0

convert("PAYPALISHIRING", 3)                  # "PAHNAPLSIIGYIR"

reverse(123)                                  # 321
reverse(1534236469)                           # 0 (overflows 32 bits)
my_atoi("   -42")                             # -42
is_palindrome(121)                            # True
```

## What it does not do

This is a library of functions. It has no command-line tool, and it does not include a solver for regular-expression matching.