"""Operations on 32-bit signed integers: digit reversal, parsing, palindromes."""

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def reverse(x):
    """Reverse the decimal digits of x; return 0 if the result leaves 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if INT_MIN <= result <= INT_MAX else 0


def my_atoi(s):
    """Parse a leading integer from s, clamped to the 32-bit signed range.

    Leading spaces are skipped, an optional sign is read, then decimal
    digits up to the first other character. No digits gives 0.
    """
    text = s.lstrip(" ")
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]
    limit = INT_MAX + 1 if negative else INT_MAX
    value = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
        if value > limit:
            return INT_MIN if negative else INT_MAX
    return -value if negative else value


def is_palindrome(x):
    """Return whether the decimal digits of x read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]