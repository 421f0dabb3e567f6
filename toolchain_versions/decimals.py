from __future__ import annotations


def compare_decimal(x: str, y: str) -> int:
    """
    Compare two decimal strings by magnitude, returning -1, 0 or +1.

    Inputs carry no leading zeros, so a longer string is always larger and
    equal-length strings order lexicographically. The empty string (an absent
    component) is smaller than every digit string, including "0".
    """

    if x == y:
        return 0
    if len(x) != len(y):
        return -1 if len(x) < len(y) else 1
    return -1 if x < y else 1


def decrement_decimal(decimal: str) -> str:
    """
    Return `decimal` minus one as a decimal string.

    Zero has no predecessor and yields "" (e.g. "100" -> "99", "1" -> "0", "0" -> "").
    """

    digits = list(decimal)
    i = len(digits) - 1
    # Borrow: trailing zeros become nines until a digit can be decremented.
    while i >= 0 and digits[i] == "0":
        digits[i] = "9"
        i -= 1
    if i < 0:
        return ""
    if i == 0 and digits[i] == "1" and len(digits) > 1:
        digits = digits[1:]
    else:
        digits[i] = chr(ord(digits[i]) - 1)
    return "".join(digits)
