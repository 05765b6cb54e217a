"""Digit-reversal palindrome check for integers."""

from __future__ import annotations


def reverse_digits(n: int) -> int:
    """Return ``n`` with its decimal digits reversed; zero for non-positive ``n``."""
    reversed_value = 0
    while n > 0:
        n, digit = divmod(n, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def is_palindrome_number(n: int) -> bool:
    """Tell whether ``n`` reads the same with its digits reversed."""
    return n == reverse_digits(n)