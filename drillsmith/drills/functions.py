"""Small functions: calling, parameters and return values."""

from __future__ import annotations


def call_me(num: int = 0) -> None:
    """Ring once for each call requested."""
    for i in range(num):
        print(f"Ring! Call number {i + 1}")


def is_even(num: int) -> bool:
    """Whether a number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off even prices and 3 off odd prices."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The square of a number."""
    return num * num