"""Quizzes on functions, strings, tests and macros."""

from __future__ import annotations


def calculate_apple_price(apples: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought at once."""
    return apples if apples > 40 else apples * 2


def string_slice(arg: str) -> None:
    """Print a borrowed piece of text."""
    print(arg)


def string(arg: str) -> None:
    """Print an owned piece of text."""
    print(arg)


def show_strings() -> None:
    """Print a series of literal and derived strings."""
    string_slice("blue")
    string("red")
    string("hi")
    string("rust is fun!")
    string("nice weather")
    string(f"Interpolation {'Station'}")
    string_slice("abc"[0:1])
    string_slice("  hello there ".strip())
    string("Happy Monday!".replace("Mon", "Tues"))
    string("mY sHiFt KeY iS sTiCkY".lower())


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def my_macro(text: str) -> str:
    """Greet whatever text is given."""
    return f"Hello {text}"