"""Warm-up drills: strings, ownership of lists, optional values, modules and more."""

from __future__ import annotations

import sys
import time
from typing import Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")

_FRUITS = {"PEAR": "Pear", "APPLE": "Apple"}
_VEGGIES = {"CUCUMBER": "Cucumber", "CARROT": "Carrot"}


def current_favorite_color() -> str:
    """The current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colour words."""
    return attempt in ("green", "blue", "red")


def fill_vec(values: Iterable[int]) -> list[int]:
    """A new list holding the given values followed by 22, 44 and 66."""
    return [*values, 22, 44, 66]


def print_number(maybe_number: Optional[int]) -> str:
    """Print a number that must be present; raise ValueError when it is None."""
    if maybe_number is None:
        raise ValueError("no number given")
    line = f"printing: {maybe_number}"
    print(line)
    return line


def drain_optionals(values: Iterable[Optional[T]]) -> list[T]:
    """Take values from the end until the list is empty or a None is met.

    Prints each value taken and returns them in the order taken.
    """
    stack = list(values)
    taken: list[T] = []
    while stack:
        value = stack.pop()
        if value is None:
            break
        print(f"current value: {value}")
        taken.append(value)
    return taken


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> str:
    """Make a sausage from the secret recipe."""
    _get_secret_recipe()
    print("sausage!")
    return "sausage!"


def favorite_snacks() -> tuple[str, str]:
    """The favourite fruit and vegetable."""
    return _FRUITS["PEAR"], _VEGGIES["CUCUMBER"]


def seconds_since_epoch() -> int:
    """Whole seconds elapsed since 1970-01-01 00:00:00 UTC."""
    now = time.time()
    if now < 0:
        raise RuntimeError("SystemTime before UNIX EPOCH!")
    return int(now)


def my_macro(*args: object) -> str:
    """Print a greeting; with one argument, show that argument as well."""
    match args:
        case ():
            line = "Check out my macro!"
        case (value,):
            line = f"Look at this other macro: {value}"
        case _:
            raise TypeError("my_macro takes at most one argument")
    print(line)
    return line


def classify_char(ch: str) -> str:
    """Describe a single character as alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError("exactly one character is required")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(values: Sequence[object]) -> str:
    """Comment on the size of a sequence; 100 or more counts as big."""
    if len(values) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence[T]) -> list[T]:
    """Elements 1 to 3 of the sequence; it must hold at least four."""
    if len(values) < 4:
        raise IndexError("range end index 4 out of range")
    return list(values[1:4])


def is_even(num: int) -> bool:
    """Whether a number is even."""
    return num % 2 == 0


def floats_differ(x: float, y: float) -> bool:
    """Whether two floats differ by more than machine epsilon."""
    return abs(y - x) > sys.float_info.epsilon


def add_optional(res: int, option: Optional[int]) -> int:
    """Add the optional value when it is present."""
    if option is None:
        return res
    return res + option