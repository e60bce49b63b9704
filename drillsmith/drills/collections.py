"""Maps and lists: filling baskets and transforming vectors."""

from __future__ import annotations

import enum
from typing import Iterable, MutableMapping


class Fruit(enum.Enum):
    """Kinds of fruit that can go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def build_fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and at least five fruits."""
    return {
        "banana": 2,
        "alo": 2,
        "banan": 2,
        "kiwi": 3,
        "asdf": 4,
    }


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add three of every fruit kind that is not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 3)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(v: Iterable[int]) -> list[int]:
    """Every number doubled."""
    return [x * 2 for x in v]