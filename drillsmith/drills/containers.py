"""Recursive lists, generic wrappers and appending behaviour for several types."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Generic, Iterable, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons list cell: a value followed by the rest of the list."""

    value: int
    rest: "ConsList"


ConsList = Union[Cons, Nil]


def create_empty_list() -> Nil:
    """A cons list with no items."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single zero."""
    return Cons(0, Nil())


def shopping_list() -> list[str]:
    """A shopping list with milk on it."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@dataclass
class ReportCard(Generic[T]):
    """A student's report card with a numeric or alphabetic grade."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        """The report card as one line of text."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )


@singledispatch
def append_bar(value: object) -> object:
    """Append "Bar": to the end of a string, or as a new item of a list."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


def append_each(strings: Iterable[str]) -> list[str]:
    """Append "Bar" to every string."""
    return [s + "Bar" for s in strings]