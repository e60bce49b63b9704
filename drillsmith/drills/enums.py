"""Messages as a closed set of variants and a state machine that reacts to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Point:
    """A position on a small grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Quit:
    """Ask the machine to stop."""


@dataclass(frozen=True)
class Echo:
    """Ask the machine to print some text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Ask the machine to go to a new position."""

    point: Point


@dataclass(frozen=True)
class ChangeColor:
    """Ask the machine to take on a new RGB colour."""

    color: tuple[int, int, int]


Message = Union[Quit, Echo, Move, ChangeColor]


@dataclass
class MachineState:
    """Colour, position and whether a quit was requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quitting: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.quitting = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Carry out one message."""
        match message:
            case ChangeColor(color=color):
                self.change_color(color)
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")