"""Reporting failures: messages, parse errors and custom error types."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_INT_EMPTY = "cannot parse integer from empty string"
_INT_INVALID = "invalid digit found in string"
_INT_TOO_LARGE = "number too large to fit in target type"
_INT_TOO_SMALL = "number too small to fit in target type"

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int = 32, signed: bool = True) -> int:
    """Parse a strictly formatted integer of a fixed width.

    Only ASCII digits with an optional leading sign are accepted; no
    whitespace or underscores. Raises ValueError with a message naming
    the problem.
    """
    if not text:
        raise ValueError(_INT_EMPTY)
    digits = text
    negative = False
    if text[0] == "+" or (signed and text[0] == "-"):
        negative = text[0] == "-"
        digits = text[1:]
    if not digits or any(c not in "0123456789" for c in digits):
        raise ValueError(_INT_INVALID)
    value = -int(digits) if negative else int(digits)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if value > high:
        raise ValueError(_INT_TOO_LARGE)
    if value < low:
        raise ValueError(_INT_TOO_SMALL)
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused with ValueError."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for a typed-in quantity: 5 per item plus a fee of 1.

    Raises ValueError when the quantity is not a valid integer.
    """
    qty = _parse_int(item_quantity, bits=32, signed=True)
    return qty * _COST_PER_ITEM + _PROCESSING_FEE


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy items if affordable and return the tokens left over."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationKind(enum.Enum):
    """Why a positive non-zero integer could not be made."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value was not a positive, non-zero integer."""

    def __init__(self, kind: CreationKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


class ParsePosNonzeroError(ValueError):
    """Parsing text into a positive non-zero integer failed.

    Exactly one of ``creation`` and ``parse_error`` is set.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        if isinstance(cause, CreationError):
            self.creation: CreationKind | None = cause.kind
            self.parse_error: ValueError | None = None
        else:
            self.creation = None
            self.parse_error = cause


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationKind.ZERO)

    @classmethod
    def parse(cls, s: str) -> "PositiveNonzeroInteger":
        """Parse text; raise ParsePosNonzeroError on any failure."""
        try:
            number = _parse_int(s, bits=64, signed=True)
        except ValueError as exc:
            raise ParsePosNonzeroError(exc) from exc
        try:
            return cls(number)
        except CreationError as exc:
            raise ParsePosNonzeroError(exc) from exc


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError."""
    return PositiveNonzeroInteger.parse(s)