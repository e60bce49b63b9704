"""Parsing climate records with a descriptive error type."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from .errors import _parse_int

_FLOAT_EMPTY = "cannot parse float from empty string"
_FLOAT_INVALID = "invalid float literal"
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _parse_float(text: str) -> float:
    if not text:
        raise ValueError(_FLOAT_EMPTY)
    if not _FLOAT_PATTERN.fullmatch(text):
        raise ValueError(_FLOAT_INVALID)
    return float(text)


class ClimateErrorKind(enum.Enum):
    """What went wrong while parsing a climate record."""

    EMPTY = "empty"
    BAD_LEN = "bad_len"
    NO_CITY = "no_city"
    PARSE_INT = "parse_int"
    PARSE_FLOAT = "parse_float"


class ParseClimateError(ValueError):
    """A climate record could not be parsed."""

    def __init__(self, kind: ClimateErrorKind, source: ValueError | None = None) -> None:
        self.kind = kind
        self.source = source
        super().__init__(self._describe())

    def _describe(self) -> str:
        match self.kind:
            case ClimateErrorKind.EMPTY:
                return "empty input"
            case ClimateErrorKind.BAD_LEN:
                return "incorrect number of fields"
            case ClimateErrorKind.NO_CITY:
                return "no city name"
            case ClimateErrorKind.PARSE_INT:
                return f"error parsing year: {self.source}"
            case ClimateErrorKind.PARSE_FLOAT:
                return f"error parsing temperature: {self.source}"


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float

    @classmethod
    def parse(cls, s: str) -> "Climate":
        """Parse "city,year,temp"; raise ParseClimateError on bad input."""
        if not s:
            raise ParseClimateError(ClimateErrorKind.EMPTY)
        fields = s.split(",")
        if len(fields) != 3:
            raise ParseClimateError(ClimateErrorKind.BAD_LEN)
        city, year_text, temp_text = fields
        if not city:
            raise ParseClimateError(ClimateErrorKind.NO_CITY)
        try:
            year = _parse_int(year_text, bits=32, signed=False)
        except ValueError as exc:
            raise ParseClimateError(ClimateErrorKind.PARSE_INT, exc) from exc
        try:
            temp = _parse_float(temp_text)
        except ValueError as exc:
            raise ParseClimateError(ClimateErrorKind.PARSE_FLOAT, exc) from exc
        return cls(city=city, year=year, temp=temp)