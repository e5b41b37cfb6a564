"""Date value types for both citation formats.

Format A (CFF) dates are fixed-precision calendar dates. Format B (CSL-JSON)
dates come in four shapes that share one block of metadata.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from citemap.models._extra import freeze_extra

__all__ = [
    "CalendarDate",
    "DateParts",
    "Season",
    "CircaKind",
    "Circa",
    "DateMeta",
    "SingleDate",
    "DateRange",
    "RawDate",
    "EdtfDate",
    "DateValue",
]


@dataclass(frozen=True)
class CalendarDate:
    """Exact date written as ``YYYY-MM-DD``.

    Attributes
    ----------
    year : int
        Gregorian year.
    month : int
        Month, 1-12.
    day : int
        Day of month, 1-31. Not checked against the month's length.
    """

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class DateParts:
    """Year with optional month and day, as in a CSL ``date-parts`` element.

    Attributes
    ----------
    year : int
        Year.
    month : int | None
        Month, 1-12, if known.
    day : int | None
        Day of month, 1-31, if known.
    """

    year: int
    month: int | None = None
    day: int | None = None

    def as_list(self) -> list[int]:
        """Return the parts as the document's integer list."""
        parts = [self.year]
        if self.month is not None:
            parts.append(self.month)
            if self.day is not None:
                parts.append(self.day)
        return parts

    def __str__(self) -> str:
        text = str(self.year)
        if self.month is not None:
            text += f"-{self.month:02d}"
            if self.day is not None:
                text += f"-{self.day:02d}"
        return text


class Season(Enum):
    """Seasons recognised by CSL."""

    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"


class CircaKind(Enum):
    """Variant tag of a circa value."""

    ARBITRARY = "arbitrary"
    YEAR = "year"
    FLAG = "flag"


@dataclass(frozen=True)
class Circa:
    """Imprecision marker on a date.

    A string is kept as-is, an integer is an approximate year, and a boolean
    flags the whole date as approximate.
    """

    kind: CircaKind
    value: str | int | bool

    @classmethod
    def arbitrary(cls, value: str) -> "Circa":
        return cls(CircaKind.ARBITRARY, value)

    @classmethod
    def year(cls, value: int) -> "Circa":
        return cls(CircaKind.YEAR, value)

    @classmethod
    def flag(cls, value: bool) -> "Circa":
        return cls(CircaKind.FLAG, value)


@dataclass(frozen=True)
class DateMeta:
    """Metadata shared by every CSL date shape.

    Attributes
    ----------
    season : Season | str | None
        Season; unrecognised free text is kept as a plain string.
    circa : Circa | None
        Imprecision marker.
    literal : str | None
        Full date in whatever format.
    extra : Mapping[str, Any]
        Date keys outside the known schema, in document order.
    season_source : str | int | None
        The season exactly as written in the document, if decoded from one.
        Ignored by equality; the encoder writes it back while it still
        agrees with ``season``.
    """

    season: Season | str | None = None
    circa: Circa | None = None
    literal: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)
    season_source: str | int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        freeze_extra(self)


@dataclass(frozen=True)
class SingleDate:
    """Structured single date (one ``date-parts`` element)."""

    date: DateParts
    meta: DateMeta = field(default_factory=DateMeta)


@dataclass(frozen=True)
class DateRange:
    """Structured date range (two ``date-parts`` elements)."""

    start: DateParts
    end: DateParts
    meta: DateMeta = field(default_factory=DateMeta)


@dataclass(frozen=True)
class RawDate:
    """Free-form date string, not interpreted."""

    date: str
    meta: DateMeta = field(default_factory=DateMeta)


@dataclass(frozen=True)
class EdtfDate:
    """Extended Date/Time Format string, not interpreted."""

    date: str
    meta: DateMeta = field(default_factory=DateMeta)


DateValue = SingleDate | DateRange | RawDate | EdtfDate
