from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR
from typing import TYPE_CHECKING

from payment_queries.domain.exceptions import InvalidYearMonthError

if TYPE_CHECKING:
    from datetime import date

_YEAR_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, slots=True, order=True)
class YearMonth:
    """A calendar month of a specific year, e.g. 2024-01.

    Ordering follows the calendar (year first, then month).
    Membership is decided on calendar fields only: day, time of day
    and UTC offset of the tested value are ignored.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        for field_name in ("year", "month"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidYearMonthError(
                    f"{field_name} must be an int, got {type(value).__name__}"
                )

        if not MINYEAR <= self.year <= MAXYEAR:
            raise InvalidYearMonthError(
                f"year must be between {MINYEAR} and {MAXYEAR}, got {self.year}"
            )

        if not 1 <= self.month <= 12:
            raise InvalidYearMonthError(f"month must be between 1 and 12, got {self.month}")

    @classmethod
    def of(cls, year: int, month: int) -> YearMonth:
        return cls(year=year, month=month)

    @classmethod
    def from_datetime(cls, value: date) -> YearMonth:
        """Take the year and month of a date or datetime as written,
        without converting its timezone."""
        return cls(year=value.year, month=value.month)

    @classmethod
    def parse(cls, text: str) -> YearMonth:
        """Parse the ISO 8601 form YYYY-MM.

        Raises:
            InvalidYearMonthError: If the text is not YYYY-MM or is out of range.
        """
        match = _YEAR_MONTH_PATTERN.match(text.strip()) if isinstance(text, str) else None
        if match is None:
            raise InvalidYearMonthError(f"Invalid year-month, expected YYYY-MM: {text!r}")
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    def contains(self, value: date) -> bool:
        return value.year == self.year and value.month == self.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
