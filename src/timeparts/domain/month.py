"""Month: the twelve months of the civil calendar.

A closed enumeration: each member carries its number (January = 1),
full English name, and three-letter abbreviation. ``next`` and
``previous`` wrap around the year instead of failing.
"""

from __future__ import annotations

from datetime import date
from enum import IntEnum
from typing import Any

from timeparts.domain.errors import DomainError
from timeparts.domain.year import Year

# Indexed by month number; February is the common-year length.
_DAYS_IN_MONTH: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class Month(IntEnum):
    """Calendar month, ordered by number."""

    full_name: str
    short_name: str

    def __new__(cls, value: int, full_name: str, short_name: str) -> Month:
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.full_name = full_name
        obj.short_name = short_name
        return obj

    JANUARY = 1, "January", "Jan"
    FEBRUARY = 2, "February", "Feb"
    MARCH = 3, "March", "Mar"
    APRIL = 4, "April", "Apr"
    MAY = 5, "May", "May"
    JUNE = 6, "June", "Jun"
    JULY = 7, "July", "Jul"
    AUGUST = 8, "August", "Aug"
    SEPTEMBER = 9, "September", "Sep"
    OCTOBER = 10, "October", "Oct"
    NOVEMBER = 11, "November", "Nov"
    DECEMBER = 12, "December", "Dec"

    @classmethod
    def _missing_(cls, value: Any) -> Month:
        msg = f"Invalid month number: {value!r}. Must be between 1 (January) and 12 (December)."
        raise DomainError(msg, field="month")

    @classmethod
    def from_date(cls, value: date) -> Month:
        return cls(int(value.month))

    @property
    def next(self) -> Month:
        return Month(self.value % 12 + 1)

    @property
    def previous(self) -> Month:
        return Month((self.value + 10) % 12 + 1)

    def days_in_month(self, year: Year) -> int:
        """Number of days in this month of *year*."""
        return days_in_month(year, self)

    def days_this_year(self) -> int:
        """Number of days in this month of the current local year."""
        return days_in_month(Year.now(), self)

    def __str__(self) -> str:
        return self.full_name


def days_in_month(year: Year, month: Month) -> int:
    """Civil-calendar month length; February has 29 days in leap years."""
    if month is Month.FEBRUARY and year.is_leap_year:
        return 29
    return _DAYS_IN_MONTH[month.value]
