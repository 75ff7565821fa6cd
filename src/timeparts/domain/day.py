"""Day: a day-of-month number.

The 1..31 bound is deliberately permissive: ``Day(31)`` exists even
though April has 30 days. Callers that need a calendar-valid day pair
it with a year and month through :meth:`Day.clamp`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from timeparts.domain.errors import DomainError
from timeparts.domain.month import Month
from timeparts.domain.year import Year


@dataclass(frozen=True, order=True)
class Day:
    """A day of the month, ordered and hashed by its number."""

    value: int

    def __post_init__(self) -> None:
        if not 1 <= self.value <= 31:
            msg = f"Invalid day number: {self.value}. Must be between 1 and 31."
            raise DomainError(msg, field="day")

    @classmethod
    def from_date(cls, value: date) -> Day:
        return cls(int(value.day))

    def clamp(self, year: Year, month: Month) -> Day:
        """Cap the day at the length of *month* in *year*.

        Examples:
            >>> Day(31).clamp(Year(2023), Month.APRIL)
            Day(value=30)
            >>> Day(29).clamp(Year(2024), Month.FEBRUARY)
            Day(value=29)
        """
        return Day(min(self.value, month.days_in_month(year)))

    def two_digit(self) -> str:
        """Zero-padded form, e.g. ``"05"``."""
        return f"{self.value:02d}"

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
