"""Weekday: Monday (1) through Sunday (7), ISO numbering."""

from __future__ import annotations

from datetime import date
from enum import IntEnum
from typing import Any

from timeparts.domain.errors import DomainError


class Weekday(IntEnum):
    """Day of the week with English name variants and weekend flag."""

    full_name: str
    short_name: str
    shortest_name: str
    is_weekend: bool

    def __new__(
        cls,
        value: int,
        full_name: str,
        short_name: str,
        shortest_name: str,
        is_weekend: bool,
    ) -> Weekday:
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.full_name = full_name
        obj.short_name = short_name
        obj.shortest_name = shortest_name
        obj.is_weekend = is_weekend
        return obj

    MONDAY = 1, "Monday", "Mon", "M", False
    TUESDAY = 2, "Tuesday", "Tue", "T", False
    WEDNESDAY = 3, "Wednesday", "Wed", "W", False
    THURSDAY = 4, "Thursday", "Thu", "Th", False
    FRIDAY = 5, "Friday", "Fri", "F", False
    SATURDAY = 6, "Saturday", "Sat", "S", True
    SUNDAY = 7, "Sunday", "Sun", "Su", True

    @classmethod
    def _missing_(cls, value: Any) -> Weekday:
        msg = f"Invalid weekday number: {value!r}. Must be between 1 (Monday) and 7 (Sunday)."
        raise DomainError(msg, field="weekday")

    @classmethod
    def from_date(cls, value: date) -> Weekday:
        """Weekday of a ``date`` or ``datetime`` (ISO: Monday is 1)."""
        return cls(value.isoweekday())

    @property
    def is_weekday(self) -> bool:
        return not self.is_weekend

    @property
    def next(self) -> Weekday:
        return Weekday(self.value % 7 + 1)

    @property
    def previous(self) -> Weekday:
        return Weekday((self.value + 5) % 7 + 1)

    def __str__(self) -> str:
        return self.full_name
