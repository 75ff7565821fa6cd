"""Year: a calendar year of the Common Era.

INVARIANT: ``value >= 1``. BCE years are not representable, so
``Year(1).previous`` raises instead of producing year zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from timeparts.domain import clock
from timeparts.domain.errors import DomainError


@dataclass(frozen=True, order=True)
class Year:
    """A calendar year, ordered and hashed by its number."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            msg = f"Invalid year number: {self.value}. Must be 1 or greater (AD/CE)."
            raise DomainError(msg, field="year")

    @classmethod
    def from_date(cls, value: date) -> Year:
        return cls(int(value.year))

    @classmethod
    def now(cls) -> Year:
        """The current local year."""
        return cls(clock.now().year)

    @property
    def is_leap_year(self) -> bool:
        """Divisible by 4, except century years not divisible by 400."""
        v = self.value
        return v % 4 == 0 and (v % 100 != 0 or v % 400 == 0)

    @property
    def days_in_year(self) -> int:
        return 366 if self.is_leap_year else 365

    @property
    def next(self) -> Year:
        return Year(self.value + 1)

    @property
    def previous(self) -> Year:
        """The year before; raises DomainError on ``Year(1)``."""
        return Year(self.value - 1)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
