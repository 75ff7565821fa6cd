"""timeparts — calendar parts and immutable moments.

Re-exports the public value types so callers can write
``from timeparts import Moment, Month``.
"""

from __future__ import annotations

from timeparts.domain.day import Day
from timeparts.domain.errors import DomainError
from timeparts.domain.formats import TimeFormat
from timeparts.domain.moment import Moment
from timeparts.domain.month import Month
from timeparts.domain.weekday import Weekday
from timeparts.domain.year import Year

__version__ = "0.3.0"

__all__ = [
    "Day",
    "DomainError",
    "Moment",
    "Month",
    "TimeFormat",
    "Weekday",
    "Year",
    "__version__",
]
