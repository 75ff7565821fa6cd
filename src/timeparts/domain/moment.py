"""Moment: an immutable point in time.

A Moment wraps one timezone-aware ``datetime``.  Local moments carry the
system's UTC offset for their instant; UTC moments carry
``timezone.utc``.  Naive input is read as local wall time.

INVARIANT: a Moment never changes after construction.  Every operation
that "modifies" it (arithmetic, ``copy_with``, zone conversion) returns
a new Moment.

Calendar parts (:class:`Year`, :class:`Month`, :class:`Day`,
:class:`Weekday`) are read views recomputed from the underlying instant
on each access; nothing is cached.

Equality, hashing and ordering follow the instant: a local and a UTC
Moment for the same instant are equal.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from timeparts.domain import clock, parsing
from timeparts.domain.day import Day
from timeparts.domain.errors import DomainError
from timeparts.domain.formats import TimeFormat
from timeparts.domain.month import Month, days_in_month
from timeparts.domain.pattern import format_datetime
from timeparts.domain.weekday import Weekday
from timeparts.domain.year import Year

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_MICROSECOND = timedelta(microseconds=1)

# Inclusive bounds for wall-clock components.
TIME_RANGES: dict[str, tuple[int, int]] = {
    "hour": (0, 23),
    "minute": (0, 59),
    "second": (0, 59),
    "millisecond": (0, 999),
    "microsecond": (0, 999),
}


def _check_time(name: str, value: int) -> None:
    low, high = TIME_RANGES[name]
    if not low <= value <= high:
        msg = f"Invalid {name}: {value}. Must be between {low} and {high}."
        raise DomainError(msg, field=name)


def _build(parts: dict[str, int], *, utc: bool) -> datetime:
    """Assemble validated components into an aware datetime.

    Rejects calendar-invalid dates (April 31st, February 29th of a common
    year) rather than rolling them over.
    """
    year = Year(parts["year"])
    month = Month(parts["month"])
    day = Day(parts["day"])
    if year.value > datetime.max.year:
        msg = f"Invalid year number: {year.value}. Must be {datetime.max.year} or less."
        raise DomainError(msg, field="year")
    length = days_in_month(year, month)
    if day.value > length:
        msg = f"Invalid day {day.value} for {month.full_name} {year.value}: month has {length} days."
        raise DomainError(msg, field="day")
    for name in TIME_RANGES:
        _check_time(name, parts[name])

    wall = datetime(
        year.value,
        month.value,
        day.value,
        parts["hour"],
        parts["minute"],
        parts["second"],
        parts["millisecond"] * 1000 + parts["microsecond"],
    )
    local = parsing.to_local(wall.replace(tzinfo=timezone.utc) if utc else wall)
    return local.astimezone(timezone.utc) if utc else local


def _whole(delta: timedelta, unit: timedelta) -> int:
    """Whole *unit*s in *delta*, truncated toward zero."""
    micros = delta // _ONE_MICROSECOND
    per_unit = unit // _ONE_MICROSECOND
    count = abs(micros) // per_unit
    return count if micros >= 0 else -count


def _iso_text(value: datetime, sep: str) -> str:
    """Wall-clock ISO text with milliseconds, or microseconds when present."""
    timespec = "milliseconds" if value.microsecond % 1000 == 0 else "microseconds"
    return value.replace(tzinfo=None).isoformat(sep=sep, timespec=timespec)


class Moment:
    """An immutable instant with calendar-aware helpers.

    Usage::

        deadline = Moment.of(2025, 4, 8, 17, 30)
        if Moment.now().is_after(deadline):
            ...
        deadline.add_days(1).format(TimeFormat.READABLE_DATE_TIME)
    """

    __slots__ = ("_utc", "_value")

    _value: datetime
    _utc: bool

    def __init__(self, value: datetime) -> None:
        parsing.to_local(value)
        self._assign(value, utc=value.tzinfo is timezone.utc)

    def _assign(self, value: datetime, *, utc: bool) -> None:
        normalized = value.astimezone(timezone.utc) if utc else value.astimezone()
        object.__setattr__(self, "_value", normalized)
        object.__setattr__(self, "_utc", utc)

    @classmethod
    def _wrap(cls, value: datetime, *, utc: bool) -> Moment:
        obj = cls.__new__(cls)
        obj._assign(value, utc=utc)
        return obj

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- Factories ---

    @classmethod
    def now(cls) -> Moment:
        """The current instant, in the local zone."""
        return cls._wrap(clock.now(), utc=False)

    @classmethod
    def of(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        microsecond: int = 0,
        *,
        utc: bool = False,
    ) -> Moment:
        """Build a Moment from components; raises DomainError when invalid."""
        parts = {
            "year": int(year),
            "month": int(month),
            "day": int(day),
            "hour": hour,
            "minute": minute,
            "second": second,
            "millisecond": millisecond,
            "microsecond": microsecond,
        }
        return cls._wrap(_build(parts, utc=utc), utc=utc)

    @classmethod
    def today_at(
        cls,
        hour: int,
        minute: int,
        second: int = 0,
        millisecond: int = 0,
        microsecond: int = 0,
    ) -> Moment:
        """Today's local date at the given time of day."""
        return cls.now().copy_with(
            hour=hour,
            minute=minute,
            second=second,
            millisecond=millisecond,
            microsecond=microsecond,
        )

    @classmethod
    def parse(cls, text: str, *, allow_time_only: bool = True) -> Moment | None:
        """Parse *text* into a local Moment, or return None.

        Accepts ISO-8601 timestamps (``2025-04-08T13:52:05Z``,
        ``2025-04-08 13:52:05``, ``2025-04-08``).  UTC and offset inputs
        are converted to local time.

        Also accepts a bare time of day (``13:52``, ``13:52:05``,
        ``13:52:05.123456``) placed on *today's* date, unless
        *allow_time_only* is False.

        Raises DomainError for well-formed timestamps outside years 1-9999.
        """
        parsed = parsing.parse(text, allow_time_only=allow_time_only)
        if parsed is None:
            return None
        return cls._wrap(parsed, utc=False)

    # --- Components ---

    @property
    def datetime(self) -> datetime:
        """The underlying aware ``datetime``."""
        return self._value

    @property
    def is_utc(self) -> bool:
        return self._utc

    @property
    def year(self) -> Year:
        return Year(self._value.year)

    @property
    def month(self) -> Month:
        return Month(self._value.month)

    @property
    def day(self) -> Day:
        return Day(self._value.day)

    @property
    def weekday(self) -> Weekday:
        return Weekday.from_date(self._value)

    @property
    def hour(self) -> int:
        return self._value.hour

    @property
    def minute(self) -> int:
        return self._value.minute

    @property
    def second(self) -> int:
        return self._value.second

    @property
    def millisecond(self) -> int:
        """Millisecond of the second (0-999)."""
        return self._value.microsecond // 1000

    @property
    def microsecond(self) -> int:
        """Microsecond within the millisecond (0-999)."""
        return self._value.microsecond % 1000

    @property
    def epoch_microseconds(self) -> int:
        """Microseconds since 1970-01-01T00:00:00Z."""
        return (self._value - EPOCH) // _ONE_MICROSECOND

    @property
    def epoch_milliseconds(self) -> int:
        return self.epoch_microseconds // 1000

    # --- Clock-relative checks (each call re-reads the clock) ---

    @property
    def is_today(self) -> bool:
        return self.is_same_day(Moment.now())

    @property
    def is_tomorrow(self) -> bool:
        return self.is_same_day(Moment.now().add_days(1))

    @property
    def is_yesterday(self) -> bool:
        return self.is_same_day(Moment.now().subtract_days(1))

    @property
    def is_before_now(self) -> bool:
        return self._value < clock.now()

    @property
    def is_after_now(self) -> bool:
        return self._value > clock.now()

    # --- Start / end of day ---

    @property
    def start_of_day(self) -> Moment:
        """Same date at 00:00:00.000000."""
        return self.copy_with(hour=0, minute=0, second=0, millisecond=0, microsecond=0)

    @property
    def end_of_day(self) -> Moment:
        """Same date at 23:59:59.999999."""
        return self.copy_with(hour=23, minute=59, second=59, millisecond=999, microsecond=999)

    # --- Comparison ---

    def _date_parts(self) -> tuple[int, int, int]:
        return self._value.year, self._value.month, self._value.day

    def is_same_day(self, other: Moment) -> bool:
        """Same calendar date, ignoring time of day."""
        return self._date_parts() == other._date_parts()

    def is_same_month(self, other: Moment) -> bool:
        return self._date_parts()[:2] == other._date_parts()[:2]

    def is_same_year(self, other: Moment) -> bool:
        return self._value.year == other._value.year

    def is_before(self, other: Moment) -> bool:
        return self._value < other._value

    def is_after(self, other: Moment) -> bool:
        return self._value > other._value

    def is_at_same_moment_as(self, other: Moment) -> bool:
        return self._value == other._value

    def is_in_range(
        self,
        start: Moment,
        end: Moment,
        *,
        inclusive_start: bool = True,
        inclusive_end: bool = True,
    ) -> bool:
        """Whether this instant lies between *start* and *end*.

        Each boundary's inclusivity is set independently; both are
        inclusive by default.
        """
        after_start = not self.is_before(start) if inclusive_start else self.is_after(start)
        before_end = not self.is_after(end) if inclusive_end else self.is_before(end)
        return after_start and before_end

    def compare(self, other: Moment) -> int:
        """-1, 0 or 1 as this instant is before, at, or after *other*."""
        return (self._value > other._value) - (self._value < other._value)

    # --- Arithmetic ---

    def add(self, duration: timedelta) -> Moment:
        return Moment._wrap(self._value + duration, utc=self._utc)

    def subtract(self, duration: timedelta) -> Moment:
        return Moment._wrap(self._value - duration, utc=self._utc)

    def add_days(self, days: int) -> Moment:
        return self.add(timedelta(days=days))

    def add_hours(self, hours: int) -> Moment:
        return self.add(timedelta(hours=hours))

    def add_minutes(self, minutes: int) -> Moment:
        return self.add(timedelta(minutes=minutes))

    def add_seconds(self, seconds: int) -> Moment:
        return self.add(timedelta(seconds=seconds))

    def subtract_days(self, days: int) -> Moment:
        return self.subtract(timedelta(days=days))

    def subtract_hours(self, hours: int) -> Moment:
        return self.subtract(timedelta(hours=hours))

    def subtract_minutes(self, minutes: int) -> Moment:
        return self.subtract(timedelta(minutes=minutes))

    def subtract_seconds(self, seconds: int) -> Moment:
        return self.subtract(timedelta(seconds=seconds))

    # --- Difference ---

    def difference(self, other: Moment) -> timedelta:
        """Signed duration; positive when this instant is later than *other*."""
        return self._value - other._value

    def difference_from_now(self) -> timedelta:
        return self.difference(Moment.now())

    def second_difference(self, other: Moment) -> int:
        return _whole(self.difference(other), timedelta(seconds=1))

    def minute_difference(self, other: Moment) -> int:
        return _whole(self.difference(other), timedelta(minutes=1))

    def hour_difference(self, other: Moment) -> int:
        return _whole(self.difference(other), timedelta(hours=1))

    def day_difference(self, other: Moment) -> int:
        return _whole(self.difference(other), timedelta(days=1))

    # --- Zones ---

    def to_utc(self) -> Moment:
        return Moment._wrap(self._value, utc=True)

    def to_local(self) -> Moment:
        return Moment._wrap(self._value, utc=False)

    # --- Copy ---

    def copy_with(
        self,
        *,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        millisecond: int | None = None,
        microsecond: int | None = None,
    ) -> Moment:
        """Replace the given wall-clock components.

        Accepts plain ints or the part types (``Year``, ``Month``, ``Day``).
        Raises DomainError when the result is not a valid calendar date,
        e.g. ``day=31`` in April; nothing rolls over into the next month.
        """
        parts = {
            "year": self._value.year,
            "month": self._value.month,
            "day": self._value.day,
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
            "millisecond": self.millisecond,
            "microsecond": self.microsecond,
        }
        updates = {
            "year": year,
            "month": month,
            "day": day,
            "hour": hour,
            "minute": minute,
            "second": second,
            "millisecond": millisecond,
            "microsecond": microsecond,
        }
        parts.update({name: int(value) for name, value in updates.items() if value is not None})
        return Moment._wrap(_build(parts, utc=self._utc), utc=self._utc)

    # --- Formatting ---

    def format(self, pattern: str, utc: bool = False) -> str:
        """Render with a date pattern (see :mod:`timeparts.domain.pattern`).

        When *utc* is True the instant is converted to UTC first.
        """
        value = self._value.astimezone(timezone.utc) if utc else self._value
        return format_datetime(value, pattern)

    def format_12h(self) -> str:
        return self.format(TimeFormat.TIME_12H)

    def format_24h(self) -> str:
        return self.format(TimeFormat.TIME_24H_SECONDS)

    def format_12h_utc(self) -> str:
        return self.format(TimeFormat.TIME_12H, utc=True)

    def format_24h_utc(self) -> str:
        return self.format(TimeFormat.TIME_24H_SECONDS, utc=True)

    def format_date(self) -> str:
        return self.format(TimeFormat.DATE)

    def format_readable_date(self) -> str:
        return self.format(TimeFormat.READABLE_DATE)

    def format_time(self) -> str:
        return self.format(TimeFormat.DATE_TIME)

    def format_readable_time(self) -> str:
        return self.format(TimeFormat.READABLE_DATE_TIME_12H)

    def to_iso8601(self) -> str:
        """ISO-8601 text: local wall time without offset, UTC with ``Z``."""
        text = _iso_text(self._value, "T")
        return f"{text}Z" if self._utc else text

    def to_utc_string(self) -> str:
        """UTC rendering such as ``2025-04-08 07:52:05.000Z``."""
        return _iso_text(self._value.astimezone(timezone.utc), " ") + "Z"

    # --- Dunder protocol ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: Moment) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: Moment) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: Moment) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: Moment) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._value >= other._value

    def __add__(self, other: timedelta) -> Moment:
        if not isinstance(other, timedelta):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, timedelta):
            return self.subtract(other)
        if isinstance(other, Moment):
            return self.difference(other)
        return NotImplemented

    def __format__(self, spec: str) -> str:
        return self.format(spec) if spec else str(self)

    def __str__(self) -> str:
        text = _iso_text(self._value, " ")
        return f"{text}Z" if self._utc else text

    def __repr__(self) -> str:
        return f"Moment({self._value.isoformat()!r})"
