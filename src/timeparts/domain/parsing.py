"""Two-phase text parsing for moments.

Phase 1 accepts ISO-8601 calendar timestamps (``datetime.fromisoformat``
grammar, with or without an offset or a trailing ``Z``).  Phase 2 accepts
a bare time of day, ``HH:mm[:ss[.ffffff]]``, placed on today's local
date.  Both phases return an aware datetime in the local zone.

Malformed input is an expected outcome here: the parse functions return
None instead of raising.  Well-formed input naming an instant that has no
representable local or UTC form (the first hours of year 1 or the last
hours of year 9999, depending on the local offset) raises DomainError.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from timeparts.domain import clock
from timeparts.domain.errors import DomainError

TIME_ONLY_PATTERN: re.Pattern[str] = re.compile(
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})"
    r"(?::(?P<second>[0-9]{2})(?:\.(?P<fraction>[0-9]+))?)?"
)

FRACTION_DIGITS = 6


def to_local(value: datetime) -> datetime:
    """Express *value* in the local zone; naive input is local wall time.

    Raises DomainError when the instant cannot be written both as a local
    and as a UTC datetime (years 1-9999).
    """
    try:
        local = value.astimezone()
        local.astimezone(timezone.utc)
    except (OverflowError, ValueError) as exc:
        msg = (
            f"{value.isoformat()} is outside the representable range "
            "(years 1-9999 in both local time and UTC)."
        )
        raise DomainError(msg, field="year") from exc
    return local


def parse_timestamp(text: str) -> datetime | None:
    """Parse a full calendar timestamp, normalized to the local zone."""
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return to_local(parsed)


def split_fraction(fraction: str) -> tuple[int, int]:
    """Split fractional-second digits into ``(millisecond, microsecond)``.

    The digits are right-padded with zeros, or truncated, to exactly six.

    Examples:
        >>> split_fraction("5")
        (500, 0)
        >>> split_fraction("1234567")
        (123, 456)
    """
    digits = fraction.ljust(FRACTION_DIGITS, "0")[:FRACTION_DIGITS]
    return int(digits[:3]), int(digits[3:])


def parse_time_of_day(text: str, today: datetime | None = None) -> datetime | None:
    """Parse ``HH:mm[:ss[.ffffff]]`` onto *today* (default: the clock's date)."""
    match = TIME_ONLY_PATTERN.fullmatch(text)
    if match is None:
        return None

    hour = int(match["hour"])
    minute = int(match["minute"])
    second = int(match["second"] or 0)
    if hour > 23 or minute > 59 or second > 59:
        return None

    millisecond, microsecond = split_fraction(match["fraction"] or "")
    base = today if today is not None else clock.now()
    wall = base.replace(
        tzinfo=None,
        hour=hour,
        minute=minute,
        second=second,
        microsecond=millisecond * 1000 + microsecond,
    )
    return to_local(wall)


def parse(text: str, *, allow_time_only: bool = True) -> datetime | None:
    """Parse *text* as a timestamp, falling back to a time of day."""
    trimmed = text.strip()
    if not trimmed:
        return None
    parsed = parse_timestamp(trimmed)
    if parsed is not None or not allow_time_only:
        return parsed
    return parse_time_of_day(trimmed)
