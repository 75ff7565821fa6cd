"""Named pattern presets for :meth:`Moment.format`.

Fixed, non-localized patterns for API payloads, logs and storage.
Members are plain strings, so ``moment.format(TimeFormat.DATE)`` and
``moment.format("yyyy-MM-dd")`` are interchangeable.

Sample renderings below are for Tuesday 2025-04-08 13:52:05.123 at +06:00.
"""

from __future__ import annotations

from enum import StrEnum


class TimeFormat(StrEnum):
    """Common date and time patterns."""

    # --- Date only ---
    DATE = "yyyy-MM-dd"  # 2025-04-08
    US_DATE = "MM/dd/yyyy"  # 04/08/2025
    EU_DATE = "dd/MM/yyyy"  # 08/04/2025
    EU_DATE_DASH = "dd-MM-yyyy"  # 08-04-2025
    SHORT_DATE = "dd MMM yy"  # 08 Apr 25
    READABLE_DATE = "dd MMMM yyyy"  # 08 April 2025
    WEEKDAY_DATE = "EEE, MMM dd, yyyy"  # Tue, Apr 08, 2025
    FULL_WEEKDAY_DATE = "EEEE, MMMM dd, yyyy"  # Tuesday, April 08, 2025

    # --- Time only ---
    TIME_24H_SECONDS = "HH:mm:ss"  # 13:52:05
    TIME_24H = "HH:mm"  # 13:52
    TIME_12H_SECONDS = "hh:mm:ss a"  # 01:52:05 PM
    TIME_12H = "hh:mm a"  # 01:52 PM

    # --- Date and time ---
    DATE_TIME = "yyyy-MM-dd HH:mm:ss"  # 2025-04-08 13:52:05
    DATE_TIME_12H = "yyyy-MM-dd hh:mm:ss a"  # 2025-04-08 01:52:05 PM
    US_DATE_TIME = "MM/dd/yyyy HH:mm:ss"  # 04/08/2025 13:52:05
    EU_DATE_TIME = "dd/MM/yyyy HH:mm:ss"  # 08/04/2025 13:52:05
    READABLE_DATE_TIME = "EEE, dd MMM yyyy HH:mm:ss"  # Tue, 08 Apr 2025 13:52:05
    READABLE_DATE_TIME_12H = "EEE, dd MMM yyyy hh:mm:ss a"  # Tue, 08 Apr 2025 01:52:05 PM
    ISO8601_UTC = "yyyy-MM-dd'T'HH:mm:ss'Z'"  # 2025-04-08T07:52:05Z (with utc=True)
    ISO8601_MILLIS = "yyyy-MM-dd'T'HH:mm:ss.SSS"  # 2025-04-08T13:52:05.123
    ISO8601_MILLIS_OFFSET = "yyyy-MM-dd'T'HH:mm:ss.SSSZ"  # 2025-04-08T13:52:05.123+0600

    # --- Parts ---
    DAY_FULL_NAME = "EEEE"  # Tuesday
    DAY_SHORT_NAME = "EEE"  # Tue
    MONTH_FULL_NAME = "MMMM"  # April
    MONTH_SHORT_NAME = "MMM"  # Apr
    YEAR_FULL = "yyyy"  # 2025
    YEAR_SHORT = "yy"  # 25
    MONTH_DAY = "MMM d"  # Apr 8
    MONTH_DAY_SLASH = "M/d"  # 4/8


def resolve_pattern(name_or_pattern: str) -> str:
    """Map a preset name (``date-time``, ``ISO8601_UTC``) to its pattern.

    Anything that is not a preset name is returned unchanged and treated
    as a literal pattern.

    Examples:
        >>> resolve_pattern("date-time")
        'yyyy-MM-dd HH:mm:ss'
        >>> resolve_pattern("dd.MM.yyyy")
        'dd.MM.yyyy'
    """
    key = name_or_pattern.strip().upper().replace("-", "_")
    member = TimeFormat.__members__.get(key)
    if member is None:
        return name_or_pattern
    return member.value
