"""CalendarService — moments, presets and calendar parts as results.

Front ends call these methods instead of the domain types directly so
that invalid input (DomainError) and unparseable text both come back as
failed ServiceResults rather than exceptions.
"""

from __future__ import annotations

import logging
from typing import Any

from timeparts.domain.day import Day
from timeparts.domain.errors import DomainError
from timeparts.domain.formats import TimeFormat, resolve_pattern
from timeparts.domain.moment import Moment
from timeparts.domain.month import Month
from timeparts.domain.weekday import Weekday
from timeparts.domain.year import Year
from timeparts.services.base import PARSE_FAILED, BaseService
from timeparts.services.result import ServiceResult

logger = logging.getLogger(__name__)


class CalendarService(BaseService):
    """Describe, parse and format moments and calendar parts."""

    # --- Moments ---

    def now(self, *, pattern: str | None = None, utc: bool | None = None) -> ServiceResult:
        """Describe the current instant."""
        return ServiceResult.success("now", self._describe(Moment.now(), pattern, utc))

    def parse(
        self,
        text: str,
        *,
        pattern: str | None = None,
        utc: bool | None = None,
    ) -> ServiceResult:
        """Parse *text* and describe the resulting moment."""
        try:
            moment = Moment.parse(text, allow_time_only=self._settings.parse.allow_time_only)
        except DomainError as exc:
            return self._invalid("parse", exc)
        if moment is None:
            logger.debug("Unparseable input", extra={"input": text})
            return ServiceResult.failure(
                "parse",
                PARSE_FAILED,
                f"Could not parse {text!r} as a timestamp or time of day",
                {"input": text},
            )
        return ServiceResult.success("parse", self._describe(moment, pattern, utc))

    def format(self, text: str, pattern: str, *, utc: bool | None = None) -> ServiceResult:
        """Parse *text* and render it with *pattern* (a preset name or pattern)."""
        result = self.parse(text, pattern=pattern, utc=utc)
        return result.model_copy(update={"op": "format"})

    def list_formats(self, sample: Moment | None = None) -> ServiceResult:
        """Render every preset against *sample* (default: now)."""
        moment = sample if sample is not None else Moment.now()
        utc = self._settings.format.utc
        items = [
            {
                "name": preset.name,
                "pattern": preset.value,
                "sample": moment.format(preset, utc=utc or preset is TimeFormat.ISO8601_UTC),
            }
            for preset in TimeFormat
        ]
        return ServiceResult.success("list_formats", {"items": items, "count": len(items)})

    # --- Calendar parts ---

    def describe_year(self, value: int) -> ServiceResult:
        try:
            year = Year(value)
        except DomainError as exc:
            return self._invalid("describe_year", exc)
        previous = year.previous.value if year.value > 1 else None
        return ServiceResult.success(
            "describe_year",
            {
                "year": year.value,
                "is_leap_year": year.is_leap_year,
                "days_in_year": year.days_in_year,
                "next": year.next.value,
                "previous": previous,
            },
        )

    def describe_month(self, code: int, year: int | None = None) -> ServiceResult:
        try:
            month = Month(code)
            resolved = Year(year) if year is not None else Year.now()
        except DomainError as exc:
            return self._invalid("describe_month", exc)
        return ServiceResult.success(
            "describe_month",
            {
                "month": month.value,
                "name": month.full_name,
                "short_name": month.short_name,
                "year": resolved.value,
                "days": month.days_in_month(resolved),
                "next": month.next.full_name,
                "previous": month.previous.full_name,
            },
        )

    def describe_weekday(self, code: int) -> ServiceResult:
        try:
            weekday = Weekday(code)
        except DomainError as exc:
            return self._invalid("describe_weekday", exc)
        return ServiceResult.success(
            "describe_weekday",
            {
                "weekday": weekday.value,
                "name": weekday.full_name,
                "short_name": weekday.short_name,
                "shortest_name": weekday.shortest_name,
                "is_weekend": weekday.is_weekend,
                "next": weekday.next.full_name,
                "previous": weekday.previous.full_name,
            },
        )

    def clamp_day(self, day: int, year: int, month: int) -> ServiceResult:
        """Cap *day* to the length of *month* in *year*."""
        try:
            original = Day(day)
            resolved = Month(month)
            clamped = original.clamp(Year(year), resolved)
        except DomainError as exc:
            return self._invalid("clamp_day", exc)
        warnings: list[str] = []
        if clamped != original:
            warnings.append(f"Day {original.value} clamped to {clamped.value}")
        return ServiceResult.success(
            "clamp_day",
            {
                "day": original.value,
                "clamped": clamped.value,
                "year": year,
                "month": resolved.full_name,
            },
            warnings,
        )

    # --- Helpers ---

    def _describe(self, moment: Moment, pattern: str | None, utc: bool | None) -> dict[str, Any]:
        cfg = self._settings.format
        resolved = resolve_pattern(pattern or cfg.default_pattern)
        in_utc = cfg.utc if utc is None else utc
        return {
            "formatted": moment.format(resolved, utc=in_utc),
            "pattern": resolved,
            "iso8601": moment.to_iso8601(),
            "utc": moment.to_utc_string(),
            "weekday": moment.weekday.full_name,
            "epoch_milliseconds": moment.epoch_milliseconds,
        }
