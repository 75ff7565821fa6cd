"""BaseService — shared construction and error mapping for services.

Every service receives the resolved :class:`TimepartsSettings`.  Domain
errors are converted to failed results here, at the service boundary,
and nowhere below it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from timeparts.services.result import ServiceResult

if TYPE_CHECKING:
    from timeparts.config.settings import TimepartsSettings
    from timeparts.domain.errors import DomainError

logger = logging.getLogger(__name__)

INVALID_VALUE = "INVALID_VALUE"
PARSE_FAILED = "PARSE_FAILED"


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class CalendarService(BaseService):
            def describe_year(self, value: int) -> ServiceResult:
                try:
                    year = Year(value)
                except DomainError as exc:
                    return self._invalid("describe_year", exc)
                ...
    """

    def __init__(self, settings: TimepartsSettings | None = None) -> None:
        if settings is None:
            from timeparts.config.settings import TimepartsSettings

            settings = TimepartsSettings()
        self._settings = settings

    @property
    def settings(self) -> TimepartsSettings:
        return self._settings

    def _invalid(self, op: str, exc: DomainError) -> ServiceResult:
        """Turn a DomainError into a failed result."""
        logger.debug("Rejected value: %s", exc, extra={"op": op, "field": exc.field})
        detail = {"field": exc.field} if exc.field else {}
        return ServiceResult.failure(op, INVALID_VALUE, str(exc), detail)
