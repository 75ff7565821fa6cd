"""DomainError: raised when a value would violate a range invariant."""

from __future__ import annotations


class DomainError(ValueError):
    """A calendar or clock component outside its valid range.

    Subclasses ``ValueError`` so callers that already guard numeric
    conversions keep working.

    Attributes:
        field: Name of the offending component (``"year"``, ``"hour"``, ...),
            or None when the failure spans several components.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
