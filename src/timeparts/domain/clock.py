"""Current-time source shared by every clock-relative operation.

``Moment.now()``, ``Year.now()``, ``Moment.is_today`` and friends all read
the instant through :func:`now`.  The default reads the system clock; tests
swap it with :func:`use_clock` instead of racing the real one.

The override lives in a ContextVar: a single ``get`` per read when unset.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Return the current instant as an aware datetime in the local zone."""
    return datetime.now().astimezone()


_override: ContextVar[Clock | None] = ContextVar("_override", default=None)


def now() -> datetime:
    """Read the active clock.

    Naive results from a custom clock are taken as local wall time.
    """
    clock = _override.get() or system_clock
    current = clock()
    if current.tzinfo is None:
        return current.astimezone()
    return current


def fixed_clock(at: datetime) -> Clock:
    """Build a clock that always reports *at*."""

    def _clock() -> datetime:
        return at

    return _clock


@contextmanager
def use_clock(clock: Clock) -> Generator[Clock]:
    """Route :func:`now` through *clock* for the duration of the block."""
    token = _override.set(clock)
    try:
        yield clock
    finally:
        _override.reset(token)
