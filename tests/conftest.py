"""Shared pytest fixtures for timeparts tests.

Every test runs with the process timezone pinned to a fixed UTC+06:00
offset (no DST), so local/UTC conversions are deterministic and
distinguishable.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from datetime import datetime, timedelta, timezone

import pytest
from click.testing import CliRunner

from timeparts.domain.clock import fixed_clock, use_clock
from timeparts.domain.moment import Moment

# POSIX TZ: name "TPT", offset is west-positive, so -06 means UTC+06:00.
PINNED_TZ = "TPT-06"
LOCAL = timezone(timedelta(hours=6))

# Tuesday 2025-04-08 13:52:05.123456 local (07:52:05.123456 UTC).
FROZEN_NOW = datetime(2025, 4, 8, 13, 52, 5, 123456, tzinfo=LOCAL)


@pytest.fixture(autouse=True)
def _pinned_timezone(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Pin the local zone to UTC+06:00 for the duration of a test."""
    monkeypatch.setenv("TZ", PINNED_TZ)
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the handler and level changes CLI invocations make."""
    tp = logging.getLogger("timeparts")
    handlers, level, propagate = tp.handlers[:], tp.level, tp.propagate
    yield
    tp.handlers = handlers
    tp.setLevel(level)
    tp.propagate = propagate


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> None:
    """Keep stray timeparts.toml files and TIMEPARTS_* env vars out of tests."""
    for name in ("TIMEPARTS_CONFIG", "TIMEPARTS_FORMAT__UTC", "TIMEPARTS_FORMAT__DEFAULT_PATTERN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def frozen_now() -> Generator[datetime]:
    """Freeze the clock at FROZEN_NOW."""
    with use_clock(fixed_clock(FROZEN_NOW)):
        yield FROZEN_NOW


@pytest.fixture
def sample() -> Moment:
    """Tuesday 2025-04-08 13:52:05.123456 local."""
    return Moment(FROZEN_NOW)
