"""Diagnostics on stderr for the ``timeparts`` logger tree.

Modules log with ``logging.getLogger(__name__)`` and pass structured
fields through ``extra=``.  A structlog ``ProcessorFormatter`` renders
those records either for a terminal or as one JSON object per line.
Other libraries' loggers are left alone.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "timeparts"


def build_formatter(*, log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    """Formatter for stdlib records; ``extra=`` keys become event fields."""
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route the ``timeparts`` loggers to stderr.

    DEBUG and up with *verbose*, otherwise WARNING and up.  Calling again
    replaces the handler instead of adding a second one.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(log_json=log_json))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = [handler]
    logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
