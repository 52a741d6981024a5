"""Structured logging setup using structlog.

The currency core only emits events; the host application decides whether
they are rendered as JSON lines or as human-readable console output.
"""

from __future__ import annotations

import logging
import sys

import structlog

from budget_currency.config import Settings


def setup_logging(log_level: str | None = None, json_output: bool | None = None, settings: Settings | None = None):
    """Configure structlog for the currency core.

    Arguments left as ``None`` are taken from *settings* (``CURRENCY_LOG_LEVEL``
    and ``CURRENCY_LOG_JSON``). Should be called once at host startup.
    """
    settings = settings or Settings()
    level = (log_level or settings.log_level).upper()
    use_json = settings.log_json if json_output is None else json_output

    renderer = structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )


def get_logger(name: str, **context) -> structlog.BoundLogger:
    """Return a logger for component *name*, bound to any extra *context*."""
    return structlog.get_logger(name).bind(**context)
