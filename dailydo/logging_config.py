"""
Logging setup for dailydo: structlog rendering on top of stdlib logging.

Modules keep using ``logging.getLogger(__name__)``; this module only decides
how records are rendered. Set DAILYDO_LOG_FORMAT=json for one JSON object per
line, anything else gets the colourised console renderer.

Usage:
    from dailydo.logging_config import setup_logging, user_context
    setup_logging()

    with user_context("alice"):
        logger.info("Task completed")   # carries user_id=alice
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

import structlog


def setup_logging(
    level: str | None = None,
    json_output: bool | None = None,
    stream: TextIO | None = None,
) -> None:
    if level is None:
        level = os.environ.get("DAILYDO_LOG_LEVEL", "INFO")

    if json_output is None:
        json_output = os.environ.get("DAILYDO_LOG_FORMAT", "").lower() == "json"

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # foreign_pre_chain lets plain logging.getLogger() records pick up the
    # same timestamp, level and bound user context as structlog loggers.
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)


@contextmanager
def user_context(user_id: str) -> Iterator[None]:
    """Bind ``user_id`` to every log line emitted inside the block."""
    with structlog.contextvars.bound_contextvars(user_id=user_id):
        yield


__all__ = ["setup_logging", "user_context"]
