"""Shared *structlog* logger for platformkit.

The rest of the codebase can ``from platformkit.utils.log import log`` and use
``log.info("msg", key=value)`` for structured output.  Library modules that only
need plain diagnostics keep using ``logging.getLogger(__name__)``; both end up
on the same stdlib handlers once :func:`configure_logging` has run.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

# Keep the logger global so every import shares the same base instance.
log = structlog.get_logger("platformkit")


def configure_logging(level: str = "INFO") -> None:
    """Route structlog through stdlib logging at *level*.

    Safe to call more than once; later calls only adjust the level.
    """

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=numeric, format="%(levelname)s - %(name)s - %(message)s")
    root.setLevel(numeric)

    if not structlog.is_configured():
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.JSONRenderer(),
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )


def get_logger(**bindings: Any):  # noqa: D401 – factory helper
    """Return a child/bound logger with optional key/value bindings."""

    return log.bind(**bindings)
