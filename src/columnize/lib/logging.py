"""Logging setup for the columnize CLI.

Library modules log through stdlib `logging` and stay silent unless a caller
configures handlers; the CLI routes both stdlib and structlog records to
stderr so stdout carries only the formatted grid or its JSON payload.
"""

from __future__ import annotations

import logging as std_logging
import sys

import structlog


def level_from_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return std_logging.WARNING
    if verbosity == 1:
        return std_logging.INFO
    return std_logging.DEBUG


def configure_logging(json_mode: bool = False, verbosity: int = 0) -> None:
    """Route layout and config diagnostics to stderr at the `-v` level.

    Warnings such as ignored config keys always show; `-v` adds CLI events and
    `-vv` traces the grid chosen for each call and cell-format fallbacks.
    """

    level = level_from_verbosity(verbosity)
    # Logs go to stderr; stdout carries only the formatted grid.
    handler = std_logging.StreamHandler(sys.stderr)
    handler.setFormatter(std_logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    std_logging.basicConfig(level=level, handlers=[handler], force=True)

    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer() if json_mode else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
