"""structlog setup for the command line."""

import logging
import sys

import structlog


def _stderr_logger(*args) -> structlog.PrintLogger:
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = "WARNING", json: bool = False) -> None:
    """Configure structlog processors and the minimum level.

    Args:
        level: Standard level name (DEBUG, INFO, WARNING, ERROR)
        json: Render one JSON object per line instead of console output

    Raises:
        ValueError: If the level name is unknown
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level '{level}'")

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        # Resolve stderr per logger so redirected streams are honoured
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
