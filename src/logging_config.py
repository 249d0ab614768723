"""Structured logging setup shared by the calculators, the CLI and the MCP server.

Log lines go to stderr so they never mix with rendered reports on stdout
or with the MCP stdio stream. The level comes from PAYCHECK_PLANNER_LOG_LEVEL
(default WARNING).
"""

import logging
import os
import sys

import structlog


LOG_LEVEL_ENV = 'PAYCHECK_PLANNER_LOG_LEVEL'

_configured = False


def configure_logging(level: str | None = None, json_output: bool = False) -> None:
    """Configure structlog once for the whole process.

    Args:
        level: Level name such as 'DEBUG'; falls back to the environment, then WARNING
        json_output: Render JSON lines instead of the console format
    """
    global _configured
    level_name = (level or os.environ.get(LOG_LEVEL_ENV) or 'WARNING').upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(name: str):
    """Return a structlog logger, configuring defaults on first use."""
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
