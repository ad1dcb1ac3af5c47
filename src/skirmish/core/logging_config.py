"""
Structlog-based logging configuration.

Service modules obtain loggers through get_logger() and log key/value pairs:

    from skirmish.core.logging_config import get_logger
    logger = get_logger(__name__)
    logger.debug("Battle started", battle_id=battle.id)

Importing a module or calling get_logger() never configures anything. The
host application calls configure_logging() (build_runtime does so from
SkirmishConfig) to route output through the standard library logging module
at the chosen level; until then structlog keeps its own defaults.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.stdlib import BoundLogger, LoggerFactory

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _shared_processors() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def normalize_log_level(value: object) -> str:
    """Return an upper-case level name, falling back to WARNING."""
    if isinstance(value, str) and value.upper() in _VALID_LEVELS:
        return value.upper()
    return "WARNING"


def configure_logging(log_level: str = "WARNING", json_output: bool = False) -> None:
    """Configure structlog and the ``skirmish`` stdlib logger."""
    level = normalize_log_level(log_level)
    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[*_shared_processors(), renderer],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=False,
    )

    package_logger = logging.getLogger("skirmish")
    package_logger.setLevel(getattr(logging, level))
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)


def get_logger(name: str) -> Any:  # BoundLogger, typed loosely like structlog itself
    """Return a structlog logger bound to ``name`` (typically ``__name__``)."""
    return structlog.get_logger(name)
