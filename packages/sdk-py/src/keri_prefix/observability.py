"""Structured logging for the prefix codec.

Every module logs through ``get_logger`` so events carry ``library``.
Applications that want to see decode failures call ``configure_structlog``;
``KERI_PREFIX_LOG_LEVEL`` picks the level (default WARNING, which hides the
codec's debug events).
"""

import logging
import os
from typing import Optional

import structlog

LIBRARY = "keri_prefix"
LOG_LEVEL_ENV = "KERI_PREFIX_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_logger(name: str):
    """Lazy structlog logger tagged with the library name."""
    return structlog.get_logger(name, library=LIBRARY)


def _get_log_level(level: Optional[str] = None) -> int:
    level_name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    return getattr(logging, level_name, logging.WARNING)


def configure_structlog(environment: str = "production", level: Optional[str] = None) -> None:
    """Configure structlog output for codec events.

    Args:
        environment: 'production' for JSON lines, anything else for console.
        level: Overrides ``KERI_PREFIX_LOG_LEVEL`` when given.
    """
    if environment == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level(level)),
    )
