"""
Structured Logging Configuration

Catalog and profile state changes are emitted as structlog events
(``rating_added``, ``watchlist_item_added``, ``download_paused`` ...)
with key/value context. The demo reads them in the console; other
environments get one JSON object per line.
"""

import logging
import sys
from typing import List, Optional

import structlog
from structlog.types import Processor

from ..config import Settings, get_settings


def _resolve_level(settings: Settings, log_level: Optional[str]) -> int:
    name = log_level or settings.log_level or ("DEBUG" if settings.debug else "INFO")
    return getattr(logging, name.upper())


def _renderers(settings: Settings) -> List[Processor]:
    if settings.environment == "development":
        return [structlog.dev.ConsoleRenderer(colors=settings.log_colors)]
    return [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def setup_logging(log_level: Optional[str] = None):
    """
    Configure structlog for the catalog.
    
    Args:
        log_level: Override ``Settings.log_level`` (DEBUG, INFO, WARNING, ERROR)
    """
    settings = get_settings()
    level = _resolve_level(settings, log_level)
    
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ] + _renderers(settings)
    
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "streamcatalog") -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
