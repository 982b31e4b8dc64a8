"""Core infrastructure modules."""

from .exceptions import (
    CatalogException,
    NotFoundError,
    UnsupportedCapabilityError,
    ValidationError,
)
from .logging import setup_logging, get_logger

__all__ = [
    "CatalogException",
    "NotFoundError",
    "UnsupportedCapabilityError",
    "ValidationError",
    "setup_logging",
    "get_logger",
]
