"""Services backing the catalog API."""

from .catalog import CatalogService, get_catalog_service
from .sample_data import load_sample_data

__all__ = [
    "CatalogService",
    "get_catalog_service",
    "load_sample_data",
]
