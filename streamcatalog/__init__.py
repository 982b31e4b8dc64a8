"""Stream Catalog - in-memory content catalog and watch-state model."""

__version__ = "1.0.0"
