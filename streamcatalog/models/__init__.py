"""Catalog and watch-state models."""

from .capabilities import (
    Playable,
    Streamable,
    Downloadable,
    Ratable,
    DownloadState,
)
from .content import Content, Movie, Series, Documentary
from .profile import Profile
from .watch_history import WatchHistoryEntry

__all__ = [
    "Playable",
    "Streamable",
    "Downloadable",
    "Ratable",
    "DownloadState",
    "Content",
    "Movie",
    "Series",
    "Documentary",
    "Profile",
    "WatchHistoryEntry",
]
