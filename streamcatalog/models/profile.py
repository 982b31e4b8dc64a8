"""
Profile Model

A viewer context with its own watchlist and watch history.
"""

from typing import List, Optional, Tuple

from ..config import get_settings
from ..core.exceptions import ValidationError
from ..core.logging import get_logger
from .content import Content
from .watch_history import WatchHistoryEntry

logger = get_logger(__name__)


class Profile:
    """
    Named viewer context.
    
    Holds non-owning references to catalog content:
    - watchlist: ordered, no duplicates (by identity)
    - watch history: append-only; the same content may appear many times,
      one entry per viewing session
    """
    
    def __init__(
        self,
        id: str,
        name: str,
        avatar_url: Optional[str] = None,
        is_kids_profile: bool = False,
    ):
        if not id or not id.strip():
            raise ValidationError("Profile id must not be empty")
        if not name or not name.strip():
            raise ValidationError("Profile name must not be empty")
        
        self._id = id
        self.name = name
        self.avatar_url = avatar_url or get_settings().default_avatar
        self.is_kids_profile = is_kids_profile
        self._watchlist: List[Content] = []
        self._watch_history: List[WatchHistoryEntry] = []
    
    @property
    def id(self) -> str:
        return self._id
    
    # =========================================================================
    # Watchlist
    # =========================================================================
    
    def _watchlist_index(self, content: Content) -> Optional[int]:
        for i, item in enumerate(self._watchlist):
            if item is content:
                return i
        return None
    
    def in_watchlist(self, content: Content) -> bool:
        return self._watchlist_index(content) is not None
    
    def add_to_watchlist(self, content: Content) -> None:
        """Append ``content``; no-op if it is already listed."""
        if self.in_watchlist(content):
            return
        self._watchlist.append(content)
        logger.info("watchlist_item_added", profile_id=self.id, content_id=content.id)
    
    def remove_from_watchlist(self, content: Content) -> None:
        """Remove ``content``; no-op if it is not listed."""
        index = self._watchlist_index(content)
        if index is None:
            return
        del self._watchlist[index]
        logger.info("watchlist_item_removed", profile_id=self.id, content_id=content.id)
    
    def get_watchlist(self) -> Tuple[Content, ...]:
        return tuple(self._watchlist)
    
    # =========================================================================
    # Watch History
    # =========================================================================
    
    def add_to_watch_history(self, content: Content, watched_percentage: float) -> WatchHistoryEntry:
        """Record a new viewing session. Existing entries are never replaced."""
        entry = WatchHistoryEntry(content, watched_percentage)
        self._watch_history.append(entry)
        logger.info(
            "watch_history_added",
            profile_id=self.id,
            content_id=content.id,
            watched_percentage=entry.watched_percentage
        )
        return entry
    
    def get_watch_history(self) -> Tuple[WatchHistoryEntry, ...]:
        """Entries in the order they were added (oldest first)."""
        return tuple(self._watch_history)
    
    def get_watch_progress(self, content: Content) -> float:
        """Percentage of the most recent session for ``content``, or 0."""
        for entry in reversed(self._watch_history):
            if entry.content is content:
                return entry.watched_percentage
        return 0.0
    
    def __str__(self) -> str:
        return self.name
    
    def __repr__(self) -> str:
        return f"Profile(id={self.id!r}, name={self.name!r})"
