"""
Catalog Service

In-process registry of every content item and profile, plus the
"current profile" the demo session acts on.
"""

from functools import lru_cache
from typing import Dict, List, Optional, Type

from ..config import get_settings
from ..core.exceptions import NotFoundError, UnsupportedCapabilityError, ValidationError
from ..core.logging import get_logger
from ..models.content import Content
from ..models.profile import Profile

logger = get_logger(__name__)


class CatalogService:
    """
    Holds the catalog for one session.
    
    Content is owned here and shared by reference with profiles.
    Lookups by unknown id raise NotFoundError.
    """
    
    def __init__(self):
        self._content: Dict[str, Content] = {}
        self._profiles: Dict[str, Profile] = {}
        self._current_profile_id: Optional[str] = None
    
    # =========================================================================
    # Content
    # =========================================================================
    
    def add_content(self, content: Content) -> Content:
        if content.id in self._content:
            raise ValidationError(f"Content id already in catalog: {content.id}")
        self._content[content.id] = content
        logger.debug("content_registered", content_id=content.id, kind=content.kind)
        return content
    
    def get_content(self, content_id: str) -> Content:
        try:
            return self._content[content_id]
        except KeyError:
            raise NotFoundError("Content", content_id) from None
    
    def list_content(self) -> List[Content]:
        return list(self._content.values())
    
    def require_capability(self, content: Content, capability: Type, label: str):
        """Return ``content`` if it implements ``capability``, else raise."""
        if not isinstance(content, capability):
            raise UnsupportedCapabilityError(content.id, label)
        return content
    
    # =========================================================================
    # Profiles
    # =========================================================================
    
    def create_profile(
        self,
        name: str,
        is_kids_profile: bool = False,
        avatar_url: Optional[str] = None,
    ) -> Profile:
        """Create a profile with the next ``P{n}`` id. The first one becomes current."""
        profile_id = f"P{len(self._profiles) + 1}"
        profile = Profile(
            profile_id,
            name,
            avatar_url=avatar_url or get_settings().default_avatar,
            is_kids_profile=is_kids_profile,
        )
        self._profiles[profile_id] = profile
        if self._current_profile_id is None:
            self._current_profile_id = profile_id
        logger.info("profile_created", profile_id=profile_id, is_kids=is_kids_profile)
        return profile
    
    def get_profile(self, profile_id: str) -> Profile:
        try:
            return self._profiles[profile_id]
        except KeyError:
            raise NotFoundError("Profile", profile_id) from None
    
    def list_profiles(self) -> List[Profile]:
        return list(self._profiles.values())
    
    @property
    def current_profile(self) -> Optional[Profile]:
        if self._current_profile_id is None:
            return None
        return self._profiles[self._current_profile_id]
    
    def require_current_profile(self) -> Profile:
        profile = self.current_profile
        if profile is None:
            raise NotFoundError("Profile", "current")
        return profile
    
    def switch_profile(self, profile_id: str) -> Profile:
        profile = self.get_profile(profile_id)
        self._current_profile_id = profile.id
        logger.info("profile_switched", profile_id=profile.id)
        return profile


@lru_cache()
def get_catalog_service() -> CatalogService:
    """Get the process-wide catalog, seeded with sample data if enabled."""
    from .sample_data import load_sample_data
    
    service = CatalogService()
    if get_settings().seed_sample_data:
        load_sample_data(service)
    return service
