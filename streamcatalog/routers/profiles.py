"""
Profiles API Router

Profile management for the demo session: list / create / switch profiles,
and manage each profile's watchlist and watch history.
"""

from typing import List
from fastapi import APIRouter, Depends

from ..core.exceptions import NotFoundError
from ..models.schemas import (
    CreateProfileRequest,
    HistoryEntryOut,
    ProfileOut,
    ProgressOut,
    ProgressUpdateRequest,
    WatchHistoryRequest,
    WatchlistItem,
    WatchlistRequest,
)
from ..services.catalog import CatalogService, get_catalog_service

router = APIRouter(prefix="/profiles", tags=["profiles"])


def _profile_out(service: CatalogService, profile) -> ProfileOut:
    return ProfileOut.from_profile(profile, is_current=profile is service.current_profile)


def _watchlist_items(profile) -> List[WatchlistItem]:
    return [
        WatchlistItem(
            content_id=content.id,
            title=content.title,
            duration=content.get_duration(),
            progress=profile.get_watch_progress(content),
        )
        for content in profile.get_watchlist()
    ]


@router.get("", response_model=List[ProfileOut])
async def list_profiles(service: CatalogService = Depends(get_catalog_service)):
    return [_profile_out(service, p) for p in service.list_profiles()]


@router.post("", response_model=ProfileOut, status_code=201)
async def create_profile(
    body: CreateProfileRequest,
    service: CatalogService = Depends(get_catalog_service)
):
    profile = service.create_profile(
        body.name,
        is_kids_profile=body.is_kids_profile,
        avatar_url=body.avatar_url,
    )
    return _profile_out(service, profile)


@router.get("/current", response_model=ProfileOut)
async def get_current_profile(service: CatalogService = Depends(get_catalog_service)):
    return _profile_out(service, service.require_current_profile())


@router.post("/{profile_id}/switch", response_model=ProfileOut)
async def switch_profile(
    profile_id: str,
    service: CatalogService = Depends(get_catalog_service)
):
    return _profile_out(service, service.switch_profile(profile_id))


# =========================================================================
# Watchlist
# =========================================================================

@router.get("/{profile_id}/watchlist", response_model=List[WatchlistItem])
async def get_watchlist(
    profile_id: str,
    service: CatalogService = Depends(get_catalog_service)
):
    """Watchlist in insertion order, with the latest watch progress per title."""
    return _watchlist_items(service.get_profile(profile_id))


@router.post("/{profile_id}/watchlist", response_model=List[WatchlistItem])
async def add_to_watchlist(
    profile_id: str,
    body: WatchlistRequest,
    service: CatalogService = Depends(get_catalog_service)
):
    """Add a title. Adding one that is already listed is a no-op."""
    profile = service.get_profile(profile_id)
    profile.add_to_watchlist(service.get_content(body.content_id))
    return _watchlist_items(profile)


@router.delete("/{profile_id}/watchlist/{content_id}", response_model=List[WatchlistItem])
async def remove_from_watchlist(
    profile_id: str,
    content_id: str,
    service: CatalogService = Depends(get_catalog_service)
):
    """Remove a title. Removing one that is not listed is a no-op."""
    profile = service.get_profile(profile_id)
    profile.remove_from_watchlist(service.get_content(content_id))
    return _watchlist_items(profile)


# =========================================================================
# Watch History
# =========================================================================

@router.get("/{profile_id}/history", response_model=List[HistoryEntryOut])
async def get_watch_history(
    profile_id: str,
    service: CatalogService = Depends(get_catalog_service)
):
    history = service.get_profile(profile_id).get_watch_history()
    return [HistoryEntryOut.from_entry(i, entry) for i, entry in enumerate(history)]


@router.post("/{profile_id}/history", response_model=HistoryEntryOut, status_code=201)
async def add_watch_history(
    profile_id: str,
    body: WatchHistoryRequest,
    service: CatalogService = Depends(get_catalog_service)
):
    """Record a viewing session. Percentages are clamped to 0-100."""
    profile = service.get_profile(profile_id)
    entry = profile.add_to_watch_history(
        service.get_content(body.content_id),
        body.watched_percentage
    )
    return HistoryEntryOut.from_entry(len(profile.get_watch_history()) - 1, entry)


@router.patch("/{profile_id}/history/{index}", response_model=HistoryEntryOut)
async def update_watch_progress(
    profile_id: str,
    index: int,
    body: ProgressUpdateRequest,
    service: CatalogService = Depends(get_catalog_service)
):
    history = service.get_profile(profile_id).get_watch_history()
    if not 0 <= index < len(history):
        raise NotFoundError("History entry", str(index))

    entry = history[index]
    entry.update_progress(body.watched_percentage)
    return HistoryEntryOut.from_entry(index, entry)


@router.get("/{profile_id}/progress/{content_id}", response_model=ProgressOut)
async def get_watch_progress(
    profile_id: str,
    content_id: str,
    service: CatalogService = Depends(get_catalog_service)
):
    profile = service.get_profile(profile_id)
    return ProgressOut(
        profile_id=profile.id,
        content_id=content_id,
        progress=profile.get_watch_progress(service.get_content(content_id)),
    )
