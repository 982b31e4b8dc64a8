"""
Content API Router

Browse the catalog and drive per-title capabilities
(ratings, playback, streaming, downloads).
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from ..config import get_settings
from ..core.exceptions import NotFoundError
from ..models.capabilities import Downloadable, Playable, Ratable, Streamable
from ..models.schemas import (
    ContentDetail,
    ContentSummary,
    DownloadInfo,
    PlaybackState,
    RatingRequest,
    StreamingInfo,
    UserRatingRequest,
    UserRatingSummary,
)
from ..services.catalog import CatalogService, get_catalog_service

settings = get_settings()

router = APIRouter(prefix="/content", tags=["content"])
limiter = Limiter(key_func=get_remote_address)

PLAYBACK_ACTIONS = ("play", "pause", "stop")
DOWNLOAD_ACTIONS = {
    "start": "start_download",
    "pause": "pause_download",
    "resume": "resume_download",
}


def _download_info(content) -> DownloadInfo:
    return DownloadInfo(
        content_id=content.id,
        can_download=content.can_download,
        size_bytes=content.get_download_size(),
        quality=content.get_download_quality(),
        state=content.download_state.value,
    )


@router.get("", response_model=List[ContentSummary])
@limiter.limit(f"{settings.rate_limit_per_minute}/minute")
async def browse_content(
    request: Request,
    service: CatalogService = Depends(get_catalog_service)
):
    """List every title in the catalog, in load order."""
    return [ContentSummary.from_content(c) for c in service.list_content()]


@router.get("/{content_id}", response_model=ContentDetail)
async def get_content(
    content_id: str,
    service: CatalogService = Depends(get_catalog_service)
):
    return ContentDetail.from_content(service.get_content(content_id))


@router.post("/{content_id}/ratings", response_model=ContentSummary)
async def add_rating(
    content_id: str,
    body: RatingRequest,
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Add an anonymous rating to the title's running average.

    Values outside 0-5 are rejected with 422 and leave the average untouched.
    """
    content = service.get_content(content_id)
    content.add_rating(body.value)
    return ContentSummary.from_content(content)


@router.get("/{content_id}/user-ratings", response_model=UserRatingSummary)
async def get_user_ratings(
    content_id: str,
    user_id: Optional[int] = Query(None, alias="userId"),
    service: CatalogService = Depends(get_catalog_service)
):
    content = service.require_capability(
        service.get_content(content_id), Ratable, "ratable"
    )
    summary = UserRatingSummary(
        content_id=content.id,
        average_rating=content.get_average_rating(),
        reviews=content.get_user_reviews(),
    )
    if user_id is None:
        return summary

    return summary.model_copy(
        update={"user_id": user_id, "has_user_rated": content.has_user_rated(user_id)}
    )


@router.post("/{content_id}/user-ratings", response_model=UserRatingSummary)
async def add_user_rating(
    content_id: str,
    body: UserRatingRequest,
    service: CatalogService = Depends(get_catalog_service)
):
    """Store one user's rating. Rating again replaces the previous value."""
    content = service.require_capability(
        service.get_content(content_id), Ratable, "ratable"
    )
    content.add_user_rating(body.user_id, body.rating)
    return UserRatingSummary(
        content_id=content.id,
        average_rating=content.get_average_rating(),
        reviews=content.get_user_reviews(),
        user_id=body.user_id,
        has_user_rated=True,
    )


@router.post("/{content_id}/playback/{action}", response_model=PlaybackState)
async def control_playback(
    content_id: str,
    action: str,
    service: CatalogService = Depends(get_catalog_service)
):
    content = service.require_capability(
        service.get_content(content_id), Playable, "playable"
    )
    if action not in PLAYBACK_ACTIONS:
        raise NotFoundError("Playback action", action)

    getattr(content, action)()
    return PlaybackState(content_id=content.id, is_playing=content.is_playing)


@router.get("/{content_id}/streaming", response_model=StreamingInfo)
async def get_streaming_info(
    content_id: str,
    region: Optional[str] = Query(None, description="Region code, e.g. US"),
    service: CatalogService = Depends(get_catalog_service)
):
    content = service.require_capability(
        service.get_content(content_id), Streamable, "streamable"
    )
    return StreamingInfo(
        content_id=content.id,
        quality=content.get_stream_quality(),
        subtitles=content.get_available_subtitles(),
        region=region,
        available=content.is_available_in_region(region) if region else True,
    )


@router.get("/{content_id}/download", response_model=DownloadInfo)
async def get_download_info(
    content_id: str,
    service: CatalogService = Depends(get_catalog_service)
):
    content = service.require_capability(
        service.get_content(content_id), Downloadable, "downloadable"
    )
    return _download_info(content)


@router.post("/{content_id}/download/{action}", response_model=DownloadInfo)
async def control_download(
    content_id: str,
    action: str,
    service: CatalogService = Depends(get_catalog_service)
):
    """Record a start / pause / resume of a download. Nothing is transferred."""
    content = service.require_capability(
        service.get_content(content_id), Downloadable, "downloadable"
    )
    method = DOWNLOAD_ACTIONS.get(action)
    if method is None:
        raise NotFoundError("Download action", action)

    getattr(content, method)()
    return _download_info(content)
