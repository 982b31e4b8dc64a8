"""
API Models

Request bodies and response structures for the catalog endpoints.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from .capabilities import Downloadable, Playable, Ratable, Streamable
from .content import Content, Documentary, Movie, Series
from .profile import Profile
from .watch_history import WatchHistoryEntry


def capability_names(content: Content) -> List[str]:
    """Names of the capability interfaces ``content`` implements."""
    names = []
    if isinstance(content, Playable):
        names.append("playable")
    if isinstance(content, Streamable):
        names.append("streamable")
    if isinstance(content, Downloadable):
        names.append("downloadable")
    if isinstance(content, Ratable):
        names.append("ratable")
    return names


# =========================================================================
# Responses
# =========================================================================

class ContentSummary(BaseModel):
    """Row of the browse table."""
    id: str
    kind: str
    title: str
    description: str
    release_year: int = Field(alias="releaseYear")
    duration: str
    genres: List[str] = Field(default_factory=list)
    rating: float = 0.0
    rating_count: int = Field(0, alias="ratingCount")
    capabilities: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_content(cls, content: Content) -> "ContentSummary":
        return cls(
            id=content.id,
            kind=content.kind,
            title=content.title,
            description=content.description,
            release_year=content.release_year,
            duration=content.get_duration(),
            genres=list(content.genres),
            rating=round(content.rating, 2),
            rating_count=content.rating_count,
            capabilities=capability_names(content),
        )


class ContentDetail(ContentSummary):
    """Full content view, including variant-specific fields."""
    info: str
    duration_minutes: Optional[int] = Field(None, alias="durationMinutes")
    number_of_seasons: Optional[int] = Field(None, alias="numberOfSeasons")
    episodes_per_season: Optional[int] = Field(None, alias="episodesPerSeason")
    episode_duration_minutes: Optional[int] = Field(None, alias="episodeDurationMinutes")
    topic: Optional[str] = None
    is_playing: Optional[bool] = Field(None, alias="isPlaying")

    @classmethod
    def from_content(cls, content: Content) -> "ContentDetail":
        data = ContentSummary.from_content(content).model_dump()
        data["info"] = content.get_info()
        if isinstance(content, (Movie, Documentary)):
            data["duration_minutes"] = content.duration_minutes
        if isinstance(content, Series):
            data["number_of_seasons"] = content.number_of_seasons
            data["episodes_per_season"] = content.episodes_per_season
            data["episode_duration_minutes"] = content.episode_duration_minutes
        if isinstance(content, Documentary):
            data["topic"] = content.topic
        if isinstance(content, Playable):
            data["is_playing"] = content.is_playing
        return cls(**data)


class PlaybackState(BaseModel):
    content_id: str = Field(alias="contentId")
    is_playing: bool = Field(alias="isPlaying")

    model_config = ConfigDict(populate_by_name=True)


class StreamingInfo(BaseModel):
    content_id: str = Field(alias="contentId")
    quality: float
    subtitles: List[str] = Field(default_factory=list)
    region: Optional[str] = None
    available: bool = True

    model_config = ConfigDict(populate_by_name=True)


class DownloadInfo(BaseModel):
    content_id: str = Field(alias="contentId")
    can_download: bool = Field(alias="canDownload")
    size_bytes: int = Field(alias="sizeBytes")
    quality: str
    state: str

    model_config = ConfigDict(populate_by_name=True)


class UserRatingSummary(BaseModel):
    content_id: str = Field(alias="contentId")
    average_rating: float = Field(alias="averageRating")
    reviews: List[str] = Field(default_factory=list)
    user_id: Optional[int] = Field(None, alias="userId")
    has_user_rated: Optional[bool] = Field(None, alias="hasUserRated")

    model_config = ConfigDict(populate_by_name=True)


class ProfileOut(BaseModel):
    id: str
    name: str
    avatar_url: str = Field(alias="avatarUrl")
    is_kids_profile: bool = Field(alias="isKidsProfile")
    is_current: bool = Field(False, alias="isCurrent")
    watchlist_count: int = Field(0, alias="watchlistCount")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_profile(cls, profile: Profile, is_current: bool = False) -> "ProfileOut":
        return cls(
            id=profile.id,
            name=profile.name,
            avatar_url=profile.avatar_url,
            is_kids_profile=profile.is_kids_profile,
            is_current=is_current,
            watchlist_count=len(profile.get_watchlist()),
        )


class WatchlistItem(BaseModel):
    """Watchlist row with the profile's latest progress for the item."""
    content_id: str = Field(alias="contentId")
    title: str
    duration: str
    progress: float = 0.0

    model_config = ConfigDict(populate_by_name=True)


class HistoryEntryOut(BaseModel):
    index: int
    content_id: str = Field(alias="contentId")
    title: str
    watched_percentage: float = Field(alias="watchedPercentage")
    watched_at: datetime = Field(alias="watchedAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entry(cls, index: int, entry: WatchHistoryEntry) -> "HistoryEntryOut":
        return cls(
            index=index,
            content_id=entry.content.id,
            title=entry.content.title,
            watched_percentage=entry.watched_percentage,
            watched_at=entry.watched_at,
        )


class ProgressOut(BaseModel):
    profile_id: str = Field(alias="profileId")
    content_id: str = Field(alias="contentId")
    progress: float

    model_config = ConfigDict(populate_by_name=True)


# =========================================================================
# Requests
# =========================================================================

class RatingRequest(BaseModel):
    value: float


class UserRatingRequest(BaseModel):
    user_id: int = Field(alias="userId")
    rating: float

    model_config = ConfigDict(populate_by_name=True)


class CreateProfileRequest(BaseModel):
    name: str
    is_kids_profile: bool = Field(False, alias="isKidsProfile")
    avatar_url: Optional[str] = Field(None, alias="avatarUrl")

    model_config = ConfigDict(populate_by_name=True)


class WatchlistRequest(BaseModel):
    content_id: str = Field(alias="contentId")

    model_config = ConfigDict(populate_by_name=True)


class WatchHistoryRequest(BaseModel):
    content_id: str = Field(alias="contentId")
    watched_percentage: float = Field(alias="watchedPercentage")

    model_config = ConfigDict(populate_by_name=True)


class ProgressUpdateRequest(BaseModel):
    watched_percentage: float = Field(alias="watchedPercentage")

    model_config = ConfigDict(populate_by_name=True)
