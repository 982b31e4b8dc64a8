"""
Capability Interfaces

Narrow behavior contracts a piece of content may opt into, plus mixins
that implement them. A content variant composes any subset, e.g.
``class Series(Content, PlaybackMixin, StreamingMixin, DownloadMixin)``.

The protocols are runtime-checkable so callers can dispatch with
``isinstance(content, Downloadable)``.
"""

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Hashable, List, Optional, Protocol, Sequence, runtime_checkable

from ..config import get_settings
from ..core.exceptions import ValidationError
from ..core.logging import get_logger

logger = get_logger(__name__)

MIN_RATING = 0.0
MAX_RATING = 5.0


def validate_rating(value: float) -> float:
    """Return ``value`` as float or raise ValidationError if outside [0, 5]."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Rating must be a number, got {value!r}") from None
    if math.isnan(value) or not MIN_RATING <= value <= MAX_RATING:
        raise ValidationError(
            f"Rating must be between {MIN_RATING:g} and {MAX_RATING:g}, got {value:g}"
        )
    return value


# =========================================================================
# Protocols
# =========================================================================

@runtime_checkable
class Playable(Protocol):
    """Content that can be played, paused and stopped."""

    @property
    def is_playing(self) -> bool: ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def stop(self) -> None: ...


@runtime_checkable
class Streamable(Protocol):
    """Content that can be streamed."""

    def get_stream_quality(self) -> float: ...

    def is_available_in_region(self, region: str) -> bool: ...

    def get_available_subtitles(self) -> List[str]: ...


@runtime_checkable
class Downloadable(Protocol):
    """Content that can be downloaded for offline viewing."""

    @property
    def can_download(self) -> bool: ...

    def get_download_size(self) -> int: ...

    def get_download_quality(self) -> str: ...

    def start_download(self) -> None: ...

    def pause_download(self) -> None: ...

    def resume_download(self) -> None: ...


@runtime_checkable
class Ratable(Protocol):
    """Content that keeps one rating per user."""

    def get_average_rating(self) -> float: ...

    def add_user_rating(self, user_id: Hashable, rating: float) -> None: ...

    def has_user_rated(self, user_id: Hashable) -> bool: ...

    def get_user_reviews(self) -> List[str]: ...


# =========================================================================
# Mixins
# =========================================================================

class PlaybackMixin:
    """Playable implementation. Repeated calls leave the state unchanged."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._is_playing = False

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    def play(self) -> None:
        self._is_playing = True
        logger.info("playback_started", content_id=self.id, title=self.title)

    def pause(self) -> None:
        self._is_playing = False
        logger.info("playback_paused", content_id=self.id, title=self.title)

    def stop(self) -> None:
        self._is_playing = False
        logger.info("playback_stopped", content_id=self.id, title=self.title)


class StreamingMixin:
    """
    Streamable implementation.

    Quality and subtitles are fixed per instance. Region availability is
    unrestricted unless ``available_regions`` was set, in which case it is
    a case-insensitive membership check.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        settings = get_settings()
        self.stream_quality: float = settings.default_stream_quality
        self.subtitles: List[str] = list(settings.default_subtitles)
        self.available_regions: Optional[List[str]] = None

    def configure_streaming(
        self,
        stream_quality: Optional[float] = None,
        subtitles: Optional[Sequence[str]] = None,
        available_regions: Optional[Sequence[str]] = None,
    ) -> None:
        """Override the streaming defaults for this instance."""
        if stream_quality is not None:
            self.stream_quality = stream_quality
        if subtitles is not None:
            self.subtitles = list(subtitles)
        if available_regions is not None:
            self.available_regions = [r.upper() for r in available_regions]

    def get_stream_quality(self) -> float:
        return self.stream_quality

    def is_available_in_region(self, region: str) -> bool:
        if self.available_regions is None:
            return True
        return region.upper() in self.available_regions

    def get_available_subtitles(self) -> List[str]:
        return list(self.subtitles)


class DownloadState(str, Enum):
    """Observed download state. No bytes are transferred."""
    IDLE = "idle"
    DOWNLOADING = "downloading"
    PAUSED = "paused"


class DownloadMixin(ABC):
    """
    Downloadable implementation.

    Subclasses provide ``get_download_size``. The start/pause/resume
    actions only record the state change.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._download_state = DownloadState.IDLE

    @property
    def can_download(self) -> bool:
        return True

    @property
    def download_state(self) -> DownloadState:
        return self._download_state

    @abstractmethod
    def get_download_size(self) -> int:
        """Bytes needed for a full download."""

    def get_download_quality(self) -> str:
        return get_settings().download_quality

    def start_download(self) -> None:
        self._download_state = DownloadState.DOWNLOADING
        logger.info(
            "download_started",
            content_id=self.id,
            size_bytes=self.get_download_size(),
            quality=self.get_download_quality()
        )

    def pause_download(self) -> None:
        self._download_state = DownloadState.PAUSED
        logger.info("download_paused", content_id=self.id)

    def resume_download(self) -> None:
        self._download_state = DownloadState.DOWNLOADING
        logger.info("download_resumed", content_id=self.id)


class UserRatingsMixin:
    """
    Ratable implementation.

    Keeps at most one rating per user id; rating again overwrites the
    previous value. This is independent from ``Content.rating``.
    """

    USER_REVIEWS: Sequence[str] = ()

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._user_ratings: Dict[Hashable, float] = {}

    def get_average_rating(self) -> float:
        if not self._user_ratings:
            return 0.0
        return sum(self._user_ratings.values()) / len(self._user_ratings)

    def add_user_rating(self, user_id: Hashable, rating: float) -> None:
        rating = validate_rating(rating)
        self._user_ratings[user_id] = rating
        logger.info("user_rating_added", content_id=self.id, user_id=user_id, rating=rating)

    def has_user_rated(self, user_id: Hashable) -> bool:
        return user_id in self._user_ratings

    def get_user_reviews(self) -> List[str]:
        return list(self.USER_REVIEWS)
