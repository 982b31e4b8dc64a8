"""
Content Models

Catalog entries: an abstract ``Content`` base and its variants
``Movie``, ``Series`` and ``Documentary``.

Content is shared by reference between profiles. Its only mutation
after construction is ``add_rating``.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..config import get_settings
from ..core.exceptions import ValidationError
from ..core.logging import get_logger
from .capabilities import (
    DownloadMixin,
    PlaybackMixin,
    StreamingMixin,
    UserRatingsMixin,
    validate_rating,
)

logger = get_logger(__name__)

MIB = 1024 * 1024


def _require_text(field: str, value: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field} must not be empty")
    return value


def _require_positive(field: str, value: int) -> int:
    if value <= 0:
        raise ValidationError(f"{field} must be positive, got {value}")
    return value


class Content(ABC):
    """
    A watchable catalog entry.

    ``rating`` is a running mean of every value passed to ``add_rating``
    and always stays within [0, 5].
    """

    kind: str = "content"

    def __init__(
        self,
        id: str,
        title: str,
        description: str,
        release_year: int,
        genres: Sequence[str],
    ):
        super().__init__()
        self._id = _require_text("id", id)
        self.title = _require_text("title", title)
        self.description = description
        self.release_year = release_year
        self.genres: List[str] = list(genres)
        self._rating = 0.0
        self._rating_count = 0

    @property
    def id(self) -> str:
        return self._id

    @property
    def rating(self) -> float:
        return self._rating

    @property
    def rating_count(self) -> int:
        return self._rating_count

    @abstractmethod
    def get_duration(self) -> str:
        """Human-readable duration."""

    def get_info(self) -> str:
        """One-line summary; variants append their own details to this."""
        return f"{self.title} ({self.release_year}) - {', '.join(self.genres)}"

    def add_rating(self, value: float) -> None:
        """
        Fold ``value`` into the running mean.

        Raises:
            ValidationError: value outside [0, 5]. State is left unchanged.
        """
        value = validate_rating(value)
        total = self._rating * self._rating_count + value
        self._rating_count += 1
        self._rating = total / self._rating_count
        logger.info(
            "rating_added",
            content_id=self.id,
            value=value,
            rating=round(self._rating, 2),
            rating_count=self._rating_count
        )

    def __str__(self) -> str:
        return self.title

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, title={self.title!r})"


class Movie(Content, PlaybackMixin, StreamingMixin):
    """Feature film. Playable and streamable."""

    kind = "movie"

    def __init__(
        self,
        id: str,
        title: str,
        description: str,
        release_year: int,
        genres: Sequence[str],
        duration_minutes: int,
    ):
        super().__init__(id, title, description, release_year, genres)
        self.duration_minutes = _require_positive("duration_minutes", duration_minutes)

    def get_duration(self) -> str:
        return f"{self.duration_minutes} minutes"

    def get_info(self) -> str:
        return f"{super().get_info()} - {self.get_duration()}"


class Series(Content, PlaybackMixin, StreamingMixin, DownloadMixin):
    """Episodic show. Playable, streamable and downloadable."""

    kind = "series"

    def __init__(
        self,
        id: str,
        title: str,
        description: str,
        release_year: int,
        genres: Sequence[str],
        number_of_seasons: int,
        episodes_per_season: int,
        episode_duration_minutes: int,
    ):
        super().__init__(id, title, description, release_year, genres)
        self.number_of_seasons = _require_positive("number_of_seasons", number_of_seasons)
        self.episodes_per_season = _require_positive("episodes_per_season", episodes_per_season)
        self.episode_duration_minutes = _require_positive(
            "episode_duration_minutes", episode_duration_minutes
        )

    @property
    def total_episodes(self) -> int:
        return self.number_of_seasons * self.episodes_per_season

    @property
    def total_minutes(self) -> int:
        return self.total_episodes * self.episode_duration_minutes

    def get_duration(self) -> str:
        hours, minutes = divmod(self.total_minutes, 60)
        return f"{hours}h {minutes}m Total"

    def get_download_size(self) -> int:
        """Bytes needed to download every episode."""
        return self.total_episodes * get_settings().episode_download_mib * MIB

    def get_info(self) -> str:
        return (
            f"{super().get_info()} - {self.number_of_seasons} Seasons, "
            f"{self.episodes_per_season} Episodes per Season"
        )


class Documentary(Content, PlaybackMixin, StreamingMixin, UserRatingsMixin):
    """Non-fiction title about a topic. Playable, streamable and ratable per user."""

    kind = "documentary"

    USER_REVIEWS = ("Great documentary!", "I learned a lot.", "Not my favorite")

    def __init__(
        self,
        id: str,
        title: str,
        description: str,
        release_year: int,
        genres: Sequence[str],
        duration_minutes: int,
        topic: str,
    ):
        super().__init__(id, title, description, release_year, genres)
        self.duration_minutes = _require_positive("duration_minutes", duration_minutes)
        self.topic = topic

    def get_duration(self) -> str:
        return f"{self.duration_minutes} minutes"

    def get_info(self) -> str:
        return f"{super().get_info()} - Topic: {self.topic}, Duration: {self.get_duration()}"
