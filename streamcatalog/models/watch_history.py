"""
Watch History

One viewing session of a piece of content by a profile.
"""

import math
from datetime import datetime, timezone

from ..core.exceptions import ValidationError
from ..core.logging import get_logger
from .content import Content

logger = get_logger(__name__)


def clamp_percentage(value: float) -> float:
    """Clamp into [0, 100]. NaN is rejected."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Watched percentage must be a number, got {value!r}") from None
    if math.isnan(value):
        raise ValidationError("Watched percentage must be a number")
    return min(max(value, 0.0), 100.0)


class WatchHistoryEntry:
    """
    A timestamped viewing session.

    ``watched_at`` is fixed at creation; ``watched_percentage`` may be
    updated afterwards and is always kept within [0, 100].
    """

    def __init__(self, content: Content, watched_percentage: float):
        self._content = content
        self._watched_at = datetime.now(timezone.utc)
        self._watched_percentage = clamp_percentage(watched_percentage)

    @property
    def content(self) -> Content:
        return self._content

    @property
    def watched_at(self) -> datetime:
        return self._watched_at

    @property
    def watched_percentage(self) -> float:
        return self._watched_percentage

    def update_progress(self, new_percentage: float) -> None:
        self._watched_percentage = clamp_percentage(new_percentage)
        logger.info(
            "watch_progress_updated",
            content_id=self.content.id,
            watched_percentage=self._watched_percentage
        )

    def __str__(self) -> str:
        return (
            f"{self.content.title} - {self.watched_percentage:g}% watched on "
            f"{self.watched_at:%Y-%m-%d %H:%M}"
        )
