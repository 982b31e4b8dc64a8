"""
Sample Data

The catalog and profiles a fresh demo session starts with.
"""

from ..core.logging import get_logger
from ..models.content import Documentary, Movie, Series
from .catalog import CatalogService

logger = get_logger(__name__)


def load_sample_data(service: CatalogService) -> CatalogService:
    """Register the sample titles and the default adult / kids profiles."""
    service.add_content(Movie(
        "M001",
        "The Matrix",
        "A computer programmer discovers a mysterious world.",
        1999,
        ["Action", "Sci-Fi"],
        duration_minutes=136,
    ))
    service.add_content(Series(
        "S001",
        "Stranger Things",
        "A group of kids encounter supernatural forces and secret government exploits.",
        2016,
        ["Drama", "Fantasy", "Horror"],
        number_of_seasons=4,
        episodes_per_season=8,
        episode_duration_minutes=50,
    ))
    service.add_content(Documentary(
        "D001",
        "Planet Earth",
        "An amazing look at nature and wildlife.",
        2006,
        ["Nature", "Educational"],
        duration_minutes=550,
        topic="Nature & Wildlife",
    ))
    
    service.create_profile("Adult Profile")
    service.create_profile("Kids Profile", is_kids_profile=True)
    
    logger.info(
        "sample_data_loaded",
        content=len(service.list_content()),
        profiles=len(service.list_profiles())
    )
    return service
