"""
Pytest Fixtures

Shared catalog objects and an API client backed by a fresh catalog.
"""

import pytest
from fastapi.testclient import TestClient

from streamcatalog.models.content import Documentary, Movie, Series
from streamcatalog.models.profile import Profile
from streamcatalog.services.catalog import CatalogService, get_catalog_service
from streamcatalog.services.sample_data import load_sample_data


@pytest.fixture
def movie():
    """The Matrix, 136 minutes."""
    return Movie(
        "M001",
        "The Matrix",
        "A computer programmer discovers a mysterious world.",
        1999,
        ["Action", "Sci-Fi"],
        duration_minutes=136,
    )


@pytest.fixture
def series():
    """Short series: 2 seasons x 8 episodes x 45 minutes."""
    return Series(
        "S100",
        "Dark",
        "A missing child sets four families on a frantic hunt for answers.",
        2017,
        ["Drama", "Mystery"],
        number_of_seasons=2,
        episodes_per_season=8,
        episode_duration_minutes=45,
    )


@pytest.fixture
def documentary():
    return Documentary(
        "D001",
        "Planet Earth",
        "An amazing look at nature and wildlife.",
        2006,
        ["Nature", "Educational"],
        duration_minutes=550,
        topic="Nature & Wildlife",
    )


@pytest.fixture
def profile():
    return Profile("P1", "Adult Profile")


@pytest.fixture
def catalog():
    """Catalog seeded with the sample titles and profiles."""
    return load_sample_data(CatalogService())


@pytest.fixture
def client(catalog):
    """Test client whose routes all share the ``catalog`` fixture."""
    from streamcatalog.main import app
    
    app.dependency_overrides[get_catalog_service] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()
