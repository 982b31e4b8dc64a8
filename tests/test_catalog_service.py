"""
Tests for CatalogService and sample data
"""

import pytest

from streamcatalog.core.exceptions import (
    NotFoundError,
    UnsupportedCapabilityError,
    ValidationError,
)
from streamcatalog.models.capabilities import Downloadable, Ratable
from streamcatalog.models.content import Movie
from streamcatalog.services.catalog import CatalogService


@pytest.fixture
def empty_catalog():
    return CatalogService()


class TestContentRegistry:
    
    def test_sample_content_in_load_order(self, catalog):
        assert [c.id for c in catalog.list_content()] == ["M001", "S001", "D001"]
    
    def test_sample_series(self, catalog):
        series = catalog.get_content("S001")
        
        assert series.title == "Stranger Things"
        assert series.get_duration() == "26h 40m Total"
    
    def test_duplicate_id_rejected(self, empty_catalog, movie):
        empty_catalog.add_content(movie)
        
        with pytest.raises(ValidationError):
            empty_catalog.add_content(Movie(movie.id, "Other", "", 2001, [], 90))
        assert empty_catalog.get_content(movie.id) is movie
    
    def test_unknown_content(self, empty_catalog):
        with pytest.raises(NotFoundError) as exc_info:
            empty_catalog.get_content("nope")
        
        assert exc_info.value.status_code == 404
    
    def test_require_capability(self, catalog):
        series = catalog.get_content("S001")
        
        assert catalog.require_capability(series, Downloadable, "downloadable") is series
        with pytest.raises(UnsupportedCapabilityError):
            catalog.require_capability(series, Ratable, "ratable")
    
    def test_content_shared_between_profiles(self, catalog):
        adult, kids = catalog.list_profiles()
        matrix = catalog.get_content("M001")
        
        adult.add_to_watchlist(matrix)
        kids.add_to_watchlist(matrix)
        matrix.add_rating(4)
        
        assert adult.get_watchlist()[0].rating == 4
        assert kids.get_watchlist()[0] is adult.get_watchlist()[0]


class TestProfiles:
    
    def test_sample_profiles(self, catalog):
        adult, kids = catalog.list_profiles()
        
        assert (adult.id, adult.name, adult.is_kids_profile) == ("P1", "Adult Profile", False)
        assert (kids.id, kids.name, kids.is_kids_profile) == ("P2", "Kids Profile", True)
        assert catalog.current_profile is adult
    
    def test_no_current_profile_when_empty(self, empty_catalog):
        assert empty_catalog.current_profile is None
        with pytest.raises(NotFoundError):
            empty_catalog.require_current_profile()
    
    def test_create_assigns_sequential_ids(self, catalog):
        profile = catalog.create_profile("Guest", avatar_url="guest.png")
        
        assert profile.id == "P3"
        assert profile.avatar_url == "guest.png"
        assert catalog.get_profile("P3") is profile
        assert catalog.current_profile.id == "P1"
    
    def test_first_profile_becomes_current(self, empty_catalog):
        profile = empty_catalog.create_profile("Solo")
        
        assert empty_catalog.current_profile is profile
    
    def test_switch(self, catalog):
        profile = catalog.switch_profile("P2")
        
        assert catalog.current_profile is profile
    
    def test_switch_unknown(self, catalog):
        with pytest.raises(NotFoundError):
            catalog.switch_profile("P99")
        
        assert catalog.current_profile.id == "P1"
