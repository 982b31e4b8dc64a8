"""
Tests for Content Models
"""

import pytest

from streamcatalog.core.exceptions import ValidationError
from streamcatalog.models.content import Content, Documentary, Movie, Series


class TestConstruction:
    
    def test_content_is_abstract(self):
        with pytest.raises(TypeError):
            Content("X1", "Title", "", 2000, [])
    
    @pytest.mark.parametrize("bad_id", ["", "   "])
    def test_empty_id_rejected(self, bad_id):
        with pytest.raises(ValidationError):
            Movie(bad_id, "Title", "", 2000, ["Drama"], 90)
    
    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            Movie("M9", "", "", 2000, ["Drama"], 90)
    
    def test_non_positive_duration_rejected(self):
        with pytest.raises(ValidationError):
            Movie("M9", "Title", "", 2000, ["Drama"], 0)
        with pytest.raises(ValidationError):
            Documentary("D9", "Title", "", 2000, [], -5, "Topic")
    
    def test_non_positive_series_counts_rejected(self):
        with pytest.raises(ValidationError):
            Series("S9", "Title", "", 2000, [], 0, 8, 45)
        with pytest.raises(ValidationError):
            Series("S9", "Title", "", 2000, [], 2, 0, 45)
        with pytest.raises(ValidationError):
            Series("S9", "Title", "", 2000, [], 2, 8, 0)
    
    def test_genres_are_copied(self):
        genres = ["Action"]
        movie = Movie("M9", "Title", "", 2000, genres, 90)
        genres.append("Comedy")
        assert movie.genres == ["Action"]
    
    def test_id_is_read_only(self, movie):
        with pytest.raises(AttributeError):
            movie.id = "M002"
    
    def test_new_content_has_no_rating(self, movie):
        assert movie.rating == 0
        assert movie.rating_count == 0


class TestDurationAndInfo:
    
    def test_movie_duration(self, movie):
        assert movie.get_duration() == "136 minutes"
    
    def test_movie_info_appends_duration(self, movie):
        assert movie.get_info() == "The Matrix (1999) - Action, Sci-Fi - 136 minutes"
    
    def test_series_duration_in_hours(self, series):
        # 2 x 8 x 45 = 720 minutes
        assert series.get_duration() == "12h 0m Total"
    
    def test_series_duration_with_remainder(self):
        series = Series("S2", "Stranger Things", "", 2016, ["Drama"], 1, 3, 50)
        assert series.get_duration() == "2h 30m Total"
    
    def test_series_info(self, series):
        assert series.get_info() == (
            "Dark (2017) - Drama, Mystery - 2 Seasons, 8 Episodes per Season"
        )
    
    def test_documentary_info(self, documentary):
        assert documentary.get_duration() == "550 minutes"
        assert documentary.get_info() == (
            "Planet Earth (2006) - Nature, Educational"
            " - Topic: Nature & Wildlife, Duration: 550 minutes"
        )
    
    def test_info_without_genres(self):
        movie = Movie("M9", "Untitled", "", 2020, [], 90)
        assert movie.get_info() == "Untitled (2020) -  - 90 minutes"


class TestRating:
    
    def test_rating_is_running_mean(self, movie):
        values = [5, 3, 4.5, 0, 2]
        for v in values:
            movie.add_rating(v)
        
        assert movie.rating_count == len(values)
        assert movie.rating == pytest.approx(sum(values) / len(values))
    
    def test_bounds_are_inclusive(self, movie):
        movie.add_rating(0)
        movie.add_rating(5)
        assert movie.rating == pytest.approx(2.5)
    
    @pytest.mark.parametrize("bad", [-0.1, 5.01, 10, float("nan")])
    def test_out_of_range_rejected_and_state_unchanged(self, movie, bad):
        movie.add_rating(4)
        
        with pytest.raises(ValidationError):
            movie.add_rating(bad)
        
        assert movie.rating == 4
        assert movie.rating_count == 1
    
    @pytest.mark.parametrize("bad", ["abc", None, [4]])
    def test_non_numeric_rejected(self, movie, bad):
        with pytest.raises(ValidationError):
            movie.add_rating(bad)
        
        assert movie.rating_count == 0
    
    def test_rating_is_read_only(self, movie):
        with pytest.raises(AttributeError):
            movie.rating = 5
