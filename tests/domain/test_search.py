from scouting_search.domain.search import SearchFilters


class TestSearchFilters:
    def test_is_empty(self) -> None:
        assert SearchFilters().is_empty()
        assert not SearchFilters(min_war=0.0).is_empty()
        assert not SearchFilters(year_range=(2000, 2001)).is_empty()
