from scouting_search.domain.search import SearchFilters
from scouting_search.search.predicates import (
    EMBEDDING_TYPE_COLUMN,
    Operator,
    Predicate,
    PredicateBuilder,
    build_predicates,
)


class TestBuildPredicates:
    def test_no_filters(self) -> None:
        assert build_predicates(None, "season_summary") == (
            Predicate(EMBEDDING_TYPE_COLUMN, Operator.EQ, "season_summary"),
        )

    def test_empty_filters_match_no_filters(self) -> None:
        assert SearchFilters().is_empty()
        assert build_predicates(SearchFilters(), "t") == build_predicates(None, "t")

    def test_one_predicate_per_filter_in_field_order(self) -> None:
        filters = SearchFilters(position="SS", min_war=5.0, min_power_grade=60, year_range=(1990, 1999))
        predicates = build_predicates(filters, "season_summary")
        assert predicates[1:] == (
            Predicate("s.position", Operator.LIKE, "%SS%"),
            Predicate("s.war", Operator.GTE, 5.0),
            Predicate("s.power_grade", Operator.GTE, 60),
            Predicate("s.year", Operator.BETWEEN, (1990, 1999)),
        )

    def test_upper_bounds_use_lte(self) -> None:
        filters = SearchFilters(max_war=3.0, min_hit_grade=50, max_hit_grade=60)
        assert build_predicates(filters, "t")[1:] == (
            Predicate("s.war", Operator.LTE, 3.0),
            Predicate("s.hit_grade", Operator.GTE, 50),
            Predicate("s.hit_grade", Operator.LTE, 60),
        )

    def test_like_wildcards_are_escaped(self) -> None:
        predicates = build_predicates(SearchFilters(position="1_%"), "t")
        assert predicates[1].value == "%1\\_\\%%"


class TestPredicateBuilder:
    def test_chaining(self) -> None:
        predicates = PredicateBuilder().at_least("s.war", 1).at_most("s.war", 3).between("s.year", 2000, 2010).build()
        assert [p.operator for p in predicates] == [Operator.GTE, Operator.LTE, Operator.BETWEEN]
