"""Turn sparse search filters into an ordered list of bound predicates."""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Self

from scouting_search.domain.search import SearchFilters


class Operator(Enum):
    EQ = "="
    GTE = ">="
    LTE = "<="
    BETWEEN = "BETWEEN"
    LIKE = "LIKE"


@dataclass(frozen=True)
class Predicate:
    column: str
    operator: Operator
    value: object


# filter field -> (column, operator)
FILTER_COLUMNS: dict[str, tuple[str, Operator]] = {
    "position": ("s.position", Operator.LIKE),
    "min_war": ("s.war", Operator.GTE),
    "max_war": ("s.war", Operator.LTE),
    "min_overall_grade": ("s.overall_grade", Operator.GTE),
    "max_overall_grade": ("s.overall_grade", Operator.LTE),
    "min_hit_grade": ("s.hit_grade", Operator.GTE),
    "max_hit_grade": ("s.hit_grade", Operator.LTE),
    "min_power_grade": ("s.power_grade", Operator.GTE),
    "max_power_grade": ("s.power_grade", Operator.LTE),
    "min_fielding_grade": ("s.fielding_grade", Operator.GTE),
    "max_fielding_grade": ("s.fielding_grade", Operator.LTE),
    "min_speed_grade": ("s.speed_grade", Operator.GTE),
    "max_speed_grade": ("s.speed_grade", Operator.LTE),
    "year_range": ("s.year", Operator.BETWEEN),
}

EMBEDDING_TYPE_COLUMN = "e.embedding_type"


def contains_pattern(text: str) -> str:
    """LIKE pattern matching ``text`` anywhere, with wildcards escaped for ``ESCAPE '\\'``."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class PredicateBuilder:
    def __init__(self) -> None:
        self._predicates: list[Predicate] = []

    def add(self, column: str, operator: Operator, value: object) -> Self:
        self._predicates.append(Predicate(column, operator, value))
        return self

    def at_least(self, column: str, value: object) -> Self:
        return self.add(column, Operator.GTE, value)

    def at_most(self, column: str, value: object) -> Self:
        return self.add(column, Operator.LTE, value)

    def between(self, column: str, low: object, high: object) -> Self:
        return self.add(column, Operator.BETWEEN, (low, high))

    def contains(self, column: str, text: str) -> Self:
        return self.add(column, Operator.LIKE, contains_pattern(text))

    def build(self) -> tuple[Predicate, ...]:
        return tuple(self._predicates)


def build_predicates(filters: SearchFilters | None, embedding_type: str) -> tuple[Predicate, ...]:
    """Base embedding-type predicate followed by one predicate per present filter, in field order."""
    builder = PredicateBuilder().add(EMBEDDING_TYPE_COLUMN, Operator.EQ, embedding_type)
    if filters is None or filters.is_empty():
        return builder.build()

    for f in fields(filters):
        value = getattr(filters, f.name)
        if value is None:
            continue
        column, operator = FILTER_COLUMNS[f.name]
        if operator is Operator.LIKE:
            builder.contains(column, str(value))
        elif operator is Operator.BETWEEN:
            low, high = value
            builder.between(column, low, high)
        elif operator is Operator.GTE:
            builder.at_least(column, value)
        else:
            builder.at_most(column, value)
    return builder.build()
