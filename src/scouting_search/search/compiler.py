"""Compile predicates into a parameterized similarity query."""

from collections.abc import Sequence
from dataclasses import dataclass

from scouting_search.search.predicates import EMBEDDING_TYPE_COLUMN, FILTER_COLUMNS, Operator, Predicate

ALLOWED_COLUMNS: frozenset[str] = frozenset({EMBEDDING_TYPE_COLUMN, *(c for c, _ in FILTER_COLUMNS.values())})

_SELECT = """SELECT
    e.summary_text,
    s.player_season_id,
    p.name AS player_name,
    s.year,
    s.team,
    s.position,
    s.war,
    s.wrc_plus,
    s.overall_grade,
    s.power_grade,
    s.hit_grade,
    s.fielding_grade,
    s.speed_grade,
    1 - cosine_distance(e.embedding, ?) AS similarity
FROM player_embedding e
JOIN season_stats s ON e.player_season_id = s.player_season_id
JOIN player p ON s.player_id = p.id"""


@dataclass(frozen=True)
class CompiledQuery:
    sql: str
    params: tuple[object, ...]


def _compile_predicate(predicate: Predicate) -> tuple[str, tuple[object, ...]]:
    if predicate.column not in ALLOWED_COLUMNS:
        raise ValueError(f"Column {predicate.column!r} cannot be filtered on")
    match predicate.operator:
        case Operator.BETWEEN:
            low, high = predicate.value  # type: ignore[misc]
            return f"{predicate.column} BETWEEN ? AND ?", (low, high)
        case Operator.LIKE:
            return f"{predicate.column} LIKE ? ESCAPE '\\'", (predicate.value,)
        case _:
            return f"{predicate.column} {predicate.operator.value} ?", (predicate.value,)


def compile_where(predicates: Sequence[Predicate]) -> tuple[str, tuple[object, ...]]:
    clauses: list[str] = []
    params: list[object] = []
    for predicate in predicates:
        clause, values = _compile_predicate(predicate)
        clauses.append(clause)
        params.extend(values)
    where = " AND ".join(clauses) if clauses else "1 = 1"
    return where, tuple(params)


def compile_similarity_query(query_vector: bytes, predicates: Sequence[Predicate], limit: int) -> CompiledQuery:
    """Build the ranked similarity query.

    Parameters are ordered: query vector, predicate values, limit.
    """
    where, params = compile_where(predicates)
    sql = f"{_SELECT}\nWHERE {where}\nORDER BY similarity DESC, s.player_season_id ASC\nLIMIT ?"
    return CompiledQuery(sql=sql, params=(query_vector, *params, limit))
