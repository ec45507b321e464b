from dataclasses import dataclass, fields


@dataclass(frozen=True)
class SearchFilters:
    """Optional bounds for a hybrid search. A field left as None is unconstrained."""

    position: str | None = None
    min_war: float | None = None
    max_war: float | None = None
    min_overall_grade: float | None = None
    max_overall_grade: float | None = None
    min_hit_grade: float | None = None
    max_hit_grade: float | None = None
    min_power_grade: float | None = None
    max_power_grade: float | None = None
    min_fielding_grade: float | None = None
    max_fielding_grade: float | None = None
    min_speed_grade: float | None = None
    max_speed_grade: float | None = None
    year_range: tuple[int, int] | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in (f.name for f in fields(self)))


@dataclass(frozen=True)
class SearchResult:
    summary_text: str
    player_season_id: str
    player_name: str
    year: int
    team: str
    position: str
    war: float
    wrc_plus: float | None
    overall_grade: int | None
    power_grade: int | None
    hit_grade: int | None
    fielding_grade: float | None
    speed_grade: int | None
    similarity: float | None
