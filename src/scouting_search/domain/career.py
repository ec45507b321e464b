from dataclasses import dataclass

from scouting_search.domain.season_stats import SeasonStats


@dataclass(frozen=True)
class CareerTotals:
    player_id: int
    player_name: str
    seasons: int
    first_season: int
    last_season: int
    g: int
    pa: int
    hr: int
    sb: int
    war: float
    avg_war: float
    avg_wrc_plus: float | None
    peak_war: float
    peak_year: int
    peak_7yr_war: float
    jaws: float


@dataclass(frozen=True)
class CareerSummary:
    seasons: tuple[SeasonStats, ...]
    career: CareerTotals


@dataclass(frozen=True)
class CareerDiff:
    war_diff: float
    longevity_diff: int
    peak_diff: float
    peak_7yr_diff: float


@dataclass(frozen=True)
class PlayerComparison:
    player1: CareerSummary
    player2: CareerSummary
    diff: CareerDiff
