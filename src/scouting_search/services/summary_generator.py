"""Render a graded season as a deterministic paragraph.

The paragraph doubles as the embedding source text, so the same season must
always render to the same string.
"""

from scouting_search.domain.grades import PlayerGrades
from scouting_search.domain.season_stats import SeasonStats
from scouting_search.grading.descriptions import (
    fielding_description,
    format_rate,
    should_mention_fielding,
    war_description,
    wrc_plus_description,
)
from scouting_search.grading.engine import describe_grade

TOOL_THRESHOLD = 60
STATCAST_THRESHOLD = 55


def _header(season: SeasonStats, grades: PlayerGrades) -> str:
    return f"{season.player_name}, {season.year} season (age {season.age}, {grades.position}, {season.team}):"


def _tool_clauses(season: SeasonStats, grades: PlayerGrades) -> list[str]:
    clauses: list[str] = []
    if grades.power >= TOOL_THRESHOLD:
        clauses.append(
            f"{describe_grade(grades.power)} power with {season.hr} home runs"
            f" and a {format_rate(season.slg)} slugging percentage"
        )
    if grades.hit >= TOOL_THRESHOLD:
        clauses.append(f"{describe_grade(grades.hit)} hitting with a {format_rate(season.avg)} batting average")
    if grades.discipline >= TOOL_THRESHOLD:
        clauses.append(
            f"{describe_grade(grades.discipline)} plate discipline with a {format_rate(season.obp)} on base percentage"
        )
    if grades.contact >= TOOL_THRESHOLD:
        clauses.append(f"{describe_grade(grades.contact)} contact ability")
    if grades.speed is not None and grades.speed >= TOOL_THRESHOLD:
        clauses.append(f"{describe_grade(grades.speed)} speed with {season.sb} stolen bases")
    return clauses


def _statcast_sentence(season: SeasonStats, grades: PlayerGrades) -> str | None:
    if grades.exit_velo is None or grades.exit_velo < STATCAST_THRESHOLD or season.ev90 is None:
        return None
    descriptor = describe_grade(grades.exit_velo)
    return f"{descriptor[0].upper()}{descriptor[1:]} bat speed with {season.ev90:.1f} mph 90th percentile exit velocity."


def generate_season_summary(season: SeasonStats, grades: PlayerGrades) -> str:
    parts = [
        _header(season, grades),
        war_description(season.war, grades.overall),
    ]

    if season.wrc_plus is not None:
        parts.append(wrc_plus_description(season.ops, season.wrc_plus, grades.offense))

    tools = _tool_clauses(season, grades)
    if tools:
        parts.append(f"Demonstrated {', '.join(tools)}.")

    if season.fielding is not None and should_mention_fielding(grades.fielding, grades.is_premium_defensive_position):
        parts.append(fielding_description(grades.fielding, grades.position, season.fielding))

    statcast = _statcast_sentence(season, grades)
    if statcast is not None:
        parts.append(statcast)

    return " ".join(parts)
