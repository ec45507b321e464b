"""Convert season statistics into 20-80 scouting grades.

Step grades (WAR, plus stats, speed, exit velocity) come straight from the
breakpoint tables in :mod:`scouting_search.grading.thresholds`. Fielding is the
one smoothed grade: it interpolates linearly between the era's 20, 50 and 80
thresholds.
"""

from scouting_search.domain.grades import PlayerGrades
from scouting_search.domain.season_stats import SeasonStats
from scouting_search.grading.positions import is_catcher
from scouting_search.grading.thresholds import (
    EXIT_VELO_BREAKPOINTS,
    FIELDING_ERAS,
    FIELDING_DESCRIPTORS,
    FLOOR_GRADE,
    GRADE_DESCRIPTORS,
    GRADE_DESCRIPTORS_VERBOSE,
    MAX_GRADE,
    MIN_GRADE,
    PLUS_STAT_BREAKPOINTS,
    ROUNDING_BREAKPOINTS,
    SPEED_BREAKPOINTS,
    SPEED_PA_BASIS,
    WAR_BREAKPOINTS,
    Breakpoints,
    FieldingEra,
    FieldingThresholds,
)

_DEFAULT_TOOL_GRADE = 50


def _step_grade(value: float, breakpoints: Breakpoints) -> int:
    for threshold, grade in breakpoints:
        if value >= threshold:
            return grade
    return FLOOR_GRADE


def grade_from_plus_stat(value: float) -> int:
    return _step_grade(value, PLUS_STAT_BREAKPOINTS)


def grade_from_war(war: float) -> int:
    return _step_grade(war, WAR_BREAKPOINTS)


def grade_exit_velo(ev90: float) -> int:
    return _step_grade(ev90, EXIT_VELO_BREAKPOINTS)


def grade_speed(sb: int, pa: int) -> int | None:
    """Grade stolen-base volume per 600 PA. A season with no PA is ungraded."""
    if pa <= 0:
        return None
    return _step_grade(sb / pa * SPEED_PA_BASIS, SPEED_BREAKPOINTS)


def round_to_grade(grade: float) -> int:
    return _step_grade(grade, ROUNDING_BREAKPOINTS)


def fielding_era(year: int) -> FieldingEra:
    for era in FIELDING_ERAS:
        if era.contains(year):
            return era
    return FIELDING_ERAS[-1]


def fielding_thresholds(year: int, position: str) -> FieldingThresholds:
    era = fielding_era(year)
    return era.catcher if is_catcher(position) else era.other


def grade_fielding(fielding_runs: float | None, year: int, position: str) -> float | None:
    if fielding_runs is None:
        return None

    t = fielding_thresholds(year, position)
    if fielding_runs >= t.grade80:
        return float(MAX_GRADE)
    if fielding_runs >= t.grade50:
        return 50 + 30 * (fielding_runs - t.grade50) / (t.grade80 - t.grade50)
    if fielding_runs >= t.grade20:
        return 20 + 30 * (fielding_runs - t.grade20) / (t.grade50 - t.grade20)
    return float(MIN_GRADE)


def _plus_grade(value: float | None) -> int:
    if value is None:
        return _DEFAULT_TOOL_GRADE
    return grade_from_plus_stat(value)


def grade_season(season: SeasonStats) -> PlayerGrades:
    position = season.position or "DH"
    wrc_plus = season.wrc_plus if season.wrc_plus is not None else 100
    return PlayerGrades(
        overall=grade_from_war(season.war),
        offense=grade_from_plus_stat(wrc_plus),
        power=_plus_grade(season.iso_plus),
        hit=_plus_grade(season.avg_plus),
        discipline=_plus_grade(season.bb_pct_plus),
        contact=_plus_grade(season.k_pct_plus),
        speed=grade_speed(season.sb, season.pa),
        fielding=grade_fielding(season.fielding, season.year, position),
        position=position,
        hard_contact=grade_from_plus_stat(season.hard_pct_plus) if season.hard_pct_plus is not None else None,
        exit_velo=grade_exit_velo(season.ev90) if season.ev90 is not None else None,
    )


def describe_grade(grade: float, *, verbose: bool = False) -> str:
    descriptors = GRADE_DESCRIPTORS_VERBOSE if verbose else GRADE_DESCRIPTORS
    return descriptors[round_to_grade(grade)]


def describe_fielding(grade: float) -> str:
    return FIELDING_DESCRIPTORS[round_to_grade(grade)]
