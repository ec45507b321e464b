"""Career totals and peaks derived from a player's season rows."""

from collections.abc import Sequence

from scouting_search.domain.career import CareerDiff, CareerTotals
from scouting_search.domain.season_stats import SeasonStats
from scouting_search.exceptions import NoStatsFoundError

PEAK_SEASONS = 7


def _peak_season(seasons: Sequence[SeasonStats]) -> SeasonStats:
    # max() keeps the first of equal values, so ties go to the earliest in input order
    return max(seasons, key=lambda s: s.war)


def peak_n_war(seasons: Sequence[SeasonStats], n: int = PEAK_SEASONS) -> float:
    """Sum of the ``n`` best single-season WAR values, consecutive or not."""
    return sum(sorted((s.war for s in seasons), reverse=True)[:n])


def aggregate_career(seasons: Sequence[SeasonStats]) -> CareerTotals:
    if not seasons:
        raise NoStatsFoundError()

    peak = _peak_season(seasons)
    total_war = sum(s.war for s in seasons)
    wrc_values = [s.wrc_plus for s in seasons if s.wrc_plus is not None]
    peak_7yr = peak_n_war(seasons)
    years = [s.year for s in seasons]

    return CareerTotals(
        player_id=seasons[0].player_id,
        player_name=seasons[0].player_name,
        seasons=len(seasons),
        first_season=min(years),
        last_season=max(years),
        g=sum(s.g for s in seasons),
        pa=sum(s.pa for s in seasons),
        hr=sum(s.hr for s in seasons),
        sb=sum(s.sb for s in seasons),
        war=total_war,
        avg_war=total_war / len(seasons),
        avg_wrc_plus=sum(wrc_values) / len(wrc_values) if wrc_values else None,
        peak_war=peak.war,
        peak_year=peak.year,
        peak_7yr_war=peak_7yr,
        jaws=(total_war + peak_7yr) / 2,
    )


def compare_careers(player1: CareerTotals, player2: CareerTotals) -> CareerDiff:
    return CareerDiff(
        war_diff=player1.war - player2.war,
        longevity_diff=player1.seasons - player2.seasons,
        peak_diff=player1.peak_war - player2.peak_war,
        peak_7yr_diff=player1.peak_7yr_war - player2.peak_7yr_war,
    )
