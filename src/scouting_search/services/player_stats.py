from collections import defaultdict

from scouting_search.domain.career import CareerSummary, PlayerComparison
from scouting_search.domain.season_stats import SeasonStats
from scouting_search.exceptions import NoStatsFoundError
from scouting_search.repos.protocols import SeasonStatsRepo
from scouting_search.services.career_aggregator import aggregate_career, compare_careers


def _resolve_player(name: str, seasons: list[SeasonStats]) -> list[SeasonStats]:
    """Pick one player's seasons from a partial-name match.

    An exact (case-insensitive) name wins; otherwise the match with the
    highest career WAR.
    """
    by_player: dict[int, list[SeasonStats]] = defaultdict(list)
    for season in seasons:
        by_player[season.player_id].append(season)

    wanted = name.strip().casefold()
    exact = [rows for rows in by_player.values() if rows[0].player_name.casefold() == wanted]
    candidates = exact or list(by_player.values())
    return max(candidates, key=lambda rows: sum(s.war for s in rows))


class PlayerStatsService:
    def __init__(self, season_repo: SeasonStatsRepo) -> None:
        self._season_repo = season_repo

    def get_player_stats(self, player_name: str, year: int | None = None) -> list[SeasonStats]:
        return self._season_repo.search_by_player_name(player_name, year)

    def career_summary(self, player_name: str) -> CareerSummary:
        matches = self._season_repo.search_by_player_name(player_name)
        if not matches:
            raise NoStatsFoundError(player_name)
        seasons = sorted(_resolve_player(player_name, matches), key=lambda s: s.year)
        return CareerSummary(seasons=tuple(seasons), career=aggregate_career(seasons))

    def compare(self, player1: str, player2: str) -> PlayerComparison:
        first = self.career_summary(player1)
        second = self.career_summary(player2)
        return PlayerComparison(
            player1=first,
            player2=second,
            diff=compare_careers(first.career, second.career),
        )
