import pytest

from scouting_search.exceptions import NoStatsFoundError
from scouting_search.services.player_stats import PlayerStatsService
from tests.fakes.repos import FakeSeasonStatsRepo
from tests.helpers import make_season


def _service() -> PlayerStatsService:
    return PlayerStatsService(
        FakeSeasonStatsRepo(
            [
                make_season(player_season_id="jr_2001", player_id=1, player_name="Ken Griffey Jr.", year=2001, war=2.0),
                make_season(player_season_id="jr_1997", player_id=1, player_name="Ken Griffey Jr.", year=1997, war=9.0),
                make_season(player_season_id="sr_1980", player_id=2, player_name="Ken Griffey", year=1980, war=3.0),
                make_season(player_season_id="bb_2001", player_id=3, player_name="Barry Bonds", year=2001, war=11.9),
            ]
        )
    )


class TestPlayerStatsService:
    def test_get_player_stats_newest_first(self) -> None:
        seasons = _service().get_player_stats("griffey jr")
        assert [s.year for s in seasons] == [2001, 1997]

    def test_get_player_stats_for_year(self) -> None:
        seasons = _service().get_player_stats("Griffey", 1980)
        assert [s.player_season_id for s in seasons] == ["sr_1980"]

    def test_career_summary_prefers_exact_name(self) -> None:
        summary = _service().career_summary("Ken Griffey")
        assert summary.career.player_id == 2

    def test_career_summary_falls_back_to_highest_war(self) -> None:
        summary = _service().career_summary("griffey")
        assert summary.career.player_id == 1
        assert [s.year for s in summary.seasons] == [1997, 2001]

    def test_unknown_player(self) -> None:
        with pytest.raises(NoStatsFoundError, match="Nobody"):
            _service().career_summary("Nobody")

    def test_compare(self) -> None:
        comparison = _service().compare("Barry Bonds", "Ken Griffey Jr.")
        assert comparison.player1.career.player_name == "Barry Bonds"
        assert comparison.diff.war_diff == pytest.approx(0.9)
        assert comparison.diff.longevity_diff == -1
