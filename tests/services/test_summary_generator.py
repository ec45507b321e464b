from scouting_search.grading.engine import grade_season
from scouting_search.services.summary_generator import generate_season_summary
from tests.helpers import make_season


def _summary(**overrides: object) -> str:
    season = make_season(**overrides)
    return generate_season_summary(season, grade_season(season))


class TestGenerateSeasonSummary:
    def test_header(self) -> None:
        assert _summary().startswith("Test Player, 2019 season (age 28, 1B, NYY): ")

    def test_is_deterministic(self) -> None:
        season = make_season(war=6.1, ev90=111.0, iso_plus=170)
        grades = grade_season(season)
        assert generate_season_summary(season, grades) == generate_season_summary(season, grades)

    def test_elite_shortstop_season(self) -> None:
        text = _summary(
            player_name="Alex Rodriguez",
            war=9.5,
            wrc_plus=185,
            ops=1.050,
            position="SS",
            fielding=32.0,
            year=2020,
        )
        assert "All-time great season with 9.5 WAR." in text
        assert "(185 wRC+ or 85% better than league average)." in text
        assert "All-time great defender at shortstop (+32.0 fielding runs)." in text

    def test_tool_sentence_omitted_for_average_tools(self) -> None:
        assert "Demonstrated" not in _summary()

    def test_tool_sentence_lists_plus_tools(self) -> None:
        text = _summary(iso_plus=185, hr=48, slg=0.640, sb=50)
        assert "Demonstrated elite power with 48 home runs and a .640 slugging percentage" in text
        assert "elite speed with 50 stolen bases" in text

    def test_average_fielding_at_non_premium_position_not_mentioned(self) -> None:
        assert "fielding runs" not in _summary(position="1B", fielding=0.0)

    def test_average_fielding_at_premium_position_mentioned(self) -> None:
        assert "Solid defender at shortstop (+0.0 fielding runs)." in _summary(position="SS", fielding=0.0)

    def test_no_fielding_sentence_without_fielding_data(self) -> None:
        text = _summary(position="DH", fielding=None)
        assert "fielding runs" not in text
        assert "Did not field" not in text

    def test_no_wrc_plus_sentence_when_missing(self) -> None:
        assert "wRC+" not in _summary(wrc_plus=None)

    def test_statcast_sentence(self) -> None:
        assert "Elite bat speed with 112.5 mph 90th percentile exit velocity." in _summary(ev90=112.5)

    def test_statcast_sentence_omitted_below_threshold(self) -> None:
        assert "bat speed" not in _summary(ev90=104.0)
