import pytest

from scouting_search.grading.engine import (
    describe_fielding,
    describe_grade,
    fielding_thresholds,
    grade_exit_velo,
    grade_fielding,
    grade_from_plus_stat,
    grade_from_war,
    grade_season,
    grade_speed,
    round_to_grade,
)
from scouting_search.grading.thresholds import (
    EXIT_VELO_BREAKPOINTS,
    PLUS_STAT_BREAKPOINTS,
    ROUNDING_BREAKPOINTS,
    SPEED_BREAKPOINTS,
    WAR_BREAKPOINTS,
)
from tests.helpers import make_season


class TestBreakpointTables:
    @pytest.mark.parametrize(
        "table",
        [PLUS_STAT_BREAKPOINTS, WAR_BREAKPOINTS, SPEED_BREAKPOINTS, EXIT_VELO_BREAKPOINTS, ROUNDING_BREAKPOINTS],
    )
    def test_thresholds_strictly_descending(self, table: tuple[tuple[float, int], ...]) -> None:
        thresholds = [t for t, _ in table]
        grades = [g for _, g in table]
        assert all(a > b for a, b in zip(thresholds, thresholds[1:]))
        assert all(a > b for a, b in zip(grades, grades[1:]))


class TestStepGrades:
    def test_war_thresholds_are_inclusive(self) -> None:
        assert grade_from_war(9.0) == 80
        assert grade_from_war(8.99) == 70
        assert grade_from_war(2.0) == 50
        assert grade_from_war(-0.3) == 40
        assert grade_from_war(-5.0) == 20

    def test_war_grade_is_monotonic(self) -> None:
        values = [x / 10 for x in range(-50, 130)]
        grades = [grade_from_war(v) for v in values]
        assert grades == sorted(grades)
        assert all(20 <= g <= 80 for g in grades)

    def test_plus_stat(self) -> None:
        assert grade_from_plus_stat(185) == 80
        assert grade_from_plus_stat(100) == 50
        assert grade_from_plus_stat(89.9) == 45
        assert grade_from_plus_stat(10) == 20

    def test_exit_velo(self) -> None:
        assert grade_exit_velo(112.0) == 80
        assert grade_exit_velo(107.5) == 55
        assert grade_exit_velo(95.0) == 20

    def test_speed_scales_to_600_pa(self) -> None:
        assert grade_speed(25, 300) == 80
        assert grade_speed(15, 600) == 50
        assert grade_speed(0, 600) == 20

    def test_speed_without_plate_appearances_is_ungraded(self) -> None:
        assert grade_speed(3, 0) is None

    def test_round_to_grade(self) -> None:
        assert round_to_grade(76) == 80
        assert round_to_grade(57.5) == 60
        assert round_to_grade(57.4) == 55
        assert round_to_grade(24.9) == 20


class TestFielding:
    @pytest.mark.parametrize(
        ("year", "position", "runs", "expected"),
        [
            (2020, "SS", 15, 80.0),
            (2020, "SS", 0, 50.0),
            (2020, "SS", -15, 20.0),
            (2020, "SS", 7.5, 65.0),
            (2020, "C", 30, 80.0),
            (2020, "C", 15, 65.0),
            (2010, "CF", -7.5, 35.0),
            (2010, "C", -30, 20.0),
            (1995, "SS", 20, 80.0),
            (1995, "SS", 10, 65.0),
            (1995, "C", 15, 80.0),
            (1980, "C", -15, 20.0),
        ],
    )
    def test_thresholds_by_era_and_position(self, year: int, position: str, runs: float, expected: float) -> None:
        assert grade_fielding(runs, year, position) == pytest.approx(expected)

    def test_clamps_outside_thresholds(self) -> None:
        assert grade_fielding(40, 2020, "SS") == 80.0
        assert grade_fielding(-40, 2020, "SS") == 20.0

    def test_no_fielding_data(self) -> None:
        assert grade_fielding(None, 2020, "SS") is None

    def test_center_field_is_not_catcher(self) -> None:
        assert fielding_thresholds(2020, "1B/CF").grade80 == 15
        assert fielding_thresholds(2020, "1B/C").grade80 == 30

    def test_era_boundaries(self) -> None:
        assert fielding_thresholds(2001, "SS").grade80 == 20
        assert fielding_thresholds(2002, "SS").grade80 == 15
        assert fielding_thresholds(2016, "C").grade80 == 30


class TestGradeSeason:
    def test_elite_shortstop_season(self) -> None:
        season = make_season(war=9.5, wrc_plus=185, position="SS", fielding=32.0, year=2020)
        grades = grade_season(season)
        assert grades.overall == 80
        assert grades.offense == 80
        assert grades.fielding == 80.0
        assert grades.is_premium_defensive_position

    def test_missing_inputs_fall_back_to_average(self) -> None:
        season = make_season(
            wrc_plus=None, avg_plus=None, bb_pct_plus=None, k_pct_plus=None, iso_plus=None, fielding=None
        )
        grades = grade_season(season)
        assert grades.offense == 50
        assert (grades.power, grades.hit, grades.discipline, grades.contact) == (50, 50, 50, 50)
        assert grades.fielding is None
        assert grades.hard_contact is None
        assert grades.exit_velo is None

    def test_blank_position_defaults_to_dh(self) -> None:
        grades = grade_season(make_season(position=""))
        assert grades.position == "DH"

    def test_statcast_grades_when_present(self) -> None:
        grades = grade_season(make_season(ev90=110.5, hard_pct_plus=145))
        assert grades.exit_velo == 70
        assert grades.hard_contact == 60

    def test_all_grades_in_range(self) -> None:
        for war in (-3.0, 0.0, 4.0, 12.0):
            grades = grade_season(make_season(war=war, wrc_plus=war * 20 + 60, sb=int(max(war, 0) * 5)))
            for value in (grades.overall, grades.offense, grades.power, grades.hit, grades.speed):
                assert value is not None
                assert 20 <= value <= 80


class TestDescribe:
    def test_terse_and_verbose(self) -> None:
        assert describe_grade(80) == "elite"
        assert describe_grade(61) == "plus"
        assert describe_grade(50, verbose=True).startswith("average")

    def test_fielding_descriptor(self) -> None:
        assert describe_fielding(70.0) == "Gold Glove caliber defender"
        assert describe_fielding(20.0).startswith("extremely poor")
