import sqlite3
from dataclasses import replace

from scouting_search.domain.player import Player
from scouting_search.domain.season_stats import SeasonStats
from scouting_search.grading.engine import grade_season
from scouting_search.repos.player_repo import SqlitePlayerRepo
from scouting_search.repos.season_stats_repo import SqliteSeasonStatsRepo


def make_season(**overrides: object) -> SeasonStats:
    """An ordinary, everyday-regular season; override whatever the test cares about."""
    season = SeasonStats(
        player_season_id="1001_2019",
        player_id=1,
        player_name="Test Player",
        year=2019,
        age=28,
        team="NYY",
        position="1B",
        g=150,
        pa=600,
        hr=20,
        sb=5,
        avg=0.270,
        obp=0.340,
        slg=0.450,
        ops=0.790,
        war=2.5,
        wrc_plus=110,
        fielding=0.0,
        avg_plus=100,
        bb_pct_plus=100,
        k_pct_plus=100,
        iso_plus=100,
    )
    return replace(season, **overrides)  # type: ignore[arg-type]


def seed_player(
    conn: sqlite3.Connection,
    *,
    name: str = "Test Player",
    fangraphs_id: int | None = None,
    bats: str | None = "R",
) -> int:
    return SqlitePlayerRepo(conn).upsert(Player(name=name, fangraphs_id=fangraphs_id, bats=bats))


def seed_season(conn: sqlite3.Connection, **overrides: object) -> SeasonStats:
    """Seed the player (by name) and a graded season row, returning the stored season."""
    name = str(overrides.pop("player_name", "Test Player"))
    existing = SqlitePlayerRepo(conn).search_by_name(name)
    exact = [p for p in existing if p.name == name]
    player_id = exact[0].id if exact and exact[0].id is not None else seed_player(conn, name=name)
    season = make_season(player_id=player_id, player_name=name, **overrides)
    SqliteSeasonStatsRepo(conn).upsert(season, grade_season(season))
    conn.commit()
    return season
