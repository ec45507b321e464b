import sqlite3

from scouting_search.domain.grades import PlayerGrades
from scouting_search.domain.season_stats import SeasonStats
from scouting_search.search.predicates import contains_pattern

_SELECT = "SELECT s.*, p.name AS player_name FROM season_stats s JOIN player p ON s.player_id = p.id"


class SqliteSeasonStatsRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert(self, season: SeasonStats, grades: PlayerGrades) -> None:
        self._conn.execute(
            """INSERT INTO season_stats
                   (player_season_id, player_id, year, age, team, position,
                    g, pa, hr, sb, avg, obp, slg, ops, war, wrc_plus,
                    fielding, ev90, avg_plus, bb_pct_plus, k_pct_plus, iso_plus, hard_pct_plus,
                    overall_grade, offense_grade, power_grade, hit_grade, discipline_grade,
                    contact_grade, speed_grade, fielding_grade, hard_contact_grade, exit_velo_grade)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?,
                       ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
               ON CONFLICT(player_season_id) DO UPDATE SET
                   player_id=excluded.player_id, year=excluded.year, age=excluded.age,
                   team=excluded.team, position=excluded.position,
                   g=excluded.g, pa=excluded.pa, hr=excluded.hr, sb=excluded.sb,
                   avg=excluded.avg, obp=excluded.obp, slg=excluded.slg, ops=excluded.ops,
                   war=excluded.war, wrc_plus=excluded.wrc_plus,
                   fielding=excluded.fielding, ev90=excluded.ev90,
                   avg_plus=excluded.avg_plus, bb_pct_plus=excluded.bb_pct_plus,
                   k_pct_plus=excluded.k_pct_plus, iso_plus=excluded.iso_plus,
                   hard_pct_plus=excluded.hard_pct_plus,
                   overall_grade=excluded.overall_grade, offense_grade=excluded.offense_grade,
                   power_grade=excluded.power_grade, hit_grade=excluded.hit_grade,
                   discipline_grade=excluded.discipline_grade, contact_grade=excluded.contact_grade,
                   speed_grade=excluded.speed_grade, fielding_grade=excluded.fielding_grade,
                   hard_contact_grade=excluded.hard_contact_grade, exit_velo_grade=excluded.exit_velo_grade""",
            (
                season.player_season_id,
                season.player_id,
                season.year,
                season.age,
                season.team,
                season.position,
                season.g,
                season.pa,
                season.hr,
                season.sb,
                season.avg,
                season.obp,
                season.slg,
                season.ops,
                season.war,
                season.wrc_plus,
                season.fielding,
                season.ev90,
                season.avg_plus,
                season.bb_pct_plus,
                season.k_pct_plus,
                season.iso_plus,
                season.hard_pct_plus,
                grades.overall,
                grades.offense,
                grades.power,
                grades.hit,
                grades.discipline,
                grades.contact,
                grades.speed,
                grades.fielding,
                grades.hard_contact,
                grades.exit_velo,
            ),
        )

    def get(self, player_season_id: str) -> SeasonStats | None:
        row = self._conn.execute(f"{_SELECT} WHERE s.player_season_id = ?", (player_season_id,)).fetchone()
        return self._row_to_season(row) if row else None

    def get_grades(self, player_season_id: str) -> PlayerGrades | None:
        row = self._conn.execute(
            "SELECT * FROM season_stats WHERE player_season_id = ?", (player_season_id,)
        ).fetchone()
        if row is None or row["overall_grade"] is None:
            return None
        return self._row_to_grades(row)

    def fetch_seasons(self, min_plate_appearances: int, limit: int | None = None) -> list[SeasonStats]:
        """Seasons with at least ``min_plate_appearances``, best WAR first."""
        sql = f"{_SELECT} WHERE s.pa >= ? ORDER BY s.war DESC, s.player_season_id"
        params: tuple[object, ...] = (min_plate_appearances,)
        if limit is not None:
            sql += " LIMIT ?"
            params = (*params, limit)
        rows = self._conn.execute(sql, params).fetchall()
        return [self._row_to_season(row) for row in rows]

    def search_by_player_name(self, name: str, year: int | None = None) -> list[SeasonStats]:
        """Partial, case-insensitive name match, newest season first."""
        if year is not None:
            rows = self._conn.execute(
                f"{_SELECT} WHERE p.name LIKE ? ESCAPE '\\' AND s.year = ? ORDER BY s.year DESC, p.name",
                (contains_pattern(name), year),
            ).fetchall()
        else:
            rows = self._conn.execute(
                f"{_SELECT} WHERE p.name LIKE ? ESCAPE '\\' ORDER BY s.year DESC, p.name",
                (contains_pattern(name),),
            ).fetchall()
        return [self._row_to_season(row) for row in rows]

    @staticmethod
    def _row_to_season(row: sqlite3.Row) -> SeasonStats:
        return SeasonStats(
            player_season_id=row["player_season_id"],
            player_id=row["player_id"],
            player_name=row["player_name"],
            year=row["year"],
            age=row["age"],
            team=row["team"],
            position=row["position"],
            g=row["g"],
            pa=row["pa"],
            hr=row["hr"],
            sb=row["sb"],
            avg=row["avg"],
            obp=row["obp"],
            slg=row["slg"],
            ops=row["ops"],
            war=row["war"],
            wrc_plus=row["wrc_plus"],
            fielding=row["fielding"],
            ev90=row["ev90"],
            avg_plus=row["avg_plus"],
            bb_pct_plus=row["bb_pct_plus"],
            k_pct_plus=row["k_pct_plus"],
            iso_plus=row["iso_plus"],
            hard_pct_plus=row["hard_pct_plus"],
        )

    @staticmethod
    def _row_to_grades(row: sqlite3.Row) -> PlayerGrades:
        return PlayerGrades(
            overall=row["overall_grade"],
            offense=row["offense_grade"],
            power=row["power_grade"],
            hit=row["hit_grade"],
            discipline=row["discipline_grade"],
            contact=row["contact_grade"],
            speed=row["speed_grade"],
            fielding=row["fielding_grade"],
            position=row["position"],
            hard_contact=row["hard_contact_grade"],
            exit_velo=row["exit_velo_grade"],
        )
