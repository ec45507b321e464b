import sqlite3

from scouting_search.domain.player import Player
from scouting_search.search.predicates import contains_pattern


class SqlitePlayerRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert(self, player: Player) -> int:
        """Insert or update a player, returning its id.

        Players with a ``fangraphs_id`` are matched on it; otherwise an explicit
        ``id`` is honoured, and a bare name always inserts a new row.
        """
        if player.fangraphs_id is not None:
            existing = self.get_by_fangraphs_id(player.fangraphs_id)
            if existing is not None and existing.id is not None:
                self._conn.execute(
                    "UPDATE player SET name = ?, bats = ? WHERE id = ?",
                    (player.name, player.bats, existing.id),
                )
                return existing.id
        if player.id is not None:
            self._conn.execute(
                """INSERT INTO player (id, name, fangraphs_id, bats) VALUES (?, ?, ?, ?)
                   ON CONFLICT(id) DO UPDATE SET
                       name=excluded.name, fangraphs_id=excluded.fangraphs_id, bats=excluded.bats""",
                (player.id, player.name, player.fangraphs_id, player.bats),
            )
            return player.id
        cursor = self._conn.execute(
            "INSERT INTO player (name, fangraphs_id, bats) VALUES (?, ?, ?)",
            (player.name, player.fangraphs_id, player.bats),
        )
        return cursor.lastrowid  # type: ignore[return-value]

    def get_by_id(self, player_id: int) -> Player | None:
        row = self._conn.execute("SELECT * FROM player WHERE id = ?", (player_id,)).fetchone()
        return self._row_to_player(row) if row else None

    def get_by_fangraphs_id(self, fangraphs_id: int) -> Player | None:
        row = self._conn.execute("SELECT * FROM player WHERE fangraphs_id = ?", (fangraphs_id,)).fetchone()
        return self._row_to_player(row) if row else None

    def search_by_name(self, name: str) -> list[Player]:
        rows = self._conn.execute(
            "SELECT * FROM player WHERE name LIKE ? ESCAPE '\\' ORDER BY name, id",
            (contains_pattern(name),),
        ).fetchall()
        return [self._row_to_player(row) for row in rows]

    @staticmethod
    def _row_to_player(row: sqlite3.Row) -> Player:
        return Player(
            id=row["id"],
            name=row["name"],
            fangraphs_id=row["fangraphs_id"],
            bats=row["bats"],
        )
