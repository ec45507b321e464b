import sqlite3
from pathlib import Path

import pytest

from scouting_search.db.connection import create_connection, get_schema_version, load_migrations
from scouting_search.db.vector import encode_vector


class TestCreateConnection:
    def test_creates_tables(self, conn: sqlite3.Connection) -> None:
        tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
        assert {"player", "season_stats", "player_embedding", "schema_version"} <= tables

    def test_schema_version(self, conn: sqlite3.Connection) -> None:
        assert get_schema_version(conn) == 1

    def test_file_database_creates_parent_and_uses_wal(self, tmp_path: Path) -> None:
        db_path = tmp_path / "nested" / "scouting.db"
        conn = create_connection(db_path)
        try:
            assert db_path.exists()
            assert conn.execute("PRAGMA journal_mode").fetchone()[0] == "wal"
            assert conn.execute("PRAGMA foreign_keys").fetchone()[0] == 1
        finally:
            conn.close()

    def test_migrations_are_not_reapplied(self, tmp_path: Path) -> None:
        db_path = tmp_path / "scouting.db"
        create_connection(db_path).close()
        conn = create_connection(db_path)
        try:
            assert conn.execute("SELECT COUNT(*) FROM schema_version").fetchone()[0] == 1
        finally:
            conn.close()

    def test_cosine_distance_registered(self, conn: sqlite3.Connection) -> None:
        row = conn.execute(
            "SELECT cosine_distance(?, ?)", (encode_vector([1.0, 0.0]), encode_vector([0.0, 1.0]))
        ).fetchone()
        assert row[0] == 1.0


class TestMigrations:
    def test_load_orders_by_version(self, tmp_path: Path) -> None:
        (tmp_path / "010_later.sql").write_text("CREATE TABLE b (y INTEGER);")
        (tmp_path / "002_first.sql").write_text("CREATE TABLE a (x INTEGER); CREATE INDEX idx_a ON a (x);")
        migrations = load_migrations(tmp_path)
        assert [(m.version, m.name) for m in migrations] == [(2, "first"), (10, "later")]
        assert len(migrations[0].statements) == 2

    def test_duplicate_versions_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "001_a.sql").write_text("SELECT 1;")
        (tmp_path / "001_b.sql").write_text("SELECT 1;")
        with pytest.raises(ValueError, match="Duplicate migration version 1"):
            load_migrations(tmp_path)

    def test_failed_migration_rolls_back(self, tmp_path: Path) -> None:
        migrations = tmp_path / "migrations"
        migrations.mkdir()
        (migrations / "001_base.sql").write_text("CREATE TABLE base (x INTEGER);")
        (migrations / "002_broken.sql").write_text(
            "CREATE TABLE half (y INTEGER); INSERT INTO no_such_table VALUES (1);"
        )
        db_path = tmp_path / "scouting.db"
        with pytest.raises(sqlite3.OperationalError):
            create_connection(db_path, migrations_dir=migrations)

        conn = sqlite3.connect(db_path)
        try:
            tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
            assert "base" in tables
            assert "half" not in tables
            assert get_schema_version(conn) == 1
            assert conn.execute("SELECT name FROM schema_version").fetchall() == [("base",)]
        finally:
            conn.close()

    def test_resumes_after_fixed_migration(self, tmp_path: Path) -> None:
        migrations = tmp_path / "migrations"
        migrations.mkdir()
        (migrations / "001_base.sql").write_text("CREATE TABLE base (x INTEGER);")
        (migrations / "002_next.sql").write_text("INSERT INTO no_such_table VALUES (1);")
        db_path = tmp_path / "scouting.db"
        with pytest.raises(sqlite3.OperationalError):
            create_connection(db_path, migrations_dir=migrations)

        (migrations / "002_next.sql").write_text("CREATE TABLE next (y INTEGER);")
        conn = create_connection(db_path, migrations_dir=migrations)
        try:
            assert get_schema_version(conn) == 2
        finally:
            conn.close()
