import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from scouting_search.db.vector import cosine_distance

logger = logging.getLogger(__name__)

_MIGRATIONS_DIR = Path(__file__).parent / "migrations"


@dataclass(frozen=True)
class Migration:
    """One numbered ``NNN_name.sql`` file split into its statements."""

    version: int
    name: str
    statements: tuple[str, ...]


def create_connection(
    path: str | Path,
    *,
    check_same_thread: bool = True,
    migrations_dir: Path | None = None,
) -> sqlite3.Connection:
    """Open a SQLite connection with WAL mode, foreign keys, vector functions and pending migrations applied.

    The connection is closed again if a migration fails.
    """
    if str(path) != ":memory:":
        path = Path(path).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path), check_same_thread=check_same_thread)
    conn.row_factory = sqlite3.Row
    if str(path) != ":memory:":
        conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    register_functions(conn)
    try:
        apply_migrations(conn, load_migrations(migrations_dir or _MIGRATIONS_DIR))
    except Exception:
        conn.close()
        raise
    return conn


def register_functions(conn: sqlite3.Connection) -> None:
    conn.create_function("cosine_distance", 2, cosine_distance, deterministic=True)


def load_migrations(directory: Path) -> list[Migration]:
    """Read every ``*.sql`` file in ``directory``, ordered by its numeric prefix."""
    migrations: dict[int, Migration] = {}
    for sql_file in directory.glob("*.sql"):
        prefix, _, name = sql_file.stem.partition("_")
        version = int(prefix)
        if version in migrations:
            raise ValueError(f"Duplicate migration version {version}: {migrations[version].name} and {name}")
        statements = tuple(s.strip() for s in sql_file.read_text().split(";") if s.strip())
        migrations[version] = Migration(version=version, name=name, statements=statements)
    return [migrations[v] for v in sorted(migrations)]


def get_schema_version(conn: sqlite3.Connection) -> int:
    """Return the highest applied migration version, or 0 before any have run."""
    try:
        return conn.execute("SELECT COALESCE(MAX(version), 0) FROM schema_version").fetchone()[0]
    except sqlite3.OperationalError:
        return 0


@contextmanager
def _explicit_transaction(conn: sqlite3.Connection) -> Iterator[None]:
    # DDL only joins the transaction when BEGIN is issued by hand
    old_isolation = conn.isolation_level
    conn.isolation_level = None
    try:
        conn.execute("BEGIN")
        try:
            yield
        except BaseException:
            conn.execute("ROLLBACK")
            raise
        conn.execute("COMMIT")
    finally:
        conn.isolation_level = old_isolation


def apply_migrations(conn: sqlite3.Connection, migrations: list[Migration]) -> int:
    """Apply migrations newer than the recorded schema version, each in its own transaction.

    A failing migration is rolled back whole and leaves the version unchanged.
    Returns the number of migrations applied.
    """
    with conn:
        conn.execute(
            "CREATE TABLE IF NOT EXISTS schema_version ("
            "    version INTEGER PRIMARY KEY,"
            "    name TEXT NOT NULL DEFAULT '',"
            "    applied_at TEXT NOT NULL DEFAULT (datetime('now'))"
            ")"
        )
    current = get_schema_version(conn)
    pending = [m for m in migrations if m.version > current]
    for migration in pending:
        logger.info("Applying migration %03d_%s", migration.version, migration.name)
        with _explicit_transaction(conn):
            for statement in migration.statements:
                conn.execute(statement)
            conn.execute(
                "INSERT INTO schema_version (version, name) VALUES (?, ?)",
                (migration.version, migration.name),
            )
    return len(pending)
