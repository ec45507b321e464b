import json
import logging
import sqlite3
from collections.abc import Sequence

import numpy as np

from scouting_search.db.vector import VECTOR_DTYPE, decode_vector, encode_vector
from scouting_search.domain.embedding_record import EmbeddingRecord
from scouting_search.domain.search import SearchResult
from scouting_search.search.compiler import compile_similarity_query
from scouting_search.search.predicates import Predicate

logger = logging.getLogger(__name__)


class SqliteEmbeddingRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert_many(self, records: Sequence[EmbeddingRecord]) -> int:
        """Upsert ``records`` in a single transaction keyed on (player_season_id, embedding_type).

        Either every record is written or, on any error, none of them are.
        """
        with self._conn:
            for record in records:
                self._conn.execute(
                    """INSERT INTO player_embedding
                           (player_season_id, player_id, year, embedding_type, summary_text, embedding, metadata)
                       VALUES (?, ?, ?, ?, ?, ?, ?)
                       ON CONFLICT(player_season_id, embedding_type) DO UPDATE SET
                           player_id=excluded.player_id,
                           year=excluded.year,
                           summary_text=excluded.summary_text,
                           embedding=excluded.embedding,
                           metadata=excluded.metadata,
                           created_at=datetime('now')""",
                    (
                        record.player_season_id,
                        record.player_id,
                        record.year,
                        record.embedding_type,
                        record.summary_text,
                        encode_vector(record.embedding),
                        json.dumps(record.metadata, sort_keys=True),
                    ),
                )
        logger.debug("Upserted %d embedding records", len(records))
        return len(records)

    def get(self, player_season_id: str, embedding_type: str) -> EmbeddingRecord | None:
        row = self._conn.execute(
            "SELECT * FROM player_embedding WHERE player_season_id = ? AND embedding_type = ?",
            (player_season_id, embedding_type),
        ).fetchone()
        return self._row_to_record(row) if row else None

    def count(self, embedding_type: str | None = None) -> int:
        if embedding_type is not None:
            row = self._conn.execute(
                "SELECT COUNT(*) FROM player_embedding WHERE embedding_type = ?", (embedding_type,)
            ).fetchone()
        else:
            row = self._conn.execute("SELECT COUNT(*) FROM player_embedding").fetchone()
        return row[0]

    def dimensions(self, embedding_type: str) -> set[int]:
        """Distinct vector lengths stored for ``embedding_type``."""
        rows = self._conn.execute(
            "SELECT DISTINCT length(embedding) FROM player_embedding WHERE embedding_type = ?",
            (embedding_type,),
        ).fetchall()
        return {row[0] // np.dtype(VECTOR_DTYPE).itemsize for row in rows}

    def query_similar(
        self, vector: Sequence[float], predicates: Sequence[Predicate], limit: int
    ) -> list[SearchResult]:
        compiled = compile_similarity_query(encode_vector(vector), predicates, limit)
        logger.debug("Similarity query: %s", compiled.sql)
        rows = self._conn.execute(compiled.sql, compiled.params).fetchall()
        return [self._row_to_result(row) for row in rows]

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> EmbeddingRecord:
        return EmbeddingRecord(
            player_season_id=row["player_season_id"],
            player_id=row["player_id"],
            year=row["year"],
            embedding_type=row["embedding_type"],
            summary_text=row["summary_text"],
            embedding=decode_vector(row["embedding"]),
            metadata=json.loads(row["metadata"]),
            created_at=row["created_at"],
        )

    @staticmethod
    def _row_to_result(row: sqlite3.Row) -> SearchResult:
        return SearchResult(
            summary_text=row["summary_text"],
            player_season_id=row["player_season_id"],
            player_name=row["player_name"],
            year=row["year"],
            team=row["team"],
            position=row["position"],
            war=row["war"],
            wrc_plus=row["wrc_plus"],
            overall_grade=row["overall_grade"],
            power_grade=row["power_grade"],
            hit_grade=row["hit_grade"],
            fielding_grade=row["fielding_grade"],
            speed_grade=row["speed_grade"],
            similarity=row["similarity"],
        )
