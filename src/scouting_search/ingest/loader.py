import logging
import sqlite3
import time

from scouting_search.domain.errors import IngestError
from scouting_search.domain.pipeline import ImportSummary
from scouting_search.domain.result import Err, Ok, Result
from scouting_search.exceptions import SeasonValidationError
from scouting_search.grading.engine import grade_season
from scouting_search.ingest.protocols import DataSource
from scouting_search.ingest.season_mapper import row_to_player, row_to_season
from scouting_search.repos.protocols import PlayerRepo, SeasonStatsRepo

logger = logging.getLogger(__name__)

TARGET_TABLE = "season_stats"


class SeasonLoader:
    """Load season rows from a source, grading each one on the way in.

    The whole load is one transaction: a bad row rolls back everything read
    from the source.
    """

    def __init__(
        self,
        source: DataSource,
        player_repo: PlayerRepo,
        season_repo: SeasonStatsRepo,
        *,
        conn: sqlite3.Connection,
    ) -> None:
        self._source = source
        self._player_repo = player_repo
        self._season_repo = season_repo
        self._conn = conn

    def _error(self, message: str, row_number: int | None = None) -> Err[IngestError]:
        return Err(
            IngestError(
                message=message,
                source_type=self._source.source_type,
                source_detail=self._source.source_detail,
                target_table=TARGET_TABLE,
                row_number=row_number,
            )
        )

    def load(self) -> Result[ImportSummary, IngestError]:
        t0 = time.perf_counter()
        logger.info("Loading %s from %s", TARGET_TABLE, self._source.source_detail)

        try:
            rows = self._source.fetch()
        except (OSError, ValueError) as exc:
            logger.error("Fetch failed for %s: %s", TARGET_TABLE, exc)
            return self._error(str(exc))

        player_ids: set[int] = set()
        row_number = 0
        try:
            with self._conn:
                for row_number, row in enumerate(rows, start=1):
                    player_id = self._player_repo.upsert(row_to_player(row))
                    season = row_to_season(row, player_id)
                    self._season_repo.upsert(season, grade_season(season))
                    player_ids.add(player_id)
        except (SeasonValidationError, ValueError) as exc:
            logger.error("Row %d of %s rejected: %s", row_number, self._source.source_detail, exc)
            return self._error(str(exc), row_number)

        logger.info("Loaded %d seasons in %.2fs", len(rows), time.perf_counter() - t0)
        return Ok(
            ImportSummary(
                source_detail=self._source.source_detail,
                rows_read=len(rows),
                seasons_loaded=len(rows),
                players_loaded=len(player_ids),
            )
        )
