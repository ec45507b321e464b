"""Batch summaries through the embedder and persist them as embedding records."""

import logging
from collections.abc import Iterator, Sequence

from scouting_search.domain.embedding_record import SEASON_SUMMARY, EmbeddingRecord
from scouting_search.domain.pipeline import PipelineReport
from scouting_search.domain.season_stats import SeasonStats
from scouting_search.embedding.protocols import Embedder
from scouting_search.exceptions import EmbeddingError
from scouting_search.grading.engine import grade_season
from scouting_search.repos.protocols import EmbeddingRepo, SeasonStatsRepo
from scouting_search.services.summary_generator import generate_season_summary

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 100
DEFAULT_MIN_PLATE_APPEARANCES = 50


def _batches(seasons: Sequence[SeasonStats], batch_size: int) -> Iterator[Sequence[SeasonStats]]:
    for start in range(0, len(seasons), batch_size):
        yield seasons[start : start + batch_size]


def build_record(season: SeasonStats, summary: str, vector: Sequence[float], embedding_type: str) -> EmbeddingRecord:
    grades = grade_season(season)
    return EmbeddingRecord(
        player_season_id=season.player_season_id,
        player_id=season.player_id,
        year=season.year,
        embedding_type=embedding_type,
        summary_text=summary,
        embedding=tuple(vector),
        metadata={
            "war": season.war,
            "wrc_plus": season.wrc_plus,
            "position": season.position,
            "age": season.age,
            "overall_grade": grades.overall,
            "power_grade": grades.power,
            "hit_grade": grades.hit,
        },
    )


class EmbeddingPipeline:
    def __init__(
        self,
        season_repo: SeasonStatsRepo,
        embedding_repo: EmbeddingRepo,
        embedder: Embedder,
        *,
        min_plate_appearances: int = DEFAULT_MIN_PLATE_APPEARANCES,
        embedding_type: str = SEASON_SUMMARY,
    ) -> None:
        self._season_repo = season_repo
        self._embedding_repo = embedding_repo
        self._embedder = embedder
        self._min_plate_appearances = min_plate_appearances
        self._embedding_type = embedding_type

    def summarize(self, seasons: Sequence[SeasonStats]) -> list[str]:
        return [generate_season_summary(season, grade_season(season)) for season in seasons]

    def sample(self, limit: int = 5) -> list[tuple[SeasonStats, str]]:
        """Render summaries for the top seasons without embedding them."""
        seasons = self._season_repo.fetch_seasons(self._min_plate_appearances, limit)
        return list(zip(seasons, self.summarize(seasons), strict=True))

    def process_batch(self, batch: Sequence[SeasonStats]) -> int:
        summaries = self.summarize(batch)
        vectors = self._embedder.embed_batch(summaries)
        if len(vectors) != len(summaries):
            raise EmbeddingError(f"Embedder returned {len(vectors)} vectors for {len(summaries)} summaries")
        records = [
            build_record(season, summary, vector, self._embedding_type)
            for season, summary, vector in zip(batch, summaries, vectors, strict=True)
        ]
        return self._embedding_repo.upsert_many(records)

    def run(self, batch_size: int = DEFAULT_BATCH_SIZE, limit: int | None = None) -> PipelineReport:
        """Index every eligible season, one committed batch at a time.

        A failure aborts the current batch and propagates; batches committed
        before it stay in place and a rerun upserts over them.
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")

        seasons = self._season_repo.fetch_seasons(self._min_plate_appearances, limit)
        total_batches = (len(seasons) + batch_size - 1) // batch_size
        logger.info("Fetched %d player-seasons (%d batches)", len(seasons), total_batches)

        saved = 0
        for number, batch in enumerate(_batches(seasons, batch_size), start=1):
            logger.info("Processing batch %d/%d", number, total_batches)
            saved += self.process_batch(batch)
            logger.info("Saved %d/%d embeddings", saved, len(seasons))

        return PipelineReport(
            seasons_fetched=len(seasons),
            batches=total_batches,
            records_saved=saved,
            embedding_type=self._embedding_type,
        )
