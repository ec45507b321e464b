import functools
import sqlite3

from scouting_search.config import Settings, load_settings
from scouting_search.embedding.protocols import Embedder
from scouting_search.repos.embedding_repo import SqliteEmbeddingRepo
from scouting_search.repos.player_repo import SqlitePlayerRepo
from scouting_search.repos.season_stats_repo import SqliteSeasonStatsRepo
from scouting_search.services.embedding_pipeline import EmbeddingPipeline
from scouting_search.services.hybrid_search import HybridSearchEngine
from scouting_search.services.player_stats import PlayerStatsService


class SearchContainer:
    """DI container for the repos and services shared by the CLI and the tools."""

    def __init__(self, conn: sqlite3.Connection, embedder: Embedder, settings: Settings | None = None) -> None:
        self._conn = conn
        self._embedder = embedder
        self._settings = settings

    @property
    def conn(self) -> sqlite3.Connection:
        return self._conn

    @property
    def embedder(self) -> Embedder:
        return self._embedder

    @functools.cached_property
    def settings(self) -> Settings:
        return self._settings if self._settings is not None else load_settings()

    # --- Repos ---

    @functools.cached_property
    def player_repo(self) -> SqlitePlayerRepo:
        return SqlitePlayerRepo(self._conn)

    @functools.cached_property
    def season_stats_repo(self) -> SqliteSeasonStatsRepo:
        return SqliteSeasonStatsRepo(self._conn)

    @functools.cached_property
    def embedding_repo(self) -> SqliteEmbeddingRepo:
        return SqliteEmbeddingRepo(self._conn)

    # --- Services ---

    @functools.cached_property
    def pipeline(self) -> EmbeddingPipeline:
        return EmbeddingPipeline(
            self.season_stats_repo,
            self.embedding_repo,
            self._embedder,
            min_plate_appearances=self.settings.min_plate_appearances,
            embedding_type=self.settings.embedding_type,
        )

    @functools.cached_property
    def search_engine(self) -> HybridSearchEngine:
        return HybridSearchEngine(
            self.embedding_repo,
            self._embedder,
            embedding_type=self.settings.embedding_type,
        )

    @functools.cached_property
    def player_stats_service(self) -> PlayerStatsService:
        return PlayerStatsService(self.season_stats_repo)
