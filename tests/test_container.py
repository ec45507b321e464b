import sqlite3

from scouting_search.config import Settings
from scouting_search.container import SearchContainer
from scouting_search.repos.season_stats_repo import SqliteSeasonStatsRepo
from scouting_search.services.embedding_pipeline import EmbeddingPipeline
from tests.fakes.embedders import FakeEmbedder


def _settings() -> Settings:
    return Settings(
        database_path=":memory:",  # type: ignore[arg-type]
        embedding_base_url="http://ollama.test",
        embedding_model="test-model",
        embedding_timeout=1.0,
        embedding_type="custom_type",
        batch_size=10,
        min_plate_appearances=100,
        search_limit=10,
    )


class TestSearchContainer:
    def test_repos_are_cached(self, conn: sqlite3.Connection) -> None:
        container = SearchContainer(conn, FakeEmbedder(), _settings())
        assert isinstance(container.season_stats_repo, SqliteSeasonStatsRepo)
        assert container.season_stats_repo is container.season_stats_repo
        assert container.conn is conn

    def test_pipeline_uses_settings(self, conn: sqlite3.Connection) -> None:
        container = SearchContainer(conn, FakeEmbedder(), _settings())
        assert isinstance(container.pipeline, EmbeddingPipeline)
        report = container.pipeline.run()
        assert report.embedding_type == "custom_type"
