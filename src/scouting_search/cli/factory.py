from collections.abc import Iterator
from contextlib import contextmanager

from scouting_search.config import Settings
from scouting_search.container import SearchContainer
from scouting_search.db.connection import create_connection
from scouting_search.embedding.ollama import OllamaEmbedder
from scouting_search.embedding.protocols import Embedder


def create_embedder(settings: Settings) -> Embedder:
    return OllamaEmbedder(
        settings.embedding_base_url,
        settings.embedding_model,
        timeout=settings.embedding_timeout,
    )


@contextmanager
def build_search_context(settings: Settings) -> Iterator[SearchContainer]:
    """Composition-root context manager: opens DB and embedder, yields the container, closes both."""
    conn = create_connection(settings.database_path)
    embedder = create_embedder(settings)
    try:
        yield SearchContainer(conn, embedder, settings)
    finally:
        close = getattr(embedder, "close", None)
        if close is not None:
            close()
        conn.close()
