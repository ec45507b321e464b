import logging

from scouting_search.domain.embedding_record import SEASON_SUMMARY
from scouting_search.domain.search import SearchFilters, SearchResult
from scouting_search.embedding.protocols import Embedder
from scouting_search.exceptions import EmbeddingError
from scouting_search.repos.protocols import EmbeddingRepo
from scouting_search.search.predicates import build_predicates

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


class HybridSearchEngine:
    """Vector similarity search constrained by exact filters."""

    def __init__(
        self,
        embedding_repo: EmbeddingRepo,
        embedder: Embedder,
        *,
        embedding_type: str = SEASON_SUMMARY,
    ) -> None:
        self._embedding_repo = embedding_repo
        self._embedder = embedder
        self._embedding_type = embedding_type

    def search(
        self,
        query: str,
        filters: SearchFilters | None = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[SearchResult]:
        logger.debug("Hybrid search query=%r filters=%s limit=%d", query, filters, limit)
        vector = self._embedder.embed(query)
        stored = self._embedding_repo.dimensions(self._embedding_type)
        if stored and len(vector) not in stored:
            raise EmbeddingError(
                f"Query embedding has {len(vector)} dimensions but stored {self._embedding_type} "
                f"embeddings have {sorted(stored)}; regenerate embeddings with the current model"
            )
        predicates = build_predicates(filters, self._embedding_type)
        results = self._embedding_repo.query_similar(vector, predicates, limit)
        logger.debug("Hybrid search returned %d results", len(results))
        return results
