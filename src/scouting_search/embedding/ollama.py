import logging
from collections.abc import Sequence
from typing import Any

import httpx

from scouting_search.embedding._retry import http_retry
from scouting_search.exceptions import EmbeddingError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:11434"
DEFAULT_MODEL = "nomic-embed-text"


class OllamaEmbedder:
    """Embedding client for an Ollama server's ``/api/embed`` endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        *,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._model = model
        self._client = client or httpx.Client(base_url=base_url, timeout=httpx.Timeout(timeout, connect=5.0))

    @property
    def model(self) -> str:
        return self._model

    @http_retry("Ollama embed request")
    def _post(self, payload: dict[str, Any]) -> httpx.Response:
        response = self._client.post("/api/embed", json=payload)
        response.raise_for_status()
        return response

    def embed(self, text: str) -> list[float]:
        return self.embed_batch([text])[0]

    def embed_batch(self, texts: Sequence[str]) -> list[list[float]]:
        if not texts:
            return []
        logger.debug("Embedding %d texts with %s", len(texts), self._model)
        try:
            response = self._post({"model": self._model, "input": list(texts)})
        except httpx.HTTPError as exc:
            raise EmbeddingError(f"Ollama embedding request failed: {exc}") from exc

        embeddings = response.json().get("embeddings")
        if not isinstance(embeddings, list) or len(embeddings) != len(texts):
            raise EmbeddingError(
                f"Ollama returned {len(embeddings) if isinstance(embeddings, list) else 'no'} embeddings "
                f"for {len(texts)} inputs"
            )
        return [[float(x) for x in vector] for vector in embeddings]

    def close(self) -> None:
        self._client.close()
