from dataclasses import dataclass, field
from typing import Any

SEASON_SUMMARY = "season_summary"


@dataclass(frozen=True)
class EmbeddingRecord:
    player_season_id: str
    player_id: int
    year: int
    summary_text: str
    embedding: tuple[float, ...]
    embedding_type: str = SEASON_SUMMARY
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: str | None = None
