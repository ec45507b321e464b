from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineReport:
    seasons_fetched: int
    batches: int
    records_saved: int
    embedding_type: str


@dataclass(frozen=True)
class ImportSummary:
    source_detail: str
    rows_read: int
    seasons_loaded: int
    players_loaded: int
