from dataclasses import dataclass


@dataclass(frozen=True)
class ScoutingError:
    message: str


@dataclass(frozen=True)
class IngestError(ScoutingError):
    source_type: str
    source_detail: str
    target_table: str
    row_number: int | None = None
