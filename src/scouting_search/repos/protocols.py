from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from scouting_search.domain.embedding_record import EmbeddingRecord
from scouting_search.domain.grades import PlayerGrades
from scouting_search.domain.player import Player
from scouting_search.domain.search import SearchResult
from scouting_search.domain.season_stats import SeasonStats
from scouting_search.search.predicates import Predicate


@runtime_checkable
class PlayerRepo(Protocol):
    def upsert(self, player: Player) -> int: ...

    def get_by_id(self, player_id: int) -> Player | None: ...

    def get_by_fangraphs_id(self, fangraphs_id: int) -> Player | None: ...

    def search_by_name(self, name: str) -> list[Player]: ...


@runtime_checkable
class SeasonStatsRepo(Protocol):
    def upsert(self, season: SeasonStats, grades: PlayerGrades) -> None: ...

    def get(self, player_season_id: str) -> SeasonStats | None: ...

    def get_grades(self, player_season_id: str) -> PlayerGrades | None: ...

    def fetch_seasons(self, min_plate_appearances: int, limit: int | None = None) -> list[SeasonStats]: ...

    def search_by_player_name(self, name: str, year: int | None = None) -> list[SeasonStats]: ...


@runtime_checkable
class EmbeddingRepo(Protocol):
    def upsert_many(self, records: Sequence[EmbeddingRecord]) -> int: ...

    def get(self, player_season_id: str, embedding_type: str) -> EmbeddingRecord | None: ...

    def count(self, embedding_type: str | None = None) -> int: ...

    def dimensions(self, embedding_type: str) -> set[int]: ...

    def query_similar(
        self, vector: Sequence[float], predicates: Sequence[Predicate], limit: int
    ) -> list[SearchResult]: ...
