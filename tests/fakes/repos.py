from collections.abc import Sequence

from scouting_search.domain.embedding_record import EmbeddingRecord
from scouting_search.domain.grades import PlayerGrades
from scouting_search.domain.search import SearchResult
from scouting_search.domain.season_stats import SeasonStats
from scouting_search.search.predicates import Predicate


class FakeSeasonStatsRepo:
    def __init__(self, seasons: list[SeasonStats] | None = None) -> None:
        self._seasons = list(seasons or [])

    def upsert(self, season: SeasonStats, grades: PlayerGrades) -> None:
        self._seasons = [s for s in self._seasons if s.player_season_id != season.player_season_id]
        self._seasons.append(season)

    def get(self, player_season_id: str) -> SeasonStats | None:
        return next((s for s in self._seasons if s.player_season_id == player_season_id), None)

    def get_grades(self, player_season_id: str) -> PlayerGrades | None:
        return None

    def fetch_seasons(self, min_plate_appearances: int, limit: int | None = None) -> list[SeasonStats]:
        rows = sorted(
            (s for s in self._seasons if s.pa >= min_plate_appearances),
            key=lambda s: (-s.war, s.player_season_id),
        )
        return rows if limit is None else rows[:limit]

    def search_by_player_name(self, name: str, year: int | None = None) -> list[SeasonStats]:
        rows = [
            s
            for s in self._seasons
            if name.casefold() in s.player_name.casefold() and (year is None or s.year == year)
        ]
        return sorted(rows, key=lambda s: (-s.year, s.player_name))


class FakeEmbeddingRepo:
    def __init__(self, results: list[SearchResult] | None = None) -> None:
        self._results = list(results or [])
        self.records: dict[tuple[str, str], EmbeddingRecord] = {}
        self.queries: list[tuple[list[float], tuple[Predicate, ...], int]] = []

    def upsert_many(self, records: Sequence[EmbeddingRecord]) -> int:
        for record in records:
            self.records[(record.player_season_id, record.embedding_type)] = record
        return len(records)

    def get(self, player_season_id: str, embedding_type: str) -> EmbeddingRecord | None:
        return self.records.get((player_season_id, embedding_type))

    def count(self, embedding_type: str | None = None) -> int:
        return sum(1 for _, t in self.records if embedding_type is None or t == embedding_type)

    def dimensions(self, embedding_type: str) -> set[int]:
        return {len(r.embedding) for (_, t), r in self.records.items() if t == embedding_type}

    def query_similar(
        self, vector: Sequence[float], predicates: Sequence[Predicate], limit: int
    ) -> list[SearchResult]:
        self.queries.append((list(vector), tuple(predicates), limit))
        return self._results[:limit]
