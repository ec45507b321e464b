from langchain_core.tools import BaseTool, tool

from scouting_search.container import SearchContainer
from scouting_search.domain.search import SearchFilters
from scouting_search.tools._formatting import format_no_results, format_search_results


def create_search_similar_players_tool(container: SearchContainer) -> BaseTool:
    """Create a tool that runs a hybrid semantic search over season summaries."""

    @tool
    def search_similar_players(
        query: str,
        position: str | None = None,
        min_war: float | None = None,
        max_war: float | None = None,
        min_overall_grade: float | None = None,
        max_overall_grade: float | None = None,
        min_hit_grade: float | None = None,
        max_hit_grade: float | None = None,
        min_power_grade: float | None = None,
        max_power_grade: float | None = None,
        min_fielding_grade: float | None = None,
        max_fielding_grade: float | None = None,
        min_speed_grade: float | None = None,
        max_speed_grade: float | None = None,
        year_start: int | None = None,
        year_end: int | None = None,
        limit: int = 10,
    ) -> str:
        """Find player seasons that match a scouting-style description.

        Grades use the 20-80 scouting scale. Position is matched as a substring
        (e.g. "SS" also matches "SS/2B"). Both year_start and year_end are needed
        to restrict the season range.
        """
        year_range = (year_start, year_end) if year_start is not None and year_end is not None else None
        filters = SearchFilters(
            position=position,
            min_war=min_war,
            max_war=max_war,
            min_overall_grade=min_overall_grade,
            max_overall_grade=max_overall_grade,
            min_hit_grade=min_hit_grade,
            max_hit_grade=max_hit_grade,
            min_power_grade=min_power_grade,
            max_power_grade=max_power_grade,
            min_fielding_grade=min_fielding_grade,
            max_fielding_grade=max_fielding_grade,
            min_speed_grade=min_speed_grade,
            max_speed_grade=max_speed_grade,
            year_range=year_range,
        )
        results = container.search_engine.search(query, filters, limit)
        if not results:
            return format_no_results("player seasons", query=query, **vars(filters))
        return format_search_results(results)

    return search_similar_players
