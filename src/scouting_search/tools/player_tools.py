from langchain_core.tools import BaseTool, tool

from scouting_search.container import SearchContainer
from scouting_search.exceptions import NoStatsFoundError
from scouting_search.tools._formatting import (
    format_career,
    format_comparison,
    format_no_results,
    format_season_table,
)


def create_get_player_stats_tool(container: SearchContainer) -> BaseTool:
    """Create a tool that looks up season stat lines by player name."""

    @tool
    def get_player_stats(player_name: str, year: int | None = None) -> str:
        """Look up a player's season stats by (partial) name, optionally for one year."""
        seasons = container.player_stats_service.get_player_stats(player_name, year)
        if not seasons:
            return format_no_results("seasons", player_name=player_name, year=year)
        return format_season_table(seasons)

    return get_player_stats


def create_get_career_summary_tool(container: SearchContainer) -> BaseTool:
    """Create a tool that summarizes a player's career totals and peak."""

    @tool
    def get_career_summary(player_name: str) -> str:
        """Career totals, peak season, best-seven-seasons WAR and JAWS for a player."""
        try:
            summary = container.player_stats_service.career_summary(player_name)
        except NoStatsFoundError as exc:
            return str(exc)
        return f"{format_career(summary.career)}\n\n{format_season_table(list(summary.seasons))}"

    return get_career_summary


def create_compare_players_tool(container: SearchContainer) -> BaseTool:
    """Create a tool that compares two careers side by side."""

    @tool
    def compare_players(player1: str, player2: str) -> str:
        """Compare two players' careers. Diffs are player1 minus player2."""
        try:
            comparison = container.player_stats_service.compare(player1, player2)
        except NoStatsFoundError as exc:
            return str(exc)
        return format_comparison(comparison)

    return compare_players
