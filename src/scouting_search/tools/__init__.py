from langchain_core.tools import BaseTool

from scouting_search.container import SearchContainer
from scouting_search.tools.player_tools import (
    create_compare_players_tool,
    create_get_career_summary_tool,
    create_get_player_stats_tool,
)
from scouting_search.tools.search_tools import create_search_similar_players_tool


def create_tools(container: SearchContainer) -> list[BaseTool]:
    """Create all LangChain tools wired to the given container."""
    return [
        create_search_similar_players_tool(container),
        create_get_player_stats_tool(container),
        create_get_career_summary_tool(container),
        create_compare_players_tool(container),
    ]
