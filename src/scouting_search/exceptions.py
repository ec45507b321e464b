class ScoutingSearchException(Exception):
    """Base class for errors raised by scouting_search."""


class SeasonValidationError(ScoutingSearchException):
    """Raised when a season row is missing a required identity field."""

    def __init__(self, field: str, row: dict[str, object] | None = None) -> None:
        self.field = field
        self.row = row
        super().__init__(f"Season row is missing required field '{field}'")


class NoStatsFoundError(ScoutingSearchException):
    def __init__(self, player_name: str | None = None) -> None:
        self.player_name = player_name
        if player_name is None:
            super().__init__("No stats found for player")
        else:
            super().__init__(f"No stats found for player '{player_name}'")


class EmbeddingError(ScoutingSearchException):
    """Raised when the embedding backend fails or returns an unusable response."""


class ConfigurationError(ScoutingSearchException):
    """Raised when configuration values are missing or malformed."""
