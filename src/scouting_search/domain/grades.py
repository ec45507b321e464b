from dataclasses import dataclass

from scouting_search.grading.positions import is_premium_defensive_position


@dataclass(frozen=True)
class PlayerGrades:
    """Scouting grades for a single season on the 20-80 scale.

    ``speed`` is None for a season with no plate appearances and ``fielding``
    is None for a player who never took the field.
    """

    overall: int
    offense: int
    power: int
    hit: int
    discipline: int
    contact: int
    position: str
    speed: int | None = None
    fielding: float | None = None
    hard_contact: int | None = None
    exit_velo: int | None = None

    @property
    def is_premium_defensive_position(self) -> bool:
        return is_premium_defensive_position(self.position)
