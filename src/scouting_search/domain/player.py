from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    name: str
    id: int | None = None
    fangraphs_id: int | None = None
    bats: str | None = None
