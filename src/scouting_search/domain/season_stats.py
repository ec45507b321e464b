from dataclasses import dataclass


@dataclass(frozen=True)
class SeasonStats:
    player_season_id: str
    player_id: int
    player_name: str
    year: int
    age: int
    team: str
    position: str
    g: int
    pa: int
    hr: int
    sb: int
    avg: float
    obp: float
    slg: float
    ops: float
    war: float
    wrc_plus: float | None = None
    fielding: float | None = None
    ev90: float | None = None
    avg_plus: float | None = None
    bb_pct_plus: float | None = None
    k_pct_plus: float | None = None
    iso_plus: float | None = None
    hard_pct_plus: float | None = None
