"""Map raw season rows (FanGraphs-style column names) onto domain objects."""

from typing import Any

from scouting_search.domain.player import Player
from scouting_search.domain.season_stats import SeasonStats
from scouting_search.exceptions import SeasonValidationError

REQUIRED_FIELDS: tuple[str, ...] = (
    "player_season_id",
    "fangraphs_id",
    "player_name",
    "year",
    "age",
    "team",
    "position",
    "pa",
    "war",
)


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() in ("", "NA", "NULL"))


def _opt_float(row: dict[str, Any], key: str) -> float | None:
    value = row.get(key)
    return None if _blank(value) else float(value)


def _int(row: dict[str, Any], key: str, default: int = 0) -> int:
    value = row.get(key)
    return default if _blank(value) else int(float(value))


def _float(row: dict[str, Any], key: str, default: float = 0.0) -> float:
    value = _opt_float(row, key)
    return default if value is None else value


def validate_row(row: dict[str, Any]) -> None:
    for name in REQUIRED_FIELDS:
        if _blank(row.get(name)):
            raise SeasonValidationError(name, row)


def row_to_player(row: dict[str, Any]) -> Player:
    validate_row(row)
    return Player(
        name=str(row["player_name"]).strip(),
        fangraphs_id=_int(row, "fangraphs_id"),
        bats=None if _blank(row.get("bats")) else str(row["bats"]).strip(),
    )


def row_to_season(row: dict[str, Any], player_id: int) -> SeasonStats:
    validate_row(row)
    obp = _float(row, "obp")
    slg = _float(row, "slg")
    ops = _opt_float(row, "ops")
    return SeasonStats(
        player_season_id=str(row["player_season_id"]).strip(),
        player_id=player_id,
        player_name=str(row["player_name"]).strip(),
        year=_int(row, "year"),
        age=_int(row, "age"),
        team=str(row["team"]).strip(),
        position=str(row["position"]).strip(),
        g=_int(row, "g"),
        pa=_int(row, "pa"),
        hr=_int(row, "hr"),
        sb=_int(row, "sb"),
        avg=_float(row, "avg"),
        obp=obp,
        slg=slg,
        ops=ops if ops is not None else obp + slg,
        war=_float(row, "war"),
        wrc_plus=_opt_float(row, "wrc_plus"),
        fielding=_opt_float(row, "fielding"),
        ev90=_opt_float(row, "ev90"),
        avg_plus=_opt_float(row, "avg_plus"),
        bb_pct_plus=_opt_float(row, "bb_pct_plus"),
        k_pct_plus=_opt_float(row, "k_pct_plus"),
        iso_plus=_opt_float(row, "iso_plus"),
        hard_pct_plus=_opt_float(row, "hard_pct_plus"),
    )
