"""Narrative fragments keyed by grade bands."""

from scouting_search.grading.engine import describe_grade
from scouting_search.grading.positions import describe_position

_WAR_BANDS: tuple[tuple[int, str], ...] = (
    (80, "All-time great season"),
    (70, "MVP worthy season"),
    (60, "All star caliber season"),
    (55, "An above average campaign"),
    (50, "Average contribution"),
    (45, "A replacement level season"),
    (40, "A negative season"),
    (30, "A very bad season"),
)
_WAR_FLOOR = "Disaster of a season"

_FIELDING_BANDS: tuple[tuple[int, str], ...] = (
    (80, "All-time great defender"),
    (70, "Gold Glove caliber"),
    (60, "One of the better defenders"),
    (55, "Slightly above average defender"),
    (50, "Solid defender"),
    (45, "Fringy defender"),
    (40, "Below average defender"),
    (30, "Defensive liability"),
)
_FIELDING_FLOOR = "Extremely poor, borderline unplayable defender"


def format_rate(value: float) -> str:
    """Format a rate stat the way a box score does: ``.312``, ``1.045``."""
    text = f"{value:.3f}"
    if text.startswith("0."):
        return text[1:]
    if text.startswith("-0."):
        return "-" + text[2:]
    return text


def format_number(value: float) -> str:
    """Drop a trailing ``.0`` from whole numbers, keep one decimal otherwise."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def format_war(war: float) -> str:
    return f"{war:.1f}"


def format_literal(value: float) -> str:
    """Shortest text that reads back as ``value``, without a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _band(grade: float, bands: tuple[tuple[int, str], ...], floor: str) -> str:
    for minimum, text in bands:
        if grade >= minimum:
            return text
    return floor


def war_description(war: float, war_grade: int) -> str:
    return f"{_band(war_grade, _WAR_BANDS, _WAR_FLOOR)} with {format_literal(war)} WAR."


def wrc_plus_description(ops: float, wrc_plus: float, wrc_plus_grade: int) -> str:
    lead = f"Posted {describe_grade(wrc_plus_grade)} offensive production with a {format_rate(ops)} OPS"
    if wrc_plus > 100:
        return f"{lead} ({format_number(wrc_plus)} wRC+ or {format_number(wrc_plus - 100)}% better than league average)."
    if wrc_plus == 100:
        return f"{lead} ({format_number(wrc_plus)} wRC+ or exactly league average)."
    return f"{lead} ({format_number(wrc_plus)} wRC+ or {format_number(100 - wrc_plus)}% worse than league average)."


def fielding_description(grade: float | None, position: str, fielding_runs: float) -> str:
    if grade is None:
        return "Did not field (DH)."
    lead = _band(grade, _FIELDING_BANDS, _FIELDING_FLOOR)
    return f"{lead} {describe_position(position)} ({fielding_runs:+.1f} fielding runs)."


def should_mention_fielding(grade: float | None, is_premium_position: bool) -> bool:
    if grade is None:
        return False
    return grade >= 60 or grade <= 40 or (is_premium_position and grade >= 45)
