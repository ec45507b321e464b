PREMIUM_DEFENSIVE_POSITIONS: tuple[str, ...] = ("C", "SS", "CF", "2B")

_POSITION_DESCRIPTIONS: dict[str, str] = {
    "C": "at catcher",
    "SS": "at shortstop",
    "CF": "in center field",
    "2B": "at second base",
    "3B": "at third base",
    "RF": "in right field",
    "LF": "in left field",
    "1B": "at first base",
    "DH": "as a designated hitter",
    "SS/2B": "as a middle infielder",
    "2B/SS": "as a middle infielder",
    "SS/2B/CF": "as an up the middle defender",
    "CF/SS/2B": "as an up the middle defender",
    "1B/3B": "as a corner infielder",
    "3B/1B": "as a corner infielder",
    "1B/2B/3B/SS": "as a utility infielder",
    "2B/3B/SS/1B": "as a utility infielder",
    "1B/3B/OF": "as a corner guy",
    "3B/1B/OF": "as a corner guy",
    "1B/OF": "as a corner guy",
    "OF/1B": "as a corner guy",
    "2B/3B/OF": "as a utility player",
    "3B/2B/OF": "as a utility player",
    "OF": "as an outfielder",
    "IF": "as an infielder",
}


def position_tokens(position: str) -> list[str]:
    return [token.strip().upper() for token in position.split("/") if token.strip()]


def describe_position(position: str) -> str:
    """Return a prepositional phrase for a position code, e.g. ``"at shortstop"``."""
    return _POSITION_DESCRIPTIONS.get(position, f"at {position}")


def is_premium_defensive_position(position: str) -> bool:
    return any(premium in position for premium in PREMIUM_DEFENSIVE_POSITIONS)


def is_catcher(position: str) -> bool:
    return "C" in position_tokens(position)
