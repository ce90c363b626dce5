"""Journey direction detection from location codes."""

from typing import Optional

from .models import Direction

# Location code prefixes
ANCHORAGE_PREFIX = "A"
BOARDING_GROUND_PREFIX = "P"


def classify(from_code: Optional[str], to_code: Optional[str]) -> Direction:
    """
    Derive the journey direction from the first letter of each location code.

    Args:
        from_code: Where the vessel is coming from (e.g. "PEBGB").
        to_code: Where the vessel is going (e.g. "AWPA").

    Returns:
        Direction; UNKNOWN when the pair matches no known journey.
    """
    origin = (from_code or "")[:1]
    destination = (to_code or "")[:1]

    if origin == ANCHORAGE_PREFIX and destination == ANCHORAGE_PREFIX:
        return Direction.MOVING_BETWEEN_ANCHORAGES
    if origin == BOARDING_GROUND_PREFIX and destination == ANCHORAGE_PREFIX:
        return Direction.ARRIVING_AT_PORT
    if origin == ANCHORAGE_PREFIX and destination == BOARDING_GROUND_PREFIX:
        return Direction.DEPARTING_PORT
    return Direction.UNKNOWN
