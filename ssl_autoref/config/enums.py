from enum import Enum


class Division(Enum):
    """
    Competition tier. Division A plays with the stricter timings.
    """

    A = "A"
    B = "B"


def division_from_str(division: str) -> Division:
    """Unrecognised values fall back to Division B (the more lenient timings)."""
    try:
        return Division(str(division).strip().upper())
    except ValueError:
        return Division.B
