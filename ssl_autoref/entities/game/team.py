from enum import Enum


class TeamSide(Enum):
    """Which of the two tracked teams a robot belongs to, relative to our own colour."""

    FRIENDLY = "friendly"
    ENEMY = "enemy"


class Team(Enum):
    """
    Wire-level team identifier understood by the game controller.
    """

    UNKNOWN = 0
    YELLOW = 1
    BLUE = 2
