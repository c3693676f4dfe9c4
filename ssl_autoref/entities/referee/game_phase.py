"""Collapse raw referee commands into the phases the AutoRef cares about."""

from enum import Enum, auto

from ssl_autoref.entities.game.team import TeamSide
from ssl_autoref.entities.referee.referee_command import RefereeCommand

_ACTIVE_PLAY_COMMANDS = {
    RefereeCommand.NORMAL_START,
    RefereeCommand.FORCE_START,
}

_YELLOW_FREE_KICK_COMMANDS = {
    RefereeCommand.DIRECT_FREE_YELLOW,
    RefereeCommand.INDIRECT_FREE_YELLOW,
}

_BLUE_FREE_KICK_COMMANDS = {
    RefereeCommand.DIRECT_FREE_BLUE,
    RefereeCommand.INDIRECT_FREE_BLUE,
}


class GamePhase(Enum):
    ACTIVE_PLAY = auto()
    OWN_FREE_KICK = auto()
    OPPONENT_FREE_KICK = auto()
    OTHER = auto()

    @property
    def is_free_kick(self) -> bool:
        return self in (GamePhase.OWN_FREE_KICK, GamePhase.OPPONENT_FREE_KICK)

    @property
    def free_kick_side(self):
        """The side awarded the free kick, or None outside a free kick."""
        if self is GamePhase.OWN_FREE_KICK:
            return TeamSide.FRIENDLY
        if self is GamePhase.OPPONENT_FREE_KICK:
            return TeamSide.ENEMY
        return None


def phase_from_command(command: RefereeCommand, my_team_is_yellow: bool) -> GamePhase:
    if command in _ACTIVE_PLAY_COMMANDS:
        return GamePhase.ACTIVE_PLAY
    if command in _YELLOW_FREE_KICK_COMMANDS:
        return GamePhase.OWN_FREE_KICK if my_team_is_yellow else GamePhase.OPPONENT_FREE_KICK
    if command in _BLUE_FREE_KICK_COMMANDS:
        return GamePhase.OPPONENT_FREE_KICK if my_team_is_yellow else GamePhase.OWN_FREE_KICK
    return GamePhase.OTHER
