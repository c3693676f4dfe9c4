from typing import Tuple, TypeVar

from ssl_autoref.entities.game.team import Team, TeamSide

T = TypeVar("T")  # generic type variable


def map_friendly_enemy_to_colors(my_team_is_yellow: bool, friendly_item: T, enemy_item: T) -> Tuple[T, T]:
    """
    Map friendly and enemy items to their respective colors based on my team color.

    Args:
        my_team_is_yellow (bool): True if the team is yellow, False if blue.
        friendly_item (T): Any item from the friendly team (int, list, etc.)
        enemy_item (T): Any item from the enemy team (int, list, etc.)

    Returns:
        Tuple[T, T]: A tuple of (yellow_item, blue_item).
    """
    if my_team_is_yellow:
        return friendly_item, enemy_item
    return enemy_item, friendly_item


def side_to_team(side: TeamSide, my_team_is_yellow: bool) -> Team:
    """
    Map a friendly/enemy side to the wire-level team colour.

    Args:
        side (TeamSide): FRIENDLY or ENEMY.
        my_team_is_yellow (bool): True if the friendly team plays yellow.

    Returns:
        Team: Team.YELLOW or Team.BLUE.
    """
    yellow_side, _ = map_friendly_enemy_to_colors(my_team_is_yellow, TeamSide.FRIENDLY, TeamSide.ENEMY)
    return Team.YELLOW if side is yellow_side else Team.BLUE
