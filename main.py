import logging

from ssl_autoref.autoref import AutoRef
from ssl_autoref.entities.data.vector import Vector2D
from ssl_autoref.entities.game.ball import Ball
from ssl_autoref.entities.game.robot import Robot
from ssl_autoref.entities.game.team import TeamSide
from ssl_autoref.entities.game.world_snapshot import WorldSnapshot
from ssl_autoref.entities.referee.referee_command import RefereeCommand
from ssl_autoref.run import AutoRefRunner, SequenceSnapshotProvider

# (ts, command, ball, friendly robot, enemy robot)
SCENARIO = [
    (0.0, RefereeCommand.NORMAL_START, (2.8, 1.0), (2.75, 1.05), (-1.0, 0.0)),
    (0.1, RefereeCommand.NORMAL_START, (3.2, 1.0), (2.7, 1.0), (-1.0, 0.0)),
    (1.0, RefereeCommand.DIRECT_FREE_BLUE, (3.0, 1.0), (2.7, 1.2), (2.9, 1.0)),
    (1.1, RefereeCommand.DIRECT_FREE_BLUE, (2.5, 1.0), (2.7, 1.2), (2.45, 1.0)),
    (2.0, RefereeCommand.NORMAL_START, (0.1, 4.4), (0.0, 4.3), (-1.0, 0.0)),
    (2.2, RefereeCommand.NORMAL_START, (0.1, 4.8), (0.0, 4.3), (-1.0, 0.0)),
]


def build_snapshots(profile_geometry):
    for ts, command, ball, friendly, enemy in SCENARIO:
        yield WorldSnapshot(
            ts=ts,
            my_team_is_yellow=True,
            ball=Ball(p=Vector2D(ball)),
            geometry=profile_geometry,
            referee_command=command,
            friendly_robots={0: Robot(id=0, side=TeamSide.FRIENDLY, p=Vector2D(friendly))},
            enemy_robots={0: Robot(id=0, side=TeamSide.ENEMY, p=Vector2D(enemy))},
        )


def main():
    autoref = AutoRef.from_profile_name("div_b")
    runner = AutoRefRunner(
        provider=SequenceSnapshotProvider(build_snapshots(autoref.profile.geometry)),
        autoref=autoref,
    )
    try:
        runner.run()
    finally:
        autoref.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        main()
    except KeyboardInterrupt:
        pass
