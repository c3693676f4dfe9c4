import abc
from typing import Iterable, Iterator, Optional

from ssl_autoref.entities.game.world_snapshot import WorldSnapshot


class AbstractSnapshotProvider(abc.ABC):
    """
    Source of world snapshots, refreshed synchronously once per tick.
    """

    @abc.abstractmethod
    def get_snapshot(self) -> Optional[WorldSnapshot]:
        """
        Returns the snapshot for the next tick, or None once the source is exhausted.
        """
        ...


class SequenceSnapshotProvider(AbstractSnapshotProvider):
    """
    Replays a fixed sequence of snapshots, e.g. a recorded match or a scripted scenario.
    """

    def __init__(self, snapshots: Iterable[WorldSnapshot]):
        self._snapshots: Iterator[WorldSnapshot] = iter(snapshots)

    def get_snapshot(self) -> Optional[WorldSnapshot]:
        return next(self._snapshots, None)
