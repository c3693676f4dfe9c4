import logging
from typing import Optional

from ssl_autoref.autoref.autoref import AutoRef
from ssl_autoref.run.snapshot_provider import AbstractSnapshotProvider

logger = logging.getLogger(__name__)


class AutoRefRunner:
    """
    Drives an ``AutoRef`` with snapshots from a provider, one step per snapshot.

    Args:
        provider (AbstractSnapshotProvider): Where snapshots come from.
        autoref (AutoRef): The referee to drive.
    """

    def __init__(self, provider: AbstractSnapshotProvider, autoref: AutoRef):
        self.provider = provider
        self.autoref = autoref
        self.n_ticks = 0
        self.n_events = 0

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Run until the provider is exhausted or ``max_ticks`` ticks have been processed.

        Returns:
            int: Number of ticks processed by this call.
        """
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            snapshot = self.provider.get_snapshot()
            if snapshot is None:
                break
            events = self.autoref.step(snapshot)
            ticks += 1
            self.n_events += len(events)
        self.n_ticks += ticks
        logger.info("Processed %d ticks, %d events emitted in total", self.n_ticks, self.n_events)
        return ticks
