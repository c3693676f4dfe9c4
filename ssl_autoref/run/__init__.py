from ssl_autoref.run.autoref_runner import AutoRefRunner
from ssl_autoref.run.snapshot_provider import (
    AbstractSnapshotProvider,
    SequenceSnapshotProvider,
)

__all__ = ["AutoRefRunner", "AbstractSnapshotProvider", "SequenceSnapshotProvider"]
