from unittest.mock import MagicMock

from ssl_autoref.autoref.autoref import AutoRef
from ssl_autoref.run import AutoRefRunner, SequenceSnapshotProvider
from ssl_autoref.tests.common.snapshot_builders import make_ball, make_snapshot


def _autoref(events_per_tick):
    autoref = MagicMock(spec=AutoRef)
    autoref.step.side_effect = lambda snapshot: ["event"] * events_per_tick
    return autoref


def test_runs_until_provider_is_exhausted():
    snapshots = [make_snapshot(make_ball(0, 0), ts=t * 0.1) for t in range(4)]
    autoref = _autoref(events_per_tick=1)
    runner = AutoRefRunner(SequenceSnapshotProvider(snapshots), autoref)
    assert runner.run() == 4
    assert [c.args[0] for c in autoref.step.call_args_list] == snapshots
    assert runner.n_events == 4


def test_max_ticks_and_resume():
    snapshots = [make_snapshot(make_ball(0, 0), ts=t * 0.1) for t in range(5)]
    runner = AutoRefRunner(SequenceSnapshotProvider(snapshots), _autoref(events_per_tick=0))
    assert runner.run(max_ticks=2) == 2
    assert runner.run() == 3
    assert runner.n_ticks == 5
    assert runner.n_events == 0
