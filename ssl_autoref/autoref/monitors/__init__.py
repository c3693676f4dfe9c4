from ssl_autoref.autoref.monitors.base_monitor import BaseMonitor
from ssl_autoref.autoref.monitors.boundary_monitor import BoundaryMonitor
from ssl_autoref.autoref.monitors.distance_monitor import DistanceMonitor
from ssl_autoref.autoref.monitors.double_touch_monitor import DoubleTouchMonitor
from ssl_autoref.autoref.monitors.free_kick_timer import FreeKickOutcome, FreeKickTimer
from ssl_autoref.autoref.monitors.goal_monitor import GoalMonitor
from ssl_autoref.autoref.monitors.touch_tracker import TouchTracker

__all__ = [
    "BaseMonitor",
    "TouchTracker",
    "BoundaryMonitor",
    "GoalMonitor",
    "DoubleTouchMonitor",
    "DistanceMonitor",
    "FreeKickTimer",
    "FreeKickOutcome",
]
