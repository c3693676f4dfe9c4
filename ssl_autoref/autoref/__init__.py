from ssl_autoref.autoref.autoref import AutoRef
from ssl_autoref.autoref.emitter import EventEmitter
from ssl_autoref.autoref.profiles.profile_loader import AutoRefProfile, load_profile
from ssl_autoref.autoref.state import AutoRefState, FreeKickSession, TouchRecord

__all__ = [
    "AutoRef",
    "AutoRefProfile",
    "AutoRefState",
    "EventEmitter",
    "FreeKickSession",
    "TouchRecord",
    "load_profile",
]
