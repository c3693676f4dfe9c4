from ssl_autoref.autoref import AutoRef, AutoRefProfile, load_profile
from ssl_autoref.entities.game.world_snapshot import WorldSnapshot

__all__ = ["AutoRef", "AutoRefProfile", "WorldSnapshot", "load_profile"]
