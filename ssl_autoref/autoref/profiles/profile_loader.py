"""Profile loader: parses YAML AutoRef profiles into typed dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from ssl_autoref.config import settings
from ssl_autoref.entities.game.field_geometry import FieldGeometry
from ssl_autoref.errors import ProfileError

_PROFILES_DIR = Path(__file__).parent


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass
class ThresholdsConfig:
    field_margin: float = settings.FIELD_MARGIN
    free_kick_min_distance: float = settings.FREE_KICK_MIN_DISTANCE
    double_touch_timeout: float = settings.DOUBLE_TOUCH_TIMEOUT
    free_kick_timeout_div_a: float = settings.FREE_KICK_TIMEOUT_DIV_A
    free_kick_timeout_div_b: float = settings.FREE_KICK_TIMEOUT_DIV_B
    robot_contact_margin: float = settings.ROBOT_CONTACT_MARGIN
    ball_moved_threshold: float = settings.BALL_MOVED_THRESHOLD


@dataclass
class NetworkConfig:
    game_controller_host: str = settings.LOCAL_HOST
    game_controller_port: int = settings.GAME_CONTROLLER_PORT
    sim_control_host: str = settings.LOCAL_HOST
    sim_control_port: int = settings.SIM_CONTROL_PORT


# ---------------------------------------------------------------------------
# Top-level profile
# ---------------------------------------------------------------------------


@dataclass
class AutoRefProfile:
    profile_name: str
    identifier: str = settings.AUTOREF_IDENTIFIER
    # Kept as the raw string: unknown divisions are legal and use the B timings.
    division: str = settings.DEFAULT_DIVISION
    geometry: FieldGeometry = field(default_factory=FieldGeometry.from_standard_div_b)
    thresholds: ThresholdsConfig = field(default_factory=ThresholdsConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


def load_profile(name_or_path: str) -> AutoRefProfile:
    """Load an AutoRefProfile from a built-in name or an absolute/relative path.

    Built-in names: "div_a", "div_b".
    """
    p = Path(name_or_path)
    if not p.is_absolute():
        # Try built-in profiles directory
        candidate = _PROFILES_DIR / f"{name_or_path}.yaml"
        if candidate.exists():
            p = candidate
        elif not p.exists():
            raise FileNotFoundError(f"Profile '{name_or_path}' not found as a built-in name or file path.")

    with open(p, "r") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict):
        raise ProfileError(f"Profile '{name_or_path}' must contain a mapping, got {type(data).__name__}")

    return _parse_profile(data)


def _parse_profile(data: dict) -> AutoRefProfile:
    geo_d = _section(data, "geometry")
    default_geo = FieldGeometry.from_standard_div_b()
    geometry = FieldGeometry(
        half_width=_non_negative(geo_d, "half_width", default_geo.half_width),
        half_height=_non_negative(geo_d, "half_height", default_geo.half_height),
        goal_width=_non_negative(geo_d, "goal_width", default_geo.goal_width),
        goal_depth=_non_negative(geo_d, "goal_depth", default_geo.goal_depth),
    )

    th = _section(data, "thresholds")
    thresholds = ThresholdsConfig(
        field_margin=_non_negative(th, "field_margin", settings.FIELD_MARGIN),
        free_kick_min_distance=_non_negative(th, "free_kick_min_distance", settings.FREE_KICK_MIN_DISTANCE),
        double_touch_timeout=_non_negative(th, "double_touch_timeout", settings.DOUBLE_TOUCH_TIMEOUT),
        free_kick_timeout_div_a=_non_negative(th, "free_kick_timeout_div_a", settings.FREE_KICK_TIMEOUT_DIV_A),
        free_kick_timeout_div_b=_non_negative(th, "free_kick_timeout_div_b", settings.FREE_KICK_TIMEOUT_DIV_B),
        robot_contact_margin=_non_negative(th, "robot_contact_margin", settings.ROBOT_CONTACT_MARGIN),
        ball_moved_threshold=_non_negative(th, "ball_moved_threshold", settings.BALL_MOVED_THRESHOLD),
    )

    net = _section(data, "network")
    network = NetworkConfig(
        game_controller_host=net.get("game_controller_host", settings.LOCAL_HOST),
        game_controller_port=int(net.get("game_controller_port", settings.GAME_CONTROLLER_PORT)),
        sim_control_host=net.get("sim_control_host", settings.LOCAL_HOST),
        sim_control_port=int(net.get("sim_control_port", settings.SIM_CONTROL_PORT)),
    )

    return AutoRefProfile(
        profile_name=data.get("profile_name", "unknown"),
        identifier=str(data.get("identifier", settings.AUTOREF_IDENTIFIER)),
        division=str(data.get("division", settings.DEFAULT_DIVISION)),
        geometry=geometry,
        thresholds=thresholds,
        network=network,
    )


def _section(data: dict, key: str) -> dict:
    # An empty section ("thresholds:" with nothing under it) loads as None.
    section = data.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ProfileError(f"'{key}' must be a mapping, got {type(section).__name__}")
    return section


def _non_negative(section: dict, key: str, default: float) -> float:
    value = section.get(key, default)
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise ProfileError(f"'{key}' must be a number, got {value!r}") from e
    if value < 0:
        raise ProfileError(f"'{key}' must not be negative, got {value}")
    return value
