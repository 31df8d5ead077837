"""
road_scene.py
-------------
One-time construction of the road scene.

Responsibilities
----------------
- Load game data and HUD layout.
- Create the player, road lines, obstacles and health label.
- Build the GameState and the frame logic wired to the HUD layout.
"""

import random

from road_dodge.core.debug.debug_logger import DebugLogger
from road_dodge.core.runtime.game_settings import Health, Layers, Player, Road
from road_dodge.core.runtime.game_state import GameState
from road_dodge.core.services.config_manager import load_config
from road_dodge.entities.entity_registry import EntityRegistry
from road_dodge.entities.entity_types import Role
from road_dodge.systems.game_logic import GameLogic
from road_dodge.systems.health_tracker import HealthTracker
from road_dodge.systems.kinematics import KinematicsUpdater, respawn_obstacle
from road_dodge.ui.hud_loader import DEFAULT_LAYOUT


DEFAULT_GAME_CONFIG = {
    "player": {
        "name": "player1",
        "preset": "racing_car_blue",
        "initial_health": Health.INITIAL,
    },
    "road": {
        "line_preset": "racing_barrier_white",
        "line_scale": 0.1,
    },
    "obstacles": [
        "racing_barrel_blue",
        "racing_barrel_red",
        "racing_cone_straight",
    ],
    "audio": {
        "music": "whimsical_popsicle",
        "music_volume": 0.2,
        "impact_sfx": "impact3",
        "impact_volume": 0.7,
        "game_over_sfx": "jingle3",
        "game_over_volume": 0.75,
    },
    "presets": {},
}


def load_game_config(path: str = "game.json", player_name: str = None) -> dict:
    """Load game data over the defaults; optionally override the player name."""
    config = load_config(path, default_dict=DEFAULT_GAME_CONFIG)
    if player_name:
        config["player"]["name"] = player_name
    return config


# ===========================================================
# Entity Setup
# ===========================================================

def add_player(registry, player_name: str, preset: str):
    """Place the player car at the left of the road."""
    return registry.add_sprite(
        player_name, Role.PLAYER, preset,
        x=Player.START_X, layer=Layers.PLAYER, collision=True,
    )


def add_road_lines(registry, preset: str, scale: float, count: int = Road.LINE_COUNT):
    return [
        registry.add_sprite(
            f"roadline{i}", Role.ROAD_LINE, preset,
            x=Road.LINE_START_X + Road.LINE_SPACING * i,
            scale=scale, layer=Layers.ROAD,
        )
        for i in range(count)
    ]


def add_obstacles(registry, presets, rng=random):
    obstacles = []
    for i, preset in enumerate(presets):
        obstacle = registry.add_sprite(
            f"obstacle{i}", Role.OBSTACLE, preset,
            layer=Layers.OBSTACLES, collision=True,
        )
        respawn_obstacle(obstacle, rng)
        obstacles.append(obstacle)
    return obstacles


def add_health_message(registry, health: int, layout: dict):
    x, y = layout["position"]
    return registry.add_text(
        Health.MESSAGE_LABEL,
        Health.MESSAGE_FORMAT.format(health),
        x=x, y=y, font_size=layout["font_size"],
    )


# ===========================================================
# Scene
# ===========================================================

class RoadScene:
    """Everything a running game needs, built once at startup."""

    def __init__(self, config: dict, hud_layout: dict = None, rng=None):
        self.config = config
        self.hud_layout = hud_layout or DEFAULT_LAYOUT
        self.rng = rng if rng is not None else random

        player_cfg = config["player"]
        self.state = GameState(player_cfg["name"], player_cfg["initial_health"])
        self.registry = EntityRegistry()

        add_player(self.registry, self.state.player_name, player_cfg["preset"])
        add_road_lines(self.registry, config["road"]["line_preset"], config["road"]["line_scale"])
        add_obstacles(self.registry, config["obstacles"], self.rng)
        add_health_message(self.registry, self.state.health_amount, self.hud_layout["health_message"])

        game_over_layout = self.hud_layout["game_over"]
        self.logic = GameLogic(
            KinematicsUpdater(self.rng),
            HealthTracker(
                game_over_font_size=game_over_layout["font_size"],
                game_over_position=tuple(game_over_layout["position"]),
            ),
        )

        DebugLogger.init_entry("RoadScene")
        DebugLogger.init_sub(f"Player '{self.state.player_name}' with {self.state.health_amount} health")
        DebugLogger.init_sub(
            f"{len(self.registry.by_role(Role.ROAD_LINE))} road lines, "
            f"{len(self.registry.by_role(Role.OBSTACLE))} obstacles"
        )

    def update(self, frame_input):
        return self.logic.update(self.state, self.registry, frame_input)
