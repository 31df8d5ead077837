"""
kinematics.py
-------------
Constant-velocity movement for the player and the scrolling road.

Responsibilities
----------------
- Move and tilt the player from the resolved input direction.
- Report when the player leaves the vertical bounds (no clamping).
- Scroll road lines left and wrap them back to the right.
- Scroll obstacles left and respawn them at a random spot on the right.
"""

import random

from road_dodge.core.runtime.game_settings import Bounds, Player, Road
from road_dodge.entities.entity_types import Role


def move_player(player, direction: int, dt: float) -> bool:
    """
    Translate and tilt the player.

    Args:
        player: Entity with x/y/rotation
        direction: -1, 0 or +1
        dt: Seconds since the previous frame

    Returns:
        bool: True if the player is now outside the vertical bounds
    """
    player.y += direction * Player.SPEED * dt
    player.rotation = direction * Player.TILT
    return player.y < Bounds.PLAYER_MIN_Y or player.y > Bounds.PLAYER_MAX_Y


def scroll_road_lines(road_lines, dt: float):
    """Move road lines left, wrapping any that pass the left edge."""
    for line in road_lines:
        line.x -= Road.SPEED * dt
        if line.x < Road.LINE_WRAP_X:
            line.x += Road.LINE_WRAP_DISTANCE


def scroll_obstacles(obstacles, dt: float, rng=random):
    """
    Move obstacles left; recycle those that leave the screen.

    Args:
        obstacles: Iterable of Entity
        dt: Seconds since the previous frame
        rng: Source with uniform(a, b), e.g. random.Random(seed)
    """
    for obstacle in obstacles:
        obstacle.x -= Road.SPEED * dt
        if obstacle.x < Road.OBSTACLE_RECYCLE_X:
            respawn_obstacle(obstacle, rng)


def respawn_obstacle(obstacle, rng=random):
    """Place an obstacle at a random lane and distance right of the screen."""
    obstacle.x = _uniform_half_open(rng, *Road.OBSTACLE_SPAWN_X)
    obstacle.y = _uniform_half_open(rng, *Road.OBSTACLE_SPAWN_Y)


def _uniform_half_open(rng, low: float, high: float) -> float:
    # random.uniform may return `high` through rounding; keep the range [low, high)
    value = rng.uniform(low, high)
    return value if value < high else low


class KinematicsUpdater:
    """Applies one frame of movement to everything in a registry."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random

    def update(self, registry, player_name: str, direction: int, dt: float) -> bool:
        """
        Move the player and the road.

        Returns:
            bool: True if the player left the vertical bounds this frame
        """
        player = registry.get_sprite(player_name)
        out_of_bounds = move_player(player, direction, dt)

        scroll_road_lines(registry.by_role(Role.ROAD_LINE), dt)
        scroll_obstacles(registry.by_role(Role.OBSTACLE), dt, self.rng)

        return out_of_bounds
