"""Entity roles."""

from enum import Enum


class Role(Enum):
    """
    Functional category of a sprite.
    Assigned when the sprite is created and used to pick its update rule.
    """
    PLAYER = "player"
    ROAD_LINE = "road_line"
    OBSTACLE = "obstacle"
