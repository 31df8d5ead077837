"""
game_settings.py
----------------
Centralized constants for all game systems.

World coordinates are centered on the screen with +y pointing up.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Road Dodge"
    BACKGROUND_COLOR = (60, 60, 68)


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Frame timing limits."""
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Movement
# ===========================================================

class Player:
    """Player movement defaults."""
    SPEED: float = 250.0
    TILT: float = 0.15            # radians per unit of direction
    START_X: float = -500.0


class Road:
    """Scrolling road lines and obstacles."""
    SPEED: float = 400.0

    LINE_COUNT: int = 10
    LINE_SPACING: float = 150.0
    LINE_START_X: float = -600.0
    LINE_WRAP_X: float = -675.0
    LINE_WRAP_DISTANCE: float = 1500.0

    OBSTACLE_RECYCLE_X: float = -800.0
    OBSTACLE_SPAWN_X = (800.0, 1600.0)
    OBSTACLE_SPAWN_Y = (-300.0, 300.0)


# ===========================================================
# Bounds
# ===========================================================

class Bounds:
    """Vertical limits; leaving them ends the run."""
    PLAYER_MIN_Y: float = -360.0
    PLAYER_MAX_Y: float = 360.0


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    ROAD: float = 0.0
    OBSTACLES: float = 5.0
    PLAYER: float = 10.0
    UI: float = 100.0


# ===========================================================
# Health
# ===========================================================

class Health:
    """Health counter and its display text."""
    INITIAL: int = 5
    MESSAGE_LABEL: str = "health_message"
    MESSAGE_FORMAT: str = "Health: {}"
    GAME_OVER_LABEL: str = "game over"
    GAME_OVER_TEXT: str = "Game Over"
    GAME_OVER_FONT_SIZE: float = 128.0
