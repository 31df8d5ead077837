"""
game_state.py
-------------
Per-run record mutated only by the frame update.
"""

from enum import Enum

from road_dodge.core.runtime.game_settings import Health


class GamePhase(Enum):
    PLAYING = "playing"
    LOST = "lost"


class GameState:
    """Health counter and terminal flag for a single run."""

    def __init__(self, player_name: str, initial_health: int = Health.INITIAL):
        if initial_health < 0:
            raise ValueError(f"initial_health must be >= 0, got {initial_health}")
        self._player_name = player_name
        self.initial_health = initial_health
        self.health_amount = initial_health
        self.lost = False

    @property
    def player_name(self) -> str:
        return self._player_name

    @property
    def phase(self) -> GamePhase:
        return GamePhase.LOST if self.lost else GamePhase.PLAYING

    def __repr__(self):
        return (f"GameState(player={self._player_name!r}, "
                f"health={self.health_amount}/{self.initial_health}, "
                f"phase={self.phase.value})")
