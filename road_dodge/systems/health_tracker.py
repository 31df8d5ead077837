"""
health_tracker.py
-----------------
Turns collisions and boundary violations into health loss and game over.

Two phases: PLAYING -> LOST. LOST is terminal; once reached the tracker
does nothing further.
"""

from road_dodge.core.debug.debug_logger import DebugLogger
from road_dodge.core.runtime.frame import FrameOutput
from road_dodge.core.runtime.game_settings import Health
from road_dodge.core.services.event_manager import GameOverEvent, PlayerHitEvent


class HealthTracker:
    """Health counter bookkeeping for one frame at a time."""

    def __init__(self, message_label: str = Health.MESSAGE_LABEL,
                 game_over_font_size: float = Health.GAME_OVER_FONT_SIZE,
                 game_over_position=(0.0, 0.0)):
        self.message_label = message_label
        self.game_over_font_size = game_over_font_size
        self.game_over_position = game_over_position

    def process(self, state, registry, collision_events, out_of_bounds: bool,
                output: FrameOutput = None) -> FrameOutput:
        """
        Apply a frame's collisions and boundary result to the game state.

        Args:
            state: GameState (mutated)
            registry: EntityRegistry holding the health text
            collision_events: Ordered CollisionEvents, consumed in full
            out_of_bounds: Whether the player left the road this frame
            output: FrameOutput to fill (a new one is created if None)

        Returns:
            FrameOutput: health_lost, became_lost and emitted events
        """
        if output is None:
            output = FrameOutput()
        if state.lost:
            return output

        health_message = registry.get_text(self.message_label)

        if out_of_bounds:
            output.out_of_bounds = True
            if state.health_amount > 0:
                DebugLogger.state(
                    f"'{state.player_name}' left the road, health {state.health_amount} -> 0",
                    category="game_state"
                )
            state.health_amount = 0

        for event in collision_events:
            # Obstacles touching each other and separations don't matter
            if not event.either_contains(state.player_name) or event.is_end():
                continue
            if state.health_amount > 0:
                state.health_amount -= 1
                health_message.value = Health.MESSAGE_FORMAT.format(state.health_amount)
                output.health_lost += 1
                output.events.append(PlayerHitEvent(state.health_amount))
                DebugLogger.action(
                    f"Hit {event.pair}, health now {state.health_amount}",
                    category="game_state"
                )

        if state.health_amount == 0 and not state.lost:
            self._enter_lost(state, registry, output)

        return output

    def _enter_lost(self, state, registry, output):
        state.lost = True
        x, y = self.game_over_position
        registry.add_text(
            Health.GAME_OVER_LABEL,
            Health.GAME_OVER_TEXT,
            x=x, y=y,
            font_size=self.game_over_font_size,
        )
        output.became_lost = True
        output.events.append(GameOverEvent())
        DebugLogger.state("Game over", category="game_state")
