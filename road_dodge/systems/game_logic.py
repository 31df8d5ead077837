"""
game_logic.py
-------------
The per-frame update: input -> movement -> health.

The driver calls GameLogic.update() once per rendered frame. Nothing is
retained between calls except what the GameState holds.
"""

from road_dodge.core.runtime.frame import FrameOutput
from road_dodge.core.services.input_manager import resolve_direction
from road_dodge.systems.health_tracker import HealthTracker
from road_dodge.systems.kinematics import KinematicsUpdater


class GameLogic:
    """Runs the input, kinematics and health steps in order."""

    def __init__(self, kinematics: KinematicsUpdater = None,
                 health_tracker: HealthTracker = None):
        self.kinematics = kinematics or KinematicsUpdater()
        self.health_tracker = health_tracker or HealthTracker()

    def update(self, state, registry, frame_input) -> FrameOutput:
        """
        Advance the game by one frame.

        Args:
            state: GameState (mutated)
            registry: EntityRegistry (sprites and texts mutated in place)
            frame_input: FrameInput for this frame

        Returns:
            FrameOutput: What happened, including events for the driver
                         to dispatch (sounds, music)
        """
        output = FrameOutput()
        if state.lost:
            return output

        output.direction = resolve_direction(frame_input.is_held)
        out_of_bounds = self.kinematics.update(
            registry, state.player_name, output.direction, frame_input.dt
        )

        return self.health_tracker.process(
            state, registry, frame_input.collision_events, out_of_bounds, output
        )
