"""
main_loop.py
------------
Core game loop orchestrating timing, input, collisions, updates and rendering.

Responsibilities:
- Initialize pygame and the window
- Poll keyboard and detect collisions each frame
- Call the frame logic once per rendered frame
- Dispatch the frame's side-effect events (audio)
"""

import pygame

from road_dodge.audio.sound_manager import GameAudio, SoundManager
from road_dodge.core.debug.debug_logger import DebugLogger
from road_dodge.core.runtime.frame import FrameInput
from road_dodge.core.runtime.game_settings import Display, Health, Physics
from road_dodge.core.services.event_manager import EventManager
from road_dodge.core.services.input_manager import InputManager
from road_dodge.graphics.renderer import Renderer
from road_dodge.systems.collision.collision_manager import CollisionManager


class MainLoop:
    """Runtime controller driving one RoadScene until the window closes."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, scene, fps: int = Display.FPS):
        DebugLogger.section("Initializing MainLoop")
        self.scene = scene
        self.fps = fps

        self._init_pygame()
        self._init_core_systems()

    def _init_pygame(self):
        """Initialize pygame subsystems and window."""
        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(Display.CAPTION)
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT} @ {self.fps} FPS")

    def _init_core_systems(self):
        """Initialize input, collision, audio and drawing."""
        presets = self.scene.config["presets"]
        hud = self.scene.hud_layout

        self.input_manager = InputManager()
        self.collision_manager = CollisionManager(presets)
        self.event_manager = EventManager()

        self.audio = GameAudio(SoundManager(), self.scene.config["audio"])
        self.audio.subscribe(self.event_manager)

        self.renderer = Renderer(
            presets,
            text_colors={
                Health.MESSAGE_LABEL: hud["health_message"]["color"],
                Health.GAME_OVER_LABEL: hud["game_over"]["color"],
            },
        )

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Execute the main loop until quit."""
        DebugLogger.section("Game Loop")
        self.audio.start_music()

        while self.running:
            dt = min(self.clock.tick(self.fps) / 1000.0, Physics.MAX_FRAME_TIME)

            self._handle_events()
            if not self.running:
                break

            self.step(dt)
            self._draw()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def step(self, dt: float):
        """Run one frame of input, collision detection and game logic."""
        self.input_manager.update(pygame.key.get_pressed())
        if self.input_manager.action_held("quit"):
            self.running = False
            DebugLogger.action("Quit key pressed")
            return None

        events = self.collision_manager.detect(self.scene.registry)
        output = self.scene.update(
            FrameInput(dt, self.input_manager.action_held, events)
        )
        self.event_manager.dispatch_all(output.events)
        return output

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.renderer.draw(self.screen, self.scene.registry)
        pygame.display.flip()
