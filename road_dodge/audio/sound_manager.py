import os

import pygame

from road_dodge.core.debug.debug_logger import DebugLogger
from road_dodge.core.services.event_manager import GameOverEvent, PlayerHitEvent


class SoundManager:
    ASSET_ROOT = os.path.join("assets", "audio")
    ASSET_PATHS = {
        "bgm": {
            "whimsical_popsicle": "music/WhimsicalPopsicle.ogg",
        },
        "sfx": {
            "impact3": "sfx/Impact3.ogg",
            "jingle3": "sfx/Jingle3.ogg",
        }
    }

    def __init__(self, asset_root=None):
        self.asset_root = asset_root or self.ASSET_ROOT
        self.sfx = {}
        self.bgm = {}
        self.current_bgm_id = None

        self.enabled = self._init_mixer()
        if self.enabled:
            self.load_assets()

    def _init_mixer(self):
        try:
            pygame.mixer.init()
        except pygame.error as e:
            DebugLogger.warn(f"Audio disabled: {e}", category="audio")
            return False
        return True

    def load_assets(self):
        for name, path in self.ASSET_PATHS["bgm"].items():  # music is streamed, keep the route
            self.bgm[name] = os.path.join(self.asset_root, path)
        for name, path in self.ASSET_PATHS["sfx"].items():
            self.load_sfx(name, os.path.join(self.asset_root, path))

    def load_sfx(self, name, route):
        try:
            self.sfx[name] = pygame.mixer.Sound(route)
        except (FileNotFoundError, pygame.error) as e:
            DebugLogger.warn(f"Missing sound '{name}' ({route}): {e}", category="audio")

    def play_sfx(self, name, volume=1.0):  # one-shot effect
        if not self.enabled:
            return
        sound = self.sfx.get(name)
        if sound is None:
            DebugLogger.warn(f"Unknown sound effect '{name}'", category="audio")
            return
        sound.set_volume(volume)
        sound.play()

    def play_music(self, name, volume=1.0, loop=-1):  # looping background music
        if not self.enabled or self.current_bgm_id == name:
            return
        route = self.bgm.get(name)
        if route is None:
            DebugLogger.warn(f"Unknown music '{name}'", category="audio")
            return
        try:
            pygame.mixer.music.load(route)
        except (FileNotFoundError, pygame.error) as e:
            DebugLogger.warn(f"Cannot load music '{name}' ({route}): {e}", category="audio")
            return
        pygame.mixer.music.set_volume(volume)
        pygame.mixer.music.play(loops=loop)
        self.current_bgm_id = name
        DebugLogger.action(f"Playing music '{name}'", category="audio")

    def stop_music(self):
        if not self.enabled:
            return
        pygame.mixer.music.stop()
        self.current_bgm_id = None


class GameAudio:
    """Plays the configured sounds in response to game events."""

    def __init__(self, sound_manager, audio_config):
        self.sound_manager = sound_manager
        self.config = audio_config

    def subscribe(self, event_manager):
        event_manager.subscribe(PlayerHitEvent, self.on_player_hit)
        event_manager.subscribe(GameOverEvent, self.on_game_over)

    def start_music(self):
        self.sound_manager.play_music(self.config["music"], self.config["music_volume"])

    def on_player_hit(self, event):
        self.sound_manager.play_sfx(self.config["impact_sfx"], self.config["impact_volume"])

    def on_game_over(self, event):
        self.sound_manager.stop_music()
        self.sound_manager.play_sfx(self.config["game_over_sfx"], self.config["game_over_volume"])
