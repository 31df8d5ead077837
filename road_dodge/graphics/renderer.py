"""
renderer.py
-----------
Draws sprites as colored rectangles and text labels with the default font.

World coordinates have their origin at the screen center with +y up;
conversion to screen pixels happens here and nowhere else.
"""

import math

import pygame

from road_dodge.core.debug.debug_logger import DebugLogger
from road_dodge.core.runtime.game_settings import Display


class Renderer:
    """Stateless-per-frame drawing of an EntityRegistry."""

    DEFAULT_SIZE = (50, 50)
    DEFAULT_COLOR = (200, 0, 200)

    def __init__(self, presets=None, text_colors=None):
        """
        Args:
            presets: {preset_name: {"size": [w, h], "color": [r, g, b]}}
            text_colors: {text_label: (r, g, b)}
        """
        self.presets = presets or {}
        self.text_colors = text_colors or {}
        self._fonts = {}
        self._missing_presets = set()

    # ===========================================================
    # Coordinates
    # ===========================================================

    @staticmethod
    def to_screen(x: float, y: float):
        return Display.WIDTH / 2 + x, Display.HEIGHT / 2 - y

    # ===========================================================
    # Drawing
    # ===========================================================

    def draw(self, surface, registry):
        surface.fill(Display.BACKGROUND_COLOR)

        for sprite in sorted(registry.sprites.values(), key=lambda s: s.layer):
            self._draw_sprite(surface, sprite)

        for text in sorted(registry.texts.values(), key=lambda t: t.layer):
            self._draw_text(surface, text)

    def _draw_sprite(self, surface, sprite):
        preset = self.presets.get(sprite.preset)
        if preset is None:
            if sprite.preset not in self._missing_presets:
                self._missing_presets.add(sprite.preset)
                DebugLogger.warn(f"No preset '{sprite.preset}', drawing placeholder", category="render")
            preset = {}

        width, height = preset.get("size", self.DEFAULT_SIZE)
        color = tuple(preset.get("color", self.DEFAULT_COLOR))

        size = (max(1, round(width * sprite.scale)), max(1, round(height * sprite.scale)))
        image = pygame.Surface(size, pygame.SRCALPHA)
        image.fill(color)
        if sprite.rotation:
            image = pygame.transform.rotate(image, math.degrees(sprite.rotation))

        rect = image.get_rect(center=self.to_screen(sprite.x, sprite.y))
        surface.blit(image, rect)

    def _draw_text(self, surface, text):
        font = self._font(int(text.font_size))
        color = tuple(self.text_colors.get(text.label, (255, 255, 255)))
        image = font.render(text.value, True, color)
        rect = image.get_rect(center=self.to_screen(text.x, text.y))
        surface.blit(image, rect)

    def _font(self, size: int):
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]
