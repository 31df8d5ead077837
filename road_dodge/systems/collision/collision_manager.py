"""
collision_manager.py
--------------------
Rect-overlap collision detection that reports begin/end events.

Responsibilities
----------------
- Build an axis-aligned hitbox for every collidable sprite.
- Find all overlapping pairs each frame.
- Diff against the previous frame to emit BEGIN for new overlaps and
  END for overlaps that stopped.
"""

import pygame

from road_dodge.core.debug.debug_logger import DebugLogger
from road_dodge.core.runtime.frame import CollisionEvent, CollisionPhase


class CollisionManager:
    """Detects overlaps; the frame logic decides what they mean."""

    DEFAULT_SIZE = (50, 50)

    def __init__(self, presets=None, hitbox_scale: float = 0.85):
        """
        Args:
            presets: {preset_name: {"size": [w, h], ...}} in world units
            hitbox_scale: Shrink factor applied to sprite size
        """
        self.presets = presets or {}
        self.hitbox_scale = hitbox_scale
        self._active_pairs = set()
        DebugLogger.init_entry("CollisionManager")

    # ===========================================================
    # Hitboxes
    # ===========================================================

    def hitbox(self, entity) -> pygame.Rect:
        """Axis-aligned rect centered on the entity."""
        width, height = self.presets.get(entity.preset, {}).get("size", self.DEFAULT_SIZE)
        factor = entity.scale * self.hitbox_scale
        rect = pygame.Rect(0, 0, max(1, round(width * factor)), max(1, round(height * factor)))
        rect.center = (round(entity.x), round(entity.y))
        return rect

    # ===========================================================
    # Detection
    # ===========================================================

    def overlapping_pairs(self, entities) -> set:
        """All label pairs whose hitboxes overlap, each ordered (a < b)."""
        boxes = [(entity.label, self.hitbox(entity)) for entity in entities]
        pairs = set()
        for i, (label_a, rect_a) in enumerate(boxes):
            for label_b, rect_b in boxes[i + 1:]:
                if rect_a.colliderect(rect_b):
                    pairs.add(tuple(sorted((label_a, label_b))))
        return pairs

    def detect(self, registry) -> list:
        """
        Compute this frame's collision events.

        Returns:
            list[CollisionEvent]: BEGIN events then END events, each sorted
        """
        current = self.overlapping_pairs(registry.collidable())

        began = sorted(current - self._active_pairs)
        ended = sorted(self._active_pairs - current)
        self._active_pairs = current

        events = [CollisionEvent(pair, CollisionPhase.BEGIN) for pair in began]
        events.extend(CollisionEvent(pair, CollisionPhase.END) for pair in ended)

        for event in events:
            DebugLogger.trace(f"{event.phase.name} {event.pair}")
        return events
