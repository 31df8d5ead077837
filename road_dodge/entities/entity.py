"""
entity.py
---------
Plain records for the sprites and text labels in the world.

Entities hold only position, orientation and presentation data; all
behavior lives in the systems that update them each frame.
"""

from road_dodge.entities.entity_types import Role


class Entity:
    """A sprite addressable by a unique label."""

    __slots__ = ("label", "role", "preset", "x", "y", "rotation",
                 "scale", "layer", "collision")

    def __init__(self, label: str, role: Role, preset: str = "",
                 x: float = 0.0, y: float = 0.0, rotation: float = 0.0,
                 scale: float = 1.0, layer: float = 0.0, collision: bool = False):
        self.label = label
        self.role = role
        self.preset = preset
        self.x = x
        self.y = y
        self.rotation = rotation
        self.scale = scale
        self.layer = layer
        self.collision = collision

    def __repr__(self):
        return (f"Entity({self.label!r}, {self.role.name}, "
                f"x={self.x:.1f}, y={self.y:.1f})")


class TextEntity:
    """A text label addressable by a unique label."""

    __slots__ = ("label", "value", "x", "y", "font_size", "layer")

    def __init__(self, label: str, value: str, x: float = 0.0, y: float = 0.0,
                 font_size: float = 30.0, layer: float = 100.0):
        self.label = label
        self.value = value
        self.x = x
        self.y = y
        self.font_size = font_size
        self.layer = layer

    def __repr__(self):
        return f"TextEntity({self.label!r}, {self.value!r})"
