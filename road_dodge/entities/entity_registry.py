"""
entity_registry.py
------------------
Label-keyed store for every sprite and text label in a running game.

Responsibilities
----------------
- Create sprites and text labels under unique labels.
- Index sprites by Role so systems never re-derive roles from names.
- Fail loudly when a required entity is missing.
"""

from road_dodge.core.debug.debug_logger import DebugLogger
from road_dodge.entities.entity import Entity, TextEntity
from road_dodge.entities.entity_types import Role


# ===========================================================
# Errors
# ===========================================================

class DuplicateEntityError(ValueError):
    """Raised when a label is already taken by another sprite or text."""


class EntityLookupError(KeyError):
    """Raised when a required entity is not registered (a setup bug)."""


# ===========================================================
# Registry
# ===========================================================

class EntityRegistry:
    """Owns sprites and texts for one game."""

    def __init__(self):
        self.sprites = {}   # {label: Entity}
        self.texts = {}     # {label: TextEntity}
        self._by_role = {role: [] for role in Role}

    # ===========================================================
    # Creation
    # ===========================================================

    def add_sprite(self, label: str, role: Role, preset: str = "", **kwargs) -> Entity:
        """
        Create and register a sprite.

        Args:
            label: Unique identifier
            role: Update rule category
            preset: Visual preset name
            **kwargs: Initial Entity fields (x, y, scale, layer, collision...)

        Returns:
            Entity: The new sprite
        """
        self._check_free(label)
        if role is Role.PLAYER and self._by_role[Role.PLAYER]:
            existing = self._by_role[Role.PLAYER][0].label
            raise DuplicateEntityError(
                f"Player already registered as '{existing}', cannot add '{label}'"
            )

        entity = Entity(label, role, preset, **kwargs)
        self.sprites[label] = entity
        self._by_role[role].append(entity)
        DebugLogger.trace(f"Added sprite [{role.value}:{label}]", category="entity")
        return entity

    def add_text(self, label: str, value: str, **kwargs) -> TextEntity:
        """Create and register a text label."""
        self._check_free(label)
        text = TextEntity(label, value, **kwargs)
        self.texts[label] = text
        DebugLogger.trace(f"Added text [{label}] '{value}'", category="entity")
        return text

    def _check_free(self, label: str):
        if label in self.sprites or label in self.texts:
            raise DuplicateEntityError(f"Entity label '{label}' is already in use")

    # ===========================================================
    # Lookup
    # ===========================================================

    def get_sprite(self, label: str) -> Entity:
        """Return a required sprite or raise EntityLookupError."""
        try:
            return self.sprites[label]
        except KeyError:
            DebugLogger.fail(f"Missing required sprite '{label}'", category="entity")
            raise EntityLookupError(label) from None

    def get_text(self, label: str) -> TextEntity:
        """Return a required text label or raise EntityLookupError."""
        try:
            return self.texts[label]
        except KeyError:
            DebugLogger.fail(f"Missing required text '{label}'", category="entity")
            raise EntityLookupError(label) from None

    def by_role(self, role: Role) -> list:
        """Copy of the sprites with the given role, in creation order."""
        return list(self._by_role.get(role, ()))

    def collidable(self) -> list:
        """Sprites that take part in collision detection."""
        return [sprite for sprite in self.sprites.values() if sprite.collision]
