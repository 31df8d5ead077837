"""
input_manager.py
----------------
Keyboard action queries and direction resolution.

Provides:
- Action-based key bindings (several keys per action)
- Held-state queries against the last polled keyboard snapshot
- resolve_direction(): collapses up/down into a single signal
"""

import pygame

from road_dodge.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_up": [pygame.K_UP, pygame.K_w],
    "move_down": [pygame.K_DOWN, pygame.K_s],
    "quit": [pygame.K_ESCAPE],
}


# ===========================================================
# Direction Resolution
# ===========================================================

def resolve_direction(is_held) -> int:
    """
    Collapse the up/down actions into -1, 0 or +1.

    Up and down are summed, so holding both cancels out to 0.

    Args:
        is_held: Callable taking an action name and returning bool.
    """
    direction = 0
    if is_held("move_up"):
        direction += 1
    if is_held("move_down"):
        direction -= 1
    return direction


class InputManager:
    """
    Keyboard input system with action queries.

    Usage:
        input_manager.update(pygame.key.get_pressed())
        if input_manager.action_held("quit"):
            ...
        direction = resolve_direction(input_manager.action_held)
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: {action: [key, ...]} (uses DEFAULT_KEY_BINDINGS if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._action_to_keys = {
            action: tuple(keys) for action, keys in self.key_bindings.items()
        }
        self._held = {action: False for action in self._action_to_keys}
        self._warned = set()

        DebugLogger.init_entry("InputManager")
        DebugLogger.init_sub(f"Bound actions: {', '.join(self._action_to_keys)}")

    # ===========================================================
    # Polling
    # ===========================================================

    def update(self, keys):
        """
        Refresh held state from a keyboard snapshot.

        Args:
            keys: Sequence indexable by pygame key constant
                  (e.g. pygame.key.get_pressed()).
        """
        for action, bound in self._action_to_keys.items():
            self._held[action] = any(keys[key] for key in bound)

    # ===========================================================
    # Queries
    # ===========================================================

    def action_held(self, action: str) -> bool:
        """Return True if any key bound to the action is currently held."""
        if action not in self._held:
            if action not in self._warned:
                self._warned.add(action)
                DebugLogger.warn(f"Unknown action: {action}", category="input")
            return False
        return self._held[action]

    def direction(self) -> int:
        """Vertical direction from the current snapshot."""
        return resolve_direction(self.action_held)
