"""
event_manager.py
----------------
Event-driven system for decoupled game component communication.
Lets the frame logic report side effects without knowing who handles them.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from road_dodge.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class PlayerHitEvent(BaseEvent):
    """Dispatched each time a collision costs the player one point of health."""
    health_remaining: int


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """Dispatched once, when the run transitions to the lost state."""
    pass


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}
        DebugLogger.init("EventManager initialized", category="event_manager")

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []

        if callback in self._subscribers[event_type]:
            return

        self._subscribers[event_type].append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Remove a callback from an event type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        Args:
            event: Event instance to dispatch
        """
        event_type = type(event)
        callbacks = self._subscribers.get(event_type, [])

        DebugLogger.trace(
            f"Dispatching {event_type.__name__} to {len(callbacks)} listener(s)",
            category="event_manager"
        )

        # Copy so listeners may unsubscribe while handling
        for callback in list(callbacks):
            callback(event)

    def dispatch_all(self, events) -> None:
        """Dispatch a sequence of events in order."""
        for event in events:
            self.dispatch(event)
