"""
test_event_manager.py
---------------------
Unit tests for the pub-sub event dispatcher.
"""

from unittest.mock import MagicMock

from road_dodge.core.services.event_manager import EventManager, GameOverEvent, PlayerHitEvent


def test_dispatch_reaches_only_matching_subscribers():
    manager = EventManager()
    on_hit, on_over = MagicMock(), MagicMock()
    manager.subscribe(PlayerHitEvent, on_hit)
    manager.subscribe(GameOverEvent, on_over)

    manager.dispatch(PlayerHitEvent(3))

    on_hit.assert_called_once_with(PlayerHitEvent(3))
    on_over.assert_not_called()


def test_duplicate_subscription_is_ignored():
    manager = EventManager()
    callback = MagicMock()
    manager.subscribe(GameOverEvent, callback)
    manager.subscribe(GameOverEvent, callback)

    manager.dispatch(GameOverEvent())

    callback.assert_called_once()


def test_unsubscribe_stops_delivery():
    manager = EventManager()
    callback = MagicMock()
    manager.subscribe(GameOverEvent, callback)
    manager.unsubscribe(GameOverEvent, callback)

    manager.dispatch(GameOverEvent())

    callback.assert_not_called()


def test_dispatch_all_preserves_order():
    manager = EventManager()
    seen = []
    manager.subscribe(PlayerHitEvent, lambda e: seen.append(("hit", e.health_remaining)))
    manager.subscribe(GameOverEvent, lambda e: seen.append(("over", None)))

    manager.dispatch_all([PlayerHitEvent(1), PlayerHitEvent(0), GameOverEvent()])

    assert seen == [("hit", 1), ("hit", 0), ("over", None)]
