"""
frame.py
--------
Records passed into and out of the per-frame update.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Sequence, Tuple

from road_dodge.core.services.event_manager import BaseEvent


class CollisionPhase(Enum):
    BEGIN = "begin"
    END = "end"


@dataclass(frozen=True)
class CollisionEvent:
    """Two entities started or stopped overlapping."""
    pair: Tuple[str, str]
    phase: CollisionPhase

    def either_contains(self, label: str) -> bool:
        return label in self.pair

    def is_begin(self) -> bool:
        return self.phase is CollisionPhase.BEGIN

    def is_end(self) -> bool:
        return self.phase is CollisionPhase.END


def _never_held(action: str) -> bool:
    return False


@dataclass(frozen=True)
class FrameInput:
    """
    Everything the frame update reads from the engine.

    Attributes:
        dt: Seconds since the previous frame (>= 0)
        is_held: Callable answering "is this action held"
        collision_events: Ordered collision events since the previous frame
    """
    dt: float
    is_held: Callable[[str], bool] = _never_held
    collision_events: Sequence[CollisionEvent] = ()

    def __post_init__(self):
        if self.dt < 0:
            raise ValueError(f"dt must be non-negative, got {self.dt}")


@dataclass
class FrameOutput:
    """Summary of what one frame update did."""
    direction: int = 0
    out_of_bounds: bool = False
    health_lost: int = 0
    became_lost: bool = False
    events: List[BaseEvent] = field(default_factory=list)
